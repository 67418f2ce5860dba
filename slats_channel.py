"""
Title: SFCC Slats Channel State Machine with Alpha Lock (SlatsChannel)
Author: Alex Cooke
Date Created: 2026-10-13
Last Modified: 2026-10-16
Version: 1.4

Purpose:
Implements the slats channel of a Slats/Flaps Control Computer. The channel
maps the flaps handle detent onto a slats configuration, derives the demanded
slat angle, and signals the slat actuators whenever the measured surface angle
differs from the demand. Before the configuration is generated each tick, the
alpha-lock sub-state-machine is evaluated; while alpha lock is engaged,
selecting handle 0 from an extended detent holds the slats at CONF 1.

Targeted Requirements:
- SFCC-FR004: Slats configuration follows the handle detent (detent N -> index N).
- SFCC-FR005: Alpha-lock speed trigger with 148 kt engage / 154 kt disengage hysteresis.
- SFCC-FR006: Alpha-lock alpha trigger with 8.6 deg engage / 7.6 deg disengage hysteresis.
- SFCC-FR007: Alpha-lock engagement inhibited with handle at 0, or when on
  ground below 60 kt.
- SFCC-FR003: Drive signal TRUE iff |demanded - feedback| >= 0.01 deg.
- SFCC-SR002: ADIRU airspeed/alpha replaced by local values when not NORMAL_OPERATION.

Scope and Limitations:
- Once engaged, the composite alpha lock tracks (speed OR alpha) with no
  handle or ground gating on disengagement.
- Airspeed does not gate slats configuration except through alpha lock.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- flaps_conf.py
- sfcc_channel.py
- sfcc_configuration.py
- signed_status.py

Related Documents:
- SFCC Requirements Specification
- SFCC Slats Transition Table and Alpha-Lock Logic

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from dataclasses import dataclass

from flaps_conf import FlapsConf, demanded_slats_angle_from_conf
from sfcc_channel import SfccChannel
from sfcc_configuration import DEFAULT_CONFIGURATION, SfccConfiguration
from signed_status import resolve


@dataclass(frozen=True)
class AlphaLockState:
    engaged_speed: bool = False
    engaged_alpha: bool = False
    engaged: bool = False


def next_alpha_lock_state(
    state: AlphaLockState,
    config: SfccConfiguration,
    airspeed_kt: float,
    alpha_deg: float,
    handle_position: int,
    is_on_ground: bool,
) -> AlphaLockState:
    """
    Pure alpha-lock transition.

    Each trigger holds its previous value inside its hysteresis dead band.
    The composite engages only when a trigger is active, the handle is out of
    0, and the aircraft is not on ground below the inhibit speed. Once engaged
    it follows (speed OR alpha).
    """
    engaged_speed = state.engaged_speed
    if engaged_speed:
        if airspeed_kt > config.alpha_lock_disengage_speed_kt:
            engaged_speed = False
    elif airspeed_kt < config.alpha_lock_engage_speed_kt:
        engaged_speed = True

    engaged_alpha = state.engaged_alpha
    if engaged_alpha:
        if alpha_deg < config.alpha_lock_disengage_alpha_deg:
            engaged_alpha = False
    elif alpha_deg > config.alpha_lock_engage_alpha_deg:
        engaged_alpha = True

    triggered = engaged_speed or engaged_alpha
    if state.engaged:
        engaged = triggered
    else:
        on_ground_slow = is_on_ground and airspeed_kt < config.alpha_lock_ground_inhibit_speed_kt
        engaged = triggered and handle_position > 0 and not on_ground_slow

    return AlphaLockState(
        engaged_speed=engaged_speed,
        engaged_alpha=engaged_alpha,
        engaged=engaged,
    )


class SlatsChannel(SfccChannel):
    SURFACE = "SLATS"

    def __init__(self, config: SfccConfiguration = DEFAULT_CONFIGURATION, name: str | None = None):
        super().__init__(config=config, name=name)
        self._is_on_ground: bool = True
        self._alpha_lock = AlphaLockState()

    # -------------------------
    # Properties
    # -------------------------

    @property
    def is_on_ground(self) -> bool:
        return self._is_on_ground

    @property
    def alpha_lock_state(self) -> AlphaLockState:
        return self._alpha_lock

    @property
    def alpha_lock_engaged(self) -> bool:
        return self._alpha_lock.engaged

    @property
    def alpha_lock_engaged_speed(self) -> bool:
        return self._alpha_lock.engaged_speed

    @property
    def alpha_lock_engaged_alpha(self) -> bool:
        return self._alpha_lock.engaged_alpha

    def update_is_on_ground(self, is_on_ground: bool) -> None:
        self._is_on_ground = bool(is_on_ground)

    def demanded_angle_from_conf(self, conf: FlapsConf) -> float:
        return demanded_slats_angle_from_conf(conf)

    # -------------------------
    # Core update
    # -------------------------

    def update(self, context, flaps_handle, feedback, air_data, is_on_ground: bool) -> None:
        # Advances the slats channel by one control tick
        self.update_is_on_ground(is_on_ground)

        alpha_lock = self.alpha_lock_check(context, flaps_handle, air_data)
        conf = self.generate_configuration(flaps_handle, alpha_lock.engaged)

        self._set_alpha_lock(alpha_lock)
        self._commit(feedback, conf)

    def alpha_lock_check(self, context, flaps_handle, air_data) -> AlphaLockState:
        airspeed_kt = resolve(air_data.computed_airspeed(), context.indicated_airspeed_kt)
        alpha_deg = resolve(air_data.alpha(), context.alpha_deg)

        return next_alpha_lock_state(
            self._alpha_lock,
            self._config,
            airspeed_kt=airspeed_kt,
            alpha_deg=alpha_deg,
            handle_position=flaps_handle.position(),
            is_on_ground=self._is_on_ground,
        )

    def generate_configuration(self, flaps_handle, alpha_lock_engaged: bool) -> FlapsConf:
        previous = flaps_handle.previous_position()
        current = flaps_handle.position()

        if current != 0:
            return FlapsConf.from_index(current)

        if alpha_lock_engaged and previous > 0:
            return FlapsConf.CONF_1

        if current == 0:
            return FlapsConf.CONF_0

        return self._calculated_conf

    def _set_alpha_lock(self, state: AlphaLockState) -> None:
        if state.engaged != self._alpha_lock.engaged:
            self.log(f"{self.name}: alpha lock {'ENGAGED' if state.engaged else 'DISENGAGED'}")
        self._alpha_lock = state
