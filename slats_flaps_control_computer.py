"""
Title: Slats/Flaps Control Computer (SFCC)
Author: Alex Cooke
Date Created: 2026-10-13
Last Modified: 2026-10-16
Version: 1.3

Purpose:
Aggregates one flaps channel and one slats channel into a single simplex
Slats/Flaps Control Computer. Each powered tick the computer refreshes its
ground state from its assigned LGCIU, runs the flaps channel against air data
unit #1, then runs the slats channel against air data unit #2 and the ground
state computed in the same tick. The computer borrows the shared flaps handle
memory; it never refreshes or owns it.

Targeted Requirements:
- SFCC-FR007: Ground state refreshed from the LGCIU before the slats channel
  consumes it (no one-tick lag); flaps channel always runs before slats.
- SFCC-FR008: Exposes demanded flap/slat angles, alpha-lock engaged and
  flap/slat drive signals for actuation and telemetry.
- SFCC-SR003: With channel power not present the computer does not compute,
  retains its last outputs and commands no surface drive.

Scope and Limitations:
- No cross-channel monitoring or voting.
- Power is a simple present/absent indication; bus transients are not modelled.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- logging (standard library)
- flaps_channel.py
- slats_channel.py
- sensor_interfaces.py
- sfcc_configuration.py

Related Documents:
- SFCC Requirements Specification
- SFCC System Architecture Description

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

# Change Log (requirements coverage summary):
#
# 1.3 (2026-10-16)
#   - SFCC-SR003: unpowered computer skips computation, retains its last
#     outputs and gates both drive signals off; power transitions are logged.
#
# 1.2 (2026-10-15)
#   - SFCC-FR007: ground state computed before the flaps channel runs but
#     committed only after it succeeds, so a rejected detent leaves it unchanged.
#
# 1.1 (2026-10-14)
#   - Added the frozen SfccOutputs snapshot used by the complex and telemetry.
#
# 1.0 (2026-10-13)
#   - Initial flaps-then-slats sequencing with ADIRU 1 for flaps and ADIRU 2
#     for slats.


import logging
from dataclasses import dataclass

from flaps_channel import FlapsChannel
from flaps_conf import FlapsConf
from sensor_interfaces import (
    AirDataSource,
    FeedbackPositionPickoffUnit,
    LgciuSensors,
    UpdateContext,
    gear_compressed,
)
from sfcc_configuration import DEFAULT_CONFIGURATION, SfccConfiguration
from slats_channel import SlatsChannel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SfccOutputs:
    number: int
    powered: bool
    flaps_conf: FlapsConf
    slats_conf: FlapsConf
    flaps_demanded_angle_deg: float
    slats_demanded_angle_deg: float
    alpha_lock_engaged: bool
    flaps_drive_signal: bool
    slats_drive_signal: bool


class SlatsFlapsControlComputer:
    def __init__(
        self,
        number: int = 1,
        config: SfccConfiguration = DEFAULT_CONFIGURATION,
        power_present_provider=None,
    ):
        self.number = int(number)
        self._config = config

        self.flaps_channel = FlapsChannel(config=config, name=f"SFCC{self.number} FLAPS")
        self.slats_channel = SlatsChannel(config=config, name=f"SFCC{self.number} SLATS")

        self._is_on_ground: bool = True

        # None -> always powered (mainly for tests)
        self.power_present_provider = power_present_provider
        self._powered: bool = True

    # -------------------------
    # Properties / outputs
    # -------------------------

    @property
    def is_on_ground(self) -> bool:
        return self._is_on_ground

    @property
    def is_powered(self) -> bool:
        return self._powered

    @property
    def flaps_demanded_angle_deg(self) -> float:
        return self.flaps_channel.demanded_angle_deg

    @property
    def slats_demanded_angle_deg(self) -> float:
        return self.slats_channel.demanded_angle_deg

    @property
    def alpha_lock_engaged(self) -> bool:
        return self.slats_channel.alpha_lock_engaged

    @property
    def flaps_drive_signal(self) -> bool:
        return self._powered and self.flaps_channel.send_signal_to_motors()

    @property
    def slats_drive_signal(self) -> bool:
        return self._powered and self.slats_channel.send_signal_to_motors()

    def outputs(self) -> SfccOutputs:
        return SfccOutputs(
            number=self.number,
            powered=self._powered,
            flaps_conf=self.flaps_channel.calculated_conf,
            slats_conf=self.slats_channel.calculated_conf,
            flaps_demanded_angle_deg=self.flaps_demanded_angle_deg,
            slats_demanded_angle_deg=self.slats_demanded_angle_deg,
            alpha_lock_engaged=self.alpha_lock_engaged,
            flaps_drive_signal=self.flaps_drive_signal,
            slats_drive_signal=self.slats_drive_signal,
        )

    def log(self, msg: str) -> None:
        logger.info(msg)

    # -------------------------
    # Core update
    # -------------------------

    def _refresh_power(self) -> bool:
        if self.power_present_provider is None:
            powered = True
        else:
            powered = bool(self.power_present_provider())

        if powered != self._powered:
            self.log(f"SFCC{self.number}: power {'restored' if powered else 'lost'}")
            self._powered = powered
        return powered

    def update(
        self,
        context: UpdateContext,
        flaps_handle,
        air_data_units: tuple[AirDataSource, AirDataSource],
        lgciu: LgciuSensors,
        flaps_feedback: FeedbackPositionPickoffUnit,
        slats_feedback: FeedbackPositionPickoffUnit,
    ) -> None:
        # Advances both channels by one control tick
        if not self._refresh_power():
            return

        adiru_1, adiru_2 = air_data_units
        is_on_ground = gear_compressed(lgciu, require_both=self._config.ground_requires_both_gears)

        # Flaps first; a rejected detent leaves ground state and both channels untouched
        self.flaps_channel.update(context, flaps_handle, flaps_feedback, adiru_1)

        self._is_on_ground = is_on_ground
        self.slats_channel.update(context, flaps_handle, slats_feedback, adiru_2, self._is_on_ground)
