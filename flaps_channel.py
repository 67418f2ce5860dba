"""
Title: SFCC Flaps Channel State Machine (FlapsChannel)
Author: Alex Cooke
Date Created: 2026-10-13
Last Modified: 2026-10-16
Version: 1.3

Purpose:
Implements the flaps channel of a Slats/Flaps Control Computer. The channel
maps the (previous, current) flaps handle detent pair and the computed
airspeed onto a flaps configuration, derives the demanded flap angle from it,
and signals the flap actuators whenever the measured surface angle differs
from the demand. The calculated configuration is retained across ticks and
is only replaced when a transition arm matches.

Targeted Requirements:
- SFCC-FR001: 0 -> 1 selects CONF 1+F at or below 100 kt, CONF 1 above.
- SFCC-FR002: Handle held at 1 retracts CONF 1+F to CONF 1 above 210 kt;
  returning to 1 from a higher detent selects CONF 1+F at or below 210 kt.
- SFCC-FR003: Drive signal TRUE iff |demanded - feedback| >= 0.01 deg.
- SFCC-SR001: Detents with no flaps configuration raise InvalidDetentError and
  leave the channel state unchanged.
- SFCC-SR002: ADIRU airspeed is replaced by indicated airspeed when its sign
  status is not NORMAL_OPERATION.

Scope and Limitations:
- Transition table is evaluated in priority order; first match wins.
- Detents 2..4 map onto the configuration one index higher (detent 2 -> CONF 2,
  detent 4 -> CONF FULL); detent 5 has no flaps configuration.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- flaps_conf.py
- flaps_handle.py
- sfcc_channel.py
- signed_status.py

Related Documents:
- SFCC Requirements Specification
- SFCC Flaps Transition Table

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from flaps_conf import FlapsConf, InvalidDetentError, demanded_flaps_angle_from_conf
from sfcc_channel import SfccChannel
from signed_status import resolve

# Detent reached by a move (other than to 0 or 1) -> flaps configuration.
_FLAPS_CONF_FOR_MOVED_DETENT: dict[int, FlapsConf] = {
    2: FlapsConf.CONF_2,
    3: FlapsConf.CONF_3,
    4: FlapsConf.CONF_FULL,
}


class FlapsChannel(SfccChannel):
    SURFACE = "FLAPS"

    def update(self, context, flaps_handle, feedback, air_data) -> None:
        # Advances the flaps channel by one control tick
        conf = self.generate_configuration(context, flaps_handle, air_data)
        self._commit(feedback, conf)

    def demanded_angle_from_conf(self, conf: FlapsConf) -> float:
        return demanded_flaps_angle_from_conf(conf)

    def computed_airspeed_kt(self, context, air_data) -> float:
        return resolve(air_data.computed_airspeed(), context.indicated_airspeed_kt)

    def generate_configuration(self, context, flaps_handle, air_data) -> FlapsConf:
        airspeed_kt = self.computed_airspeed_kt(context, air_data)
        entry_max_kt = self._config.conf1f_entry_max_airspeed_kt
        retract_kt = self._config.conf1f_retract_airspeed_kt

        previous = flaps_handle.previous_position()
        current = flaps_handle.position()

        if (previous, current) == (0, 1):
            if airspeed_kt <= entry_max_kt:
                return FlapsConf.CONF_1F
            return FlapsConf.CONF_1

        if (previous, current) == (1, 1):
            if airspeed_kt > retract_kt:
                return FlapsConf.CONF_1
            return self._calculated_conf

        if current == 1:
            if airspeed_kt <= retract_kt:
                return FlapsConf.CONF_1F
            return FlapsConf.CONF_1

        if current == 0:
            return FlapsConf.CONF_0

        if previous != current:
            try:
                return _FLAPS_CONF_FOR_MOVED_DETENT[current]
            except KeyError:
                raise InvalidDetentError(
                    current, f"No flaps configuration for handle detent {current!r}"
                ) from None

        return self._calculated_conf
