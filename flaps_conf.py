"""
Title: High-Lift Configuration Definitions (SFCC FlapsConf Enum)
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-16
Version: 1.1

Purpose:
Defines the authoritative set of high-lift configurations shared by the flaps
and slats channels of the Slats/Flaps Control Computer (SFCC), together with
the fixed demanded-angle lookup tables for each surface. Configurations are
only constructible from integral indices 0-5 through a checked conversion;
any other value is rejected as an invalid detent.

Targeted Requirements:
- SFCC-FR001: Provides the configuration vocabulary used by the flaps channel.
- SFCC-FR004: Provides the configuration vocabulary used by the slats channel.
- SFCC-FR009: Demanded flap/slat angles are a pure lookup of configuration.
- SFCC-SR001: Out-of-range configuration indices are rejected with a
  distinguishable error rather than clamped.

Scope and Limitations:
- Angles are expressed in degrees as plain floats.
- The enumeration encodes logical configurations only; it does not encode
  surface positions reached, actuator state, or sensor validity.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- enum (standard library)

Related Documents:
- SFCC Requirements Specification
- SFCC System Architecture Description

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from enum import Enum


class InvalidDetentError(ValueError):
    # Raised when an integer cannot be mapped onto a configuration or detent.
    def __init__(self, value, message: str | None = None):
        self.value = value
        super().__init__(message or f"Cannot convert {value!r} to FlapsConf")


class FlapsConf(Enum):
    CONF_0 = 0
    CONF_1 = 1
    CONF_1F = 2
    CONF_2 = 3
    CONF_3 = 4
    CONF_FULL = 5

    @classmethod
    def from_index(cls, value: int) -> "FlapsConf":
        # bool is an int subclass; a True/False index is a wiring error, not a detent
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDetentError(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidDetentError(value) from None


# Demanded surface angles (degrees) per configuration.
_FLAPS_ANGLE_DEG: dict[FlapsConf, float] = {
    FlapsConf.CONF_0: 0.0,
    FlapsConf.CONF_1: 0.0,
    FlapsConf.CONF_1F: 10.0,
    FlapsConf.CONF_2: 15.0,
    FlapsConf.CONF_3: 20.0,
    FlapsConf.CONF_FULL: 40.0,
}

_SLATS_ANGLE_DEG: dict[FlapsConf, float] = {
    FlapsConf.CONF_0: 0.0,
    FlapsConf.CONF_1: 18.0,
    FlapsConf.CONF_1F: 18.0,
    FlapsConf.CONF_2: 22.0,
    FlapsConf.CONF_3: 22.0,
    FlapsConf.CONF_FULL: 27.0,
}


def demanded_flaps_angle_from_conf(conf: FlapsConf) -> float:
    return _FLAPS_ANGLE_DEG[conf]


def demanded_slats_angle_from_conf(conf: FlapsConf) -> float:
    return _SLATS_ANGLE_DEG[conf]
