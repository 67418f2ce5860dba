"""
Title: SFCC Sensor Capability Interfaces
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-16
Version: 1.2

Purpose:
Defines the capability interfaces the SFCC control logic operates over:
surface feedback position pickoff units (FPPU), air data units (ADIRU),
and landing gear control/interface units (LGCIU), together with the per-tick
UpdateContext carrying locally available fallback air data. Any object
exposing the listed methods can be wired into the channels, which allows the
control logic to be exercised against synthetic stand-ins without a host
environment.

Targeted Requirements:
- SFCC-FR007: Ground state is derived from left/right gear-compressed inputs,
  combined with AND or OR as chosen by the caller.
- SFCC-SR002: Provides the fallback indicated airspeed and alpha used when
  ADIRU data is not in normal operation.

Scope and Limitations:
- Interfaces are structural (typing.Protocol); no runtime registration.
- LGCIU debounce, ADIRU computation and electrical bus modelling are external
  and not represented here.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- typing (standard library)
- signed_status.py

Related Documents:
- SFCC Requirements Specification
- SFCC System Architecture and Integration Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from dataclasses import dataclass
from typing import Protocol

from signed_status import SignedValue


class FeedbackPositionPickoffUnit(Protocol):
    def angle(self) -> float:
        # Measured surface angle in degrees.
        ...


class AirDataSource(Protocol):
    def computed_airspeed(self) -> SignedValue:
        # Knots.
        ...

    def alpha(self) -> SignedValue:
        # Degrees.
        ...


class LgciuSensors(Protocol):
    def left_gear_compressed(self) -> bool:
        ...

    def right_gear_compressed(self) -> bool:
        ...


@dataclass(frozen=True)
class UpdateContext:
    # Locally available air data, used when the ADIRU value is not valid.
    indicated_airspeed_kt: float = 0.0
    alpha_deg: float = 0.0


def gear_compressed(lgciu: LgciuSensors, require_both: bool) -> bool:
    left = bool(lgciu.left_gear_compressed())
    right = bool(lgciu.right_gear_compressed())
    if require_both:
        return left and right
    return left or right
