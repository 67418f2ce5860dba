"""
Title: Sign-Status Qualified Sensor Values
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-14
Version: 1.0

Purpose:
Defines the value-plus-status representation used for air data delivered to
the SFCC (computed airspeed and angle-of-attack), and the single fallback
substitution rule shared by every consumer of such values: the primary value
is used only when its sign status reports normal operation; otherwise a
locally available fallback value is used instead.

Targeted Requirements:
- SFCC-SR002: Air data with a sign status other than NORMAL_OPERATION shall be
  replaced by the locally available fallback value and never surface as an error.

Scope and Limitations:
- Sign status values follow the four ARINC 429 SSM states; no parity, label or
  bus timing information is modelled.
- The fallback is a simplex fail-over, not a voted or filtered value.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- enum (standard library)

Related Documents:
- SFCC Requirements Specification
- SFCC Sensor Validity Handling Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from dataclasses import dataclass
from enum import Enum, auto


class SignStatus(Enum):
    FAILURE_WARNING = auto()
    NO_COMPUTED_DATA = auto()
    FUNCTIONAL_TEST = auto()
    NORMAL_OPERATION = auto()


@dataclass(frozen=True)
class SignedValue:
    value: float
    ssm: SignStatus = SignStatus.NORMAL_OPERATION

    def is_normal_operation(self) -> bool:
        return self.ssm == SignStatus.NORMAL_OPERATION


def resolve(primary: SignedValue, fallback: float) -> float:
    # Primary value only when NORMAL_OPERATION, otherwise the local fallback.
    if primary.is_normal_operation():
        return float(primary.value)
    return float(fallback)
