"""
Title: Landing Gear Control/Interface Unit Simulator (LGCIU Stand-in)
Author: Alex Cooke
Date Created: 2026-10-14
Last Modified: 2026-10-14
Version: 1.0

Purpose:
Defines a minimal LGCIU stand-in reporting left and right main gear
compressed state for the SFCC ground-state logic.

Targeted Requirements:
- None (supporting analysis, simulation, and test tooling only)

Scope and Limitations:
- Models only already-debounced compressed indications.
- Nose gear, proximity sensor redundancy and external power are not modelled.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)

Related Documents:
- SFCC Requirements Specification
- SFCC Simulation and Test Architecture Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from dataclasses import dataclass


@dataclass
class LgciuSimulator:
    left_compressed: bool = True
    right_compressed: bool = True

    def left_gear_compressed(self) -> bool:
        return self.left_compressed

    def right_gear_compressed(self) -> bool:
        return self.right_compressed

    def set_compressed(self, left: bool, right: bool | None = None) -> None:
        self.left_compressed = bool(left)
        self.right_compressed = bool(left if right is None else right)
