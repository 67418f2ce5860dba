"""
Title: Application Context Container for the SFCC Bench
Author: Alex Cooke
Date Created: 2026-10-15
Last Modified: 2026-10-15
Version: 1.0

Purpose:
Defines a central application context object for the SFCC bench simulation.
The AppContext aggregates the bench (electronic complex plus simulated
environment), shared configuration, recorders, and lifecycle control
primitives into a single, explicit container to simplify wiring, dependency
management, and controlled shutdown across the application.

Targeted Requirements:
- None (supporting analysis, integration, and tooling only)

Scope and Limitations:
- Intended for simulation and CLI-driven execution only.
- Acts purely as a dependency container; contains no control or safety logic.
- Not intended to represent certified avionics process partitioning or tasking.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- threading (standard library)
- typing (standard library)
- sfcc_configuration.py
- cli_support.py

Related Documents:
- SFCC Requirements Specification
- SFCC System Architecture and Integration Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from dataclasses import dataclass
from threading import Event
from typing import Callable

from cli_support import ControlLoop, SfccBench
from sfcc_configuration import SfccConfiguration


@dataclass
class AppContext:
    bench: SfccBench
    config: SfccConfiguration
    clock: Callable[[], float]
    shutdown_event: Event
    loop: ControlLoop

    def shutdown(self) -> None:
        self.loop.stop()
        self.shutdown_event.set()
