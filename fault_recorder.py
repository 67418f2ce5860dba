"""
Title: SFCC Fault Recorder Utility
Author: Alex Cooke
Date Created: 2026-10-14
Last Modified: 2026-10-15
Version: 1.1

Purpose:
Provides a simple, append-only fault recording mechanism for the Slats/Flaps
Electronic Complex. Rejected inputs (invalid handle detents) are timestamped
using an injected clock and persisted to non-volatile storage for later
inspection, debugging, or analysis.

Targeted Requirements:
- SFCC-SR001: Invalid detent conditions are recorded with timestamp and code.

Scope and Limitations:
- Fault persistence is file-based and append-only
- No severity classification or rollover handling; de-duplication is the
  caller's responsibility
- Assumes reliable filesystem access
- Intended for simulation, testing, and academic analysis only

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- pathlib (standard library)
- typing (standard library)

Related Documents:
- SFCC Requirements Specification
- SFCC Fault Handling and Diagnostics Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable


@dataclass
class FaultRecord:
    timestamp_s: float
    fault_code: str


class FaultRecorder:
    def __init__(self, filepath: str | Path, clock: Callable[[], float]):
        self._path = Path(filepath)
        self._clock = clock
        self._records: list[FaultRecord] = []

        # Ensures directory exists for persistence target.
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def records(self) -> list[FaultRecord]:
        return list(self._records)

    def record(self, fault_code: str) -> FaultRecord:
        # Records a fault code with timestamp to non-volatile storage (append-only).
        rec = FaultRecord(timestamp_s=float(self._clock()), fault_code=str(fault_code))

        with self._path.open("a", encoding="utf-8") as f:
            f.write(f"{rec.timestamp_s:.6f},{rec.fault_code}\n")

        self._records.append(rec)
        return rec
