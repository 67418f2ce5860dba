# telemetry_recorder.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable
import threading

from slats_flaps_control_computer import SfccOutputs

HEADER = (
    "timestamp,sfcc,powered,flaps_conf,slats_conf,"
    "flaps_demanded_deg,slats_demanded_deg,alpha_lock,flaps_drive,slats_drive\n"
)


@dataclass
class TelemetryRecorder:
    filepath: Path
    clock: Callable[[], float]

    def __post_init__(self) -> None:
        self.filepath = Path(self.filepath)
        self._lock = threading.Lock()
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

        # Header written once per file
        if not self.filepath.exists():
            with self.filepath.open("w", encoding="utf-8") as f:
                f.write(HEADER)

    def record(self, outputs: Iterable[SfccOutputs]) -> None:
        ts = self.clock()
        lines = [
            f"{ts:.6f},{o.number},{o.powered},{o.flaps_conf.name},{o.slats_conf.name},"
            f"{o.flaps_demanded_angle_deg:.2f},{o.slats_demanded_angle_deg:.2f},"
            f"{o.alpha_lock_engaged},{o.flaps_drive_signal},{o.slats_drive_signal}\n"
            for o in outputs
        ]

        with self._lock:
            with self.filepath.open("a", encoding="utf-8") as f:
                f.writelines(lines)
                f.flush()
