"""
Title: Slats/Flaps Electronic Complex (Dual SFCC Aggregation)
Author: Alex Cooke
Date Created: 2026-10-14
Last Modified: 2026-10-17
Version: 1.3

Purpose:
Owns the two independently powered Slats/Flaps Control Computers and the
single flaps handle memory they share. Each control tick the complex refreshes
the handle memory exactly once, then runs SFCC 1 and SFCC 2 in sequence, each
against the same handle memory and the same pair of air data units, but with
its own LGCIU, surface feedback units and power supply. Outputs of both
computers are published only after the whole tick has settled.

Targeted Requirements:
- SFCC-FR008: Two simplex SFCCs computed independently every tick; no
  cross-channel comparison or voting.
- SFCC-FR010: Handle memory refreshed once per tick before either SFCC reads it.
- SFCC-SR001: Invalid detents are surfaced to the caller as InvalidDetentError,
  logged, and optionally recorded to non-volatile storage.
- SFCC-FR011: Per-SFCC outputs written to the host under stable variable names.

Scope and Limitations:
- Redundancy exists only at system level (downstream consumers may compare
  outputs); nothing here monitors disagreement.
- Host variable transport is modelled as a write callback.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- logging (standard library)
- typing (standard library)
- flaps_conf.py
- flaps_handle.py
- sensor_interfaces.py
- slats_flaps_control_computer.py
- sfcc_configuration.py

Related Documents:
- SFCC Requirements Specification
- SFCC System Architecture and Integration Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

# Change Log (requirements coverage summary):
#
# 1.3 (2026-10-17)
#   - SFCC-SR001: a rejected tick now restores the handle memory to its
#     pre-tick (previous, current) pair. A lever held at a rejected detent is
#     rejected on every tick instead of being accepted as a steady pair on the
#     second tick.
#
# 1.2 (2026-10-16)
#   - SFCC-SR001: non-volatile fault recording of rejected detents, once per
#     distinct code, via an optional FaultRecorder.
#   - SFCC-FR011: host output writing under SFCC_<n>_* variable names.
#
# 1.1 (2026-10-15)
#   - Outputs published only after both SFCCs complete the tick.
#
# 1.0 (2026-10-14)
#   - Initial dual-SFCC aggregation with a single shared handle refresh per tick:
#       * SFCC-FR008 (two independent simplex SFCCs)
#       * SFCC-FR010 (handle memory refreshed once per tick)


import logging
from dataclasses import dataclass
from typing import Any, Callable

from flaps_conf import InvalidDetentError
from flaps_handle import FlapsHandle
from sensor_interfaces import FeedbackPositionPickoffUnit, LgciuSensors
from sfcc_configuration import DEFAULT_CONFIGURATION, SfccConfiguration
from slats_flaps_control_computer import SfccOutputs, SlatsFlapsControlComputer

logger = logging.getLogger(__name__)

INVALID_DETENT_FAULT_CODE = "SFCC_INVALID_DETENT"


@dataclass
class SfccWiring:
    # Inputs owned by one SFCC (the air data pair and the lever are shared).
    lgciu: LgciuSensors
    flaps_feedback: FeedbackPositionPickoffUnit
    slats_feedback: FeedbackPositionPickoffUnit
    power_present_provider: Callable[[], bool] | None = None


class SlatsFlapsElectronicComplex:
    def __init__(
        self,
        air_data_units,
        wirings,
        handle_position_provider=None,
        config: SfccConfiguration = DEFAULT_CONFIGURATION,
        fault_recorder=None,
    ):
        if len(air_data_units) != 2:
            raise ValueError(f"Expected 2 air data units, got {len(air_data_units)}")
        if len(wirings) != 2:
            raise ValueError(f"Expected 2 SFCC wirings, got {len(wirings)}")

        self._config = config
        self._air_data_units = tuple(air_data_units)
        self._wirings = tuple(wirings)

        self.flaps_handle = FlapsHandle(position_provider=handle_position_provider)

        self.sfccs = tuple(
            SlatsFlapsControlComputer(
                number=i + 1,
                config=config,
                power_present_provider=w.power_present_provider,
            )
            for i, w in enumerate(self._wirings)
        )

        self._fault_recorder = fault_recorder
        self._recorded_fault_codes: set[str] = set()

        self._outputs: tuple[SfccOutputs, ...] = tuple(s.outputs() for s in self.sfccs)
        self._tick_count = 0

    # -------------------------
    # Properties / small helpers
    # -------------------------

    @property
    def config(self) -> SfccConfiguration:
        return self._config

    @property
    def sfcc_1(self) -> SlatsFlapsControlComputer:
        return self.sfccs[0]

    @property
    def sfcc_2(self) -> SlatsFlapsControlComputer:
        return self.sfccs[1]

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def fault_recorder(self):
        return self._fault_recorder

    @fault_recorder.setter
    def fault_recorder(self, recorder) -> None:
        self._fault_recorder = recorder

    def outputs(self) -> tuple[SfccOutputs, ...]:
        # Snapshot published at the end of the last completed tick.
        return self._outputs

    def log(self, msg: str) -> None:
        logger.warning(msg)

    # -------------------------
    # Core update loop
    # -------------------------

    def update(self, context) -> None:
        handle_positions = self.flaps_handle.positions()
        try:
            self.flaps_handle.refresh()

            for sfcc, wiring in zip(self.sfccs, self._wirings):
                sfcc.update(
                    context,
                    self.flaps_handle,
                    self._air_data_units,
                    wiring.lgciu,
                    wiring.flaps_feedback,
                    wiring.slats_feedback,
                )
        except InvalidDetentError as exc:
            # A rejected tick must not leave the new detent in the handle memory
            self.flaps_handle.restore(handle_positions)
            self.log(f"Handle detent rejected: {exc}")
            self._record_fault(f"{INVALID_DETENT_FAULT_CODE}_{exc.value}")
            raise

        self._tick_count += 1
        self._outputs = tuple(s.outputs() for s in self.sfccs)

    def _record_fault(self, fault_code: str) -> None:
        if self._fault_recorder is None:
            return

        if fault_code in self._recorded_fault_codes:
            return

        self._fault_recorder.record(fault_code)
        self._recorded_fault_codes.add(fault_code)

    # -------------------------
    # Host outputs
    # -------------------------

    def write(self, writer: Callable[[str, Any], None]) -> None:
        for out in self._outputs:
            prefix = f"SFCC_{out.number}"
            writer(f"{prefix}_FLAP_DEMANDED_ANGLE", out.flaps_demanded_angle_deg)
            writer(f"{prefix}_SLAT_DEMANDED_ANGLE", out.slats_demanded_angle_deg)
            writer(f"{prefix}_ALPHA_LOCK_ENGAGED", out.alpha_lock_engaged)
            writer(f"{prefix}_FLAP_DRIVE", out.flaps_drive_signal)
            writer(f"{prefix}_SLAT_DRIVE", out.slats_drive_signal)
