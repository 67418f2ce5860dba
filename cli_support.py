"""
Title: CLI Support Utilities, Bench Assembly and Control Loop Abstractions
Author: Alex Cooke
Date Created: 2026-10-14
Last Modified: 2026-10-17
Version: 1.3

Purpose:
Provides shared support utilities for the SFCC command-line bench and
simulation environment. This module defines mutable wrapper types for
interactive inputs, an SfccBench that wires the Slats/Flaps Electronic Complex
to simulated air data units, LGCIUs, surface feedback units and power
switches, and a lightweight control loop abstraction for driving the bench
either step-wise or in a background thread.

Targeted Requirements:
- None (supporting analysis, simulation, and tooling only)

Scope and Limitations:
- Intended for CLI-driven simulation and test support only.
- ControlLoop timing is approximate and not real-time deterministic.
- Both SFCCs observe the same physical flap and slat feedback units; surfaces
  are slewed toward the demand of the first powered SFCC that drives them.
- Exposes mutable state for ease of interactive testing, not safety-critical use.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- logging (standard library)
- threading (standard library)
- time (standard library)
- typing (standard library)
- slats_flaps_electronic_complex.py
- sims/air_data_simulator.py
- sims/lgciu_simulator.py
- sims/position_pickoff_simulator.py

Related Documents:
- SFCC Requirements Specification
- SFCC CLI and Simulation Test Architecture Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from flaps_handle import HANDLE_POSITION_VARIABLE
from sensor_interfaces import UpdateContext
from sfcc_configuration import DEFAULT_CONFIGURATION, SfccConfiguration
from sims.air_data_simulator import AirDataSimulator
from sims.lgciu_simulator import LgciuSimulator
from sims.position_pickoff_simulator import PositionPickoffSimulator
from slats_flaps_electronic_complex import SfccWiring, SlatsFlapsElectronicComplex

logger = logging.getLogger(__name__)


@dataclass
class MutableBool:
    value: bool = True


@dataclass
class MutableFloat:
    value: float = 0.0


@dataclass
class MutableInt:
    value: int = 0


class SfccBench:
    def __init__(
        self,
        config: SfccConfiguration = DEFAULT_CONFIGURATION,
        period_s: float = 0.1,
        fault_recorder=None,
        telemetry_recorder=None,
        flaps_slew_rate_deg_s: float = 1.0,
        slats_slew_rate_deg_s: float = 1.0,
    ):
        self.config = config
        self.period_s = float(period_s)

        # Pilot / environment inputs
        self.lever = MutableInt(0)
        self.indicated_airspeed_kt = MutableFloat(0.0)
        self.local_alpha_deg = MutableFloat(0.0)
        self.power = (MutableBool(True), MutableBool(True))

        self.adirus = (AirDataSimulator(), AirDataSimulator())
        self.lgcius = (LgciuSimulator(), LgciuSimulator())
        self.flaps_fppu = PositionPickoffSimulator(slew_rate_deg_s=flaps_slew_rate_deg_s)
        self.slats_fppu = PositionPickoffSimulator(slew_rate_deg_s=slats_slew_rate_deg_s)

        wirings = [
            SfccWiring(
                lgciu=lgciu,
                flaps_feedback=self.flaps_fppu,
                slats_feedback=self.slats_fppu,
                power_present_provider=(lambda p=power: bool(p.value)),
            )
            for lgciu, power in zip(self.lgcius, self.power)
        ]

        self.complex = SlatsFlapsElectronicComplex(
            air_data_units=self.adirus,
            wirings=wirings,
            handle_position_provider=lambda: int(self.lever.value),
            config=config,
            fault_recorder=fault_recorder,
        )

        self.telemetry_recorder = telemetry_recorder
        self.host_variables: dict[str, object] = {HANDLE_POSITION_VARIABLE: 0}

    # Environment helpers

    def set_airspeed_kt(self, airspeed_kt: float) -> None:
        # Sets both ADIRUs and the local indicated airspeed.
        self.indicated_airspeed_kt.value = float(airspeed_kt)
        for adiru in self.adirus:
            adiru.set_airspeed_kt(airspeed_kt)

    def set_alpha_deg(self, alpha_deg: float) -> None:
        self.local_alpha_deg.value = float(alpha_deg)
        for adiru in self.adirus:
            adiru.set_alpha_deg(alpha_deg)

    def set_turbulence(self, airspeed_rate_kt_s: float, alpha_rate_deg_s: float) -> None:
        # Random-walk rates applied to both ADIRUs each tick; 0 holds the set values.
        for adiru in self.adirus:
            adiru.max_airspeed_rate = max(0.0, float(airspeed_rate_kt_s))
            adiru.max_alpha_rate = max(0.0, float(alpha_rate_deg_s))

    def set_on_ground(self, on_ground: bool) -> None:
        for lgciu in self.lgcius:
            lgciu.set_compressed(on_ground)

    def context(self) -> UpdateContext:
        return UpdateContext(
            indicated_airspeed_kt=float(self.indicated_airspeed_kt.value),
            alpha_deg=float(self.local_alpha_deg.value),
        )

    # Tick

    def update(self) -> None:
        self.host_variables[HANDLE_POSITION_VARIABLE] = int(self.lever.value)
        for adiru in self.adirus:
            adiru.step(self.period_s)

        self.complex.update(self.context())
        self.complex.write(self.host_variables.__setitem__)

        self._slew_surfaces()

        if self.telemetry_recorder is not None:
            self.telemetry_recorder.record(self.complex.outputs())

    def _slew_surfaces(self) -> None:
        outputs = self.complex.outputs()

        flaps_driver = next((o for o in outputs if o.flaps_drive_signal), None)
        if flaps_driver is not None:
            self.flaps_fppu.step(self.period_s, flaps_driver.flaps_demanded_angle_deg)

        slats_driver = next((o for o in outputs if o.slats_drive_signal), None)
        if slats_driver is not None:
            self.slats_fppu.step(self.period_s, slats_driver.slats_demanded_angle_deg)


class ControlLoop:
    def __init__(self,
                 bench: SfccBench,
                 period_s: float = 0.1,
                 on_tick: Optional[Callable] = None,
                 on_error: Optional[Callable[[Exception], None]] = None,):
        self._bench = bench
        self._period_s = float(period_s)
        self._on_tick = on_tick
        self._on_error = on_error
        self._running = False
        self._stop_evt = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def period_s(self) -> float:
        return self._period_s

    @property
    def running(self) -> bool:
        return self._running

    def set_period(self, period_s: float) -> None:
        self._period_s = max(0.01, float(period_s))

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._stop_evt.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if not self._running:
            return
        self._stop_evt.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
        self._running = False
        self._thread = None

    def step(self, n: int = 1) -> None:
        for _ in range(max(1, int(n))):
            self._tick()

    def _tick(self) -> None:
        self._bench.update()
        if self._on_tick:
            self._on_tick(self._bench)

    def _run(self) -> None:
        while not self._stop_evt.is_set():
            try:
                self._tick()
            except ValueError as exc:
                # Rejected input; keep ticking so the operator can correct it
                if self._on_error:
                    self._on_error(exc)
                else:
                    logger.error("Tick rejected: %s", exc)
            time.sleep(self._period_s)
