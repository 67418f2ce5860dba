"""
Title: Air Data Unit Simulator (ADIRU Stand-in)
Author: Alex Cooke
Date Created: 2026-10-14
Last Modified: 2026-10-16
Version: 1.1

Purpose:
Provides a lightweight air data unit stand-in exposing computed airspeed and
angle-of-attack as sign-status qualified values, for testing and bench
operation of the SFCC. Values and sign status can be forced directly; an
optional stochastic perturbation (bounded random walk) supports soak-style
bench runs with either a fixed time step or an injected clock.

Targeted Requirements:
- None (supporting analysis, simulation, and fault-injection tooling only)

Scope and Limitations:
- Does not compute air data from pressures or inertial data.
- Perturbation is random and not based on aerodynamic models.
- Sign status is only changed when explicitly forced.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- random (standard library)
- signed_status.py

Related Documents:
- SFCC Requirements Specification
- SFCC Simulation and Test Architecture Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

import random

from signed_status import SignedValue, SignStatus


class AirDataSimulator:
    def __init__(
        self,
        airspeed_kt=0.0,
        alpha_deg=0.0,
        max_airspeed_rate_kt_s=0.0,   # 0 disables perturbation
        max_alpha_rate_deg_s=0.0,
        rng: random.Random | None = None,
        clock=None,
    ):
        self.airspeed_kt = float(airspeed_kt)
        self.alpha_deg = float(alpha_deg)
        self.airspeed_ssm = SignStatus.NORMAL_OPERATION
        self.alpha_ssm = SignStatus.NORMAL_OPERATION

        self.max_airspeed_rate = float(max_airspeed_rate_kt_s)
        self.max_alpha_rate = float(max_alpha_rate_deg_s)

        self.rng = rng or random.Random()
        self.clock = clock
        self._last_time = self.clock() if self.clock else None

    # AirDataSource interface

    def computed_airspeed(self) -> SignedValue:
        return SignedValue(self.airspeed_kt, self.airspeed_ssm)

    def alpha(self) -> SignedValue:
        return SignedValue(self.alpha_deg, self.alpha_ssm)

    # Forcing

    def set_airspeed_kt(self, airspeed_kt: float, ssm: SignStatus | None = None) -> None:
        self.airspeed_kt = float(airspeed_kt)
        if ssm is not None:
            self.airspeed_ssm = ssm

    def set_alpha_deg(self, alpha_deg: float, ssm: SignStatus | None = None) -> None:
        self.alpha_deg = float(alpha_deg)
        if ssm is not None:
            self.alpha_ssm = ssm

    def set_ssm(self, ssm: SignStatus) -> None:
        self.airspeed_ssm = ssm
        self.alpha_ssm = ssm

    # Perturbation

    def step(self, dt: float) -> SignedValue:
        # Advance the random walk by dt seconds and return computed airspeed.
        if dt <= 0.0:
            return self.computed_airspeed()

        if self.max_airspeed_rate > 0.0:
            self.airspeed_kt += self.rng.uniform(-self.max_airspeed_rate, self.max_airspeed_rate) * dt
            self.airspeed_kt = max(0.0, self.airspeed_kt)

        if self.max_alpha_rate > 0.0:
            self.alpha_deg += self.rng.uniform(-self.max_alpha_rate, self.max_alpha_rate) * dt

        return self.computed_airspeed()

    def update(self) -> SignedValue:
        # Advance simulation using the injected clock.
        if not self.clock:
            raise RuntimeError(
                "AirDataSimulator.update() requires a clock; use step(dt) instead."
            )

        now = self.clock()
        dt = now - (self._last_time if self._last_time is not None else now)
        self._last_time = now
        return self.step(dt)
