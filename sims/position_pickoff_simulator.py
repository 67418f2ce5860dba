"""
Title: Surface Feedback Position Pickoff Simulator (FPPU Stand-in)
Author: Alex Cooke
Date Created: 2026-10-14
Last Modified: 2026-10-15
Version: 1.0

Purpose:
Provides a feedback position pickoff unit stand-in for one high-lift surface.
The reported angle can be forced directly, or slewed at a constant rate toward
a target angle, which lets bench runs and tests observe the SFCC drive signal
asserting on a configuration change and clearing once feedback converges.

Targeted Requirements:
- None (supporting analysis, simulation, and test tooling only)

Scope and Limitations:
- Constant slew rate only; no actuator, motor or brake dynamics.
- No sensor noise, latency or failure modes are simulated.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+

Related Documents:
- SFCC Requirements Specification
- SFCC Simulation and Test Architecture Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""


class PositionPickoffSimulator:
    def __init__(self, angle_deg: float = 0.0, slew_rate_deg_s: float = 1.0):
        self.angle_deg = float(angle_deg)
        self.slew_rate_deg_s = float(slew_rate_deg_s)

    def angle(self) -> float:
        return self.angle_deg

    def set_angle_deg(self, angle_deg: float) -> None:
        # Force angle to a specific value.
        self.angle_deg = float(angle_deg)

    def step(self, dt: float, target_deg: float, driven: bool = True) -> float:
        # Move toward target_deg by at most slew_rate * dt while driven.
        if not driven or dt <= 0.0:
            return self.angle_deg

        max_move = self.slew_rate_deg_s * dt
        error = float(target_deg) - self.angle_deg

        if abs(error) <= max_move:
            self.angle_deg = float(target_deg)
        elif error > 0.0:
            self.angle_deg += max_move
        else:
            self.angle_deg -= max_move

        return self.angle_deg
