"""
Title: SFCC Threshold Configuration Model (SfccConfiguration)
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-15
Version: 1.1

Purpose:
Defines an immutable data model holding the airspeed, angle-of-attack and
angle-tolerance thresholds used by the Slats/Flaps Control Computer channels.
The configuration is shared by both SFCC instances of the electronic complex
so that the two redundant computers evaluate identical transition tables.

Targeted Requirements:
- SFCC-FR001: CONF 1+F selection airspeed (<= 100 kt on 0 -> 1).
- SFCC-FR002: CONF 1+F to CONF 1 retraction airspeed (> 210 kt).
- SFCC-FR003: Drive signal equality tolerance (0.01 deg).
- SFCC-FR005: Alpha-lock speed hysteresis (148 kt engage / 154 kt disengage).
- SFCC-FR006: Alpha-lock alpha hysteresis (8.6 deg engage / 7.6 deg disengage).
- SFCC-FR007: Ground inhibit speed for alpha-lock engagement (60 kt) and
  left/right gear-compressed combination policy.

Scope and Limitations:
- Values are static and immutable once instantiated.
- validate() checks internal coherence only; it does not check values against
  any certified aircraft data.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)

Related Documents:
- SFCC Requirements Specification
- SFCC Threshold Derivation Records

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SfccConfiguration:
    # Immutable SFCC threshold configuration.
    name: str = "SFCC"

    conf1f_entry_max_airspeed_kt: float = 100.0
    conf1f_retract_airspeed_kt: float = 210.0
    equal_angle_delta_deg: float = 0.01

    alpha_lock_engage_speed_kt: float = 148.0
    alpha_lock_disengage_speed_kt: float = 154.0
    alpha_lock_engage_alpha_deg: float = 8.6
    alpha_lock_disengage_alpha_deg: float = 7.6
    alpha_lock_ground_inhibit_speed_kt: float = 60.0

    # False -> on ground when either main gear is compressed
    ground_requires_both_gears: bool = False

    def validate(self) -> None:
        # Raises ValueError when thresholds are incoherent.
        if self.equal_angle_delta_deg <= 0.0:
            raise ValueError(
                f"equal_angle_delta_deg must be > 0 (got {self.equal_angle_delta_deg})"
            )

        if self.alpha_lock_engage_speed_kt > self.alpha_lock_disengage_speed_kt:
            raise ValueError(
                "Alpha-lock speed band inverted: "
                f"engage={self.alpha_lock_engage_speed_kt} kt > "
                f"disengage={self.alpha_lock_disengage_speed_kt} kt"
            )

        if self.alpha_lock_engage_alpha_deg < self.alpha_lock_disengage_alpha_deg:
            raise ValueError(
                "Alpha-lock alpha band inverted: "
                f"engage={self.alpha_lock_engage_alpha_deg} deg < "
                f"disengage={self.alpha_lock_disengage_alpha_deg} deg"
            )

        if self.conf1f_entry_max_airspeed_kt > self.conf1f_retract_airspeed_kt:
            raise ValueError(
                "CONF 1+F entry airspeed exceeds retraction airspeed: "
                f"{self.conf1f_entry_max_airspeed_kt} kt > {self.conf1f_retract_airspeed_kt} kt"
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True


DEFAULT_CONFIGURATION = SfccConfiguration()
