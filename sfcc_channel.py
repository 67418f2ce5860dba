"""
Title: SFCC Channel Base (Feedback, Demand and Drive Signal)
Author: Alex Cooke
Date Created: 2026-10-13
Last Modified: 2026-10-16
Version: 1.2

Purpose:
Provides the behaviour shared by the flaps and slats channels of a Slats/Flaps
Control Computer: retained channel state (feedback angle, demanded angle and
calculated configuration), reception of the surface feedback position, the
feedback-versus-demand drive signal, and logging of configuration changes and
drive signal edges. Concrete channels supply the configuration transition
table and the configuration-to-angle lookup.

Targeted Requirements:
- SFCC-FR003: Drive signal is TRUE iff |demanded - feedback| >= 0.01 deg.
- SFCC-FR009: Demanded angle is derived from the calculated configuration
  through a fixed lookup.
- SFCC-SR001: A tick whose configuration cannot be computed leaves the
  retained channel state unchanged.

Scope and Limitations:
- No actuator dynamics or position control loop is modelled; the drive signal
  is a binary mismatch indication only.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- abc (standard library)
- logging (standard library)
- flaps_conf.py
- sfcc_configuration.py

Related Documents:
- SFCC Requirements Specification
- SFCC System Architecture Description

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

import logging
from abc import ABC, abstractmethod

from flaps_conf import FlapsConf
from sfcc_configuration import DEFAULT_CONFIGURATION, SfccConfiguration

logger = logging.getLogger(__name__)


class SfccChannel(ABC):
    SURFACE = "SURFACE"

    def __init__(self, config: SfccConfiguration = DEFAULT_CONFIGURATION, name: str | None = None):
        self._config = config
        self.name = name or self.SURFACE

        self._feedback_angle_deg: float = 0.0
        self._demanded_angle_deg: float = 0.0
        self._calculated_conf: FlapsConf = FlapsConf.CONF_0

        # Remember last value (to avoid continuous spamming)
        self._last_drive_signal: bool | None = None

    # -------------------------
    # Properties / small helpers
    # -------------------------

    @property
    def config(self) -> SfccConfiguration:
        return self._config

    @property
    def feedback_angle_deg(self) -> float:
        return self._feedback_angle_deg

    @property
    def demanded_angle_deg(self) -> float:
        return self._demanded_angle_deg

    @property
    def calculated_conf(self) -> FlapsConf:
        return self._calculated_conf

    def log(self, msg: str) -> None:
        logger.info(msg)

    def receive_signal(self, feedback) -> None:
        self._feedback_angle_deg = float(feedback.angle())

    def feedback_equals_demanded(self) -> bool:
        delta = abs(self._demanded_angle_deg - self._feedback_angle_deg)
        return delta < self._config.equal_angle_delta_deg

    def send_signal_to_motors(self) -> bool:
        return not self.feedback_equals_demanded()

    @abstractmethod
    def demanded_angle_from_conf(self, conf: FlapsConf) -> float:
        ...

    # -------------------------
    # Commit
    # -------------------------

    def _commit(self, feedback, conf: FlapsConf) -> None:
        # Only called once the new configuration is known to be valid.
        self.receive_signal(feedback)

        if conf != self._calculated_conf:
            self.log(
                f"{self.name}: configuration {self._calculated_conf.name} -> {conf.name}"
            )

        self._calculated_conf = conf
        self._demanded_angle_deg = self.demanded_angle_from_conf(conf)

        drive = self.send_signal_to_motors()
        if drive != self._last_drive_signal:
            self.log(f"{self.name}: drive signal {drive}")
            self._last_drive_signal = drive
