"""
Title: Flaps Handle Position Memory (FlapsHandle)
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-17
Version: 1.2

Purpose:
Holds the current and immediately prior discrete flaps lever detent. The
memory is refreshed exactly once per control tick by the electronic complex
and is read (never written) by both SFCC instances during that tick. The
(previous, current) pair is the sole driver of most configuration transitions.

Targeted Requirements:
- SFCC-FR001: Provides (previous, current) detent pairs for flaps transitions.
- SFCC-FR004: Provides (previous, current) detent pairs for slats transitions.
- SFCC-SR001: Out-of-range detents are rejected without corrupting the
  retained positions.

Scope and Limitations:
- Only one step of history is kept.
- Detents are integers in [0, 5]; no lever gating or baulk logic is modelled.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- flaps_conf.py

Related Documents:
- SFCC Requirements Specification
- SFCC System Architecture Description

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world aviation
or safety-critical systems.
"""

from flaps_conf import InvalidDetentError

HANDLE_POSITION_VARIABLE = "FLAPS_HANDLE_INDEX"

MIN_DETENT = 0
MAX_DETENT = 5


class FlapsHandle:
    def __init__(self, position_provider=None):
        self.position_provider = position_provider
        self._position: int = 0
        self._previous_position: int = 0

    def position(self) -> int:
        return self._position

    def previous_position(self) -> int:
        return self._previous_position

    def positions(self) -> tuple[int, int]:
        return self._previous_position, self._position

    def restore(self, positions: tuple[int, int]) -> None:
        # Rolls the memory back to a pair taken with positions().
        self._previous_position, self._position = positions

    def read(self, position: int) -> None:
        # Shifts current into previous, then stores the new detent.
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidDetentError(position, f"Flaps handle detent must be an integer, got {position!r}")
        if not MIN_DETENT <= position <= MAX_DETENT:
            raise InvalidDetentError(
                position,
                f"Flaps handle detent {position} outside [{MIN_DETENT}, {MAX_DETENT}]",
            )

        self._previous_position = self._position
        self._position = position

    def refresh(self) -> None:
        if self.position_provider is None:
            # No lever wired; hold both positions (handle treated as unmoved)
            self._previous_position = self._position
            return
        self.read(self.position_provider())
