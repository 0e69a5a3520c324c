"""
player.py - Players taking part in a Connect Four session
"""

from dataclasses import dataclass


@dataclass
class Player:
    """A named participant and the points collected so far in the session."""
    name: str
    score: int = 0

    def award(self, points: int) -> None:
        if points < 0:
            raise ValueError("Scores never decrease")
        self.score += points
