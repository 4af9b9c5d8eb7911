"""
Kierunki na siatce hexagonalnej (pointy-top).

Sześć kierunków, zgodnie z zegarem, zaczynając od TOP_RIGHT:

    Indeks  Kierunek       (dq, dr)   Strzałka
    ───────────────────────────────────────────
    0       TOP_RIGHT      (+1, -1)   ↗
    1       RIGHT          (+1,  0)   →
    2       BOTTOM_RIGHT   ( 0, +1)   ↘
    3       BOTTOM_LEFT    (-1, +1)   ↙
    4       LEFT           (-1,  0)   ←
    5       TOP_LEFT       ( 0, -1)   ↖

Arytmetyka kierunków jest zawsze modulo 6:
    >>> Direction.from_index(-1)
    <Direction.TOP_LEFT: 5>
    >>> Direction.from_index(7)
    <Direction.RIGHT: 1>
    >>> str(Direction.RIGHT.clockwise())
    '↘'
"""

from __future__ import annotations
from enum import Enum
from typing import List, Tuple


# Delty (dq, dr) w kolejności indeksów kierunków.
# Jedyne miejsce w projekcie, gdzie są zdefiniowane.
DIRECTION_DELTAS: List[Tuple[int, int]] = [
    (+1, -1),  # TOP_RIGHT
    (+1, 0),   # RIGHT
    (0, +1),   # BOTTOM_RIGHT
    (-1, +1),  # BOTTOM_LEFT
    (-1, 0),   # LEFT
    (0, -1),   # TOP_LEFT
]

_ARROWS = ["↗", "→", "↘", "↙", "←", "↖"]


class Direction(Enum):
    """Jeden z 6 kierunków na siatce, wartość = indeks 0-5."""

    TOP_RIGHT = 0
    RIGHT = 1
    BOTTOM_RIGHT = 2
    BOTTOM_LEFT = 3
    LEFT = 4
    TOP_LEFT = 5

    @classmethod
    def from_index(cls, index: int) -> Direction:
        """
        Tworzy kierunek z dowolnej liczby całkowitej.

        Wartości spoza 0-5 są zawijane modulo 6, również ujemne
        (-1 -> TOP_LEFT). Nigdy nie rzuca wyjątku.

        Args:
            index: Dowolna liczba całkowita

        Returns:
            Direction: Kierunek o indeksie index % 6
        """
        return cls(index % 6)

    @property
    def index(self) -> int:
        return self.value

    @property
    def delta(self) -> Tuple[int, int]:
        """Przesunięcie (dq, dr) do sąsiada w tym kierunku."""
        return DIRECTION_DELTAS[self.value]

    def clockwise(self, steps: int = 1) -> Direction:
        """Kierunek obrócony o steps * 60° zgodnie z zegarem."""
        return Direction.from_index(self.value + steps)

    def counterclockwise(self, steps: int = 1) -> Direction:
        """Kierunek obrócony o steps * 60° przeciwnie do zegara."""
        return Direction.from_index(self.value - steps)

    def opposite(self) -> Direction:
        return self.clockwise(3)

    def __str__(self) -> str:
        return _ARROWS[self.value]


ALL_DIRECTIONS: List[Direction] = list(Direction)
