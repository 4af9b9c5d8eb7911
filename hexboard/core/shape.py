"""
Kształty obszarowe (Shape) - szablony pól dla efektów obszarowych.

Shape to środek + lista współrzędnych WZGLĘDNYCH wobec środka.
Może zawierać środek (0, 0) albo nie (kształt "pusty w środku").

Obrót o 60° w cube coordinates to permutacja z negacją:
    (q, r, s) -> (-r, -s, -q)   zgodnie z zegarem
    (q, r, s) -> (-s, -q, -r)   przeciwnie do zegara

Sześć obrotów w tę samą stronę daje kształt wyjściowy.

Przykład użycia:
    >>> shape = Shape(HexCoord(-1, -2), [HexCoord(0, -1), HexCoord(1, -1)])
    >>> shape.rotate_clockwise()
    >>> shape.tiles
    [HexCoord(q=1, r=-1), HexCoord(q=1, r=0)]
    >>> shape.absolute()
    [HexCoord(q=0, r=-3), HexCoord(q=0, r=-2)]
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .direction import Direction
from .hex_coord import HexCoord


@dataclass
class Shape:
    """
    Szablon pól względem środka.

    Attributes:
        center (HexCoord): Środek kształtu (nie zmienia się przy obrocie)
        tiles (List[HexCoord]): Współrzędne względne, obracane w miejscu
    """
    center: HexCoord
    tiles: List[HexCoord] = field(default_factory=list)

    def rotate_clockwise(self) -> None:
        """Obraca wszystkie pola o 60° zgodnie z zegarem."""
        for i, tile in enumerate(self.tiles):
            q, r, s = tile.cube
            self.tiles[i] = HexCoord(-r, -s)

    def rotate_counterclockwise(self) -> None:
        """Obraca wszystkie pola o 60° przeciwnie do zegara."""
        for i, tile in enumerate(self.tiles):
            q, r, s = tile.cube
            self.tiles[i] = HexCoord(-s, -q)

    def rotate(self, steps: int) -> None:
        """
        Obraca o steps * 60°.

        Args:
            steps: Dodatnie = zgodnie z zegarem, ujemne = przeciwnie.
                   Liczone modulo 6.
        """
        for _ in range(steps % 6):
            self.rotate_clockwise()

    def absolute(self) -> List[HexCoord]:
        """Pola kształtu jako współrzędne na planszy (przesunięte o center)."""
        return [self.center + tile for tile in self.tiles]

    def rotate_to(self, facing: Direction, target: Direction) -> None:
        """
        Obraca kształt zwrócony w stronę facing tak, by patrzył na target.

        Example:
            >>> cone = Shape(HexCoord(0, 0), [HexCoord(1, 0), HexCoord(2, 0)])
            >>> cone.rotate_to(Direction.RIGHT, Direction.BOTTOM_RIGHT)
            >>> cone.tiles
            [HexCoord(q=0, r=1), HexCoord(q=0, r=2)]
        """
        self.rotate(target.index - facing.index)
