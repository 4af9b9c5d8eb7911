"""
Projekcja współrzędnych axial na piksele ekranu i z powrotem.

Macierz projekcji (dla wektora (r, q)):

    M = D * | cos(π/3)  1 |
            | sin(π/3)  0 |

    gdzie D = hex_size * hex_diameter_factor

Czyli:
    x = D * (q + r * cos(π/3))
    y = D * r * sin(π/3)

Współczynnik 1.9 leży między sqrt(3) (hexy stykają się krawędziami)
a 2 - rysowane hexy o promieniu hex_size mają między sobą szczelinę.

Początek układu (hex (0, 0)) jest w punkcie
(viewport_width / 4, viewport_height / 5).

Odwrotna projekcja daje ułamkowe (q, r), które zaokrąglamy przez
cube_round - każdy piksel trafia do dokładnie jednego hexa.

Przykład użycia:
    >>> layout = HexLayout(hex_size=30.0)
    >>> x, y = layout.hex_to_pixel(HexCoord(2, 1))
    >>> layout.pixel_to_hex(x, y)
    HexCoord(q=2, r=1)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple
import math

from .hex_coord import FloatHexCoord, HexCoord


Matrix = Tuple[Tuple[float, float], Tuple[float, float]]


@dataclass
class HexLayout:
    """
    Konfiguracja geometrii ekranu i wyliczone z niej macierze.

    Macierz i jej odwrotność są liczone raz w __post_init__.
    Nie zmieniaj pól po utworzeniu - stwórz nowy layout.

    Attributes:
        hex_size (float): Promień rysowanego hexa w pikselach
        hex_diameter_factor (float): Odstęp środków hexów w jednostkach hex_size
        viewport_width (int): Szerokość okna (tylko do wyznaczenia początku)
        viewport_height (int): Wysokość okna (tylko do wyznaczenia początku)
    """
    hex_size: float = 30.0
    hex_diameter_factor: float = 1.9
    viewport_width: int = 1920
    viewport_height: int = 1080

    _forward: Matrix = field(init=False, repr=False)
    _inverse: Matrix = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.hex_size <= 0:
            raise ValueError(f"hex_size must be positive, got {self.hex_size}")
        if self.hex_diameter_factor <= 0:
            raise ValueError(
                f"hex_diameter_factor must be positive, got {self.hex_diameter_factor}"
            )
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError(
                f"Invalid viewport {self.viewport_width}x{self.viewport_height}"
            )

        d = self.hex_diameter
        self._forward = (
            (d * math.cos(math.pi / 3), d),
            (d * math.sin(math.pi / 3), 0.0),
        )
        self._inverse = _invert(self._forward)

    # ─────────────────────────────────────────────────────────────────────────
    # WŁAŚCIWOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def hex_diameter(self) -> float:
        """Odległość w pikselach między środkami sąsiednich hexów."""
        return self.hex_size * self.hex_diameter_factor

    @property
    def origin(self) -> Tuple[float, float]:
        """Piksel środka hexa (0, 0)."""
        return (self.viewport_width / 4, self.viewport_height / 5)

    # ─────────────────────────────────────────────────────────────────────────
    # KONWERSJE
    # ─────────────────────────────────────────────────────────────────────────

    def hex_to_pixel(self, coord: HexCoord) -> Tuple[float, float]:
        """
        Środek hexa w pikselach.

        Args:
            coord: Współrzędne axial

        Returns:
            Tuple[float, float]: (x, y) w pikselach
        """
        (a, b), (c, d) = self._forward
        ox, oy = self.origin
        x = a * coord.r + b * coord.q
        y = c * coord.r + d * coord.q
        return (x + ox, y + oy)

    def pixel_to_float(self, x: float, y: float) -> FloatHexCoord:
        """Ułamkowe współrzędne axial punktu (x, y)."""
        (a, b), (c, d) = self._inverse
        ox, oy = self.origin
        px = x - ox
        py = y - oy
        r = a * px + b * py
        q = c * px + d * py
        return FloatHexCoord(q, r)

    def pixel_to_hex(self, x: float, y: float) -> HexCoord:
        """
        Hex zawierający piksel (x, y).

        Returns:
            HexCoord: Zaokrąglone (cube_round) współrzędne axial
        """
        return self.pixel_to_float(x, y).round()

    def hex_corners(self, coord: HexCoord) -> List[Tuple[float, float]]:
        """
        Sześć wierzchołków rysowanego hexa (pointy-top).

        Wierzchołek i leży pod kątem 60° * i - 30° od środka,
        w odległości hex_size.

        Returns:
            List[Tuple[float, float]]: Wierzchołki w pikselach
        """
        cx, cy = self.hex_to_pixel(coord)
        corners = []
        for i in range(6):
            angle = math.radians(60 * i - 30)
            corners.append((
                cx + self.hex_size * math.cos(angle),
                cy + self.hex_size * math.sin(angle),
            ))
        return corners


def _invert(m: Matrix) -> Matrix:
    (a, b), (c, d) = m
    det = a * d - b * c
    return (
        (d / det, -b / det),
        (-c / det, a / det),
    )
