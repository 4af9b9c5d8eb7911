"""
System współrzędnych hexagonalnych (Axial Coordinates).

Używamy Axial Coordinates (q, r) gdzie:
- q = kolumna (oś pozioma)
- r = wiersz (oś ukośna)

Konwersja do Cube Coordinates:
    s = -q - r
    Cube: (q, r, s) gdzie q + r + s = 0

Sąsiedzi (pointy-top, zgodnie z zegarem od TOP_RIGHT) są zdefiniowani
w module direction - dodanie kierunku do współrzędnej daje sąsiada:
    >>> HexCoord(0, 0) + Direction.RIGHT
    HexCoord(q=1, r=0)

Współrzędne offset (x, y) to indeksy prostokątnej siatki używanej
przy generowaniu planszy (układ "even-r"):
    r = y
    q = x - (y - (y & 1)) / 2

Odległość między hexami:
    distance = (|dq| + |dq + dr| + |dr|) / 2

Przykład użycia:
    >>> a = HexCoord(0, 0)
    >>> b = HexCoord(2, 1)
    >>> a.distance(b)
    3
    >>> HexCoord.from_offset(3, 2)
    HexCoord(q=2, r=2)
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union, TYPE_CHECKING

from .direction import ALL_DIRECTIONS, Direction

if TYPE_CHECKING:
    from .board import Board, Tile


# Przesunięcie startu linii. Punkty leżące dokładnie na krawędzi hexa
# są niejednoznaczne przy zaokrąglaniu - przesunięcie w dwie przeciwne
# strony daje dwie deterministyczne wersje tej samej linii.
LINE_EPSILON: Tuple[float, float] = (1e-6, 2e-6)

# Stożek kierunku = sektor 120° rozpięty przez dwóch sąsiadów kierunku.
# Każda para (a, b, znak) oznacza nierówność: znak * (a*dq + b*dr) >= 0,
# czyli półpłaszczyznę na osi q (1, 0), r (0, 1) albo q+r (1, 1).
# Kierunki przeciwne mają zanegowane pary.
_CONE_BOUNDS = {
    Direction.TOP_RIGHT: ((1, 0, +1), (0, 1, -1)),
    Direction.RIGHT: ((1, 0, +1), (1, 1, +1)),
    Direction.BOTTOM_RIGHT: ((0, 1, +1), (1, 1, +1)),
    Direction.BOTTOM_LEFT: ((1, 0, -1), (0, 1, +1)),
    Direction.LEFT: ((1, 0, -1), (1, 1, -1)),
    Direction.TOP_LEFT: ((0, 1, -1), (1, 1, -1)),
}


@dataclass(frozen=True)
class HexCoord:
    """
    Współrzędna hexagonalna w systemie axial (q, r).

    Klasa jest niemutowalna (frozen=True).
    Może być używana jako klucz w słowniku lub element zbioru.
    Równość i hash zależą wyłącznie od (q, r).

    Attributes:
        q (int): Współrzędna kolumny (oś pozioma)
        r (int): Współrzędna wiersza (oś ukośna)

    Note:
        Współrzędna s w systemie cube jest wyliczana jako: s = -q - r
    """
    q: int
    r: int

    # ─────────────────────────────────────────────────────────────────────────
    # KONSTRUKCJA
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_offset(cls, x: int, y: int) -> HexCoord:
        """
        Konwertuje indeks offset (kolumna x, wiersz y) na axial.

        Wzór (even-r):
            r = y
            q = x - (y - (y & 1)) / 2

        Dzielenie jest zawsze dokładne, bo y - (y & 1) jest parzyste.

        Args:
            x: Kolumna w prostokątnej siatce
            y: Wiersz w prostokątnej siatce

        Returns:
            HexCoord: Współrzędne axial
        """
        return cls(x - (y - (y & 1)) // 2, y)

    def to_offset(self) -> Tuple[int, int]:
        """Odwrotność from_offset - zwraca (x, y)."""
        return (self.q + (self.r - (self.r & 1)) // 2, self.r)

    # ─────────────────────────────────────────────────────────────────────────
    # WŁAŚCIWOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def s(self) -> int:
        """
        Trzecia współrzędna w systemie cube.

        Returns:
            int: Wartość s spełniająca q + r + s = 0
        """
        return -self.q - self.r

    @property
    def cube(self) -> Tuple[int, int, int]:
        return (self.q, self.r, self.s)

    def to_float(self) -> FloatHexCoord:
        return FloatHexCoord(float(self.q), float(self.r))

    # ─────────────────────────────────────────────────────────────────────────
    # ODLEGŁOŚĆ
    # ─────────────────────────────────────────────────────────────────────────

    def distance(self, other: HexCoord) -> int:
        """
        Oblicza odległość Manhattan między dwoma hexami.

        Wzór (cube distance):
            distance = (|dq| + |dq + dr| + |dr|) / 2

        Args:
            other: Druga współrzędna hexagonalna

        Returns:
            int: Odległość w liczbie kroków (hexów)

        Example:
            >>> HexCoord(0, 0).distance(HexCoord(2, 1))
            3
        """
        dq = self.q - other.q
        dr = self.r - other.r
        return (abs(dq) + abs(dq + dr) + abs(dr)) // 2

    # ─────────────────────────────────────────────────────────────────────────
    # SĄSIEDZI
    # ─────────────────────────────────────────────────────────────────────────

    def neighbor(self, direction: Union[Direction, int]) -> HexCoord:
        """
        Zwraca sąsiada w określonym kierunku.

        Args:
            direction: Kierunek albo dowolny indeks (zawijany modulo 6)

        Returns:
            HexCoord: Sąsiad w podanym kierunku
        """
        if not isinstance(direction, Direction):
            direction = Direction.from_index(direction)
        dq, dr = direction.delta
        return HexCoord(self.q + dq, self.r + dr)

    def neighbors(self) -> List[HexCoord]:
        """Zwraca 6 sąsiadów w kolejności kierunków (od TOP_RIGHT)."""
        return [self.neighbor(direction) for direction in ALL_DIRECTIONS]

    # ─────────────────────────────────────────────────────────────────────────
    # LINIA DO CELU
    # ─────────────────────────────────────────────────────────────────────────

    def line(self, other: HexCoord) -> Tuple[List[HexCoord], List[HexCoord]]:
        """
        Zwraca dwie wersje linii prostej do celu (bez końców).

        Interpolacja liniowa w przestrzeni axial, po przesunięciu startu
        o +LINE_EPSILON (pierwsza lista) i -LINE_EPSILON (druga lista).
        Każda próbka jest zaokrąglana do hexa (cube_round).

        Gdy linia biegnie dokładnie po krawędzi hexów, obie wersje
        rozstrzygają remis w przeciwne strony. Wywołujący wybiera jedną.

        Args:
            other: Cel linii

        Returns:
            Tuple[List[HexCoord], List[HexCoord]]: (linia "w górę", linia "w dół"),
                obie bez self i other

        Example:
            >>> HexCoord(0, 0).line(HexCoord(3, 0))
            ([HexCoord(q=1, r=0), HexCoord(q=2, r=0)], [HexCoord(q=1, r=0), HexCoord(q=2, r=0)])
            >>> HexCoord(0, 0).line(HexCoord(1, 1))
            ([HexCoord(q=0, r=1)], [HexCoord(q=1, r=0)])
        """
        # a == b: dystans traktowany jako 1, wynik pusty
        n = max(self.distance(other), 1)
        eq, er = LINE_EPSILON
        return (
            self._nudged_line(other, n, eq, er),
            self._nudged_line(other, n, -eq, -er),
        )

    def _nudged_line(
        self,
        other: HexCoord,
        n: int,
        nudge_q: float,
        nudge_r: float,
    ) -> List[HexCoord]:
        start = FloatHexCoord(self.q + nudge_q, self.r + nudge_r)
        end = other.to_float()
        return [start.lerp(end, i / n).round() for i in range(1, n)]

    # ─────────────────────────────────────────────────────────────────────────
    # STOŻEK I WIDOCZNOŚĆ
    # ─────────────────────────────────────────────────────────────────────────

    def in_cone(self, other: HexCoord, direction: Direction) -> bool:
        """
        Sprawdza czy other leży w stożku wychodzącym z self w danym kierunku.

        Stożek to sektor 120° ograniczony przez dwóch sąsiadów kierunku
        (np. dla RIGHT: TOP_RIGHT i BOTTOM_RIGHT). Krawędzie należą do
        stożka, self należy do każdego stożka.

        Args:
            other: Sprawdzany hex
            direction: Kierunek osi stożka

        Returns:
            bool: True jeśli other jest w stożku

        Example:
            >>> HexCoord(0, 0).in_cone(HexCoord(3, -1), Direction.RIGHT)
            True
            >>> HexCoord(0, 0).in_cone(HexCoord(3, -1), Direction.LEFT)
            False
        """
        dq = other.q - self.q
        dr = other.r - self.r
        return all(
            sign * (a * dq + b * dr) >= 0
            for a, b, sign in _CONE_BOUNDS[direction]
        )

    def strict_line(
        self,
        board: "Board",
        target: HexCoord,
        predicate: Optional[Callable[[Optional["Tile"]], bool]] = None,
    ) -> bool:
        """
        Czy istnieje linia widoczności do target. Patrz line_of_sight.strict_line.
        """
        from .line_of_sight import strict_line
        return strict_line(self, board, target, predicate)

    # ─────────────────────────────────────────────────────────────────────────
    # RING I SPIRAL
    # ─────────────────────────────────────────────────────────────────────────

    def ring(self, radius: int) -> List[HexCoord]:
        """
        Zwraca wszystkie hexy dokładnie w odległości radius.

        Note:
            - radius=0 zwraca [self]
            - radius=n zwraca 6*n hexów (dla n > 0)
        """
        if radius == 0:
            return [self]

        results: List[HexCoord] = []
        dq, dr = Direction.LEFT.delta
        current = HexCoord(self.q + dq * radius, self.r + dr * radius)

        for direction in ALL_DIRECTIONS:
            for _ in range(radius):
                results.append(current)
                current = current + direction

        return results

    def spiral(self, radius: int) -> Iterator[HexCoord]:
        """Hexy warstwami: centrum, potem ring(1), ring(2), ... ring(radius)."""
        for r in range(radius + 1):
            yield from self.ring(r)

    # ─────────────────────────────────────────────────────────────────────────
    # OPERATORY ARYTMETYCZNE
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: Union[HexCoord, Direction]) -> HexCoord:
        """Dodawanie współrzędnych albo kierunku (= sąsiad)."""
        if isinstance(other, Direction):
            return self.neighbor(other)
        if isinstance(other, HexCoord):
            return HexCoord(self.q + other.q, self.r + other.r)
        return NotImplemented

    def __sub__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q - other.q, self.r - other.r)

    def __neg__(self) -> HexCoord:
        return HexCoord(-self.q, -self.r)

    # ─────────────────────────────────────────────────────────────────────────
    # REPREZENTACJA
    # ─────────────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"HexCoord(q={self.q}, r={self.r})"

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


@dataclass(frozen=True)
class FloatHexCoord:
    """
    Ułamkowa współrzędna axial - punkt wewnątrz hexa.

    Używana tylko do interpolacji (linie, narożniki, piksele).
    Nigdy nie jest przechowywana na planszy.
    """
    q: float
    r: float

    @property
    def s(self) -> float:
        return -self.q - self.r

    def lerp(self, other: FloatHexCoord, t: float) -> FloatHexCoord:
        """Punkt w ułamku t drogi od self do other."""
        return FloatHexCoord(
            self.q + (other.q - self.q) * t,
            self.r + (other.r - self.r) * t,
        )

    def round(self) -> HexCoord:
        """Hex zawierający ten punkt."""
        return cube_round(self.q, self.r, self.s)

    def __add__(self, other: FloatHexCoord) -> FloatHexCoord:
        return FloatHexCoord(self.q + other.q, self.r + other.r)

    def __str__(self) -> str:
        return f"({self.q:.2f}, {self.r:.2f})"


# ─────────────────────────────────────────────────────────────────────────────
# FUNKCJE POMOCNICZE
# ─────────────────────────────────────────────────────────────────────────────

def _round_half_away(value: float) -> int:
    """Zaokrągla do int, połówki od zera (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def cube_round(q: float, r: float, s: float) -> HexCoord:
    """
    Zaokrągla współrzędne cube do najbliższego hexa.

    Algorytm:
    1. Zaokrąglij każdą współrzędną do najbliższej int (połówki od zera)
    2. Znajdź współrzędną z największym błędem zaokrąglenia
    3. Skoryguj ją tak, żeby q + r + s = 0

    Remisy: q jest korygowane tylko przy ściśle największym błędzie,
    przy remisie q/r korygowane jest r.

    Args:
        q, r, s: Współrzędne cube (float)

    Returns:
        HexCoord: Najbliższy hex
    """
    rq = _round_half_away(q)
    rr = _round_half_away(r)
    rs = _round_half_away(s)

    dq = abs(rq - q)
    dr = abs(rr - r)
    ds = abs(rs - s)

    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    # else: rs = -rq - rr (nie używamy s w axial)

    return HexCoord(int(rq), int(rr))
