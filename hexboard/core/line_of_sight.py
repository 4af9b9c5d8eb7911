"""
Linia widoczności (line of sight) między dwoma hexami.

Pytanie: "czy z jakiegokolwiek kawałka mojego hexa widać jakikolwiek
kawałek hexa celu?"

Jak działa:
    1. Każdy hex ma 6 punktów narożnych (start i cel)
    2. Dla każdej z 36 par (narożnik startu, narożnik celu):
       - prowadzimy odcinek między punktami
       - próbkujemy go 16 razy na jednostkę odległości hex
       - każdą próbkę zaokrąglamy do hexa (cube_round)
       - predicate(board.get(hex)) musi przepuścić każdą próbkę
    3. Pierwsza para bez blokady = widać (True)
    4. Wszystkie 36 par zablokowane = nie widać (False)

Punkty narożne:
    Wierzchołek i hexa w axial to (D[i] + D[i+1]) / 3, gdzie D to delty
    kierunków. Punkty leżą tuż wewnątrz wierzchołków (CORNER_INSET),
    bo sam wierzchołek jest wspólny dla trzech hexów i cube_round
    mógłby go przypisać sąsiadowi.

Złożoność: O(36 * distance * 16) wywołań cube_round.

Przykład użycia:
    >>> board = Board.from_coords(HexCoord(0, 0).spiral(3))
    >>> strict_line(HexCoord(0, 0), board, HexCoord(3, 0))
    True
    >>> board.fill(HexCoord(1, 0))
    >>> board.fill(HexCoord(2, 0))
    >>> strict_line(HexCoord(0, 0), board, HexCoord(3, 0))
    False
"""

from __future__ import annotations
from typing import Callable, List, Optional, TYPE_CHECKING

from .direction import DIRECTION_DELTAS
from .hex_coord import FloatHexCoord, HexCoord

if TYPE_CHECKING:
    from .board import Board, Tile


SAMPLES_PER_HEX = 16
CORNER_INSET = 0.999

# Wierzchołki hexa (0, 0) w axial, narożnik i leży między kierunkami i oraz i+1
_CORNER_OFFSETS: List[FloatHexCoord] = [
    FloatHexCoord(
        CORNER_INSET * (DIRECTION_DELTAS[i][0] + DIRECTION_DELTAS[(i + 1) % 6][0]) / 3,
        CORNER_INSET * (DIRECTION_DELTAS[i][1] + DIRECTION_DELTAS[(i + 1) % 6][1]) / 3,
    )
    for i in range(6)
]


def tile_is_free(tile: Optional["Tile"]) -> bool:
    """Domyślny predykat: pole istnieje i jest wolne."""
    return tile is not None and tile.free


def corner_points(coord: HexCoord) -> List[FloatHexCoord]:
    """
    Sześć punktów narożnych hexa (tuż wewnątrz wierzchołków).

    Returns:
        List[FloatHexCoord]: Punkty w kolejności kierunków
    """
    center = coord.to_float()
    return [center + offset for offset in _CORNER_OFFSETS]


def _segment_clear(
    board: "Board",
    start: FloatHexCoord,
    end: FloatHexCoord,
    samples: int,
    predicate: Callable[[Optional["Tile"]], bool],
) -> bool:
    """Czy każda próbka odcinka przechodzi przez predicate."""
    previous: Optional[HexCoord] = None
    for k in range(samples + 1):
        coord = start.lerp(end, k / samples).round()
        # Kolejne próbki często trafiają do tego samego hexa
        if coord == previous:
            continue
        if not predicate(board.get(coord)):
            return False
        previous = coord
    return True


def strict_line(
    origin: HexCoord,
    board: "Board",
    target: HexCoord,
    predicate: Optional[Callable[[Optional["Tile"]], bool]] = None,
) -> bool:
    """
    Sprawdza czy istnieje niezablokowana linia widoczności.

    Args:
        origin: Hex obserwatora
        board: Plansza
        target: Hex celu
        predicate: Funkcja (Optional[Tile]) -> bool, True = przepuszcza.
                   Dostaje None dla pól poza planszą.
                   Domyślnie tile_is_free.

    Returns:
        bool: True jeśli choć jedna z 36 par narożników jest niezablokowana

    Note:
        Próbkowane są też hexy origin i target - zajęty cel
        jest niewidoczny przy domyślnym predykacie.
    """
    predicate = predicate or tile_is_free
    samples = max(origin.distance(target), 1) * SAMPLES_PER_HEX

    target_corners = corner_points(target)
    for start in corner_points(origin):
        for end in target_corners:
            if _segment_clear(board, start, end, samples, predicate):
                return True

    return False


def visible_tiles(
    origin: HexCoord,
    board: "Board",
    predicate: Optional[Callable[[Optional["Tile"]], bool]] = None,
) -> List[HexCoord]:
    """
    Zwraca wszystkie wolne pola widoczne z origin.

    Zajęte pola są pomijane bez sprawdzania.

    Args:
        origin: Hex obserwatora
        board: Plansza
        predicate: Jak w strict_line

    Returns:
        List[HexCoord]: Widoczne wolne pola
    """
    return [
        coord
        for coord, tile in board
        if tile.free and strict_line(origin, board, coord, predicate)
    ]
