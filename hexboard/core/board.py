"""
Plansza hexagonalna (Board) z polami wolnymi i zajętymi.

Board zarządza przestrzenią gry:
- Przechowuje pola (Tile) w słowniku HexCoord -> Tile
- Generuje kształt planszy i losowe przeszkody
- Odpowiada na pytania o sąsiadów, ścieżki i widoczność

Sąsiedztwo nie jest przechowywane - liczymy je z delt kierunków.
Po wygenerowaniu plansza nie rośnie i nie maleje, zmienia się tylko
flaga free poszczególnych pól.

Kształty planszy (BoardShape):
    CANONICAL - prostokąt offset width x height, ostatnia kolumna
                przycięta w nieparzystych wierszach, wycięte pola
                (0, y) i (width-1, y) dla y w notch_rows
    RECTANGLE - pełny prostokąt offset width x height
    HEXAGON   - wszystkie hexy w odległości <= radius od (0, 0)

Układ offset (even-r, wiersze nieparzyste przesunięte w prawo):

    y=0:  (0,0) (1,0) (2,0) (3,0) ...
    y=1:     (0,1) (1,1) (2,1) (3,1) ...
    y=2:  (0,2) (1,2) (2,2) (3,2) ...

Przykład użycia:
    >>> board = Board.generate(BoardConfig(p_free=1.0))
    >>> board.get(HexCoord(0, 0))
    Tile(free=False)
    >>> board.get(HexCoord(-10, 0)) is None
    True
    >>> board.path(HexCoord(1, 0), HexCoord(3, 0))
    [HexCoord(q=2, r=0), HexCoord(q=3, r=0)]
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING

from .direction import ALL_DIRECTIONS
from .hex_coord import HexCoord
from .line_of_sight import strict_line, visible_tiles
from .pathfinding import find_path
from .rng import GameRNG

if TYPE_CHECKING:
    from ..events.event_logger import EventLogger


TilePredicate = Callable[[Optional["Tile"]], bool]


@dataclass(frozen=True)
class Tile:
    """
    Stan pojedynczego pola.

    Niemutowalny - Board podmienia wpis przy free()/fill(),
    więc Tile zwrócony z get() jest migawką stanu.
    """
    free: bool = True


class BoardShape(Enum):
    """Kształt generowanej planszy."""
    CANONICAL = "canonical"
    RECTANGLE = "rectangle"
    HEXAGON = "hexagon"


@dataclass
class BoardConfig:
    """
    Parametry generowania planszy.

    Attributes:
        width (int): Liczba kolumn offset (CANONICAL, RECTANGLE)
        height (int): Liczba wierszy offset (CANONICAL, RECTANGLE)
        p_free (float): Szansa, że pole jest wolne (0.92 = ~8% przeszkód)
        shape (BoardShape): Kształt planszy (można podać string)
        radius (int): Promień planszy HEXAGON
        notch_rows (Tuple[int, ...]): Wiersze z wyciętymi skrajnymi polami (CANONICAL)
        seed (Optional[int]): Ziarno losowości, None = z entropii systemu
    """
    width: int = 15
    height: int = 15
    p_free: float = 0.92
    shape: BoardShape = BoardShape.CANONICAL
    radius: int = 7
    notch_rows: Tuple[int, ...] = (4, 10)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.shape, BoardShape):
            try:
                self.shape = BoardShape(self.shape)
            except ValueError:
                raise ValueError(f"Unknown board shape '{self.shape}'") from None
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid board size {self.width}x{self.height}")
        if self.radius < 0:
            raise ValueError(f"Radius must be non-negative, got {self.radius}")
        if not 0.0 <= self.p_free <= 1.0:
            raise ValueError(f"p_free must be in [0, 1], got {self.p_free}")
        self.notch_rows = tuple(self.notch_rows)


def footprint(config: BoardConfig) -> List[HexCoord]:
    """
    Zwraca współrzędne pól planszy w kolejności generowania.

    Dla kształtów offset iterujemy x na zewnątrz, y wewnątrz -
    ta kolejność wyznacza, które losowanie trafia do którego pola.

    Args:
        config: Konfiguracja planszy

    Returns:
        List[HexCoord]: Pola planszy (bez duplikatów)
    """
    if config.shape == BoardShape.HEXAGON:
        return list(HexCoord(0, 0).spiral(config.radius))

    last_column = config.width - 1
    coords = []
    for x in range(config.width):
        for y in range(config.height):
            if config.shape == BoardShape.CANONICAL:
                # Przycięcie ostatniej kolumny w nieparzystych wierszach
                if x == last_column and y & 1:
                    continue
                if x in (0, last_column) and y in config.notch_rows:
                    continue
            coords.append(HexCoord.from_offset(x, y))
    return coords


class Board:
    """
    Plansza: słownik HexCoord -> Tile.

    Brak wewnętrznych blokad - plansza ma jednego właściciela.
    Przy dostępie z wielu wątków opakuj ją zewnętrznym lockiem.

    Attributes:
        seed (Optional[int]): Ziarno, z którego wygenerowano planszę
        logger (Optional[EventLogger]): Log zdarzeń (opcjonalny)
        _tiles (Dict[HexCoord, Tile]): Pola planszy
    """

    def __init__(
        self,
        tiles: Dict[HexCoord, Tile],
        seed: Optional[int] = None,
        logger: Optional["EventLogger"] = None,
    ):
        self._tiles: Dict[HexCoord, Tile] = dict(tiles)
        self.seed = seed
        self.logger = logger

    # ─────────────────────────────────────────────────────────────────────────
    # TWORZENIE
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def generate(
        cls,
        config: Optional[BoardConfig] = None,
        rng: Optional[GameRNG] = None,
        logger: Optional["EventLogger"] = None,
    ) -> Board:
        """
        Generuje nową planszę z losowymi przeszkodami.

        Każde pole jest niezależnie wolne z prawdopodobieństwem p_free.
        Pole offset (0, 0) jest zawsze zajęte, niezależnie od losowania.

        Args:
            config: Konfiguracja (domyślnie BoardConfig())
            rng: Źródło losowości (domyślnie GameRNG(config.seed)),
                 używane tylko w trakcie generowania
            logger: Opcjonalny log zdarzeń

        Returns:
            Board: Nowa plansza
        """
        config = config or BoardConfig()
        rng = rng or GameRNG(config.seed)

        tiles: Dict[HexCoord, Tile] = {}
        for coord in footprint(config):
            tiles[coord] = Tile(free=rng.roll_chance(config.p_free))

        origin = HexCoord.from_offset(0, 0)
        if origin in tiles:
            tiles[origin] = Tile(free=False)

        board = cls(tiles, seed=rng.seed, logger=logger)
        if logger is not None:
            filled = [c for c, t in tiles.items() if not t.free]
            logger.log_board_generated(rng.seed, len(tiles), filled)
        return board

    @classmethod
    def from_coords(
        cls,
        coords: Iterable[HexCoord],
        free: bool = True,
        logger: Optional["EventLogger"] = None,
    ) -> Board:
        """Plansza z podanych pól, wszystkie w tym samym stanie."""
        return cls({c: Tile(free=free) for c in coords}, logger=logger)

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPYTANIA I ZMIANY
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, coord: HexCoord) -> Optional[Tile]:
        """
        Zwraca pole planszy.

        Returns:
            Optional[Tile]: Pole lub None jeśli coord jest poza planszą
        """
        return self._tiles.get(coord)

    def free(self, coord: HexCoord) -> None:
        """Oznacza pole jako wolne. Poza planszą nic nie robi."""
        if coord not in self._tiles:
            return
        self._tiles[coord] = Tile(free=True)
        if self.logger is not None:
            self.logger.log_free(coord)

    def fill(self, coord: HexCoord) -> None:
        """Oznacza pole jako zajęte. Poza planszą nic nie robi."""
        if coord not in self._tiles:
            return
        self._tiles[coord] = Tile(free=False)
        if self.logger is not None:
            self.logger.log_fill(coord)

    def toggle(self, coord: HexCoord) -> Optional[Tile]:
        """
        Przełącza stan pola (wolne <-> zajęte).

        Returns:
            Optional[Tile]: Nowy stan pola lub None poza planszą
        """
        tile = self._tiles.get(coord)
        if tile is None:
            return None
        if tile.free:
            self.fill(coord)
        else:
            self.free(coord)
        return self._tiles[coord]

    def neighbours(self, coord: HexCoord) -> List[HexCoord]:
        """
        Zwraca sąsiadów istniejących na planszy.

        Kolejność zgodna z kierunkami (od TOP_RIGHT, zgodnie z zegarem).
        Zajętość pól nie jest sprawdzana.

        Args:
            coord: Pozycja bazowa (może być poza planszą)

        Returns:
            List[HexCoord]: 0-6 sąsiadów
        """
        result = []
        for direction in ALL_DIRECTIONS:
            target = coord + direction
            if target in self._tiles:
                result.append(target)
        return result

    def coordinates(self) -> List[HexCoord]:
        """Wszystkie pola planszy."""
        return list(self._tiles)

    def free_coordinates(self) -> List[HexCoord]:
        """Wszystkie wolne pola planszy."""
        return [c for c, t in self._tiles.items() if t.free]

    def __contains__(self, coord: object) -> bool:
        return coord in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tuple[HexCoord, Tile]]:
        return iter(list(self._tiles.items()))

    # ─────────────────────────────────────────────────────────────────────────
    # ŚCIEŻKI I WIDOCZNOŚĆ
    # ─────────────────────────────────────────────────────────────────────────

    def path(self, start: HexCoord, goal: HexCoord) -> Optional[List[HexCoord]]:
        """
        Najkrótsza ścieżka po wolnych polach. Patrz pathfinding.find_path.

        Returns:
            Optional[List[HexCoord]]: Ścieżka bez start, z goal; None gdy brak
        """
        result = find_path(self, start, goal)
        if self.logger is not None:
            self.logger.log_path(start, goal, result)
        return result

    def line_of_sight(
        self,
        origin: HexCoord,
        target: HexCoord,
        predicate: Optional[TilePredicate] = None,
    ) -> bool:
        """Czy z origin widać target. Patrz line_of_sight.strict_line."""
        visible = strict_line(origin, self, target, predicate)
        if self.logger is not None:
            self.logger.log_line_of_sight(origin, target, visible)
        return visible

    def visible_from(
        self,
        origin: HexCoord,
        predicate: Optional[TilePredicate] = None,
    ) -> List[HexCoord]:
        """Wolne pola widoczne z origin. Patrz line_of_sight.visible_tiles."""
        return visible_tiles(origin, self, predicate)

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA / DEBUG
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict:
        """Stan planszy do JSON (lista pól z q, r, free)."""
        return {
            "seed": self.seed,
            "tiles": [
                {"q": c.q, "r": c.r, "free": t.free}
                for c, t in self._tiles.items()
            ],
        }

    def debug_print(self) -> str:
        """
        Zwraca tekstową reprezentację planszy do debugowania.

        Legenda:
            . = wolne pole
            # = zajęte pole
              = brak pola

        Returns:
            str: Tekstowa wizualizacja planszy (wiersze offset)
        """
        if not self._tiles:
            return ""

        offsets = [c.to_offset() for c in self._tiles]
        min_x = min(x for x, _ in offsets)
        max_x = max(x for x, _ in offsets)
        min_y = min(y for _, y in offsets)
        max_y = max(y for _, y in offsets)

        lines = []
        for y in range(min_y, max_y + 1):
            indent = " " if y & 1 else ""
            row = []
            for x in range(min_x, max_x + 1):
                tile = self._tiles.get(HexCoord.from_offset(x, y))
                if tile is None:
                    row.append(" ")
                elif tile.free:
                    row.append(".")
                else:
                    row.append("#")
            lines.append((indent + " ".join(row)).rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(tiles={len(self._tiles)}, seed={self.seed})"
