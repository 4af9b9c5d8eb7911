"""
System logowania zdarzeń planszy do formatu JSON.

Każda zmiana planszy i każde zapytanie (ścieżka, linia widoczności)
trafia do logu jako jedno zdarzenie. Log może być później użyty
do debugowania albo odtworzenia sesji w wizualizacji.

TYPY ZDARZEŃ:
═══════════════════════════════════════════════════════════════════

    BOARD_GENERATED
    ─────────────────────────────────────────────────────────────
    Plansza została wygenerowana.
    Data: seed, tiles (liczba pól), filled (lista [q, r] przeszkód)

    TILE_FREED / TILE_FILLED
    ─────────────────────────────────────────────────────────────
    Pole zostało zwolnione / zajęte.
    Data: coord [q, r]

    PATH_FOUND
    ─────────────────────────────────────────────────────────────
    Znaleziono ścieżkę.
    Data: from, to, path (lista [q, r])

    PATH_NOT_FOUND
    ─────────────────────────────────────────────────────────────
    Cel nieosiągalny.
    Data: from, to

    LOS_CHECK
    ─────────────────────────────────────────────────────────────
    Sprawdzenie linii widoczności.
    Data: from, to, visible

FORMAT LOGU:
═══════════════════════════════════════════════════════════════════

{
    "metadata": {
        "version": "1.0",
        "seed": 12345,
        "board": {"shape": "canonical", "width": 15, "height": 15},
        "timestamp": "2024-01-01T12:00:00"
    },
    "events": [
        {
            "step": 0,
            "type": "BOARD_GENERATED",
            "data": {...}
        },
        {
            "step": 1,
            "type": "TILE_FILLED",
            "coord": [3, 2]
        },
        ...
    ]
}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING
from datetime import datetime
import json
from pathlib import Path

if TYPE_CHECKING:
    from ..core.hex_coord import HexCoord


class EventType(Enum):
    """Typ zdarzenia na planszy."""

    # Plansza
    BOARD_GENERATED = auto()
    TILE_FREED = auto()
    TILE_FILLED = auto()

    # Zapytania
    PATH_FOUND = auto()
    PATH_NOT_FOUND = auto()
    LOS_CHECK = auto()


@dataclass
class BoardEvent:
    """
    Pojedyncze zdarzenie na planszy.

    Attributes:
        step (int): Numer kolejny zdarzenia w logu
        event_type (EventType): Typ zdarzenia
        coord (Optional[HexCoord]): Pole, którego dotyczy zdarzenie
        data (Dict): Dodatkowe dane specyficzne dla typu zdarzenia
    """
    step: int
    event_type: EventType
    coord: Optional["HexCoord"] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Słownik do JSON - coord i data tylko gdy ustawione."""
        result: Dict[str, Any] = {
            "step": self.step,
            "type": self.event_type.name,
        }

        if self.coord is not None:
            result["coord"] = [self.coord.q, self.coord.r]
        if self.data:
            result["data"] = self.data

        return result


def _pair(coord: "HexCoord") -> List[int]:
    return [coord.q, coord.r]


class EventLogger:
    """
    Logger zdarzeń planszy.

    Lista zdarzeń jednej planszy + metadane, zapisywane jako JSON.

    Attributes:
        events (List[BoardEvent]): Lista wszystkich zdarzeń
        metadata (Dict): Metadane planszy

    Example:
        >>> logger = EventLogger(seed=12345)
        >>> logger.log_fill(HexCoord(3, 2))
        >>> logger.save("output/board_12345.json")
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        shape: str = "canonical",
        width: int = 15,
        height: int = 15,
    ):
        """
        Pusty log dla planszy o podanych parametrach.

        Args:
            seed: Ziarno losowości planszy
            shape: Kształt planszy
            width: Szerokość planszy (w indeksach offset)
            height: Wysokość planszy (w indeksach offset)
        """
        self.events: List[BoardEvent] = []
        self.metadata: Dict[str, Any] = {
            "version": "1.0",
            "seed": seed,
            "board": {"shape": shape, "width": width, "height": height},
            "timestamp": datetime.now().isoformat(),
        }

    # ─────────────────────────────────────────────────────────────────────────
    # LOGOWANIE OGÓLNE
    # ─────────────────────────────────────────────────────────────────────────

    def log(self, event: BoardEvent) -> None:
        """Dodaje zdarzenie do logu."""
        self.events.append(event)

    def log_event(
        self,
        event_type: EventType,
        coord: Optional["HexCoord"] = None,
        **data: Any,
    ) -> BoardEvent:
        """
        Tworzy i loguje zdarzenie z kolejnym numerem step.

        Args:
            event_type: Typ zdarzenia
            coord: Pole, którego dotyczy zdarzenie
            **data: Dane zdarzenia (trafiają do "data")

        Returns:
            BoardEvent: Utworzone zdarzenie
        """
        event = BoardEvent(
            step=len(self.events),
            event_type=event_type,
            coord=coord,
            data=dict(data),
        )
        self.log(event)
        return event

    # ─────────────────────────────────────────────────────────────────────────
    # POMOCNICZE METODY LOGOWANIA
    # ─────────────────────────────────────────────────────────────────────────

    def log_board_generated(
        self,
        seed: Optional[int],
        tiles: int,
        filled: Sequence["HexCoord"],
    ) -> None:
        """Loguje wygenerowanie planszy."""
        self.metadata["seed"] = seed
        self.log_event(
            EventType.BOARD_GENERATED,
            seed=seed,
            tiles=tiles,
            filled=[_pair(c) for c in filled],
        )

    def log_free(self, coord: "HexCoord") -> None:
        """Loguje zwolnienie pola."""
        self.log_event(EventType.TILE_FREED, coord=coord)

    def log_fill(self, coord: "HexCoord") -> None:
        """Loguje zajęcie pola."""
        self.log_event(EventType.TILE_FILLED, coord=coord)

    def log_path(
        self,
        start: "HexCoord",
        goal: "HexCoord",
        path: Optional[Sequence["HexCoord"]],
    ) -> None:
        """Loguje wynik wyszukiwania ścieżki."""
        if path is None:
            self.log_event(
                EventType.PATH_NOT_FOUND,
                **{"from": _pair(start), "to": _pair(goal)},
            )
            return

        self.log_event(
            EventType.PATH_FOUND,
            path=[_pair(c) for c in path],
            **{"from": _pair(start), "to": _pair(goal)},
        )

    def log_line_of_sight(
        self,
        start: "HexCoord",
        target: "HexCoord",
        visible: bool,
    ) -> None:
        """Loguje sprawdzenie linii widoczności."""
        self.log_event(
            EventType.LOS_CHECK,
            visible=visible,
            **{"from": _pair(start), "to": _pair(target)},
        )

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Log jako słownik {metadata, events}.

        Returns:
            Dict: Gotowe do json.dump
        """
        return {
            "metadata": self.metadata,
            "events": [e.to_dict() for e in self.events],
        }

    def save(self, filepath: str) -> None:
        """
        Zapisuje to_dict() do pliku.

        Args:
            filepath: Ścieżka do pliku (katalogi są tworzone)
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Zwraca log jako string JSON (indent=None = compact)."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    # ─────────────────────────────────────────────────────────────────────────
    # STATYSTYKI
    # ─────────────────────────────────────────────────────────────────────────

    def get_event_count(self) -> int:
        """Liczba zalogowanych zdarzeń."""
        return len(self.events)

    def get_events_by_type(self, event_type: EventType) -> List[BoardEvent]:
        """Zdarzenia danego typu, w kolejności logowania."""
        return [e for e in self.events if e.event_type == event_type]
