"""
Board router - plansza, ścieżki, linie i widoczność.

Serwer trzyma JEDNĄ planszę w pamięci. Plansza nie ma własnych
blokad, więc każdy dostęp idzie przez _session.lock.
Endpointy są synchroniczne (FastAPI uruchamia je w puli wątków).
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from pathlib import Path
import threading

from hexboard.core.board import Board
from hexboard.core.config_loader import ConfigLoader
from hexboard.core.hex_coord import HexCoord
from hexboard.core.layout import HexLayout
from hexboard.events.event_logger import EventLogger


router = APIRouter()

DATA_PATH = Path(__file__).parent.parent.parent / "data"
_loader = ConfigLoader(str(DATA_PATH))


# ═══════════════════════════════════════════════════════════════════════════
# SESJA
# ═══════════════════════════════════════════════════════════════════════════

class BoardSession:
    """Plansza serwera + layout + log, chronione jednym lockiem."""

    def __init__(self, loader: ConfigLoader):
        self.loader = loader
        self.lock = threading.Lock()
        self.board: Optional[Board] = None
        self.logger: Optional[EventLogger] = None
        self.layout: HexLayout = loader.load_layout()

    def reset(self, overrides: Optional[Dict[str, Any]] = None) -> Board:
        """Generuje nową planszę. Wywoływać pod lockiem."""
        config = self.loader.load_board_config(overrides)
        self.logger = EventLogger(
            seed=config.seed,
            shape=config.shape.value,
            width=config.width,
            height=config.height,
        )
        self.board = Board.generate(config, logger=self.logger)
        return self.board

    def current(self) -> Board:
        """Aktualna plansza (generowana z defaults przy pierwszym użyciu)."""
        if self.board is None:
            return self.reset()
        return self.board


_session = BoardSession(_loader)


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST/RESPONSE MODELS
# ═══════════════════════════════════════════════════════════════════════════

class NewBoardRequest(BaseModel):
    """Parametry nowej planszy (brak = wartość z defaults.yaml)."""
    seed: Optional[int] = None
    p_free: Optional[float] = None
    shape: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    radius: Optional[int] = None


class CoordRequest(BaseModel):
    """Pojedyncze pole."""
    q: int
    r: int


class SegmentRequest(BaseModel):
    """Para pól: start i cel."""
    start: List[int] = Field(..., min_length=2, max_length=2)  # [q, r]
    goal: List[int] = Field(..., min_length=2, max_length=2)   # [q, r]


class PixelRequest(BaseModel):
    """Punkt na ekranie."""
    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)


def _coord(pair: List[int]) -> HexCoord:
    return HexCoord(pair[0], pair[1])


def _pairs(coords: Optional[List[HexCoord]]) -> Optional[List[List[int]]]:
    if coords is None:
        return None
    return [[c.q, c.r] for c in coords]


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS - PLANSZA
# ═══════════════════════════════════════════════════════════════════════════

@router.get("/board")
def get_board() -> Dict[str, Any]:
    """Zwraca wszystkie pola planszy (q, r, free) i seed."""
    with _session.lock:
        return _session.current().to_dict()


@router.post("/board")
def new_board(request: NewBoardRequest) -> Dict[str, Any]:
    """
    Generuje nową planszę.

    Returns:
        Stan nowej planszy

    Raises:
        HTTPException 400: Niepoprawna konfiguracja
    """
    with _session.lock:
        try:
            board = _session.reset(request.model_dump())
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return board.to_dict()


@router.post("/board/toggle")
def toggle_tile(request: CoordRequest) -> Dict[str, Any]:
    """
    Przełącza pole wolne <-> zajęte.

    Raises:
        HTTPException 404: Pole poza planszą
    """
    coord = HexCoord(request.q, request.r)
    with _session.lock:
        tile = _session.current().toggle(coord)
    if tile is None:
        raise HTTPException(status_code=404, detail=f"Tile {coord} is outside the board")
    return {"q": coord.q, "r": coord.r, "free": tile.free}


@router.get("/events")
def get_events() -> Dict[str, Any]:
    """Log zdarzeń aktualnej planszy."""
    with _session.lock:
        _session.current()
        return _session.logger.to_dict()


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS - ZAPYTANIA
# ═══════════════════════════════════════════════════════════════════════════

@router.post("/path")
def find_path(request: SegmentRequest) -> Dict[str, Any]:
    """Ścieżka od start (wyłącznie) do goal (włącznie); null gdy brak."""
    with _session.lock:
        path = _session.current().path(_coord(request.start), _coord(request.goal))
    return {"path": _pairs(path)}


@router.post("/line")
def get_line(request: SegmentRequest) -> Dict[str, Any]:
    """Dwie wersje linii prostej między polami (bez końców)."""
    up, down = _coord(request.start).line(_coord(request.goal))
    return {"up": _pairs(up), "down": _pairs(down)}


@router.post("/los")
def line_of_sight(request: SegmentRequest) -> Dict[str, Any]:
    """Czy z start widać goal (domyślny predykat: pole wolne)."""
    with _session.lock:
        visible = _session.current().line_of_sight(
            _coord(request.start), _coord(request.goal)
        )
    return {"visible": visible}


@router.get("/visible")
def get_visible(q: int, r: int) -> Dict[str, Any]:
    """Wszystkie wolne pola widoczne z (q, r)."""
    with _session.lock:
        visible = _session.current().visible_from(HexCoord(q, r))
    return {"visible": _pairs(visible)}


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS - PIKSELE
# ═══════════════════════════════════════════════════════════════════════════

@router.post("/pixel-to-hex")
def pixel_to_hex(request: PixelRequest) -> Dict[str, Any]:
    """Hex pod pikselem i czy istnieje na planszy."""
    coord = _session.layout.pixel_to_hex(request.x, request.y)
    with _session.lock:
        on_board = coord in _session.current()
    return {"q": coord.q, "r": coord.r, "on_board": on_board}


@router.post("/hex-to-pixel")
def hex_to_pixel(request: CoordRequest) -> Dict[str, Any]:
    """Środek i wierzchołki rysowanego hexa w pikselach."""
    coord = HexCoord(request.q, request.r)
    x, y = _session.layout.hex_to_pixel(coord)
    corners = _session.layout.hex_corners(coord)
    return {"x": x, "y": y, "corners": [[cx, cy] for cx, cy in corners]}
