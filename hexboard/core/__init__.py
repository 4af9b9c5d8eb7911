"""
Core module - geometria i algorytmy planszy hexagonalnej.

Zawiera:
- Direction: 6 kierunków z arytmetyką modulo 6
- HexCoord / FloatHexCoord: System współrzędnych hexagonalnych
- HexLayout: Projekcja axial <-> piksele
- Board / Tile / BoardConfig: Plansza z polami wolnymi i zajętymi
- find_path: Wyszukiwanie ścieżki (greedy best-first)
- strict_line: Linia widoczności z próbkowaniem narożników
- Shape: Szablony obszarowe z obrotami
- GameRNG: Deterministyczny generator losowości
- ConfigLoader: Wczytywanie konfiguracji z defaults
"""

from .direction import Direction
from .hex_coord import HexCoord, FloatHexCoord, cube_round
from .layout import HexLayout
from .board import Board, BoardConfig, BoardShape, Tile
from .pathfinding import find_path
from .line_of_sight import strict_line, visible_tiles, tile_is_free
from .shape import Shape
from .rng import GameRNG
from .config_loader import ConfigLoader

__all__ = [
    "Direction", "HexCoord", "FloatHexCoord", "cube_round", "HexLayout",
    "Board", "BoardConfig", "BoardShape", "Tile", "find_path",
    "strict_line", "visible_tiles", "tile_is_free", "Shape",
    "GameRNG", "ConfigLoader",
]
