"""
Testy dla wyszukiwania ścieżki (greedy best-first).

Testuje:
- Ścieżki najkrótsze na planszy bez przeszkód
- Omijanie przeszkód
- Cele nieosiągalne
- Przypadki brzegowe (start == cel, cel poza planszą)
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexboard.core.board import Board, BoardConfig
from hexboard.core.hex_coord import HexCoord
from hexboard.core.pathfinding import find_path


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def hexagon_board():
    """Heksagon o promieniu 5, wszystkie pola wolne."""
    return Board.from_coords(HexCoord(0, 0).spiral(5))


@pytest.fixture
def small_board():
    """Heksagon o promieniu 3, wszystkie pola wolne."""
    return Board.from_coords(HexCoord(0, 0).spiral(3))


def assert_valid_path(board, start, goal, path):
    """Ścieżka: kroki między sąsiadami, tylko wolne pola, kończy się w goal."""
    assert path[-1] == goal
    assert start not in path
    previous = start
    for coord in path:
        assert previous.distance(coord) == 1
        assert board.get(coord) is not None and board.get(coord).free
        previous = coord


# ═══════════════════════════════════════════════════════════════════════════
# TEST: PLANSZA BEZ PRZESZKÓD
# ═══════════════════════════════════════════════════════════════════════════

def test_concrete_scenario():
    """Plansza 15x15 bez losowych przeszkód, ruch o dwa pola w prawo."""
    board = Board.generate(BoardConfig(p_free=1.0))
    assert board.path(HexCoord(1, 0), HexCoord(3, 0)) == [HexCoord(2, 0), HexCoord(3, 0)]


def test_path_to_neighbor(small_board):
    assert find_path(small_board, HexCoord(0, 0), HexCoord(0, 1)) == [HexCoord(0, 1)]


@pytest.mark.parametrize("start,goal", [
    (HexCoord(0, 0), HexCoord(3, 0)),
    (HexCoord(-5, 0), HexCoord(5, 0)),
    (HexCoord(-3, -1), HexCoord(2, 3)),
    (HexCoord(0, 5), HexCoord(0, -5)),
    (HexCoord(2, -4), HexCoord(-4, 2)),
    (HexCoord(5, -5), HexCoord(-1, 4)),
])
def test_open_board_path_is_shortest(hexagon_board, start, goal):
    path = find_path(hexagon_board, start, goal)
    assert len(path) == start.distance(goal)
    assert_valid_path(hexagon_board, start, goal, path)


def test_filled_start_does_not_block(small_board):
    """Start nie jest sprawdzany - liczą się tylko pola, na które wchodzimy."""
    small_board.fill(HexCoord(0, 0))
    assert find_path(small_board, HexCoord(0, 0), HexCoord(2, 0)) == [
        HexCoord(1, 0), HexCoord(2, 0)
    ]


# ═══════════════════════════════════════════════════════════════════════════
# TEST: PRZESZKODY
# ═══════════════════════════════════════════════════════════════════════════

def test_obstacle_detour(small_board):
    small_board.fill(HexCoord(1, 0))
    path = find_path(small_board, HexCoord(0, 0), HexCoord(2, 0))
    assert path == [HexCoord(1, -1), HexCoord(2, -1), HexCoord(2, 0)]
    assert HexCoord(1, 0) not in path


def test_wall_detour(hexagon_board):
    """Ściana przez środek planszy z przejściem na końcu."""
    wall = [HexCoord(0, r) for r in range(-5, 5)]
    for coord in wall:
        hexagon_board.fill(coord)

    start, goal = HexCoord(-2, 0), HexCoord(2, 0)
    path = find_path(hexagon_board, start, goal)
    assert path is not None
    assert len(path) > start.distance(goal)
    assert not set(path) & set(wall)
    assert_valid_path(hexagon_board, start, goal, path)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: BRAK ŚCIEŻKI
# ═══════════════════════════════════════════════════════════════════════════

def test_enclosed_goal_unreachable(small_board):
    goal = HexCoord(2, 0)
    for coord in small_board.neighbours(goal):
        small_board.fill(coord)
    assert find_path(small_board, HexCoord(-2, 0), goal) is None


def test_filled_goal_unreachable(small_board):
    small_board.fill(HexCoord(2, 0))
    assert find_path(small_board, HexCoord(0, 0), HexCoord(2, 0)) is None


def test_goal_outside_board(small_board):
    assert find_path(small_board, HexCoord(0, 0), HexCoord(9, 0)) is None


def test_start_equals_goal(small_board):
    assert find_path(small_board, HexCoord(1, 1), HexCoord(1, 1)) is None


def test_split_board():
    """Dwie wyspy bez połączenia."""
    left = [HexCoord(q, 0) for q in range(0, 3)]
    right = [HexCoord(q, 0) for q in range(5, 8)]
    board = Board.from_coords(left + right)
    assert find_path(board, HexCoord(0, 0), HexCoord(7, 0)) is None
    assert find_path(board, HexCoord(5, 0), HexCoord(7, 0)) == [HexCoord(6, 0), HexCoord(7, 0)]
