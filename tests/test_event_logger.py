"""
Testy dla logu zdarzeń planszy.
"""

import json
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexboard.core.board import Board, BoardConfig
from hexboard.core.hex_coord import HexCoord
from hexboard.events.event_logger import BoardEvent, EventLogger, EventType


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def logger():
    return EventLogger(seed=12345)


@pytest.fixture
def logged_board(logger):
    """Heksagon o promieniu 3 z podpiętym logiem."""
    return Board.from_coords(HexCoord(0, 0).spiral(3), logger=logger)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ZDARZENIA
# ═══════════════════════════════════════════════════════════════════════════

def test_event_to_dict():
    event = BoardEvent(step=3, event_type=EventType.TILE_FILLED, coord=HexCoord(3, 2))
    assert event.to_dict() == {"step": 3, "type": "TILE_FILLED", "coord": [3, 2]}


def test_log_event_numbers_steps(logger):
    first = logger.log_event(EventType.TILE_FREED, coord=HexCoord(0, 0))
    second = logger.log_event(EventType.TILE_FILLED, coord=HexCoord(1, 0))
    assert (first.step, second.step) == (0, 1)
    assert logger.get_event_count() == 2


def test_generate_logs_board(logger):
    board = Board.generate(BoardConfig(p_free=1.0, seed=7), logger=logger)
    events = logger.get_events_by_type(EventType.BOARD_GENERATED)
    assert len(events) == 1
    assert events[0].data["tiles"] == len(board)
    assert events[0].data["filled"] == [[0, 0]]
    assert logger.metadata["seed"] == 7


def test_mutations_logged(logger, logged_board):
    logged_board.fill(HexCoord(1, 0))
    logged_board.free(HexCoord(1, 0))
    logged_board.fill(HexCoord(9, 9))  # poza planszą - bez zdarzenia
    events = [e for e in logger.events if e.coord == HexCoord(1, 0)]
    assert [e.event_type for e in events] == [EventType.TILE_FILLED, EventType.TILE_FREED]
    assert logger.get_event_count() == 2


def test_path_logged(logger, logged_board):
    logged_board.path(HexCoord(0, 0), HexCoord(2, 0))
    logged_board.path(HexCoord(0, 0), HexCoord(0, 0))

    found = logger.get_events_by_type(EventType.PATH_FOUND)
    assert found[0].data == {"from": [0, 0], "to": [2, 0], "path": [[1, 0], [2, 0]]}
    assert len(logger.get_events_by_type(EventType.PATH_NOT_FOUND)) == 1


def test_line_of_sight_logged(logger, logged_board):
    logged_board.line_of_sight(HexCoord(0, 0), HexCoord(3, 0))
    event = logger.get_events_by_type(EventType.LOS_CHECK)[0]
    assert event.data == {"from": [0, 0], "to": [3, 0], "visible": True}


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SERIALIZACJA
# ═══════════════════════════════════════════════════════════════════════════

def test_to_dict_format(logger, logged_board):
    logged_board.fill(HexCoord(1, 1))
    data = logger.to_dict()
    assert data["metadata"]["version"] == "1.0"
    assert data["metadata"]["board"] == {"shape": "canonical", "width": 15, "height": 15}
    assert data["events"] == [{"step": 0, "type": "TILE_FILLED", "coord": [1, 1]}]


def test_to_json(logger):
    logger.log_fill(HexCoord(2, 2))
    assert json.loads(logger.to_json())["events"][0]["coord"] == [2, 2]


def test_save(tmp_path, logger, logged_board):
    logged_board.path(HexCoord(0, 0), HexCoord(3, 0))
    output = tmp_path / "output" / "board_12345.json"
    logger.save(str(output))

    with open(output, encoding="utf-8") as f:
        data = json.load(f)
    assert data["metadata"]["seed"] == 12345
    assert data["events"][0]["type"] == "PATH_FOUND"
