"""
Testy dla systemu współrzędnych hexagonalnych.

Testuje:
- Konwersję offset <-> axial
- Metrykę odległości
- Sąsiadów, ring i spiral
- Linie z podwójnym przesunięciem
- Stożki kierunków
- Zaokrąglanie cube
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexboard.core.hex_coord import HexCoord, FloatHexCoord, cube_round
from hexboard.core.direction import Direction


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_coords():
    """Zestaw współrzędnych w różnych ćwiartkach."""
    return [
        HexCoord(0, 0), HexCoord(3, -1), HexCoord(-2, 5), HexCoord(7, 7),
        HexCoord(-4, -3), HexCoord(1, 1), HexCoord(0, -6), HexCoord(-5, 0),
    ]


# ═══════════════════════════════════════════════════════════════════════════
# TEST: OFFSET
# ═══════════════════════════════════════════════════════════════════════════

def test_from_offset_examples():
    assert HexCoord.from_offset(0, 0) == HexCoord(0, 0)
    assert HexCoord.from_offset(3, 2) == HexCoord(2, 2)
    assert HexCoord.from_offset(3, 3) == HexCoord(2, 3)
    assert HexCoord.from_offset(0, 14) == HexCoord(-7, 14)


def test_from_offset_is_bijection():
    """15x15 indeksów offset daje 225 różnych hexów."""
    coords = {
        HexCoord.from_offset(x, y)
        for x in range(15)
        for y in range(15)
    }
    assert len(coords) == 225


@pytest.mark.parametrize("y", range(-4, 15))
def test_to_offset_inverts_from_offset(y):
    for x in range(-3, 15):
        assert HexCoord.from_offset(x, y).to_offset() == (x, y)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ODLEGŁOŚĆ
# ═══════════════════════════════════════════════════════════════════════════

def test_distance_examples():
    origin = HexCoord(0, 0)
    assert origin.distance(HexCoord(2, 1)) == 3
    assert origin.distance(HexCoord(3, -3)) == 3
    assert origin.distance(HexCoord(-2, -2)) == 4


def test_distance_metric_laws(sample_coords):
    """Tożsamość, symetria, nierówność trójkąta."""
    for a in sample_coords:
        assert a.distance(a) == 0
        for b in sample_coords:
            assert a.distance(b) == b.distance(a)
            if a != b:
                assert a.distance(b) > 0
            for c in sample_coords:
                assert a.distance(c) <= a.distance(b) + b.distance(c)


def test_cube_sums_to_zero(sample_coords):
    for coord in sample_coords:
        q, r, s = coord.cube
        assert q + r + s == 0


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SĄSIEDZI
# ═══════════════════════════════════════════════════════════════════════════

def test_neighbors_are_at_distance_one(sample_coords):
    for coord in sample_coords:
        neighbors = coord.neighbors()
        assert len(set(neighbors)) == 6
        assert all(coord.distance(n) == 1 for n in neighbors)


@pytest.mark.parametrize("direction", list(Direction))
def test_neighbor_opposite_returns(direction):
    coord = HexCoord(2, -3)
    assert coord.neighbor(direction).neighbor(direction.opposite()) == coord


def test_neighbor_accepts_any_index():
    coord = HexCoord(0, 0)
    assert coord.neighbor(7) == coord.neighbor(Direction.RIGHT)
    assert coord.neighbor(-1) == HexCoord(0, -1)


def test_add_direction_is_neighbor():
    assert HexCoord(1, 1) + Direction.TOP_RIGHT == HexCoord(2, 0)


def test_arithmetic():
    a = HexCoord(2, -1)
    b = HexCoord(-3, 4)
    assert a + b == HexCoord(-1, 3)
    assert a - b == HexCoord(5, -5)
    assert -a == HexCoord(-2, 1)


def test_add_unsupported_type_raises():
    with pytest.raises(TypeError):
        HexCoord(0, 0) + 1


def test_hashable():
    """HexCoord działa jako klucz słownika."""
    data = {HexCoord(1, 2): "a"}
    assert data[HexCoord(1, 2)] == "a"
    assert len({HexCoord(0, 0), HexCoord(0, 0), HexCoord(1, 0)}) == 2


def test_str_and_repr():
    assert str(HexCoord(1, -2)) == "(1, -2)"
    assert repr(HexCoord(1, -2)) == "HexCoord(q=1, r=-2)"


# ═══════════════════════════════════════════════════════════════════════════
# TEST: RING I SPIRAL
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("radius", [1, 2, 3, 5])
def test_ring_size_and_distance(radius):
    center = HexCoord(2, -1)
    ring = center.ring(radius)
    assert len(ring) == 6 * radius
    assert len(set(ring)) == 6 * radius
    assert all(center.distance(c) == radius for c in ring)


def test_ring_zero_is_center():
    assert HexCoord(4, 4).ring(0) == [HexCoord(4, 4)]


@pytest.mark.parametrize("radius", [0, 1, 3, 7])
def test_spiral_count(radius):
    coords = list(HexCoord(0, 0).spiral(radius))
    assert len(coords) == 1 + 3 * radius * (radius + 1)
    assert len(set(coords)) == len(coords)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: LINIA
# ═══════════════════════════════════════════════════════════════════════════

def test_line_straight_row():
    up, down = HexCoord(0, 0).line(HexCoord(3, 0))
    assert up == [HexCoord(1, 0), HexCoord(2, 0)]
    assert down == up


def test_line_tie_resolved_both_ways():
    """Linia po krawędzi hexów - dwie wersje rozchodzą się."""
    up, down = HexCoord(0, 0).line(HexCoord(1, 1))
    assert up == [HexCoord(0, 1)]
    assert down == [HexCoord(1, 0)]


def test_line_same_hex_is_empty():
    assert HexCoord(2, 2).line(HexCoord(2, 2)) == ([], [])


def test_line_to_neighbor_is_empty():
    assert HexCoord(0, 0).line(HexCoord(1, 0)) == ([], [])


@pytest.mark.parametrize("start,end", [
    (HexCoord(0, 0), HexCoord(5, -2)),
    (HexCoord(-3, 4), HexCoord(2, 2)),
    (HexCoord(1, 1), HexCoord(-4, 1)),
    (HexCoord(0, 0), HexCoord(4, 4)),
])
def test_line_is_contiguous(start, end):
    """Obie wersje mają distance - 1 pól i każdy krok to sąsiad."""
    for line in start.line(end):
        assert len(line) == start.distance(end) - 1
        full = [start] + line + [end]
        for a, b in zip(full, full[1:]):
            assert a.distance(b) == 1


# ═══════════════════════════════════════════════════════════════════════════
# TEST: STOŻEK
# ═══════════════════════════════════════════════════════════════════════════

def test_in_cone_examples():
    origin = HexCoord(0, 0)
    assert origin.in_cone(HexCoord(3, -1), Direction.RIGHT)
    assert not origin.in_cone(HexCoord(3, -1), Direction.LEFT)
    assert origin.in_cone(HexCoord(0, 4), Direction.BOTTOM_RIGHT)
    assert not origin.in_cone(HexCoord(0, 4), Direction.TOP_RIGHT)


@pytest.mark.parametrize("direction", list(Direction))
def test_cone_contains_direction_and_its_sides(direction):
    origin = HexCoord(1, -1)
    assert origin.in_cone(origin.neighbor(direction), direction)
    assert origin.in_cone(origin.neighbor(direction.clockwise()), direction)
    assert origin.in_cone(origin.neighbor(direction.counterclockwise()), direction)
    assert not origin.in_cone(origin.neighbor(direction.opposite()), direction)


@pytest.mark.parametrize("direction", list(Direction))
def test_cone_and_opposite_cone_meet_only_at_origin(direction):
    origin = HexCoord(0, 0)
    for coord in origin.spiral(4):
        both = (
            origin.in_cone(coord, direction)
            and origin.in_cone(coord, direction.opposite())
        )
        assert both == (coord == origin)


def test_cones_cover_plane():
    origin = HexCoord(-2, 3)
    for coord in origin.spiral(4):
        assert any(origin.in_cone(coord, d) for d in Direction)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ZAOKRĄGLANIE
# ═══════════════════════════════════════════════════════════════════════════

def test_cube_round_integer_is_identity(sample_coords):
    for coord in sample_coords:
        assert coord.to_float().round() == coord
        assert cube_round(float(coord.q), float(coord.r), float(coord.s)) == coord


def test_cube_round_near_center():
    assert FloatHexCoord(2.2, -0.9).round() == HexCoord(2, -1)
    assert FloatHexCoord(-0.3, 0.4).round() == HexCoord(0, 0)


@pytest.mark.parametrize("q", [0, 1, 2, 3])
def test_cube_round_ties_away_from_zero(q):
    """Środek krawędzi między (q, -q) i (q+1, -q-1) trafia do dalszego hexa."""
    half = q + 0.5
    assert cube_round(half, -half, 0.0) == HexCoord(q + 1, -q - 1)
    assert cube_round(-half, half, 0.0) == HexCoord(-q - 1, q + 1)


def test_float_lerp():
    a = FloatHexCoord(0.0, 0.0)
    b = FloatHexCoord(4.0, -2.0)
    assert a.lerp(b, 0.5) == FloatHexCoord(2.0, -1.0)
    assert a.lerp(b, 0.0) == a
