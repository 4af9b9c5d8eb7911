"""
Wyszukiwanie ścieżki na planszy hexagonalnej.

Wariant "A*" bez kosztu drogi: kolejka priorytetowa jest sortowana
WYŁĄCZNIE po heurystyce (odległość hex do celu), nie po g + h.
To jest greedy best-first search. Przy jednakowym koszcie ruchu
(każdy krok = 1) i planszy bez przeszkód daje ścieżki najkrótsze;
z przeszkodami może zwrócić ścieżkę dłuższą niż optymalna.

Jak działa:
    1. Wstaw start do kolejki z priorytetem 0, cost_so_far[start] = 0
    2. Zdejmij element o najniższym priorytecie (current)
    3. Jeśli current == goal - koniec
    4. Dla każdego WOLNEGO sąsiada istniejącego na planszy:
       - new_cost = cost_so_far[current] + 1
       - jeśli sąsiad nie ma kosztu albo new_cost jest lepszy:
         zapisz koszt, came_from[sąsiad] = current,
         wstaw do kolejki z priorytetem distance(sąsiad, goal)
    5. Pusta kolejka = brak ścieżki

Remisy priorytetów: kolejność wstawienia (FIFO).
Pole już czekające w kolejce nie jest wstawiane drugi raz - jego
priorytet (odległość do celu) i tak byłby taki sam.

Przykład użycia:
    >>> board = Board.from_coords(HexCoord(0, 0).spiral(3))
    >>> board.fill(HexCoord(1, 0))
    >>> find_path(board, HexCoord(0, 0), HexCoord(2, 0))
    [HexCoord(q=1, r=-1), HexCoord(q=2, r=-1), HexCoord(q=2, r=0)]

Edge cases:
    - Start == Goal: None (goal nigdy nie trafia do came_from)
    - Brak ścieżki: None
    - Goal zajęty albo poza planszą: None
    - Start poza planszą: szukanie rusza, ale tylko przez istniejące pola
"""

from __future__ import annotations
from typing import Dict, List, Optional, Set, Tuple, TYPE_CHECKING
import heapq
import itertools

from .hex_coord import HexCoord

if TYPE_CHECKING:
    from .board import Board


def _greedy_search(
    board: "Board",
    start: HexCoord,
    goal: HexCoord,
) -> Tuple[Dict[HexCoord, HexCoord], Dict[HexCoord, int]]:
    """
    Przeszukuje planszę od start w stronę goal.

    Args:
        board: Plansza z informacją o zajętości
        start: Pozycja startowa
        goal: Pozycja docelowa

    Returns:
        Tuple[Dict, Dict]: (came_from, cost_so_far)

    Complexity:
        Każde wstawienie do kolejki odpowiada poprawie kosztu pola,
        a koszty tylko maleją - pętla kończy się dla skończonej planszy.
    """
    counter = itertools.count()
    frontier: List[Tuple[int, int, HexCoord]] = [(0, next(counter), start)]
    in_frontier: Set[HexCoord] = {start}

    came_from: Dict[HexCoord, HexCoord] = {}
    cost_so_far: Dict[HexCoord, int] = {start: 0}

    while frontier:
        _, _, current = heapq.heappop(frontier)
        in_frontier.discard(current)

        if current == goal:
            break

        for neighbor in board.neighbours(current):
            if not board.get(neighbor).free:
                continue

            # Koszt ruchu = 1
            new_cost = cost_so_far[current] + 1

            if neighbor not in cost_so_far or new_cost < cost_so_far[neighbor]:
                cost_so_far[neighbor] = new_cost
                came_from[neighbor] = current

                if neighbor not in in_frontier:
                    priority = neighbor.distance(goal)
                    heapq.heappush(frontier, (priority, next(counter), neighbor))
                    in_frontier.add(neighbor)

    return came_from, cost_so_far


def find_path(
    board: "Board",
    start: HexCoord,
    goal: HexCoord,
) -> Optional[List[HexCoord]]:
    """
    Znajduje ścieżkę między dwoma hexami.

    Args:
        board: Plansza
        start: Pozycja startowa
        goal: Pozycja docelowa

    Returns:
        Optional[List[HexCoord]]: Ścieżka od start do goal, BEZ start,
            Z goal. None jeśli ścieżka nie istnieje.

    Example:
        >>> find_path(board, HexCoord(1, 0), HexCoord(3, 0))
        [HexCoord(q=2, r=0), HexCoord(q=3, r=0)]
    """
    came_from, _ = _greedy_search(board, start, goal)

    if goal not in came_from:
        return None

    return _reconstruct_path(came_from, start, goal)


def _reconstruct_path(
    came_from: Dict[HexCoord, HexCoord],
    start: HexCoord,
    goal: HexCoord,
) -> List[HexCoord]:
    """
    Odtwarza ścieżkę od goal do start używając mapy came_from.

    Returns:
        List[HexCoord]: Ścieżka od start (wyłącznie) do goal (włącznie)
    """
    path = []
    current = goal

    while current != start:
        path.append(current)
        current = came_from[current]

    path.reverse()
    return path
