#!/usr/bin/env python3
"""
Hexboard - Entry Point
═══════════════════════════════════════════════════════════════════════════

Generuje planszę i wykonuje na niej przykładowe zapytania:
ścieżka, dwie wersje linii prostej, linia widoczności.

Użycie:
    python main.py                          # Domyślny seed
    python main.py --seed 12345             # Konkretny seed
    python main.py --from 1 0 --to 9 6      # Własne pola (q r)
    python main.py --shape hexagon          # Inny kształt planszy
    python main.py --verbose                # Szczegółowy output

Wynik:
    - Wypisuje planszę i wyniki zapytań na konsolę
    - Zapisuje log zdarzeń do output/board_{seed}.json
"""

import argparse
import sys
from pathlib import Path

# Dodaj katalog projektu do path
sys.path.insert(0, str(Path(__file__).parent))

from hexboard.core.board import Board
from hexboard.core.config_loader import ConfigLoader
from hexboard.core.hex_coord import HexCoord
from hexboard.events.event_logger import EventLogger, EventType


def _format_coords(coords) -> str:
    if coords is None:
        return "brak"
    if not coords:
        return "[]"
    return " -> ".join(str(c) for c in coords)


def main():
    """Główna funkcja."""
    parser = argparse.ArgumentParser(
        description="Hexboard - plansza hexagonalna",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=12345,
        help="Ziarno losowości (domyślnie: 12345)"
    )
    parser.add_argument(
        "--p-free",
        type=float,
        default=None,
        help="Szansa, że pole jest wolne (domyślnie z defaults.yaml)"
    )
    parser.add_argument(
        "--shape",
        choices=["canonical", "rectangle", "hexagon"],
        default=None,
        help="Kształt planszy (domyślnie z defaults.yaml)"
    )
    parser.add_argument(
        "--from",
        dest="start",
        type=int,
        nargs=2,
        metavar=("Q", "R"),
        default=[1, 0],
        help="Pole startowe (domyślnie: 1 0)"
    )
    parser.add_argument(
        "--to",
        dest="goal",
        type=int,
        nargs=2,
        metavar=("Q", "R"),
        default=[5, 6],
        help="Pole docelowe (domyślnie: 5 6)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Szczegółowy output"
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Nie zapisuj logu do pliku"
    )

    args = parser.parse_args()

    # Załaduj konfigurację
    loader = ConfigLoader(str(Path(__file__).parent / "data"))
    try:
        config = loader.load_board_config({
            "seed": args.seed,
            "p_free": args.p_free,
            "shape": args.shape,
        })
    except ValueError as e:
        print(f"Błędna konfiguracja: {e}", file=sys.stderr)
        return 2

    print("=" * 60)
    print("HEXBOARD")
    print("=" * 60)
    print(f"Seed: {config.seed}")
    print(f"Kształt: {config.shape.value}, p_free: {config.p_free}")
    print()

    logger = EventLogger(
        seed=config.seed,
        shape=config.shape.value,
        width=config.width,
        height=config.height,
    )
    board = Board.generate(config, logger=logger)

    print(board.debug_print())
    print()
    print(f"Pola: {len(board)}, wolne: {len(board.free_coordinates())}")

    start = HexCoord(*args.start)
    goal = HexCoord(*args.goal)

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPYTANIA
    # ─────────────────────────────────────────────────────────────────────────
    print()
    print("-" * 60)
    print(f"Start: {start}  Cel: {goal}  Odległość: {start.distance(goal)}")
    print("-" * 60)

    if start not in board or goal not in board:
        print("⚠️  Start albo cel leży poza planszą")

    path = board.path(start, goal)
    print(f"Ścieżka: {_format_coords(path)}")

    up, down = start.line(goal)
    print(f"Linia (góra): {_format_coords(up)}")
    print(f"Linia (dół):  {_format_coords(down)}")

    visible = board.line_of_sight(start, goal)
    print(f"Widoczność: {'TAK' if visible else 'NIE'}")

    # Zapisz log
    if not args.no_save:
        output_path = f"output/board_{config.seed}.json"
        logger.save(output_path)
        print()
        print(f"📄 Log zapisany: {output_path}")

    # Verbose: pokaż statystyki i widoczne pola
    if args.verbose:
        print()
        print("-" * 60)
        print("POLA WIDOCZNE ZE STARTU")
        print("-" * 60)
        print(_format_coords(board.visible_from(start)))

        print()
        print("-" * 60)
        print("STATYSTYKI ZDARZEŃ")
        print("-" * 60)
        for event_type in EventType:
            count = len(logger.get_events_by_type(event_type))
            if count > 0:
                print(f"  {event_type.name}: {count}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
