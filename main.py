"""
Word Slide Solver - Entry Point

Loads level definitions, solves every selected level concurrently and
prints one result block per level.

Example:
    python main.py levels.csv
    python main.py levels.csv --strategy astar --level 3 --level 4
    python main.py levels.csv --json > results.json
"""

import sys
import json
import logging
import argparse
from pathlib import Path

from src.levels import LevelFormatError, load_levels
from src.settings import load_settings, save_settings
from src.solver import SolveReport, get_strategy_info, get_strategy_names
from src.solver_worker import run_levels


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Log to both console and solver.log."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def print_report(report: SolveReport) -> None:
    """Print a human readable result block."""
    for line in report.summary_lines():
        print(line)
    print()


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Word Slide Solver - Slide word pieces until they spell the sentence"
    )
    parser.add_argument(
        "levels",
        nargs="?",
        default="levels.csv",
        help="Level CSV file (default: levels.csv)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Search strategy (default: from config.json)"
    )
    parser.add_argument(
        "--level", "-l",
        type=int,
        action="append",
        dest="level_ids",
        help="Only solve this level id (repeatable)"
    )
    parser.add_argument("--max-states", type=int, help="Explored-state budget")
    parser.add_argument("--max-depth", type=int, help="Maximum path length")
    parser.add_argument("--workers", type=int, help="Concurrent solves (0 = all levels)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print reports as JSON instead of text"
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective options to config.json"
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available strategies and exit"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Load levels, solve them and print the results."""
    args = parse_args(argv)

    settings = load_settings()
    configure_logging(args.debug or settings.get("debug_enabled", False))

    if args.list_strategies:
        for info in get_strategy_info():
            print(f"  {info['name']:<14} {info['description']}")
        return 0

    # CLI flags override saved settings
    for key, value in (
        ("strategy_name", args.strategy),
        ("max_states", args.max_states),
        ("max_depth", args.max_depth),
        ("max_workers", args.workers),
    ):
        if value is not None:
            settings[key] = value

    if settings["strategy_name"] not in get_strategy_names():
        logger.error(
            f"Unknown strategy '{settings['strategy_name']}', "
            f"available: {', '.join(get_strategy_names())}"
        )
        return 1

    if args.save_config:
        save_settings(settings)

    try:
        definitions = load_levels(
            Path(args.levels),
            grid_rows=settings["grid_rows"],
            grid_cols=settings["grid_cols"],
        )
    except (OSError, LevelFormatError) as e:
        logger.error(f"Cannot load levels from {args.levels}: {e}")
        return 1

    if args.level_ids:
        wanted = set(args.level_ids)
        definitions = [d for d in definitions if d.level_id in wanted]
        if not definitions:
            logger.error(f"No levels match {sorted(wanted)}")
            return 1

    reports = run_levels(
        definitions,
        settings["strategy_name"],
        printer=None if args.json else print_report,
        max_workers=settings["max_workers"],
        max_states=settings["max_states"],
        max_depth=settings["max_depth"],
        progress_interval=settings["progress_interval"],
    )

    if args.json:
        print(json.dumps([r.model_dump() for r in reports], indent=2))

    failed = [r.level_id for r in reports if r.error]
    if failed:
        logger.error(f"Levels failed with errors: {failed}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
