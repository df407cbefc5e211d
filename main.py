"""
main.py

Entry point for the string exercises.

Usage:
    python main.py palindrome "A man, a plan, a canal: Panama"
    python main.py pairs abcde --filler "*"
    echo "racecar" | python main.py palindrome -
    python main.py --help
"""

import argparse
import sys
from typing import Optional

from core.config import RunConfig
from core.logging import setup_logging, get_logger
from core.registry import EXERCISES, ExerciseError, run_exercise
from display.console import ConsoleDisplay
from exercises import DEFAULT_FILLER, validate_filler

logger = get_logger(__name__)


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="string-exercises",
        description="Interview-style string exercises: palindrome check and pair splitting.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py palindrome "Was it a car or a cat I saw?"
  python main.py pairs 1234 123
  python main.py pairs abc --filler "*"
        """,
    )
    parser.add_argument(
        "exercise",
        choices=sorted(EXERCISES),
        help="Exercise to run (palindrome|pairs)",
    )
    parser.add_argument(
        "texts",
        nargs="+",
        metavar="TEXT",
        help='Input text(s). Use "-" to read one text per line from stdin',
    )
    parser.add_argument(
        "--filler",
        default=DEFAULT_FILLER,
        metavar="CHAR",
        help=f"Padding character for odd-length input to pairs (default: {DEFAULT_FILLER})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        metavar="LEVEL",
        help="Logging level (DEBUG|INFO|WARNING|ERROR, default: WARNING)",
    )
    return parser.parse_args(argv)


def read_texts(texts: list) -> list:
    """Expand "-" entries into the lines read from stdin."""
    expanded = []
    for text in texts:
        if text == "-":
            expanded.extend(line.rstrip("\r\n") for line in sys.stdin)
        else:
            expanded.append(text)
    return expanded


def build_config(args: argparse.Namespace) -> RunConfig:
    """Collect flags into a RunConfig. Raises ValueError for a bad --filler."""
    filler = validate_filler(args.filler)
    return RunConfig(
        exercise=args.exercise,
        texts=read_texts(args.texts),
        filler=filler,
        log_level=args.log_level,
    )


def main(argv: Optional[list] = None, display: Optional[ConsoleDisplay] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    display = display or ConsoleDisplay()

    try:
        config = build_config(args)
    except ValueError as exc:
        display.error(str(exc))
        return 1

    display.header(config.exercise, len(config.texts))

    results = []
    try:
        for text in config.texts:
            result = run_exercise(config.exercise, text, filler=config.filler)
            display.result(result)
            results.append(result)
    except (ExerciseError, ValueError) as exc:
        display.error(str(exc))
        return 1

    logger.info("Processed %d input(s) with %s", len(results), config.exercise)
    display.summary(results)
    display.success(f"Processed {len(results)} input(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
