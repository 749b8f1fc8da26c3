import argparse
import logging
from collections.abc import Sequence
from typing import Optional

from ._version import __version__
from .driver import CommandDriver
from .errors import CombinationError
from .events import Combination
from .lock import ComboLock

LOG_FORMAT = " %(name)-12s [%(levelname)-5s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="combolock",
        description="Finite state machine demo of a mechanical combination lock.",
    )
    parser.add_argument(
        "--combination",
        nargs=3,
        type=int,
        default=(0, 0, 0),
        metavar="N",
        help="Initial combination (default: 0 0 0)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Same as --log-level DEBUG"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format=LOG_FORMAT, level=logging.DEBUG if args.verbose else args.log_level
    )

    try:
        combination = Combination.of(args.combination)
    except CombinationError as error:
        parser.error(str(error))

    CommandDriver(ComboLock(combination)).run()
    return 0
