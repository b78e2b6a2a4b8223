import sys
import logging
from argparse import ArgumentParser
from typing import List, Optional
import structlog
from structlog import get_logger
from avltree import const
from avltree.tree import AVLTree

_LOGGER = get_logger()


def _configure_logging(verbose: bool):
    """structured logs on stderr so stdout only carries values"""

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _parser() -> ArgumentParser:
    parser = ArgumentParser(description="sort values through an avl tree")
    parser.add_argument("items", nargs="+", help="values to insert")
    parser.add_argument(
        "-k",
        "--key-type",
        help="how to parse values",
        choices=sorted(const.KEY_TYPES),
        default=const.DEFAULT_KEY_TYPE,
    )
    parser.add_argument(
        "-r", "--remove", help="remove key after building", action="append", default=[]
    )
    parser.add_argument("--reverse", help="descending order", action="store_true")
    parser.add_argument("-v", "--verbose", help="debug logs", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """fire it up"""

    parser = _parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    parse = const.KEY_TYPES[args.key_type]

    try:
        items = [parse(item) for item in args.items]
        removals = [parse(item) for item in args.remove]
    except ValueError as error:
        parser.error(str(error))

    tree = AVLTree.from_comparables(items)

    for key in removals:
        tree.remove(key)

    tree.validate()

    for value in tree.reversed if args.reverse else tree:
        print(value)

    _LOGGER.info("cli.done", size=len(tree), height=tree.height)
    return 0


if __name__ == "__main__":
    sys.exit(main())
