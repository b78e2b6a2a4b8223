from argparse import ArgumentParser
from timeit import timeit
from random import getrandbits
from structlog import get_logger
from avltree import AVLTree, const

LOGGER = get_logger()


def main():
    """fire it up"""

    parser = ArgumentParser()
    parser.add_argument(
        "-z",
        "--set-size",
        type=int,
        help="number of keys to insert",
        default=const.BENCH_SET_SIZE,
    )
    args = parser.parse_args()
    keys = [getrandbits(const.BENCH_KEY_BITS) for _ in range(0, args.set_size)]
    tree = AVLTree()

    LOGGER.info("config", set_size=args.set_size, key_bits=const.BENCH_KEY_BITS)

    def populate():
        for key in keys:
            tree.insert(key)

    def lookup():
        for key in keys:
            tree.get(key)

    def drain():
        for key in keys:
            tree.remove(key)

    LOGGER.info("running")
    LOGGER.info("insert", elapsed=timeit(populate, number=1), height=tree.height)
    LOGGER.info("get", elapsed=timeit(lookup, number=1))
    LOGGER.info("traverse", elapsed=timeit(lambda: sum(1 for _ in tree), number=1))
    LOGGER.info("remove", elapsed=timeit(drain, number=1), size=len(tree))


if __name__ == "__main__":
    main()
