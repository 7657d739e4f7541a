"""Minimal example combining list and bitwise operations."""

from __future__ import annotations

import operator

from listops import bitwise, lists
from listops.core import compare
from listops.utils import get_logger


def main() -> None:
    logger = get_logger("examples")

    scores = (("ada", 36), ("bob", 25), ("cy", 36), ("dee", 19))
    ranked = lists.sort_with(lambda a, b: compare(b[1], a[1]), scores)
    logger.info("Ranked: %s", lists.map(operator.itemgetter(0), ranked))

    adults, minors = lists.partition(lambda row: row[1] >= 21, scores)
    logger.info("Adults: %d, minors: %d", len(adults), len(minors))

    totals = lists.scanl(operator.add, 0, lists.range(1, 5))
    logger.info("Running totals: %s", totals)

    names, ages = lists.unzip(scores)
    print("".join(lists.intersperse(", ", names)))
    print("Pairwise sums:", lists.map2(operator.add, ages, lists.reverse(ages)))

    bits = lists.map(lambda n: bitwise.shift_left_by(n, 1), (0, 3, 5))
    flags = lists.foldl(bitwise.or_, 0, bits)
    print("Flags:", bin(flags))
    print("Unsigned -1:", bitwise.shift_right_zf_by(0, -1))


if __name__ == "__main__":
    main()
