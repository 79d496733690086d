"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .numconv import atol
from .sorting import radix_sort, sort_few
from .stacks import Item, Stacks
from .validate import (
    InputError,
    check_numbers,
    has_duplicates,
    is_sorted,
    out_of_range,
    rank,
)

_FEW = 5


def solve(args: Sequence[str]) -> list[str]:
    """Return the operations that sort ``args`` onto stack ``a``.

    Raises InputError when the arguments are not distinct integers that fit
    in a 32-bit int.
    """
    if not args:
        return []
    check_numbers(args)
    values = [atol(arg) for arg in args]
    ranks = rank(values)
    if has_duplicates(values) or out_of_range(values, args):
        raise InputError("duplicate or out-of-range number")
    if is_sorted(ranks):
        return []
    operations: list[str] = []
    stacks = Stacks(
        (Item(value, r) for value, r in zip(values, ranks)),
        emit=operations.append,
    )
    if len(values) <= _FEW:
        sort_few(stacks, len(values))
    else:
        radix_sort(stacks, max(ranks))
    return operations


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on ``argv`` (default: the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        operations = solve(args)
    except InputError as error:
        sys.stderr.write("Error\n")
        return error.status
    sys.stdout.write("".join(op + "\n" for op in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())