"""Checks applied to the command-line numbers before they are sorted."""

from __future__ import annotations

from collections.abc import Sequence

from .charclass import is_digit_or_minus

INT_MIN = -2147483648
INT_MAX = 2147483647

# Exit status reported for arguments that are not numbers at all.
BAD_TOKEN_STATUS = 6
# Exit status reported for duplicates and values outside the int range.
BAD_VALUE_STATUS = 1

_MAX_DIGITS = 10
_MAX_SIGNED_LENGTH = 11


class InputError(ValueError):
    """The arguments cannot be sorted; ``status`` is the exit status to report."""

    def __init__(self, message: str, status: int = BAD_VALUE_STATUS) -> None:
        super().__init__(message)
        self.status = status


def check_numbers(args: Sequence[str]) -> None:
    """Raise InputError unless every argument is made of digits and a leading minus.

    A lone ``-`` anywhere among the arguments rejects them all, and a minus
    sign is only allowed as the first character. Empty arguments pass.
    """
    if "-" in args:
        raise InputError("a lone minus sign is not a number", BAD_TOKEN_STATUS)
    for arg in args:
        for pos, ch in enumerate(arg):
            if not is_digit_or_minus(ch):
                raise InputError(f"invalid character {ch!r} in {arg!r}", BAD_TOKEN_STATUS)
            if pos and ch == "-":
                raise InputError(f"misplaced minus sign in {arg!r}", BAD_TOKEN_STATUS)


def has_duplicates(values: Sequence[int]) -> bool:
    """Return True when some value occurs more than once."""
    return len(set(values)) != len(values)


def out_of_range(values: Sequence[int], args: Sequence[str]) -> bool:
    """Return True when an argument is too long or a value does not fit in an int."""
    for arg in args:
        limit = _MAX_SIGNED_LENGTH if arg.startswith("-") else _MAX_DIGITS
        if len(arg) > limit:
            return True
    return any(not INT_MIN <= value <= INT_MAX for value in values)


def rank(values: Sequence[int]) -> list[int]:
    """Rank of each value: how many of the values are smaller than it."""
    return [sum(other < value for other in values) for value in values]


def is_sorted(ranks: Sequence[int]) -> bool:
    """Return True when the ranks run 0, 1, 2, ... in consecutive order."""
    return all(later == earlier + 1 for earlier, later in zip(ranks, ranks[1:]))