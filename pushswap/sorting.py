"""Sorting strategies: fixed sequences for a few numbers, binary radix for many."""

from __future__ import annotations

from collections.abc import Callable

from .stacks import Stacks


def max_bits(number: int) -> int:
    """Number of bits needed to write a non-negative ``number``."""
    if number < 0:
        raise ValueError("max_bits needs a non-negative number")
    return number.bit_length()


def radix_sort(stacks: Stacks, max_rank: int) -> None:
    """Sort ``a`` by the ranks of its items, one binary digit at a time."""
    for bit in range(max_bits(max_rank)):
        for _ in range(len(stacks.a)):
            if (stacks.a[0].rank >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort the three items at the top of ``a`` by value."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three items on stack a")
    x, y, z = (stacks.a[i].value for i in range(3))
    if x > y and y < z and x < z:
        stacks.sa()
    elif x > y and y > z:
        stacks.sa()
        stacks.rra()
    elif x > z and y < z:
        stacks.ra()
    elif x < y and y > z and x < z:
        stacks.rra()
        stacks.sa()
    elif x < y and y > z and x > z:
        stacks.rra()


def _bring_to_top(stacks: Stacks, target: int, move: Callable[[], None]) -> None:
    if all(item.rank != target for item in stacks.a):
        raise ValueError(f"no item of rank {target} on stack a")
    while stacks.a[0].rank != target:
        move()


def sort_four(stacks: Stacks) -> None:
    """Sort four items: park the smallest on ``b``, sort the rest, bring it back."""
    _bring_to_top(stacks, 0, stacks.ra)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def _sort_five(stacks: Stacks) -> None:
    _bring_to_top(stacks, 0, stacks.ra)
    stacks.pb()
    _bring_to_top(stacks, 1, stacks.rra)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def sort_few(stacks: Stacks, count: int) -> None:
    """Sort ``count`` items, from two to five; other counts are left alone."""
    if count == 2:
        stacks.ra()
    elif count == 3:
        sort_three(stacks)
    elif count == 4:
        sort_four(stacks)
    elif count == 5:
        _sort_five(stacks)