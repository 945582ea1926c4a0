"""Filling stack ``a`` and choosing the moves that sort it."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, List

from pushswap.stacks import Node, Stacks


def fill_stack(values: Iterable[int]) -> List[Node]:
    """Build the nodes of stack ``a``, top first, each ranked among all values."""
    values = list(values)
    ranked = sorted(values)
    return [Node(value, ranked.index(value)) for value in values]


def format_stack(stack: Iterable[Node]) -> str:
    """Render the values of a stack, top first, each followed by a space."""
    return "".join(f"{node.value} " for node in stack) + "\n"


def sort_three(stacks: Stacks) -> None:
    """Sort the three values at the top of ``a`` with at most two moves."""
    first, second, third = (node.value for node in islice(stacks.a, 3))
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _push_min(stacks: Stacks) -> None:
    smallest = min(node.value for node in stacks.a)
    while stacks.a[0].value != smallest:
        stacks.ra()
    stacks.pb()


def _sort_five(stacks: Stacks, size: int) -> None:
    _push_min(stacks)
    if size == 5:
        _push_min(stacks)
    sort_three(stacks)
    stacks.pa()
    if size == 5:
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` by the bits of each node's rank, lowest bit first."""
    if not stacks.a:
        return
    index_max = max(node.index for node in stacks.a)
    for bit in range(index_max.bit_length()):
        for _ in range(index_max + 1):
            if (stacks.a[0].index >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.b:
            stacks.pa()


def sort_stack(stacks: Stacks) -> None:
    """Sort ``a`` using the strategy that suits its size."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        _sort_five(stacks, size)
    else:
        radix_sort(stacks)