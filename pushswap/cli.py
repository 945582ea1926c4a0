"""Command that prints the moves sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import AlreadySortedError, InputError, check_values, parse_arguments
from pushswap.sorting import fill_stack, sort_stack
from pushswap.stacks import Stacks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on ``argv`` (the program's arguments) and return the exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = check_values(parse_arguments(args))
    except AlreadySortedError:
        return 1
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(a=fill_stack(values), stream=sys.stdout)
    sort_stack(stacks)
    return 0


if __name__ == "__main__":
    sys.exit(main())