# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of instructions. Each instruction that is applied is printed
on its own line, so the output is a program that sorts the input.

## Instructions

The moves are methods of `pushswap.stacks.Stacks`. A move that would
change nothing (for example a swap on a stack with fewer than two
values) is not recorded or printed.

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two values of `a`                |
| `sb`  | swap the top two values of `b`                |
| `ss`  | `sa` and `sb`, then `ss` itself               |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` upwards (top goes to the bottom)   |
| `rb`  | rotate `b` upwards                            |
| `rr`  | `ra` and `rb`, then `rr` itself               |
| `rra` | rotate `a` downwards (bottom comes to the top)|
| `rrb` | rotate `b` downwards                          |
| `rrr` | `rra` and `rrb`, then `rrr` itself            |

The combined moves `ss`, `rr` and `rrr` record each single move they
perform and then record their own name as well.

## Command line

```
pip install .
pushswap 3 2 1
pushswap "5 4 1 3 2"
```

The numbers can be given as separate arguments or as one argument
separated by spaces. With no arguments nothing is printed and the exit
status is 0.

The input is rejected with `Error` on standard error and exit status 1
when a value is not an integer, does not lie strictly inside the 32-bit
signed range, or appears twice, and when a single argument holds fewer
than two numbers. Input that is already sorted prints nothing and exits
with status 1.

Two or three values are sorted with a few swaps and rotations, four or
five by pushing the smallest values to `b` first, and larger inputs
with a binary radix sort on the values' ranks.

## Library use

```python
from pushswap.parsing import parse_arguments, check_values
from pushswap.sorting import fill_stack, sort_stack
from pushswap.stacks import Stacks

values = check_values(parse_arguments(["4", "2", "3", "1"]))
stacks = Stacks(a=fill_stack(values))
sort_stack(stacks)
print(stacks.moves)                       # the instructions applied
print([node.value for node in stacks.a])  # [1, 2, 3, 4]
```

- `pushswap.parsing`: `parse_int`, `parse_arguments` and `check_values`;
  they raise `InputError` for bad input and `AlreadySortedError` for
  input that needs no sorting.
- `pushswap.stacks`: `Node` (a value and its rank) and `Stacks`, which
  keeps the applied moves in `moves` and also writes them to `stream`
  when one is given.
- `pushswap.sorting`: `fill_stack`, `format_stack`, `sort_three`,
  `radix_sort` and `sort_stack`.
- `pushswap.cli`: `main`, the function behind the `pushswap` command.

The `pushswap.libft` sub-package holds small helpers:

- `charclass`: ASCII classes and case mapping (`isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`).
- `conversions`: `atoi` and `itoa` for 32-bit integers.
- `strings`: `strchr`, `strrchr`, `strnstr`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, `striteri`, `strncmp`, `strlcpy`,
  `strlcat`.
- `memory`: byte-buffer helpers `memset`, `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`.
- `lists`: `ListNode` and `LinkedList`, a singly linked list.
- `lines`: `LineReader`, which reads a stream line by line through a
  small buffer.
- `output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
- `printf`: `format_printf` and `printf` with the conversions
  `c s p d i u x X %`.

## What it does not do

There is no checker: the package prints a sequence of instructions but
has no command that reads instructions back and verifies that they sort
the input.

## Tests

```
pip install ".[test]"
pytest
```