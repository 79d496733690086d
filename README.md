# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and prints
the sequence of operations that does it. The operations used are:

| Operation | Effect                                           |
|-----------|--------------------------------------------------|
| `sa`      | swap the top two items of `a`                    |
| `ra`      | rotate `a` up: the top item becomes the bottom   |
| `rra`     | rotate `a` down: the bottom item becomes the top |
| `pa`      | move the top of `b` onto `a`                     |
| `pb`      | move the top of `a` onto `b`                     |

## Installation

```
pip install .
```

## Command line

```
push-swap 3 1 2
```

The same command is available as `python -m pushswap.cli 3 1 2`.

It prints one operation per line. For example, for `2 1 3` the output is:

```
sa
```

Behaviour:

- With no arguments nothing is printed.
- Input that is already sorted prints nothing.
- Up to five numbers are sorted with fixed sequences; more numbers are
  sorted with a binary radix sort on each value's rank.
- An argument holding anything but digits and a leading `-`, or a lone `-`
  among the arguments, prints `Error` on standard error and exits with
  status 6.
- Duplicates, or values outside the 32-bit signed range, print `Error` on
  standard error and exit with status 1.

## Library use

```python
from pushswap.cli import solve

print(solve(["3", "2", "1"]))   # ['sa', 'rra']
```

`solve` returns the list of operation names and raises
`pushswap.validate.InputError` on invalid input; its `status` attribute holds
the exit status the command would report. `pushswap.cli.main(argv=None)` runs
the command on a list of arguments and returns that status.

The lower-level pieces:

- `pushswap.stacks`: `Item` (a value and its rank) and `Stacks`, which holds
  the deques `a` and `b`, offers `sa`, `ra`, `rra`, `pa`, `pb` and
  `ranks_a()`, and reports each operation performed through an `emit`
  callback (printing it to standard output by default). An operation with
  nothing to act on does nothing and reports nothing.
- `pushswap.sorting`: `max_bits`, `sort_three`, `sort_four`, `sort_few` and
  `radix_sort`.
- `pushswap.validate`: `check_numbers`, `has_duplicates`, `out_of_range`,
  `rank`, `is_sorted` and `InputError`.

The package also has small helper modules:

- `pushswap.charclass`: ASCII tests (`is_alpha`, `is_alnum`, `is_ascii`,
  `is_print`, `is_digit_or_minus`) and `to_upper` / `to_lower`.
- `pushswap.numconv`: `atoi` and `atol` (leading decimal integer, wrapped to
  32 or 64 bits), `itoa` and `utoa`.
- `pushswap.strings`: `split`, `find_char`, `find_last_char`, `duplicate`,
  `iter_indexed`, `join`, `map_indexed`, `compare_prefix`, `find_within`,
  `trim` and `substring`.
- `pushswap.memory`: byte-buffer helpers `fill`, `zero`, `zeroed`,
  `find_byte`, `compare_bytes`, `copy_bytes`, `move_bytes`, and the bounded
  string copies `copy_bounded` and `concat_bounded`.
- `pushswap.output`: a small printf (`render`, `printf`) supporting `%c`,
  `%s`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p` and `%e` (text to standard
  error), and the writers `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `pushswap.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each` and
  `map`.

## What it does not do

The package only produces operations. It has no command that reads a list of
operations and checks whether they sort a given input, and it has no
operations on stack `b` alone (`sb`, `rb`, `rrb`) or on both stacks at once.

## Running the tests

```
pip install .[test]
pytest
```