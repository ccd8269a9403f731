# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a small set of
stack operations. The `push-swap` command prints the operations that sort the
numbers, one per line.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up (the top goes to the bottom)      |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down (the bottom goes to the top)    |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An operation on a stack with too few elements leaves that stack unchanged.

## Command line

```
pip install .
push-swap 3 2 1
push-swap "5 4 3" 2 1
```

The same entry point can also be run as `python -m pushswap.cli`.

Each number can be a separate argument, or several numbers can share one
argument separated by spaces. Stack `a` holds the numbers in the order given,
with the first number on top.

Every number must be an optional `+` or `-` followed by digits, and it must fit
in a signed 32-bit integer. The same number may not appear twice. If the input
breaks any of these rules, the command writes `Error` to standard error and
exits with status 1. If the input is already sorted, or empty, it prints
nothing.

## Library

```python
from pushswap.sorting import push_swap
from pushswap.stacks import Stacks

operations = push_swap([3, 2, 1])

stacks = Stacks.from_numbers([3, 2, 1])
for operation in operations:
    stacks.apply(operation)
assert stacks.numbers_a() == [1, 2, 3]
```

- `pushswap.stacks.Stacks` holds the two stacks as deques of `Node` objects.
  It has one method per operation (`sa()`, `pb()`, `rra()` and so on), and
  `apply(name)` runs an operation by name. An unknown name raises
  `ValueError`. Every operation performed is appended to `Stacks.operations`.
- `pushswap.sorting.push_swap(numbers)` returns the list of operation names
  that sort `numbers`. Two numbers are sorted with `sa` and three with at most
  two operations. Larger inputs are sorted by pushing all but three numbers to
  `b`, and then moving back the number that needs the fewest rotations until
  `b` is empty.
- `pushswap.parsing.parse_arguments(args)` turns command-line strings into a
  list of integers. On invalid input it raises `pushswap.parsing.InputError`,
  which is a `ValueError`.

## What it does not do

The package does not provide a separate command that reads operations from
standard input and checks them. To check a sequence of operations, replay it
with `Stacks.apply` as shown above.

## Tests

```
pip install ".[test]"
pytest
```