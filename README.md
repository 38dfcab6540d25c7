# pushswap

pushswap solves the two-stack sorting puzzle. You give it a list of distinct
integers. It prints a sequence of stack operations that leaves them sorted in
ascending order on stack `a`, with stack `b` used as scratch space.

## Operations

| Op    | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up, so the top becomes the bottom   |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down, so the bottom becomes the top |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

## Command line

```
push-swap 3 2 1
```

The first argument is the top of stack `a`. Each operation is printed on its
own line. The same entry point is also available as `python -m pushswap.cli`.

- Each number must be its own argument. Every argument must be a decimal
  integer in the signed 32-bit range. A leading `-` is allowed. A `+` sign,
  spaces and other characters are rejected.
- Empty arguments, invalid arguments and duplicates make the program write
  `Error` to standard error, with no newline. It still exits with status 0.
- If no arguments are given, or the input is already sorted, nothing is
  printed.

For three numbers the program uses at most two operations. For larger inputs
it pushes everything but three numbers to `b`. It then moves each one back in
turn. Each time it picks the number whose rotations are cheapest to bring it
into place.

## Library use

```python
from pushswap.sorter import solve

ops = solve([3, 2, 1])   # ["sa", "rra"]
```

`solve` returns the list of operation names. It raises
`pushswap.args.ArgumentError` (a `ValueError`) if a number appears twice.

`pushswap.cli.run(args)` takes the argument strings, validates them, and
returns the operations without printing anything.

### Input checking: `pushswap.args`

- `check_args(args)` validates the argument strings.
- `parse_args(args)` validates them and returns two lists: the numbers in the
  given order and the numbers sorted.
- `parse_number(text)` reads an integer the way C's `atoi` does.
- `sort_values(numbers)` sorts the numbers and rejects duplicates.
- Invalid input raises `ArgumentError`.

### Stack machinery: `pushswap.stack`

- `Stacks` holds both stacks as lists of `Node`, top first.
- `Stacks` has one method per operation: `sa`, `sb`, `ss`, `pa`, `pb`, `ra`,
  `rb`, `rr`, `rra`, `rrb`, `rrr`.
- An operation that has nothing to act on does nothing and is not recorded.
- Every operation that is performed is appended to `Stacks.moves`. It is also
  passed to the optional `emit` callback.
- `Stacks.numbers("a")` and `Stacks.numbers("b")` return the numbers on a
  stack, top first.
- `build_stacks(numbers, sorted_values)` creates the starting state. Every
  number is placed on `a` and tagged with its rank.

### Sorting steps: `pushswap.sorter`

`pushswap.sorter` exposes the individual steps of the algorithm:

- `sort_three`
- `sort_nums`
- `sort_stacks`
- `calculate_target`
- `calculate_exit`
- `calculate_cost`
- `find_cheaper`
- `make_move_a`
- `make_move_b`
- `move_smaller`

## What it does not do

pushswap only produces operations. It has no checker: there is no command that
reads a list of operations and tells you whether it sorts a given input. It
does not try to find the shortest possible sequence either.

## Tests

```
pip install -e .[test]
pytest
```