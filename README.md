# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of moves. The moves that were used are printed one per line; after the
last one, stack `a` holds every value in ascending order from top to bottom
and `b` is empty.

## Moves

| move  | effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` at once                             |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` upwards (the top goes to the bottom)   |
| `rb`  | rotate `b` upwards                                |
| `rr`  | `ra` and `rb` at once                             |
| `rra` | rotate `a` downwards (the bottom goes to the top) |
| `rrb` | rotate `b` downwards                              |
| `rrr` | `rra` and `rrb` at once                           |

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments. The first argument ends up on top of
stack `a`:

```
pushswap 2 1 3 6 5 8
```

- With no arguments, nothing is printed and the exit status is 0.
- Input that is already sorted prints nothing.
- Each argument must be an optional `+` or `-` followed by one or more
  decimal digits, with nothing else around it. Values are read as 32-bit
  integers and wrap around outside that range.
- If an argument is not such a number, or if a value appears twice, the
  command prints `Error` on standard output and exits with status 1.

Lists of two to five numbers are sorted by a dedicated routine. Larger lists
are pushed to `b` in chunks of increasing rank, then brought back to `a` one
element at a time, each time choosing the element of `b` that is cheapest to
move, and finally `a` is rotated until its smallest value is on top.

## From Python

```python
from pushswap.cli import solve

moves = solve([4, 67, 3, 87, 23])
```

`solve` returns the list of move names in the order they are applied.

Other parts that can be used directly:

- `pushswap.stack.Board` holds stacks `a` and `b` and the list `moves`, with
  one method per move (`sa`, `pb`, `rra`, ...). Use it to replay a sequence
  of moves and inspect the result with `board.a.values()`.
- `pushswap.stack.Stack` and `pushswap.stack.Node` are the stack and its
  elements; `assign_indices` gives each node its rank among the values.
- `pushswap.parsing.parse_values` turns argument strings into integers and
  raises `pushswap.parsing.InputError` on invalid or duplicate input.

## Formatter

The package also contains a small printf-style formatter:

```python
from pushswap.formatter import format_string, printf

format_string("%-5d|%#x|%.3s", 42, 255, "abcdef")  # '42   |0xff|abc'
printf("%05i\n", -12)                             # writes '-0012', returns 6
```

It supports the conversions `c s p d i u x X %` together with the flags
`- 0 # space +`, a field width and a precision. A `%` followed by an unknown
conversion character is written as a plain `%`, and the character after it
is kept as ordinary text. Too few arguments raise `TypeError`. `printf`
writes to standard output unless `file=` is given and returns the number of
characters written.

## What it does not do

There is no separate command that reads a list of moves and checks whether
they sort a given input; `Board` can be used from Python for that.