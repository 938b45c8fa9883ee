# pushswap

Sorts a list of distinct integers using two stacks, **a** and **b**, and
prints the sequence of stack operations that does the sorting, one per line.

## Operations

| Op    | Meaning                                         |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of a                  |
| `sb`  | swap the top two elements of b                  |
| `pa`  | move the top of b onto a                        |
| `pb`  | move the top of a onto b                        |
| `ra`  | rotate a up (top goes to the bottom)            |
| `rb`  | rotate b up                                     |
| `rra` | rotate a down (bottom goes to the top)          |
| `rrb` | rotate b down                                   |
| `rr`  | `ra` and `rb` together                          |
| `rrr` | `rra` and `rrb` together                        |

`Board.apply` accepts all of these. `rr` and `rrr` are carried out, printed
and recorded as the two single-stack operations they consist of. The sorting
routines themselves only use `sa`, `sb`, `pa`, `pb`, `ra`, `rb`, `rra` and
`rrb`.

## Usage

Install the package, then give the numbers either as separate arguments or
as one space-separated argument:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The first number is the top of stack a. The program prints the operations to
standard output and exits with status 0. It prints nothing when the input is
already in ascending order. Five or fewer numbers are handled by a short
routine; larger inputs are ranked and then radix-sorted one bit at a time.

### Errors

The program writes `Error` to standard error and exits with status 1 when:

- an argument is not an integer (an optional `+` or `-` followed by digits),
- a value does not fit in a signed 32-bit integer,
- an argument is empty,
- a value appears twice.

With no arguments at all it exits with status 1 and prints nothing.

## Library use

```python
from pushswap.cli import solve
from pushswap.stack import Board
from pushswap.sorting import sort

print(solve(["3", "2", "1"]))   # list of operation names, nothing printed

board = Board([5, 1, 4, 2, 3])  # operations are written to stdout as applied
sort(board)
print(list(board.a))            # [0, 1, 2, 3, 4]: the ranks, ascending
print(board.operations)         # the operations applied, in order
```

Modules:

- `pushswap.cli` – `main(argv=None)` for the command, `solve(argv)` returning
  the operations as a list.
- `pushswap.stack` – `Stack`, `Board` (pass `stream=` to send the operation
  log somewhere other than standard output) and `compress`, which replaces
  values by their ranks.
- `pushswap.sorting` – `sort`, `sort_short`, `sort_three` and `radix_sort`.
- `pushswap.validate` – argument splitting and the input checks, raising
  `InputError` (a `ValueError`) on bad input.
- `pushswap.formatting` – a small printf-style formatter with
  `%c %s %d %i %u %x %X %p %%`: `format_string`, `printf`, `format_number`
  and `to_base`.
- `pushswap.conversions` – `atoi`, `itoa` and `split`.
- `pushswap.output` – `put_char`, `put_str`, `put_line` and `put_number`.
- `pushswap.textops`, `pushswap.memory`, `pushswap.chars` – string, byte
  buffer and character helpers that read a NUL character as the end of a
  string.

## Tests

```
pip install -e ".[test]"
pytest
```