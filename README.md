# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small fixed set
of moves. The package has two commands, `push_swap` and `checker`, and the
same functionality as a library.

## Moves

The top of a stack is its first element.

| Move | Effect |
|------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both down: the bottom element goes to the top |

A single move that has nothing to act on (swapping or rotating a stack with
fewer than two elements, pushing from an empty stack) does nothing and is not
recorded. The combined moves `ss`, `rr` and `rrr` record the single moves
they perform, followed by their own name.

## Installing

```
pip install .
```

## `push_swap`

Give the numbers as arguments, top of stack first. Several numbers may also be
given inside one argument, separated by a single kind of separator: space,
comma, semicolon, or one of the whitespace characters `\f \n \r \t \v`.

```
push_swap 3 1 2
push_swap "5 4 3 2 1"
push_swap 4,2,9,7
```

The command prints one move per line. The numbers are first replaced by their
ranks (smallest is 0). Lists of up to five numbers get a short hand-made
sequence; longer lists are sorted with a binary radix sort on the ranks, one
pass per bit.

- An input that is already in order prints nothing.
- An argument holding anything other than digits, `+`, `-` and one kind of
  separator, or a value outside the 32-bit signed range, prints `Error` and
  exits with status 1.
- Unsorted input with a repeated number prints `Error` (exit status 0).
- With no arguments nothing happens.

It can also be run as `python -m pushswap.cli`.

## `checker`

Give the same numbers as arguments and feed moves on standard input, one per
line:

```
push_swap 3 2 1 | checker 3 2 1
```

Each move is applied as it is read and its name is echoed to standard output
(a combined move echoes its single moves first). At the end the command prints
`OK` when stack `a` is in order and still holds every number, `KO` otherwise.
A line that is not exactly a known move stops reading and prints `Error`.
Malformed arguments print `Error` with exit status 1; unsorted input with a
repeated number prints `Error`. Input already in order prints nothing and no
moves are read.

It can also be run as `python -m pushswap.checker`.

## Library use

```python
from pushswap.cli import solve
from pushswap.checker import check
from pushswap.stacks import Stacks

moves = solve(["3", "1", "2"])
verdict = check(["3", "1", "2"], (f"{m}\n" for m in moves))  # "OK"

stacks = Stacks([2, 0, 1], output=print)
stacks.sa()
print(stacks.state())
```

- `pushswap.stacks.Stacks` holds the deques `a` and `b`, performs the moves
  (`sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`, `rrr`),
  records them in `moves`, passes each name to the optional `output`
  callable, and draws both stacks with `state()`.
- `pushswap.parsing` has `parse_arguments`, `detect_separator`,
  `split_argument` and `parse_number`; errors raise `ParseError`, a
  subclass of `ValueError`.
- `pushswap.indexing` has `has_duplicates`, `is_sorted`, `find_index` and
  `normalize` (numbers to ranks).
- `pushswap.sorting` has `sort_small`, `sort_big` and `sort_stacks`, which
  sort a `Stacks` whose `a` holds the ranks `0..n-1`.
- `pushswap.cli.solve` returns the moves for a list of arguments;
  `pushswap.checker.check` replays move lines and returns `"OK"`, `"KO"`,
  `"Error"`, or `None` for input already in order;
  `pushswap.checker.apply_command` applies one newline-terminated move line
  and raises `ValueError` for an unknown one.