# fsmreduce

`fsmreduce` minimizes finite-state machines of the Mealy and Moore kinds. It
reads an automaton from a semicolon-separated table, drops the states that the
initial state cannot reach, merges equivalent states, and writes the reduced
table back out.

## Installation

```
pip install .
```

## Command line

```
fsmreduce mealy input.csv output.csv
fsmreduce moore input.csv output.csv
```

The first argument is the kind of automaton, `mealy` or `moore`. The second is
the table to read and the third is the file the minimized table is written to.
In the output the merged states are named `X1`, `X2`, and so on. If a file
cannot be read or written, or the table is malformed, the command prints a
message prefixed with `fsmreduce:` to standard error and exits with status 1.

## Table formats

Fields are separated by `;`. The first state listed is the initial one.

A **Mealy** table starts with a header row whose first cell is left empty and
whose other cells name the states. Each following row begins with an input
symbol, and its cells hold `target/output` for each state. A cell of `-` means
there is no transition; an empty cell that is not the last on its line is read
as `-`.

```
;a0;a1;a2
x1;a1/y1;a2/y2;a0/y1
x2;a0/y2;a2/y1;a1/y2
```

A **Moore** table has two header rows. The first gives each state's output
signal and the second gives the state names. The rows after that begin with an
input symbol and hold the target state for each state, or `-` for no
transition.

```
;y1;y2;y1
;a0;a1;a2
x1;a1;a2;a0
x2;a0;a2;a1
```

A line with more cells than the table has columns, or a transition to a state
that is not named in the header, is rejected with a `ValueError`.

In the written output, `-` markers are written as empty fields.

## Library use

```python
from fsmreduce.mealy import MealyAutomaton
from fsmreduce.cli import format_table

with open("input.csv", encoding="utf-8") as handle:
    automaton = MealyAutomaton.from_lines(handle)

automaton.remove_unreachable()
print(format_table(automaton.minimized()), end="")
```

- `MealyAutomaton` (in `fsmreduce.mealy`) and `MooreAutomaton` (in
  `fsmreduce.moore`) both derive from `Automaton` in `fsmreduce.automaton`.
  `from_lines` accepts any iterable of lines; trailing line breaks are
  stripped.
- `remove_unreachable()` drops every state the initial state cannot reach.
- `minimized()` returns the minimal table in column-major form: a list whose
  first entry is the header column and whose other entries are one column per
  merged state.
- `find_state(name)` and `find_row(name)` look a state or its column up by
  binary search. They assume the states are listed in sorted order and raise
  `KeyError` when the name is not found.
- `format_table(table)` in `fsmreduce.cli` renders a column-major table as
  semicolon-separated lines.
- `minimize_file(kind, input_path, output_path)` in `fsmreduce.cli` does the
  whole job from one file to another; `kind` is `"mealy"` or `"moore"`, and any
  other value raises `ValueError`.
- `split(text, delimiter)` in `fsmreduce.splitting` is the field splitter used
  for the tables.

## Running the tests

```
pip install .[test]
pytest
```