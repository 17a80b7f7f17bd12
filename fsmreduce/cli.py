"""Command line entry point: minimize a Mealy or Moore machine table."""

import argparse
import sys
from collections.abc import Sequence

from .automaton import NO_TRANSITION, Table
from .mealy import MealyAutomaton
from .moore import MooreAutomaton

DELIMITER = ";"

KINDS = {
    "mealy": MealyAutomaton,
    "moore": MooreAutomaton,
}


def format_table(table: Table) -> str:
    """Render a column-major table as semicolon-separated lines.

    The empty-field marker is written as an empty field.
    """
    if not table:
        return ""
    lines = []
    for fields in zip(*table, strict=True):
        lines.append(
            DELIMITER.join("" if cell == NO_TRANSITION else cell for cell in fields)
        )
    return "".join(f"{line}\n" for line in lines)


def minimize_file(kind: str, input_path, output_path) -> None:
    """Read a machine of the given kind, minimize it and write the result."""
    try:
        automaton_class = KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown automaton kind {kind!r}") from None
    with open(input_path, encoding="utf-8") as source:
        automaton = automaton_class.from_lines(source)
    automaton.remove_unreachable()
    text = format_table(automaton.minimized())
    with open(output_path, "w", encoding="utf-8") as target:
        target.write(text)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fsmreduce",
        description="Remove unreachable states and minimize a finite-state machine.",
    )
    parser.add_argument("kind", choices=sorted(KINDS), help="kind of machine")
    parser.add_argument("input", help="file holding the machine's table")
    parser.add_argument("output", help="file to write the minimized table to")
    args = parser.parse_args(argv)
    try:
        minimize_file(args.kind, args.input, args.output)
    except (OSError, ValueError, KeyError) as error:
        print(f"fsmreduce: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())