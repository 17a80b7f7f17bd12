"""Mealy machines: outputs are attached to transitions."""

from collections.abc import Iterable

from .automaton import Automaton, Row, State, Table
from .splitting import split

FIELD_DELIMITER = ";"
CELL_DELIMITER = "/"


def _target(cell: str) -> str:
    return split(cell, CELL_DELIMITER)[0]


def _output(cell: str) -> str:
    parts = split(cell, CELL_DELIMITER)
    if len(parts) < 2:
        raise ValueError(f"transition {cell!r} has no output signal")
    return parts[1]


def _name(row: Row) -> str:
    return row[0]


def _targets(row: Row) -> list[str]:
    return [_target(cell) for cell in row[1:]]


class MealyAutomaton(Automaton):
    """A Mealy machine read from a table of ``target/output`` cells.

    The first line names the states; each further line starts with an input
    symbol followed by one cell per state.
    """

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "MealyAutomaton":
        lines = iter(lines)
        fields = split(next(lines, "").rstrip("\r\n"), FIELD_DELIMITER)
        if len(fields) < 2:
            raise ValueError("the first line must name at least one state")
        header = [fields[0]]
        rows = [[name] for name in fields[1:]]
        states = [State(name) for name in fields[1:]]
        columns = [header, *rows]
        body = [line.rstrip("\r\n") for line in lines] or [""]
        for line in body:
            cells = split(line, FIELD_DELIMITER)
            if len(cells) > len(columns):
                raise ValueError(f"line {line!r} has more cells than the table has columns")
            for column, cell in zip(columns, cells):
                column.append(cell)
        return cls(header, rows, states)

    def find_state(self, name: str) -> State:
        return self.states[self._search([state.name for state in self.states], name)]

    def find_row(self, name: str) -> Row:
        return self.rows[self._search([row[0] for row in self.rows], name)]

    def remove_unreachable(self) -> None:
        self._prune(_name, _targets)

    def minimized(self) -> Table:
        by_name = self._rows_by_name(_name)
        keyed = [(row[0], tuple(_output(cell) for cell in row[1:])) for row in self.rows]
        classes = self._partition(keyed, lambda name: _targets(by_name[name]))
        table: Table = [list(self.header)]
        for block in classes:
            row = by_name[block.representative]
            table.append(
                [f"X{block.number}"]
                + [
                    f"X{label[1:]}{CELL_DELIMITER}{_output(cell)}"
                    for label, cell in zip(block.signature, row[1:])
                ]
            )
        return table