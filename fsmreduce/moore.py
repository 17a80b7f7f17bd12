"""Moore machines: outputs are attached to states."""

from collections.abc import Iterable

from .automaton import Automaton, Row, State, Table
from .splitting import split

FIELD_DELIMITER = ";"


def _strip(line: str) -> str:
    return line.rstrip("\r\n")


def _name(row: Row) -> str:
    return row[1]


def _targets(row: Row) -> list[str]:
    return row[2:]


class MooreAutomaton(Automaton):
    """A Moore machine read from a table of target states.

    The first line gives each state's output signal, the second names the
    states, and each further line starts with an input symbol followed by the
    target state for every state.
    """

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "MooreAutomaton":
        lines = iter(lines)
        outputs = split(_strip(next(lines, "")), FIELD_DELIMITER)
        if len(outputs) < 2:
            raise ValueError("the first line must give at least one output signal")
        names = split(_strip(next(lines, "")), FIELD_DELIMITER)
        if len(names) != len(outputs):
            raise ValueError("the second line must name one state per output signal")
        header = [outputs[0], names[0]]
        rows = [[output, name] for output, name in zip(outputs[1:], names[1:])]
        states = [State(name) for name in names[1:]]
        columns = [header, *rows]
        body = [_strip(line) for line in lines] or [""]
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
        return self.rows[self._search([_name(row) for row in self.rows], name)]

    def remove_unreachable(self) -> None:
        self._prune(_name, _targets)

    def minimized(self) -> Table:
        by_name = self._rows_by_name(_name)
        keyed = [(_name(row), (row[0],)) for row in self.rows]
        classes = self._partition(keyed, lambda name: _targets(by_name[name]))
        table: Table = [list(self.header)]
        for block in classes:
            row = by_name[block.representative]
            table.append(
                [row[0], f"X{block.number}"]
                + [f"X{label[1:]}" for label in block.signature]
            )
        return table