"""Common model for finite-state machines given as transition tables."""

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from .splitting import EMPTY_FIELD

NO_TRANSITION = EMPTY_FIELD

Row = list[str]
Table = list[list[str]]


@dataclass
class State:
    """A state name and whether it can be reached from the initial state."""

    name: str
    reachable: bool = False


@dataclass
class EquivalenceClass:
    """A block of the state partition, numbered from 1."""

    number: int = 1
    parent: int = 1
    signature: tuple[str, ...] = ()
    members: set[str] = field(default_factory=set)

    @property
    def representative(self) -> str:
        """The smallest member name."""
        return min(self.members)


class Automaton(ABC):
    """A machine stored as a header column and one column per state.

    Tables are column-major: ``header`` holds the row labels and every entry
    of ``rows`` is the column of one state. The first state is the initial one.
    """

    def __init__(self, header: Row, rows: Table, states: list[State]):
        self.header = header
        self.rows = rows
        self.states = states
        if states:
            states[0].reachable = True

    @classmethod
    @abstractmethod
    def from_lines(cls, lines: Iterable[str]) -> "Automaton":
        """Build a machine from the lines of a table."""

    @abstractmethod
    def remove_unreachable(self) -> None:
        """Drop the states that the initial state cannot reach."""

    @abstractmethod
    def minimized(self) -> Table:
        """Return the column-major table of the minimal equivalent machine."""

    @abstractmethod
    def find_state(self, name: str) -> State:
        """Look a state up by name; names must be listed in sorted order."""

    @abstractmethod
    def find_row(self, name: str) -> Row:
        """Look a state's column up by name; names must be in sorted order."""

    @staticmethod
    def _search(keys: Sequence[str], name: str) -> int:
        low, high = 0, len(keys) - 1
        while low <= high:
            middle = (low + high) // 2
            if keys[middle] == name:
                return middle
            if name > keys[middle]:
                low = middle + 1
            else:
                high = middle - 1
        raise KeyError(name)

    def _rows_by_name(self, name_of: Callable[[Row], str]) -> dict[str, Row]:
        index: dict[str, Row] = {}
        for row in self.rows:
            index.setdefault(name_of(row), row)
        return index

    def _prune(
        self,
        name_of: Callable[[Row], str],
        successors: Callable[[Row], Iterable[str]],
    ) -> None:
        if not self.rows:
            return
        by_name = self._rows_by_name(name_of)
        states: dict[str, State] = {}
        for state in self.states:
            states.setdefault(state.name, state)
        queue = deque(t for t in successors(self.rows[0]) if t != NO_TRANSITION)
        while queue:
            target = queue.popleft()
            state = states.get(target)
            if state is None:
                raise ValueError(f"transition to unknown state {target!r}")
            if state.reachable:
                continue
            state.reachable = True
            row = by_name.get(target)
            if row is not None:
                queue.extend(t for t in successors(row) if t != NO_TRANSITION)
        reachable = {state.name for state in self.states if state.reachable}
        self.rows = [row for row in self.rows if name_of(row) in reachable]

    @staticmethod
    def _label(classes: Sequence[EquivalenceClass], target: str) -> str:
        if target == NO_TRANSITION:
            return NO_TRANSITION
        for block in classes:
            if target in block.members:
                return f"A{block.number}"
        raise ValueError(f"transition to unknown state {target!r}")

    def _partition(
        self,
        keyed_states: Iterable[tuple[str, tuple[str, ...]]],
        successors_of: Callable[[str], Sequence[str]],
    ) -> list[EquivalenceClass]:
        """Refine the partition given by the keys until it stops splitting."""
        classes: list[EquivalenceClass] = []
        for name, key in keyed_states:
            for block in classes:
                if block.signature == key:
                    block.members.add(name)
                    break
            else:
                classes.append(EquivalenceClass(len(classes) + 1, 1, key, {name}))

        while True:
            refined: list[EquivalenceClass] = []
            for parent in classes:
                for name in sorted(parent.members):
                    if name == NO_TRANSITION:
                        continue
                    signature = tuple(
                        self._label(classes, target) for target in successors_of(name)
                    )
                    for block in refined:
                        if block.parent == parent.number and block.signature == signature:
                            block.members.add(name)
                            break
                    else:
                        refined.append(
                            EquivalenceClass(len(refined) + 1, parent.number, signature, {name})
                        )
            stable = len(refined) == len(classes)
            classes = refined
            if stable:
                return classes