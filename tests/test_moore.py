import pytest

from fsmreduce.moore import MooreAutomaton

SAMPLE = [
    ";y1;y1;y2\n",
    ";a;b;c\n",
    "x1;b;a;c\n",
    "x2;c;c;a\n",
]

WITH_UNREACHABLE = [
    ";y1;y1;y2;y2",
    ";a;b;c;d",
    "x1;b;a;c;d",
    "x2;c;c;a;a",
]

DISTINCT = [
    ";y1;y2;y3",
    ";a;b;c",
    "x1;b;c;a",
]


def test_reads_rows_by_state():
    machine = MooreAutomaton.from_lines(SAMPLE)
    assert machine.find_row("c") == ["y2", "c", "c", "a"]
    assert [state.name for state in machine.states] == ["a", "b", "c"]


def test_initial_state_is_reachable_on_load():
    machine = MooreAutomaton.from_lines(SAMPLE)
    assert machine.find_state("a").reachable is True
    assert machine.find_state("b").reachable is False


def test_find_state_unknown_raises():
    machine = MooreAutomaton.from_lines(SAMPLE)
    with pytest.raises(KeyError):
        machine.find_state("z")


def test_find_row_unknown_raises():
    machine = MooreAutomaton.from_lines(SAMPLE)
    with pytest.raises(KeyError):
        machine.find_row("z")


def test_minimized_merges_equivalent_states():
    machine = MooreAutomaton.from_lines(SAMPLE)
    machine.remove_unreachable()
    assert machine.minimized() == [
        ["-", "-", "x1", "x2"],
        ["y1", "X1", "X1", "X2"],
        ["y2", "X2", "X2", "X1"],
    ]


def test_remove_unreachable_drops_isolated_state():
    machine = MooreAutomaton.from_lines(WITH_UNREACHABLE)
    machine.remove_unreachable()
    assert [row[1] for row in machine.rows] == ["a", "b", "c"]
    assert machine.find_state("d").reachable is False


def test_unreachable_state_does_not_appear_in_result():
    machine = MooreAutomaton.from_lines(WITH_UNREACHABLE)
    machine.remove_unreachable()
    table = machine.minimized()
    assert len(table) == 3


def test_distinct_states_are_kept_apart():
    machine = MooreAutomaton.from_lines(DISTINCT)
    machine.remove_unreachable()
    table = machine.minimized()
    assert len(table) - 1 == len(machine.rows)
    assert sorted(row[0] for row in table[1:]) == ["y1", "y2", "y3"]


def test_result_rows_match_header_width():
    machine = MooreAutomaton.from_lines(SAMPLE)
    machine.remove_unreachable()
    table = machine.minimized()
    assert all(len(row) == len(table[0]) for row in table)


def test_first_line_without_states_raises():
    with pytest.raises(ValueError):
        MooreAutomaton.from_lines(["y1"])


def test_name_line_must_match_outputs():
    with pytest.raises(ValueError):
        MooreAutomaton.from_lines([";y1;y2", ";a"])


def test_too_many_cells_raises():
    with pytest.raises(ValueError):
        MooreAutomaton.from_lines([";y1", ";a", "x1;a;a;a"])


def test_transition_to_unknown_state_raises():
    machine = MooreAutomaton.from_lines([";y1", ";a", "x1;q"])
    with pytest.raises(ValueError):
        machine.remove_unreachable()