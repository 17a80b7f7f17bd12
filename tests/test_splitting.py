import pytest

from fsmreduce.splitting import EMPTY_FIELD, split


def test_plain_fields():
    assert split("a;b;c", ";") == ["a", "b", "c"]


def test_dash_alone_gives_two_markers():
    assert split("-", "/") == ["-", "-"]


def test_empty_middle_field_becomes_marker():
    assert split("a;;b", ";") == ["a", EMPTY_FIELD, "b"]


def test_leading_empty_field_becomes_marker():
    assert split(";S0;S1", ";") == [EMPTY_FIELD, "S0", "S1"]


def test_trailing_empty_field_is_kept_empty():
    assert split("a;", ";") == ["a", ""]


def test_empty_text():
    assert split("", ";") == [""]


def test_transition_cell():
    assert split("S1/y1", "/") == ["S1", "y1"]


def test_cell_without_separator():
    assert split("S1", "/") == ["S1"]


@pytest.mark.parametrize("text", ["a", "a;b", "x1;S1/y1;S2/y2", "one;two;three;four"])
def test_join_round_trip_without_empty_fields(text):
    assert ";".join(split(text, ";")) == text


@pytest.mark.parametrize("text", ["a;b", ";;", "a;;;b;", ";x"])
def test_field_count_matches_delimiters(text):
    assert len(split(text, ";")) == text.count(";") + 1


@pytest.mark.parametrize("delimiter", ["", ";;"])
def test_bad_delimiter(delimiter):
    with pytest.raises(ValueError):
        split("a;b", delimiter)