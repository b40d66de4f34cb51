import pytest

from rbackit.util import (
    array_2d_equals,
    array_equals,
    array_remove_duplicates,
    array_to_string,
    escape_assertion,
    join_slice,
    params_to_string,
    remove_comments,
    set_equals,
    set_subtract,
)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("r.attr.value == p.attr", "r_attr.value == p_attr"),
        ("r.attp.value || p.attr", "r_attp.value || p_attr"),
        ("r.attp.value &&p.attr", "r_attp.value &&p_attr"),
        ("r.attp.value >p.attr", "r_attp.value >p_attr"),
        ("r.attp.value <p.attr", "r_attp.value <p_attr"),
        ("r.attp.value +p.attr", "r_attp.value +p_attr"),
        ("r.attp.value -p.attr", "r_attp.value -p_attr"),
        ("r.attp.value *p.attr", "r_attp.value *p_attr"),
        ("r.attp.value /p.attr", "r_attp.value /p_attr"),
        ("!r.attp.value /p.attr", "!r_attp.value /p_attr"),
        ("g(r.sub, p.sub) == p.attr", "g(r_sub, p_sub) == p_attr"),
        ("g(r.sub,p.sub) == p.attr", "g(r_sub,p_sub) == p_attr"),
        ("(r.attp.value || p.attr)p.u", "(r_attp.value || p_attr)p_u"),
    ],
)
def test_escape_assertion(s, expected):
    assert escape_assertion(s) == expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("r.act == p.act # comments", "r.act == p.act"),
        ("r.act == p.act#comments", "r.act == p.act"),
        ("r.act == p.act###", "r.act == p.act"),
        ("### comments", ""),
        ("r.act == p.act", "r.act == p.act"),
    ],
)
def test_remove_comments(s, expected):
    assert remove_comments(s) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (["a", "b", "c"], ["a", "b", "c"], True),
        (["a", "b", "c"], ["a", "b"], False),
        (["a", "b", "c"], ["a", "c", "b"], False),
        (["a", "b", "c"], [], False),
    ],
)
def test_array_equals(a, b, expected):
    assert array_equals(a, b) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ([["a", "b", "c"], ["1", "2", "3"]], [["a", "b", "c"], ["1", "2", "3"]], True),
        ([["a", "b", "c"], ["1", "2", "3"]], [["a", "b", "c"]], False),
        ([["a", "b", "c"], ["1", "2", "3"]], [["a", "b", "c"], ["1", "2"]], False),
        ([["a", "b", "c"], ["1", "2", "3"]], [["1", "2", "3"], ["a", "b", "c"]], False),
        ([["a", "b", "c"], ["1", "2", "3"]], [], False),
    ],
)
def test_array_2d_equals(a, b, expected):
    assert array_2d_equals(a, b) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (["a", "b", "c"], ["a", "b", "c"], True),
        (["a", "b", "c"], ["a", "b"], False),
        (["a", "b", "c"], ["a", "c", "b"], True),
        (["a", "b", "c"], [], False),
    ],
)
def test_set_equals(a, b, expected):
    assert set_equals(a, b) is expected


def test_set_equals_leaves_inputs_unchanged():
    a = ["c", "a", "b"]
    assert set_equals(a, ["a", "b", "c"]) is True
    assert a == ["c", "a", "b"]


def test_array_remove_duplicates_keeps_first_occurrence_order():
    assert array_remove_duplicates(["a", "b", "a", "c", "b"]) == ["a", "b", "c"]


def test_array_remove_duplicates_empty():
    assert array_remove_duplicates([]) == []


def test_array_to_string():
    assert array_to_string(["a", "b", "c"]) == "a, b, c"


def test_params_to_string():
    assert params_to_string("x", "y") == "x, y"
    assert params_to_string() == ""


def test_join_slice():
    assert join_slice("alice", "data1", "read") == ["alice", "data1", "read"]
    assert join_slice("alice") == ["alice"]


def test_set_subtract():
    assert set_subtract(["alice", "bob", "admin"], ["admin", "other"]) == ["alice", "bob"]
    assert set_subtract(["a"], ["a"]) == []