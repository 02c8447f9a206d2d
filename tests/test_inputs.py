import pytest

from tfdocs.inputs import (
    Input,
    inputs_sorted_by_name,
    inputs_sorted_by_position,
    inputs_sorted_by_required,
    inputs_sorted_by_type,
)
from tfdocs.position import Position
from tfdocs.types import List, Map, String, value_of


def _input(default, required):
    return Input(
        name="input",
        type=String("type"),
        description=String("description"),
        default=default,
        required=required,
        position=Position("foo.tf", 13),
    )


@pytest.mark.parametrize(
    "default, required, expect_value, expect_default",
    [
        (value_of(None), True, "", False),
        (value_of(None), False, "null", True),
        (value_of(True), False, "true", True),
        (value_of(False), False, "false", True),
        (value_of(""), False, '""', True),
        (value_of("foo"), False, '"foo"', True),
        (value_of(42), False, "42", True),
        (value_of(13.75), False, "13.75", True),
        (
            value_of(List(["a", "b", "c"]).underlying()),
            False,
            '[\n  "a",\n  "b",\n  "c"\n]',
            True,
        ),
        (value_of(List([]).underlying()), False, "[]", True),
        (
            value_of(Map({"a": 1, "b": 2, "c": 3}).underlying()),
            False,
            '{\n  "a": 1,\n  "b": 2,\n  "c": 3\n}',
            True,
        ),
        (value_of(Map({}).underlying()), False, "{}", True),
    ],
)
def test_input_value_and_has_default(default, required, expect_value, expect_default):
    item = _input(default, required)
    assert item.get_value() == expect_value
    assert item.has_default() is expect_default


def test_plain_values_are_wrapped():
    item = Input(name="x", type="string", description="text", default="foo")
    assert item.type == String("string")
    assert item.description == String("text")
    assert item.get_value() == '"foo"'


def sample_inputs():
    return [
        Input("e", String(""), String("description of e"), value_of(True), False,
              Position("foo/variables.tf", 35)),
        Input("a", String("string"), String(""), value_of("a"), False,
              Position("foo/variables.tf", 10)),
        Input("d", String("string"), String("description for d"), value_of(None), True,
              Position("foo/variables.tf", 23)),
        Input("b", String("number"), String("description of b"), value_of(None), True,
              Position("foo/variables.tf", 42)),
        Input("c", String("list"), String("description of c"), value_of("c"), False,
              Position("foo/variables.tf", 51)),
        Input("f", String("string"), String("description of f"), value_of(None), False,
              Position("foo/variables.tf", 59)),
    ]


@pytest.mark.parametrize(
    "sort, expected",
    [
        (inputs_sorted_by_name, ["a", "b", "c", "d", "e", "f"]),
        (inputs_sorted_by_required, ["b", "d", "a", "c", "e", "f"]),
        (inputs_sorted_by_position, ["a", "d", "e", "b", "c", "f"]),
        (inputs_sorted_by_type, ["e", "c", "b", "a", "d", "f"]),
    ],
)
def test_inputs_sorted(sort, expected):
    assert [i.name for i in sort(sample_inputs())] == expected


def test_sorting_leaves_original_untouched():
    inputs = sample_inputs()
    before = [i.name for i in inputs]
    inputs_sorted_by_name(inputs)
    assert [i.name for i in inputs] == before


def test_sort_is_independent_of_start_order():
    inputs = sample_inputs()
    once = inputs_sorted_by_required(inputs)
    twice = inputs_sorted_by_required(list(reversed(once)))
    assert [i.name for i in once] == [i.name for i in twice]