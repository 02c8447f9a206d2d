import pytest

from tfdocs.outputs import Output, outputs_sorted_by_name, outputs_sorted_by_position
from tfdocs.position import Position
from tfdocs.types import List, Map, String, value_of


def sample_outputs():
    name = "output"
    description = String("description")
    position = Position("foo.tf", 13)

    def make(value=None, sensitive=False, show_value=True):
        return Output(
            name=name,
            description=description,
            value=value,
            sensitive=sensitive,
            position=position,
            show_value=show_value,
        )

    return [
        make(value_of(None)),
        make(show_value=False),
        make(value_of(False)),
        make(value_of("")),
        make(value_of("foo")),
        make(value_of("this should be hidden"), show_value=False),
        make(value_of("<sensitive>"), sensitive=True),
        make(value_of(List(["a", "b", "c"]).underlying())),
        make(value_of(List([]).underlying())),
        make(value_of(Map({"a": 1, "b": 2, "c": 3}).underlying())),
        make(value_of(Map({}).underlying())),
        make(value_of(None)),
    ]


VALUE_CASES = [
    (0, "", False),
    (1, "", False),
    (2, "false", True),
    (3, '""', True),
    (4, '"foo"', True),
    (5, "", False),
    (6, '"\\u003csensitive\\u003e"', True),
    (7, '[\n  "a",\n  "b",\n  "c"\n]', True),
    (8, "[]", True),
    (9, '{\n  "a": 1,\n  "b": 2,\n  "c": 3\n}', True),
    (10, "{}", True),
    (11, "", False),
]


@pytest.mark.parametrize("index, expect_value, expect_default", VALUE_CASES)
def test_output_value_and_has_default(index, expect_value, expect_default):
    output = sample_outputs()[index]
    assert output.get_value() == expect_value
    assert output.has_default() is expect_default


JSON_CASES = [
    (0, '{"name":"output","description":"description","value":null,"sensitive":false}\n'),
    (1, '{"name":"output","description":"description"}\n'),
    (2, '{"name":"output","description":"description","value":false,"sensitive":false}\n'),
    (3, '{"name":"output","description":"description","value":"","sensitive":false}\n'),
    (4, '{"name":"output","description":"description","value":"foo","sensitive":false}\n'),
    (5, '{"name":"output","description":"description"}\n'),
    (6, '{"name":"output","description":"description","value":"<sensitive>","sensitive":true}\n'),
    (7, '{"name":"output","description":"description","value":["a","b","c"],"sensitive":false}\n'),
    (8, '{"name":"output","description":"description","value":[],"sensitive":false}\n'),
    (9, '{"name":"output","description":"description","value":{"a":1,"b":2,"c":3},"sensitive":false}\n'),
    (10, '{"name":"output","description":"description","value":{},"sensitive":false}\n'),
    (11, '{"name":"output","description":"description","value":null,"sensitive":false}\n'),
]


@pytest.mark.parametrize("index, expected", JSON_CASES)
def test_output_to_json(index, expected):
    assert sample_outputs()[index].to_json() == expected


_HEAD = "<output><name>output</name><description>description</description>"

XML_CASES = [
    (0, _HEAD + '<value xsi:nil="true"></value><sensitive>false</sensitive></output>'),
    (1, _HEAD + "</output>"),
    (2, _HEAD + "<value>false</value><sensitive>false</sensitive></output>"),
    (3, _HEAD + "<value></value><sensitive>false</sensitive></output>"),
    (4, _HEAD + "<value>foo</value><sensitive>false</sensitive></output>"),
    (5, _HEAD + "</output>"),
    (6, _HEAD + "<value>&lt;sensitive&gt;</value><sensitive>true</sensitive></output>"),
    (7, _HEAD + "<value><item>a</item><item>b</item><item>c</item></value>"
        "<sensitive>false</sensitive></output>"),
    (8, _HEAD + "<value></value><sensitive>false</sensitive></output>"),
    (9, _HEAD + "<value><a>1</a><b>2</b><c>3</c></value><sensitive>false</sensitive></output>"),
    (10, _HEAD + "<value></value><sensitive>false</sensitive></output>"),
    (11, _HEAD + '<value xsi:nil="true"></value><sensitive>false</sensitive></output>'),
]


@pytest.mark.parametrize("index, expected", XML_CASES)
def test_output_to_xml(index, expected):
    assert sample_outputs()[index].to_xml("output") == expected


@pytest.mark.parametrize(
    "index, with_value",
    [(0, True), (1, False), (2, True), (3, True), (4, True), (5, False),
     (6, True), (7, True), (8, True), (9, True), (10, True), (11, True)],
)
def test_output_to_yaml_fields(index, with_value):
    data = sample_outputs()[index].to_yaml()
    expected_keys = ["name", "description"]
    if with_value:
        expected_keys += ["value", "sensitive"]
    assert list(data) == expected_keys
    assert data["name"] == "output"
    assert data["description"] == "description"


def test_output_to_yaml_values():
    outputs = sample_outputs()
    assert outputs[4].to_yaml()["value"] == "foo"
    assert outputs[6].to_yaml()["sensitive"] is True
    assert outputs[0].to_yaml()["value"] is None
    assert outputs[7].to_yaml()["value"] == ["a", "b", "c"]


def sample_outputs_for_sort():
    return [
        Output("a", String("description of a"), None, position=Position("foo/outputs.tf", 25)),
        Output("d", String("description of d"), None, position=Position("foo/outputs.tf", 10)),
        Output("e", String("description of e"), None, position=Position("foo/outputs.tf", 33)),
        Output("b", String("description of b"), None, position=Position("foo/outputs.tf", 39)),
        Output("c", String("description of c"), None, position=Position("foo/outputs.tf", 42)),
    ]


@pytest.mark.parametrize(
    "sort, expected",
    [
        (outputs_sorted_by_name, ["a", "b", "c", "d", "e"]),
        (outputs_sorted_by_position, ["d", "a", "e", "b", "c"]),
    ],
)
def test_outputs_sort(sort, expected):
    assert [o.name for o in sort(sample_outputs_for_sort())] == expected