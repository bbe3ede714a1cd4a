import json

from nodeedit.rows import (
    FieldRow,
    NodeView,
    editable_rows,
    kind_of,
    normalize_rows,
    value_to_text,
)


def test_empty_rows_render_empty_object():
    assert normalize_rows([]) == "{}"


def test_single_keyless_row_is_bare_scalar():
    assert normalize_rows([FieldRow(None, 5, "number")]) == "5"
    assert normalize_rows([FieldRow(None, "plain text", "string")]) == "plain text"
    assert normalize_rows([FieldRow(None, None, "null")]) == "null"


def test_container_rows_are_excluded():
    rows = [FieldRow("a", 1, "number"), FieldRow("b", 0, "array")]
    assert normalize_rows(rows) == '{\n  "a": 1\n}'


def test_row_order_and_keyless_rows():
    rows = [
        FieldRow("z", "last", "string"),
        FieldRow(None, "orphan", "string"),
        FieldRow("a", True, "boolean"),
        FieldRow("child", 2, "object"),
        FieldRow("n", None, "null"),
    ]
    text = normalize_rows(rows)
    assert list(json.loads(text)) == ["z", "a", "n"]
    assert text.startswith('{\n  "z": "last",')


def test_non_ascii_is_kept():
    assert normalize_rows([FieldRow("name", "Zoë", "string"), FieldRow("x", 1, "number")]) == (
        '{\n  "name": "Zoë",\n  "x": 1\n}'
    )


def test_kind_of():
    assert kind_of(None) == "null"
    assert kind_of(True) == "boolean"
    assert kind_of(3) == "number"
    assert kind_of(2.5) == "number"
    assert kind_of("s") == "string"
    assert kind_of([]) == "array"
    assert kind_of({}) == "object"


def test_value_to_text():
    assert value_to_text(None) == "null"
    assert value_to_text(False) == "false"
    assert value_to_text(31) == "31"
    assert value_to_text(1.5) == "1.5"
    assert value_to_text("007") == "007"


def test_editable_rows_filters_containers_and_keyless():
    view = NodeView(
        "1",
        ["customer"],
        [
            FieldRow("name", "Bob", "string"),
            FieldRow("orders", 3, "array"),
            FieldRow(None, 1, "number"),
            FieldRow("age", 30, "number"),
        ],
    )
    assert [r.key for r in editable_rows(view)] == ["name", "age"]
    assert view.path == ("customer",)
