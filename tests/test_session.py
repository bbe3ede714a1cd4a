import pytest

from nodeedit.rows import FieldRow
from nodeedit.session import EditSession


def test_seeded_from_editable_rows():
    rows = [
        FieldRow("name", "Bob", "string"),
        FieldRow("age", 30, "number"),
        FieldRow("nick", None, "null"),
        FieldRow("tags", 2, "array"),
        FieldRow(None, 1, "number"),
    ]
    session = EditSession.from_rows(rows)
    assert dict(session.pending) == {"name": "Bob", "age": "30", "nick": "null"}
    assert "tags" not in session
    assert len(session) == 3


def test_set_and_clear():
    session = EditSession({"a": "1"})
    session.set("a", "2")
    session.set("b", "x")
    assert session.get("a") == "2"
    assert session.get("missing") is None
    session.clear()
    assert len(session) == 0


def test_pending_is_read_only():
    session = EditSession({"a": "1"})
    with pytest.raises(TypeError):
        session.pending["a"] = "2"  # type: ignore[index]
    assert session.get("a") == "1"
