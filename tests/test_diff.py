from nodeedit.diff import diff_rows
from nodeedit.rows import FieldRow, FieldUpdate
from nodeedit.session import EditSession

from tests.utils import CUSTOMER_ROWS

ROWS = (
    FieldRow("name", "Bob", "string"),
    FieldRow("age", 30, "number"),
    FieldRow("orders", 2, "array"),
    FieldRow("vip", False, "boolean"),
    FieldRow("nick", None, "null"),
    FieldRow("ratio", 1.5, "number"),
)


def test_mirrored_session_is_empty():
    assert diff_rows(ROWS, EditSession.from_rows(ROWS)) == []


def test_single_change():
    assert diff_rows(CUSTOMER_ROWS, {"age": "31"}) == [FieldUpdate(1, "age", 31)]


def test_changes_follow_row_order_and_are_coerced():
    session = EditSession.from_rows(ROWS)
    session.set("nick", "Bobby")
    session.set("name", "007")
    session.set("vip", "true")
    assert diff_rows(ROWS, session) == [
        FieldUpdate(0, "name", "007"),
        FieldUpdate(3, "vip", True),
        FieldUpdate(4, "nick", "Bobby"),
    ]


def test_unknown_keys_and_containers_ignored():
    session = {"missing": "1", "orders": "[]", "age": None}
    assert diff_rows(ROWS, session) == []


def test_clearing_to_null():
    assert diff_rows(ROWS, {"name": "null"}) == [FieldUpdate(0, "name", None)]


def test_string_that_looks_like_number_is_unchanged():
    rows = [FieldRow("zip", "02139", "string"), FieldRow("code", "42", "string")]
    assert diff_rows(rows, EditSession.from_rows(rows)) == []
