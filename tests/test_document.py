import pytest

from nodeedit.document import parse_document, serialize_document
from nodeedit.errors import DocumentParseError


def test_strict_parse():
    assert parse_document('{"a": [1, null, true]}') == {"a": [1, None, True]}


def test_invalid_json():
    with pytest.raises(DocumentParseError):
        parse_document("{ invalid")


def test_strict_rejects_json5():
    with pytest.raises(DocumentParseError):
        parse_document("//c\n{a:1,}\n")


def test_json5_relaxed():
    assert parse_document("//c\n{a:1,}\n", relaxed=True) == {"a": 1}


def test_json5_invalid():
    with pytest.raises(DocumentParseError):
        parse_document("{a:", relaxed=True)


def test_serialize_uses_two_spaces():
    assert serialize_document({"a": {"b": [1]}}) == '{\n  "a": {\n    "b": [\n      1\n    ]\n  }\n}'
    assert serialize_document({}) == "{}"


@pytest.mark.parametrize("text", ['{"a": NaN}', '{"a": Infinity}', '[-Infinity]'])
def test_strict_rejects_non_finite_constants(text):
    with pytest.raises(DocumentParseError):
        parse_document(text)
