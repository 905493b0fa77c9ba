import io

import pytest

from transit_catalogue.jsonnode import (
    Document,
    Node,
    ParsingError,
    dump,
    dumps,
    load,
    loads,
)


def test_null_and_bools():
    assert loads("null").root.is_null()
    assert loads("true").root.as_bool() is True
    assert loads("  false").root.as_bool() is False


def test_integer():
    root = loads("42").root
    assert root.is_int()
    assert root.as_int() == 42
    assert root.is_double()
    assert not root.is_pure_double()


def test_negative_double():
    root = loads("-3.5").root
    assert root.is_pure_double()
    assert root.as_double() == -3.5


def test_exponent_is_double():
    root = loads("1e2").root
    assert root.is_pure_double()
    assert root.as_double() == float("1e2")


def test_int_overflow_becomes_double():
    root = loads("3000000000").root
    assert root.is_pure_double()
    assert root.as_double() == 3000000000.0


def test_huge_number_fails():
    with pytest.raises(ParsingError):
        loads("1e999")


def test_string_escapes():
    root = loads(r'"a\nb\t\"\\"').root
    assert root.as_string() == "a\nb\t\"\\"


@pytest.mark.parametrize("text", [r'"a\x"', '"abc', '"a\nb"', '"\\'])
def test_bad_strings(text):
    with pytest.raises(ParsingError):
        loads(text)


def test_array():
    root = loads("[1, 2.5, \"x\"]").root
    assert root.as_array() == [Node(1), Node(2.5), Node("x")]


def test_map():
    root = loads('{"a": 1, "b": [true, null]}').root
    assert root.as_map() == {"a": Node(1), "b": Node([True, None])}


def test_duplicate_key_keeps_first():
    root = loads('{"a": 1, "a": 2}').root
    assert root.as_map()["a"].as_int() == 1


@pytest.mark.parametrize(
    "text", ['{"a" 1}', "[1, 2", '{"a": 1', "nul", "tru", "-", "abc", ""]
)
def test_parsing_errors(text):
    with pytest.raises(ParsingError):
        loads(text)


def test_type_errors():
    with pytest.raises(TypeError):
        Node(1).as_string()
    with pytest.raises(TypeError):
        Node("x").as_double()
    with pytest.raises(TypeError):
        Node(None).as_map()


def test_bool_is_not_int():
    assert not Node(True).is_int()
    assert Node(True) != Node(1)
    assert Node(1) != Node(1.0)


def test_document_equality():
    assert Document(Node([1, 2])) == loads("[1,2]")
    assert Document(Node([1, 2])) != loads("[2,1]")


def test_dump_scalars():
    assert dumps(Document(Node(None))) == "null"
    assert dumps(Document(Node(True))) == "true"
    assert dumps(Document(Node(0.5))) == "0.5"
    assert dumps(Document(Node("a\"b\n"))) == '"a\\"b\\n"'


def test_dump_array_layout():
    assert dumps(Document(Node([1, 2]))) == "[\n    1,\n    2\n]"


def test_dump_empty_map_layout():
    assert dumps(Document(Node({}))) == "{\n\n}"


def test_dump_sorts_keys():
    text = dumps(Document(Node({"b": 1, "a": 2})))
    assert text.index('"a"') < text.index('"b"')


def test_round_trip_nested():
    source = '{"list": [1, -2.25, "q\\tz", {"k": null}], "flag": false}'
    document = loads(source)
    assert loads(dumps(document)) == document


def test_stream_functions():
    document = load(io.StringIO('[true, "s"]'))
    out = io.StringIO()
    dump(document, out)
    assert out.getvalue() == dumps(document)
    assert load(io.StringIO(out.getvalue())) == document