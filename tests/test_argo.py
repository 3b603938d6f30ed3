import io

import pytest

from procparse.argo import ParseError, argo, main, parse, serialize


def test_parse_integer():
    assert parse("42") == 42


def test_parse_integer_stops_at_non_digit():
    assert parse("12abc") == 12


def test_parse_string_with_escapes():
    assert parse('"a\\"b\\\\c"') == 'a"b\\c'


def test_parse_nested_map():
    assert parse('{"a":{"b":2},"c":"d"}') == {"a": {"b": 2}, "c": "d"}


def test_parse_empty_map():
    assert parse("{}") == {}


def test_parse_empty_map_inside_map():
    assert parse('{"a":{},"b":1}') == {"a": {}, "b": 1}


def test_argo_reads_from_stream():
    assert argo(io.StringIO('{"k":7}')) == {"k": 7}


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "unexpected end of input"),
        ("x", "unexpected token 'x'"),
        ("-1", "unexpected token '-'"),
        ('"abc', "unexpected end of input"),
        ('{"a" 1}', "unexpected token ' '"),
        ('{"a":1', "unexpected end of input"),
        ("{1:2}", "unexpected token '1'"),
        ('{"a":1,}', "unexpected token '}'"),
        ('{"a":1;"b":2}', "unexpected token ';'"),
        ('{"a":}', "unexpected token '}'"),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(ParseError) as info:
        parse(text)
    assert str(info.value) == message


@pytest.mark.parametrize(
    "text",
    ["0", "123", '"hello"', '"q\\"uote\\\\"', "{}", '{"a":1,"b":{"c":"d"}}'],
)
def test_serialize_round_trip(text):
    assert serialize(parse(text)) == text


def test_serialize_escapes_quote_and_backslash():
    assert serialize('a"b\\') == '"a\\"b\\\\"'


def test_serialize_rejects_other_types():
    with pytest.raises(TypeError):
        serialize([1, 2])


def test_serialize_rejects_non_string_keys():
    with pytest.raises(TypeError):
        serialize({1: 2})


def test_main_prints_document(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text('{"a":"x\\y","b":5}', encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == '{"a":"xy","b":5}\n'


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{oops}", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "unexpected token 'o'\n"


def test_main_needs_one_argument():
    assert main([]) == 1
    assert main(["a", "b"]) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1