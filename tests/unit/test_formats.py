import pytest

from flatconf.errors import ParseFailedError, UnsupportedFormatError
from flatconf.formats import parse_document, resolve_format


@pytest.mark.parametrize(
    "path, expected",
    [
        ("config.yaml", "yaml"),
        ("config.yml", "yaml"),
        ("CONFIG.YML", "yaml"),
        ("settings.json", "json"),
        ("settings.Json", "json"),
        ("pyproject.toml", "toml"),
        ("/etc/app/config.TOML", "toml"),
        ("config.ini", ""),
        ("config", ""),
        ("config.yaml.bak", ""),
    ],
)
def test_resolve_format_from_extension(path, expected):
    assert resolve_format(path) == expected


def test_explicit_format_is_returned_verbatim():
    assert resolve_format("config.json", "yaml") == "yaml"
    assert resolve_format("config.json", "YAML") == "YAML"
    assert resolve_format("config.json", "xml") == "xml"


def test_parse_each_format():
    assert parse_document(b"a:\n  b: 1\n", "yaml", "c.yaml") == {"a": {"b": 1}}
    assert parse_document(b"a:\n  b: 1\n", "yml", "c.yml") == {"a": {"b": 1}}
    assert parse_document(b'{"a": {"b": 1}}', "json", "c.json") == {"a": {"b": 1}}
    assert parse_document(b"[a]\nb = 1\n", "toml", "c.toml") == {"a": {"b": 1}}


def test_unknown_format_is_unsupported():
    with pytest.raises(UnsupportedFormatError, match=r"unsupported file format: xml \(supported: yaml, json, toml\)"):
        parse_document(b"<a/>", "xml", "c.xml")


def test_format_is_case_sensitive_at_dispatch():
    with pytest.raises(UnsupportedFormatError):
        parse_document(b"a: 1", "YAML", "c.yaml")


@pytest.mark.parametrize(
    "data, fmt, label",
    [
        (b"key: [unclosed", "yaml", "YAML"),
        (b"{bad json", "json", "JSON"),
        (b"key = ", "toml", "TOML"),
    ],
)
def test_parse_failure_names_the_format(data, fmt, label):
    with pytest.raises(ParseFailedError, match=f"parse {label} file c.cfg") as exc_info:
        parse_document(data, fmt, "c.cfg")
    assert exc_info.value.format == fmt
    assert exc_info.value.__cause__ is not None


def test_json_rejects_non_standard_constants():
    with pytest.raises(ParseFailedError, match="parse JSON file"):
        parse_document(b'{"a": NaN}', "json", "c.json")


def test_toml_rejects_invalid_utf8():
    with pytest.raises(ParseFailedError, match="parse TOML file"):
        parse_document(b'a = "\xff"', "toml", "c.toml")


@pytest.mark.parametrize("fmt", ["yaml", "json", "toml"])
def test_blank_documents_parse_without_error(fmt):
    parse_document(b"", fmt, "c")
    parse_document(b"  \n", fmt, "c")
