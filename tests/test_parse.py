"""Tests for waypoint.routing.parse — YAML and JSON entry parsing."""

import pytest

from waypoint.errors import ParseError
from waypoint.routing.entry import Entry
from waypoint.routing.parse import parse_entries, parse_json, parse_yaml

YAML_ROUTES = b"""\
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /urlshort-final
  url: https://github.com/gophercises/urlshort/tree/solution
"""

JSON_ROUTES = b"""[
    {"path": "/urlshort", "url": "https://github.com/gophercises/urlshort"},
    {"path": "/urlshort-final", "url": "https://github.com/gophercises/urlshort/tree/solution"}
]"""


class TestParseYAML:
    def test_records_in_order(self) -> None:
        assert parse_yaml(YAML_ROUTES) == [
            Entry("/urlshort", "https://github.com/gophercises/urlshort"),
            Entry("/urlshort-final", "https://github.com/gophercises/urlshort/tree/solution"),
        ]

    def test_accepts_str(self) -> None:
        entries = parse_yaml("- path: /blog\n  url: https://example.com/blog")
        assert entries == [Entry("/blog", "https://example.com/blog")]

    def test_empty_document(self) -> None:
        assert parse_yaml(b"") == []

    def test_empty_list(self) -> None:
        assert parse_yaml(b"[]") == []

    def test_duplicates_kept_in_order(self) -> None:
        entries = parse_yaml(b"- {path: /a, url: u1}\n- {path: /a, url: u2}\n")
        assert [e.target for e in entries] == ["u1", "u2"]

    def test_missing_fields_become_empty(self) -> None:
        entries = parse_yaml(b"- path: /only-path\n- url: https://only-url\n")
        assert entries == [Entry("/only-path", ""), Entry("", "https://only-url")]

    def test_null_field_becomes_empty(self) -> None:
        entries = parse_yaml(b"- path: /a\n  url:\n")
        assert entries == [Entry("/a", "")]

    def test_extra_fields_ignored(self) -> None:
        entries = parse_yaml(b"- path: /a\n  url: u\n  note: ignored\n")
        assert entries == [Entry("/a", "u")]

    def test_malformed_syntax(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_yaml(b"- path: /blog\n  url: [unclosed")
        assert "invalid YAML" in str(exc_info.value)

    def test_truncated_flow_mapping(self) -> None:
        with pytest.raises(ParseError):
            parse_yaml(b"- {path: /a, url: ")

    def test_top_level_mapping_rejected(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_yaml(b"path: /a\nurl: u\n")
        assert "expected a list" in str(exc_info.value)

    def test_item_not_mapping(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_yaml(b"- /a\n- /b\n")
        assert "item 0" in str(exc_info.value)

    def test_non_string_field(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_yaml(b"- path: /a\n  url: 42\n")
        assert "'url'" in str(exc_info.value)

    def test_source_name_in_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_yaml(b"{{{", source="routes.yml")
        assert exc_info.value.source == "routes.yml"
        assert str(exc_info.value).startswith("routes.yml: ")

    def test_invalid_utf8(self) -> None:
        with pytest.raises(ParseError):
            parse_yaml(b"- path: /a\n  url: \xff\xfe\n")


class TestParseJSON:
    def test_records_in_order(self) -> None:
        assert parse_json(JSON_ROUTES) == [
            Entry("/urlshort", "https://github.com/gophercises/urlshort"),
            Entry("/urlshort-final", "https://github.com/gophercises/urlshort/tree/solution"),
        ]

    def test_empty_array(self) -> None:
        assert parse_json(b"[]") == []

    def test_empty_document_is_an_error(self) -> None:
        with pytest.raises(ParseError):
            parse_json(b"")

    def test_missing_fields_become_empty(self) -> None:
        entries = parse_json(b'[{"path": "/a"}, {"url": "u"}]')
        assert entries == [Entry("/a", ""), Entry("", "u")]

    def test_null_field_becomes_empty(self) -> None:
        assert parse_json(b'[{"path": "/a", "url": null}]') == [Entry("/a", "")]

    def test_malformed_syntax(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_json(b'[{"path": "/a", "url": ')
        assert "invalid JSON" in str(exc_info.value)

    def test_object_instead_of_array(self) -> None:
        with pytest.raises(ParseError):
            parse_json(b'{"path": "/a", "url": "u"}')

    def test_non_string_field(self) -> None:
        with pytest.raises(ParseError):
            parse_json(b'[{"path": 1, "url": "u"}]')

    def test_invalid_utf8(self) -> None:
        with pytest.raises(ParseError):
            parse_json(b'[{"path": "\xff"}]')


class TestParseEntries:
    def test_yaml_and_json_agree(self) -> None:
        assert parse_yaml(YAML_ROUTES) == parse_json(JSON_ROUTES)

    def test_decoded_records(self) -> None:
        entries = parse_entries([{"path": "/a", "url": "u"}], source="<test>")
        assert entries == [Entry("/a", "u")]

    def test_rejects_none(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_entries(None, source="<test>")
        assert "NoneType" in str(exc_info.value)
