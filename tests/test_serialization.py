"""Tests for event sequence JSON serialization."""

import json

import pytest

from llano import parse_events, render_events
from llano.errors import SerializationError
from llano.events import BlockStart, Heading, Link, SoftBreak, Text
from llano.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    def test_container_event(self) -> None:
        assert to_dict(BlockStart(Heading(level=3))) == {
            "_type": "BlockStart",
            "kind": {"_type": "Heading", "level": 3},
        }

    def test_text_event(self) -> None:
        assert to_dict(Text("hi")) == {"_type": "Text", "content": "hi"}

    def test_fieldless_event(self) -> None:
        assert to_dict(SoftBreak()) == {"_type": "SoftBreak"}


class TestRoundTrip:
    def test_rich_document(self) -> None:
        source = (
            "# Title\n\n"
            "Some *em* **strong** ~~gone~~ `code` [link](https://x.com \"t\") ![alt](p.png)\n\n"
            "3. a\n4. b\n\n"
            "> quote\n\n"
            "```py\nx = 1\n```\n\n"
            "| h | i |\n| - | - |\n| 1 | 2 |\n"
        )
        events = parse_events(source)
        assert from_json(to_json(events)) == events

    def test_output_is_deterministic(self) -> None:
        events = parse_events("[a](b)")
        assert to_json(events) == to_json(events)
        assert json.loads(to_json(events, indent=2)) == json.loads(to_json(events))

    def test_render_from_json(self) -> None:
        payload = json.dumps(
            [
                {"_type": "BlockStart", "kind": {"_type": "Paragraph"}},
                {"_type": "Text", "content": "see "},
                {
                    "_type": "InlineStart",
                    "kind": {"_type": "Link", "destination": "https://x.com"},
                },
                {"_type": "Text", "content": "docs"},
                {
                    "_type": "InlineEnd",
                    "kind": {"_type": "Link", "destination": "https://x.com"},
                },
                {"_type": "BlockEnd", "kind": {"_type": "Paragraph"}},
            ]
        )
        events = from_json(payload)
        assert events[2].kind == Link(destination="https://x.com")
        assert render_events(events) == "see docs"


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(SerializationError, match="Missing '_type'"):
            from_dict({"content": "x"})

    def test_unknown_event(self) -> None:
        with pytest.raises(SerializationError, match="Unknown event type"):
            from_dict({"_type": "Footnote"})

    def test_unknown_kind(self) -> None:
        with pytest.raises(SerializationError, match="Unknown kind type"):
            from_dict({"_type": "BlockStart", "kind": {"_type": "Directive"}})

    def test_missing_kind(self) -> None:
        with pytest.raises(SerializationError, match="requires a 'kind'"):
            from_dict({"_type": "BlockEnd"})

    def test_missing_required_field(self) -> None:
        with pytest.raises(SerializationError, match="Invalid fields for Text"):
            from_dict({"_type": "Text"})

    def test_not_an_array(self) -> None:
        with pytest.raises(SerializationError):
            from_json('{"_type": "Text", "content": "x"}')

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError, match="Invalid JSON") as exc_info:
            from_json('[{"_type": ')
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_not_an_object(self) -> None:
        with pytest.raises(SerializationError):
            from_json('["Text"]')

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_json("[1]")
