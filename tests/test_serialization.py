"""Tests for JSON serialization of converter output."""

import json

import pytest

from tinta import BlockType, InlineStyle, SerializationError, StyledSpan, convert
from tinta.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    """Dict shape."""

    def test_span(self) -> None:
        span = StyledSpan("x", BlockType.H2, InlineStyle.LINK, "u")
        assert to_dict(span) == {
            "_type": "StyledSpan",
            "text": "x",
            "block_type": "H2",
            "inline_style": "LINK",
            "link_target": "u",
        }

    def test_document(self) -> None:
        data = to_dict(convert("# A", source_file="a.md"))
        assert data["_type"] == "StyledDocument"
        assert data["source_file"] == "a.md"
        line = data["lines"][0]
        assert line["lineno"] == 1
        assert line["block_type"] == "H1"
        assert line["line_break"]["text"] == "\n"


class TestRoundTrip:
    """to_json / from_json."""

    def test_round_trip(self) -> None:
        doc = convert("Title\n===\n*a* **b** `c` [d](e)\n\nplain", source_file="x.md")
        assert from_json(to_json(doc)) == doc

    def test_deterministic(self) -> None:
        doc = convert("*a* [b](c)")
        assert to_json(doc) == to_json(doc)
        assert list(json.loads(to_json(doc))) == sorted(json.loads(to_json(doc)))

    def test_non_ascii_kept(self) -> None:
        assert "café" in to_json(convert("café"))

    def test_indent(self) -> None:
        assert "\n" in to_json(convert("a"), indent=2)


class TestErrors:
    """Malformed serialized data."""

    def test_missing_type(self) -> None:
        with pytest.raises(SerializationError, match="Missing"):
            from_dict({"text": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(SerializationError, match="Unknown node type"):
            from_dict({"_type": "Paragraph"})

    def test_unknown_enum_member(self) -> None:
        data = to_dict(StyledSpan("x"))
        data["inline_style"] = "UNDERLINE"
        with pytest.raises(SerializationError, match="InlineStyle"):
            from_dict(data)

    def test_from_json_requires_document(self) -> None:
        with pytest.raises(SerializationError, match="Expected StyledDocument"):
            from_json(json.dumps(to_dict(StyledSpan("x"))))

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_dict({})
