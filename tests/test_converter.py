"""Tests for the high-level conversion API."""

import logging
from pathlib import Path

import pytest

from tinta import (
    BlockType,
    ConvertConfig,
    Converter,
    InlineStyle,
    InputError,
    SourceReadError,
    StyledSpan,
    convert,
    convert_config_context,
    convert_file,
    to_json,
)


class TestDocumentProperties:
    """Whole-document behaviour of convert()."""

    def test_plain_lines_are_single_body_spans(self) -> None:
        doc = convert("plain one\nplain two")
        assert len(doc) == 2
        for line, text in zip(doc.lines, ["plain one", "plain two"]):
            assert line.block_type is BlockType.BODY
            assert line.spans == (StyledSpan(text),)

    def test_bold(self) -> None:
        doc = convert("**bold**")
        assert doc.lines[0].spans == (StyledSpan("bold", BlockType.BODY, InlineStyle.BOLD),)

    def test_escaped_delimiters_form_one_plain_span(self) -> None:
        doc = convert("\\*not italic\\*")
        assert doc.lines[0].spans == (StyledSpan("*not italic*"),)

    def test_atx_heading(self) -> None:
        doc = convert("# Title")
        assert len(doc) == 1
        assert doc.lines[0].block_type is BlockType.H1
        assert doc.lines[0].spans == (StyledSpan("Title", BlockType.H1),)

    def test_setext_heading_consumes_underline(self) -> None:
        doc = convert("Title\n=====")
        assert len(doc) == 1
        assert doc.lines[0].block_type is BlockType.H1
        assert doc.lines[0].text == "Title"

    def test_setext_h2_keeps_source_line_numbers(self) -> None:
        doc = convert("Title\n---\nbody")
        assert [(line.lineno, line.block_type) for line in doc.lines] == [
            (1, BlockType.H2),
            (3, BlockType.BODY),
        ]

    def test_link(self) -> None:
        doc = convert("[label](http://example.com)")
        assert doc.lines[0].spans == (
            StyledSpan("label", BlockType.BODY, InlineStyle.LINK, "http://example.com"),
        )

    def test_isolated_asterisk_is_literal(self) -> None:
        doc = convert("a * b")
        assert doc.lines[0].spans == (StyledSpan("a * b"),)

    def test_heading_with_inline_markup(self) -> None:
        doc = convert("# Hello **World**")
        line = doc.lines[0]
        assert line.spans == (
            StyledSpan("Hello ", BlockType.H1),
            StyledSpan("World", BlockType.H1, InlineStyle.BOLD),
        )
        assert line.line_break == StyledSpan("\n", BlockType.H1)

    def test_block_type_resets_each_line(self) -> None:
        doc = convert("# Head\nbody")
        assert [line.block_type for line in doc.lines] == [BlockType.H1, BlockType.BODY]
        assert doc.lines[1].spans[0].block_type is BlockType.BODY


class TestLineHandling:
    """Line splitting and terminators."""

    def test_blank_line_has_terminator_only(self) -> None:
        doc = convert("a\n\nb")
        assert len(doc) == 3
        assert doc.lines[1].spans == ()
        assert list(doc.lines[1]) == [StyledSpan("\n")]

    def test_empty_document(self) -> None:
        assert convert("").lines == ()

    def test_trailing_newline_adds_no_line(self) -> None:
        assert len(convert("a\n")) == 1

    def test_crlf(self) -> None:
        doc = convert("a\r\nb\rc")
        assert [line.text for line in doc.lines] == ["a", "b", "c"]

    def test_round_trip_text(self) -> None:
        doc = convert("# Title\nsome **bold** and [a link](u)\n\\*x\\*")
        assert doc.text == "Title\nsome bold and a link\n*x*\n"

    def test_idempotent(self) -> None:
        source = "Title\n===\n*a* **b** `c` [d](e)\n\\_f\\_"
        first = convert(source)
        second = convert(source)
        assert first == second
        assert to_json(first) == to_json(second)


class TestConverter:
    """Converter instances and configuration."""

    def test_reusable_instance(self) -> None:
        converter = Converter()
        first = converter.convert("*a*")
        converter.convert("# other")
        assert converter.convert("*a*") == first

    def test_iter_lines_is_lazy(self) -> None:
        lines = Converter().iter_lines("one\ntwo")
        assert next(lines).text == "one"
        assert next(lines).text == "two"
        with pytest.raises(StopIteration):
            next(lines)

    def test_source_file_kept(self) -> None:
        assert convert("x", source_file="notes.md").source_file == "notes.md"

    def test_explicit_config(self) -> None:
        doc = Converter(ConvertConfig(setext_headings=False)).convert("Title\n===")
        assert [line.block_type for line in doc.lines] == [BlockType.BODY, BlockType.BODY]

    def test_context_config(self) -> None:
        with convert_config_context(ConvertConfig(setext_headings=False)):
            doc = convert("Title\n===")
        assert len(doc) == 2
        assert len(convert("Title\n===")) == 1

    def test_explicit_config_beats_context(self) -> None:
        converter = Converter(ConvertConfig())
        with convert_config_context(ConvertConfig(setext_headings=False)):
            assert len(converter.convert("Title\n===")) == 1

    def test_coalescing_disabled(self) -> None:
        doc = convert("\\*x\\*", config=ConvertConfig(coalesce_spans=False))
        assert [s.text for s in doc.lines[0].spans] == ["*", "x", "*"]


class TestInputErrors:
    """Non-text input and unreadable files."""

    @pytest.mark.parametrize("value", [b"**bytes**", bytearray(b"x"), None, 42])
    def test_non_text_rejected(self, value: object) -> None:
        with pytest.raises(InputError):
            convert(value)  # type: ignore[arg-type]

    def test_input_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            convert(b"x")  # type: ignore[arg-type]

    def test_convert_file(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("# Title\n*it*\n", encoding="utf-8")
        doc = convert_file(path)
        assert doc.source_file == str(path)
        assert [line.block_type for line in doc.lines] == [BlockType.H1, BlockType.BODY]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError) as exc_info:
            convert_file(tmp_path / "missing.md")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.md"
        path.write_bytes(b"caf\xe9 **bold**")
        with pytest.raises(SourceReadError) as exc_info:
            convert_file(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_other_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.md"
        path.write_bytes(b"caf\xe9 **bold**")
        doc = convert_file(path, encoding="latin-1")
        assert doc.lines[0].text == "café bold"


class TestLogging:
    """Debug logging under the tinta namespace."""

    def test_incomplete_link_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="tinta")
        convert("[broken")
        assert "incomplete link" in caplog.text

    def test_setext_consumption_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="tinta")
        convert("Title\n---")
        assert "setext underline consumed" in caplog.text
