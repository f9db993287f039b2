"""Converter: Markdown text to an ordered sequence of styled lines.

Pipeline per line:
1. classify_line: block type, heading markup stripped, setext lookahead
2. scan_inline: plain and styled fragments
3. assemble_line: merged spans plus one line break

Thread Safety:
Converter holds only an immutable config. Every call creates its own
ScanContext, so one instance can serve concurrent conversions from many
threads without locking.

"""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike

from tinta.assembler import assemble_line
from tinta.config import ConvertConfig, get_convert_config
from tinta.errors import InputError
from tinta.lexer.classifier import classify_line
from tinta.lexer.scanner import ScanContext, scan_inline
from tinta.loader import read_source
from tinta.nodes import StyledDocument, StyledLine
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


class Converter:
    """Stateless Markdown-to-styled-span converter.

    Usage:
        >>> converter = Converter()
        >>> doc = converter.convert("# Hello **World**")
        >>> doc.lines[0].block_type
        <BlockType.H1: 1>

    If no config is given, the config active in the calling context
    (see ``tinta.config``) is read on every call.

    """

    __slots__ = ("_config",)

    def __init__(self, config: ConvertConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> ConvertConfig:
        """Config used by the next call from this context."""
        return self._config if self._config is not None else get_convert_config()

    def convert(self, source: str, *, source_file: str | None = None) -> StyledDocument:
        """Convert a whole document.

        Args:
            source: Decoded Markdown text
            source_file: Optional source path, kept on the result and used
                in error messages

        Returns:
            StyledDocument with one StyledLine per emitted source line.

        Raises:
            InputError: ``source`` is not a ``str``.
        """
        lines = tuple(self.iter_lines(source, source_file=source_file))
        return StyledDocument(lines=lines, source_file=source_file)

    def iter_lines(self, source: str, *, source_file: str | None = None) -> Iterator[StyledLine]:
        """Convert lazily, yielding one StyledLine at a time.

        Raises:
            InputError: ``source`` is not a ``str`` (raised on first ``next()``).
        """
        if not isinstance(source, str):
            raise InputError(source)

        config = self.config
        context = ScanContext(config=config, source_file=source_file)
        raw_lines = source.splitlines()
        count = len(raw_lines)
        logger.debug("converting %d lines from %s", count, source_file or "<string>")

        index = 0
        while index < count:
            lineno = index + 1
            next_line = raw_lines[index + 1] if index + 1 < count else None
            line_class = classify_line(raw_lines[index], next_line, config)

            line_context = context.for_line(lineno, line_class.block_type)
            fragments = scan_inline(line_class.content, line_context)
            context.link_fallbacks += line_context.link_fallbacks
            yield assemble_line(
                lineno,
                line_class.block_type,
                fragments,
                coalesce=config.coalesce_spans,
            )

            index += 1
            if line_class.consumes_next:
                logger.debug("line %d: setext underline consumed", lineno + 1)
                index += 1

        logger.debug(
            "converted %d lines (%d incomplete links)", count, context.link_fallbacks
        )


def convert(
    source: str,
    *,
    config: ConvertConfig | None = None,
    source_file: str | None = None,
) -> StyledDocument:
    """Convert Markdown text into styled lines.

    Args:
        source: Decoded Markdown text
        config: Conversion config (defaults to the active context config)
        source_file: Optional source path for error messages

    Returns:
        StyledDocument

    Example:
        >>> doc = convert("[label](http://example.com)")
        >>> span = doc.lines[0].spans[0]
        >>> span.inline_style, span.text, span.link_target
        (<InlineStyle.LINK: 'link'>, 'label', 'http://example.com')
    """
    return Converter(config).convert(source, source_file=source_file)


def convert_file(
    path: str | PathLike[str],
    *,
    encoding: str = "utf-8",
    config: ConvertConfig | None = None,
) -> StyledDocument:
    """Read ``path`` and convert its contents.

    Raises:
        SourceReadError: The file could not be read or decoded.
    """
    source = read_source(path, encoding=encoding)
    return Converter(config).convert(source, source_file=str(path))
