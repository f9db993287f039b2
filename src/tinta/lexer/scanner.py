"""Inline scanner: turns one line of content into styled span fragments.

A cursor walks a single line buffer, alternating between two modes:

- Plain: everything up to the next instruction character is unstyled text.
- Tagged: a run of instruction characters is read with the tag reader and
  either opens a styled run (emphasis, strong, code, link) or is emitted
  literally.

No regex, no nested parsing. A combined delimiter run such as ``**`` is
matched as one unit against the delimiter table.

Thread Safety:
All mutable state lives in a ScanContext and a single-use InlineScanner,
both created per call. Nothing is shared between conversions.

"""

from __future__ import annotations

from dataclasses import dataclass

from tinta.charsets import (
    INSTRUCTION_CHARS,
    LINK_TARGET_CLOSE,
    LINK_TARGET_OPEN,
    LINK_TEXT_CLOSE,
    forces_literal,
)
from tinta.config import ConvertConfig
from tinta.errors import ScanError
from tinta.lexer.tags import Tag, read_tag
from tinta.nodes import BlockType, InlineStyle, StyledSpan, style_for_delimiters
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class ScanContext:
    """Per-call parser state, threaded through the scan by argument.

    Created fresh for each conversion; ``for_line`` derives the state for
    the next line so block type and inline style never leak across lines.

    """

    config: ConvertConfig
    source_file: str | None = None
    lineno: int = 0
    block_type: BlockType = BlockType.BODY
    inline_style: InlineStyle = InlineStyle.NONE
    link_fallbacks: int = 0

    def for_line(self, lineno: int, block_type: BlockType) -> ScanContext:
        """Fresh context for ``lineno``: given block type, no inline style."""
        return ScanContext(
            config=self.config,
            source_file=self.source_file,
            lineno=lineno,
            block_type=block_type,
        )


def scan_inline(content: str, context: ScanContext) -> list[StyledSpan]:
    """Scan one line of content into span fragments.

    Fragments are returned in emission order and are not merged; adjacent
    fragments may share a style.

    Args:
        content: Line content with block markup already removed
        context: Per-line scan context

    Returns:
        List of non-empty StyledSpan fragments covering the content.
    """
    if not content:
        return []
    return InlineScanner(content, context).scan()


class InlineScanner:
    """Single-use cursor over one line of content.

    Usage:
        >>> ctx = ScanContext(ConvertConfig())
        >>> [s.text for s in InlineScanner("a **b** c", ctx).scan()]
        ['a ', 'b', ' c']

    """

    __slots__ = ("_text", "_len", "_pos", "_ctx", "_fragments")

    def __init__(self, text: str, context: ScanContext) -> None:
        self._text = text
        self._len = len(text)
        self._pos = 0
        self._ctx = context
        self._fragments: list[StyledSpan] = []

    def scan(self) -> list[StyledSpan]:
        """Scan the whole line.

        Complexity: O(n) where n = len(text); every step advances the cursor.
        """
        text = self._text
        text_len = self._len
        while self._pos < text_len:
            start = self._pos
            if text[start] in INSTRUCTION_CHARS:
                self._scan_tagged(first_token=start == 0)
            else:
                self._scan_plain()
            self._check_progress(start)
        return self._fragments

    # =========================================================================
    # Modes
    # =========================================================================

    def _scan_plain(self) -> None:
        end = self._find_instruction(self._pos)
        self._emit(self._text[self._pos : end])
        self._pos = end

    def _scan_tagged(self, *, first_token: bool) -> None:
        tag = read_tag(self._text, self._pos, self._len)
        self._pos = tag.end

        if not tag.opens_link and self._followed_by_literal(tag):
            self._emit(tag.literal)
            return

        style = style_for_delimiters(tag.active)
        if style is InlineStyle.NONE:
            self._emit(tag.literal)
            return

        self._ctx.inline_style = style
        try:
            if style is InlineStyle.LINK:
                self._scan_link(tag)
            else:
                self._scan_styled_run(tag, first_token=first_token)
        finally:
            self._ctx.inline_style = InlineStyle.NONE

    def _scan_styled_run(self, tag: Tag, *, first_token: bool) -> None:
        """Emphasis, strong or code: body runs to the next instruction character."""
        body_end = self._find_instruction(self._pos)
        prefix = ""
        if first_token and self._ctx.inline_style is InlineStyle.CODE:
            prefix = self._ctx.config.code_line_prefix
        self._emit(prefix + tag.escaped + self._text[self._pos : body_end], self._ctx.inline_style)
        self._pos = body_end

        if body_end < self._len:
            closing = read_tag(self._text, body_end, self._len)
            self._pos = closing.end
            # Escapes right after a closing delimiter stay literal
            self._emit(closing.escaped)

    def _scan_link(self, tag: Tag) -> None:
        """``[text](target)``; degrades to a literal ``[`` when incomplete."""
        text = self._text
        label_start = self._pos
        label_end = text.find(LINK_TEXT_CLOSE, label_start)
        target: str | None = None
        target_end = -1

        if label_end != -1 and label_end + 1 < self._len and text[label_end + 1] == LINK_TARGET_OPEN:
            target_start = label_end + 2
            target_end = text.find(LINK_TARGET_CLOSE, target_start)
            if target_end != -1:
                target = text[target_start:target_end].strip()

        label = tag.escaped + text[label_start:label_end] if label_end != -1 else ""
        if not label or not target:
            self._ctx.link_fallbacks += 1
            logger.debug(
                "line %d col %d: incomplete link, emitting '[' literally",
                self._ctx.lineno,
                tag.start + 1,
            )
            self._emit(tag.literal)
            return

        self._emit(label, InlineStyle.LINK, target)
        self._pos = target_end + 1

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _followed_by_literal(self, tag: Tag) -> bool:
        """A tag at end of line or before whitespace/punctuation is plain text."""
        if tag.end >= self._len:
            return True
        return forces_literal(self._text[tag.end])

    def _find_instruction(self, pos: int) -> int:
        """Offset of the next instruction character at or after ``pos``."""
        text = self._text
        text_len = self._len
        while pos < text_len and text[pos] not in INSTRUCTION_CHARS:
            pos += 1
        return pos

    def _check_progress(self, start: int) -> None:
        if self._pos <= start or self._pos > self._len:
            raise ScanError(
                f"cursor moved from {start} to {self._pos} in a line of length {self._len}",
                lineno=self._ctx.lineno,
                col_offset=start + 1,
                source_file=self._ctx.source_file,
            )

    def _emit(
        self,
        text: str,
        style: InlineStyle = InlineStyle.NONE,
        link_target: str | None = None,
    ) -> None:
        if text:
            self._fragments.append(
                StyledSpan(text, self._ctx.block_type, style, link_target)
            )
