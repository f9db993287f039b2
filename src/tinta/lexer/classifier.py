"""Line classifier: assigns a block type to each line and strips its markup.

ATX headings (``# Title``) are recognized by one of six fixed prefixes.
Setext headings are recognized by looking one line ahead for a row of
``=`` (H1) or ``-`` (H2); that underline row is consumed.
"""

from dataclasses import dataclass

from tinta.charsets import HEADING_PREFIXES, SETEXT_UNDERLINES
from tinta.config import ConvertConfig
from tinta.nodes import BlockType


@dataclass(frozen=True, slots=True)
class LineClass:
    """Result of classifying one line.

    Attributes:
        block_type: Heading level or body
        content: Visible content with block markup removed
        consumes_next: The following line was a setext underline

    """

    block_type: BlockType
    content: str
    consumes_next: bool = False


def classify_line(line: str, next_line: str | None, config: ConvertConfig) -> LineClass:
    """Classify ``line``, peeking at ``next_line`` for setext underlines.

    Args:
        line: Current source line, terminator removed
        next_line: Following source line, or None at end of document
        config: Active conversion config

    Returns:
        LineClass for ``line``.
    """
    atx = _try_classify_atx_heading(line, config.strip_closing_markers)
    if atx is not None:
        return atx

    if config.setext_headings and next_line is not None and line.strip():
        level = _setext_level(next_line)
        if level:
            return LineClass(BlockType.heading(level), line.strip(), consumes_next=True)

    return LineClass(BlockType.BODY, line)


def _try_classify_atx_heading(line: str, strip_closing: bool) -> LineClass | None:
    # Prefixes differ in hash count, so at most one matches
    for level, prefix in enumerate(HEADING_PREFIXES, start=1):
        if line.startswith(prefix):
            content = line[len(prefix) :]
            if strip_closing:
                content = _strip_closing_sequence(content)
            return LineClass(BlockType.heading(level), content.strip())
    return None


def _strip_closing_sequence(content: str) -> str:
    """Remove a trailing ``#`` run separated from the text by whitespace.

    ``"Title ##"`` becomes ``"Title"``; ``"C#"`` and ``"Issue #42 notes"``
    are left alone.
    """
    stripped = content.rstrip()
    if not stripped.endswith("#"):
        return content

    trailing_start = len(stripped)
    while trailing_start > 0 and stripped[trailing_start - 1] == "#":
        trailing_start -= 1

    if trailing_start == 0:
        return ""
    if stripped[trailing_start - 1].isspace():
        return stripped[:trailing_start]
    return content


def _setext_level(line: str) -> int:
    """Heading level underlined by ``line``, or 0 if it is not an underline."""
    if not line:
        return 0
    marker = line[0]
    level = SETEXT_UNDERLINES.get(marker, 0)
    if level and line.rstrip().strip(marker) == "":
        return level
    return 0
