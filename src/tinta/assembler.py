"""Span assembler: folds a line's fragments into one StyledLine."""

from collections.abc import Iterable

from tinta.nodes import LINE_TERMINATOR, BlockType, StyledLine, StyledSpan


def coalesce_spans(fragments: Iterable[StyledSpan]) -> tuple[StyledSpan, ...]:
    """Merge adjacent fragments that share block type, style and link target.

    Empty fragments are dropped.
    """
    merged: list[StyledSpan] = []
    pending: list[str] = []
    head: StyledSpan | None = None

    for fragment in fragments:
        if not fragment.text:
            continue
        if head is not None and fragment.style_key == head.style_key:
            pending.append(fragment.text)
            continue
        if head is not None:
            merged.append(_join(head, pending))
        head = fragment
        pending = [fragment.text]

    if head is not None:
        merged.append(_join(head, pending))
    return tuple(merged)


def _join(head: StyledSpan, texts: list[str]) -> StyledSpan:
    if len(texts) == 1:
        return head
    return StyledSpan("".join(texts), head.block_type, head.inline_style, head.link_target)


def assemble_line(
    lineno: int,
    block_type: BlockType,
    fragments: Iterable[StyledSpan],
    *,
    coalesce: bool = True,
) -> StyledLine:
    """Build the StyledLine for one source line.

    Args:
        lineno: Source line number (1-indexed)
        block_type: Block type of the line
        fragments: Scanner output in emission order
        coalesce: Merge adjacent fragments with the same style

    Returns:
        StyledLine terminated by a single unstyled line break.
    """
    if coalesce:
        spans = coalesce_spans(fragments)
    else:
        spans = tuple(f for f in fragments if f.text)
    return StyledLine(
        lineno=lineno,
        block_type=block_type,
        spans=spans,
        line_break=StyledSpan(LINE_TERMINATOR, block_type),
    )
