"""Attributed-text renderer.

Folds converter output and a StyleAttributeProvider into one string plus
attribute runs, the shape most text views consume (an attributed string,
a list of tagged ranges, a rich-text buffer).

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single
AttributedTextRenderer instance and call render() concurrently.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from tinta.nodes import StyledDocument, StyledSpan
from tinta.stringbuilder import StringBuilder
from tinta.styles import DEFAULT_STYLE_SHEET, StyleAttributeProvider


@dataclass(frozen=True, slots=True)
class AttributeRun:
    """Attributes applied to ``text[start:end]``."""

    start: int
    end: int
    attributes: Mapping[str, object]

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class AttributedText:
    """Rendered text with non-overlapping, ordered attribute runs.

    Runs cover the whole text with no gaps.

    """

    text: str
    runs: tuple[AttributeRun, ...]

    def __str__(self) -> str:
        return self.text

    def attributes_at(self, index: int) -> Mapping[str, object]:
        """Attributes of the character at ``index``.

        Raises:
            IndexError: ``index`` is outside the text.
        """
        if not 0 <= index < len(self.text):
            raise IndexError(f"index {index} out of range for text of length {len(self.text)}")
        for run in self.runs:
            if run.start <= index < run.end:
                return run.attributes
        raise IndexError(f"no attribute run covers index {index}")

    def iter_ranges(self) -> Iterator[tuple[str, Mapping[str, object]]]:
        """Yield ``(substring, attributes)`` pairs in order."""
        for run in self.runs:
            yield self.text[run.start : run.end], run.attributes


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Thread Safety:
        Each render() call creates its own RenderContext instance.
        No shared mutable state between concurrent renders.
    """

    builder: StringBuilder = field(default_factory=StringBuilder)
    runs: list[AttributeRun] = field(default_factory=list)


class AttributedTextRenderer:
    """Render a StyledDocument to AttributedText.

    Usage:
        >>> from tinta import convert
        >>> out = AttributedTextRenderer().render(convert("Hi **there**"))
        >>> out.text
        'Hi there\\n'
        >>> out.attributes_at(3)["font_weight"]
        'bold'

    """

    __slots__ = ("_provider",)

    def __init__(self, provider: StyleAttributeProvider | None = None) -> None:
        """Initialize renderer.

        Args:
            provider: Style lookup; defaults to the built-in StyleSheet
        """
        self._provider = provider if provider is not None else DEFAULT_STYLE_SHEET

    def render(self, doc: StyledDocument) -> AttributedText:
        ctx = RenderContext()
        for span in doc.iter_spans():
            self._render_span(span, ctx)
        return AttributedText(text=ctx.builder.build(), runs=tuple(ctx.runs))

    def _render_span(self, span: StyledSpan, ctx: RenderContext) -> None:
        start = len(ctx.builder)
        ctx.builder.append(span.text)
        end = len(ctx.builder)
        if end == start:
            return

        attributes = self._provider.resolve(span.block_type, span.inline_style, span.link_target)
        if ctx.runs and ctx.runs[-1].end == start and ctx.runs[-1].attributes == attributes:
            previous = ctx.runs.pop()
            start = previous.start
            attributes = previous.attributes
        ctx.runs.append(AttributeRun(start, end, attributes))


def render(doc: StyledDocument, provider: StyleAttributeProvider | None = None) -> AttributedText:
    """Render ``doc`` with ``provider`` (the default StyleSheet if None)."""
    return AttributedTextRenderer(provider).render(doc)
