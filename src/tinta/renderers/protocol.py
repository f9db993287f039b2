"""SpanRenderer protocol: stable interface for styled-document sinks.

Any renderer that implements ``render(doc) -> AttributedText`` conforms to
this protocol. The built-in ``AttributedTextRenderer`` is the reference
implementation.

Example:
    from tinta.renderers.protocol import SpanRenderer

    def render_note(renderer: SpanRenderer, doc: StyledDocument) -> AttributedText:
        return renderer.render(doc)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tinta.nodes import StyledDocument
    from tinta.renderers.attributed import AttributedText


class SpanRenderer(Protocol):
    """Protocol for styled-document renderers.

    Implementations must accept a StyledDocument and return AttributedText.

    """

    def render(self, doc: StyledDocument) -> AttributedText:
        """Render a StyledDocument.

        Args:
            doc: Converter output to render.

        Returns:
            Text plus attribute runs.

        """
        ...
