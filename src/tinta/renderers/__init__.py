"""Renderers for converter output.

Available renderers:
- AttributedTextRenderer: text plus attribute runs from a StyleAttributeProvider
"""

from tinta.renderers.attributed import (
    AttributedText,
    AttributedTextRenderer,
    AttributeRun,
    render,
)
from tinta.renderers.protocol import SpanRenderer

__all__ = [
    "AttributeRun",
    "AttributedText",
    "AttributedTextRenderer",
    "SpanRenderer",
    "render",
]
