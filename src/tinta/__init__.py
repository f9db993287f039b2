"""
Tinta: Markdown to styled text spans

Converts lightweight Markdown (ATX and setext headings, emphasis, strong,
inline code, links, backslash escapes) into an ordered sequence of styled
spans, independent of any font system or renderer.

Quick Start:
    >>> from tinta import convert
    >>> doc = convert("# Hello **World**")
    >>> line = doc.lines[0]
    >>> line.block_type, line.text
    (<BlockType.H1: 1>, 'Hello World')

    >>> doc = convert("Some **bold** text")
    >>> [(s.text, s.inline_style.name) for s in doc.lines[0].spans]
    [('Some ', 'NONE'), ('bold', 'BOLD'), (' text', 'NONE')]

Presentation:
    >>> from tinta import StyleSheet, render
    >>> sheet = StyleSheet(h1={"font_family": "Georgia"})
    >>> attributed = render(convert("# Title"), sheet)
    >>> attributed.runs[0].attributes["font_family"]
    'Georgia'

Installation:
    pip install tinta               # Core converter (zero deps)
"""

from tinta.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from tinta.converter import Converter, convert, convert_file
from tinta.errors import (
    InputError,
    ScanError,
    SerializationError,
    SourceReadError,
    TintaError,
)
from tinta.loader import read_source
from tinta.nodes import BlockType, InlineStyle, StyledDocument, StyledLine, StyledSpan
from tinta.renderers.attributed import (
    AttributedText,
    AttributedTextRenderer,
    AttributeRun,
    render,
)
from tinta.renderers.protocol import SpanRenderer
from tinta.serialization import from_dict, from_json, to_dict, to_json
from tinta.styles import StyleAttributeProvider, StyleSheet, TextStyle

__version__ = "0.1.0"

__all__ = [
    "AttributeRun",
    "AttributedText",
    "AttributedTextRenderer",
    "BlockType",
    "ConvertConfig",
    "Converter",
    "InlineStyle",
    "InputError",
    "ScanError",
    "SerializationError",
    "SourceReadError",
    "SpanRenderer",
    "StyleAttributeProvider",
    "StyleSheet",
    "StyledDocument",
    "StyledLine",
    "StyledSpan",
    "TextStyle",
    "TintaError",
    "__version__",
    "convert",
    "convert_config_context",
    "convert_file",
    "from_dict",
    "from_json",
    "get_convert_config",
    "read_source",
    "render",
    "reset_convert_config",
    "set_convert_config",
    "to_dict",
    "to_json",
]
