"""Line classification and inline scanning for Tinta.

Provides:
- classify_line: block type of a line, setext underline lookahead
- read_tag: splits a markup run into active delimiters and escapes
- scan_inline: styled span fragments for one line of content
"""

from tinta.lexer.classifier import LineClass, classify_line
from tinta.lexer.scanner import InlineScanner, ScanContext, scan_inline
from tinta.lexer.tags import Tag, read_tag

__all__ = [
    "InlineScanner",
    "LineClass",
    "ScanContext",
    "Tag",
    "classify_line",
    "read_tag",
    "scan_inline",
]
