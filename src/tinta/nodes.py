"""Typed output nodes for Tinta.

All output nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint

Node Hierarchy:
StyledDocument
└── StyledLine (one per source line, heading underlines excluded)
    ├── StyledSpan (content, in order)
    └── StyledSpan (line break, always "\\n" with InlineStyle.NONE)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class BlockType(Enum):
    """Block-level classification of a whole line."""

    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6
    BODY = 0

    @property
    def level(self) -> int:
        """Heading level 1-6, or 0 for body lines."""
        return self.value

    @property
    def is_heading(self) -> bool:
        return self is not BlockType.BODY

    @classmethod
    def heading(cls, level: int) -> "BlockType":
        """Return the heading block type for ``level`` (1-6)."""
        if not 1 <= level <= 6:
            raise ValueError(f"heading level must be 1-6, got {level}")
        return cls(level)


class InlineStyle(Enum):
    """Character-level style of a span. Styles never combine."""

    NONE = "none"
    ITALIC = "italic"
    BOLD = "bold"
    CODE = "code"
    LINK = "link"


# Delimiter runs matched by exact equality on the active characters
DELIMITER_STYLES: dict[str, InlineStyle] = {
    "**": InlineStyle.BOLD,
    "__": InlineStyle.BOLD,
    "*": InlineStyle.ITALIC,
    "_": InlineStyle.ITALIC,
    "`": InlineStyle.CODE,
    "[": InlineStyle.LINK,
}


def style_for_delimiters(active: str) -> InlineStyle:
    """Resolve a run of active delimiter characters to an InlineStyle.

    Unknown runs (``"*_"``, ``"***"``, ``""``) resolve to ``InlineStyle.NONE``.

    """
    return DELIMITER_STYLES.get(active, InlineStyle.NONE)


@dataclass(frozen=True, slots=True)
class StyledSpan:
    """A run of text sharing one block type and one inline style.

    ``link_target`` is set exactly when ``inline_style`` is LINK.

    """

    text: str
    block_type: BlockType = BlockType.BODY
    inline_style: InlineStyle = InlineStyle.NONE
    link_target: str | None = None

    def __post_init__(self) -> None:
        if self.inline_style is InlineStyle.LINK:
            if not self.link_target:
                raise ValueError("link span requires a non-empty link_target")
        elif self.link_target is not None:
            raise ValueError(f"{self.inline_style.name} span cannot carry a link_target")

    @property
    def style_key(self) -> tuple[BlockType, InlineStyle, str | None]:
        """Identity used when merging adjacent spans."""
        return (self.block_type, self.inline_style, self.link_target)


LINE_TERMINATOR = "\n"


@dataclass(frozen=True, slots=True)
class StyledLine:
    """Spans of one source line plus its terminating line break.

    Attributes:
        lineno: Source line number (1-indexed)
        block_type: Classification shared by every span on the line
        spans: Content spans in order (empty for blank lines)
        line_break: Terminator span, always ``"\\n"`` styled NONE

    """

    lineno: int
    block_type: BlockType
    spans: tuple[StyledSpan, ...]
    line_break: StyledSpan

    @property
    def text(self) -> str:
        """Visible text of the line, terminator excluded."""
        return "".join(span.text for span in self.spans)

    def __iter__(self) -> Iterator[StyledSpan]:
        yield from self.spans
        yield self.line_break


@dataclass(frozen=True, slots=True)
class StyledDocument:
    """Complete result of one conversion call."""

    lines: tuple[StyledLine, ...]
    source_file: str | None = None

    @property
    def text(self) -> str:
        """All span texts concatenated, one terminator per line."""
        return "".join(span.text for span in self.iter_spans())

    def iter_spans(self) -> Iterator[StyledSpan]:
        """Yield every span in order, line breaks included."""
        for line in self.lines:
            yield from line

    def __len__(self) -> int:
        return len(self.lines)
