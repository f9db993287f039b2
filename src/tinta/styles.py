"""Style attribute providers: (block type, inline style) to presentation attributes.

The converter only emits abstract spans. An embedding application turns
them into fonts, colors and spacing through a StyleAttributeProvider. The
built-in StyleSheet resolves to a platform-neutral text-style scale unless
the caller overrides a slot.

Attribute keys:
    font_family, font_size, font_weight, font_style, paragraph_spacing,
    text_decoration, link

Resolution:
    Heading lines use the heading's attributes for every span on the line;
    emphasis, code and links inside a heading are not separately styled.
    Body lines use the inline style's attributes (``body`` for plain text).
    Overrides are layered on top of the defaults for their slot. A link
    target, when present, is always written to ``link``.

Example:
    >>> sheet = StyleSheet(h1={"font_size": 32})
    >>> sheet.resolve(BlockType.H1, InlineStyle.NONE)["font_size"]
    32
    >>> sheet.resolve(BlockType.BODY, InlineStyle.BOLD)["font_weight"]
    'bold'

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Protocol

from tinta.nodes import BlockType, InlineStyle

PresentationAttributes = Mapping[str, object]


class StyleAttributeProvider(Protocol):
    """Protocol for span style lookups.

    Implementations map a span's block type, inline style and optional link
    target to a renderer-specific attribute mapping. The built-in
    ``StyleSheet`` conforms to this protocol.

    """

    def resolve(
        self,
        block_type: BlockType,
        inline_style: InlineStyle,
        link_target: str | None = None,
    ) -> PresentationAttributes:
        """Return presentation attributes for one span."""
        ...


class TextStyle(Enum):
    """Platform-neutral text styles, sized like a default dynamic type scale.

    Value: (font_size, font_weight, paragraph_spacing)
    """

    TITLE1 = (28.0, "regular", 14.0)
    TITLE2 = (22.0, "regular", 11.0)
    TITLE3 = (20.0, "regular", 10.0)
    HEADLINE = (17.0, "semibold", 8.0)
    SUBHEADLINE = (15.0, "regular", 7.0)
    BODY = (17.0, "regular", 0.0)
    FOOTNOTE = (13.0, "regular", 6.0)

    @property
    def font_size(self) -> float:
        return self.value[0]

    @property
    def font_weight(self) -> str:
        return self.value[1]

    @property
    def paragraph_spacing(self) -> float:
        return self.value[2]

    def attributes(self) -> dict[str, object]:
        """Default attribute bag for text set in this style."""
        return {
            "font_family": DEFAULT_FONT_FAMILY,
            "font_size": self.font_size,
            "font_weight": self.font_weight,
            "font_style": "normal",
            "paragraph_spacing": self.paragraph_spacing,
        }


DEFAULT_FONT_FAMILY = "system"
MONOSPACE_FONT_FAMILY = "monospace"

BLOCK_TEXT_STYLES: dict[BlockType, TextStyle] = {
    BlockType.H1: TextStyle.TITLE1,
    BlockType.H2: TextStyle.TITLE2,
    BlockType.H3: TextStyle.TITLE3,
    BlockType.H4: TextStyle.HEADLINE,
    BlockType.H5: TextStyle.SUBHEADLINE,
    BlockType.H6: TextStyle.FOOTNOTE,
    BlockType.BODY: TextStyle.BODY,
}

# Traits layered on the body defaults for each inline style
INLINE_TRAITS: dict[InlineStyle, dict[str, object]] = {
    InlineStyle.NONE: {},
    InlineStyle.ITALIC: {"font_style": "italic"},
    InlineStyle.BOLD: {"font_weight": "bold"},
    InlineStyle.CODE: {"font_family": MONOSPACE_FONT_FAMILY},
    InlineStyle.LINK: {"text_decoration": "underline"},
}

_HEADING_SLOTS: dict[BlockType, str] = {
    BlockType.H1: "h1",
    BlockType.H2: "h2",
    BlockType.H3: "h3",
    BlockType.H4: "h4",
    BlockType.H5: "h5",
    BlockType.H6: "h6",
}

_INLINE_SLOTS: dict[InlineStyle, str] = {
    InlineStyle.NONE: "body",
    InlineStyle.ITALIC: "italic",
    InlineStyle.BOLD: "bold",
    InlineStyle.CODE: "code",
    InlineStyle.LINK: "link",
}


def default_attributes(block_type: BlockType, inline_style: InlineStyle) -> dict[str, object]:
    """Attributes used when no override is configured."""
    attrs = BLOCK_TEXT_STYLES[block_type].attributes()
    if block_type is BlockType.BODY:
        attrs.update(INLINE_TRAITS[inline_style])
    return attrs


@dataclass(frozen=True, slots=True)
class StyleSheet:
    """Default StyleAttributeProvider with optional per-slot overrides.

    Each slot holds a mapping of attribute overrides, or None to use the
    defaults. Mappings are copied on construction, so later changes to the
    caller's dicts have no effect.

    Thread Safety:
        Frozen, with read-only override mappings. Safe to share.

    """

    h1: Mapping[str, object] | None = None
    h2: Mapping[str, object] | None = None
    h3: Mapping[str, object] | None = None
    h4: Mapping[str, object] | None = None
    h5: Mapping[str, object] | None = None
    h6: Mapping[str, object] | None = None
    body: Mapping[str, object] | None = None
    italic: Mapping[str, object] | None = None
    bold: Mapping[str, object] | None = None
    code: Mapping[str, object] | None = None
    link: Mapping[str, object] | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                object.__setattr__(self, f.name, MappingProxyType(dict(value)))

    @classmethod
    def from_dict(cls, config_dict: dict) -> StyleSheet:
        """Create a StyleSheet from a dict of slot name to overrides.

        Unknown slot names are silently ignored.

        Example:
            >>> sheet = StyleSheet.from_dict({"code": {"font_family": "Menlo"}})
            >>> sheet.code["font_family"]
            'Menlo'
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def override_for(
        self, block_type: BlockType, inline_style: InlineStyle
    ) -> Mapping[str, object] | None:
        """The configured override for a span, or None."""
        if block_type.is_heading:
            return getattr(self, _HEADING_SLOTS[block_type])
        return getattr(self, _INLINE_SLOTS[inline_style])

    def resolve(
        self,
        block_type: BlockType,
        inline_style: InlineStyle,
        link_target: str | None = None,
    ) -> PresentationAttributes:
        attrs = default_attributes(block_type, inline_style)
        override = self.override_for(block_type, inline_style)
        if override:
            attrs.update(override)
        if link_target is not None:
            attrs["link"] = link_target
        return MappingProxyType(attrs)


DEFAULT_STYLE_SHEET = StyleSheet()
