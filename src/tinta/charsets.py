"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from tinta.charsets import INSTRUCTION_CHARS

    if char in INSTRUCTION_CHARS:  # O(1) lookup
        ...
"""

import unicodedata

# Characters that can start inline markup
INSTRUCTION_CHARS: frozenset[str] = frozenset("[\\*_`")

ESCAPE_CHAR = "\\"

LINK_OPEN = "["
LINK_TEXT_CLOSE = "]"
LINK_TARGET_OPEN = "("
LINK_TARGET_CLOSE = ")"

# ATX heading prefixes, index + 1 == heading level
HEADING_PREFIXES: tuple[str, ...] = ("# ", "## ", "### ", "#### ", "##### ", "###### ")

# Setext underline characters, mapped to heading level
SETEXT_UNDERLINES: dict[str, int] = {"=": 1, "-": 2}

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")


def is_unicode_whitespace(char: str) -> bool:
    """Check if character is Unicode whitespace.

    Includes ASCII whitespace and Unicode category Zs (space separator).

    """
    if char in WHITESPACE:
        return True
    return unicodedata.category(char) == "Zs"


def is_unicode_punctuation(char: str) -> bool:
    """Check if character is Unicode punctuation (Pc, Pd, Pe, Pf, Pi, Po, Ps).

    Symbols (S*) are not punctuation here, so ``*$5*`` still opens emphasis.

    """
    return unicodedata.category(char).startswith("P")


def forces_literal(char: str) -> bool:
    """True when a tag followed by ``char`` must be read as literal text."""
    return is_unicode_whitespace(char) or is_unicode_punctuation(char)
