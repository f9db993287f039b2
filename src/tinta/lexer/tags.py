"""Tag reader: splits a run of markup characters into delimiters and escapes."""

from dataclasses import dataclass

from tinta.charsets import ESCAPE_CHAR, INSTRUCTION_CHARS


@dataclass(frozen=True, slots=True)
class Tag:
    """A maximal run of instruction characters found in the source.

    Attributes:
        active: Characters that take part in style resolution
        escaped: Backslash-escaped characters, backslashes removed
        start: Offset of the first character of the run
        end: Offset just past the run

    """

    active: str
    escaped: str
    start: int
    end: int

    @property
    def literal(self) -> str:
        """Text emitted when the tag turns out not to be markup."""
        return self.active + self.escaped

    @property
    def opens_link(self) -> bool:
        return self.active[:1] == "["


def read_tag(text: str, pos: int, end: int | None = None) -> Tag:
    """Consume the run of instruction characters starting at ``pos``.

    Inside the run every backslash takes the next character as a literal.
    A backslash closing the run has nothing to escape and stays literal
    itself. Never fails; an empty run yields an empty tag at ``pos``.

    Args:
        text: Line buffer
        pos: Cursor offset into ``text``
        end: Exclusive scan limit (defaults to ``len(text)``)

    Returns:
        Tag covering ``text[pos:tag.end]``

    """
    if end is None:
        end = len(text)

    run_end = pos
    while run_end < end and text[run_end] in INSTRUCTION_CHARS:
        run_end += 1

    active: list[str] = []
    escaped: list[str] = []
    i = pos
    while i < run_end:
        char = text[i]
        if char == ESCAPE_CHAR:
            if i + 1 < run_end:
                escaped.append(text[i + 1])
                i += 2
            else:
                escaped.append(char)
                i += 1
            continue
        active.append(char)
        i += 1

    return Tag("".join(active), "".join(escaped), pos, run_end)
