"""Source loading: decode a file into text for the converter."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from tinta.errors import SourceReadError
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


def read_source(path: str | PathLike[str], encoding: str = "utf-8") -> str:
    """Read and decode a Markdown source file.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        Decoded file contents.

    Raises:
        SourceReadError: The file is missing, unreadable, or not valid text
            in ``encoding``.
    """
    source_path = Path(path)
    try:
        return source_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        logger.debug("decode failed for %s: %s", source_path, e)
        raise SourceReadError(str(source_path), f"not valid {encoding} text") from e
    except OSError as e:
        logger.debug("read failed for %s: %s", source_path, e)
        raise SourceReadError(str(source_path), e.strerror or str(e)) from e
