"""ContextVar-based conversion configuration for Tinta.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Converter built without an explicit config reads the active one from the
current context at call time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    from tinta import Converter, ConvertConfig
    converter = Converter(ConvertConfig(setext_headings=False))

    # Scoped config for code that calls convert() indirectly
    from tinta.config import convert_config_context
    with convert_config_context(ConvertConfig(code_line_prefix="")):
        doc = convert("`code` first")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: source_file is intentionally excluded, it's per-call state,
    not configuration.

    Attributes:
        setext_headings: Treat a line underlined with ``===`` / ``---`` as H1 / H2
        strip_closing_markers: Remove closing ``#`` runs from ATX headings
        code_line_prefix: Text prepended to inline code that opens a line
        coalesce_spans: Merge adjacent spans sharing block type, style and target

    """

    setext_headings: bool = True
    strip_closing_markers: bool = True
    code_line_prefix: str = "\t"
    coalesce_spans: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ConvertConfig":
        """Create ConvertConfig from dictionary.

        Useful when config comes from external sources such as TOML or YAML
        files. Only includes keys that are valid ConvertConfig fields; unknown
        keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ConvertConfig attribute names.

        Returns:
            New ConvertConfig instance with values from dict.

        Example:
            >>> config = ConvertConfig.from_dict({
            ...     "setext_headings": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.setext_headings
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

# Thread-local configuration via ContextVar
_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get current conversion configuration (thread-local).

    Returns:
        The active ConvertConfig for this thread/context.

    """
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set conversion configuration for current context.

    Args:
        config: ConvertConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Useful for tests and isolated conversions.

    Args:
        config: ConvertConfig to use within the context.

    Yields:
        None

    Example:
        >>> with convert_config_context(ConvertConfig(setext_headings=False)):
        ...     doc = convert("Title\\n=====")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _convert_config.get()
    _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.set(previous)


__all__ = [
    "ConvertConfig",
    "get_convert_config",
    "set_convert_config",
    "reset_convert_config",
    "convert_config_context",
]
