"""Thread safety tests for Tinta.

A single Converter (and a single renderer) must give the same results when
shared across threads as when used sequentially. These tests use real
threading to catch actual concurrency bugs.
"""

from concurrent.futures import ThreadPoolExecutor

from tinta import ConvertConfig, Converter, convert_config_context, to_json
from tinta.nodes import BlockType
from tinta.renderers import AttributedTextRenderer

SOURCES = [
    "# Title\nplain *italic* **bold**",
    "Setext\n======\n`code` first\n[link](http://example.com)",
    "\\*escaped\\* and [broken link\nSub\n---",
    "a * b _c_ __d__ ``\n\n### Closing ###",
] * 10


class TestSharedConverter:
    """One Converter instance, many threads."""

    def test_matches_sequential_results(self) -> None:
        converter = Converter()
        expected = [to_json(converter.convert(source)) for source in SOURCES]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(lambda s: to_json(converter.convert(s)), SOURCES))

        assert actual == expected

    def test_shared_renderer(self) -> None:
        converter = Converter()
        renderer = AttributedTextRenderer()
        docs = [converter.convert(source) for source in SOURCES]
        expected = [renderer.render(doc) for doc in docs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(renderer.render, docs))

        assert actual == expected

    def test_per_thread_config(self) -> None:
        """Threads with different context configs do not interfere."""
        converter = Converter()

        def convert_with(setext: bool) -> BlockType:
            with convert_config_context(ConvertConfig(setext_headings=setext)):
                return converter.convert("Title\n=====").lines[0].block_type

        flags = [True, False] * 20
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(convert_with, flags))

        assert results == [BlockType.H1 if flag else BlockType.BODY for flag in flags]
