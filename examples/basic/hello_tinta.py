"""Convert Markdown to styled spans in 3 lines, no config needed."""

from tinta import convert

doc = convert("# Hello **World**\nSome *italic*, `code` and a [link](https://example.com).")
for line in doc.lines:
    print(line.block_type.name, [(span.text, span.inline_style.name) for span in line.spans])
