"""Override a few style slots and render to attributed text."""

from tinta import StyleSheet, convert, render

sheet = StyleSheet(
    h1={"font_family": "Georgia", "font_size": 34},
    code={"font_family": "Menlo", "color": "#c7254e"},
    link={"color": "#0366d6"},
)

doc = convert("# Release notes\nRun `make` then read the [guide](https://example.com/guide).")
attributed = render(doc, sheet)

for text, attributes in attributed.iter_ranges():
    print(repr(text), dict(attributes))
