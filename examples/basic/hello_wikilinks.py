"""Parse and render wikilinks with the default extension."""

from wikilink import parse, render

doc = parse("See [[Getting Started:the guide]] or [[FAQ]].")
html = render(doc)
print(html)
