"""Markdown to plain text in one call."""

from llano import convert

text = convert("# Hello **World**\n\nSee [the docs](https://example.com).")
print(text)
