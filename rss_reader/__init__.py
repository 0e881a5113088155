"""
rss_reader

Reads an RSS 2.0 feed and renders its channel and items either as a plain-text
console summary or as an HTML page with one table row per news item.

Core ideas:
- Input: an RSS 2.0 document (URL, file, or an already parsed tree)
- Process: validate → extract channel → extract items → render
- Output: console lines or an HTML document

Example
-------
from rss_reader import FeedConverter

converter = FeedConverter(timeout_sec=5)

for line in converter.to_console("https://feeds.bbci.co.uk/news/rss.xml"):
    print(line)

with open("news.html", "w", encoding="utf-8") as f:
    f.write(converter.to_html("https://feeds.bbci.co.uk/news/rss.xml"))
"""
from .config import __version__
from .core import FeedConverter, convert_to_console_text, convert_to_html
from .exceptions import MalformedFeed, RSSFetchError
from .models import Channel, NewsItem
from .parser import extract_channel, extract_item
from .query import NOT_FOUND, find_first_child_tag
from .renderers import render_console, render_html
from .tree import Element, TagNode, TextNode, parse_xml

__all__ = [
    "__version__",
    "Channel",
    "Element",
    "FeedConverter",
    "MalformedFeed",
    "NOT_FOUND",
    "NewsItem",
    "RSSFetchError",
    "TagNode",
    "TextNode",
    "convert_to_console_text",
    "convert_to_html",
    "extract_channel",
    "extract_item",
    "find_first_child_tag",
    "parse_xml",
    "render_console",
    "render_html",
]
