from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional, TextIO, Tuple

from .config import DEFAULT_TIMEOUT, Settings
from .exceptions import MalformedFeed
from .fetcher import fetch_feed
from .models import Channel, NewsItem
from .parser import extract_channel, extract_item
from .renderers import ConsoleRenderer, HtmlRenderer, build_renderer
from .tree import Element

logger = logging.getLogger(__name__)


def validate_root(root: Element) -> Element:
    """
    Check that `root` is <rss version="2.0"> whose first tag child is
    <channel>, and return that channel element.
    """
    if not root.is_tag or root.label != "rss":
        raise MalformedFeed(f"Root element is not <rss>: {root.label!r}")
    version = root.attribute_value("version")
    if version != "2.0":
        raise MalformedFeed(f"Unsupported RSS version: {version!r}")
    tags = [c for c in root.children if c.is_tag]
    if not tags or tags[0].label != "channel":
        raise MalformedFeed("RSS document has no <channel> element")
    return tags[0]


def extract_feed(root: Element, *, require_title: bool = False) -> Tuple[Channel, List[NewsItem]]:
    """Validate `root` and extract the channel and its items in document order."""
    channel_el = validate_root(root)
    channel = extract_channel(channel_el, require_title=require_title)
    items = [extract_item(c) for c in channel_el.children if c.is_tag and c.label == "item"]
    logger.info("Extracted %d items from channel %r", len(items), channel.title)
    return channel, items


def convert_to_console_text(root: Element) -> List[str]:
    channel, items = extract_feed(root)
    return ConsoleRenderer().render(channel, items)


def convert_to_html(root: Element, *, escape: bool = True) -> str:
    channel, items = extract_feed(root, require_title=True)
    return HtmlRenderer(escape=escape).render(channel, items)


@dataclass
class ConvertOptions:
    timeout_sec: float = DEFAULT_TIMEOUT
    user_agent: Optional[str] = None
    escape_html: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConvertOptions":
        return cls(
            timeout_sec=settings.timeout_sec,
            user_agent=settings.user_agent,
            escape_html=settings.escape_html,
        )


class FeedConverter:
    """
    High-level API: load an RSS 2.0 feed from a URL or file and render it.

    Pipeline: fetch → validate → extract channel → extract items → render
    """

    def __init__(
        self,
        *,
        timeout_sec: float = DEFAULT_TIMEOUT,
        user_agent: Optional[str] = None,
        escape_html: bool = True,
    ) -> None:
        self.options = ConvertOptions(
            timeout_sec=timeout_sec,
            user_agent=user_agent,
            escape_html=escape_html,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeedConverter":
        opts = ConvertOptions.from_settings(settings)
        return cls(timeout_sec=opts.timeout_sec, user_agent=opts.user_agent, escape_html=opts.escape_html)

    def load(self, source: str) -> Element:
        return fetch_feed(source, timeout=self.options.timeout_sec, user_agent=self.options.user_agent)

    def to_console(self, source: str) -> List[str]:
        return convert_to_console_text(self.load(source))

    def to_html(self, source: str) -> str:
        return convert_to_html(self.load(source), escape=self.options.escape_html)

    def write(self, source: str, out: TextIO, *, mode: str = "console") -> None:
        """
        Convert `source` and write the result to `out`. Nothing is written
        unless the whole feed converted successfully.
        """
        renderer = build_renderer(mode, escape=self.options.escape_html)
        root = self.load(source)
        channel, items = extract_feed(root, require_title=isinstance(renderer, HtmlRenderer))
        renderer.write(channel, items, out)
