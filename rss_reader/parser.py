from __future__ import annotations

import logging
from typing import Dict, Optional

from .exceptions import MalformedFeed
from .models import Channel, NewsItem
from .query import NOT_FOUND, find_first_child_tag
from .tree import Element

logger = logging.getLogger(__name__)

_ITEM_FIELDS = ("pubDate", "source", "title", "description", "link")


def _first_text(element: Element) -> Optional[str]:
    """Label of the first child, or None when the element is empty."""
    if not element.children:
        return None
    return element.children[0].label


def _child_text(parent: Element, tag: str) -> Optional[str]:
    """
    Text of the first `tag` child of `parent`.
    Returns None if there is no such child and "" if it has no content.
    """
    idx = find_first_child_tag(parent, tag)
    if idx == NOT_FOUND:
        return None
    text = _first_text(parent.children[idx])
    return text if text is not None else ""


def extract_item(item: Element) -> NewsItem:
    """
    Map an <item> element to a NewsItem in a single pass over its children.

    The first child with a given label that has content decides that field;
    empty children are skipped, so an empty <source url="..."/> yields
    neither a source name nor a source url. <description> stands in for the
    title only when no <title> supplied text.
    """
    if not (item.is_tag and item.label == "item"):
        raise ValueError(f"Expected an <item> tag, got {item.label!r}")

    found: Dict[str, Element] = {}
    for child in item.children:
        if not (child.is_tag and child.children):
            continue
        if child.label in _ITEM_FIELDS and child.label not in found:
            found[child.label] = child

    pub_date = None
    source_name = None
    source_url = None
    link = None

    if "pubDate" in found:
        pub_date = _first_text(found["pubDate"])
    if "source" in found:
        source_name = _first_text(found["source"])
        if source_name is not None:
            source_url = found["source"].attribute_value("url")
    if "link" in found:
        link = _first_text(found["link"])

    title = _first_text(found["title"]) if "title" in found else None
    if title is None and "description" in found:
        title = _first_text(found["description"])

    return NewsItem(
        pub_date=pub_date,
        source_name=source_name,
        source_url=source_url,
        title=title,
        link=link,
    )


def extract_channel(channel: Element, *, require_title: bool = False) -> Channel:
    """
    Read title, link and description of a <channel> element.

    With require_title, a channel lacking a <title> element raises MalformedFeed.
    """
    if not (channel.is_tag and channel.label == "channel"):
        raise ValueError(f"Expected a <channel> tag, got {channel.label!r}")

    title = _child_text(channel, "title")
    if title is None and require_title:
        raise MalformedFeed("Channel has no <title> element")

    result = Channel(
        title=title,
        link=_child_text(channel, "link"),
        description=_child_text(channel, "description"),
    )
    logger.debug("Extracted channel %r", result.title)
    return result
