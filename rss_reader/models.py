from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Channel:
    """
    Feed-level metadata taken from the <channel> element.

    None means the element was not found at all; an empty string means the
    element exists but carries no text.
    """
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class NewsItem:
    """
    One <item> of the feed. Absent fields stay None; display defaults are
    applied by the renderers, never here.
    """
    pub_date: Optional[str] = None
    source_name: Optional[str] = None
    source_url: Optional[str] = None
    title: Optional[str] = None
    link: Optional[str] = None
