from __future__ import annotations

import logging
from typing import Optional
import xml.etree.ElementTree as ET

import requests

from .config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .exceptions import RSSFetchError
from .tree import TagNode, parse_xml

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_bytes(source: str, *, timeout: float = DEFAULT_TIMEOUT, user_agent: Optional[str] = None) -> bytes:
    """
    Return the raw document for an http(s) URL or a local file path.

    Raises RSSFetchError on network errors, non-2xx responses and unreadable files.
    """
    if _is_url(source):
        headers = {"User-Agent": user_agent or DEFAULT_USER_AGENT}
        logger.info("Fetching feed %s", source)
        try:
            resp = requests.get(source, headers=headers, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise RSSFetchError(f"Failed to fetch feed: {source} ({e})") from e
        return resp.content

    logger.info("Reading feed file %s", source)
    try:
        with open(source, "rb") as f:
            return f.read()
    except OSError as e:
        raise RSSFetchError(f"Failed to read feed: {source} ({e})") from e


def fetch_feed(source: str, *, timeout: float = DEFAULT_TIMEOUT, user_agent: Optional[str] = None) -> TagNode:
    """
    Load `source` and parse it into a tree. The tree is not checked for RSS
    shape here; that is done at conversion time.
    """
    data = fetch_bytes(source, timeout=timeout, user_agent=user_agent)
    # Unknown or unsupported declared encodings surface as LookupError/ValueError
    try:
        root = parse_xml(data)
    except (ET.ParseError, LookupError, ValueError) as e:
        raise RSSFetchError(f"Invalid XML in feed: {source} ({e})") from e
    logger.debug("Parsed %s: root <%s> with %d children", source, root.label, len(root.children))
    return root
