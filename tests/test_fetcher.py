"""Tests for loading feeds from URLs and files."""

import pytest
import requests

from rss_reader import fetcher
from rss_reader.exceptions import RSSFetchError


class FakeResponse:
    def __init__(self, content: bytes, status: int = 200) -> None:
        self.content = content
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_feed_url(monkeypatch, tech_feed) -> None:
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, headers, timeout))
        return FakeResponse(tech_feed.encode("utf-8"))

    monkeypatch.setattr(fetcher.requests, "get", fake_get)
    root = fetcher.fetch_feed("https://example.com/rss", timeout=2.5, user_agent="test-agent")
    assert root.label == "rss"
    assert calls == [("https://example.com/rss", {"User-Agent": "test-agent"}, 2.5)]


def test_fetch_feed_http_error(monkeypatch) -> None:
    monkeypatch.setattr(fetcher.requests, "get", lambda *a, **kw: FakeResponse(b"", status=404))
    with pytest.raises(RSSFetchError):
        fetcher.fetch_feed("http://example.com/missing")


def test_fetch_feed_connection_error(monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(fetcher.requests, "get", boom)
    with pytest.raises(RSSFetchError) as exc:
        fetcher.fetch_feed("http://example.com/rss")
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_fetch_feed_file(feed_file) -> None:
    root = fetcher.fetch_feed(str(feed_file))
    assert root.attribute_value("version") == "2.0"


def test_fetch_feed_invalid_xml(tmp_path) -> None:
    path = tmp_path / "broken.xml"
    path.write_text("<rss><channel></rss>")
    with pytest.raises(RSSFetchError):
        fetcher.fetch_feed(str(path))


def test_fetch_feed_missing_file(tmp_path) -> None:
    with pytest.raises(RSSFetchError):
        fetcher.fetch_feed(str(tmp_path / "nope.xml"))


def test_fetch_feed_unknown_encoding(tmp_path) -> None:
    path = tmp_path / "odd.xml"
    path.write_bytes(b'<?xml version="1.0" encoding="bogus-enc"?>\n<rss version="2.0"><channel/></rss>')
    with pytest.raises(RSSFetchError) as exc:
        fetcher.fetch_feed(str(path))
    assert isinstance(exc.value.__cause__, (LookupError, ValueError))


def test_fetch_feed_deeply_nested(tmp_path) -> None:
    depth = 5000
    body = "<x>" * depth + "deep" + "</x>" * depth
    path = tmp_path / "nested.xml"
    path.write_text(f'<rss version="2.0"><channel><title>T</title><item>{body}</item></channel></rss>')

    root = fetcher.fetch_feed(str(path))

    node = root.children[0].children[1].children[0]
    levels = 0
    while node.is_tag:
        levels += 1
        node = node.children[0]
    assert levels == depth
    assert node.label == "deep"
