"""Shared feed fixtures."""

import pytest

TECH_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Tech</title>
    <link>http://x</link>
    <description>D</description>
    <item>
      <pubDate>Mon</pubDate>
      <title>T</title>
      <link>http://i</link>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def tech_feed() -> str:
    return TECH_FEED


@pytest.fixture
def feed_file(tmp_path):
    path = tmp_path / "feed.xml"
    path.write_text(TECH_FEED, encoding="utf-8")
    return path
