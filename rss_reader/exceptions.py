class RSSFetchError(Exception):
    """Raised when an RSS feed cannot be fetched or parsed as XML."""


class MalformedFeed(Exception):
    """Raised when a document tree does not have the RSS 2.0 rss/channel shape."""
