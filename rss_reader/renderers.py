from __future__ import annotations

import html
from typing import Iterable, List, Optional, Protocol, Sequence, TextIO, Union

from .exceptions import MalformedFeed
from .models import Channel, NewsItem

NO_TITLE_PAGE = "Empty Title"
NO_DESCRIPTION = "No Description"
NO_DATE = "No date available"
NO_SOURCE = "No source available"
NO_TITLE = "No title available"


class Renderer(Protocol):
    def render(self, channel: Channel, items: Sequence[NewsItem]) -> Union[str, List[str]]:  # pragma: no cover - interface
        ...

    def write(self, channel: Channel, items: Sequence[NewsItem], out: TextIO) -> None:  # pragma: no cover - interface
        ...


class ConsoleRenderer:
    """Plain-text summary, one labeled value per line."""

    def render(self, channel: Channel, items: Sequence[NewsItem]) -> List[str]:
        lines = [f"Title: {channel.title or ''}"]
        if channel.description is not None:
            lines.append(f"Description: {channel.description}")
        if channel.link is not None:
            lines.append(f"Link: {channel.link}")
        for item in items:
            if item.title is not None:
                lines.append(f"Title: {item.title}")
            if item.link is not None:
                lines.append(f"Link: {item.link}")
        return lines

    def write(self, channel: Channel, items: Sequence[NewsItem], out: TextIO) -> None:
        lines = self.render(channel, items)
        for line in lines:
            out.write(line + "\n")


class HtmlRenderer:
    """
    HTML page with a channel header and one table row per item.

    Feed text is escaped unless `escape` is False, in which case it is
    emitted verbatim (useful when feeds carry intentional markup).
    """

    def __init__(self, *, escape: bool = True) -> None:
        self._escape = escape

    def _text(self, s: str) -> str:
        return html.escape(s, quote=True) if self._escape else s

    def _anchor(self, href: Optional[str], text: str) -> str:
        if href is None:
            return text
        return f'<a href="{self._text(href)}">{text}</a>'

    def _header(self, channel: Channel) -> List[str]:
        if channel.title is None:
            raise MalformedFeed("Channel has no <title> element")
        title = self._text(channel.title) if channel.title else NO_TITLE_PAGE
        description = self._text(channel.description) if channel.description else NO_DESCRIPTION
        return [
            f"<html><head><title>{title}</title></head><body>",
            f"<h1>{self._anchor(channel.link, title)}</h1>",
            f"<p>{description}</p>",
            '<table border="1">',
            "<tr><th>Date</th><th>Source</th><th>News</th></tr>",
        ]

    def _row(self, item: NewsItem) -> List[str]:
        date = self._text(item.pub_date) if item.pub_date is not None else NO_DATE
        if item.source_name is None:
            source = NO_SOURCE
        else:
            source = self._anchor(item.source_url, self._text(item.source_name))
        if item.title is None:
            news = NO_TITLE
        else:
            news = self._anchor(item.link, self._text(item.title))
        return [
            "<tr>",
            f"<td>{date}</td>",
            f"<td>{source}</td>",
            f"<td>{news}</td>",
            "</tr>",
        ]

    def render_lines(self, channel: Channel, items: Iterable[NewsItem]) -> List[str]:
        lines = self._header(channel)
        for item in items:
            lines.extend(self._row(item))
        lines.append("</table></body></html>")
        return lines

    def render(self, channel: Channel, items: Sequence[NewsItem]) -> str:
        return "\n".join(self.render_lines(channel, items)) + "\n"

    def write(self, channel: Channel, items: Sequence[NewsItem], out: TextIO) -> None:
        out.write(self.render(channel, items))


def render_console(channel: Channel, items: Sequence[NewsItem]) -> List[str]:
    return ConsoleRenderer().render(channel, items)


def render_html(channel: Channel, items: Sequence[NewsItem], *, escape: bool = True) -> str:
    return HtmlRenderer(escape=escape).render(channel, items)


def build_renderer(mode: str, *, escape: bool = True) -> Renderer:
    m = (mode or "").lower()
    if m == "console":
        return ConsoleRenderer()
    if m == "html":
        return HtmlRenderer(escape=escape)
    raise ValueError(f"Unknown output mode: {mode!r}")
