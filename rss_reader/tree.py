from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Protocol, Sequence, Tuple, Union
import xml.etree.ElementTree as ET


class Element(Protocol):
    """
    Read-only view of a parsed XML node.

    A tag node has a tag name as label, ordered children and attributes.
    A text node has its literal text as label and no children.
    """

    @property
    def label(self) -> str:  # pragma: no cover - interface
        ...

    @property
    def is_tag(self) -> bool:  # pragma: no cover - interface
        ...

    @property
    def children(self) -> Sequence["Element"]:  # pragma: no cover - interface
        ...

    def attribute_value(self, name: str) -> Optional[str]:  # pragma: no cover - interface
        ...


@dataclass(frozen=True)
class TextNode:
    label: str
    children: Tuple["Node", ...] = ()

    @property
    def is_tag(self) -> bool:
        return False

    def attribute_value(self, name: str) -> Optional[str]:
        return None


@dataclass(frozen=True)
class TagNode:
    label: str
    children: Tuple["Node", ...] = ()
    attributes: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_tag(self) -> bool:
        return True

    def attribute_value(self, name: str) -> Optional[str]:
        return self.attributes.get(name)


Node = Union[TagNode, TextNode]


def from_etree(elem: ET.Element) -> TagNode:
    """
    Convert an ElementTree element into TagNode/TextNode values.

    Leading text and the tail text of each sub-element become text nodes in
    document order. Whitespace-only text (indentation) is dropped, and
    surrounding whitespace is stripped. Uses an explicit stack, so nesting
    depth is not bounded by the recursion limit.
    """

    def _open(e: ET.Element) -> Tuple[ET.Element, Iterator[ET.Element], List[Node]]:
        kids: List[Node] = []
        text = (e.text or "").strip()
        if text:
            kids.append(TextNode(text))
        return e, iter(e), kids

    stack = [_open(elem)]
    while True:
        current, pending, kids = stack[-1]
        sub = next(pending, None)
        if sub is not None:
            # Comments and processing instructions have a callable tag
            if isinstance(sub.tag, str):
                stack.append(_open(sub))
                continue
            tail = (sub.tail or "").strip()
            if tail:
                kids.append(TextNode(tail))
            continue

        stack.pop()
        node = TagNode(label=current.tag, children=tuple(kids), attributes=dict(current.attrib))
        if not stack:
            return node
        parent_kids = stack[-1][2]
        parent_kids.append(node)
        tail = (current.tail or "").strip()
        if tail:
            parent_kids.append(TextNode(tail))


def parse_xml(data: Union[str, bytes]) -> TagNode:
    """Parse an XML document and return its root as a TagNode. Raises ET.ParseError on bad markup."""
    return from_etree(ET.fromstring(data))
