from __future__ import annotations

from .tree import Element

NOT_FOUND = -1


def find_first_child_tag(element: Element, tag_name: str) -> int:
    """
    Return the index of the first direct child of `element` that is a tag
    labeled exactly `tag_name`, or NOT_FOUND.

    Only direct children are scanned; text children and tags with other
    labels are skipped. Matching is case-sensitive.
    """
    if not element.is_tag:
        raise ValueError("find_first_child_tag requires a tag element")
    if not tag_name:
        raise ValueError("tag_name must be non-empty")
    for i, child in enumerate(element.children):
        if child.is_tag and child.label == tag_name:
            return i
    return NOT_FOUND
