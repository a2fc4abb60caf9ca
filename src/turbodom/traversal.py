"""Read-only navigation helpers over a built node tree.

Every function is a pure read of the links the tree builder set up
(`parent`, `prev`, `next`, `children`, `attribs`). Missing answers come back
as None (or an empty list for children); nothing here raises.
"""

from __future__ import annotations

from .node import Element, Node, NodeWithChildren, has_children, is_tag


def get_children(elem: Node) -> list[Node]:
    """Return `elem`'s children, or an empty list for leaf nodes."""
    if has_children(elem):
        return elem.children  # type: ignore[attr-defined, no-any-return]
    return []


def get_parent(elem: Node) -> NodeWithChildren | None:
    """Return `elem`'s parent, or None for a root or detached node."""
    return elem.parent  # type: ignore[no-any-return]


def get_siblings(elem: Node) -> list[Node]:
    """Return `elem`'s siblings, including `elem` itself, in document order.

    With a parent this is the parent's child list. Without one (a detached
    fragment chain), the list is rebuilt by walking `prev` and `next`.
    """
    parent = get_parent(elem)
    if parent is not None:
        return get_children(parent)

    siblings = [elem]
    prev = elem.prev
    while prev is not None:
        siblings.insert(0, prev)
        prev = prev.prev
    nxt = elem.next
    while nxt is not None:
        siblings.append(nxt)
        nxt = nxt.next
    return siblings


def get_attribute_value(elem: Element, name: str) -> str | None:
    attribs = elem.attribs
    if attribs is None:
        return None
    return attribs.get(name)


def has_attrib(elem: Element, name: str) -> bool:
    """Whether `name` is set on `elem`. A key stored with a None value does not count."""
    attribs = elem.attribs
    return attribs is not None and name in attribs and attribs[name] is not None


def get_name(elem: Element) -> str:
    return elem.name


def next_element_sibling(elem: Node) -> Element | None:
    """Return the next sibling that is an element, skipping text, comments etc."""
    nxt = elem.next
    while nxt is not None and not is_tag(nxt):
        nxt = nxt.next
    return nxt  # type: ignore[return-value]


def prev_element_sibling(elem: Node) -> Element | None:
    """Return the previous sibling that is an element, skipping text, comments etc."""
    prev = elem.prev
    while prev is not None and not is_tag(prev):
        prev = prev.prev
    return prev  # type: ignore[return-value]
