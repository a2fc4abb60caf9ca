"""Minimal TurboDOM parser entry point."""

from .treebuilder import TreeBuilder


class TurboDOM:
    __slots__ = ("debug", "fragment", "nodes", "root", "tree_builder")

    def __init__(self, html, *, fragment=False, opts=None, debug=False, tree_builder=None):
        if html is not None and not isinstance(html, str):
            msg = f"TurboDOM expects str input, got {type(html).__name__}"
            raise TypeError(msg)
        if opts is not None and tree_builder is not None:
            msg = "Pass either opts or tree_builder, not both (tree_builder carries its own opts)"
            raise ValueError(msg)
        self.debug = bool(debug)
        self.fragment = bool(fragment)
        self.tree_builder = tree_builder or TreeBuilder(opts, debug=debug)
        self.tree_builder.feed(html or "")
        self.root = self.tree_builder.finish()
        self.nodes = _detach_children(self.root) if self.fragment else None


def _detach_children(root):
    """Turn the root's children into a parent-less chain, keeping prev/next links."""
    nodes = root.children
    root.children = []
    for node in nodes:
        node.parent = None
    return nodes


def parse_document(html, opts=None):
    """Parse `html` and return its Document node."""
    return TurboDOM(html, opts=opts).root


def parse_fragment(html, opts=None):
    """Parse `html` and return its top-level nodes as a detached sibling chain."""
    return TurboDOM(html, fragment=True, opts=opts).nodes
