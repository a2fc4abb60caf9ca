"""html5lib-style tree dumps for TurboDOM nodes."""

from .constants import DOCTYPE_NAME
from .node import NodeType


def to_test_format(node, indent=0):
    """Render `node` (or a list of fragment nodes) in the html5lib test format."""
    if isinstance(node, (list, tuple)):
        return "\n".join(to_test_format(child, indent) for child in node)

    node_type = node.type
    if node_type == NodeType.ROOT:
        return "\n".join(to_test_format(child, 0) for child in node.children)
    if node_type == NodeType.TEXT:
        return f'| {" " * indent}"{node.data}"'
    if node_type == NodeType.COMMENT:
        return f"| {' ' * indent}<!-- {node.data} -->"
    if node_type == NodeType.DIRECTIVE:
        if node.name == DOCTYPE_NAME:
            # Keep a space before '>' when the doctype has no content
            content = node.data.strip()
            if content:
                return f"| {' ' * indent}<!DOCTYPE {content}>"
            return f"| {' ' * indent}<!DOCTYPE >"
        return f"| {' ' * indent}<{node.name} {node.data}>"
    if node_type == NodeType.CDATA:
        parts = [f"| {' ' * indent}<![CDATA[>"]
        parts.extend(to_test_format(child, indent + 2) for child in node.children)
        return "\n".join(parts)

    result = f"| {' ' * indent}<{node.name}>"
    if node.attribs:
        for key, value in sorted(node.attribs.items()):
            if value is None:
                result += f"\n| {' ' * (indent + 2)}{key}"
            else:
                result += f'\n| {" " * (indent + 2)}{key}="{value}"'

    if node.children:
        parts = [result]
        parts.extend(to_test_format(child, indent + 2) for child in node.children)
        return "\n".join(parts)
    return result
