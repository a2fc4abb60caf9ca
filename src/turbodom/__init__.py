from .node import (
    CDATA,
    Comment,
    DataNode,
    Document,
    Element,
    Node,
    NodeType,
    NodeWithChildren,
    ProcessingInstruction,
    Text,
    has_children,
    is_cdata,
    is_comment,
    is_directive,
    is_document,
    is_tag,
    is_text,
)
from .parser import TurboDOM, parse_document, parse_fragment
from .serialize import to_test_format
from .traversal import (
    get_attribute_value,
    get_children,
    get_name,
    get_parent,
    get_siblings,
    has_attrib,
    next_element_sibling,
    prev_element_sibling,
)
from .treebuilder import BuilderOpts, TreeBuilder

__all__ = [
    "CDATA",
    "BuilderOpts",
    "Comment",
    "DataNode",
    "Document",
    "Element",
    "Node",
    "NodeType",
    "NodeWithChildren",
    "ProcessingInstruction",
    "Text",
    "TreeBuilder",
    "TurboDOM",
    "get_attribute_value",
    "get_children",
    "get_name",
    "get_parent",
    "get_siblings",
    "has_attrib",
    "has_children",
    "is_cdata",
    "is_comment",
    "is_directive",
    "is_document",
    "is_tag",
    "is_text",
    "next_element_sibling",
    "parse_document",
    "parse_fragment",
    "prev_element_sibling",
    "to_test_format",
]
