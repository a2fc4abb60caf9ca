import enum


class NodeType(enum.IntEnum):
    ROOT = 0
    TEXT = 1
    DIRECTIVE = 2
    COMMENT = 3
    SCRIPT = 4
    STYLE = 5
    TAG = 6
    CDATA = 7


ELEMENT_TYPES = frozenset({NodeType.TAG, NodeType.SCRIPT, NodeType.STYLE})


class Node:
    """Base of every tree node.

    - type: NodeType discriminating the variant
    - parent: owning container (None for the root or detached nodes)
    - prev/next: adjacent siblings in document order
    """

    __slots__ = ("next", "parent", "prev", "type")

    def __init__(self, node_type):
        self.type = node_type
        self.parent = None
        self.prev = None
        self.next = None


class DataNode(Node):
    __slots__ = ("data",)

    def __init__(self, node_type, data=""):
        super().__init__(node_type)
        self.data = data if data is not None else ""

    def __repr__(self):
        return f"{type(self).__name__}({self.data[:30]!r})"


class Text(DataNode):
    __slots__ = ()

    def __init__(self, data=""):
        super().__init__(NodeType.TEXT, data)


class Comment(DataNode):
    __slots__ = ()

    def __init__(self, data=""):
        super().__init__(NodeType.COMMENT, data)


class ProcessingInstruction(DataNode):
    """Doctype or <?...?> instruction. `name` is '!doctype' or '?target'."""

    __slots__ = ("name",)

    def __init__(self, name, data=""):
        super().__init__(NodeType.DIRECTIVE, data)
        self.name = name

    def __repr__(self):
        return f"ProcessingInstruction({self.name}, {self.data[:30]!r})"


class NodeWithChildren(Node):
    __slots__ = ("children",)

    def __init__(self, node_type, children=None):
        super().__init__(node_type)
        self.children = []
        for child in list(children or ()):
            self.append_child(child)

    @property
    def first_child(self):
        return self.children[0] if self.children else None

    @property
    def last_child(self):
        return self.children[-1] if self.children else None

    def append_child(self, child):
        if self._would_create_circular_reference(child):
            msg = f"Adding {child!r} as child of {self!r} would create circular reference"
            raise ValueError(msg)

        # Unlink from old location; detached chains have neighbours but no parent
        if child.prev is not None:
            child.prev.next = child.next
        if child.next is not None:
            child.next.prev = child.prev
        if child.parent is not None:
            child.parent.children.remove(child)

        if self.children:
            self.children[-1].next = child
            child.prev = self.children[-1]
        else:
            child.prev = None

        child.parent = self
        child.next = None
        self.children.append(child)

    def _would_create_circular_reference(self, child):
        """Check if self is child or one of child's descendants."""
        current = self
        while current is not None:
            if current is child:
                return True
            current = current.parent
        return False


class Document(NodeWithChildren):
    __slots__ = ()

    def __init__(self, children=None):
        super().__init__(NodeType.ROOT, children)

    def __repr__(self):
        return f"Document(children={len(self.children)})"


class CDATA(NodeWithChildren):
    __slots__ = ()

    def __init__(self, children=None):
        super().__init__(NodeType.CDATA, children)

    def __repr__(self):
        return f"CDATA(children={len(self.children)})"


class Element(NodeWithChildren):
    """Element with a tag name and an attribute mapping.

    `attribs` maps names to values; a value of None means the attribute is
    not set even though the key exists. `attribs` itself may be None.
    """

    __slots__ = ("attribs", "name")

    def __init__(self, name, attribs=None, children=None):
        if name is None or name == "":
            msg = "Empty tag name passed to Element constructor"
            raise ValueError(msg)
        if name == "script":
            node_type = NodeType.SCRIPT
        elif name == "style":
            node_type = NodeType.STYLE
        else:
            node_type = NodeType.TAG
        super().__init__(node_type, children)
        self.name = name
        self.attribs = {} if attribs is None else attribs

    def __repr__(self):
        return f"Element(<{self.name}>, children={len(self.children)})"


def is_tag(node):
    return node.type in ELEMENT_TYPES


def is_text(node):
    return node.type == NodeType.TEXT


def is_comment(node):
    return node.type == NodeType.COMMENT


def is_directive(node):
    return node.type == NodeType.DIRECTIVE


def is_cdata(node):
    return node.type == NodeType.CDATA


def is_document(node):
    return node.type == NodeType.ROOT


def has_children(node):
    """True for container variants (document, element, CDATA)."""
    return isinstance(node, NodeWithChildren)
