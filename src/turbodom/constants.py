# HTML5 void elements (no closing tag, never hold children)
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

DOCTYPE_NAME = "!doctype"
