"""Tests for the node model and its type predicates."""

import unittest

from turbodom import parse_fragment
from turbodom.node import (
    CDATA,
    Comment,
    Document,
    Element,
    NodeType,
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
from turbodom.traversal import get_siblings


class TestNodeTypes(unittest.TestCase):
    def test_element_type_follows_tag_name(self):
        assert Element("div").type == NodeType.TAG
        assert Element("script").type == NodeType.SCRIPT
        assert Element("style").type == NodeType.STYLE

    def test_is_tag_covers_all_element_variants(self):
        for name in ("div", "script", "style"):
            assert is_tag(Element(name))
        for node in (Text("x"), Comment("x"), Document(), CDATA(), ProcessingInstruction("!doctype", "html")):
            assert not is_tag(node)

    def test_predicates(self):
        assert is_text(Text("x"))
        assert is_comment(Comment("x"))
        assert is_directive(ProcessingInstruction("?xml", 'version="1.0"'))
        assert is_cdata(CDATA())
        assert is_document(Document())
        assert not is_document(Element("html"))

    def test_has_children(self):
        assert has_children(Document())
        assert has_children(Element("div"))
        assert has_children(CDATA())
        assert not has_children(Text("x"))
        assert not has_children(Comment("x"))

    def test_empty_tag_name_rejected(self):
        with self.assertRaises(ValueError):
            Element("")
        with self.assertRaises(ValueError):
            Element(None)

    def test_default_attribs_is_empty_mapping(self):
        assert Element("div").attribs == {}
        assert Element("a", {"href": "/"}).attribs == {"href": "/"}

    def test_data_defaults_to_empty_string(self):
        assert Text().data == ""
        assert Comment(None).data == ""


class TestAppendChild(unittest.TestCase):
    def test_links_siblings_in_order(self):
        parent = Element("ul")
        first, second, third = Element("li"), Text("x"), Element("li")
        for child in (first, second, third):
            parent.append_child(child)

        assert parent.children == [first, second, third]
        assert first.prev is None
        assert first.next is second
        assert second.prev is first
        assert second.next is third
        assert third.prev is second
        assert third.next is None
        assert all(child.parent is parent for child in parent.children)

    def test_moving_a_child_relinks_old_siblings(self):
        old = Element("div")
        a, b, c = Text("a"), Element("b"), Text("c")
        for child in (a, b, c):
            old.append_child(child)

        new = Element("section")
        new.append_child(b)

        assert old.children == [a, c]
        assert a.next is c
        assert c.prev is a
        assert b.parent is new
        assert b.prev is None
        assert b.next is None

    def test_moving_a_detached_chain_node_relinks_its_neighbours(self):
        a, b, c = parse_fragment("<a></a><b></b><c></c>")
        doc = Document()
        doc.append_child(b)

        assert a.next is c
        assert c.prev is a
        assert get_siblings(a) == [a, c]
        assert get_siblings(b) == [b]
        assert b.parent is doc

    def test_constructor_takes_children_from_another_container(self):
        texts = [Text(str(n)) for n in range(1, 5)]
        old = Element("div", children=texts)
        new = Element("p", children=old.children)

        assert new.children == texts
        assert old.children == []
        assert all(text.parent is new for text in texts)

    def test_constructor_children_are_linked(self):
        a, b = Element("a"), Element("b")
        div = Element("div", children=[a, b])
        assert div.first_child is a
        assert div.last_child is b
        assert a.next is b

    def test_circular_reference_rejected(self):
        outer = Element("div")
        inner = Element("span")
        outer.append_child(inner)
        with self.assertRaises(ValueError):
            inner.append_child(outer)
        with self.assertRaises(ValueError):
            outer.append_child(outer)

    def test_empty_container_has_no_first_or_last_child(self):
        doc = Document()
        assert doc.first_child is None
        assert doc.last_child is None


class TestRepr(unittest.TestCase):
    def test_reprs(self):
        assert repr(Element("div", children=[Text("x")])) == "Element(<div>, children=1)"
        assert repr(Text("hello")) == "Text('hello')"
        assert repr(Comment("c")) == "Comment('c')"
        assert repr(Document()) == "Document(children=0)"
        assert repr(ProcessingInstruction("!doctype", "html")) == "ProcessingInstruction(!doctype, 'html')"


if __name__ == "__main__":
    unittest.main()
