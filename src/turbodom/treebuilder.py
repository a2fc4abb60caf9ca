"""Build TurboDOM trees from HTML source.

Tokenization is delegated to the standard library's `html.parser`; this
module only turns its callbacks into linked nodes. The builder is lenient:
stray end tags are ignored and unclosed elements are closed at the end of
input, so malformed markup never raises.
"""

import logging
from html.parser import HTMLParser

from .constants import DOCTYPE_NAME, VOID_ELEMENTS
from .node import CDATA, Comment, Document, Element, ProcessingInstruction, Text, is_text

logger = logging.getLogger(__name__)


class BuilderOpts:
    __slots__ = ("keep_comments", "keep_whitespace_text", "recognize_self_closing")

    def __init__(self, keep_whitespace_text=True, keep_comments=True, recognize_self_closing=True):
        self.keep_whitespace_text = bool(keep_whitespace_text)
        self.keep_comments = bool(keep_comments)
        # When False only void elements close themselves; <div/> stays open like in HTML
        self.recognize_self_closing = bool(recognize_self_closing)

    def __repr__(self):
        return (
            f"BuilderOpts(keep_whitespace_text={self.keep_whitespace_text}, "
            f"keep_comments={self.keep_comments}, "
            f"recognize_self_closing={self.recognize_self_closing})"
        )


class TreeBuilder(HTMLParser):
    def __init__(self, opts=None, *, debug=False):
        super().__init__(convert_charrefs=True)
        self.opts = opts or BuilderOpts()
        self.env_debug = bool(debug)
        self.root = Document()
        self.open_elements = [self.root]
        self._pending_text = []

    def debug(self, msg):
        if self.env_debug:
            logger.debug(msg)

    @property
    def current_parent(self):
        return self.open_elements[-1]

    # --- tokenizer callbacks -------------------------------------------------

    def handle_starttag(self, tag, attrs):
        element = self._insert_element(tag, attrs)
        if tag in VOID_ELEMENTS:
            return
        self.open_elements.append(element)

    def handle_startendtag(self, tag, attrs):
        if not self.opts.recognize_self_closing:
            self.handle_starttag(tag, attrs)
            # html.parser only enters raw-text mode for plain start tags
            if tag in self.CDATA_CONTENT_ELEMENTS:
                self.set_cdata_mode(tag)
            return
        self._insert_element(tag, attrs)

    def handle_endtag(self, tag):
        self._flush_text()
        for index in range(len(self.open_elements) - 1, 0, -1):
            if self.open_elements[index].name == tag:
                del self.open_elements[index:]
                return
        self.debug(f"Ignoring stray end tag </{tag}> in {self.current_parent!r}")

    def handle_data(self, data):
        self._pending_text.append(data)

    def handle_comment(self, data):
        self._flush_text()
        if not self.opts.keep_comments:
            return
        self.current_parent.append_child(Comment(data))

    def handle_decl(self, decl):
        self._flush_text()
        keyword, _, rest = decl.partition(" ")
        if keyword.lower() == "doctype":
            node = ProcessingInstruction(DOCTYPE_NAME, rest.strip())
        else:
            node = ProcessingInstruction(f"!{keyword.lower()}", rest.strip())
        self.current_parent.append_child(node)

    def handle_pi(self, data):
        self._flush_text()
        # html.parser hands over everything between '<?' and '>'
        if data.endswith("?"):
            data = data[:-1]
        target, _, rest = data.partition(" ")
        self.current_parent.append_child(ProcessingInstruction(f"?{target.lower()}", rest.strip()))

    def unknown_decl(self, data):
        self._flush_text()
        if data.startswith("CDATA["):
            section = CDATA()
            content = data[len("CDATA["):]
            if content:
                section.append_child(Text(content))
            self.current_parent.append_child(section)
            return
        self.debug(f"Ignoring unknown declaration <![{data[:30]}")

    # --- tree construction ---------------------------------------------------

    def _insert_element(self, tag, attrs):
        self._flush_text()
        attribs = {}
        for name, value in attrs:
            # First occurrence wins on duplicates; valueless attributes are ""
            if name not in attribs:
                attribs[name] = value if value is not None else ""
        element = Element(tag, attribs)
        self.current_parent.append_child(element)
        return element

    def _flush_text(self):
        if not self._pending_text:
            return
        data = "".join(self._pending_text)
        self._pending_text = []
        if not data:
            return
        if not self.opts.keep_whitespace_text and not data.strip():
            return
        parent = self.current_parent
        last = parent.last_child
        if last is not None and is_text(last):
            last.data += data
            return
        parent.append_child(Text(data))

    def finish(self):
        """Flush the tokenizer, close any open elements and return the document."""
        self.close()
        self._flush_text()
        if len(self.open_elements) > 1:
            self.debug(f"Closing {len(self.open_elements) - 1} unclosed element(s) at end of input")
        del self.open_elements[1:]
        return self.root
