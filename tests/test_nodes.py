"""Tests for the lxml-backed node accessor."""

from lxml import etree

from xml_struct.nodes import LxmlNode, local_name


def _node(xml: bytes, **parser_kwargs) -> LxmlNode:
    parser = etree.XMLParser(remove_blank_text=True, **parser_kwargs)
    return LxmlNode(etree.fromstring(xml, parser))


# ---------------------------------------------------------------------------
# local_name
# ---------------------------------------------------------------------------

def test_local_name_plain():
    assert local_name("node") == "node"


def test_local_name_strips_namespace():
    assert local_name("{http://www.w3.org/2005/Atom}entry") == "entry"


def test_local_name_non_string():
    assert local_name(etree.Comment) is None


# ---------------------------------------------------------------------------
# LxmlNode
# ---------------------------------------------------------------------------

class TestName:
    def test_element(self):
        assert _node(b"<osmChange/>").name() == "osmChange"

    def test_namespaced_element(self):
        node = _node(b'<a:feed xmlns:a="http://example.com/a"/>')
        assert node.name() == "feed"

    def test_comment_has_no_name(self):
        root = _node(b"<r><!-- note --></r>")
        comment = next(root.children())
        assert comment.is_element() is False
        assert comment.name() is None


class TestChildren:
    def test_document_order(self):
        root = _node(b"<r><a/><b/><a/></r>")
        assert [c.name() for c in root.children()] == ["a", "b", "a"]

    def test_comments_and_pis_are_children_but_not_elements(self):
        root = _node(b"<r><!-- c --><?pi data?><a/></r>")
        kinds = [c.is_element() for c in root.children()]
        assert kinds == [False, False, True]


class TestAttributes:
    def test_document_order(self):
        node = _node(b'<node id="1" uid="161619" lat="52.1"/>')
        assert node.attributes() == [("id", "1"), ("uid", "161619"), ("lat", "52.1")]

    def test_namespaced_attribute_uses_local_name(self):
        node = _node(b'<r xmlns:x="http://example.com/x" x:ref="7"/>')
        assert node.attributes() == [("ref", "7")]

    def test_none(self):
        assert _node(b"<r/>").attributes() == []


class TestText:
    def test_absent(self):
        assert _node(b"<r/>").text() is None
        assert _node(b"<r></r>").text() is None

    def test_leaf(self):
        assert _node(b"<r>hello</r>").text() == "hello"

    def test_untrimmed(self):
        assert _node(b"<r>  padded \n</r>").text() == "  padded \n"

    def test_mixed_content_includes_descendants(self):
        root = _node(b"<r>head<b>inner</b>tail</r>")
        assert root.text() == "headinnertail"

    def test_formatting_whitespace_dropped(self):
        root = _node(b"<r>\n  <a>1</a>\n  <b>2</b>\n</r>")
        assert root.text() == "12"

    def test_no_text_anywhere_in_subtree(self):
        root = _node(b'<r><a k="v"/><b><c/></b></r>')
        assert root.text() is None

    def test_comments_and_pis_excluded(self):
        root = _node(b"<r><!-- note --><?pi data?><a>x</a></r>")
        assert root.text() == "x"

    def test_comment_tail_counts(self):
        root = _node(b"<r><!-- c -->after</r>")
        assert root.text() == "after"
