"""
Tests for the Document builder.
"""

import io
import unittest

from svg_builder.core import configure, reset_config
from svg_builder.models.attributes import AttributeParseError
from svg_builder.models.document import (
    Document, DocumentState, DocumentStateError, DOC_TYPE, STANDALONE_NO, STANDALONE_YES
)
from svg_builder.models.group import GroupError, GroupScope
from svg_builder.models.shape import Circle, Rect
from svg_builder.models.transform import Transform
from svg_builder.utils.logger import LogCapture


class FailingSink:
    """Sink whose writes always fail."""

    def write(self, text):
        raise OSError("disk full")


class CountingSink:
    """Sink that records writes and returns a marker."""

    def __init__(self):
        self.writes = []

    def write(self, text):
        self.writes.append(text)
        return len(text)


class Badge:
    """Shape-like object that is not a Shape subclass."""

    def to_svg_string(self):
        return '<use href="#badge" />\n'


def finalize_to_text(document):
    out = io.StringIO()
    document.finalize(out)
    return out.getvalue()


class TestDocumentOutput(unittest.TestCase):
    """Tests for the finalized document text."""

    def test_minimal_document(self):
        """A document with no content still has a complete header and footer."""
        text = finalize_to_text(Document(10, 20))
        expected = (
            STANDALONE_NO
            + DOC_TYPE
            + '<svg width="10cm" height="20cm" '
            + 'version="1.1" xmlns="http://www.w3.org/2000/svg" '
            + 'xmlns:xlink="http://www.w3.org/1999/xlink">\n'
            + '</svg>\n'
        )
        self.assertEqual(text, expected)

    def test_view_box_and_circle(self):
        """Root element carries size and view box, followed by the circle."""
        doc = Document(12, 12)
        doc.view_box(0, 0, 1200, 400)
        doc.circle(600, 200, 100, "fill=red")
        text = finalize_to_text(doc)

        root = 'width="12cm" height="12cm" viewBox="0 0 1200 400 "'
        circle = '<circle cx="600" cy="200" r="100" fill="red" />'
        self.assertIn(root, text)
        self.assertIn(circle, text)
        self.assertLess(text.index(root), text.index(circle))

    def test_title_then_desc_before_content(self):
        doc = Document(1, 1)
        doc.rect(0, 0, 1, 1)
        doc.title("T")
        doc.desc("D")
        text = finalize_to_text(doc)

        self.assertIn("<title>T</title>\n<desc>D</desc>\n", text)
        self.assertLess(text.index("<desc>D</desc>"), text.index("<rect"))

    def test_standalone_flag(self):
        doc = Document(1, 1)
        doc.standalone(True)
        self.assertTrue(finalize_to_text(doc).startswith(STANDALONE_YES))

        doc = Document(1, 1)
        self.assertTrue(finalize_to_text(doc).startswith(STANDALONE_NO))

    def test_header_last_write_wins(self):
        doc = Document(1, 1)
        doc.set_width(5)
        doc.set_height(6)
        doc.title("first")
        doc.title("second")
        doc.view_box(1, 1, 1, 1)
        doc.view_box(0, 0, 50, 60)
        text = finalize_to_text(doc)

        self.assertIn('width="5cm" height="6cm" viewBox="0 0 50 60 "', text)
        self.assertIn("<title>second</title>", text)
        self.assertNotIn("first", text)

    def test_length_unit_from_config(self):
        configure({"length_unit": "px"})
        try:
            text = Document(3, 4).to_svg_string()
        finally:
            reset_config()
        self.assertIn('width="3px" height="4px"', text)

    def test_polygon(self):
        doc = Document(1, 1)
        doc.polygon([(0, 0), (1, 0), (1, 1)], "fill=blue")
        self.assertEqual(doc.content, ('<polygon points="0,0 1,0 1,1 " fill="blue" />\n',))

    def test_all_conveniences_in_order(self):
        doc = Document(1, 1)
        doc.circle(1, 2, 3)
        doc.rect(1, 2, 3, 4)
        doc.rounded_rect(1, 2, 3, 4, 5, 6)
        doc.ellipse(1, 2, 3, 4)
        doc.line(1, 2, 3, 4)
        doc.polyline([(1, 2)])
        doc.polygon([(3, 4)])
        doc.text(1, 2, "hello", "font-size=9")

        self.assertEqual(doc.content, (
            '<circle cx="1" cy="2" r="3" />\n',
            '<rect x="1" y="2" width="3" height="4" />\n',
            '<rect x="1" y="2" width="3" height="4" rx="5" ry="6" />\n',
            '<ellipse cx="1" cy="2" rx="3" ry="4" />\n',
            '<line x1="1" y1="2" x2="3" y2="4" />\n',
            '<polyline points="1,2 " />\n',
            '<polygon points="3,4 " />\n',
            '<text x="1" y="2" font-size="9" >hello</text>\n',
        ))

    def test_add_shape_objects(self):
        doc = Document(1, 1)
        doc.add(Circle(100, 100, 50, {"fill": "green", "stroke": "orange"}))
        doc.add(Badge())
        self.assertEqual(doc.content, (
            '<circle cx="100" cy="100" r="50" fill="green" stroke="orange" />\n',
            '<use href="#badge" />\n',
        ))

    def test_add_rejects_non_shapes(self):
        with self.assertRaises(TypeError):
            Document(1, 1).add("<circle />")

    def test_malformed_attributes(self):
        doc = Document(1, 1)
        with self.assertRaises(AttributeParseError):
            doc.circle(0, 0, 1, "fill")
        self.assertEqual(doc.content, ())

    def test_identical_builds_identical_output(self):
        """Equivalent builder calls on two documents give identical text."""
        def build():
            doc = Document(12, 12)
            doc.view_box(0, 0, 100, 100)
            doc.title("x")
            doc.g_begin("g1", Transform().rotate(5), {"fill": "red"})
            doc.circle(1, 2, 3, "stroke=blue")
            doc.g_end()
            return finalize_to_text(doc)

        self.assertEqual(build(), build())


class TestDocumentGroups(unittest.TestCase):
    """Tests for group handling."""

    def test_group_wraps_content(self):
        doc = Document(1, 1)
        doc.g_begin("grp", None, None)
        doc.circle(1, 2, 3)
        doc.g_end()
        text = finalize_to_text(doc)

        opening = text.index('<g id="grp" >\n')
        circle = text.index("<circle")
        closing = text.index("</g>\n")
        self.assertLess(opening, circle)
        self.assertLess(circle, closing)

    def test_group_open_tag_order(self):
        scope = GroupScope("grp", Transform().translate(1, 2), {"fill": "red", "stroke": "blue"})
        self.assertEqual(
            scope.open_tag(),
            '<g id="grp" transform="translate(1, 2)" fill="red" stroke="blue" >\n'
        )

    def test_anonymous_group(self):
        self.assertEqual(GroupScope().open_tag(), "<g >\n")
        self.assertEqual(GroupScope.close_tag(), "</g>\n")

    def test_convenience_openers(self):
        doc = Document(1, 1)
        doc.g_id("a")
        doc.g_transform(Transform().rotate(1))
        doc.g_attribs({"opacity": "0.5"})
        doc.g_translate(1, 2)
        doc.g_rotate(3)
        doc.g_scale(4, 5)
        doc.g_skew(6, 7)
        self.assertEqual(doc.depth, 7)
        for _ in range(7):
            doc.g_end()

        self.assertEqual(doc.content[:7], (
            '<g id="a" >\n',
            '<g transform="rotate(1)" >\n',
            '<g opacity="0.5" >\n',
            '<g transform="translate(1, 2)" >\n',
            '<g transform="rotate(3)" >\n',
            '<g transform="scale(4, 5)" >\n',
            '<g transform="skewX(6) skewY(7)" >\n',
        ))
        self.assertEqual(doc.content[7:], ("</g>\n",) * 7)
        self.assertEqual(doc.depth, 0)

    def test_nested_groups(self):
        doc = Document(1, 1)
        doc.g_id("outer")
        doc.g_id("inner")
        doc.rect(0, 0, 1, 1)
        doc.g_end()
        doc.g_end()
        self.assertEqual(doc.content, (
            '<g id="outer" >\n',
            '<g id="inner" >\n',
            '<rect x="0" y="0" width="1" height="1" />\n',
            '</g>\n',
            '</g>\n',
        ))

    def test_close_without_open(self):
        doc = Document(1, 1)
        with self.assertRaises(GroupError):
            doc.g_end()
        self.assertEqual(doc.content, ())

    def test_finalize_with_open_group(self):
        doc = Document(1, 1)
        doc.g_id("left-open")
        sink = CountingSink()
        with self.assertRaises(GroupError) as ctx:
            doc.finalize(sink)
        self.assertIn("left-open", str(ctx.exception))
        self.assertEqual(sink.writes, [])
        self.assertEqual(doc.state, DocumentState.BUILDING)

    def test_scoped_group(self):
        doc = Document(1, 1)
        with doc.group("outer", Transform().scale(2, 2)):
            with doc.group(attributes={"fill": "red"}):
                doc.circle(0, 0, 1)
            self.assertEqual(doc.depth, 1)
        self.assertEqual(doc.depth, 0)
        self.assertEqual(doc.content, (
            '<g id="outer" transform="scale(2, 2)" >\n',
            '<g fill="red" >\n',
            '<circle cx="0" cy="0" r="1" />\n',
            '</g>\n',
            '</g>\n',
        ))

    def test_scoped_group_closes_on_error(self):
        doc = Document(1, 1)
        with self.assertRaises(RuntimeError):
            with doc.group("g"):
                doc.circle(0, 0, 1)
                raise RuntimeError("boom")
        self.assertEqual(doc.depth, 0)
        self.assertEqual(doc.content[-1], "</g>\n")

    def test_scoped_group_closes_inner_groups_on_error(self):
        doc = Document(1, 1)
        with self.assertRaises(RuntimeError):
            with doc.group("outer"):
                doc.g_begin("inner")
                doc.circle(0, 0, 1)
                raise RuntimeError("boom")
        self.assertEqual(doc.depth, 0)
        self.assertEqual(doc.content[-2:], ("</g>\n", "</g>\n"))
        doc.finalize(io.StringIO())

    def test_scoped_group_with_unclosed_inner_group(self):
        doc = Document(1, 1)
        with self.assertRaises(GroupError):
            with doc.group("outer"):
                doc.g_id("inner")
        self.assertEqual(doc.depth, 0)

    def test_scoped_group_closed_inside_block(self):
        doc = Document(1, 1)
        with self.assertRaises(GroupError):
            with doc.group("outer"):
                doc.g_end()
        self.assertEqual(doc.depth, 0)
        self.assertEqual(doc.content.count("</g>\n"), 1)

    def test_group_logging(self):
        with LogCapture("svg_builder.models.document") as capture:
            doc = Document(1, 1)
            doc.g_id("logged")
            doc.g_end()
        self.assertTrue(any("'logged'" in line for line in capture.logs))


class TestDocumentState(unittest.TestCase):
    """Tests for the building and finalized phases."""

    def test_finalize_returns_sink_result(self):
        doc = Document(1, 1)
        sink = CountingSink()
        result = doc.finalize(sink)
        self.assertEqual(len(sink.writes), 1)
        self.assertEqual(result, len(sink.writes[0]))
        self.assertEqual(doc.state, DocumentState.FINALIZED)
        self.assertTrue(doc.is_finalized)

    def test_single_write(self):
        doc = Document(1, 1)
        for i in range(5):
            doc.circle(i, i, 1)
        sink = CountingSink()
        doc.finalize(sink)
        self.assertEqual(len(sink.writes), 1)
        self.assertTrue(sink.writes[0].endswith("</svg>\n"))

    def test_second_finalize_rejected(self):
        doc = Document(1, 1)
        doc.finalize(io.StringIO())
        with self.assertRaises(DocumentStateError):
            doc.finalize(io.StringIO())

    def test_mutation_after_finalize_rejected(self):
        doc = Document(1, 1)
        doc.finalize(io.StringIO())
        calls = [
            lambda: doc.circle(0, 0, 1),
            lambda: doc.add(Rect(0, 0, 1, 1)),
            lambda: doc.title("late"),
            lambda: doc.desc("late"),
            lambda: doc.view_box(0, 0, 1, 1),
            lambda: doc.standalone(True),
            lambda: doc.set_width(2),
            lambda: doc.g_id("late"),
        ]
        for call in calls:
            with self.assertRaises(DocumentStateError):
                call()

    def test_add_after_finalize_checks_phase_first(self):
        doc = Document(1, 1)
        doc.finalize(io.StringIO())
        with self.assertRaises(DocumentStateError):
            doc.add("<circle />")

    def test_check_ready(self):
        doc = Document(1, 1)
        doc.check_ready()
        doc.g_id("open")
        with self.assertRaises(GroupError):
            doc.check_ready()
        doc.g_end()
        doc.finalize(io.StringIO())
        with self.assertRaises(DocumentStateError):
            doc.check_ready()

    def test_rendering_allowed_after_finalize(self):
        doc = Document(1, 1)
        doc.circle(0, 0, 1)
        out = io.StringIO()
        doc.finalize(out)
        self.assertEqual(doc.to_svg_string(), out.getvalue())

    def test_sink_error_propagates(self):
        """Sink errors reach the caller unchanged and the document stays buildable."""
        doc = Document(1, 1)
        doc.circle(0, 0, 1)
        with self.assertRaises(OSError) as ctx:
            doc.finalize(FailingSink())
        self.assertEqual(str(ctx.exception), "disk full")
        self.assertEqual(doc.state, DocumentState.BUILDING)
        self.assertEqual(len(doc.content), 1)

        out = io.StringIO()
        doc.finalize(out)
        self.assertIn("<circle", out.getvalue())


if __name__ == "__main__":
    unittest.main()
