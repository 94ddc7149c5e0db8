"""
SVG document model.
Holds the header metadata and the append-only content stream, and
serializes both into a complete SVG document.

Shapes are rendered as soon as they are appended; the document keeps only
their text. Text content and attribute values are written as given, with no
escaping.
"""

from enum import Enum, auto
from typing import Any, Iterable, List, Optional, Tuple

from svg_builder.core import CONFIG
from svg_builder.models.attributes import AttributesLike, parse_attributes
from svg_builder.models.group import GroupHandle, GroupScope, GroupStack
from svg_builder.models.shape import (
    Circle, Ellipse, Line, Point, PolyLine, Polygon, Rect, RoundedRect, Text
)
from svg_builder.models.transform import Transform
from svg_builder.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Type aliases
ViewBox = Tuple[int, int, int, int]  # origin x, origin y, width, height

# Constants
STANDALONE_YES = '<?xml version="1.0" standalone="yes"?>\n'
STANDALONE_NO = '<?xml version="1.0" standalone="no"?>\n'
DOC_TYPE = ('<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
            '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n')
XMLNS = ('version="1.1" xmlns="http://www.w3.org/2000/svg" '
         'xmlns:xlink="http://www.w3.org/1999/xlink">\n')
DOCUMENT_CLOSE = "</svg>\n"


class DocumentError(Exception):
    """Custom exception for document-related errors."""
    pass


class DocumentStateError(DocumentError):
    """Raised when a finalized document is modified or finalized again."""
    pass


class DocumentState(Enum):
    """Lifecycle phases of a document."""
    BUILDING = auto()
    FINALIZED = auto()


class Head:
    """Header metadata of an SVG document."""

    __slots__ = ('width', 'height', 'view_box', 'title', 'desc', 'standalone')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.view_box: Optional[ViewBox] = None
        self.title: Optional[str] = None
        self.desc: Optional[str] = None
        self.standalone = False

    def render_into(self, pieces: List[str], unit: str) -> None:
        """
        Append the XML declaration, doctype, root opening tag, title and
        description to ``pieces``.

        Args:
            pieces: Growing list of output fragments
            unit: Suffix written after the width and height
        """
        pieces.append(STANDALONE_YES if self.standalone else STANDALONE_NO)
        pieces.append(DOC_TYPE)
        pieces.append(f'<svg width="{self.width}{unit}" height="{self.height}{unit}" ')
        if self.view_box is not None:
            x, y, width, height = self.view_box
            pieces.append(f'viewBox="{x} {y} {width} {height} " ')
        pieces.append(XMLNS)
        if self.title is not None:
            pieces.append(f"<title>{self.title}</title>\n")
        if self.desc is not None:
            pieces.append(f"<desc>{self.desc}</desc>\n")

    def __repr__(self) -> str:
        return (f"Head(width={self.width!r}, height={self.height!r}, "
                f"view_box={self.view_box!r}, standalone={self.standalone!r})")


class Document:
    """
    Builder for a single SVG document.

    A document starts in the ``BUILDING`` state, where header setters, shapes
    and groups may be added. A successful :meth:`finalize` moves it to
    ``FINALIZED``; after that every mutating call raises
    :class:`DocumentStateError`.

    Example::

        doc = Document(12, 12)
        doc.view_box(0, 0, 1200, 400)
        with doc.group(group_id="shapes"):
            doc.circle(600, 200, 100, "fill=red stroke=blue")
        doc.finalize(sys.stdout)
    """

    def __init__(self, width: int, height: int):
        """
        Initialize a new document.

        Args:
            width: Canvas width
            height: Canvas height
        """
        self._head = Head(width, height)
        self._content: List[str] = []
        self._groups = GroupStack()
        self._state = DocumentState.BUILDING

    # Lifecycle

    @property
    def state(self) -> DocumentState:
        return self._state

    @property
    def is_finalized(self) -> bool:
        return self._state is DocumentState.FINALIZED

    def _check_building(self) -> None:
        if self._state is not DocumentState.BUILDING:
            raise DocumentStateError("Document has already been finalized")

    # Header

    @property
    def head(self) -> Head:
        return self._head

    def set_width(self, width: int) -> None:
        self._check_building()
        self._head.width = width

    def set_height(self, height: int) -> None:
        self._check_building()
        self._head.height = height

    def standalone(self, standalone: bool) -> None:
        """Select ``standalone="yes"`` or ``"no"`` in the XML declaration."""
        self._check_building()
        self._head.standalone = bool(standalone)

    def view_box(self, orig_x: int, orig_y: int, width: int, height: int) -> None:
        self._check_building()
        self._head.view_box = (orig_x, orig_y, width, height)

    def title(self, text: str) -> None:
        self._check_building()
        self._head.title = text

    def desc(self, text: str) -> None:
        self._check_building()
        self._head.desc = text

    # Content

    @property
    def content(self) -> Tuple[str, ...]:
        """Fragments appended so far, in order."""
        return tuple(self._content)

    def _append(self, fragment: str) -> None:
        self._check_building()
        self._content.append(fragment)

    def add(self, entity: Any) -> None:
        """
        Append the rendered form of a shape.

        Any object with a ``to_svg_string()`` method is accepted, so custom
        shapes can be added without changing the document.

        Raises:
            TypeError: If ``entity`` cannot render itself
        """
        self._check_building()
        render = getattr(entity, "to_svg_string", None)
        if not callable(render):
            raise TypeError(f"Cannot add {type(entity).__name__}: no to_svg_string() method")
        self._content.append(render())

    def circle(self, x: int, y: int, radius: int, attribs: str = "") -> None:
        self._append(Circle(x, y, radius, parse_attributes(attribs)).to_svg_string())

    def rect(self, x: int, y: int, width: int, height: int, attribs: str = "") -> None:
        self._append(Rect(x, y, width, height, parse_attributes(attribs)).to_svg_string())

    def rounded_rect(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        x_round: int,
        y_round: int,
        attribs: str = ""
    ) -> None:
        self._append(RoundedRect(x, y, width, height, x_round, y_round,
                                 parse_attributes(attribs)).to_svg_string())

    def ellipse(self, x: int, y: int, x_radius: int, y_radius: int, attribs: str = "") -> None:
        self._append(Ellipse(x, y, x_radius, y_radius, parse_attributes(attribs)).to_svg_string())

    def line(self, x1: int, y1: int, x2: int, y2: int, attribs: str = "") -> None:
        self._append(Line(x1, y1, x2, y2, parse_attributes(attribs)).to_svg_string())

    def polyline(self, points: Iterable[Point], attribs: str = "") -> None:
        self._append(PolyLine(points, parse_attributes(attribs)).to_svg_string())

    def polygon(self, points: Iterable[Point], attribs: str = "") -> None:
        self._append(Polygon(points, parse_attributes(attribs)).to_svg_string())

    def text(self, x: int, y: int, text: str, attribs: str = "") -> None:
        self._append(Text(x, y, text, parse_attributes(attribs)).to_svg_string())

    # Groups

    @property
    def depth(self) -> int:
        """Number of groups currently open."""
        return self._groups.depth

    def g_open(self, scope: GroupScope) -> None:
        """Open the group described by ``scope``."""
        self._append(scope.open_tag())
        self._groups.push(scope)
        logger.debug(f"Opened group {scope.group_id!r} at depth {self._groups.depth}")

    def g_begin(
        self,
        group_id: Optional[str] = None,
        transform: Optional[Transform] = None,
        attribs: Optional[AttributesLike] = None
    ) -> None:
        """
        Open a group. Every fragment appended until the matching
        :meth:`g_end` falls inside it.

        Args:
            group_id: Optional ``id`` attribute
            transform: Optional transform applied to the group
            attribs: Optional attributes inherited by the group's children
        """
        self.g_open(GroupScope(group_id, transform, attribs))

    def g_id(self, group_id: str) -> None:
        self.g_begin(group_id=group_id)

    def g_transform(self, transform: Transform) -> None:
        self.g_begin(transform=transform)

    def g_attribs(self, attribs: AttributesLike) -> None:
        self.g_begin(attribs=attribs)

    def g_translate(self, x: int, y: int) -> None:
        self.g_begin(transform=Transform().translate(x, y))

    def g_rotate(self, angle: int) -> None:
        self.g_begin(transform=Transform().rotate(angle))

    def g_scale(self, x_scale: int, y_scale: int) -> None:
        self.g_begin(transform=Transform().scale(x_scale, y_scale))

    def g_skew(self, x_factor: int, y_factor: int) -> None:
        self.g_begin(transform=Transform().skew_x(x_factor).skew_y(y_factor))

    def g_end(self) -> None:
        """
        Close the innermost open group.

        Raises:
            GroupError: If no group is open
        """
        self._check_building()
        scope = self._groups.pop()
        self._content.append(scope.close_tag())
        logger.debug(f"Closed group {scope.group_id!r}, depth now {self._groups.depth}")

    def group(
        self,
        group_id: Optional[str] = None,
        transform: Optional[Transform] = None,
        attributes: Optional[AttributesLike] = None
    ) -> GroupHandle:
        """
        Return a context manager that opens a group on entry and closes it
        on exit.
        """
        return GroupHandle(self, GroupScope(group_id, transform, attributes))

    # Output

    def to_svg_string(self) -> str:
        """
        Render the complete document text.

        This does not write anything or change the document state.
        """
        pieces: List[str] = []
        self._head.render_into(pieces, CONFIG["length_unit"])
        pieces += self._content
        pieces.append(DOCUMENT_CLOSE)
        return "".join(pieces)

    def check_ready(self) -> None:
        """
        Verify that :meth:`finalize` would be allowed, without writing.

        Callers that open a file for the output run this first so a refused
        finalize leaves an existing file untouched.

        Raises:
            DocumentStateError: If the document was already finalized
            GroupError: If a group is still open
        """
        self._check_building()
        self._groups.check_closed()

    def finalize(self, output) -> Any:
        """
        Write the complete document through ``output`` in one call.

        Args:
            output: Sink with a ``write(text)`` method

        Returns:
            Whatever ``output.write`` returns

        Raises:
            DocumentStateError: If the document was already finalized
            GroupError: If a group is still open
        """
        self.check_ready()

        text = self.to_svg_string()
        logger.debug(f"Finalizing document: {len(self._content)} fragments, {len(text)} characters")

        # Sink errors propagate unchanged and leave the document buildable
        result = output.write(text)
        self._state = DocumentState.FINALIZED
        return result

    def __repr__(self) -> str:
        return (f"Document(width={self._head.width!r}, height={self._head.height!r}, "
                f"fragments={len(self._content)}, state={self._state.name})")
