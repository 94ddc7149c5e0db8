"""
Shape models for SVG generation.
Each shape renders itself to a single markup fragment: the tag name, its
geometry attributes in a fixed order, the optional transform, the free-form
attributes and the terminator.
"""

from enum import Enum, auto
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from svg_builder.models.attributes import AttributeMap, AttributesLike, as_attribute_map
from svg_builder.models.transform import Transform

# Type definitions
Number = Union[int, float]
Point = Tuple[Number, Number]
Geometry = List[Tuple[str, Any]]

# Constants
SELF_CLOSING_END = " />\n"


class ShapeType(Enum):
    """Enum for the closed set of SVG shape variants."""
    CIRCLE = auto()
    ELLIPSE = auto()
    LINE = auto()
    RECT = auto()
    ROUNDED_RECT = auto()
    POLYLINE = auto()
    POLYGON = auto()
    TEXT = auto()
    CUSTOM = auto()


class Shape:
    """
    Base class for SVG shapes.

    Shapes are immutable: the ``with_*`` methods return modified copies.
    Subclasses declare their tag, their variant and the names of their
    geometry fields, and implement ``_geometry``. Extensions outside the
    built-in variants subclass this with ``ShapeType.CUSTOM``.
    """

    __slots__ = ('_attributes', '_transform')

    shape_type: ShapeType = ShapeType.CUSTOM
    tag: str = ""
    # Constructor argument names of the geometry fields, used to copy and compare
    _fields: Tuple[str, ...] = ()

    def __init__(
        self,
        attributes: Optional[AttributesLike] = None,
        transform: Optional[Transform] = None
    ):
        """
        Initialize a new shape.

        Args:
            attributes: Free-form SVG attributes
            transform: Optional transform, written after the geometry
        """
        self._attributes = as_attribute_map(attributes)
        self._transform = transform.copy() if transform is not None else None

    @property
    def attributes(self) -> AttributeMap:
        """Copy of the free-form attributes."""
        return self._attributes.copy()

    @property
    def transform(self) -> Optional[Transform]:
        """Copy of the transform, or None."""
        return self._transform.copy() if self._transform is not None else None

    def _geometry(self) -> Geometry:
        """
        Geometry attributes in output order.

        Returns:
            List of (name, value) pairs
        """
        raise NotImplementedError("Subclasses must implement _geometry")

    def _open_tag(self) -> List[str]:
        """Pieces of the opening tag up to, but not including, its terminator."""
        pieces = ['<', self.tag]
        for name, value in self._geometry():
            pieces += [' ', name, '="', str(value), '"']
        if self._transform is not None:
            pieces += [' ', self._transform.get()]
        self._attributes.render_into(pieces)
        return pieces

    def to_svg_string(self) -> str:
        """
        Convert shape to its SVG markup fragment.

        Returns:
            Fragment ending with a self-closing terminator and a newline
        """
        pieces = self._open_tag()
        pieces.append(SELF_CLOSING_END)
        return "".join(pieces)

    def render(self) -> str:
        """Alias of :meth:`to_svg_string`."""
        return self.to_svg_string()

    def _replace(self, **changes) -> 'Shape':
        """Build a copy of this shape with some constructor arguments replaced."""
        kwargs = {name: getattr(self, name) for name in self._fields}
        kwargs['attributes'] = self._attributes
        kwargs['transform'] = self._transform
        kwargs.update(changes)
        return self.__class__(**kwargs)

    def with_transform(self, transform: Optional[Transform]) -> 'Shape':
        """Return a copy with ``transform`` replacing the current one."""
        return self._replace(transform=transform)

    def with_attributes(self, attributes: AttributesLike, replace: bool = False) -> 'Shape':
        """
        Return a copy with additional attributes.

        Args:
            attributes: Attributes to add
            replace: Replace all existing attributes instead of merging
        """
        merged = AttributeMap() if replace else self._attributes.copy()
        merged.update(attributes)
        return self._replace(attributes=merged)

    def _key(self) -> tuple:
        return (
            self.__class__,
            tuple(getattr(self, name) for name in self._fields),
            tuple(self._attributes.items()),
            self._transform.operations if self._transform is not None else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{self.__class__.__name__}({fields})"


class Circle(Shape):
    """Circle centred on (x, y)."""

    __slots__ = ('_x', '_y', '_radius')

    shape_type = ShapeType.CIRCLE
    tag = "circle"
    _fields = ('x', 'y', 'radius')

    def __init__(
        self,
        x: int,
        y: int,
        radius: int,
        attributes: Optional[AttributesLike] = None,
        transform: Optional[Transform] = None
    ):
        super().__init__(attributes, transform)
        self._x = x
        self._y = y
        self._radius = radius

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def radius(self) -> int:
        return self._radius

    def _geometry(self) -> Geometry:
        return [('cx', self._x), ('cy', self._y), ('r', self._radius)]


class Ellipse(Shape):
    """Ellipse centred on (x, y) with separate horizontal and vertical radii."""

    __slots__ = ('_x', '_y', '_x_radius', '_y_radius')

    shape_type = ShapeType.ELLIPSE
    tag = "ellipse"
    _fields = ('x', 'y', 'x_radius', 'y_radius')

    def __init__(
        self,
        x: int,
        y: int,
        x_radius: int,
        y_radius: int,
        attributes: Optional[AttributesLike] = None,
        transform: Optional[Transform] = None
    ):
        super().__init__(attributes, transform)
        self._x = x
        self._y = y
        self._x_radius = x_radius
        self._y_radius = y_radius

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def x_radius(self) -> int:
        return self._x_radius

    @property
    def y_radius(self) -> int:
        return self._y_radius

    def _geometry(self) -> Geometry:
        return [('cx', self._x), ('cy', self._y),
                ('rx', self._x_radius), ('ry', self._y_radius)]


class Line(Shape):
    """Straight segment from (x1, y1) to (x2, y2)."""

    __slots__ = ('_x1', '_y1', '_x2', '_y2')

    shape_type = ShapeType.LINE
    tag = "line"
    _fields = ('x1', 'y1', 'x2', 'y2')

    def __init__(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        attributes: Optional[AttributesLike] = None,
        transform: Optional[Transform] = None
    ):
        super().__init__(attributes, transform)
        self._x1 = x1
        self._y1 = y1
        self._x2 = x2
        self._y2 = y2

    @property
    def x1(self) -> int:
        return self._x1

    @property
    def y1(self) -> int:
        return self._y1

    @property
    def x2(self) -> int:
        return self._x2

    @property
    def y2(self) -> int:
        return self._y2

    def _geometry(self) -> Geometry:
        return [('x1', self._x1), ('y1', self._y1),
                ('x2', self._x2), ('y2', self._y2)]


class Rect(Shape):
    """Axis-aligned rectangle with its top-left corner at (x, y)."""

    __slots__ = ('_x', '_y', '_width', '_height')

    shape_type = ShapeType.RECT
    tag = "rect"
    _fields = ('x', 'y', 'width', 'height')

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        attributes: Optional[AttributesLike] = None,
        transform: Optional[Transform] = None
    ):
        super().__init__(attributes, transform)
        self._x = x
        self._y = y
        self._width = width
        self._height = height

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _geometry(self) -> Geometry:
        return [('x', self._x), ('y', self._y),
                ('width', self._width), ('height', self._height)]


class RoundedRect(Rect):
    """Rectangle whose corners are rounded by ``x_round`` and ``y_round``."""

    __slots__ = ('_x_round', '_y_round')

    shape_type = ShapeType.ROUNDED_RECT
    _fields = ('x', 'y', 'width', 'height', 'x_round', 'y_round')

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        x_round: int,
        y_round: int,
        attributes: Optional[AttributesLike] = None,
        transform: Optional[Transform] = None
    ):
        super().__init__(x, y, width, height, attributes, transform)
        self._x_round = x_round
        self._y_round = y_round

    @property
    def x_round(self) -> int:
        return self._x_round

    @property
    def y_round(self) -> int:
        return self._y_round

    def _geometry(self) -> Geometry:
        return super()._geometry() + [('rx', self._x_round), ('ry', self._y_round)]


class _PointShape(Shape):
    """Shape defined by an ordered sequence of points."""

    __slots__ = ('_points',)

    _fields = ('points',)

    def __init__(
        self,
        points: Iterable[Point] = (),
        attributes: Optional[AttributesLike] = None,
        transform: Optional[Transform] = None
    ):
        super().__init__(attributes, transform)
        self._points = tuple((x, y) for x, y in points)

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    def with_point(self, x: Number, y: Number) -> '_PointShape':
        """Return a copy with (x, y) appended to the points."""
        return self._replace(points=self._points + ((x, y),))

    def _geometry(self) -> Geometry:
        return [('points', format_points(self._points))]


class PolyLine(_PointShape):
    """Open path through a sequence of points."""

    __slots__ = ()

    shape_type = ShapeType.POLYLINE
    tag = "polyline"


class Polygon(_PointShape):
    """Closed path through a sequence of points."""

    __slots__ = ()

    shape_type = ShapeType.POLYGON
    tag = "polygon"


class Text(Shape):
    """
    Text anchored at (x, y).

    The content is written verbatim between the opening and closing tags;
    markup characters are not escaped.
    """

    __slots__ = ('_x', '_y', '_text')

    shape_type = ShapeType.TEXT
    tag = "text"
    _fields = ('x', 'y', 'text')

    def __init__(
        self,
        x: int,
        y: int,
        text: str,
        attributes: Optional[AttributesLike] = None,
        transform: Optional[Transform] = None
    ):
        super().__init__(attributes, transform)
        self._x = x
        self._y = y
        self._text = text

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def text(self) -> str:
        return self._text

    def _geometry(self) -> Geometry:
        return [('x', self._x), ('y', self._y)]

    def to_svg_string(self) -> str:
        pieces = self._open_tag()
        pieces += [' >', self._text, '</', self.tag, '>\n']
        return "".join(pieces)


def format_points(points: Sequence[Point]) -> str:
    """
    Format points as an SVG ``points`` value.

    Every pair is written as ``x,y`` followed by a space, so the value keeps
    a trailing space.
    """
    return "".join(f"{x},{y} " for x, y in points)
