"""
SVG Builder - Data Models
=========================
This package contains the attribute map, transform accumulator, shape
variants, group scopes and the document model.
"""

from svg_builder.models.attributes import (
    AttributeParseError, AttributePolicy, AttributeMap, parse_attributes
)
from svg_builder.models.transform import Transform
from svg_builder.models.color import rgb, rgba
from svg_builder.models.shape import (
    ShapeType, Shape, Circle, Ellipse, Line, Rect, RoundedRect,
    PolyLine, Polygon, Text, format_points
)
from svg_builder.models.group import GroupError, GroupScope, GroupHandle
from svg_builder.models.document import (
    DocumentError, DocumentStateError, DocumentState, Head, Document
)

__all__ = [
    'AttributeParseError', 'AttributePolicy', 'AttributeMap', 'parse_attributes',
    'Transform',
    'rgb', 'rgba',
    'ShapeType', 'Shape', 'Circle', 'Ellipse', 'Line', 'Rect', 'RoundedRect',
    'PolyLine', 'Polygon', 'Text', 'format_points',
    'GroupError', 'GroupScope', 'GroupHandle',
    'DocumentError', 'DocumentStateError', 'DocumentState', 'Head', 'Document'
]
