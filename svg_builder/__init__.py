"""
SVG Builder Package
===================
This package builds SVG documents from shapes, transforms and nested
groups, and serializes them to text in a single write.
"""

__version__ = "0.1.0"

from svg_builder.core import CONFIG, configure, reset_config
from svg_builder.models import (
    AttributeParseError, AttributePolicy, AttributeMap, parse_attributes,
    Transform, rgb, rgba,
    ShapeType, Shape, Circle, Ellipse, Line, Rect, RoundedRect,
    PolyLine, Polygon, Text,
    GroupError, GroupScope,
    DocumentError, DocumentStateError, DocumentState, Document
)
from svg_builder.generation import SVGGenerator
from svg_builder.validation import SVGValidator

__all__ = [
    'CONFIG', 'configure', 'reset_config',
    'AttributeParseError', 'AttributePolicy', 'AttributeMap', 'parse_attributes',
    'Transform', 'rgb', 'rgba',
    'ShapeType', 'Shape', 'Circle', 'Ellipse', 'Line', 'Rect', 'RoundedRect',
    'PolyLine', 'Polygon', 'Text',
    'GroupError', 'GroupScope',
    'DocumentError', 'DocumentStateError', 'DocumentState', 'Document',
    'SVGGenerator', 'SVGValidator'
]
