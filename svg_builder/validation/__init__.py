"""
SVG Builder - Validation Package
================================
This package contains well-formedness checks for emitted documents.
"""

from svg_builder.validation.svg_validator import SVGValidator

__all__ = [
    "SVGValidator"
]
