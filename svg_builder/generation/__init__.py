"""
SVG Builder - Generation Package
================================
This package contains the file output for finished documents.
"""

from svg_builder.generation.svg_generator import SVGGenerator

__all__ = [
    "SVGGenerator"
]
