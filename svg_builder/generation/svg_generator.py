"""
SVG Generator Module
====================
This module writes finished documents to files in an output directory.
"""

import os
import logging

from svg_builder.models.document import Document

logger = logging.getLogger(__name__)


class SVGGenerator:
    """Class for writing SVG documents to disk."""

    def __init__(self, output_dir: str = "output"):
        """
        Initialize the generator.

        Args:
            output_dir: Directory where SVG files will be saved
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    def generate_svg(self, document: Document) -> str:
        """
        Render the document text without finalizing it.

        Args:
            document: Document to render

        Returns:
            String containing the SVG code
        """
        logger.debug(f"Generating SVG for {document!r}")
        return document.to_svg_string()

    def save_svg(self, document: Document, name: str) -> str:
        """
        Finalize the document into ``<output_dir>/<name>.svg``.

        Args:
            document: Document to finalize
            name: File name without extension

        Returns:
            Path to the saved SVG file

        Raises:
            DocumentStateError: If the document was already finalized
            GroupError: If a group is still open; the file is not touched
        """
        filename = name if name.endswith(".svg") else f"{name}.svg"
        filepath = os.path.join(self.output_dir, filename)

        document.check_ready()
        with open(filepath, "w", encoding="utf-8") as f:
            document.finalize(f)

        logger.info(f"SVG saved to {filepath}")

        return filepath
