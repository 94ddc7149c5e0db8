"""
SVG validation utilities to check that emitted documents are well-formed.

Only XML well-formedness and the root element are checked; attribute values
are not validated against the SVG grammar.
"""
import logging
from typing import Optional, Tuple, Union

from defusedxml import ElementTree
from defusedxml.common import DefusedXmlException

from svg_builder.core import CONFIG

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SVGValidator:
    """
    Checks that SVG text parses as XML and has an ``svg`` root element.

    Parsing goes through defusedxml, so entity declarations and external
    references are rejected instead of being expanded.
    """

    def __init__(self, max_svg_size: Optional[int] = None):
        """
        Initialize the SVG validator.

        Args:
            max_svg_size: Maximum allowed size of an SVG document in bytes
                (defaults to the configured ``max_svg_size``)
        """
        self.max_svg_size = max_svg_size if max_svg_size is not None else CONFIG["max_svg_size"]

    def validate(self, svg_code: Union[str, bytes]) -> Tuple[bool, Union[str, None]]:
        """
        Validate SVG text.

        Args:
            svg_code: The SVG document to validate

        Returns:
            Tuple of (is_valid: bool, error_message: Optional[str])
        """
        data = svg_code.encode('utf-8') if isinstance(svg_code, str) else svg_code

        svg_size = len(data)
        if svg_size > self.max_svg_size:
            return False, f"SVG exceeds allowed size: {svg_size} bytes (max: {self.max_svg_size})"

        try:
            root = ElementTree.fromstring(
                data,
                forbid_dtd=False,
                forbid_entities=True,
                forbid_external=True,
            )
        except DefusedXmlException as e:
            return False, f"Forbidden XML construct: {type(e).__name__}"
        except ElementTree.ParseError as e:
            return False, f"Invalid XML: {str(e)}"

        namespace, _, tag_name = root.tag.rpartition('}')
        if tag_name != 'svg':
            return False, f"Root element is <{tag_name}>, expected <svg>"
        if namespace.lstrip('{') != SVG_NAMESPACE:
            return False, f"Root element is not in the SVG namespace: {namespace.lstrip('{')!r}"

        logger.debug(f"SVG document valid ({svg_size} bytes)")
        return True, None
