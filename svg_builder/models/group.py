"""
Group scopes for SVG documents.
A group wraps every fragment appended between its opening and closing tags.
Open groups are tracked on a stack so that an unbalanced close is caught
when it happens rather than producing a malformed document.
"""

from typing import List, Optional

from svg_builder.models.attributes import AttributeMap, AttributesLike, as_attribute_map
from svg_builder.models.transform import Transform
from svg_builder.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

GROUP_CLOSE = "</g>\n"


class GroupError(Exception):
    """Raised when group open and close calls are not balanced."""
    pass


class GroupScope:
    """
    Opening half of a ``<g>`` element.

    Carries an optional identifier, transform and attribute set, written in
    that order.
    """

    __slots__ = ('_group_id', '_transform', '_attributes')

    def __init__(
        self,
        group_id: Optional[str] = None,
        transform: Optional[Transform] = None,
        attributes: Optional[AttributesLike] = None
    ):
        self._group_id = group_id
        self._transform = transform.copy() if transform is not None else None
        self._attributes = as_attribute_map(attributes) if attributes is not None else None

    @property
    def group_id(self) -> Optional[str]:
        return self._group_id

    @property
    def transform(self) -> Optional[Transform]:
        return self._transform.copy() if self._transform is not None else None

    @property
    def attributes(self) -> Optional[AttributeMap]:
        return self._attributes.copy() if self._attributes is not None else None

    def open_tag(self) -> str:
        """
        Render the opening tag.

        Returns:
            ``<g id="..." transform="..." key="value" >`` followed by a newline,
            with absent parts left out
        """
        pieces = ['<g ']
        if self._group_id is not None:
            pieces += ['id="', self._group_id, '" ']
        if self._transform is not None:
            pieces += [self._transform.get(), ' ']
        if self._attributes is not None:
            for key, value in self._attributes.items():
                pieces += [key, '="', value, '" ']
        pieces.append('>\n')
        return "".join(pieces)

    @staticmethod
    def close_tag() -> str:
        """Render the closing tag."""
        return GROUP_CLOSE

    def __repr__(self) -> str:
        return (f"GroupScope(group_id={self._group_id!r}, "
                f"transform={self._transform!r}, attributes={self._attributes!r})")


class GroupStack:
    """Stack of the groups that are currently open, innermost last."""

    __slots__ = ('_scopes',)

    def __init__(self):
        self._scopes: List[GroupScope] = []

    def push(self, scope: GroupScope) -> None:
        self._scopes.append(scope)

    def pop(self) -> GroupScope:
        """
        Remove and return the innermost open group.

        Raises:
            GroupError: If no group is open
        """
        if not self._scopes:
            raise GroupError("Cannot close a group: no group is open")
        return self._scopes.pop()

    def check_closed(self) -> None:
        """
        Verify that every group has been closed.

        Raises:
            GroupError: If any group is still open
        """
        if self._scopes:
            names = ", ".join(repr(scope.group_id) if scope.group_id is not None else "<anonymous>"
                              for scope in self._scopes)
            raise GroupError(f"{len(self._scopes)} group(s) still open: {names}")

    @property
    def depth(self) -> int:
        return len(self._scopes)

    def __len__(self) -> int:
        return len(self._scopes)


class GroupHandle:
    """
    Context manager that keeps a group open for the duration of a block.

    Obtained from ``Document.group``; the group is closed on exit even when
    the block raises. Inner groups the block left open are closed first, and
    when the block itself succeeded that is reported as a :class:`GroupError`.
    """

    def __init__(self, document, scope: GroupScope):
        self._document = document
        self._scope = scope
        self._depth = None

    @property
    def scope(self) -> GroupScope:
        return self._scope

    def __enter__(self) -> 'GroupHandle':
        self._document.g_open(self._scope)
        self._depth = self._document.depth
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        depth = self._document.depth
        if depth < self._depth:
            # The block closed this group itself; nothing left to close
            if exc_type is None:
                raise GroupError(f"Group {self._scope.group_id!r} was closed inside its own block")
            return False

        if depth > self._depth:
            logger.debug(f"Group {self._scope.group_id!r} exiting at depth "
                         f"{depth}, closing {depth - self._depth} inner group(s)")
        while self._document.depth >= self._depth:
            self._document.g_end()

        if depth > self._depth and exc_type is None:
            raise GroupError(
                f"Group {self._scope.group_id!r} closed while inner groups were still open"
            )
        return False
