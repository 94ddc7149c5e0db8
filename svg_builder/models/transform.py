"""
Composite SVG transform attribute.

Operations are recorded in call order and written left to right into one
``transform`` attribute. Transform composition is not commutative, so the
order callers append operations in is the order they are applied.
"""

from typing import Iterable, Optional, Tuple


class Transform:
    """
    Accumulates transform operations into a single SVG attribute.

    Each operation method appends its function-call fragment and returns the
    transform itself, so calls can be chained::

        Transform().translate(10, 20).rotate(45).get()
        # 'transform="translate(10, 20) rotate(45)"'
    """

    __slots__ = ('_operations',)

    def __init__(self, operations: Optional[Iterable[str]] = None):
        """
        Initialize the transform.

        Args:
            operations: Sequence of already formatted operations,
                e.g. ``["scale(2, 2)"]``

        Raises:
            TypeError: If ``operations`` is a single string
        """
        if isinstance(operations, str):
            raise TypeError("operations must be a sequence of strings, not a single string")
        self._operations = list(operations) if operations is not None else []

    def _append(self, operation: str) -> 'Transform':
        self._operations.append(operation)
        return self

    def translate(self, x, y) -> 'Transform':
        """Move by ``x`` horizontally and ``y`` vertically."""
        return self._append(f"translate({x}, {y})")

    def rotate(self, angle) -> 'Transform':
        """Rotate by ``angle`` degrees around the origin."""
        return self._append(f"rotate({angle})")

    def scale(self, x_scale, y_scale) -> 'Transform':
        """Scale by independent horizontal and vertical factors."""
        return self._append(f"scale({x_scale}, {y_scale})")

    def skew_x(self, factor) -> 'Transform':
        """Skew along the x axis by ``factor`` degrees."""
        return self._append(f"skewX({factor})")

    def skew_y(self, factor) -> 'Transform':
        """Skew along the y axis by ``factor`` degrees."""
        return self._append(f"skewY({factor})")

    @property
    def operations(self) -> Tuple[str, ...]:
        """Recorded operations in application order."""
        return tuple(self._operations)

    @property
    def value(self) -> str:
        """Attribute value: every operation joined by a single space."""
        return " ".join(self._operations)

    def get(self) -> str:
        """
        Return the complete attribute text for embedding in a tag.

        Returns:
            ``transform="op1 op2 ..."``; ``transform=""`` with no operations
        """
        return f'transform="{self.value}"'

    def copy(self) -> 'Transform':
        return Transform(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return self._operations == other._operations

    def __str__(self) -> str:
        return self.get()

    def __repr__(self) -> str:
        return f"Transform({self._operations!r})"
