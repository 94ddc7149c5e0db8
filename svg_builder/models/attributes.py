"""
Attribute map for SVG elements.
Stores attribute names and values and renders them as ``name="value"``
fragments. Values are written verbatim: no escaping is applied, so callers
must supply text that is already safe for the document.
"""

from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from svg_builder.core import CONFIG
from svg_builder.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)


class AttributeParseError(ValueError):
    """Raised when a free-form attribute token cannot be parsed."""
    pass


class AttributePolicy(Enum):
    """How malformed ``key=value`` tokens are handled."""
    STRICT = "strict"
    SKIP = "skip"


class AttributeMap:
    """
    Mapping of attribute names to attribute values.

    Keys are unique and the last write wins. Rendering follows insertion
    order; overwriting a key keeps its original position.
    """

    __slots__ = ('_attrs',)

    def __init__(self, attributes: Optional[Union[Mapping[str, str], 'AttributeMap']] = None):
        self._attrs: Dict[str, str] = {}
        if attributes is not None:
            self.update(attributes)

    @classmethod
    def parse(
        cls,
        text: str,
        policy: Optional[Union[AttributePolicy, str]] = None
    ) -> 'AttributeMap':
        """
        Parse a free-form attribute string such as ``"fill=red stroke=blue"``.

        Tokens are separated by whitespace and each one is split on its first
        ``=``, so ``style=a=b`` gives the key ``style`` and the value ``a=b``.
        A token with no ``=`` or with an empty key is malformed.

        Args:
            text: Space-separated ``key=value`` tokens
            policy: Handling of malformed tokens (defaults to the configured
                ``attribute_policy``)

        Returns:
            Parsed attribute map

        Raises:
            AttributeParseError: If a token is malformed under the strict policy
        """
        policy = _resolve_policy(policy)
        attrs = cls()

        for token in text.split():
            key, sep, value = token.partition('=')
            if not sep or not key:
                if policy is AttributePolicy.STRICT:
                    raise AttributeParseError(
                        f"Malformed attribute token {token!r} in {text!r}: expected key=value"
                    )
                logger.warning(f"Skipping malformed attribute token {token!r}")
                continue
            attrs.insert(key, value)

        return attrs

    def insert(self, key: str, value) -> None:
        """Set ``key`` to ``value``, replacing any previous value."""
        self._attrs[key] = str(value)

    def update(self, attributes: Union[Mapping[str, str], 'AttributeMap']) -> None:
        """Insert every pair from ``attributes``."""
        for key, value in attributes.items():
            self.insert(key, value)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._attrs.get(key, default)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._attrs.items())

    def copy(self) -> 'AttributeMap':
        return AttributeMap(self)

    def render_into(self, buffer: List[str]) -> None:
        """
        Append `` key="value"`` for every entry to a list of text pieces.

        Args:
            buffer: Growing list of output fragments
        """
        for key, value in self._attrs.items():
            buffer += [' ', key, '="', value, '"']

    def render(self) -> str:
        """Return the rendered attribute text."""
        buffer: List[str] = []
        self.render_into(buffer)
        return "".join(buffer)

    def __getitem__(self, key: str) -> str:
        return self._attrs[key]

    def __contains__(self, key: object) -> bool:
        return key in self._attrs

    def __iter__(self) -> Iterator[str]:
        return iter(self._attrs)

    def __len__(self) -> int:
        return len(self._attrs)

    def __bool__(self) -> bool:
        return bool(self._attrs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeMap):
            return self._attrs == other._attrs
        if isinstance(other, Mapping):
            return self._attrs == dict(other)
        return NotImplemented

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"AttributeMap({self._attrs!r})"


def _resolve_policy(policy: Optional[Union[AttributePolicy, str]]) -> AttributePolicy:
    """Turn a policy name, member or ``None`` into a policy member."""
    if policy is None:
        policy = CONFIG["attribute_policy"]
    if isinstance(policy, AttributePolicy):
        return policy
    try:
        return AttributePolicy(str(policy).lower())
    except ValueError:
        raise ValueError(f"Unknown attribute policy: {policy!r}") from None


def parse_attributes(
    text: str,
    policy: Optional[Union[AttributePolicy, str]] = None
) -> AttributeMap:
    """Shorthand for :meth:`AttributeMap.parse`."""
    return AttributeMap.parse(text, policy)


AttributesLike = Union[AttributeMap, Mapping[str, str]]


def as_attribute_map(attributes: Optional[AttributesLike]) -> AttributeMap:
    """
    Coerce a plain mapping (or ``None``) into an independent AttributeMap.

    Args:
        attributes: Attribute map, mapping, or None

    Returns:
        A fresh AttributeMap owned by the caller
    """
    if attributes is None:
        return AttributeMap()
    return AttributeMap(attributes)
