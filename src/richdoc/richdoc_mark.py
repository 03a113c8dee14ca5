"""Inline formatting marks attached to text nodes."""

from typing import Any, Dict, Iterable, Mapping, Tuple


# Alternative kind names produced by different editor schemas
MARK_KIND_ALIASES: Dict[str, str] = {
    "em": "emphasis",
    "italic": "emphasis",
    "bold": "strong",
    "code_inline": "code",
    "inlineCode": "code",
    "strike": "strikethrough",
}


def canonical_mark_kind(kind: str) -> str:
    """
    Map a mark kind to its canonical name.

    Args:
        kind: The mark kind as supplied by the host

    Returns:
        The canonical kind name, or the kind unchanged if it has no alias
    """
    return MARK_KIND_ALIASES.get(kind, kind)


class RichDocMark:
    """
    An inline formatting annotation, such as strong or a link.

    Marks are immutable values: two marks are equal when their kinds and
    attributes are equal.
    """

    __slots__ = ("_kind", "_attrs")

    def __init__(self, kind: str, attrs: Mapping[str, Any] | None = None) -> None:
        """
        Initialize a mark.

        Args:
            kind: The mark kind (aliases are mapped to canonical names)
            attrs: Optional kind-specific attributes, e.g. a link's href
        """
        self._kind = canonical_mark_kind(kind)
        self._attrs: Tuple[Tuple[str, Any], ...] = tuple(sorted((attrs or {}).items()))

    @property
    def kind(self) -> str:
        """The canonical mark kind."""
        return self._kind

    @property
    def attrs(self) -> Dict[str, Any]:
        """A copy of the mark's attributes."""
        return dict(self._attrs)

    def attr(self, name: str, default: Any = None) -> Any:
        """
        Look up a single attribute.

        Args:
            name: Attribute name
            default: Value returned if the attribute is not set

        Returns:
            The attribute value or the default
        """
        for key, value in self._attrs:
            if key == name:
                return value

        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RichDocMark):
            return NotImplemented

        return self._kind == other._kind and self._attrs == other._attrs

    def __hash__(self) -> int:
        return hash((self._kind, tuple((k, repr(v)) for k, v in self._attrs)))

    def __repr__(self) -> str:
        if not self._attrs:
            return f"RichDocMark({self._kind!r})"

        return f"RichDocMark({self._kind!r}, {dict(self._attrs)!r})"


def same_mark_set(first: Iterable[RichDocMark], second: Iterable[RichDocMark]) -> bool:
    """
    Check whether two mark collections hold the same marks, ignoring order.

    Args:
        first: First collection of marks
        second: Second collection of marks

    Returns:
        True if both collections contain exactly the same marks
    """
    first_list = list(first)
    second_list = list(second)
    if len(first_list) != len(second_list):
        return False

    return all(mark in second_list for mark in first_list)
