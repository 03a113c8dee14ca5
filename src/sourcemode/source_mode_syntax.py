"""Literal markdown syntax shown for marks and blocks in source mode."""

from typing import Dict


# Nesting priority of each mark kind: lower values sit further from the text
MARK_PRIORITY: Dict[str, int] = {
    "link": 0,
    "strikethrough": 1,
    "strong": 2,
    "emphasis": 3,
    "code": 4,
}

UNKNOWN_MARK_PRIORITY = 5

_MARK_SYNTAX: Dict[str, str] = {
    "strong": "**",
    "emphasis": "*",
    "code": "`",
    "strikethrough": "~~",
}

_MARK_CLASS: Dict[str, str] = {
    "strong": "bold",
    "emphasis": "italic",
    "code": "code",
    "strikethrough": "strike",
    "link": "link",
}

SYNTAX_CLASS = "source-mode-syntax"
CODE_FENCE = "```"
CODE_FENCE_CLASS = f"{SYNTAX_CLASS} source-mode-code-fence"
HORIZONTAL_RULE_CLASS = "source-mode-hr"
HORIZONTAL_RULE_SYNTAX = "---"
BLOCKQUOTE_PREFIX = "> "
BULLET_PREFIX = "- "


def mark_priority(kind: str) -> int:
    """
    Get the nesting priority of a mark kind.

    Args:
        kind: Canonical mark kind

    Returns:
        The priority, 0 being the outermost
    """
    return MARK_PRIORITY.get(kind, UNKNOWN_MARK_PRIORITY)


def mark_syntax(kind: str, is_start: bool, href: str | None = None) -> str | None:
    """
    Get the markdown syntax for one edge of a mark.

    Args:
        kind: Canonical mark kind
        is_start: True for the opening edge, False for the closing edge
        href: Link destination, used on a link's closing edge

    Returns:
        The literal syntax, or None if the kind has no markdown syntax
    """
    if kind == "link":
        return "[" if is_start else f"]({href or ''})"

    return _MARK_SYNTAX.get(kind)


def mark_class(kind: str) -> str:
    """
    Get the CSS class for a mark kind's syntax markers.

    Args:
        kind: Canonical mark kind

    Returns:
        The marker class name
    """
    return f"{SYNTAX_CLASS} source-mode-{_MARK_CLASS.get(kind, 'unknown')}-marker"


def block_marker_class(name: str) -> str:
    """
    Get the CSS class for a block-level syntax marker.

    Args:
        name: Short block name, e.g. "heading" or "list"

    Returns:
        The marker class name
    """
    return f"{SYNTAX_CLASS} source-mode-{name}-marker"


def heading_prefix(level: int) -> str:
    """
    Get the markdown prefix for a heading level.

    Args:
        level: Heading level

    Returns:
        The hashes for the level followed by a space
    """
    return "#" * level + " "


def ordered_list_prefix(number: int) -> str:
    """
    Get the markdown prefix for an ordered list item.

    Args:
        number: The item's number

    Returns:
        The number followed by a full stop and a space
    """
    return f"{number}. "


def code_fence_open(language: str) -> str:
    """
    Get the opening fence of a code block.

    Args:
        language: The code block's language identifier

    Returns:
        The fence followed by the language
    """
    return CODE_FENCE + (language or "")
