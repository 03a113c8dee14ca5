"""Shared document-building helpers for all tests."""

import pytest

from richdoc import (
    RichDocBlockquoteNode, RichDocBulletListNode, RichDocCodeBlockNode, RichDocDocumentNode,
    RichDocHeadingNode, RichDocHorizontalRuleNode, RichDocListItemNode, RichDocMark,
    RichDocOrderedListNode, RichDocParagraphNode, RichDocTextNode
)


class RichDocTestHelpers:
    """Helper utilities for building documents in tests."""

    @staticmethod
    def text(content: str, *marks: str) -> RichDocTextNode:
        """Create a text node with marks given by kind."""
        return RichDocTextNode(content, [RichDocMark(kind) for kind in marks])

    @staticmethod
    def link(content: str, href: str) -> RichDocTextNode:
        """Create a text node carrying a link mark."""
        return RichDocTextNode(content, [RichDocMark("link", {"href": href})])

    @staticmethod
    def doc(*children) -> RichDocDocumentNode:
        """Create a document."""
        return RichDocDocumentNode(children)

    @staticmethod
    def para(*children) -> RichDocParagraphNode:
        """Create a paragraph."""
        return RichDocParagraphNode(children)

    @staticmethod
    def heading(level: int, *children) -> RichDocHeadingNode:
        """Create a heading."""
        return RichDocHeadingNode(level, children)

    @staticmethod
    def quote(*children) -> RichDocBlockquoteNode:
        """Create a blockquote."""
        return RichDocBlockquoteNode(children)

    @staticmethod
    def bullets(*items) -> RichDocBulletListNode:
        """Create a bullet list."""
        return RichDocBulletListNode(items)

    @staticmethod
    def numbered(start: int, *items) -> RichDocOrderedListNode:
        """Create an ordered list."""
        return RichDocOrderedListNode(start, items)

    @staticmethod
    def item(*children) -> RichDocListItemNode:
        """Create a list item."""
        return RichDocListItemNode(children)

    @staticmethod
    def code(language: str, content: str) -> RichDocCodeBlockNode:
        """Create a code block."""
        return RichDocCodeBlockNode(language, [RichDocTextNode(content)])

    @staticmethod
    def rule() -> RichDocHorizontalRuleNode:
        """Create a horizontal rule."""
        return RichDocHorizontalRuleNode()


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return RichDocTestHelpers
