"""An immutable, position-addressed rich document model."""

from richdoc.richdoc_change import RichDocChange, RichDocDeleteChange, RichDocInsertTextChange
from richdoc.richdoc_exceptions import (
    RichDocChangeError,
    RichDocError,
    RichDocJSONError,
    RichDocPositionError,
)
from richdoc.richdoc_json import document_from_json, mark_from_json, node_from_json, node_to_json
from richdoc.richdoc_mark import RichDocMark, canonical_mark_kind
from richdoc.richdoc_node import (
    RichDocBlockNode,
    RichDocBlockquoteNode,
    RichDocBulletListNode,
    RichDocCodeBlockNode,
    RichDocDocumentNode,
    RichDocHardBreakNode,
    RichDocHeadingNode,
    RichDocHorizontalRuleNode,
    RichDocListItemNode,
    RichDocNode,
    RichDocOrderedListNode,
    RichDocParagraphNode,
    RichDocTextNode,
    RichDocVisitor,
)
from richdoc.richdoc_position import RichDocResolvedPosition
from richdoc.richdoc_selection import RichDocTextSelection
from richdoc.richdoc_state import RichDocEditorState


__all__ = [
    # Exceptions
    "RichDocError",
    "RichDocPositionError",
    "RichDocChangeError",
    "RichDocJSONError",
    # Nodes
    "RichDocNode",
    "RichDocVisitor",
    "RichDocDocumentNode",
    "RichDocParagraphNode",
    "RichDocHeadingNode",
    "RichDocBlockquoteNode",
    "RichDocBulletListNode",
    "RichDocOrderedListNode",
    "RichDocListItemNode",
    "RichDocCodeBlockNode",
    "RichDocHorizontalRuleNode",
    "RichDocHardBreakNode",
    "RichDocBlockNode",
    "RichDocTextNode",
    "RichDocMark",
    "canonical_mark_kind",
    # Positions, selections and state
    "RichDocResolvedPosition",
    "RichDocTextSelection",
    "RichDocChange",
    "RichDocDeleteChange",
    "RichDocInsertTextChange",
    "RichDocEditorState",
    # JSON
    "node_from_json",
    "node_to_json",
    "document_from_json",
    "mark_from_json",
]
