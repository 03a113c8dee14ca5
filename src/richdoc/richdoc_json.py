"""
Conversion between node trees and their JSON representation.

The JSON form is the one editor hosts exchange documents in: every node is an
object with a "type", optional "attrs" and "content", and text nodes carry
"text" and an optional list of "marks".
"""

from typing import Any, Callable, Dict, List

from richdoc.richdoc_exceptions import RichDocJSONError
from richdoc.richdoc_mark import RichDocMark
from richdoc.richdoc_node import (
    RichDocBlockNode, RichDocBlockquoteNode, RichDocBulletListNode, RichDocCodeBlockNode,
    RichDocDocumentNode, RichDocHardBreakNode, RichDocHeadingNode, RichDocHorizontalRuleNode,
    RichDocListItemNode, RichDocNode, RichDocOrderedListNode, RichDocParagraphNode, RichDocTextNode
)


def _build_heading(attrs: Dict[str, Any], content: List[RichDocNode]) -> RichDocNode:
    return RichDocHeadingNode(attrs.get("level", 1), content)


def _build_ordered_list(attrs: Dict[str, Any], content: List[RichDocNode]) -> RichDocNode:
    # Hosts differ on the attribute name for the first number
    start = attrs.get("start", attrs.get("order", 1))
    return RichDocOrderedListNode(start if start is not None else 1, content)


def _build_code_block(attrs: Dict[str, Any], content: List[RichDocNode]) -> RichDocNode:
    return RichDocCodeBlockNode(attrs.get("language") or "", content)


_NODE_BUILDERS: Dict[str, Callable[[Dict[str, Any], List[RichDocNode]], RichDocNode]] = {
    "doc": lambda attrs, content: RichDocDocumentNode(content),
    "paragraph": lambda attrs, content: RichDocParagraphNode(content),
    "heading": _build_heading,
    "blockquote": lambda attrs, content: RichDocBlockquoteNode(content),
    "bullet_list": lambda attrs, content: RichDocBulletListNode(content),
    "ordered_list": _build_ordered_list,
    "list_item": lambda attrs, content: RichDocListItemNode(content),
    "code_block": _build_code_block,
    "horizontal_rule": lambda attrs, content: RichDocHorizontalRuleNode(),
    "hr": lambda attrs, content: RichDocHorizontalRuleNode(),
    "hard_break": lambda attrs, content: RichDocHardBreakNode(),
}


def mark_from_json(data: Any) -> RichDocMark:
    """
    Build a mark from its JSON representation.

    Args:
        data: A JSON object with a "type" and optional "attrs"

    Returns:
        The mark

    Raises:
        RichDocJSONError: If the data is malformed
    """
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise RichDocJSONError("Mark must be an object with a string 'type'", {'mark': data})

    attrs = data.get("attrs") or {}
    if not isinstance(attrs, dict):
        raise RichDocJSONError("Mark 'attrs' must be an object", {'mark': data})

    return RichDocMark(data["type"], attrs)


def node_from_json(data: Any) -> RichDocNode:
    """
    Build a node tree from its JSON representation.

    Args:
        data: A JSON object describing the node

    Returns:
        The node, with all of its descendants

    Raises:
        RichDocJSONError: If the data is malformed
    """
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise RichDocJSONError("Node must be an object with a string 'type'", {'node': data})

    node_type = data["type"]
    if node_type == "text":
        text = data.get("text")
        if not isinstance(text, str):
            raise RichDocJSONError("Text node must have a string 'text'", {'node': data})

        marks = data.get("marks") or []
        if not isinstance(marks, list):
            raise RichDocJSONError("Text node 'marks' must be a list", {'node': data})

        return RichDocTextNode(text, [mark_from_json(mark) for mark in marks])

    attrs = data.get("attrs") or {}
    if not isinstance(attrs, dict):
        raise RichDocJSONError("Node 'attrs' must be an object", {'node': data})

    content_data = data.get("content") or []
    if not isinstance(content_data, list):
        raise RichDocJSONError("Node 'content' must be a list", {'node': data})

    content = [node_from_json(child) for child in content_data]

    builder = _NODE_BUILDERS.get(node_type)
    if builder is None:
        return RichDocBlockNode(node_type, content, attrs)

    try:
        return builder(attrs, content)

    except (TypeError, ValueError) as e:
        raise RichDocJSONError(f"Invalid attributes for '{node_type}' node: {e}", {'node': data}) from e


def document_from_json(data: Any) -> RichDocDocumentNode:
    """
    Build a document from its JSON representation.

    Args:
        data: A JSON object whose type is "doc"

    Returns:
        The document

    Raises:
        RichDocJSONError: If the data is malformed or is not a document
    """
    node = node_from_json(data)
    if not isinstance(node, RichDocDocumentNode):
        raise RichDocJSONError("Top-level node must be a 'doc'", {'type': node.kind})

    return node


def node_to_json(node: RichDocNode) -> Dict[str, Any]:
    """
    Convert a node tree to its JSON representation.

    Args:
        node: The node to convert

    Returns:
        A JSON-compatible dictionary
    """
    if isinstance(node, RichDocTextNode):
        data: Dict[str, Any] = {"type": "text", "text": node.text}
        if node.marks:
            data["marks"] = []
            for mark in node.marks:
                mark_data: Dict[str, Any] = {"type": mark.kind}
                if mark.attrs:
                    mark_data["attrs"] = mark.attrs

                data["marks"].append(mark_data)

        return data

    data = {"type": node.kind}
    if node.attrs:
        data["attrs"] = node.attrs

    if node.children:
        data["content"] = [node_to_json(child) for child in node.children]

    return data
