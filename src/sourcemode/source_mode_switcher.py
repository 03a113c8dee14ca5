"""Switching an editor between formatted and source presentation."""

from enum import Enum
import logging
from typing import List, Tuple

from richdoc import (
    RichDocChange, RichDocDeleteChange, RichDocDocumentNode, RichDocHeadingNode, RichDocInsertTextChange
)

from sourcemode.source_mode_editor import SourceModeEditor
from sourcemode.source_mode_syntax import heading_prefix


logger = logging.getLogger("SourceModeSwitcher")


class EditorMode(Enum):
    """Presentation mode of an editor."""

    WYSIWYG = "wysiwyg"
    SOURCE = "source"


def _headings_last_first(doc: RichDocDocumentNode) -> List[Tuple[int, RichDocHeadingNode]]:
    headings = [(pos, node) for node, pos in doc.descendants() if isinstance(node, RichDocHeadingNode)]
    headings.reverse()
    return headings


def heading_prefix_insertions(doc: RichDocDocumentNode) -> List[RichDocChange]:
    """
    Build the changes that put each heading's prefix into its text.

    The changes run from the last heading to the first, so each one is valid
    against the document left by the ones before it.

    Args:
        doc: The document

    Returns:
        One insertion per heading, none of them recorded in history
    """
    return [
        RichDocInsertTextChange(pos + 1, heading_prefix(node.level), add_to_history=False)
        for pos, node in _headings_last_first(doc)
    ]


def heading_prefix_removals(doc: RichDocDocumentNode) -> List[RichDocChange]:
    """
    Build the changes that take each heading's prefix out of its text.

    Headings whose text does not start with their prefix are left alone.

    Args:
        doc: The document

    Returns:
        One deletion per prefixed heading, last heading first, none of them
        recorded in history
    """
    changes: List[RichDocChange] = []
    for pos, node in _headings_last_first(doc):
        prefix = heading_prefix(node.level)

        # The prefix may be split over differently marked runs
        if node.text_content.startswith(prefix):
            changes.append(RichDocDeleteChange(pos + 1, pos + 1 + len(prefix), add_to_history=False))

    return changes


def get_editor_mode(editor: SourceModeEditor) -> EditorMode:
    """
    Get an editor's presentation mode.

    Args:
        editor: The editor

    Returns:
        The editor's mode
    """
    return EditorMode.SOURCE if editor.context.is_source_mode() else EditorMode.WYSIWYG


def set_editor_mode(editor: SourceModeEditor, mode: EditorMode) -> None:
    """
    Switch an editor's presentation mode.

    When the editor folds heading prefixes into heading text, the prefixes are
    removed before leaving source mode and inserted after entering it, so the
    heading views that are rebuilt for the new mode see the matching text.

    Args:
        editor: The editor
        mode: The mode to switch to
    """
    was_source = editor.context.is_source_mode()
    enable_source = mode == EditorMode.SOURCE
    if was_source == enable_source:
        return

    fold = editor.settings.fold_heading_prefix

    if was_source and fold:
        if not editor.dispatch_changes(heading_prefix_removals(editor.doc)):
            logger.warning("Heading prefix removal failed, switching mode with prefixes in place")

    editor.context.set_source_mode(enable_source)

    if enable_source and fold:
        if not editor.dispatch_changes(heading_prefix_insertions(editor.doc)):
            logger.warning("Heading prefix insertion failed")
