"""
Source mode rendering: showing markdown syntax over a rich document.

This package computes non-destructive syntax overlays for rich documents and
manages heading views that switch between formatted and editable source
presentation.
"""

from sourcemode.heading_key_handler import HeadingDeletionKeyHandler
from sourcemode.heading_node_view import (
    HeadingNodeView,
    NodeViewFactory,
    NodeViewPatched,
    NodeViewRecreate,
    NodeViewState,
    NodeViewUpdate,
    create_node_view_factory,
)
from sourcemode.source_mode_context import SourceModeContext
from sourcemode.source_mode_editor import SourceModeEditor
from sourcemode.source_mode_element import RenderedElement
from sourcemode.source_mode_emitter import SourceModeEmitter, compute_overlay
from sourcemode.source_mode_exceptions import SourceModeError, SourceModeSettingsError
from sourcemode.source_mode_extractor import SourceModeExtractor, extract_markers
from sourcemode.source_mode_renderer import SourceModeTextRenderer, render_overlay_text
from sourcemode.source_mode_resolver import SourceModeResolver
from sourcemode.source_mode_settings import SourceModeSettings
from sourcemode.source_mode_switcher import (
    EditorMode,
    get_editor_mode,
    heading_prefix_insertions,
    heading_prefix_removals,
    set_editor_mode,
)
from sourcemode.source_mode_types import (
    BlockMarker,
    BlockRangeTag,
    BoundaryEdge,
    DecorationSide,
    MarkBoundary,
    ResolvedMarker,
    SourceModeExtraction,
    SourceModeOverlay,
    SourceModePointDecoration,
    SourceModeRangeDecoration,
)


__all__ = [
    # Exceptions
    "SourceModeError",
    "SourceModeSettingsError",
    # Types
    "BlockMarker",
    "BlockRangeTag",
    "BoundaryEdge",
    "DecorationSide",
    "MarkBoundary",
    "ResolvedMarker",
    "SourceModeExtraction",
    "SourceModeOverlay",
    "SourceModePointDecoration",
    "SourceModeRangeDecoration",
    # Overlay computation
    "SourceModeExtractor",
    "SourceModeResolver",
    "SourceModeEmitter",
    "compute_overlay",
    "extract_markers",
    "SourceModeTextRenderer",
    "render_overlay_text",
    # Node views and keys
    "HeadingNodeView",
    "NodeViewFactory",
    "NodeViewPatched",
    "NodeViewRecreate",
    "NodeViewState",
    "NodeViewUpdate",
    "RenderedElement",
    "create_node_view_factory",
    "HeadingDeletionKeyHandler",
    # Editor
    "SourceModeContext",
    "SourceModeEditor",
    "SourceModeSettings",
    "EditorMode",
    "get_editor_mode",
    "set_editor_mode",
    "heading_prefix_insertions",
    "heading_prefix_removals",
]
