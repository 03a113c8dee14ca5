"""
Mode-aware node view for headings.

A heading view renders either the formatted heading or an editable source
form. The mode is read once, when the view is created, and is then frozen on
the view. Updates that arrive after the mode has flipped, or after the
heading's level has changed, cannot be patched in place: the view answers
with a recreate result and the host builds a fresh view, which picks up the
new mode and level.
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
from typing import Callable, Dict, Tuple, Type, Union

from richdoc import RichDocHeadingNode, RichDocNode

from sourcemode.source_mode_context import SourceModeContext
from sourcemode.source_mode_element import RenderedElement
from sourcemode.source_mode_syntax import heading_prefix


class NodeViewState(Enum):
    """Rendering state of a node view."""

    FORMATTED = auto()
    SOURCE_EDITABLE = auto()


@dataclass(frozen=True)
class NodeViewPatched:
    """The view was updated in place."""

    view: "HeadingNodeView"


@dataclass(frozen=True)
class NodeViewRecreate:
    """The view cannot represent the update and must be rebuilt."""

    reason: str


NodeViewUpdate = Union[NodeViewPatched, NodeViewRecreate]


class HeadingNodeView:
    """View for a single heading node."""

    EMPTY_CLASS = "heading-empty"

    def __init__(self, node: RichDocHeadingNode, context: SourceModeContext) -> None:
        """
        Create the view, entering the state that matches the current mode.

        Args:
            node: The heading node to render
            context: Rendering context holding the mode flag
        """
        self._logger = logging.getLogger("HeadingNodeView")
        self._context = context
        self._created_in_source_mode = context.is_source_mode()
        self._level = node.level
        self._destroyed = False
        self._empty = False

        if self._created_in_source_mode:
            self._state = NodeViewState.SOURCE_EDITABLE
            self._element, self._content_element = self._build_source_editable()

        else:
            self._state = NodeViewState.FORMATTED
            self._element, self._content_element = self._build_formatted()

        self._patch_content(node)

    def _build_formatted(self) -> Tuple[RenderedElement, RenderedElement]:
        element = RenderedElement(f"h{self._level}")

        # The placeholder keeps the prefix visible while the heading is empty
        element.set_attribute("data-placeholder", heading_prefix(self._level))
        content = element.append_child(RenderedElement("span"))
        return element, content

    def _build_source_editable(self) -> Tuple[RenderedElement, RenderedElement]:
        element = RenderedElement("div", ["heading-source-mode", f"heading-level-{self._level}"])
        element.set_attribute("data-level", str(self._level))

        # One editable region holds all of the heading's text, prefix included
        content = element.append_child(RenderedElement("span", ["heading-content"]))
        return element, content

    def _patch_content(self, node: RichDocHeadingNode) -> None:
        self._content_element.text = node.text_content
        self._empty = node.content_size == 0
        if self._empty:
            self._element.add_class(self.EMPTY_CLASS)

        else:
            self._element.remove_class(self.EMPTY_CLASS)

    @property
    def state(self) -> NodeViewState:
        """The view's rendering state."""
        return self._state

    @property
    def created_in_source_mode(self) -> bool:
        """The mode flag frozen when the view was created."""
        return self._created_in_source_mode

    @property
    def level(self) -> int:
        """The heading level the view was created for."""
        return self._level

    @property
    def element(self) -> RenderedElement:
        """The view's outer element."""
        return self._element

    @property
    def content_element(self) -> RenderedElement:
        """The editable region holding the heading's content."""
        return self._content_element

    @property
    def is_empty(self) -> bool:
        """True while the heading has no content."""
        return self._empty

    @property
    def destroyed(self) -> bool:
        """True once the view has been destroyed."""
        return self._destroyed

    def update(self, node: RichDocNode) -> NodeViewUpdate:
        """
        Try to patch the view with an updated node.

        Args:
            node: The updated node

        Returns:
            NodeViewPatched if the view was updated in place, or
            NodeViewRecreate if the host must discard this view and create a new one
        """
        if self._destroyed:
            return NodeViewRecreate("view destroyed")

        if not isinstance(node, RichDocHeadingNode):
            return NodeViewRecreate(f"node kind changed to '{node.kind}'")

        if self._context.is_source_mode() != self._created_in_source_mode:
            self._logger.debug("Mode changed since heading view was created, recreating")
            return NodeViewRecreate("mode changed")

        if node.level != self._level:
            return NodeViewRecreate(f"level changed from {self._level} to {node.level}")

        self._patch_content(node)
        return NodeViewPatched(self)

    def destroy(self) -> None:
        """Destroy the view; no further updates can be applied."""
        self._destroyed = True
        self._element.children.clear()


NodeViewFactory = Callable[[RichDocNode], HeadingNodeView]

_NODE_VIEW_CLASSES: Dict[str, Type[HeadingNodeView]] = {
    RichDocHeadingNode.kind: HeadingNodeView,
}


def create_node_view_factory(kind: str, context: SourceModeContext) -> NodeViewFactory | None:
    """
    Create a view factory for a node kind.

    Args:
        kind: The node kind
        context: Rendering context passed to every view the factory creates

    Returns:
        A factory building views for nodes of the kind, or None if the kind
        uses the host's default rendering
    """
    view_class = _NODE_VIEW_CLASSES.get(kind)
    if view_class is None:
        return None

    def factory(node: RichDocNode) -> HeadingNodeView:
        if not isinstance(node, RichDocHeadingNode):
            raise TypeError(f"Cannot create a heading view for a '{node.kind}' node")

        return view_class(node, context)

    return factory
