"""Tests for the mode-aware heading node view."""

import pytest

from sourcemode import (
    HeadingNodeView, NodeViewPatched, NodeViewRecreate, NodeViewState, create_node_view_factory
)


class TestCreation:
    """Test the state a view is created in."""

    def test_formatted(self, helpers, context):
        """Test a view created outside source mode."""
        view = HeadingNodeView(helpers.heading(2, helpers.text("Title")), context)

        assert view.state == NodeViewState.FORMATTED
        assert not view.created_in_source_mode
        assert view.element.tag == "h2"
        assert view.element.attributes["data-placeholder"] == "## "
        assert view.content_element.tag == "span"
        assert view.content_element.text == "Title"
        assert not view.element.has_class(HeadingNodeView.EMPTY_CLASS)

    def test_source_editable(self, helpers, source_context):
        """Test a view created in source mode."""
        view = HeadingNodeView(helpers.heading(3, helpers.text("### Title")), source_context)

        assert view.state == NodeViewState.SOURCE_EDITABLE
        assert view.created_in_source_mode
        assert view.element.tag == "div"
        assert view.element.classes == ["heading-source-mode", "heading-level-3"]
        assert view.element.attributes["data-level"] == "3"
        assert view.element.children == [view.content_element]
        assert view.content_element.has_class("heading-content")
        assert view.content_element.editable
        assert view.content_element.text == "### Title"

    def test_empty_heading(self, helpers, context, source_context):
        """Test that an empty heading is flagged in both states."""
        for ctx in (context, source_context):
            view = HeadingNodeView(helpers.heading(1), ctx)
            assert view.is_empty
            assert view.element.has_class(HeadingNodeView.EMPTY_CLASS)


class TestUpdate:
    """Test patching and recreating views."""

    def test_patch_in_place(self, helpers, context):
        """Test that a content change with the same mode and level is patched."""
        view = HeadingNodeView(helpers.heading(2, helpers.text("Old")), context)
        element = view.element

        result = view.update(helpers.heading(2, helpers.text("New")))

        assert isinstance(result, NodeViewPatched)
        assert result.view is view
        assert view.element is element
        assert view.content_element.text == "New"

    def test_patch_toggles_empty(self, helpers, source_context):
        """Test that the empty flag follows the content."""
        view = HeadingNodeView(helpers.heading(2, helpers.text("x")), source_context)
        view.update(helpers.heading(2))
        assert view.element.has_class(HeadingNodeView.EMPTY_CLASS)

        view.update(helpers.heading(2, helpers.text("y")))
        assert not view.element.has_class(HeadingNodeView.EMPTY_CLASS)

    def test_mode_flip_requires_recreate(self, helpers, context):
        """Test that a view never patches across a mode change."""
        node = helpers.heading(2, helpers.text("Title"))
        view = HeadingNodeView(node, context)

        context.set_source_mode(True)
        result = view.update(node)

        assert isinstance(result, NodeViewRecreate)
        assert view.state == NodeViewState.FORMATTED

        fresh = HeadingNodeView(node, context)
        assert fresh.state == NodeViewState.SOURCE_EDITABLE

    def test_mode_flip_back_allows_patch(self, helpers, context):
        """Test that the frozen flag is compared, not the number of flips."""
        node = helpers.heading(2, helpers.text("Title"))
        view = HeadingNodeView(node, context)

        context.set_source_mode(True)
        context.set_source_mode(False)
        assert isinstance(view.update(node), NodeViewPatched)

    def test_level_change_requires_recreate(self, helpers, source_context):
        """Test that a new level cannot be patched in."""
        view = HeadingNodeView(helpers.heading(2, helpers.text("T")), source_context)
        result = view.update(helpers.heading(3, helpers.text("T")))
        assert isinstance(result, NodeViewRecreate)
        assert "level" in result.reason

    def test_other_kind_requires_recreate(self, helpers, context):
        """Test that a node of another kind cannot be patched in."""
        view = HeadingNodeView(helpers.heading(2, helpers.text("T")), context)
        assert isinstance(view.update(helpers.para(helpers.text("T"))), NodeViewRecreate)

    def test_destroyed_view_requires_recreate(self, helpers, context):
        """Test that a destroyed view never patches."""
        node = helpers.heading(2, helpers.text("T"))
        view = HeadingNodeView(node, context)
        view.destroy()

        assert view.destroyed
        assert view.element.children == []
        assert isinstance(view.update(node), NodeViewRecreate)


class TestFactory:
    """Test node view factories."""

    def test_heading_factory(self, helpers, source_context):
        """Test that headings get a factory that builds heading views."""
        factory = create_node_view_factory("heading", source_context)
        view = factory(helpers.heading(1, helpers.text("x")))
        assert isinstance(view, HeadingNodeView)
        assert view.state == NodeViewState.SOURCE_EDITABLE

    @pytest.mark.parametrize("kind", ["paragraph", "code_block", "blockquote", "text"])
    def test_other_kinds_use_default_rendering(self, kind, context):
        """Test that kinds without a view get no factory."""
        assert create_node_view_factory(kind, context) is None

    def test_factory_rejects_other_nodes(self, helpers, context):
        """Test that a heading factory refuses other kinds of node."""
        factory = create_node_view_factory("heading", context)
        with pytest.raises(TypeError):
            factory(helpers.para())
