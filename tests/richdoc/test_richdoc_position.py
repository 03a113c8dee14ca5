"""Tests for resolved positions."""

import pytest

from richdoc import RichDocHeadingNode, RichDocPositionError


class TestResolve:
    """Test resolving positions against a document."""

    def test_position_inside_heading(self, sample_doc):
        """Test a position at the start of a heading's content."""
        resolved = sample_doc.resolve(1)
        assert resolved.depth == 1
        assert isinstance(resolved.parent, RichDocHeadingNode)
        assert resolved.parent_offset == 0
        assert resolved.start() == 1
        assert resolved.end() == 6

    def test_position_at_end_of_heading_content(self, sample_doc):
        """Test a position at the end of a heading's content."""
        resolved = sample_doc.resolve(6)
        assert isinstance(resolved.parent, RichDocHeadingNode)
        assert resolved.parent_offset == 5

    def test_position_between_blocks(self, sample_doc):
        """Test that a position between blocks belongs to the document."""
        resolved = sample_doc.resolve(7)
        assert resolved.depth == 0
        assert resolved.parent is sample_doc
        assert resolved.parent_offset == 7

    def test_nested_position(self, sample_doc):
        """Test a position inside a paragraph inside a list item."""
        resolved = sample_doc.resolve(23)
        assert resolved.depth == 3
        assert resolved.parent.kind == "paragraph"
        assert resolved.node(1).kind == "bullet_list"
        assert resolved.node(2).kind == "list_item"
        assert resolved.parent_offset == 1

    def test_before_and_after(self, sample_doc):
        """Test the positions around an ancestor."""
        resolved = sample_doc.resolve(23)
        assert resolved.before() == 21
        assert resolved.after() == 26
        assert resolved.before(1) == 19
        assert resolved.after(1) == 35

    def test_document_bounds(self, sample_doc):
        """Test that both document edges resolve."""
        assert sample_doc.resolve(0).depth == 0
        assert sample_doc.resolve(35).depth == 0

    def test_out_of_range(self, sample_doc):
        """Test that positions outside the document raise."""
        with pytest.raises(RichDocPositionError) as exc_info:
            sample_doc.resolve(36)

        assert exc_info.value.error_details['document_size'] == 35

        with pytest.raises(RichDocPositionError):
            sample_doc.resolve(-1)

    def test_no_position_before_document(self, sample_doc):
        """Test that the document itself has no before or after position."""
        resolved = sample_doc.resolve(7)
        with pytest.raises(RichDocPositionError):
            resolved.before()

        with pytest.raises(RichDocPositionError):
            resolved.after()

    def test_invalid_depth(self, sample_doc):
        """Test that asking for a depth deeper than the position raises."""
        with pytest.raises(RichDocPositionError):
            sample_doc.resolve(1).node(4)

    def test_position_in_empty_heading(self, helpers):
        """Test the single position inside an empty heading."""
        doc = helpers.doc(helpers.heading(1))
        resolved = doc.resolve(1)
        assert isinstance(resolved.parent, RichDocHeadingNode)
        assert resolved.parent_offset == 0
        assert resolved.parent.content_size == 0
