"""Tests for extracting block markers and mark boundaries."""

from richdoc import RichDocBlockNode, RichDocMark, RichDocTextNode
from sourcemode import BoundaryEdge, DecorationSide, SourceModeExtractor, extract_markers


class TestBlockMarkers:
    """Test block-level syntax markers."""

    def test_heading_prefix(self, helpers):
        """Test that a heading gets its hashes at the start of its content."""
        doc = helpers.doc(helpers.para(helpers.text("ab")), helpers.heading(3, helpers.text("Title")))
        extraction = extract_markers(doc)

        assert len(extraction.block_markers) == 1
        marker = extraction.block_markers[0]
        assert marker.position == 5
        assert marker.text == "### "
        assert marker.side == DecorationSide.BEFORE
        assert not marker.block
        assert "source-mode-heading-marker" in marker.css_class

    def test_heading_markers_can_be_suppressed(self, helpers):
        """Test that heading prefixes are left out when asked to."""
        doc = helpers.doc(helpers.heading(1, helpers.text("Title")))
        assert extract_markers(doc, heading_markers=False).block_markers == []

    def test_folded_heading_prefix_decided_per_heading(self, helpers):
        """Test that only headings already carrying their prefix skip the marker."""
        h = helpers
        doc = h.doc(
            h.heading(2, h.text("## Folded")),
            h.heading(2, h.text("Plain")),
            h.heading(2, h.text("#", "strong"), h.text("# Split")),
            h.heading(3, h.text("## Wrong level")),
        )
        markers = extract_markers(doc, fold_heading_prefix=True).block_markers
        assert [(m.position, m.text) for m in markers] == [(12, "## "), (29, "### ")]

    def test_blockquote(self, helpers):
        """Test the blockquote caret."""
        doc = helpers.doc(helpers.quote(helpers.para(helpers.text("q"))))
        markers = extract_markers(doc).block_markers
        assert [(m.position, m.text) for m in markers] == [(1, "> ")]

    def test_bullet_list(self, helpers):
        """Test that each bullet list item gets a bullet."""
        h = helpers
        doc = h.doc(h.bullets(h.item(h.para(h.text("one"))), h.item(h.para(h.text("two")))))
        markers = extract_markers(doc).block_markers
        assert [(m.position, m.text) for m in markers] == [(2, "- "), (9, "- ")]

    def test_ordered_list_numbering_from_start(self, helpers):
        """Test that ordered list numbers count up from the list's start."""
        h = helpers
        doc = h.doc(h.numbered(3, *[h.item(h.para(h.text(c))) for c in "abcd"]))
        markers = extract_markers(doc).block_markers
        assert [(m.position, m.text) for m in markers] == [(2, "3. "), (7, "4. "), (12, "5. "), (17, "6. ")]

    def test_ordered_list_default_start(self, helpers):
        """Test that ordered lists count from 1 by default."""
        h = helpers
        doc = h.doc(h.numbered(1, h.item(h.para(h.text("a"))), h.item(h.para(h.text("b")))))
        assert [m.text for m in extract_markers(doc).block_markers] == ["1. ", "2. "]

    def test_nested_lists(self, helpers):
        """Test that nested lists number independently."""
        h = helpers
        inner = h.numbered(1, h.item(h.para(h.text("x"))))
        doc = h.doc(h.numbered(5, h.item(h.para(h.text("a")), inner), h.item(h.para(h.text("b")))))
        markers = sorted(extract_markers(doc).block_markers, key=lambda m: m.position)
        assert [(m.position, m.text) for m in markers] == [(2, "5. "), (7, "1. "), (14, "6. ")]

    def test_code_block_fences(self, helpers):
        """Test that code blocks get block-level fences before and after."""
        doc = helpers.doc(helpers.para(helpers.text("a")), helpers.code("python", "x = 1"))
        markers = extract_markers(doc).block_markers

        assert len(markers) == 2
        opening, closing = markers
        assert (opening.position, opening.text, opening.side, opening.block) == (3, "```python", DecorationSide.BEFORE, True)
        assert (closing.position, closing.text, closing.side, closing.block) == (10, "```", DecorationSide.AFTER, True)
        assert "source-mode-code-fence" in opening.css_class

    def test_code_block_without_language(self, helpers):
        """Test the opening fence of a code block with no language."""
        doc = helpers.doc(helpers.code("", "x"))
        assert extract_markers(doc).block_markers[0].text == "```"

    def test_horizontal_rule_range_tag(self, helpers):
        """Test that a horizontal rule is tagged rather than given a marker."""
        doc = helpers.doc(helpers.para(helpers.text("a")), helpers.rule())
        extraction = extract_markers(doc)

        assert extraction.block_markers == []
        assert len(extraction.range_tags) == 1
        tag = extraction.range_tags[0]
        assert (tag.start, tag.end, tag.css_class, tag.syntax) == (3, 4, "source-mode-hr", "---")

    def test_unknown_block_gets_no_marker(self, helpers):
        """Test that blocks of unknown kinds are traversed but not marked."""
        callout = RichDocBlockNode("callout", [helpers.para(helpers.text("x", "strong"))])
        extraction = extract_markers(helpers.doc(callout))
        assert extraction.block_markers == []
        assert len(extraction.boundaries) == 2

    def test_empty_document(self, helpers):
        """Test that an empty document has nothing to extract."""
        extraction = extract_markers(helpers.doc())
        assert extraction.block_markers == []
        assert extraction.range_tags == []
        assert extraction.boundaries == []


class TestMarkBoundaries:
    """Test inline mark boundaries."""

    def test_start_and_end_per_mark(self, helpers):
        """Test that every mark on a run gives a start and an end."""
        doc = helpers.doc(helpers.para(helpers.text("x", "strong", "emphasis")))
        boundaries = extract_markers(doc).boundaries

        assert [(b.position, b.edge, b.mark_kind, b.priority) for b in boundaries] == [
            (1, BoundaryEdge.START, "strong", 2),
            (2, BoundaryEdge.END, "strong", 2),
            (1, BoundaryEdge.START, "emphasis", 3),
            (2, BoundaryEdge.END, "emphasis", 3),
        ]

    def test_priorities(self, helpers):
        """Test the nesting priority of each mark kind."""
        doc = helpers.doc(helpers.para(
            RichDocTextNode("x", [RichDocMark(kind) for kind in ("link", "strikethrough", "code", "highlight")])
        ))
        starts = [b for b in extract_markers(doc).boundaries if b.edge == BoundaryEdge.START]
        assert {b.mark_kind: b.priority for b in starts} == {
            "link": 0,
            "strikethrough": 1,
            "code": 4,
            "highlight": 5,
        }

    def test_adjacent_runs_are_not_merged(self, helpers):
        """Test that adjacent runs sharing a mark each get their own boundaries."""
        doc = helpers.doc(helpers.para(helpers.text("a", "strong"), helpers.text("b", "strong", "emphasis")))
        strong = [(b.position, b.edge) for b in extract_markers(doc).boundaries if b.mark_kind == "strong"]
        assert strong == [
            (1, BoundaryEdge.START),
            (2, BoundaryEdge.END),
            (2, BoundaryEdge.START),
            (3, BoundaryEdge.END),
        ]

    def test_link_href(self, helpers):
        """Test that link boundaries carry the destination."""
        doc = helpers.doc(helpers.para(helpers.link("site", "https://example.com")))
        boundaries = extract_markers(doc).boundaries
        assert {b.href for b in boundaries} == {"https://example.com"}

    def test_link_without_href(self, helpers):
        """Test that a link without a destination carries an empty one."""
        doc = helpers.doc(helpers.para(RichDocTextNode("x", [RichDocMark("link")])))
        assert {b.href for b in extract_markers(doc).boundaries} == {""}

    def test_marks_inside_nested_blocks(self, helpers):
        """Test that boundaries are found inside lists."""
        h = helpers
        doc = h.doc(h.bullets(h.item(h.para(h.text("ab", "code")))))
        positions = [(b.position, b.edge) for b in extract_markers(doc).boundaries]
        assert positions == [(3, BoundaryEdge.START), (5, BoundaryEdge.END)]

    def test_extractor_is_reusable(self, helpers):
        """Test that each extraction starts afresh."""
        extractor = SourceModeExtractor()
        doc = helpers.doc(helpers.heading(1, helpers.text("x", "strong")))
        first = extractor.extract(doc)
        second = extractor.extract(doc)
        assert first == second
        assert first is not second
