"""Shared fixtures for rich document tests."""

import pytest


@pytest.fixture
def sample_doc(helpers):
    """A document with a heading, a paragraph and a list."""
    h = helpers
    return h.doc(
        h.heading(2, h.text("Title")),
        h.para(h.text("plain "), h.text("bold", "strong")),
        h.bullets(h.item(h.para(h.text("one"))), h.item(h.para(h.text("two")))),
    )
