"""Shared fixtures for source mode tests."""

import pytest
from PySide6.QtCore import QCoreApplication

from sourcemode import (
    SourceModeContext, SourceModeEditor, SourceModeSettings, compute_overlay, render_overlay_text
)


class SourceModeTestHelpers:
    """Helper utilities for checking overlays."""

    @staticmethod
    def render(doc, heading_markers: bool = True) -> str:
        """Render a document with its source mode overlay."""
        return render_overlay_text(doc, compute_overlay(doc, True, heading_markers))

    @staticmethod
    def marker_texts(overlay) -> list:
        """Get the text of every point decoration, in rendering order."""
        return [point.text for point in overlay.points]


class SignalRecorder:
    """Counts emissions of a signal."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    @property
    def count(self) -> int:
        """Number of emissions seen."""
        return len(self.calls)


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """Make sure a Qt core application exists for QObject signals."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])

    yield app


@pytest.fixture
def overlay_helpers():
    """Provide overlay helper utilities."""
    return SourceModeTestHelpers


@pytest.fixture
def sample_overlay_doc(helpers):
    """A document using every kind of syntax marker."""
    h = helpers
    return h.doc(
        h.heading(1, h.text("Intro")),
        h.para(h.text("see "), h.link("site", "https://example.com"), h.text(" now", "strong")),
        h.bullets(h.item(h.para(h.text("a")))),
        h.code("py", "x"),
        h.rule(),
    )


@pytest.fixture
def context():
    """A rendering context in formatted mode."""
    return SourceModeContext()


@pytest.fixture
def source_context():
    """A rendering context in source mode."""
    return SourceModeContext(True)


@pytest.fixture
def make_editor():
    """Build editors and dispose of them once the test is done."""
    editors = []

    def _make(doc, source_mode=False, fold_heading_prefix=True, context=None):
        settings = SourceModeSettings(source_mode=source_mode, fold_heading_prefix=fold_heading_prefix)
        editor = SourceModeEditor(doc, context=context, settings=settings)
        editors.append(editor)
        return editor

    yield _make

    for editor in editors:
        editor.dispose()


@pytest.fixture
def record_signal():
    """Provide a factory for signal recorders."""
    return SignalRecorder
