from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture
def app():
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    return at


def submit(at, refs, frames):
    at.text_input[0].set_value(refs)
    at.text_input[1].set_value(frames)
    at.slider[0].set_value(0.0)
    next(b for b in at.button if b.label == "Simulate").click()
    at.run()


def test_initial_render(app):
    assert not app.exception
    assert app.title[0].value == "LRU Page Replacement Visualizer"
    assert len(app.error) == 0


def test_empty_references_show_error(app):
    submit(app, "  , ", "3")
    assert not app.exception
    assert app.error[0].value == "Enter a reference string!"


def test_invalid_frames_show_error(app):
    submit(app, "1 2 3", "0")
    assert not app.exception
    assert app.error[0].value == "Enter a valid number of pages!"


def test_valid_run_shows_statistics(app):
    submit(app, "1 2 1", "2")
    assert not app.exception
    values = {m.label: m.value for m in app.metric}
    assert values["References"] == "3"
    assert values["Misses"] == "2"


def test_event_log_shows_page_names_verbatim(app):
    submit(app, "**x** _a_ **x**", "2")
    assert not app.exception
    lines = [t.value for t in app.text]
    assert lines[0] == "Hit: Page **x** in Frame 0"
    assert "Loaded: Page _a_ -> Frame 1" in lines


def test_hex_and_decimal_references_share_a_frame(app):
    submit(app, "0x10 16", "2")
    assert not app.exception
    values = {m.label: m.value for m in app.metric}
    assert values["Misses"] == "1"
