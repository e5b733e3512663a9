import pytest

from toonkit.app_state import AppState, ConversionStats, Mode
from toonkit.options import (
    UNLIMITED_DEPTH,
    Delimiter,
    Indent,
    KeyFoldingMode,
    PathExpansionMode,
)
from toonkit.theme import Theme

PANELS = ["show_settings", "show_help", "show_file_browser", "show_history", "show_diff"]
TOGGLES = {
    "show_settings": "toggle_settings",
    "show_help": "toggle_help",
    "show_file_browser": "toggle_file_browser",
    "show_history": "toggle_history",
    "show_diff": "toggle_diff",
}


def test_mode_toggle_and_names():
    assert Mode.ENCODE.toggle() is Mode.DECODE
    assert Mode.DECODE.toggle() is Mode.ENCODE
    assert Mode.ENCODE.label() == "Encode (JSON → TOON)"
    assert Mode.DECODE.label() == "Decode (TOON → JSON)"
    assert Mode.ENCODE.short_name() == "Encode"
    assert Mode.DECODE.short_name() == "Decode"


def test_defaults():
    app = AppState()
    assert app.mode is Mode.ENCODE
    assert app.theme is Theme.DARK
    assert app.stats is None
    assert app.should_quit is False
    assert not any(getattr(app, p) for p in PANELS)


def test_toggle_mode_clears_messages():
    app = AppState()
    app.set_error("bad")
    app.toggle_mode()
    assert app.mode is Mode.DECODE
    assert app.error_message is None
    app.set_status("ok")
    app.toggle_mode()
    assert app.mode is Mode.ENCODE
    assert app.status_message is None


def test_toggle_theme_sets_status():
    app = AppState()
    app.toggle_theme()
    assert app.theme is Theme.LIGHT
    assert app.status_message == "Theme toggled"
    app.toggle_theme()
    assert app.theme is Theme.DARK


def test_error_and_status_replace_each_other():
    app = AppState()
    app.set_status("saved")
    app.set_error("oops")
    assert app.error_message == "oops"
    assert app.status_message is None
    app.set_status("saved")
    assert app.status_message == "saved"
    assert app.error_message is None


def test_quit():
    app = AppState()
    app.quit()
    assert app.should_quit is True


@pytest.mark.parametrize("panel", PANELS)
def test_panels_are_exclusive(panel):
    app = AppState()
    for other in PANELS:
        setattr(app, other, True)
    setattr(app, panel, False)
    getattr(app, TOGGLES[panel])()
    assert [p for p in PANELS if getattr(app, p)] == [panel]
    getattr(app, TOGGLES[panel])()
    assert not any(getattr(app, p) for p in PANELS)


def test_cycle_delimiter():
    app = AppState()
    seen = []
    for _ in range(3):
        app.cycle_delimiter()
        seen.append(app.encode_options.delimiter)
    assert seen == [Delimiter.TAB, Delimiter.PIPE, Delimiter.COMMA]


def test_indent_bounds():
    app = AppState()
    for _ in range(20):
        app.increase_indent()
    assert app.encode_options.indent == Indent(8)
    for _ in range(20):
        app.decrease_indent()
    assert app.encode_options.indent == Indent(1)


def test_toggle_fold_keys():
    app = AppState()
    app.toggle_fold_keys()
    assert app.encode_options.key_folding is KeyFoldingMode.SAFE
    app.toggle_fold_keys()
    assert app.encode_options.key_folding is KeyFoldingMode.OFF


def test_increase_flatten_depth():
    app = AppState()
    assert app.encode_options.flatten_depth == UNLIMITED_DEPTH
    app.increase_flatten_depth()
    assert app.encode_options.flatten_depth == 2
    for _ in range(20):
        app.increase_flatten_depth()
    assert app.encode_options.flatten_depth == 10


def test_decrease_flatten_depth():
    app = AppState()
    app.decrease_flatten_depth()
    assert app.encode_options.flatten_depth == UNLIMITED_DEPTH
    app.encode_options = app.encode_options.with_flatten_depth(4)
    app.decrease_flatten_depth()
    app.decrease_flatten_depth()
    assert app.encode_options.flatten_depth == 2
    app.decrease_flatten_depth()
    assert app.encode_options.flatten_depth == UNLIMITED_DEPTH


def test_toggle_flatten_depth():
    app = AppState()
    app.toggle_flatten_depth()
    assert app.encode_options.flatten_depth == 2
    app.increase_flatten_depth()
    app.toggle_flatten_depth()
    assert app.encode_options.flatten_depth == UNLIMITED_DEPTH


def test_decode_toggles():
    app = AppState()
    strict = app.decode_options.strict
    coerce = app.decode_options.coerce_types
    app.toggle_strict()
    app.toggle_coerce_types()
    app.toggle_expand_paths()
    assert app.decode_options.strict is (not strict)
    assert app.decode_options.coerce_types is (not coerce)
    assert app.decode_options.expand_paths is PathExpansionMode.SAFE
    app.toggle_expand_paths()
    assert app.decode_options.expand_paths is PathExpansionMode.OFF


def test_conversion_stats_holds_values():
    stats = ConversionStats(10, 6, 100, 60, 40.0, 40.0)
    app = AppState(stats=stats)
    assert app.stats.toon_tokens == 6
    assert app.stats.json_bytes == 100