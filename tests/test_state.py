"""End-to-end scenarios against OverlayState."""

import pytest

from floatsize.core.key_router import InputKey, KeyPress, Transition
from floatsize.core.resize_input import Stage
from floatsize.dispatch import ResizeCommand
from floatsize.exceptions import NoCurrentSessionError

from factories import floating_session, make_pane, make_session


def press(state, *keys):
    return [state.handle_key(KeyPress(key)) for key in keys]


def type_text(state, text):
    return [state.handle_key(KeyPress.character(c)) for c in text]


def test_starts_loading(state):
    assert state.is_loading
    assert state.handle_snapshot([floating_session(1)])
    assert not state.is_loading


def test_style_updates_always_render(state):
    assert state.handle_style({"fg": "#ffffff"})
    assert state.palette == {"fg": "#ffffff"}


def test_empty_workspace_never_sets_cursor(state):
    """Scenario A."""
    state.handle_snapshot([floating_session(0)])
    press(state, InputKey.DOWN, InputKey.UP)
    assert state.selection.cursor is None
    assert press(state, InputKey.ENTER) == [Transition.IGNORED]


def test_select_and_resize(state, dispatcher):
    """Scenario B."""
    state.handle_snapshot([floating_session(3)])
    press(state, InputKey.DOWN, InputKey.DOWN, InputKey.ENTER)
    assert state.selection.selected.pane_id == 2

    type_text(state, "80")
    press(state, InputKey.ENTER)
    type_text(state, "24")
    press(state, InputKey.ENTER)

    assert dispatcher.resizes == [
        ResizeCommand(tab_id=0, pane_id=2, is_plugin=False, width=80, height=24)
    ]
    assert state.resize_input.stage is Stage.AWAITING_WIDTH
    assert state.resize_input.buffer == ""


def test_out_of_range_width_clamps_to_zero(state):
    """Scenario C."""
    state.handle_snapshot([floating_session(1)])
    press(state, InputKey.DOWN, InputKey.ENTER)
    type_text(state, "999")
    press(state, InputKey.ENTER)
    assert state.resize_input.width == 0
    assert state.resize_input.stage is Stage.AWAITING_HEIGHT


def test_cursor_wraps_from_last(state):
    """Scenario D."""
    state.handle_snapshot([floating_session(3)])
    press(state, InputKey.UP)
    assert state.selection.cursor == 1
    press(state, InputKey.UP)
    assert state.selection.cursor == 3
    press(state, InputKey.DOWN)
    assert state.selection.cursor == 1


def test_selection_survives_vanished_tab(state):
    """Scenario E."""
    state.handle_snapshot([make_session({0: [make_pane(id=1)], 1: [make_pane(id=2)]})])
    press(state, InputKey.DOWN, InputKey.DOWN, InputKey.ENTER)
    before = state.selection.selected
    assert before.parent_tab.tab_id == 1

    state.handle_snapshot([make_session({0: [make_pane(id=1)]})])

    assert state.selection.selected is before


def test_second_cycle_needs_no_reselect(state, dispatcher):
    state.handle_snapshot([floating_session(1)])
    press(state, InputKey.DOWN, InputKey.ENTER)
    for width, height in [("10", "20"), ("30", "40")]:
        type_text(state, width)
        press(state, InputKey.ENTER)
        type_text(state, height)
        press(state, InputKey.ENTER)
    assert [(c.width, c.height) for c in dispatcher.resizes] == [(10, 20), (30, 40)]


def test_resize_after_pane_vanished_targets_last_known_pane(state, dispatcher):
    state.handle_snapshot([floating_session(2)])
    press(state, InputKey.DOWN, InputKey.DOWN, InputKey.ENTER)
    state.handle_snapshot([floating_session(1)])

    type_text(state, "5")
    press(state, InputKey.ENTER)
    type_text(state, "5")
    press(state, InputKey.ENTER)

    assert dispatcher.resizes[0].pane_id == 2


def test_cursor_stays_valid_when_panes_disappear(state):
    state.handle_snapshot([floating_session(5)])
    press(state, InputKey.UP)
    press(state, InputKey.UP)
    assert state.selection.cursor == 5

    state.handle_snapshot([floating_session(2)])
    assert state.selection.cursor == 2
    press(state, InputKey.DOWN)
    assert state.selection.cursor == 1


def test_cursor_follows_its_pane_after_reorder(state):
    state.handle_snapshot([make_session({0: [make_pane(id=1), make_pane(id=2), make_pane(id=3)]})])
    press(state, InputKey.DOWN, InputKey.DOWN)
    assert state.cursor_pane.pane_id == 2

    state.handle_snapshot([make_session({0: [make_pane(id=3), make_pane(id=1), make_pane(id=2)]})])
    assert state.selection.cursor == 3
    assert state.cursor_pane.pane_id == 2


def test_snapshot_without_current_session_is_fatal(state):
    state.handle_snapshot([floating_session(2)])
    with pytest.raises(NoCurrentSessionError):
        state.handle_snapshot([make_session({0: [make_pane()]}, is_current=False)])


def test_escape_without_selection_asks_host_to_hide(state, dispatcher):
    state.handle_snapshot([floating_session(1)])
    assert press(state, InputKey.ESCAPE) == [Transition.HIDE_OVERLAY]
    assert dispatcher.calls == [("hide_overlay", None)]


def test_teardown_clears_everything(state):
    state.handle_snapshot([floating_session(2)])
    press(state, InputKey.DOWN, InputKey.ENTER)
    type_text(state, "3")
    state.teardown()
    assert len(state.index) == 0
    assert state.selection.selected is None
    assert state.selection.cursor is None
    assert state.resize_input.is_pristine
