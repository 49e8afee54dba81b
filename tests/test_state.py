import pytest

from untitled_dm.state import NO_SELECTION, SelectionState


@pytest.mark.parametrize("size", [1, 2, 5])
def test_move_down_wraps_back_to_start(size):
    state = SelectionState([str(i) for i in range(size)])
    for _ in range(size):
        state.move_down()
    assert state.cursor == 0


@pytest.mark.parametrize("size", [1, 2, 5])
def test_move_up_wraps_back_to_start(size):
    state = SelectionState([str(i) for i in range(size)])
    state.move_down()
    start = state.cursor
    for _ in range(size):
        state.move_up()
    assert state.cursor == start


def test_move_up_from_first_goes_to_last():
    state = SelectionState(["a", "b", "c"])
    state.move_up()
    assert state.cursor == 2
    state.move_down()
    assert state.cursor == 0


def test_toggle_select_is_self_cancelling():
    state = SelectionState(["a", "b"])
    state.toggle_select()
    assert state.selected == 0
    state.toggle_select()
    assert state.selected == NO_SELECTION


def test_toggle_select_replaces_previous_selection():
    state = SelectionState(["a", "b", "c"])
    state.toggle_select()
    state.move_down()
    state.move_down()
    state.toggle_select()
    assert state.selected == 2


def test_initial_state():
    state = SelectionState(["a", "b", "c"], selected=2, quit_on_error=True)
    assert state.cursor == 0
    assert state.selected == 2
    assert state.last_output == ""
    assert state.last_error is None
    assert state.quit_on_error is True


@pytest.mark.parametrize("selected", [3, 10, -5])
def test_out_of_range_default_selection_means_none(selected):
    state = SelectionState(["a", "b", "c"], selected=selected)
    assert state.selected == NO_SELECTION


def test_no_choices_navigation_is_noop():
    state = SelectionState([])
    state.move_up()
    state.move_down()
    state.toggle_select()
    assert state.cursor == 0
    assert state.selected == NO_SELECTION
    assert len(state) == 0


def test_run_completed_clears_error():
    state = SelectionState(["a"])
    state.run_failed("partial\n", "exit status 1")
    state.run_completed("done\n")
    assert state.last_error is None
    assert state.last_output == "done\n"


@pytest.mark.parametrize("quit_on_error", [True, False])
def test_run_failed_reports_terminal(quit_on_error):
    state = SelectionState(["a"], quit_on_error=quit_on_error)
    assert state.run_failed("out", "exit status 2") is quit_on_error
    assert state.last_error == "exit status 2"
    assert state.last_output == "out"


def test_quit_on_error_is_read_only():
    state = SelectionState(["a"])
    with pytest.raises(AttributeError):
        state.quit_on_error = True
