import pytest

from linecounter.core.events import (
    RequestFileDialog, PathChosen, RequestCount, CountFinished, RequestCopy,
    OpenFilePicker, CountLines, WriteClipboard,
)
from linecounter.core.session_state import Phase, SessionState
from linecounter.core.transitions import transition, format_clipboard_text
from linecounter.services.line_counter import LineCountResult


@pytest.fixture
def selected() -> SessionState:
    return SessionState(selected_path="/tmp/a.txt", status_message="file selected: /tmp/a.txt")


@pytest.fixture
def counted() -> SessionState:
    return SessionState(selected_path="/tmp/a.txt", last_count=5, status_message="counted: 5")


def test_initial_state_is_idle_and_ready():
    state = SessionState()
    assert state.phase is Phase.IDLE
    assert state.selected_path is None
    assert state.last_count is None
    assert state.status_message == "ready"


def test_request_file_dialog_only_opens_picker(counted):
    new_state, effects = transition(counted, RequestFileDialog())
    assert new_state == counted
    assert effects == [OpenFilePicker()]


def test_path_chosen_selects_file_and_clears_count(counted):
    new_state, effects = transition(counted, PathChosen("/tmp/b.txt"))
    assert new_state.selected_path == "/tmp/b.txt"
    assert new_state.last_count is None
    assert new_state.status_message == "file selected: /tmp/b.txt"
    assert new_state.phase is Phase.PATH_SELECTED
    assert effects == []


def test_choosing_same_path_again_still_clears_count(counted):
    new_state, _ = transition(counted, PathChosen("/tmp/a.txt"))
    assert new_state.last_count is None


@pytest.mark.parametrize("state", [SessionState(), SessionState("/tmp/a.txt", 5, "counted: 5")])
def test_empty_path_chosen_changes_nothing(state):
    assert transition(state, PathChosen("")) == (state, [])


def test_count_without_path_reports_error():
    new_state, effects = transition(SessionState(), RequestCount())
    assert new_state.status_message == "error: select a file first"
    assert new_state.phase is Phase.IDLE
    assert new_state.is_error
    assert effects == []


def test_count_with_path_requests_counting(selected):
    new_state, effects = transition(selected, RequestCount())
    assert new_state == selected
    assert effects == [CountLines("/tmp/a.txt")]


def test_successful_count(selected):
    new_state, effects = transition(selected, CountFinished("/tmp/a.txt", LineCountResult.success(42)))
    assert new_state.last_count == 42
    assert new_state.status_message == "counted: 42"
    assert new_state.phase is Phase.COUNTED
    assert effects == []


def test_failed_count_keeps_path_and_clears_count(counted):
    new_state, _ = transition(counted, CountFinished("/tmp/a.txt", LineCountResult.failure("permission denied")))
    assert new_state.selected_path == "/tmp/a.txt"
    assert new_state.last_count is None
    assert new_state.status_message == "error: permission denied"
    assert new_state.phase is Phase.PATH_SELECTED


def test_result_for_other_path_is_ignored(selected):
    new_state, effects = transition(selected, CountFinished("/tmp/old.txt", LineCountResult.success(7)))
    assert new_state == selected
    assert effects == []


def test_copy_without_count(selected):
    new_state, effects = transition(selected, RequestCopy())
    assert new_state.status_message == "nothing to copy"
    assert new_state.selected_path == selected.selected_path
    assert new_state.last_count is None
    assert effects == []


def test_copy_with_count_writes_clipboard(counted):
    new_state, effects = transition(counted, RequestCopy())
    assert effects == [WriteClipboard("file: /tmp/a.txt\nline count: 5")]
    assert new_state.status_message == "copied to clipboard"
    assert new_state.last_count == 5
    assert new_state.phase is Phase.COUNTED


def test_copy_zero_count():
    state = SessionState("/tmp/empty.txt", 0, "counted: 0")
    _, effects = transition(state, RequestCopy())
    assert effects == [WriteClipboard("file: /tmp/empty.txt\nline count: 0")]


def test_format_clipboard_text():
    assert format_clipboard_text("/x", 3) == "file: /x\nline count: 3"


def test_unknown_event_is_rejected():
    with pytest.raises(TypeError):
        transition(SessionState(), object())
