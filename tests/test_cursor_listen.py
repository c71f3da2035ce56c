from __future__ import annotations

from prompt_cursor.cursor import Cursor, ListenResult
from prompt_cursor.keymaps import (
    KEY_BACKSPACE,
    KEY_BACKWARD,
    KEY_CTRL_H,
    KEY_ENTER,
    KEY_FORWARD,
    KEY_NONE,
    KeyBindings,
)


def test_first_typed_key_replaces_placeholder() -> None:
    cursor = Cursor("yes", erase_default=True)
    assert cursor.position == 0

    line, position, keep_going = cursor.listen("n", 0, "n")

    assert line == "n"
    assert position == 1
    assert keep_going is True
    assert cursor.erase is False


def test_typing_after_placeholder_cleared_inserts_at_caret() -> None:
    cursor = Cursor("yes", erase_default=True)
    cursor.listen("n", 0, "n")

    result = cursor.listen("o", 1, "o")

    assert result == ListenResult("no", 2, True)


def test_backward_arrow_moves_left_without_editing() -> None:
    cursor = Cursor("yes")
    assert cursor.position == 3

    result = cursor.listen(None, 3, KEY_BACKWARD)

    assert result.line == "yes"
    assert result.position == 2
    assert result.keep_going is True


def test_backward_arrow_keeps_erase_flag() -> None:
    cursor = Cursor("yes", erase_default=True)

    cursor.listen(None, 0, KEY_BACKWARD)

    assert cursor.erase is True
    assert cursor.position == 0


def test_forward_arrow_cancels_erase_and_moves() -> None:
    cursor = Cursor("yes", erase_default=True)

    result = cursor.listen(None, 0, KEY_FORWARD)

    assert cursor.erase is False
    assert result.line == "yes"
    assert result.position == 1

    typed = cursor.listen("a", 1, "a")
    assert typed.line == "yaes"


def test_forward_arrow_at_end_stays_put() -> None:
    cursor = Cursor("ab")

    result = cursor.listen(None, 2, KEY_FORWARD)

    assert result.position == 2


def test_backspace_in_placeholder_mode_clears_everything() -> None:
    cursor = Cursor("default", erase_default=True)

    result = cursor.listen(None, 0, KEY_BACKSPACE)

    assert result.line == ""
    assert result.position == 0
    assert cursor.erase is False


def test_backspace_while_editing_removes_previous_character() -> None:
    cursor = Cursor("abc")

    result = cursor.listen(None, 3, KEY_BACKSPACE)

    assert result.line == "ab"
    assert result.position == 2


def test_ctrl_h_is_also_backspace() -> None:
    cursor = Cursor("abc")

    result = cursor.listen(None, 3, KEY_CTRL_H)

    assert result.line == "ab"


def test_enter_stops_and_leaves_state_unchanged() -> None:
    cursor = Cursor("hello")
    cursor.place(2)

    result = cursor.listen(None, 2, KEY_ENTER)

    assert result == ListenResult("hello", 2, False)
    assert cursor.get() == "hello"
    assert cursor.position == 2


def test_enter_in_placeholder_mode_returns_default() -> None:
    cursor = Cursor("yes", erase_default=True)

    line, position, keep_going = cursor.listen(None, 0, KEY_ENTER)

    assert (line, position, keep_going) == ("yes", 0, False)
    assert cursor.erase is True


def test_none_key_only_reconciles_external_line() -> None:
    cursor = Cursor("ab")

    result = cursor.listen("cd", 2, KEY_NONE)

    assert result == ListenResult("abcd", 4, True)


def test_empty_key_is_treated_as_none() -> None:
    cursor = Cursor("ab", erase_default=True)

    result = cursor.listen(None, 0, "")

    assert result == ListenResult("ab", 0, True)
    assert cursor.erase is True


def test_external_line_is_inserted_not_diffed() -> None:
    cursor = Cursor("hello")

    result = cursor.listen("hell", 5, "x")

    assert result.line == "hellohell"
    assert result.position == 9


def test_other_key_without_line_while_editing_changes_nothing() -> None:
    cursor = Cursor("abc")

    result = cursor.listen(None, 3, "z")

    assert result == ListenResult("abc", 3, True)


def test_custom_key_bindings() -> None:
    keys = KeyBindings(submit=("\n",), backspace=("\x08",), forward=("l",), backward=("h",))
    cursor = Cursor("abc", keys=keys)

    assert cursor.listen(None, 3, "h").position == 2
    assert cursor.listen(None, 2, "l").position == 3
    assert cursor.listen(None, 3, "\n").keep_going is False


def test_position_stays_in_range_through_mixed_events() -> None:
    cursor = Cursor("yes", erase_default=True)
    events = [
        (None, KEY_BACKWARD),
        (None, KEY_FORWARD),
        ("xy", "x"),
        (None, KEY_BACKSPACE),
        (None, KEY_BACKSPACE),
        (None, KEY_BACKSPACE),
        (None, KEY_BACKSPACE),
        (None, KEY_BACKSPACE),
        (None, KEY_FORWARD),
        (None, KEY_FORWARD),
        (None, KEY_FORWARD),
    ]

    for line, key in events:
        result = cursor.listen(line, cursor.position, key)
        assert 0 <= result.position <= len(result.line)


def test_listen_records_erase_and_submit_events(recording_logger) -> None:
    cursor = Cursor("yes", erase_default=True)

    cursor.listen("n", 0, "n")
    cursor.listen(None, 1, KEY_ENTER)

    assert recording_logger.events() == ["cursor.erase_cleared", "cursor.submit"]
    assert recording_logger.profiled == ["cursor::listen", "cursor::listen"]
    assert recording_logger.components == ["cursor", "cursor"]
    assert ("action", "other") in recording_logger.context_history
    assert ("action", "submit") in recording_logger.context_history
    assert recording_logger.context == {}


def test_listen_keeps_typed_text_out_of_telemetry(recording_logger) -> None:
    cursor = Cursor("placeholder", erase_default=True)

    cursor.listen("secret", 0, "s")
    cursor.listen(None, cursor.position, KEY_BACKWARD)
    cursor.listen(None, cursor.position, KEY_ENTER)

    assert cursor.get() == "secret"
    dump = recording_logger.dump()
    assert "secret" not in dump
    assert "placeholder" not in dump
