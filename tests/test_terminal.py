import io

import pytest

from hoteldesk.terminal import HIGHLIGHT, RESET, Key, ListCursor, Terminal, highlight


def make_terminal(text="", keys=None):
    return Terminal(stdin=io.StringIO(text), stdout=io.StringIO(), keys=keys)


def test_highlight_selected_and_plain():
    assert highlight("abc", True) == "\033[38;5;0;48;5;15mabc\x1b[0m"
    assert highlight("abc", False) == "abc\x1b[0m"
    assert highlight("x", True).startswith(HIGHLIGHT)
    assert highlight("x", False).endswith(RESET)


def test_read_key_translates_characters():
    terminal = make_terminal(keys=["\r", "\n", "\x7f", "\x08", "\x1b", "a", Key.UP])
    got = [terminal.read_key() for _ in range(7)]
    assert got == [Key.ENTER, Key.ENTER, Key.BACKSPACE, Key.BACKSPACE, Key.ESC, "a", Key.UP]


def test_read_key_exhausted_raises():
    terminal = make_terminal(keys=[])
    with pytest.raises(EOFError):
        terminal.read_key()


def test_ctrl_c_interrupts():
    terminal = make_terminal(keys=["\x03"])
    with pytest.raises(KeyboardInterrupt):
        terminal.read_key()


def test_prompt_reads_line_and_writes_text():
    terminal = make_terminal("hello world\n")
    assert terminal.prompt("Q? ") == "hello world"
    assert terminal.stdout.getvalue() == "Q? "


def test_prompt_at_end_raises():
    terminal = make_terminal("")
    with pytest.raises(EOFError):
        terminal.prompt("Q? ")


def test_prompt_int():
    terminal = make_terminal("5\nabc\n  7 \n")
    assert terminal.prompt_int("") == 5
    assert terminal.prompt_int("") is None
    assert terminal.prompt_int("") == 7


def test_home_writes_cursor_sequence():
    terminal = make_terminal()
    terminal.home()
    assert terminal.stdout.getvalue() == "\033[0;0H"


def test_pause_consumes_one_key():
    terminal = make_terminal(keys=["x", "y"])
    terminal.pause()
    assert terminal.read_key() == "y"


def test_cursor_short_list_shows_everything():
    cursor = ListCursor(4)
    assert list(cursor.visible()) == [0, 1, 2, 3]
    assert cursor.selected == 0


def test_cursor_up_at_top_stays():
    cursor = ListCursor(5)
    cursor.move_up()
    assert cursor.selected == 0
    assert cursor.start == 0


def test_cursor_down_stops_at_last():
    cursor = ListCursor(3)
    for _ in range(10):
        cursor.move_down()
    assert cursor.selected == 2


@pytest.mark.parametrize("size", [0, 1, 9, 10, 11, 25])
def test_cursor_selection_stays_visible(size):
    cursor = ListCursor(size, 10)
    for _ in range(size + 3):
        cursor.move_down()
        if size:
            assert cursor.selected in cursor.visible()
        assert cursor.stop - cursor.start <= 10
        assert cursor.stop <= size
    if size:
        assert cursor.selected == size - 1
    assert cursor.stop == min(size, max(cursor.stop, 0))
    for _ in range(size + 3):
        cursor.move_up()
        if size:
            assert cursor.selected in cursor.visible()
    assert cursor.selected == 0


def test_cursor_scrolls_to_end():
    cursor = ListCursor(25, 10)
    for _ in range(30):
        cursor.move_down()
    assert cursor.stop == 25
    assert cursor.stop - cursor.start == 10


def test_cursor_reset():
    cursor = ListCursor(25)
    for _ in range(15):
        cursor.move_down()
    cursor.reset(3)
    assert (cursor.selected, cursor.start, cursor.stop) == (0, 0, 3)


def test_cursor_shrink_moves_back():
    cursor = ListCursor(5)
    for _ in range(3):
        cursor.move_down()
    before = cursor.selected
    cursor.shrink(4)
    assert cursor.selected == before - 1
    assert cursor.stop <= 4