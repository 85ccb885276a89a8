import pytest

from dmacs.errors import EditorError
from dmacs.selection import Selection


def test_set_marker():
    selection = Selection()
    selection.set_marker((0, 0))
    assert selection.marker_pos == (0, 0)
    assert selection.is_selection_active()


def test_clear_marker():
    selection = Selection(marker_pos=(0, 0))
    selection.clear_marker()
    assert selection.marker_pos is None
    assert not selection.is_selection_active()


def test_highlight_selection_range():
    selection = Selection(marker_pos=(6, 0))
    assert selection.is_selection_active()
    assert selection.selection_range((0, 0)) == ((0, 0), (6, 0))


def test_range_without_marker():
    assert Selection().selection_range((3, 1)) is None


def test_cut_selection():
    lines = ["hello world"]
    selection = Selection(marker_pos=(6, 0))
    text, diff = selection.cut_selection(lines, (11, 0))
    assert text == "world"
    assert selection.marker_pos is None
    assert (diff.cursor_end_x, diff.cursor_end_y) == (6, 0)
    assert diff.old == ["world"]
    assert diff.new == []
    assert lines == ["hello world"]


def test_cut_selection_from_start_of_line():
    selection = Selection(marker_pos=(0, 0))
    text, diff = selection.cut_selection(["hello world"], (5, 0))
    assert text == "hello"
    assert selection.marker_pos is None
    assert (diff.cursor_end_x, diff.cursor_end_y) == (0, 0)


def test_cut_entire_line():
    selection = Selection(marker_pos=(0, 0))
    text, diff = selection.cut_selection(["hello world"], (11, 0))
    assert text == "hello world"
    assert diff.old == ["hello world"]
    assert (diff.start_x, diff.end_x) == (0, 11)


def test_cut_multiple_lines():
    lines = ["line one", "line two", "line three"]
    selection = Selection(marker_pos=(0, 0))
    text, diff = selection.cut_selection(lines, (10, 2))
    assert text == "line one\nline two\nline three"
    assert diff.old == ["line one", "line two", "line three"]
    assert (diff.start_x, diff.start_y, diff.end_x, diff.end_y) == (0, 0, 10, 2)
    assert (diff.cursor_start_x, diff.cursor_start_y) == (10, 2)
    assert (diff.cursor_end_x, diff.cursor_end_y) == (0, 0)
    assert selection.marker_pos is None


def test_cut_selection_marker_after_cursor():
    selection = Selection(marker_pos=(11, 0))
    text, diff = selection.cut_selection(["hello world"], (6, 0))
    assert text == "world"
    assert (diff.cursor_end_x, diff.cursor_end_y) == (6, 0)
    assert selection.marker_pos is None


def test_cut_without_marker():
    assert Selection().cut_selection(["hello"], (2, 0)) == ("", None)


def test_copy_selection():
    lines = ["hello world"]
    selection = Selection(marker_pos=(6, 0))
    assert selection.copy_selection(lines, (11, 0)) == "world"
    assert lines == ["hello world"]
    assert selection.marker_pos is None


def test_copy_multiple_lines_partial():
    selection = Selection(marker_pos=(5, 0))
    text = selection.copy_selection(["line one", "line two", "line three"], (4, 2))
    assert text == "one\nline two\nline"


def test_copy_matches_cut_text():
    lines = ["alpha", "beta", "gamma"]
    copied = Selection(marker_pos=(2, 0)).copy_selection(lines, (3, 2))
    cut, _ = Selection(marker_pos=(2, 0)).cut_selection(lines, (3, 2))
    assert copied == cut


def test_copy_without_marker():
    assert Selection().copy_selection(["hello"], (2, 0)) == ""


def test_copy_inside_character_raises():
    selection = Selection(marker_pos=(1, 0))
    with pytest.raises(EditorError):
        selection.copy_selection(["あい"], (3, 0))


def test_copy_out_of_bounds_raises():
    selection = Selection(marker_pos=(0, 0))
    with pytest.raises(EditorError):
        selection.copy_selection(["abc"], (10, 0))


def test_is_selected_single_line():
    selection = Selection(marker_pos=(6, 0))
    cursor = (11, 0)
    assert selection.is_selected(cursor, 0, 6)
    assert selection.is_selected(cursor, 0, 10)
    assert not selection.is_selected(cursor, 0, 11)
    assert not selection.is_selected(cursor, 0, 5)
    assert not selection.is_selected(cursor, 1, 6)


def test_is_selected_multi_line():
    selection = Selection(marker_pos=(2, 0))
    cursor = (3, 2)
    assert not selection.is_selected(cursor, 0, 1)
    assert selection.is_selected(cursor, 0, 2)
    assert selection.is_selected(cursor, 1, 0)
    assert selection.is_selected(cursor, 1, 100)
    assert selection.is_selected(cursor, 2, 2)
    assert not selection.is_selected(cursor, 2, 3)


def test_is_selected_without_marker():
    assert not Selection().is_selected((0, 0), 0, 0)