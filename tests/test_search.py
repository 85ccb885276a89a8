from dmacs.search import Search


def _type(search, text, lines, cursor):
    for char in text:
        moved = search.handle_char(char, lines, cursor)
        if moved is not None:
            cursor = moved
    return cursor


def test_search_mode_enter_and_exit():
    lines = ["test line one", "test line two"]
    search = Search()
    search.enter()
    assert search.mode
    assert search.status_text() == "Search: "

    cursor = _type(search, "t", lines, (0, 0))
    assert search.query == "t"
    assert search.status_text() == "Search: t"
    _type(search, "e", lines, cursor)
    assert search.query == "te"
    assert search.status_text() == "Search: te"

    assert search.handle_char("\n", lines, cursor) is None
    assert not search.mode
    assert search.status_text() == ""
    assert search.query == ""


def test_search_mode_escape_exit():
    lines = ["test line one"]
    search = Search()
    search.enter()
    assert search.status_text() == "Search: "
    _type(search, "e", lines, (0, 0))
    assert search.query == "e"
    assert search.status_text() == "Search: e"
    search.handle_char("\x1b", lines, (0, 0))
    assert not search.mode
    assert search.status_text() == ""
    assert search.query == ""


def test_search_next_and_previous_match():
    lines = ["apple banana apple", "orange apple grape"]
    search = Search()
    search.enter()
    cursor = _type(search, "apple", lines, (0, 0))
    assert cursor == (0, 0)

    assert search.handle_char("\x13", lines, cursor) == (13, 0)
    assert search.handle_char("\x13", lines, cursor) == (7, 1)
    assert search.handle_char("\x13", lines, cursor) == (0, 0)
    assert search.handle_char("\x12", lines, cursor) == (7, 1)
    assert search.handle_char("\x12", lines, cursor) == (13, 0)

    search.handle_char("\n", lines, cursor)
    assert not search.mode
    assert search.status_text() == ""


def test_ctrl_n_moves_to_next_match():
    lines = ["apple banana apple"]
    search = Search()
    search.enter()
    _type(search, "apple", lines, (0, 0))
    assert search.handle_char("\x0e", lines, (0, 0)) == (13, 0)


def test_search_no_match():
    lines = ["line one", "line two"]
    search = Search()
    search.enter()
    _type(search, "xyz", lines, (0, 0))
    assert search.query == "xyz"
    assert search.status_text() == "Search: xyz (No match)"
    assert search.results == []
    assert search.current_match_index is None

    search.handle_char("\n", lines, (0, 0))
    assert not search.mode
    assert search.status_text() == ""


def test_search_empty_query():
    lines = ["some text"]
    search = Search()
    search.enter()
    assert search.status_text() == "Search: "
    _type(search, "e", lines, (0, 0))
    assert search.query == "e"
    assert search.status_text() == "Search: e"
    assert search.handle_char("\x7f", lines, (0, 0)) is None
    assert search.query == ""
    assert search.status_text() == "Search: "
    assert search.results == []
    assert search.current_match_index is None


def test_find_starts_from_cursor():
    lines = ["apple banana apple", "orange apple grape"]
    search = Search(mode=True, query="apple")
    assert search.find(lines, (1, 0)) == (13, 0)
    assert search.current_match_index == 1


def test_find_wraps_to_first_match():
    lines = ["apple banana apple", "orange apple grape"]
    search = Search(mode=True, query="apple")
    assert search.find(lines, (10, 1)) == (0, 0)
    assert search.current_match_index == 0


def test_results_are_byte_offsets():
    search = Search(mode=True, query="a")
    search.find(["あa"], (0, 0))
    assert search.results == [(0, 3)]


def test_matches_do_not_overlap():
    search = Search(mode=True, query="aa")
    search.find(["aaaa"], (0, 0))
    assert search.results == [(0, 0), (0, 2)]


def test_next_and_prev_without_results():
    search = Search(mode=True)
    assert search.next_match() is None
    assert search.prev_match() is None
    assert search.current_match_index is None


def test_prev_without_selection_goes_to_last():
    search = Search(mode=True, results=[(0, 0), (1, 4)])
    assert search.prev_match() == (4, 1)
    assert search.current_match_index == 1


def test_enter_clears_previous_state():
    search = Search(mode=False, query="old", results=[(0, 0)], current_match_index=0)
    search.enter()
    assert search.mode
    assert search.query == ""
    assert search.results == []
    assert search.current_match() is None