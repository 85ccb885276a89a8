# dmacs

Editing logic for a small, Emacs-flavoured text editor aimed at quick notes
and to-do lists. Each part works on plain Python values (a list of lines,
`(x, y)` positions) and can be used and tested on its own.

Cursor columns are UTF-8 byte offsets into a line; display columns account
for tab stops of 4 and for wide characters.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dmacs.scroll`: `Cursor` (`x`, `y`, `desired_x`, `last_action_was_kill`)
  and `Scroll` (`row_offset`, `col_offset`, `screen_rows`, `screen_cols`).
  `Scroll` moves a cursor over a list of lines (`move_cursor_up`,
  `move_cursor_down`, `move_cursor_left`, `move_cursor_right`), pages
  (`scroll_page_down`, `scroll_page_up`), jumps (`go_to_start_of_file`,
  `go_to_end_of_file`), clamps the cursor to its line (`clamp_cursor_x`) and
  keeps it inside the visible area (`follow_cursor`). `display_width` and
  `byte_pos_from_display_width` convert between byte offsets and screen
  columns.
- `dmacs.selection`: `Selection`, a marker-and-cursor region with
  `set_marker`, `clear_marker`, `is_selection_active`, `selection_range` and
  `is_selected`. `copy_selection` returns the selected text;
  `cut_selection` returns the text and an `ActionDiff` describing its
  removal. Neither changes the lines: applying the diff is up to the caller.
  Both clear the marker.
- `dmacs.search`: `Search`, an incremental search. `enter` and `exit` switch
  search mode; `find` collects every match and selects the first one at or
  after the cursor, wrapping to the first match; `next_match` and
  `prev_match` cycle. `handle_char` applies a typed character (Escape or
  Enter leave search mode, Ctrl+S and Ctrl+N go to the next match, Ctrl+R to
  the previous one, Backspace shortens the query). Methods that move the
  cursor return the new position as `(x, y)`. `status_text` gives
  `Search: <query>`, with ` (No match)` when nothing matches.
- `dmacs.display`: `is_separator_line`, `is_unchecked_checkbox`,
  `is_checked_checkbox`, and `line_style`, which classifies a line as a
  `LineStyle` (separator, comment, checked or unchecked checkbox, plain) with
  `dim` and `bold` properties. `status_bar` builds the top status line: file
  name (or `[No Name]`), a `*` when modified, the line count and a
  right-aligned message, fitted to the given width.
- `dmacs.command`: `execute_command` expands `/today` to the current date
  (`YYYY-MM-DD`) and `/now` to the date and time (`YYYY-MM-DD HH:MM`);
  anything else gives `None`.
- `dmacs.keys`: `Key` for non-character keys, `KeyEvent`, and `decode_key`,
  which reads the rest of an escape sequence through a callback and reports
  Alt combinations (Alt+arrow, Alt+Backspace, Alt+character) with
  `alt=True`. `QuitGuard` counts interrupts: `press` returns `True` on the
  second one, `reset` starts over. `QUIT_PROMPT` holds the confirmation
  message.
- `dmacs.persistence`: `CursorPosition` records (`to_json`, `from_json`)
  stored under `~/.dmacs/cursor_positions/`, each named by the SHA-256 of the
  file path (`cursor_position_file`). `save_cursor_position` and
  `load_cursor_position` write and read them; `get_cursor_position` returns
  `(cursor_x, cursor_y, scroll_row_offset, scroll_col_offset)` only when the
  stored modification time (nanoseconds since the epoch) still matches;
  `cleanup_old_cursor_position_files` deletes records not modified for three
  days. Every function takes a `home` argument to use in place of the user's
  home directory.
- `dmacs.errors`: `DmacsError` and its subclasses `TerminalError`,
  `EditorError` and `DocumentError`.

## Example

```python
from dmacs.scroll import Cursor, Scroll
from dmacs.search import Search

lines = ["apple banana apple", "orange apple grape"]
cursor = Cursor()
scroll = Scroll()
scroll.update_screen_size(24, 80)

search = Search()
search.enter()
for ch in "apple":
    search.handle_char(ch, lines, (cursor.x, cursor.y))
print(search.current_match())   # (0, 0)
print(search.next_match())      # (13, 0)
print(search.status_text())     # Search: apple

scroll.move_cursor_down(cursor, lines)
print(cursor.x, cursor.y)       # 0 1
```

## What it does not do

The package has no command to start an editor and draws nothing on a
terminal: there is no screen, input loop or document object that loads and
saves files. It provides the pieces such an editor is built from, and the
caller keeps the lines of text and applies edits itself.