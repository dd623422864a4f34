# easyedit

A small modal text editor for the terminal. It opens one file, shows it
full-screen and lets you move around, edit, select, copy and paste in a
vi-like style. It needs a POSIX terminal, because it switches the terminal
into raw mode through `termios`.

## Installing

```
pip install .
```

## Running

```
easyedit notes.txt
```

With no file name, `MainMenu.txt` in the current directory is opened. A file
that does not exist yet is created empty and marked `[ NEW ]` in the status
bar. Files are read and written as UTF-8.

The screen shows the text, a status bar (mode, file name, line count,
`(modified)`, and the cursor's line and column) and a message bar showing the
last message with the time it was set.

## Modes and keys

The editor starts in normal mode.

Normal mode:

- `h` `j` `k` `l` move the cursor left, down, up, right
- `i` records an undo point and enters insert mode
- `v` starts a selection; pressing `v` again cancels it and returns the
  cursor to where the selection began. While selecting, the arrow keys
  extend it.
- `y` copies the selection to the clipboard; `Ctrl-Y` copies it, ends the
  selection and returns the cursor to where it began
- `d` deletes the selection, `x` cuts it (copy, then delete); both record an
  undo point first
- `p` pastes the clipboard at the cursor
- `Page Up` / `Page Down` move the cursor by one screen
- `Home` moves to the end of the line and `End` to its start
- `:` opens the command prompt
- `Esc` cancels a selection

Insert mode:

- typed characters are inserted at the cursor
- `Enter` splits the line at the cursor
- `Backspace` (or `Ctrl-H`) deletes the character before the cursor, joining
  the line to the previous one at column 0; `Delete` deletes the character
  under the cursor
- the arrow keys move the cursor
- `Esc` returns to normal mode

## Commands

Type `:` in normal mode, then a command and `Enter`. `Esc` abandons the
prompt and `Backspace` edits it. A leading `!` forces the command. Anything
else is answered with `Unsupported command: <name>`.

| Command      | Effect                                                         |
|--------------|----------------------------------------------------------------|
| `w`          | save; an existing file is first renamed to `<file>.bak`        |
| `!w`         | save without making a backup                                   |
| `q`          | quit; refused while there are unsaved changes                  |
| `!q`         | quit and discard unsaved changes                               |
| `wq`, `!wq`  | save (with or without a backup), then quit if the save worked  |
| `e <file>`   | open another file; refused while there are unsaved changes     |
| `!e <file>`  | open another file, discarding unsaved changes                  |
| `u`          | undo                                                           |
| `r`          | redo                                                           |

Files are saved by writing a temporary `<file>.tmp` and renaming it over the
original, so an interrupted save never leaves a half-written file. Every line
is written with a trailing newline.

Undo points are recorded when entering insert mode and before deleting or
cutting a selection; a paste is not an undo point of its own.

## Clipboard

Copying uses `wl-copy` when `WAYLAND_DISPLAY` is set and
`xclip -selection clipboard` otherwise; pasting always uses `wl-paste`.
These programs must be installed for the clipboard keys to work. If the copy
program cannot be started, an error is shown in the message bar; if
`wl-paste` is missing, pasting does nothing.

## What it does not do

- The start-up message points to `:h`, but there is no help command; typing
  it reports an unsupported command.
- There is no search, replace, syntax highlighting, or editing of more than
  one file at a time.
- Pasting is only supported through `wl-paste`, not under X11.

## Using it as a library

The editing model can be driven without a terminal:

```python
from easyedit.editor import Editor

editor = Editor(24, 80, 1)        # screen rows, screen columns, undo type
editor.insert_row(0, "")
editor.push_undo(False)
editor.paste("hello\nworld")
print(editor.to_text())           # "hello\nworld\n\n"
editor.undo()
print(editor.to_text())           # "\n"
```

The undo type is `1` for whole-buffer snapshots (`easyedit.undo.LinearUndo`)
or `2` for per-row changes (`easyedit.row_undo.RowUndo`).

Other pieces:

- `easyedit.commands.default_registry()` returns a `CommandRegistry` whose
  `execute(editor, "w")` runs a command line; `q` raises `QuitRequested`.
- `easyedit.render.refresh_screen(editor)` returns the escape sequences that
  redraw the whole screen.
- `easyedit.keys.process_key(editor, key, command_prompt)` applies one
  keypress; `decode_key(read)` turns terminal bytes into key codes.
- `easyedit.clipboard.copy_to_clipboard(text)` and `paste_from_clipboard()`
  talk to the clipboard programs.