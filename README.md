# quickpick

quickpick holds the logic behind a keyboard-driven dynamic menu. Lines are read
in as items, the user types into an input field, and the items are narrowed and
ordered as they type. It also ships `quickpick-stest`, a command that filters a
list of file names by the properties of the files.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## quickpick-stest

`quickpick-stest` tests each file named on the command line. When no files are
named, it tests each line read from standard input. It prints the names of the
files that pass every test asked for.

```
quickpick-stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]
```

| Option    | A file passes if it ...                                  |
|-----------|----------------------------------------------------------|
| `-a`      | may be hidden (without it, names starting with `.` fail) |
| `-b`      | is a block special file                                  |
| `-c`      | is a character special file                              |
| `-d`      | is a directory                                           |
| `-e`      | exists                                                   |
| `-f`      | is a regular file                                        |
| `-g`      | has its set-group-id flag set                            |
| `-h`      | is a symbolic link                                       |
| `-n file` | was modified later than `file` (whole seconds)           |
| `-o file` | was modified earlier than `file` (whole seconds)         |
| `-p`      | is a named pipe                                          |
| `-r`      | is readable                                              |
| `-s`      | is not empty                                             |
| `-u`      | has its set-user-id flag set                             |
| `-w`      | is writable                                              |
| `-x`      | is executable                                            |

A file that does not exist fails every test. Tests other than `-h` follow
symbolic links. If the reference file given to `-n` or `-o` cannot be read, an
error is printed on standard error and that test is left off.

These options change how the tests are applied:

- `-l` tests the entries of each directory named, including `.` and `..`, not
  the directory itself. The entry names are printed. An operand that is not a
  readable directory is tested as it is.
- `-v` inverts the result, so the files that fail are printed.
- `-q` prints nothing and exits with status 0 at the first match.

Options come before the file names. `--` ends the options. Single-letter options
may be clustered, as in `-flx`.

The exit status is 0 if any name matched, 1 if none did, and 2 on a usage error.

To list the executables in a directory:

```
quickpick-stest -flx /usr/local/bin
```

The same checks are available from Python. `quickpick.stest.parse_args(argv)`
returns a `FileTest` and the operands. `FileTest.matches(path, name)` tells
whether one file passes. `quickpick.stest.main(argv)` runs the command and
returns its exit status.

## The menu as a library

### Matching

`quickpick.matching` narrows items for the typed text:

- `tokenize(text)` splits the text on spaces and drops empty tokens.
- `match_items(items, text, case_insensitive=False)` returns the **indices** of
  the items that contain every token. The result is ordered in three groups:
  items equal to the whole text, then items that start with the first token,
  then the rest. Each group keeps the input order. Empty text matches every item.
- `cistrstr(haystack, needle)` returns the index of `needle` in `haystack`,
  ignoring ASCII case, or -1 if it is not found.

When matching ignores case, only ASCII letters are folded.

```python
from quickpick.matching import match_items

match_items(["firefox", "vim", "gvim"], "vim")   # [1, 2]
```

### Editing and selection

`quickpick.menu` holds the editing state.

`read_items(stream, lines)` reads one `Item` for each line of the stream. It
returns the items and `lines` limited to the number of items read.

`Menu(items, *, lines=0, case_insensitive=False, word_delimiters=" ",
prompt=None, menu_width=80, line_height=1, padding=0, text_width=len)` keeps the
following state:

- `text` and `cursor`: the input text and the cursor position in it.
- `matches`: the matching items.
- `selected`: the index of the selected item in `matches`.
- `page_start`, `next_page` and `prev_page`: the current page of matches.

Pages are worked out from the widths that `text_width` gives.

- `Menu.insert(text)` inserts text at the cursor. It returns `False` and leaves
  the text unchanged if the result would be longer than 8191 bytes in UTF-8.
- `Menu.delete(count)` deletes characters before the cursor.
- `Menu.move_word_edge(direction)` moves the cursor to the start of a word
  (negative direction) or to its end.
- `Menu.paste(selection)` inserts the first line of a pasted selection.
- `Menu.match()` recomputes the matches and `Menu.calc_offsets()` recomputes
  the paging.
- `Menu.visible_items()` returns the matches on the current page.
- `Menu.keypress(key, text="", control=False, alt=False, shift=False)` applies
  one key. `key` is a key name such as `"Return"`, `"Tab"`, `"Left"` or `"a"`,
  or `None` when only composed text arrived. Ctrl and Alt aliases are applied
  first: Ctrl-a is Home, Ctrl-e is End, Ctrl-n is Down, Ctrl-p is Up, Ctrl-w
  deletes a word, Ctrl-u deletes to the start, Ctrl-k deletes to the end, Alt-j
  is Next and Alt-k is Prior, and so on.

`Menu.keypress` returns a `KeyResult` with these fields:

- `redraw`: whether the menu changed.
- `output`: text to print.
- `exit_status`: set when the menu should close. It is 0 after Return, and 1
  after Escape, Ctrl-c, Ctrl-g or Ctrl-[.
- `paste_from`: `"primary"` or `"clipboard"`, set when Ctrl-y or Ctrl-Y asks
  for a selection.

Return prints the selected item, or the typed text if Shift is held or nothing
is selected. Ctrl-Return prints it without closing the menu and marks the item
as printed (`Item.out`).

### Settings and options

`quickpick.config.MenuConfig` holds the defaults:

| Setting           | Default                         |
|-------------------|---------------------------------|
| `topbar`          | `False`                         |
| `fonts`           | the font list                   |
| `prompt`          | `None`                          |
| `colors`          | a colour pair for each `Scheme` |
| `lines`           | `7`                             |
| `word_delimiters` | `" "`                           |

The schemes are `NORM`, `SEL` and `OUT`. `MenuConfig.color(scheme, part)`
returns the `"fg"` or `"bg"` colour of a scheme.

`quickpick.cli.parse_args(argv)` turns these menu options into `Options`:

| Option                         | Sets                                        |
|--------------------------------|---------------------------------------------|
| `-b`                           | `config.topbar` to `False`                  |
| `-f`                           | `fast`                                      |
| `-i`                           | `case_insensitive`                          |
| `-v`                           | `show_version`, and stops parsing           |
| `-l lines`                     | `config.lines`                              |
| `-m monitor`                   | `monitor`                                   |
| `-p prompt`                    | `config.prompt`                             |
| `-fn font`                     | the first entry of `config.fonts`           |
| `-nb`, `-nf`, `-sb`, `-sf`     | the normal and selected colours             |
| `-w windowid`                  | `embed`                                     |

An unknown option, or an option without its argument, raises
`quickpick.argparsing.UsageError`. `usage_message()` returns the usage text.

### Helpers

- `quickpick.argparsing.parse_short_options(argv, takes_argument)` splits a
  command line into clustered single-letter options and operands.
- `quickpick.errors.die(message, error=None)` raises `FatalError`. If the
  message ends with a colon, the description of the operating-system error is
  appended to it.

## What it does not do

quickpick has no menu command and draws nothing. It does not open a window,
grab the keyboard, render fonts or colours, or talk to a display or clipboard.
An application that shows the menu passes key presses to `Menu.keypress`, draws
`Menu.visible_items()`, and acts on the `KeyResult` it gets back. That includes
printing the output, exiting, and fetching a selection to pass to `Menu.paste`.
The options parsed by `quickpick.cli` are only returned, not acted on.