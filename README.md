# tinyshell

Building blocks for a small POSIX shell: splitting a command line into words
the way a shell does, separating a pipeline from its redirection, finding
programs on `PATH`, running them, and tab completion for `readline`.

## Installing

```
pip install .
```

## Tokenizing a line

`tinyshell.shell_utils` handles the text of a command line.

- `trim_whitespace(text)` strips spaces, tabs, newlines and the other ASCII
  whitespace characters from both ends.
- `tokenize_input(line)` splits a line into words. It understands
  `'single quotes'`, `"double quotes"` (inside which `\\`, `\"`, `\$` and an
  escaped newline are unescaped and any other backslash is kept), and
  backslash escapes outside quotes. Unterminated quotes run to the end of the
  line. A word of the form `$NAME` is replaced with the value of that
  environment variable, or with an empty string if it is unset. Empty words
  such as `''` are dropped.

```python
from tinyshell.shell_utils import tokenize_input

assert tokenize_input("echo 'foo'\"bar\" baz\\ qux") == ["echo", "foobar", "baz qux"]
```

## Pipelines and redirection

`tinyshell.command_parser.parse_redirection(tokens)` splits a word list on
`|` and picks out a redirection operator and the file after it. It returns a
`ParsedCommand` dataclass with `pipeline` (a list of word lists),
`redirect_file` and `redirect_type`, a member of the `RedirectType` enum:

| Operator        | `RedirectType`  |
|-----------------|-----------------|
| `>`, `1>`       | `STDOUT`        |
| `>>`, `1>>`     | `STDOUT_APPEND` |
| `2>`            | `STDERR`        |
| `2>>`           | `STDERR_APPEND` |
| `&>`            | `BOTH`          |
| `&>>`           | `BOTH_APPEND`   |
| `<`             | `STDIN`         |
| none            | `NONE`          |

When several operators appear, the last one wins.

```python
from tinyshell.shell_utils import tokenize_input
from tinyshell.command_parser import parse_redirection, RedirectType

cmd = parse_redirection(tokenize_input("ls | grep foo > out.txt"))
assert cmd.pipeline == [["ls"], ["grep", "foo"]]
assert cmd.redirect_type is RedirectType.STDOUT
assert cmd.redirect_file == "out.txt"
```

## Finding and running programs

- `find_executable(name)` returns the canonical path of an executable file.
  A name containing `/` is checked directly; otherwise each directory of
  `PATH` is searched in order, an empty entry meaning the current directory.
  It returns `None` when nothing is found.
- `run_external_command(tokens)` looks up `tokens[0]`, runs it with the
  whole word list as its arguments and waits for it, returning its exit
  status. If there are no tokens or the program cannot be found or started,
  it writes a message such as `name: command not found` to standard error
  and returns `None`.

## Tab completion

`tinyshell.completion` offers command names in the first word of a line and
file paths after it.

- `completion_matches(text, line, point, commands)` returns the sorted
  completions of `text`: on the first word, the names in `commands` and the
  executables on `PATH` that start with it; elsewhere, file paths.
- `path_executables_matching(prefix)` and `file_completions(prefix)` return
  the two kinds of candidates as sets. File completions end directories with
  `/`, expand a leading `~` to `$HOME` while keeping `~/` in the result, and
  hide names beginning with `.` unless the typed name does too.
- `is_first_word(line, point)` tells whether the cursor is in the first word.
- `Completer(commands)` is a callable for `readline.set_completer`:

```python
import readline
from tinyshell.completion import Completer

readline.set_completer(Completer(["cd", "echo", "exit", "pwd"]))
readline.parse_and_bind("tab: complete")
```

## What it does not do

The package has no interactive command of its own and no read–eval loop.
It has no builtin commands such as `cd`, `echo` or `history`, does not
connect the stages of a parsed pipeline to one another, and does not apply
the redirection that `parse_redirection` reports; putting those together is
left to the program that uses these pieces.

## Tests

```
pip install .[test]
pytest
```