"""Tab completion of command names and file paths."""

from __future__ import annotations

import os

try:
    import readline
except ImportError:  # pragma: no cover - platform without readline
    readline = None

_C_SPACE = " \t\n\r\f\v"


def is_first_word(line, point):
    """Whether the cursor at ``point`` in ``line`` is completing the first word.

    Only the characters just before the cursor are inspected: a
    non-whitespace character there means the word is not the first one,
    while a space ends the scan.
    """
    if not line or point == 0:
        return True
    for ch in reversed(line[:point]):
        if ch not in _C_SPACE:
            return False
        if ch == " ":
            break
    return True


def _search_path():
    path_env = os.environ.get("PATH")
    if path_env is None:
        return []
    dirs = path_env.split(":")
    if dirs[-1] == "":
        dirs.pop()
    return [directory or "." for directory in dirs]


def _entries(directory):
    """Directory entries of ``directory``, or nothing if it cannot be read."""
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError:
        return []


def _is_dir(entry):
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry):
    try:
        return entry.is_file()
    except OSError:
        return False


def path_executables_matching(prefix):
    """Names of executable files on ``$PATH`` that start with ``prefix``."""
    found = set()
    for directory in _search_path():
        if not os.path.isdir(directory):
            continue
        for entry in _entries(directory):
            if (
                entry.name.startswith(prefix)
                and _is_file(entry)
                and os.access(entry.path, os.X_OK)
            ):
                found.add(entry.name)
    return found


def file_completions(prefix):
    """Paths that complete ``prefix``; directories end with ``/``.

    A leading ``~`` is expanded to ``$HOME`` and kept in the results. Names
    starting with ``.`` are offered only when the typed name does too.
    """
    directory, base = os.path.split(prefix)
    if not directory:
        directory = "."

    home = os.environ.get("HOME")
    tilde_expanded = bool(prefix) and prefix.startswith("~") and home is not None
    if tilde_expanded and (len(prefix) == 1 or prefix[1] == "/"):
        directory, base = os.path.split(home + prefix[1:])

    if not os.path.isdir(directory):
        return set()

    found = set()
    for entry in _entries(directory):
        name = entry.name
        if not name.startswith(base):
            continue
        if name.startswith(".") and not base.startswith("."):
            continue
        if tilde_expanded:
            result = "~/" + os.path.relpath(os.path.join(directory, name), home)
        elif directory == ".":
            result = name
        else:
            result = os.path.join(directory, name)
        if _is_dir(entry):
            result += "/"
        found.add(result)
    return found


def completion_matches(text, line, point, commands):
    """Sorted completions of ``text`` given the line and cursor position.

    On the first word, built-in ``commands`` and executables on ``$PATH`` are
    offered; elsewhere, file paths.
    """
    if is_first_word(line, point):
        matches = {name for name in commands if name.startswith(text)}
        matches |= path_executables_matching(text)
    else:
        matches = file_completions(text)
    return sorted(matches)


class Completer:
    """A completer in the form ``readline.set_completer`` expects."""

    def __init__(self, commands):
        self.commands = list(commands)
        self._matches: list[str] = []

    def _line_state(self):
        if readline is None:
            return "", 0
        return readline.get_line_buffer(), readline.get_endidx()

    def __call__(self, text, state):
        if state == 0:
            line, point = self._line_state()
            self._matches = completion_matches(text, line, point, self.commands)
        if state < len(self._matches):
            return self._matches[state]
        return None