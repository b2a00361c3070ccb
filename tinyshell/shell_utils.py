"""Line trimming, tokenizing, executable lookup and running external programs."""

from __future__ import annotations

import os
import subprocess
import sys

_WHITESPACE = " \t\n\r\f\v"
_DOUBLE_QUOTE_ESCAPABLE = '\\"$\n'


def trim_whitespace(text):
    """Strip ASCII whitespace from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def _read_double_quoted(line, pos, parts):
    """Consume a double-quoted segment starting after the opening quote.

    Appends the segment's text to ``parts`` and returns the position just
    past the closing quote (or the end of the line if it is unterminated).
    """
    end = len(line)
    while pos < end:
        ch = line[pos]
        if ch == "\\" and pos + 1 < end:
            following = line[pos + 1]
            if following in _DOUBLE_QUOTE_ESCAPABLE:
                parts.append(following)
                pos += 2
            else:
                parts.append("\\")
                pos += 1
        elif ch == '"':
            return pos + 1
        else:
            parts.append(ch)
            pos += 1
    return pos


def tokenize_input(line):
    """Split a command line into words, honouring quotes and backslashes.

    A word that starts with ``$`` and has more characters is replaced by the
    value of that environment variable, or by an empty string if unset.
    """
    tokens = []
    end = len(line)
    pos = 0
    while True:
        while pos < end and line[pos] in _WHITESPACE:
            pos += 1
        if pos >= end:
            break

        parts: list[str] = []
        while pos < end and line[pos] not in _WHITESPACE:
            ch = line[pos]
            if ch == "'":
                close = line.find("'", pos + 1)
                if close == -1:
                    parts.append(line[pos + 1:])
                    pos = end
                else:
                    parts.append(line[pos + 1:close])
                    pos = close + 1
            elif ch == '"':
                pos = _read_double_quoted(line, pos + 1, parts)
            elif ch == "\\" and pos + 1 < end:
                parts.append(line[pos + 1])
                pos += 2
            else:
                parts.append(ch)
                pos += 1

        token = "".join(parts)
        if token:
            if token.startswith("$") and len(token) > 1:
                token = os.environ.get(token[1:], "")
            tokens.append(token)
    return tokens


def _search_path():
    """Directories named by ``$PATH``, with empty entries meaning ``.``."""
    path_env = os.environ.get("PATH")
    if path_env is None:
        return []
    dirs = path_env.split(":")
    if dirs[-1] == "":
        dirs.pop()
    return [directory or "." for directory in dirs]


def _is_executable_file(path):
    return os.path.isfile(path) and os.access(path, os.X_OK)


def find_executable(name):
    """Return the canonical path of executable ``name``, or None if not found.

    A name containing ``/`` is checked directly; otherwise ``$PATH`` is searched.
    """
    if "/" in name:
        if _is_executable_file(name):
            return os.path.realpath(name)
        return None
    for directory in _search_path():
        if not os.path.isdir(directory):
            continue
        candidate = os.path.join(directory, name)
        if _is_executable_file(candidate):
            return os.path.realpath(candidate)
    return None


def _flush_std_streams():
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            try:
                stream.flush()
            except (OSError, ValueError):
                pass


def run_external_command(tokens):
    """Run an external program and wait for it.

    Returns the program's exit status, or None if it could not be started;
    problems are reported on standard error.
    """
    if not tokens:
        print("Error: No command provided for external execution.", file=sys.stderr)
        return None
    name = tokens[0]
    executable = find_executable(name)
    if executable is None:
        print(f"{name}: command not found", file=sys.stderr)
        return None
    _flush_std_streams()
    try:
        completed = subprocess.run(list(tokens), executable=executable, check=False)
    except OSError as err:
        print(f"execv failed for {name}: {err.strerror}", file=sys.stderr)
        return None
    return completed.returncode