"""Splitting a token list into a pipeline and an output/input redirection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class RedirectType(Enum):
    """Kind of redirection applied to the last command of a pipeline."""

    NONE = auto()
    STDOUT = auto()
    STDERR = auto()
    BOTH = auto()
    STDOUT_APPEND = auto()
    STDERR_APPEND = auto()
    STDIN = auto()
    BOTH_APPEND = auto()


_REDIRECTIONS = {
    "&>>": RedirectType.BOTH_APPEND,
    "&>": RedirectType.BOTH,
    ">>": RedirectType.STDOUT_APPEND,
    "1>>": RedirectType.STDOUT_APPEND,
    "2>>": RedirectType.STDERR_APPEND,
    ">": RedirectType.STDOUT,
    "1>": RedirectType.STDOUT,
    "2>": RedirectType.STDERR,
    "<": RedirectType.STDIN,
}


@dataclass
class ParsedCommand:
    """A pipeline of commands and the redirection of its last stage."""

    pipeline: list[list[str]] = field(default_factory=list)
    redirect_file: str = ""
    redirect_type: RedirectType = RedirectType.NONE


def parse_redirection(tokens):
    """Split tokens on ``|`` and pull out the redirection operator and its file.

    The last redirection operator seen wins. An operator at the very end of
    the line sets the redirection type but leaves the file name empty.
    """
    result = ParsedCommand()
    current: list[str] = []
    stream = iter(tokens)
    for token in stream:
        if token == "|":
            result.pipeline.append(current)
            current = []
        elif token in _REDIRECTIONS:
            result.redirect_type = _REDIRECTIONS[token]
            target = next(stream, None)
            if target is not None:
                result.redirect_file = target
        else:
            current.append(token)
    if current:
        result.pipeline.append(current)
    return result