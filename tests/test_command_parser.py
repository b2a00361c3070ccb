import pytest

from tinyshell.command_parser import ParsedCommand, RedirectType, parse_redirection


@pytest.mark.parametrize(
    "tokens, command, redirect_type, redirect_file",
    [
        (["echo", "foo", ">", "file.txt"], ["echo", "foo"], RedirectType.STDOUT, "file.txt"),
        (["echo", "foo", ">>", "file.txt"], ["echo", "foo"], RedirectType.STDOUT_APPEND, "file.txt"),
        (["ls", "2>", "err.txt"], ["ls"], RedirectType.STDERR, "err.txt"),
        (["ls", "2>>", "err.txt"], ["ls"], RedirectType.STDERR_APPEND, "err.txt"),
        (["ls", "&>", "out.txt"], ["ls"], RedirectType.BOTH, "out.txt"),
        (["ls", "&>>", "out.txt"], ["ls"], RedirectType.BOTH_APPEND, "out.txt"),
        (["cat", "<", "input.txt"], ["cat"], RedirectType.STDIN, "input.txt"),
        (["echo", "a", "1>", "o.txt"], ["echo", "a"], RedirectType.STDOUT, "o.txt"),
        (["echo", "a", "1>>", "o.txt"], ["echo", "a"], RedirectType.STDOUT_APPEND, "o.txt"),
    ],
)
def test_single_command_redirections(tokens, command, redirect_type, redirect_file):
    cmd = parse_redirection(tokens)
    assert cmd.pipeline == [command]
    assert cmd.redirect_type is redirect_type
    assert cmd.redirect_file == redirect_file


def test_pipe_only():
    cmd = parse_redirection(["ls", "|", "grep", "foo"])
    assert cmd.pipeline == [["ls"], ["grep", "foo"]]
    assert cmd.redirect_type is RedirectType.NONE
    assert cmd.redirect_file == ""


def test_pipe_with_redirection():
    cmd = parse_redirection(["ls", "|", "grep", "foo", ">", "out.txt"])
    assert cmd.pipeline == [["ls"], ["grep", "foo"]]
    assert cmd.redirect_type is RedirectType.STDOUT
    assert cmd.redirect_file == "out.txt"


def test_no_redirection_or_pipe():
    cmd = parse_redirection(["echo", "hello"])
    assert cmd.pipeline == [["echo", "hello"]]
    assert cmd.redirect_type is RedirectType.NONE
    assert cmd.redirect_file == ""


def test_operator_without_file_sets_type_only():
    cmd = parse_redirection(["echo", "hi", ">"])
    assert cmd.pipeline == [["echo", "hi"]]
    assert cmd.redirect_type is RedirectType.STDOUT
    assert cmd.redirect_file == ""


def test_last_redirection_wins():
    cmd = parse_redirection(["cmd", ">", "a.txt", "2>", "b.txt"])
    assert cmd.pipeline == [["cmd"]]
    assert cmd.redirect_type is RedirectType.STDERR
    assert cmd.redirect_file == "b.txt"


def test_leading_pipe_gives_empty_stage():
    cmd = parse_redirection(["|", "wc"])
    assert cmd.pipeline == [[], ["wc"]]


def test_trailing_pipe_drops_empty_last_stage():
    cmd = parse_redirection(["ls", "|"])
    assert cmd.pipeline == [["ls"]]


def test_empty_tokens():
    assert parse_redirection([]) == ParsedCommand()