import os
from unittest import mock

import pytest

from pipex.config import (
    CommandNotFoundError,
    PipexConfig,
    PipexError,
    UsageError,
    find_path,
    parse_args,
    path_directories,
    resolve_command,
)


def test_find_path_returns_value():
    assert find_path({"HOME": "/home/x", "PATH": "/bin:/usr/bin"}) == "/bin:/usr/bin"


def test_find_path_missing():
    assert find_path({"HOME": "/home/x"}) is None


def test_path_directories_adds_slash():
    assert path_directories("/bin:/usr/bin") == ["/bin/", "/usr/bin/"]


def test_path_directories_skips_empty_entries():
    assert path_directories(":/bin::/sbin:") == ["/bin/", "/sbin/"]


def test_path_directories_none():
    assert path_directories(None) == []


def test_resolve_command_in_directory(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("")
    directory = str(tmp_path) + "/"
    assert resolve_command(["/nonexistent-dir/", directory], "tool") == directory + "tool"


def test_resolve_command_prefers_first_directory(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (first / "tool").write_text("")
    (second / "tool").write_text("")
    dirs = [str(first) + "/", str(second) + "/"]
    assert resolve_command(dirs, "tool") == dirs[0] + "tool"


def test_resolve_command_falls_back_to_usr_bin():
    with mock.patch("os.path.exists", side_effect=lambda p: p == "/usr/bin/sometool"):
        assert resolve_command(["/opt/x/"], "sometool") == "/usr/bin/sometool"


def test_resolve_command_missing(tmp_path):
    with pytest.raises(CommandNotFoundError) as info:
        resolve_command([str(tmp_path) + "/"], "no-such-command-here")
    assert info.value.name == "no-such-command-here"
    assert isinstance(info.value, PipexError)


def test_resolve_command_empty_name():
    with pytest.raises(CommandNotFoundError):
        resolve_command(["/bin/"], "")


@pytest.mark.parametrize("argv", [[], ["a", "b", "c"], ["a", "b", "c", "d", "e"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(UsageError) as info:
        parse_args(argv, {})
    assert str(info.value) == "argc incorrecto"


def test_parse_args_fields():
    env = {"PATH": "/bin:/usr/local/bin"}
    config = parse_args(["in.txt", "grep  -v x", " wc -l ", "out.txt"], env)
    assert config == PipexConfig(
        infile="in.txt",
        cmd1=["grep", "-v", "x"],
        cmd2=["wc", "-l"],
        outfile="out.txt",
        directories=["/bin/", "/usr/local/bin/"],
        env=env,
    )


def test_parse_args_without_path():
    config = parse_args(["i", "cat", "cat", "o"], {"HOME": "/tmp"})
    assert config.directories == []
    assert config.env == {"HOME": "/tmp"}


def test_parse_args_empty_command():
    config = parse_args(["i", "", "cat", "o"], dict(os.environ))
    assert config.cmd1 == []