import os

import pytest

from pipex.paths import find_path, get_cmd


def _make_file(directory, name):
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / name
    target.write_text("")
    return target


def test_find_path_returns_path_value():
    env = {"HOME": "/home/x", "PATH": "/usr/bin:/bin"}
    assert find_path(env) == "/usr/bin:/bin"


def test_find_path_empty_value():
    assert find_path({"PATH": ""}) == ""


def test_find_path_missing_raises():
    with pytest.raises(KeyError):
        find_path({"HOME": "/home/x"})


def test_get_cmd_finds_existing_file(tmp_path):
    bin_dir = tmp_path / "bin"
    _make_file(bin_dir, "tool")
    result = get_cmd([str(tmp_path / "nothing"), str(bin_dir)], "tool")
    assert result == f"{bin_dir}/tool"
    assert os.path.exists(result)


def test_get_cmd_first_directory_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    _make_file(first, "tool")
    _make_file(second, "tool")
    assert get_cmd([str(first), str(second)], "tool") == f"{first}/tool"
    assert get_cmd([str(second), str(first)], "tool") == f"{second}/tool"


def test_get_cmd_missing_returns_none(tmp_path):
    assert get_cmd([str(tmp_path)], "absent") is None


def test_get_cmd_no_directories():
    assert get_cmd([], "ls") is None