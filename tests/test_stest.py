import io
import os
import sys

import pytest

from quickpick.argparsing import UsageError
from quickpick.stest import FileTest, main, parse_args


@pytest.fixture
def tree(tmp_path):
    regular = tmp_path / "file"
    regular.write_text("content")
    empty = tmp_path / "empty"
    empty.write_text("")
    hidden = tmp_path / ".hidden"
    hidden.write_text("x")
    directory = tmp_path / "dir"
    directory.mkdir()
    return tmp_path


def test_regular_file_flag(tree):
    test = FileTest(frozenset("f"))
    assert test.matches(str(tree / "file"), "file") is True
    assert test.matches(str(tree / "dir"), "dir") is False


def test_directory_flag(tree):
    test = FileTest(frozenset("d"))
    assert test.matches(str(tree / "dir"), "dir") is True
    assert test.matches(str(tree / "file"), "file") is False


def test_hidden_names_need_a(tree):
    path = str(tree / ".hidden")
    assert FileTest().matches(path, ".hidden") is False
    assert FileTest(frozenset("a")).matches(path, ".hidden") is True


def test_v_inverts(tree):
    test = FileTest(frozenset("fv"))
    assert test.matches(str(tree / "dir"), "dir") is True
    assert test.matches(str(tree / "file"), "file") is False


def test_missing_path(tree):
    missing = str(tree / "missing")
    assert FileTest().matches(missing, "missing") is False
    assert FileTest(frozenset("v")).matches(missing, "missing") is True


def test_nonempty_flag(tree):
    test = FileTest(frozenset("s"))
    assert test.matches(str(tree / "file"), "file") is True
    assert test.matches(str(tree / "empty"), "empty") is False


def test_symlink_flag(tree):
    link = tree / "link"
    os.symlink(tree / "file", link)
    test = FileTest(frozenset("h"))
    assert test.matches(str(link), "link") is True
    assert test.matches(str(tree / "file"), "file") is False


def test_executable_flag(tree):
    script = tree / "script"
    script.write_text("x")
    script.chmod(0o755)
    (tree / "file").chmod(0o644)
    test = FileTest(frozenset("x"))
    assert test.matches(str(script), "script") is True
    assert test.matches(str(tree / "file"), "file") is False


def test_newer_and_older(tree):
    ref = tree / "ref"
    ref.write_text("r")
    os.utime(ref, (1000, 1000))
    target = tree / "target"
    target.write_text("t")
    os.utime(target, (2000, 2000))

    newer, _ = parse_args(["-n", str(ref)])
    assert newer.newer_than == 1000
    assert newer.matches(str(target), "target") is True
    assert newer.matches(str(ref), "ref") is False

    older, _ = parse_args(["-o", str(target)])
    assert older.older_than == 2000
    assert older.matches(str(ref), "ref") is True
    assert older.matches(str(target), "target") is False


def test_parse_args_flags_and_operands():
    test, operands = parse_args(["-fl", "somewhere", "else"])
    assert test.flags == frozenset({"f", "l"})
    assert operands == ["somewhere", "else"]


def test_parse_args_unknown_flag():
    with pytest.raises(UsageError):
        parse_args(["-z"])


def test_parse_args_missing_reference(tree, capsys):
    missing = str(tree / "missing")
    test, _ = parse_args(["-n", missing])
    assert test.newer_than is None
    assert missing in capsys.readouterr().err


def test_main_with_operands(tree, capsys):
    status = main(["-f", str(tree / "file"), str(tree / "dir")])
    assert status == 0
    assert capsys.readouterr().out.splitlines() == [str(tree / "file")]


def test_main_no_match(tree, capsys):
    status = main(["-d", str(tree / "file")])
    assert status == 1
    assert capsys.readouterr().out == ""


def test_main_lists_directory(tree, capsys):
    (tree / "dir" / "a.txt").write_text("a")
    (tree / "dir" / "sub").mkdir()
    assert main(["-l", "-f", str(tree / "dir")]) == 0
    assert capsys.readouterr().out.splitlines() == ["a.txt"]


def test_main_lists_dot_entries_with_a(tree, capsys):
    (tree / "dir" / "sub").mkdir()
    assert main(["-lad", str(tree / "dir")]) == 0
    assert set(capsys.readouterr().out.splitlines()) == {".", "..", "sub"}


def test_main_quiet(tree, capsys):
    assert main(["-q", "-f", str(tree / "file")]) == 0
    assert capsys.readouterr().out == ""


def test_main_reads_stdin(tree, capsys, monkeypatch):
    data = f"{tree / 'file'}\n{tree / 'dir'}\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(data))
    assert main(["-d"]) == 0
    assert capsys.readouterr().out.splitlines() == [str(tree / "dir")]


def test_main_usage_error(capsys):
    assert main(["-z"]) == 2
    assert capsys.readouterr().err.startswith("usage: stest")