# Integration tests for the unionfind cli

from absl.testing import flagsaver
import io
from unionfind import unionfind
import pytest
from test_helper import bool_flag, locate_test_file, mkdtemp, run_unionfind


_OPS_OUTPUT = (
    "union 0 1 -> True",
    "union 1 2 -> True",
    "union 2 0 -> False",
    "union 3 4 -> True",
    "union 4 5 -> True",
    "connected 0 5 -> False",
    "union 2 3 -> True",
    "connected 0 5 -> True",
    "find 5 -> 0",
    "count -> 1",
)


def test_demo_to_stdout(capsys):
    unionfind._run(["unionfind"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[3] == "connected 1 3 -> True"
    assert lines[4] == "connected 1 5 -> False"
    assert lines[-1] == "connected 1 5 -> True"


def test_script_to_file():
    out_file = mkdtemp() / "ops.out"
    with flagsaver.flagsaver(size=6, output_file=str(out_file), print_sets=True):
        unionfind._run(["unionfind", str(locate_test_file("data/ops.txt"))])
    assert tuple(out_file.read_text().splitlines()) == _OPS_OUTPUT + (
        "{0,1,2,3,4,5}",
    )


def test_each_script_gets_a_fresh_structure(capsys):
    ops = str(locate_test_file("data/ops.txt"))
    with flagsaver.flagsaver(size=6):
        unionfind._run(["unionfind", ops, ops])
    assert tuple(capsys.readouterr().out.splitlines()) == _OPS_OUTPUT + _OPS_OUTPUT


def test_script_too_large_for_size():
    with flagsaver.flagsaver(size=4):
        with pytest.raises(IndexError):
            unionfind._run(["unionfind", str(locate_test_file("data/ops.txt"))])


def test_cli_subprocess():
    ops = locate_test_file("data/ops.txt")
    result = run_unionfind(("--size", "6", bool_flag("print_sets", True), ops))
    assert tuple(result.stdout.splitlines()) == _OPS_OUTPUT + ("{0,1,2,3,4,5}",)


def test_script_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("union 0 1\nconnected 1 0\n"))
    unionfind._run(["unionfind", "-"])
    assert capsys.readouterr().out.splitlines() == [
        "union 0 1 -> True",
        "connected 1 0 -> True",
    ]
