import json
import sys

import pytest

from main import main, step_check, step_parse


@pytest.fixture
def source(tmp_path):
    def write(code: str) -> str:
        path = tmp_path / "input.ms"
        path.write_text(code, encoding="utf-8")
        return str(path)

    return write


def test_prints_counters(source, capsys):
    path = source("declare x: int = 1; while (x < 3) { x = x + 1; }")
    assert main(["--input", path]) == 0
    assert capsys.readouterr().out.strip() == "{VAR:1, WHILE:1, IF:0, OP:2}"


def test_json_format(source, capsys):
    path = source("declare b: bool = true ? false : true;")
    assert main(["--input", path, "--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"VAR": 1, "WHILE": 0, "IF": 1, "OP": 0}


def test_semantic_error_prints_no_counters(source, capsys):
    path = source("declare x: int = 1; x = true;")
    assert main(["--input", path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "error: Invalid type in assignation of Identifier x"


def test_syntax_error_exit_status(source, capsys):
    assert main(["--input", source("declare ;")]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_parse_only(source, capsys):
    path = source("declare x: int = 1 + 2;")
    assert main(["--input", path, "--parse"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "program"
    assert "add_expr +" in out
    assert "{VAR" not in out


def test_parse_only_skips_semantic_errors(source, capsys):
    assert main(["--input", source("y = 1;"), "--parse"]) == 0


def nestedIfs(depth: int) -> str:
    return "if (true) { " * depth + "}" * depth


def test_deeply_nested_blocks(source, capsys):
    assert main(["--input", source(nestedIfs(200))]) == 0
    assert capsys.readouterr().out.strip() == "{VAR:0, WHILE:0, IF:200, OP:0}"


def test_deeply_nested_blocks_parse_only(source, capsys):
    assert main(["--input", source(nestedIfs(200)), "--parse"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sum(line.strip() == "if" for line in lines) == 200


def test_long_negation_chain(source, capsys):
    path = source("declare b: bool = " + "!" * 400 + "true;")
    assert main(["--input", path]) == 0
    assert capsys.readouterr().out.strip() == "{VAR:1, WHILE:0, IF:0, OP:400}"


def test_block_nesting_limit_is_an_error(source, capsys):
    assert main(["--input", source(nestedIfs(600))]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "error: blocks are nested deeper than 512 levels"


def test_too_deep_expression_is_an_error(source, capsys):
    path = source("declare b: bool = " + "!" * 6000 + "true;")
    assert main(["--input", path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "error: program is nested too deeply to be checked"


def test_recursion_limit_is_restored():
    limit = sys.getrecursionlimit()
    assert step_check(step_parse(nestedIfs(100))).if_ == 100
    assert sys.getrecursionlimit() == limit
