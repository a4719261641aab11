import pytest

from totalcli.args import (
    CreateProgram,
    DeleteProgram,
    RunProgram,
    build_parser,
    parse_args,
)


def test_parse_create():
    assert parse_args(["create", "Rust", "Demo"]) == CreateProgram("Rust", "Demo")


def test_parse_delete():
    assert parse_args(["delete", "some/where"]) == DeleteProgram("some/where")


def test_parse_run_without_script():
    result = parse_args(["run", "python"])
    assert result == RunProgram("python")
    assert result.script is None


@pytest.mark.parametrize("flag", ["--path", "-p"])
def test_parse_run_with_script(flag):
    assert parse_args(["run", "python", flag, "tool.py"]) == RunProgram("python", "tool.py")


def test_missing_subcommand_is_rejected():
    with pytest.raises(SystemExit) as info:
        parse_args([])
    assert info.value.code == 2


def test_create_requires_title():
    with pytest.raises(SystemExit) as info:
        parse_args(["create", "rust"])
    assert info.value.code == 2


def test_parser_program_name():
    assert build_parser().prog == "total"