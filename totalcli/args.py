"""Command-line argument definitions."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence, Union

_VERSION = "0.1.0"


@dataclass(frozen=True)
class CreateProgram:
    """Scaffold a new project."""

    language: str
    title: str


@dataclass(frozen=True)
class DeleteProgram:
    """Pick an installed program to uninstall."""

    path: str


@dataclass(frozen=True)
class RunProgram:
    """Run the project in the current directory."""

    path: str
    script: Optional[str] = None


Command = Union[CreateProgram, DeleteProgram, RunProgram]


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the ``total`` command."""
    parser = argparse.ArgumentParser(
        prog="total",
        description="Create, run and remove programs from one command.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    create = commands.add_parser("create", help="create a new project")
    create.add_argument("language", help="the language of the project")
    create.add_argument("title", help="the title of the project")

    delete = commands.add_parser("delete", help="select an installed program to uninstall")
    delete.add_argument("path", help="the path of the program")

    run = commands.add_parser("run", help="run a project")
    run.add_argument("path", help="the language of the project to run")
    run.add_argument("-p", "--path", dest="script", default=None,
                     help="script to run for Python projects")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Command:
    """Parse *argv* into one of the command dataclasses."""
    namespace = build_parser().parse_args(argv)
    if namespace.command == "create":
        return CreateProgram(language=namespace.language, title=namespace.title)
    if namespace.command == "delete":
        return DeleteProgram(path=namespace.path)
    return RunProgram(path=namespace.path, script=namespace.script)