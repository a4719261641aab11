"""Entry point of the ``total`` command."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import Optional, Sequence

from .args import CreateProgram, DeleteProgram, parse_args
from .installer import InstallError
from .programs import SelectionError, collect_installed_programs, select_program
from .runner import RunError, run_project
from .scaffolding import ScaffoldError, create_rust_scaffold, create_vue_scaffold

_SCAFFOLDERS = {"rust": create_rust_scaffold, "vue": create_vue_scaffold}


def check_dlltool() -> bool:
    """Warn on stderr when dlltool.exe is not on PATH; return whether it was found."""
    if shutil.which("dlltool.exe") is not None:
        return True
    print(
        "Warning: 'dlltool.exe' not found in PATH. Some build steps (especially for "
        "Windows targets) may fail. If you are building for Windows and need MinGW "
        "tools, please install them and ensure 'dlltool.exe' is in your PATH.",
        file=sys.stderr,
    )
    return False


def _quoted(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _create(command: CreateProgram) -> int:
    language = command.language.lower()
    title = command.title.lower()
    scaffold = _SCAFFOLDERS.get(language)
    if scaffold is None:
        print("Invalid")
        return 1
    print(f"Creating a program named: {_quoted(title)}, in {_quoted(language)}")
    scaffold(title)
    return 0


def _delete() -> int:
    print("Listing all installed programs:")
    programs = collect_installed_programs()
    if not programs:
        print("No installed programs found.")
        return 0
    try:
        selected = select_program(programs)
    except SelectionError as exc:
        print(f"Failed to select a program: {exc}", file=sys.stderr)
        return 1
    print(f"You selected: {selected}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the ``total`` command and return its exit status."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    check_dlltool()
    command = parse_args(arguments)
    try:
        if isinstance(command, CreateProgram):
            return _create(command)
        if isinstance(command, DeleteProgram):
            return _delete()
        code = run_project(command.path, arguments, Path.cwd())
        return 0 if code == 0 else 1
    except (InstallError, ScaffoldError, RunError) as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())