"""Installed programs from the Windows registry, and choosing one of them."""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence, TextIO

try:
    import winreg
except ImportError:
    winreg = None

UNINSTALL_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Uninstall"
HIVES = ("HKEY_LOCAL_MACHINE", "HKEY_CURRENT_USER")
PROMPT = "Select a program to uninstall"


@dataclass(frozen=True)
class Program:
    """An installed program and where it lives."""

    name: str
    path: str


class SelectionError(RuntimeError):
    """No program could be selected."""


def _subkey_names(key) -> Iterator[str]:
    for index in itertools.count():
        try:
            yield winreg.EnumKey(key, index)
        except OSError:
            return


def _string_value(key, name: str) -> Optional[str]:
    try:
        value, kind = winreg.QueryValueEx(key, name)
    except OSError:
        return None
    if kind in (winreg.REG_SZ, winreg.REG_EXPAND_SZ):
        return value
    return None


def list_installed_programs(hive: str, path: str = UNINSTALL_KEY) -> list[Program]:
    """List programs under *path* in *hive* that have a name and install location."""
    if hive not in HIVES:
        raise ValueError(f"unknown registry hive: {hive!r}")
    if winreg is None:
        raise OSError("the Windows registry is not available on this platform")
    root = getattr(winreg, hive)
    programs = []
    with winreg.OpenKey(root, path, 0, winreg.KEY_READ) as uninstall:
        for subkey_name in _subkey_names(uninstall):
            with winreg.OpenKey(uninstall, subkey_name, 0, winreg.KEY_READ) as subkey:
                name = _string_value(subkey, "DisplayName")
                location = _string_value(subkey, "InstallLocation")
                if name is not None and location is not None:
                    programs.append(Program(name=name, path=location))
    return programs


def collect_installed_programs() -> list[Program]:
    """Programs of the whole machine followed by those of the current user."""
    programs: list[Program] = []
    for hive in HIVES:
        try:
            programs.extend(list_installed_programs(hive, UNINSTALL_KEY))
        except OSError:
            continue
    return programs


def select_program(
    programs: Sequence[Program],
    input_fn: Callable[[str], str] = input,
    output: Optional[TextIO] = None,
) -> str:
    """Ask the user to pick one of *programs* and return its path.

    An empty answer picks the first program.
    """
    if output is None:
        output = sys.stdout
    if not programs:
        raise SelectionError("there are no programs to choose from")
    print(PROMPT, file=output)
    for number, program in enumerate(programs, start=1):
        print(f"  {number}) {program.name}", file=output)
    count = len(programs)
    while True:
        try:
            answer = input_fn(f"Choice [1-{count}, default 1]: ").strip()
        except (EOFError, KeyboardInterrupt) as exc:
            raise SelectionError("selection cancelled") from exc
        if not answer:
            return programs[0].path
        if answer.isdigit() and 1 <= int(answer) <= count:
            return programs[int(answer) - 1].path
        print(f"Please enter a number between 1 and {count}.", file=output)