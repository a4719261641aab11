"""Install missing tools with a shell-style install command."""

from __future__ import annotations

import shutil
import subprocess


class InstallError(RuntimeError):
    """An install command could not be run or did not succeed."""


def install_if_not_found(package_name: str, install_command: str) -> bool:
    """Run *install_command* when *package_name* is not on PATH.

    Returns True when an installation was carried out.
    """
    if shutil.which(package_name) is not None:
        return False
    install_package(install_command)
    return True


def install_package(install_command: str) -> None:
    """Run *install_command*, split on whitespace, and check that it succeeds."""
    print(f"Installing package: {install_command}")
    parts = install_command.split()
    if not parts:
        raise InstallError("Invalid install command.")
    try:
        result = subprocess.run(parts, check=False)
    except OSError as exc:
        raise InstallError(f"Failed to execute installation command: {exc}") from exc
    if result.returncode != 0:
        raise InstallError("Error installing package.")