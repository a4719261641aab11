"""Create new Rust and Vue projects."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from .installer import install_if_not_found


class ScaffoldError(RuntimeError):
    """A project could not be scaffolded."""


def _spawn(command: list[str], **kwargs) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(command, check=False, **kwargs)
    except OSError as exc:
        raise ScaffoldError(f"Error: {exc}") from exc


def create_rust_scaffold(project_name: str) -> None:
    """Create a Rust project with cargo, installing Rust first when it is missing."""
    try:
        subprocess.run(["rustc", "--version"], check=False)
    except OSError:
        print("Rust is not installed. Installing Rust...")
        _spawn(["curl", "--proto", "=https", "--tlsv1.2", "-sSf", "https://sh.rustup.rs"])
        _spawn(["rustup-init"])
        print("Rust installation completed successfully.")
        return

    _spawn(["cargo", "new", project_name])
    print(f"Rust project '{project_name}' successfully scaffolded with cargo.")


def create_vue_scaffold(project_name: str) -> None:
    """Create a Vue project with the Vue CLI, installing the CLI when it is missing."""
    print("Starting a preliminary scan of your environment...")
    if Path(project_name).exists():
        raise ScaffoldError(f"Directory '{project_name}' already exists")

    if shutil.which("npm") is None:
        raise ScaffoldError("npm was not found in PATH; install Node.js and npm first.")
    install_if_not_found("vue", "npm install -g @vue/cli")

    vue_path = shutil.which("vue")
    if vue_path is None:
        raise ScaffoldError("Error finding vue: not found in PATH")

    print("[1/3] Starting the Vue scaffolding process...")
    try:
        result = subprocess.run(
            [vue_path, "create", "-d", project_name], capture_output=True, check=False
        )
    except OSError as exc:
        raise ScaffoldError(f"Failed to execute Vue create: {exc}") from exc
    print("[2/3] Building fresh packages...")
    if result.returncode != 0:
        message = (result.stderr or b"").decode("utf-8", errors="replace")
        raise ScaffoldError(f"Error initializing Vue project: {message}")
    if result.stdout:
        print("[3/3] Done.")
    print(f"Vue project '{project_name}' successfully scaffolded with npm.")