"""Run a project with the tool that belongs to its language."""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

PathLike = Union[str, Path]


class RunError(RuntimeError):
    """A project could not be started."""


def _resolve(program: str) -> str:
    return shutil.which(program) or program


def _call(command: list[str], directory: Path, failure: str) -> int:
    try:
        return subprocess.run(command, cwd=directory, check=False).returncode
    except OSError as exc:
        raise RunError(f"{failure}: {exc}") from exc


def detect_php_project(directory: PathLike) -> tuple[bool, bool]:
    """Return whether *directory* holds a Laravel project and whether it uses Vue."""
    root = Path(directory)
    is_laravel = (root / "artisan").exists()
    try:
        is_vue = '"vue"' in (root / "package.json").read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        is_vue = False
    return is_laravel, is_vue


def find_python_script(directory: PathLike, argv: Sequence[str]) -> str:
    """Pick main.py or app.py in *directory*, else the value of --path/-p in *argv*."""
    root = Path(directory)
    for candidate in ("main.py", "app.py"):
        if (root / candidate).exists():
            return candidate
    arguments = iter(argv)
    for argument in arguments:
        if argument in ("--path", "-p"):
            value = next(arguments, None)
            if value is not None:
                return value
    raise RunError(
        "No 'main.py' or 'app.py' found in the current directory.\n"
        "Please specify a script with --path <file.py> or -p <file.py>."
    )


def _run_php(directory: Path) -> int:
    is_laravel, is_vue = detect_php_project(directory)
    if is_laravel and is_vue:
        print("Detected Laravel project with Vue frontend.")
        print("Starting backend: 'php artisan serve'...")
        try:
            backend = subprocess.Popen([_resolve("php"), "artisan", "serve"], cwd=directory)
        except OSError as exc:
            print(f"Failed to run Laravel backend: {exc}", file=sys.stderr)
            return 1
        print("Starting frontend: 'npm run dev'...")
        try:
            frontend = subprocess.Popen([_resolve("npm"), "run", "dev"], cwd=directory)
        except OSError as exc:
            print(f"Failed to run Vue frontend: {exc}", file=sys.stderr)
            backend.kill()
            return 1
        codes = (backend.wait(), frontend.wait())
        return next((code for code in codes if code), 0)

    if is_laravel:
        print("Detected Laravel project. Running 'php artisan serve'...")
        code = _call([_resolve("php"), "artisan", "serve"], directory,
                     "Failed to run php artisan serve")
        if code:
            print("Failed to run Laravel project.", file=sys.stderr)
        return code

    print("Running PHP project with 'php -S localhost:8000'...")
    code = _call([_resolve("php"), "-S", "localhost:8000"], directory,
                 "Failed to run PHP built-in server")
    if code:
        print("Failed to run PHP project.", file=sys.stderr)
    return code


def run_project(
    language: str,
    argv: Optional[Sequence[str]] = None,
    directory: Optional[PathLike] = None,
) -> int:
    """Run the project in *directory* for *language* and return the exit code."""
    root = Path(directory) if directory is not None else Path.cwd()
    arguments = list(sys.argv[1:] if argv is None else argv)
    lang = language.lower()

    if lang == "rust":
        print("Running Rust project with 'cargo run'...")
        code = _call([_resolve("cargo"), "run"], root, "Failed to run cargo")
        if code:
            print("Failed to run Rust project.", file=sys.stderr)
        return code

    if lang == "vue":
        print("Running Vue project with 'npm run serve'...")
        code = _call([_resolve("npm"), "run", "serve"], root, "Failed to run npm")
        if code:
            print("Failed to run Vue project.", file=sys.stderr)
        return code

    if lang == "php":
        return _run_php(root)

    if lang == "python":
        print("Running Python project...")
        script = find_python_script(root, arguments)
        code = _call([sys.executable, script], root, "Failed to run python script")
        if code:
            print("Failed to run Python project.", file=sys.stderr)
        return code

    raise RunError(f"Unsupported language for run: {lang}")