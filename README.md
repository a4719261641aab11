# totalcli

`total` is a small command-line helper for everyday project chores. It
creates new Rust and Vue projects, starts existing projects from their
directory, and lists the programs installed on a Windows machine.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```
total --version
total create <language> <title>
total run <language> [-p SCRIPT | --path SCRIPT]
total delete <path>
```

The command exits with status 0 on success and 1 on failure. Errors are
printed on standard error.

At startup `total` prints a warning on standard error if `dlltool.exe` is
not on `PATH`, since some Windows build steps need the MinGW tools.

### Create a project

```
total create <language> <title>
```

The language and the title are both lower-cased before use, and the command
prints `Creating a program named: "<title>", in "<language>"`.

- `rust`: if `rustc --version` can be started, the project is created with
  `cargo new <title>`. If `rustc` cannot be started at all, `total` instead
  runs `curl` against the rustup installer and then `rustup-init`, and stops
  there; run the command again afterwards to create the project.
- `vue`: fails if a file or directory named `<title>` already exists, and
  fails if `npm` is not on `PATH`. When `vue` is not on `PATH`, it runs
  `npm install -g @vue/cli` first. The project is then created with
  `vue create -d <title>`; if that fails, its error output is shown.

Any other language prints `Invalid` and exits with status 1.

### Run a project

```
total run <language>
```

Run this from inside the project directory. The language is lower-cased.

- `rust` runs `cargo run`.
- `vue` runs `npm run serve`.
- `php` looks at the current directory to choose what to start:
  - with both an `artisan` file and a `package.json` that contains `"vue"`,
    `php artisan serve` and `npm run dev` are started side by side and
    waited for;
  - with only `artisan`, `php artisan serve` is started;
  - otherwise `php -S localhost:8000` is started.
- `python` runs `main.py`, or `app.py` if there is no `main.py`, with the
  same Python interpreter that runs `total`. If neither file exists, name the
  script with `--path` or `-p`:

  ```
  total run python --path server.py
  ```

Any other language is reported as unsupported and exits with status 1.

### List installed programs

```
total delete <path>
```

This reads the uninstall entries of the Windows registry, first from
`HKEY_LOCAL_MACHINE` and then from `HKEY_CURRENT_USER`, and keeps every
entry that has both a `DisplayName` and an `InstallLocation`. The programs
are shown as a numbered list; enter a number, or press Enter for the first
one. The install location of the chosen program is printed as
`You selected: <location>`. On systems without a registry, no programs are
found.

The `<path>` argument is required but not used.

## What it does not do

`total delete` only lets you pick a program and prints its install
location. It does not uninstall anything, and it does not remove any files.

## Library use

The modules can also be used on their own:

- `totalcli.args`: `build_parser()` and `parse_args(argv)`, which returns a
  `CreateProgram`, `DeleteProgram` or `RunProgram`.
- `totalcli.installer`: `install_if_not_found(package_name, install_command)`,
  which returns whether an installation was carried out, and
  `install_package(install_command)`. Failures raise `InstallError`.
- `totalcli.scaffolding`: `create_rust_scaffold(project_name)` and
  `create_vue_scaffold(project_name)`. Failures raise `ScaffoldError`.
- `totalcli.programs`: `Program` (with `name` and `path`),
  `list_installed_programs(hive, path)` for the hive names
  `"HKEY_LOCAL_MACHINE"` and `"HKEY_CURRENT_USER"`,
  `collect_installed_programs()` and
  `select_program(programs, input_fn, output)`, which returns the chosen
  program's path. A failed or cancelled selection raises `SelectionError`.
- `totalcli.runner`: `detect_php_project(directory)`, which returns
  `(is_laravel, is_vue)`, `find_python_script(directory, argv)` and
  `run_project(language, argv, directory)`, which returns the exit code.
  Failures raise `RunError`.
- `totalcli.cli`: `check_dlltool()` and `main(argv)`.