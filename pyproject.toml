[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "totalcli"
version = "0.1.0"
description = "A small command-line helper to scaffold and run projects and to list installed programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "scaffolding", "project", "runner", "vue", "cargo", "laravel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
total = "totalcli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["totalcli"]

[tool.pytest.ini_options]
addopts = "-ra"
