"""Scaffold and run projects, and list installed programs, from the command line."""

__version__ = "0.1.0"
__all__ = ["args", "cli", "installer", "programs", "runner", "scaffolding"]