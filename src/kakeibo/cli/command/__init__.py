from __future__ import annotations

# Command implementations for the kakeibo CLI.
# Each command module exposes a `run(...)` function that performs the action,
# prints to the console and returns an exit code. Typer wrappers in
# kakeibo.cli.app delegate here.

__all__ = [
    "balance",
    "entries",
    "menu",
    "register",
    "summarize",
]
