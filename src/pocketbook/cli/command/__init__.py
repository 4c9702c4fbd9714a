from __future__ import annotations

# Command implementations for the pocketbook CLI.
# Each command module exposes a `run(...)` function that performs the action
# and prints to the console. Typer wrappers in pocketbook.cli.app delegate here.

__all__ = [
    "add",
    "budget",
    "clear",
    "delete",
    "edit",
    "export",
    "goal",
    "import_data",
    "init",
    "report",
    "summary",
    "transactions",
]
