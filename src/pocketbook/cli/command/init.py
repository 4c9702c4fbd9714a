"""Initialize a new pocketbook workspace directory."""

from __future__ import annotations

from pocketbook.config import DEFAULT_SETTINGS_YML
from pocketbook.storage.record_store import RecordStore
from pocketbook.workspace import Workspace

from .util import console


def run(*, workspace: Workspace) -> int:
    """Initialize a workspace with required directories, starter settings and an empty store.

    Skips anything that already exists (safe to run on an existing workspace).

    Args:
        workspace: Workspace to initialize

    Returns:
        Exit code (0 = success)
    """
    root = workspace.root
    console.print(f"[bold cyan]Initializing workspace:[/] {root}\n")

    created = []
    skipped = []

    for directory in [workspace.data_dir, workspace.config_dir, workspace.reports_dir]:
        if directory.exists():
            skipped.append(str(directory.relative_to(root)) + "/")
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(str(directory.relative_to(root)) + "/")

    if workspace.settings_config.exists():
        skipped.append(str(workspace.settings_config.relative_to(root)))
    else:
        workspace.settings_config.write_text(DEFAULT_SETTINGS_YML, encoding="utf-8")
        created.append(str(workspace.settings_config.relative_to(root)))

    store = RecordStore(workspace.store_path)
    if store.exists():
        skipped.append(str(workspace.store_path.relative_to(root)))
    else:
        store.clear()
        created.append(str(workspace.store_path.relative_to(root)))

    if created:
        console.print("[green]Created:[/]")
        for item in created:
            console.print(f"  {item}")

    if skipped:
        console.print("[dim]Already exists (skipped):[/dim]")
        for item in skipped:
            console.print(f"  [dim]{item}[/dim]")

    if not created:
        console.print("[green]Workspace already fully initialized.[/]")
    else:
        console.print(f"\n[green]Workspace ready at {root}[/]")
        console.print("\n[dim]Next steps:[/dim]")
        console.print("  1. Run: pocketbook add --type income --amount 1000 --category salary")
        console.print("  2. Run: pocketbook budget --add food --limit 500")
        console.print("  3. Run: pocketbook summary")

    return 0
