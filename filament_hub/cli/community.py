"""Community profile CLI commands for Filament Hub."""

import asyncio
from pathlib import Path
from typing import List

import click
from rich.console import Console
from rich.markup import escape

from filament_hub.cli.render import profiles_table

console = Console()


@click.group()
def community() -> None:
    """Community profile commands."""
    pass


@community.command("list")
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def list_community(files: tuple) -> None:
    """Load shared profile files and list them.

    Example: filament-hub community list shared/*.json
    """
    from filament_hub.form import generate_profile_id
    from filament_hub.profiles.community import CommunityStore
    from filament_hub.profiles.errors import ProfileError
    from filament_hub.profiles.export import load_profile_document
    from filament_hub.profiles.models import FilamentProfile

    async def fetch() -> List[FilamentProfile]:
        return [
            load_profile_document(Path(f).read_text(encoding="utf-8"), default_id=generate_profile_id())
            for f in files
        ]

    store = CommunityStore()
    console.print("[dim]Fetching the latest profiles from the community...[/dim]")
    try:
        asyncio.run(store.populate(fetch))
    except ProfileError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise click.exceptions.Exit(1)

    if not store.list():
        console.print("No community profiles available yet. Be the first to share one!")
        return

    console.print(profiles_table(store.list(), "Community Profiles"))
