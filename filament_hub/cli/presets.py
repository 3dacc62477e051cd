"""Preset profile CLI commands for Filament Hub."""

import click
from rich.console import Console
from rich.markup import escape

from filament_hub.cli.render import profiles_table

console = Console()


@click.group()
def presets() -> None:
    """Built-in profile commands."""
    pass


@presets.command("list")
def list_presets() -> None:
    """List built-in profiles."""
    from filament_hub.profiles.presets import PresetCatalog

    console.print(profiles_table(PresetCatalog().list(), "Preset Profiles"))


@presets.command("export")
@click.argument("preset_id")
@click.option("--output-dir", "-o", default=None, help="Output directory")
def export_preset(preset_id: str, output_dir: str) -> None:
    """Export a preset as a JSON file.

    Example: filament-hub presets export preset-2 -o profiles/
    """
    from filament_hub.config import get_settings
    from filament_hub.profiles.export import save_profile
    from filament_hub.profiles.presets import PresetCatalog

    preset = PresetCatalog().get(preset_id)
    if preset is None:
        console.print(f"[red]Unknown preset: {preset_id}[/red]")
        raise click.exceptions.Exit(1)

    path = save_profile(preset, output_dir or get_settings().output_dir)
    console.print(f"[green]✓[/green] Saved {escape(str(path))}")
