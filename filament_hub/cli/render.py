"""Rich rendering helpers for profile listings."""

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from filament_hub.profiles.models import FilamentProfile


def format_number(value: float) -> str:
    """Format a setting without a trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def profiles_table(profiles: Iterable[FilamentProfile], title: str) -> Table:
    """Build a table with one row per profile."""
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Printer / Filament", style="green")
    table.add_column("Nozzle", style="yellow")
    table.add_column("Bed", style="yellow")
    table.add_column("Speed", style="magenta")
    table.add_column("Fan", style="magenta")
    table.add_column("Notes", style="white")

    for p in profiles:
        table.add_row(
            escape(p.id),
            escape(p.profile_name),
            escape(p.summary()),
            f"{format_number(p.nozzle_temp)}°C",
            f"{format_number(p.bed_temp)}°C",
            f"{format_number(p.print_speed)} mm/s",
            f"{format_number(p.fan_speed)}%",
            escape(p.notes or "-"),
        )
    return table


def print_profile(console: Console, profile: FilamentProfile) -> None:
    """Print a single profile in card form."""
    console.print(f"\n[bold cyan]{escape(profile.profile_name)}[/bold cyan]")
    console.print(f"[dim]{escape(profile.summary())}[/dim]")
    console.print(f"  Nozzle: {format_number(profile.nozzle_temp)}°C    Bed: {format_number(profile.bed_temp)}°C")
    console.print(f"  Speed: {format_number(profile.print_speed)} mm/s    Fan: {format_number(profile.fan_speed)}%")
    console.print(
        f"  Retraction: {format_number(profile.retraction_distance)} mm "
        f"@ {format_number(profile.retraction_speed)} mm/s"
    )
    if profile.notes:
        console.print(f'  [italic]"{escape(profile.notes)}"[/italic]')
