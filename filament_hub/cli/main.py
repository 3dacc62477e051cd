"""Main CLI entry point for Filament Hub."""

import click
from rich.console import Console

from filament_hub import __version__
from filament_hub.config import get_settings
from filament_hub.utils import setup_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="Filament Hub")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Filament Hub - browse, create and share filament profiles.

    Create profiles by hand or with AI-suggested settings, export them as
    JSON and browse preset and community profiles.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging("DEBUG" if verbose else get_settings().log_level)


# Import and register command groups
from filament_hub.cli.presets import presets
from filament_hub.cli.profile_cmd import profile
from filament_hub.cli.community import community

cli.add_command(presets)
cli.add_command(profile)
cli.add_command(community)


@cli.command()
def status() -> None:
    """Show configuration."""
    settings = get_settings()

    console.print("[bold]Filament Hub Status[/bold]")
    console.print(f"Version: {__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Output Directory: {settings.output_dir}")
    console.print(f"  Suggestion Model: {settings.gemini_model}")
    if settings.has_credential:
        console.print("  API Key: [green]configured[/green]")
    else:
        console.print("  API Key: [yellow]not configured (AI suggestions disabled)[/yellow]")
    console.print(f"  Mock Mode: {'on' if settings.mock_mode else 'off'}")


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
