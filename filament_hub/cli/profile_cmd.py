"""Profile creation CLI commands for Filament Hub."""

import asyncio

import click
from rich.console import Console
from rich.markup import escape

from filament_hub.cli.render import print_profile
from filament_hub.profiles.models import FilamentType, PrinterBrand

console = Console()

SHARE_MESSAGE = "Profile shared to the community list!"

# CLI option -> form field
_FIELD_OPTIONS = {
    "brand": "filamentBrand",
    "diameter": "filamentDiameter",
    "nozzle_temp": "nozzleTemp",
    "bed_temp": "bedTemp",
    "speed": "printSpeed",
    "retraction_distance": "retractionDistance",
    "retraction_speed": "retractionSpeed",
    "fan_speed": "fanSpeed",
    "notes": "notes",
}


def build_client(mock: bool = False):
    """Create the suggestion client from settings."""
    from filament_hub.ai.gemini_client import GeminiSuggestionClient
    from filament_hub.ai.mock_client import MockClient
    from filament_hub.config import get_settings

    settings = get_settings()
    if mock or settings.mock_mode:
        return MockClient()

    return GeminiSuggestionClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.request_timeout,
    )


@click.group()
def profile() -> None:
    """Create and export filament profiles."""
    pass


@profile.command("create")
@click.option("--name", "-n", default="", help="Profile name")
@click.option("--printer", "-p", default=PrinterBrand.BAMBU_LAB.value,
              type=click.Choice([b.value for b in PrinterBrand], case_sensitive=False),
              help="Printer brand")
@click.option("--type", "-t", "filament_type", default=FilamentType.PLA.value,
              type=click.Choice([t.value for t in FilamentType], case_sensitive=False),
              help="Filament type")
@click.option("--brand", "-b", default=None, help="Filament brand")
@click.option("--diameter", default=None, help="Filament diameter (mm)")
@click.option("--nozzle-temp", default=None, help="Nozzle temperature (°C)")
@click.option("--bed-temp", default=None, help="Bed temperature (°C)")
@click.option("--speed", default=None, help="Print speed (mm/s)")
@click.option("--retraction-distance", default=None, help="Retraction distance (mm)")
@click.option("--retraction-speed", default=None, help="Retraction speed (mm/s)")
@click.option("--fan-speed", default=None, help="Fan speed (%)")
@click.option("--notes", default=None, help="Free-form notes")
@click.option("--suggest", "-s", is_flag=True, help="Suggest settings with AI")
@click.option("--mock", is_flag=True, help="Use mock suggestions (no API calls)")
@click.option("--output-dir", "-o", default=None, help="Output directory")
@click.option("--json", "output_json", is_flag=True, help="Print the JSON document instead of saving it")
@click.option("--share-to", "share_to", default=None, type=click.Path(dir_okay=False),
              help="Share the profile into a community file (read by 'community list')")
def create(
    name: str,
    printer: str,
    filament_type: str,
    suggest: bool,
    mock: bool,
    output_dir: str,
    output_json: bool,
    share_to: str,
    **field_values,
) -> None:
    """Create a filament profile.

    Example: filament-hub profile create -n "My PLA" -p "Bambu Lab" -t PLA --suggest

    Explicit values are applied before the AI suggestion, so suggested
    temperatures, speeds, retraction and fan settings take precedence.
    """
    from filament_hub.config import get_settings
    from filament_hub.form import ProfileForm
    from filament_hub.profiles.errors import ProfileError
    from filament_hub.profiles.export import save_profile, write_profile

    form = ProfileForm(client=build_client(mock) if suggest else None)

    try:
        form.update_field("profileName", name)
        form.update_field("printerBrand", printer)
        form.update_field("filamentType", filament_type)
        for option, field_name in _FIELD_OPTIONS.items():
            if field_values.get(option) is not None:
                form.update_field(field_name, field_values[option])
    except ProfileError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise click.exceptions.Exit(1)

    if suggest:
        with console.status("Optimizing..."):
            result = asyncio.run(form.request_suggestion())
        if result.is_successful:
            console.print(f"[green]✓[/green] Applied AI suggestion ({result.provider})")
        else:
            console.print(f"[yellow]Suggestion failed: {escape(result.error_message or '')}[/yellow]")

    try:
        if output_json:
            _, document = form.export()
            click.echo(document)
        else:
            path = save_profile(form.draft, output_dir or get_settings().output_dir)
            console.print(f"[green]✓[/green] Saved {escape(str(path))}")

        if share_to:
            shared = form.finalize()
            shared_path = write_profile(shared, share_to)
            console.print(f"[green]✓[/green] Shared to {escape(str(shared_path))}")
            print_profile(console, shared)
            console.print(f"[green]{SHARE_MESSAGE}[/green]")
    except ProfileError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise click.exceptions.Exit(1)
