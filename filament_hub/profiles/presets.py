"""Built-in filament profiles."""

from typing import Optional, Tuple

from filament_hub.profiles.models import FilamentProfile, FilamentType, PrinterBrand

PRESET_PROFILES: Tuple[FilamentProfile, ...] = (
    FilamentProfile(
        id="preset-1",
        profile_name="Bambu Lab PLA Basic",
        printer_brand=PrinterBrand.BAMBU_LAB,
        filament_brand="Bambu Lab",
        filament_type=FilamentType.PLA,
        filament_diameter=1.75,
        nozzle_temp=220,
        bed_temp=55,
        print_speed=150,
        retraction_distance=0.8,
        retraction_speed=40,
        fan_speed=100,
        notes="A good starting point for Bambu PLA.",
    ),
    FilamentProfile(
        id="preset-2",
        profile_name="Creality Ender 3 PETG",
        printer_brand=PrinterBrand.CREALITY,
        filament_brand="Generic",
        filament_type=FilamentType.PETG,
        filament_diameter=1.75,
        nozzle_temp=240,
        bed_temp=70,
        print_speed=50,
        retraction_distance=5,
        retraction_speed=45,
        fan_speed=50,
        notes="Works well for most PETG on an Ender 3.",
    ),
    FilamentProfile(
        id="preset-3",
        profile_name="Anycubic Kobra TPU",
        printer_brand=PrinterBrand.ANYCUBIC,
        filament_brand="Generic",
        filament_type=FilamentType.TPU,
        filament_diameter=1.75,
        nozzle_temp=225,
        bed_temp=60,
        print_speed=30,
        retraction_distance=2,
        retraction_speed=25,
        fan_speed=30,
        notes="Slow and steady for flexible filaments.",
    ),
)


class PresetCatalog:
    """Read-only catalog of built-in profiles."""

    def __init__(self, profiles: Tuple[FilamentProfile, ...] = PRESET_PROFILES):
        self._profiles = tuple(profiles)

    def list(self) -> Tuple[FilamentProfile, ...]:
        """Get all presets in catalog order."""
        return self._profiles

    def get(self, profile_id: str) -> Optional[FilamentProfile]:
        """Get a preset by id."""
        for profile in self._profiles:
            if profile.id == profile_id:
                return profile
        return None

    def __len__(self) -> int:
        return len(self._profiles)
