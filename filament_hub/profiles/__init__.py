"""Filament profile model, catalogs and export."""

from filament_hub.profiles.errors import (
    ProfileError,
    ConfigurationError,
    ServiceError,
    ValidationError,
)
from filament_hub.profiles.models import (
    PrinterBrand,
    FilamentType,
    FieldKind,
    PROFILE_FIELDS,
    NUMERIC_FIELDS,
    FilamentProfile,
    ProfileDraft,
    parse_numeric,
    resolve_field,
)
from filament_hub.profiles.presets import PRESET_PROFILES, PresetCatalog
from filament_hub.profiles.community import CommunityStore
from filament_hub.profiles.export import (
    sanitize_name,
    profile_filename,
    export_profile,
    save_profile,
    write_profile,
    load_profile_document,
)

__all__ = [
    "ProfileError",
    "ConfigurationError",
    "ServiceError",
    "ValidationError",
    "PrinterBrand",
    "FilamentType",
    "FieldKind",
    "PROFILE_FIELDS",
    "NUMERIC_FIELDS",
    "FilamentProfile",
    "ProfileDraft",
    "parse_numeric",
    "resolve_field",
    "PRESET_PROFILES",
    "PresetCatalog",
    "CommunityStore",
    "sanitize_name",
    "profile_filename",
    "export_profile",
    "save_profile",
    "write_profile",
    "load_profile_document",
]
