"""
Profile export to downloadable JSON documents.

An exported document wraps the profile under a single key:

    {
      "filament_profile": {
        "profileName": "My PLA",
        ...
      }
    }
"""

import json
import re
from pathlib import Path
from typing import Optional, Tuple, Union

from filament_hub.profiles.errors import ValidationError
from filament_hub.profiles.models import FilamentProfile, ProfileDraft
from filament_hub.utils import ensure_dir, get_logger

logger = get_logger("profiles.export")

DOCUMENT_KEY = "filament_profile"

_UNSAFE_CHARS = re.compile(r"[^a-z0-9]")

Exportable = Union[FilamentProfile, ProfileDraft]


def sanitize_name(name: str) -> str:
    """Lower-case a name and replace everything outside ``[a-z0-9]`` with ``_``."""
    return _UNSAFE_CHARS.sub("_", name.lower())


def profile_filename(profile: Exportable) -> str:
    """
    Derive the download file name for a profile.

    Example: "My PLA!" on a Bambu Lab printer with PLA gives
    ``my_pla__bambulab_pla.json``.
    """
    brand = profile.printer_brand.value.replace(" ", "")
    name = f"{sanitize_name(profile.profile_name)}_{brand}_{profile.filament_type.value}"
    return f"{name.lower()}.json"


def export_profile(profile: Exportable) -> Tuple[str, str]:
    """
    Serialize a profile for download.

    Args:
        profile: A finished profile or a draft

    Returns:
        (filename, JSON document)

    Raises:
        ValidationError: if the profile has no name
    """
    if not profile.profile_name.strip():
        raise ValidationError("Please provide a profile name before downloading.")

    document = json.dumps({DOCUMENT_KEY: profile.to_dict()}, indent=2, ensure_ascii=False)
    return profile_filename(profile), document


def save_profile(profile: Exportable, output_dir: Union[str, Path]) -> Path:
    """Export a profile and write it into a directory. Returns the file path."""
    filename, document = export_profile(profile)
    path = ensure_dir(output_dir) / filename
    path.write_text(document, encoding="utf-8")
    logger.info(f"Exported profile to {path}")
    return path


def load_profile_document(text: str, default_id: Optional[str] = None) -> FilamentProfile:
    """
    Read an exported document back into a profile.

    Args:
        text: JSON document as produced by ``export_profile``
        default_id: Id to assign when the document has none (draft exports)

    Raises:
        ValidationError: if the document is not a valid profile export
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Profile document is not valid JSON: {e}") from e

    if not isinstance(data, dict) or DOCUMENT_KEY not in data:
        raise ValidationError(f"Profile document has no '{DOCUMENT_KEY}' object")

    return FilamentProfile.from_dict(data[DOCUMENT_KEY], default_id=default_id)


def write_profile(profile: Exportable, path: Union[str, Path]) -> Path:
    """Export a profile to an explicit file path. Returns the path."""
    _, document = export_profile(profile)
    path = Path(path)
    ensure_dir(path.parent)
    path.write_text(document, encoding="utf-8")
    logger.info(f"Wrote profile to {path}")
    return path
