"""
Filament profile data model.

A profile is a named bundle of printer and filament print parameters.
Finished profiles are immutable ``FilamentProfile`` records; profiles under
active edit are mutable ``ProfileDraft`` instances owned by a form.

Serialized documents use camelCase keys:

    {
      "id": "preset-1",
      "profileName": "Bambu Lab PLA Basic",
      "printerBrand": "Bambu Lab",
      ...
    }
"""

import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from filament_hub.profiles.errors import ValidationError

E = TypeVar("E", bound=Enum)


def _normalize(text: str) -> str:
    return "".join(c for c in text.lower() if c not in " _-")


def _parse_enum(enum_cls: Type[E], value: Any) -> E:
    """Match an enum member by value or name, ignoring case and separators."""
    if isinstance(value, enum_cls):
        return value
    key = _normalize(str(value))
    for member in enum_cls:
        if key in (_normalize(member.value), _normalize(member.name)):
            return member
    choices = ", ".join(m.value for m in enum_cls)
    raise ValidationError(f"Unknown {enum_cls.__name__} '{value}' (expected one of: {choices})")


class PrinterBrand(str, Enum):
    """Supported printer brands."""
    BAMBU_LAB = "Bambu Lab"
    ANYCUBIC = "Anycubic"
    CREALITY = "Creality"
    PRUSA = "Prusa"
    ULTIMAKER = "Ultimaker"
    ELEGOO = "Elegoo"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Any) -> "PrinterBrand":
        return _parse_enum(cls, value)


class FilamentType(str, Enum):
    """Supported filament materials."""
    PLA = "PLA"
    ABS = "ABS"
    PETG = "PETG"
    TPU = "TPU"
    ASA = "ASA"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Any) -> "FilamentType":
        return _parse_enum(cls, value)


class FieldKind(str, Enum):
    """How an editable profile field is interpreted."""
    NUMERIC = "numeric"
    TEXT = "text"
    PRINTER_BRAND = "printer_brand"
    FILAMENT_TYPE = "filament_type"


# Document key -> (attribute name, kind). Order is the serialization order.
PROFILE_FIELDS: Dict[str, Tuple[str, FieldKind]] = {
    "profileName": ("profile_name", FieldKind.TEXT),
    "printerBrand": ("printer_brand", FieldKind.PRINTER_BRAND),
    "filamentBrand": ("filament_brand", FieldKind.TEXT),
    "filamentType": ("filament_type", FieldKind.FILAMENT_TYPE),
    "filamentDiameter": ("filament_diameter", FieldKind.NUMERIC),
    "nozzleTemp": ("nozzle_temp", FieldKind.NUMERIC),
    "bedTemp": ("bed_temp", FieldKind.NUMERIC),
    "printSpeed": ("print_speed", FieldKind.NUMERIC),
    "retractionDistance": ("retraction_distance", FieldKind.NUMERIC),
    "retractionSpeed": ("retraction_speed", FieldKind.NUMERIC),
    "fanSpeed": ("fan_speed", FieldKind.NUMERIC),
    "notes": ("notes", FieldKind.TEXT),
}

_ATTRIBUTE_KEYS = {attr: key for key, (attr, _) in PROFILE_FIELDS.items()}

NUMERIC_FIELDS = tuple(key for key, (_, kind) in PROFILE_FIELDS.items() if kind == FieldKind.NUMERIC)


def resolve_field(name: str) -> Tuple[str, str, FieldKind]:
    """
    Look up an editable field by document key or attribute name.

    Returns:
        (document key, attribute name, kind)

    Raises:
        ValidationError: if the field is unknown or not editable (e.g. ``id``)
    """
    if name in PROFILE_FIELDS:
        attr, kind = PROFILE_FIELDS[name]
        return name, attr, kind
    if name in _ATTRIBUTE_KEYS:
        key = _ATTRIBUTE_KEYS[name]
        return key, name, PROFILE_FIELDS[key][1]
    raise ValidationError(f"Unknown profile field '{name}'")


def parse_numeric(raw: Any) -> float:
    """
    Parse user input for a numeric field.

    Anything that is not a finite, non-negative number becomes 0.
    """
    if isinstance(raw, bool):
        return 0.0
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def _check_numeric(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{key} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{key} must be a finite, non-negative number, got {value!r}")
    return float(value)


def _json_number(value: float) -> Any:
    # 220.0 is written as 220, matching downloaded profile files
    return int(value) if float(value).is_integer() else value


def _document_fields(obj: Any) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for key, (attr, kind) in PROFILE_FIELDS.items():
        value = getattr(obj, attr)
        if kind == FieldKind.NUMERIC:
            value = _json_number(value)
        elif kind in (FieldKind.PRINTER_BRAND, FieldKind.FILAMENT_TYPE):
            value = value.value
        if key == "notes" and value is None:
            continue
        data[key] = value
    return data


@dataclass(frozen=True)
class FilamentProfile:
    """A finished, identified filament profile."""

    id: str
    profile_name: str
    printer_brand: PrinterBrand = PrinterBrand.BAMBU_LAB
    filament_brand: str = ""
    filament_type: FilamentType = FilamentType.PLA
    filament_diameter: float = 1.75  # mm
    nozzle_temp: float = 220  # °C
    bed_temp: float = 60  # °C
    print_speed: float = 60  # mm/s
    retraction_distance: float = 1  # mm
    retraction_speed: float = 40  # mm/s
    fan_speed: float = 100  # %
    notes: Optional[str] = None

    def __post_init__(self):
        """Coerce enums and validate field types."""
        if not isinstance(self.id, str) or not self.id:
            raise ValidationError("Profile id must be a non-empty string")
        for key, attr in (("profileName", "profile_name"), ("filamentBrand", "filament_brand")):
            if not isinstance(getattr(self, attr), str):
                raise ValidationError(f"{key} must be a string, got {getattr(self, attr)!r}")
        if self.notes is not None and not isinstance(self.notes, str):
            raise ValidationError(f"notes must be a string, got {self.notes!r}")
        object.__setattr__(self, "printer_brand", PrinterBrand.parse(self.printer_brand))
        object.__setattr__(self, "filament_type", FilamentType.parse(self.filament_type))
        for key in NUMERIC_FIELDS:
            attr = PROFILE_FIELDS[key][0]
            object.__setattr__(self, attr, _check_numeric(key, getattr(self, attr)))

    def summary(self) -> str:
        """One-line description, e.g. ``Creality - Generic PETG``."""
        return f"{self.printer_brand.value} - {self.filament_brand} {self.filament_type.value}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase document dictionary."""
        data: Dict[str, Any] = {"id": self.id}
        data.update(_document_fields(self))
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_id: Optional[str] = None) -> "FilamentProfile":
        """
        Create from a camelCase document dictionary.

        Missing fields take their defaults; ``default_id`` is used when the
        document has no id.

        Raises:
            ValidationError: if a value is invalid or no id is available
        """
        if not isinstance(data, dict):
            raise ValidationError("Profile document must be a JSON object")
        kwargs: Dict[str, Any] = {"id": data.get("id") or default_id}
        for key, (attr, _) in PROFILE_FIELDS.items():
            if key in data:
                kwargs[attr] = data[key]
        if not kwargs.get("profile_name"):
            raise ValidationError("Profile document has no profileName")
        return cls(**kwargs)


@dataclass
class ProfileDraft:
    """A profile under active edit. It has no id until finalized."""

    profile_name: str = ""
    printer_brand: PrinterBrand = PrinterBrand.BAMBU_LAB
    filament_brand: str = ""
    filament_type: FilamentType = FilamentType.PLA
    filament_diameter: float = 1.75
    nozzle_temp: float = 220
    bed_temp: float = 60
    print_speed: float = 60
    retraction_distance: float = 1
    retraction_speed: float = 40
    fan_speed: float = 100
    notes: Optional[str] = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase document dictionary (no id)."""
        return _document_fields(self)

    def copy(self) -> "ProfileDraft":
        """Return an independent copy."""
        return replace(self)

    def to_profile(self, profile_id: str) -> FilamentProfile:
        """Freeze this draft into a profile with the given id."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return FilamentProfile(id=profile_id, **values)
