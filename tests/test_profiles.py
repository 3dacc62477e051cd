"""Tests for the filament profile model and preset catalog."""

import math

import pytest

from filament_hub.profiles.errors import ValidationError
from filament_hub.profiles.models import (
    NUMERIC_FIELDS,
    PROFILE_FIELDS,
    FieldKind,
    FilamentProfile,
    FilamentType,
    PrinterBrand,
    ProfileDraft,
    parse_numeric,
    resolve_field,
)
from filament_hub.profiles.presets import PRESET_PROFILES, PresetCatalog


class TestPrinterBrand:
    """Tests for PrinterBrand enum."""

    def test_brand_values(self):
        """Test display values."""
        assert PrinterBrand.BAMBU_LAB.value == "Bambu Lab"
        assert PrinterBrand.CREALITY.value == "Creality"
        assert len(PrinterBrand) == 7

    def test_parse_by_value_or_name(self):
        """Test lenient parsing."""
        assert PrinterBrand.parse("Bambu Lab") == PrinterBrand.BAMBU_LAB
        assert PrinterBrand.parse("BambuLab") == PrinterBrand.BAMBU_LAB
        assert PrinterBrand.parse("bambu_lab") == PrinterBrand.BAMBU_LAB
        assert PrinterBrand.parse("prusa") == PrinterBrand.PRUSA

    def test_parse_unknown(self):
        """Test unknown brand is rejected."""
        with pytest.raises(ValidationError, match="Unknown PrinterBrand"):
            PrinterBrand.parse("Makerbot")


class TestFilamentType:
    """Tests for FilamentType enum."""

    def test_type_values(self):
        """Test enum values."""
        assert [t.value for t in FilamentType] == ["PLA", "ABS", "PETG", "TPU", "ASA", "Other"]

    def test_parse(self):
        """Test parsing is case-insensitive."""
        assert FilamentType.parse("petg") == FilamentType.PETG
        assert FilamentType.parse(FilamentType.TPU) == FilamentType.TPU

    def test_parse_unknown(self):
        """Test unknown type is rejected."""
        with pytest.raises(ValidationError):
            FilamentType.parse("Nylon")


class TestFieldTable:
    """Tests for the editable field table."""

    def test_numeric_fields(self):
        """Test numeric fields are listed explicitly."""
        assert set(NUMERIC_FIELDS) == {
            "filamentDiameter", "nozzleTemp", "bedTemp", "printSpeed",
            "retractionDistance", "retractionSpeed", "fanSpeed",
        }

    def test_text_fields(self):
        """Test textual fields."""
        assert PROFILE_FIELDS["profileName"][1] == FieldKind.TEXT
        assert PROFILE_FIELDS["filamentBrand"][1] == FieldKind.TEXT
        assert PROFILE_FIELDS["notes"][1] == FieldKind.TEXT

    def test_resolve_by_key_or_attribute(self):
        """Test both naming styles resolve."""
        assert resolve_field("nozzleTemp") == ("nozzleTemp", "nozzle_temp", FieldKind.NUMERIC)
        assert resolve_field("nozzle_temp") == ("nozzleTemp", "nozzle_temp", FieldKind.NUMERIC)

    def test_resolve_unknown(self):
        """Test unknown and non-editable fields."""
        with pytest.raises(ValidationError):
            resolve_field("layerHeight")
        with pytest.raises(ValidationError):
            resolve_field("id")


class TestParseNumeric:
    """Tests for numeric input parsing."""

    def test_valid_numbers(self):
        """Test plain numbers."""
        assert parse_numeric("215") == 215.0
        assert parse_numeric(" 0.8 ") == 0.8
        assert parse_numeric(60) == 60.0

    def test_invalid_becomes_zero(self):
        """Test unparseable input becomes 0."""
        assert parse_numeric("abc") == 0
        assert parse_numeric("") == 0
        assert parse_numeric(None) == 0
        assert parse_numeric(True) == 0

    def test_non_finite_and_negative_become_zero(self):
        """Test values outside the finite non-negative range become 0."""
        assert parse_numeric("nan") == 0
        assert parse_numeric("inf") == 0
        assert parse_numeric("-5") == 0
        assert parse_numeric(float("nan")) == 0


class TestFilamentProfile:
    """Tests for FilamentProfile dataclass."""

    def test_defaults(self):
        """Test default values."""
        profile = FilamentProfile(id="p1", profile_name="Test")

        assert profile.printer_brand == PrinterBrand.BAMBU_LAB
        assert profile.filament_type == FilamentType.PLA
        assert profile.filament_diameter == 1.75
        assert profile.nozzle_temp == 220
        assert profile.bed_temp == 60
        assert profile.print_speed == 60
        assert profile.retraction_distance == 1
        assert profile.retraction_speed == 40
        assert profile.fan_speed == 100
        assert profile.notes is None

    def test_immutable(self):
        """Test profiles cannot be modified."""
        profile = FilamentProfile(id="p1", profile_name="Test")
        with pytest.raises(AttributeError):
            profile.nozzle_temp = 250

    def test_enum_coercion(self):
        """Test string enums are coerced."""
        profile = FilamentProfile(id="p1", profile_name="Test", printer_brand="Prusa", filament_type="abs")

        assert profile.printer_brand == PrinterBrand.PRUSA
        assert profile.filament_type == FilamentType.ABS

    def test_rejects_negative_numbers(self):
        """Test numeric validation."""
        with pytest.raises(ValidationError, match="nozzleTemp"):
            FilamentProfile(id="p1", profile_name="Test", nozzle_temp=-1)

    def test_rejects_non_finite_numbers(self):
        """Test infinity is rejected."""
        with pytest.raises(ValidationError):
            FilamentProfile(id="p1", profile_name="Test", bed_temp=math.inf)

    def test_rejects_empty_id(self):
        """Test an id is required."""
        with pytest.raises(ValidationError):
            FilamentProfile(id="", profile_name="Test")

    def test_summary(self):
        """Test card summary line."""
        profile = PresetCatalog().get("preset-2")
        assert profile.summary() == "Creality - Generic PETG"

    def test_to_dict_keys(self):
        """Test camelCase document keys in order."""
        profile = FilamentProfile(id="p1", profile_name="Test", notes="hi")
        data = profile.to_dict()

        assert list(data) == [
            "id", "profileName", "printerBrand", "filamentBrand", "filamentType",
            "filamentDiameter", "nozzleTemp", "bedTemp", "printSpeed",
            "retractionDistance", "retractionSpeed", "fanSpeed", "notes",
        ]
        assert data["printerBrand"] == "Bambu Lab"
        assert data["nozzleTemp"] == 220
        assert isinstance(data["nozzleTemp"], int)
        assert data["filamentDiameter"] == 1.75

    def test_to_dict_omits_missing_notes(self):
        """Test notes are left out when unset."""
        data = FilamentProfile(id="p1", profile_name="Test").to_dict()
        assert "notes" not in data

    def test_from_dict(self):
        """Test loading from a document."""
        profile = FilamentProfile.from_dict({
            "id": "x1",
            "profileName": "Loaded",
            "printerBrand": "Elegoo",
            "filamentType": "ASA",
            "nozzleTemp": 250,
        })

        assert profile.id == "x1"
        assert profile.printer_brand == PrinterBrand.ELEGOO
        assert profile.filament_type == FilamentType.ASA
        assert profile.nozzle_temp == 250
        assert profile.bed_temp == 60

    def test_from_dict_default_id(self):
        """Test default id when document has none."""
        profile = FilamentProfile.from_dict({"profileName": "Draft"}, default_id="user-1")
        assert profile.id == "user-1"

    @pytest.mark.parametrize("data", [
        {"id": "a", "profileName": 5},
        {"id": 7, "profileName": "Numeric id"},
        {"id": "a", "profileName": "Brand", "filamentBrand": ["x"]},
        {"id": "a", "profileName": "Notes", "notes": 3},
    ])
    def test_from_dict_rejects_non_string_text(self, data):
        """Test text fields must be strings."""
        with pytest.raises(ValidationError, match="must be a"):
            FilamentProfile.from_dict(data)

    def test_notes_may_be_none(self):
        """Test notes are optional."""
        assert FilamentProfile(id="a", profile_name="x", notes=None).notes is None

    def test_from_dict_requires_name(self):
        """Test documents without a name are rejected."""
        with pytest.raises(ValidationError, match="profileName"):
            FilamentProfile.from_dict({"id": "x"})


class TestProfileDraft:
    """Tests for ProfileDraft dataclass."""

    def test_defaults(self):
        """Test draft starts with form defaults."""
        draft = ProfileDraft()

        assert draft.profile_name == ""
        assert draft.printer_brand == PrinterBrand.BAMBU_LAB
        assert draft.filament_type == FilamentType.PLA
        assert draft.notes == ""

    def test_to_dict_has_no_id(self):
        """Test draft documents carry no id."""
        data = ProfileDraft(profile_name="Draft").to_dict()
        assert "id" not in data
        assert data["notes"] == ""

    def test_to_profile_is_independent(self):
        """Test finalized profile does not follow draft edits."""
        draft = ProfileDraft(profile_name="Draft")
        profile = draft.to_profile("user-1")
        draft.nozzle_temp = 300

        assert profile.nozzle_temp == 220
        assert profile.id == "user-1"


class TestPresetCatalog:
    """Tests for PresetCatalog."""

    def test_presets(self):
        """Test built-in presets."""
        catalog = PresetCatalog()

        assert len(catalog) == 3
        assert [p.id for p in catalog.list()] == ["preset-1", "preset-2", "preset-3"]

    def test_preset_values(self):
        """Test preset content."""
        bambu = PresetCatalog().get("preset-1")

        assert bambu.profile_name == "Bambu Lab PLA Basic"
        assert bambu.bed_temp == 55
        assert bambu.print_speed == 150
        assert bambu.retraction_distance == 0.8

    def test_get_unknown(self):
        """Test unknown preset id."""
        assert PresetCatalog().get("preset-99") is None

    def test_list_is_read_only(self):
        """Test the catalog list cannot be mutated."""
        presets = PresetCatalog().list()

        assert isinstance(presets, tuple)
        assert presets == PRESET_PROFILES
