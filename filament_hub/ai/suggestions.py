"""AI-backed print settings suggestions.

A suggestion is a partial profile update for the six tunable numeric
fields, computed by an external generative service from the printer brand,
filament type and filament brand. Clients never raise: every call resolves
to a ``SuggestionResult`` holding either the updates or a typed error.
"""

import json
import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Protocol, runtime_checkable
from uuid import uuid4

from filament_hub.profiles.errors import ProfileError, ServiceError
from filament_hub.profiles.models import FilamentType, PrinterBrand

# Fields a suggestion may set, in document (camelCase) form
SUGGESTION_FIELDS = (
    "nozzleTemp",
    "bedTemp",
    "printSpeed",
    "retractionDistance",
    "retractionSpeed",
    "fanSpeed",
)

# Structured response schema requested from the service
SUGGESTION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "nozzleTemp": {"type": "NUMBER", "description": "Nozzle temperature in Celsius"},
        "bedTemp": {"type": "NUMBER", "description": "Bed temperature in Celsius"},
        "printSpeed": {"type": "NUMBER", "description": "Print speed in mm/s"},
        "retractionDistance": {"type": "NUMBER", "description": "Retraction distance in mm"},
        "retractionSpeed": {"type": "NUMBER", "description": "Retraction speed in mm/s"},
        "fanSpeed": {"type": "NUMBER", "description": "Part cooling fan speed in percent (0-100)"},
    },
    "required": list(SUGGESTION_FIELDS),
}


class SuggestionStatus(str, Enum):
    """Outcome of a suggestion request."""
    COMPLETED = "completed"
    FAILED = "failed"
    REJECTED = "rejected"  # Another request was already in flight


@dataclass
class SuggestionRequest:
    """Inputs for a settings suggestion."""

    printer_brand: PrinterBrand
    filament_type: FilamentType
    filament_brand: str = ""

    request_id: str = field(default_factory=lambda: str(uuid4())[:8])

    def __post_init__(self):
        """Coerce enum inputs."""
        self.printer_brand = PrinterBrand.parse(self.printer_brand)
        self.filament_type = FilamentType.parse(self.filament_type)
        self.filament_brand = (self.filament_brand or "").strip()


@dataclass
class SuggestionResult:
    """Result of a suggestion request."""

    request_id: str
    status: SuggestionStatus
    provider: str

    # Suggested values keyed by document field name (if completed)
    updates: Dict[str, float] = field(default_factory=dict)

    # Error info (if failed or rejected)
    error: Optional[ProfileError] = None

    # Timing
    started_at: Optional[str] = None
    duration_seconds: float = 0.0

    @property
    def is_successful(self) -> bool:
        """Check if the suggestion can be merged."""
        return self.status == SuggestionStatus.COMPLETED and self.error is None

    @property
    def error_message(self) -> Optional[str]:
        """Human-readable error, if any."""
        return self.error.message if self.error else None

    @classmethod
    def failed(cls, request: SuggestionRequest, provider: str, error: ProfileError) -> "SuggestionResult":
        """Build a failed result."""
        return cls(
            request_id=request.request_id,
            status=SuggestionStatus.FAILED,
            provider=provider,
            error=error,
            started_at=datetime.now().isoformat(),
        )


@runtime_checkable
class SuggestionClient(Protocol):
    """Protocol for suggestion provider clients."""

    @property
    def is_configured(self) -> bool:
        """Whether the client has the credential it needs."""
        ...

    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        """Request suggested settings. Never raises."""
        ...


def build_prompt(request: SuggestionRequest) -> str:
    """Build the natural-language prompt for a suggestion request."""
    filament = request.filament_type.value
    if request.filament_brand:
        filament = f"{request.filament_brand} {filament}"

    return (
        f"Suggest optimal 3D printing settings for {filament} filament "
        f"on a {request.printer_brand.value} printer. "
        "Provide nozzle temperature (°C), bed temperature (°C), print speed (mm/s), "
        "retraction distance (mm), retraction speed (mm/s) and part cooling fan speed (%). "
        "Respond only with a JSON object matching the requested schema."
    )


def parse_suggestion(text: str) -> Dict[str, float]:
    """
    Parse a service response into profile updates.

    Args:
        text: JSON text returned by the service

    Returns:
        Exactly the six suggestion fields, each a finite non-negative float

    Raises:
        ServiceError: if the text is not a JSON object matching the schema
    """
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise ServiceError(f"Could not parse suggestion response: {e}") from e

    if not isinstance(data, dict):
        raise ServiceError("Suggestion response is not a JSON object")

    updates: Dict[str, float] = {}
    for key in SUGGESTION_FIELDS:
        if key not in data:
            raise ServiceError(f"Suggestion response is missing '{key}'")
        value = data[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ServiceError(f"Suggestion response has a non-numeric '{key}': {value!r}")
        value = float(value)
        if not math.isfinite(value) or value < 0:
            raise ServiceError(f"Suggestion response has an invalid '{key}': {value}")
        updates[key] = value

    return updates
