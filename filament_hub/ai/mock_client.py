"""Mock suggestion client for testing without API calls."""

from datetime import datetime
from typing import Dict

from filament_hub.ai.suggestions import (
    SuggestionRequest,
    SuggestionResult,
    SuggestionStatus,
)
from filament_hub.profiles.models import FilamentType, PrinterBrand
from filament_hub.utils import get_logger

logger = get_logger("ai.mock")

# Typical starting points per material
_BASE_SETTINGS: Dict[FilamentType, Dict[str, float]] = {
    FilamentType.PLA: {
        "nozzleTemp": 215, "bedTemp": 60, "printSpeed": 60,
        "retractionDistance": 0.8, "retractionSpeed": 40, "fanSpeed": 100,
    },
    FilamentType.ABS: {
        "nozzleTemp": 245, "bedTemp": 100, "printSpeed": 50,
        "retractionDistance": 1, "retractionSpeed": 40, "fanSpeed": 20,
    },
    FilamentType.PETG: {
        "nozzleTemp": 240, "bedTemp": 75, "printSpeed": 50,
        "retractionDistance": 1.5, "retractionSpeed": 35, "fanSpeed": 50,
    },
    FilamentType.TPU: {
        "nozzleTemp": 225, "bedTemp": 50, "printSpeed": 25,
        "retractionDistance": 1.5, "retractionSpeed": 20, "fanSpeed": 50,
    },
    FilamentType.ASA: {
        "nozzleTemp": 250, "bedTemp": 100, "printSpeed": 50,
        "retractionDistance": 1, "retractionSpeed": 40, "fanSpeed": 30,
    },
    FilamentType.OTHER: {
        "nozzleTemp": 220, "bedTemp": 60, "printSpeed": 50,
        "retractionDistance": 1, "retractionSpeed": 40, "fanSpeed": 80,
    },
}

# Core XY machines run much faster than bed slingers
_SPEED_FACTOR = {
    PrinterBrand.BAMBU_LAB: 3.0,
}


class MockClient:
    """
    Mock client for testing suggestions without API calls.

    Returns fixed settings per filament type and counts calls.
    """

    provider = "mock"

    def __init__(self):
        """Initialize mock client."""
        self.calls = 0

    @property
    def is_configured(self) -> bool:
        return True

    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        """
        Return canned settings for the requested filament type.

        Args:
            request: Suggestion request

        Returns:
            Completed SuggestionResult
        """
        self.calls += 1
        logger.info(f"Mock suggestion: {request.printer_brand.value} / {request.filament_type.value}")

        updates = {k: float(v) for k, v in _BASE_SETTINGS[request.filament_type].items()}
        updates["printSpeed"] *= _SPEED_FACTOR.get(request.printer_brand, 1.0)

        return SuggestionResult(
            request_id=request.request_id,
            status=SuggestionStatus.COMPLETED,
            provider=self.provider,
            updates=updates,
            started_at=datetime.now().isoformat(),
        )
