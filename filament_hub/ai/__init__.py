"""AI-backed print settings suggestions for Filament Hub."""

from filament_hub.ai.suggestions import (
    SUGGESTION_FIELDS,
    SUGGESTION_SCHEMA,
    SuggestionClient,
    SuggestionRequest,
    SuggestionResult,
    SuggestionStatus,
    build_prompt,
    parse_suggestion,
)
from filament_hub.ai.gemini_client import GeminiSuggestionClient
from filament_hub.ai.mock_client import MockClient

__all__ = [
    "SUGGESTION_FIELDS",
    "SUGGESTION_SCHEMA",
    "SuggestionClient",
    "SuggestionRequest",
    "SuggestionResult",
    "SuggestionStatus",
    "build_prompt",
    "parse_suggestion",
    "GeminiSuggestionClient",
    "MockClient",
]
