"""Gemini client for filament settings suggestions.

Calls the Gemini ``generateContent`` REST endpoint with a structured JSON
response schema, so the reply can be parsed straight into profile updates.

API Documentation: https://ai.google.dev/api/generate-content
"""

import asyncio
import time
from datetime import datetime
from typing import Optional
from urllib.parse import urljoin

import aiohttp

from filament_hub.ai.suggestions import (
    SUGGESTION_SCHEMA,
    SuggestionRequest,
    SuggestionResult,
    SuggestionStatus,
    build_prompt,
    parse_suggestion,
)
from filament_hub.profiles.errors import ConfigurationError, ServiceError
from filament_hub.utils import get_logger

logger = get_logger("ai.gemini")

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/"
DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiSuggestionClient:
    """
    Client for the Gemini generative language API.

    One ``suggest`` call makes at most one HTTP request: no retries and no
    caching. Without an API key it fails immediately with a
    ``ConfigurationError`` and makes no request at all.
    """

    provider = "gemini"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key (None disables suggestions)
            model: Model name
            base_url: API base URL
            timeout: Total request timeout in seconds
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return urljoin(self.base_url, f"models/{self.model}:generateContent")

    def _get_headers(self) -> dict:
        """Get API request headers."""
        return {
            "x-goog-api-key": self.api_key or "",
            "Content-Type": "application/json",
        }

    def _build_payload(self, request: SuggestionRequest) -> dict:
        return {
            "contents": [{"parts": [{"text": build_prompt(request)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": SUGGESTION_SCHEMA,
            },
        }

    @staticmethod
    def _extract_text(data: dict) -> str:
        """Pull the generated text out of a generateContent response."""
        try:
            parts = data["candidates"][0]["content"]["parts"]
            return "".join(part.get("text", "") for part in parts)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ServiceError("Suggestion service returned no content") from e

    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        """
        Request suggested print settings.

        Args:
            request: Printer brand, filament type and filament brand

        Returns:
            SuggestionResult with updates on success, or a typed error
        """
        if not self.api_key:
            return SuggestionResult.failed(
                request,
                self.provider,
                ConfigurationError("API key is not configured. AI suggestions are disabled."),
            )

        started = time.monotonic()
        started_at = datetime.now().isoformat()
        logger.info(
            f"Requesting suggestion {request.request_id}: "
            f"{request.printer_brand.value} / {request.filament_type.value}"
        )

        try:
            updates = await self._post(request)
        except ServiceError as e:
            logger.error(f"Suggestion {request.request_id} failed: {e.message}")
            result = SuggestionResult.failed(request, self.provider, e)
            result.started_at = started_at
            result.duration_seconds = time.monotonic() - started
            return result

        logger.info(f"Suggestion {request.request_id} completed")
        return SuggestionResult(
            request_id=request.request_id,
            status=SuggestionStatus.COMPLETED,
            provider=self.provider,
            updates=updates,
            started_at=started_at,
            duration_seconds=time.monotonic() - started,
        )

    async def _post(self, request: SuggestionRequest) -> dict:
        """Send the request and parse the reply. Raises ServiceError."""
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.endpoint,
                    headers=self._get_headers(),
                    json=self._build_payload(request),
                ) as response:
                    if response.status in (401, 403):
                        raise ServiceError("Invalid API key")

                    if response.status == 429:
                        raise ServiceError("Rate limit exceeded")

                    if response.status != 200:
                        text = await response.text(errors="replace")
                        raise ServiceError(f"API error (HTTP {response.status}): {text}")

                    try:
                        data = await response.json(content_type=None)
                    except ValueError as e:
                        raise ServiceError(f"Could not parse service response: {e}") from e

        except aiohttp.ClientError as e:
            raise ServiceError(f"Connection error: {e}") from e
        except asyncio.TimeoutError as e:
            raise ServiceError("Suggestion request timed out") from e
        except ValueError as e:
            raise ServiceError(f"Could not read service response: {e}") from e

        return parse_suggestion(self._extract_text(data))
