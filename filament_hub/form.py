"""Profile creation form controller.

Owns the draft profile of one creation session: applies field edits,
runs at most one AI suggestion at a time, merges suggestions into the draft
and produces finished profiles for export or sharing.
"""

import itertools
from enum import Enum
from typing import Any, Optional, Tuple

from filament_hub.ai.suggestions import (
    SUGGESTION_FIELDS,
    SuggestionClient,
    SuggestionRequest,
    SuggestionResult,
    SuggestionStatus,
)
from filament_hub.profiles.community import CommunityStore
from filament_hub.profiles.errors import ConfigurationError, ProfileError, ServiceError, ValidationError
from filament_hub.profiles.export import export_profile
from filament_hub.profiles.models import (
    FieldKind,
    FilamentProfile,
    FilamentType,
    PrinterBrand,
    ProfileDraft,
    parse_numeric,
    resolve_field,
)
from filament_hub.utils import get_logger, timestamp_ms

logger = get_logger("form")

_id_sequence = itertools.count(1)


def generate_profile_id() -> str:
    """Generate a profile id unique within this process."""
    return f"user-{timestamp_ms()}-{next(_id_sequence)}"


class FormState(str, Enum):
    """Suggestion state of a form."""
    IDLE = "idle"
    SUGGESTING = "suggesting"


class ProfileForm:
    """
    Controller for creating a new filament profile.

    The draft is owned exclusively by the form; ``draft`` returns a copy.
    """

    def __init__(self, client: Optional[SuggestionClient] = None):
        """
        Initialize form with a default draft.

        Args:
            client: Suggestion client (None disables suggestions)
        """
        self.client = client
        self._draft = ProfileDraft()
        self._state = FormState.IDLE
        self.last_error: Optional[ProfileError] = None

    @property
    def draft(self) -> ProfileDraft:
        """Snapshot of the current draft."""
        return self._draft.copy()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def is_suggesting(self) -> bool:
        return self._state == FormState.SUGGESTING

    def reset(self) -> None:
        """Start a new creation session with default values.

        A suggestion still in flight is not merged into the new draft.
        """
        self._draft = ProfileDraft()
        self.last_error = None

    def update_field(self, name: str, raw_value: Any) -> Any:
        """
        Apply a user edit to the draft.

        Numeric fields never fail: unparseable input is stored as 0.

        Args:
            name: Field name, e.g. ``nozzleTemp`` or ``nozzle_temp``
            raw_value: Value as entered

        Returns:
            The value stored in the draft

        Raises:
            ValidationError: for unknown fields or unknown brand/type values
        """
        _, attr, kind = resolve_field(name)

        if kind == FieldKind.NUMERIC:
            value: Any = parse_numeric(raw_value)
        elif kind == FieldKind.PRINTER_BRAND:
            value = PrinterBrand.parse(raw_value)
        elif kind == FieldKind.FILAMENT_TYPE:
            value = FilamentType.parse(raw_value)
        else:
            value = "" if raw_value is None else str(raw_value)

        setattr(self._draft, attr, value)
        return value

    def _merge(self, updates: dict) -> None:
        """Overwrite only the suggested fields."""
        for key, value in updates.items():
            if key not in SUGGESTION_FIELDS:
                continue
            _, attr, _ = resolve_field(key)
            setattr(self._draft, attr, parse_numeric(value))

    async def request_suggestion(self) -> SuggestionResult:
        """
        Ask the suggestion service for settings and merge them into the draft.

        Only one request may be in flight. A call made while suggesting is
        rejected and leaves the draft and ``last_error`` untouched.

        Returns:
            The suggestion outcome; failures are also stored in ``last_error``
        """
        request = SuggestionRequest(
            printer_brand=self._draft.printer_brand,
            filament_type=self._draft.filament_type,
            filament_brand=self._draft.filament_brand,
        )
        provider = getattr(self.client, "provider", "none")

        if self._state == FormState.SUGGESTING:
            logger.warning("Suggestion already in progress; request rejected")
            return SuggestionResult(
                request_id=request.request_id,
                status=SuggestionStatus.REJECTED,
                provider=provider,
                error=ValidationError("A suggestion request is already in progress."),
            )

        if self.client is None or not self.client.is_configured:
            error = ConfigurationError("API key is not configured. AI suggestions are disabled.")
            self.last_error = error
            return SuggestionResult.failed(request, provider, error)

        draft = self._draft
        self._state = FormState.SUGGESTING
        self.last_error = None
        try:
            result = await self.client.suggest(request)
        except Exception as e:
            logger.error(f"Suggestion client {provider} failed: {e}")
            result = SuggestionResult.failed(request, provider, ServiceError(f"Suggestion failed: {e}"))
        finally:
            self._state = FormState.IDLE

        if self._draft is not draft:
            logger.info(f"Draft was reset; suggestion {result.request_id} discarded")
        elif result.is_successful:
            self._merge(result.updates)
        else:
            self.last_error = result.error or ProfileError("An unknown error occurred.")

        return result

    def finalize(self) -> FilamentProfile:
        """
        Produce a finished profile from the draft.

        The returned profile has a fresh id and does not change with later
        draft edits.

        Raises:
            ValidationError: if the profile name is empty
        """
        if not self._draft.profile_name.strip():
            raise ValidationError("Please provide a profile name before sharing.")

        profile = self._draft.to_profile(generate_profile_id())
        logger.info(f"Finalized profile {profile.id}: {profile.profile_name}")
        return profile

    def export(self) -> Tuple[str, str]:
        """Export the current draft. Returns (filename, JSON document)."""
        return export_profile(self._draft)

    def share(self, store: CommunityStore) -> FilamentProfile:
        """Finalize the draft and append it to a community store."""
        profile = self.finalize()
        store.append(profile)
        return profile
