"""In-memory list of profiles shared by the community."""

from typing import Awaitable, Callable, Iterable, List, Set, Tuple

from filament_hub.profiles.errors import ValidationError
from filament_hub.profiles.models import FilamentProfile
from filament_hub.utils import get_logger

logger = get_logger("profiles.community")


class CommunityStore:
    """
    Append-only, ordered collection of shared profiles.

    Ids are unique within the store; names may repeat. ``is_loading`` is
    toggled by whatever fills the store initially.
    """

    def __init__(self):
        self._profiles: List[FilamentProfile] = []
        self._ids: Set[str] = set()
        self._loading = False

    @property
    def is_loading(self) -> bool:
        """Whether an initial population is in progress."""
        return self._loading

    def set_loading(self, loading: bool) -> None:
        """Set the loading flag."""
        self._loading = bool(loading)

    def append(self, profile: FilamentProfile) -> None:
        """
        Add a profile to the end of the list.

        Raises:
            ValidationError: if a profile with the same id is already present
        """
        if profile.id in self._ids:
            raise ValidationError(f"A profile with id '{profile.id}' has already been shared")
        self._profiles.append(profile)
        self._ids.add(profile.id)
        logger.info(f"Shared profile {profile.id}: {profile.profile_name}")

    def list(self) -> Tuple[FilamentProfile, ...]:
        """Get a read-only snapshot of the shared profiles."""
        return tuple(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    async def populate(self, fetch: Callable[[], Awaitable[Iterable[FilamentProfile]]]) -> int:
        """
        Fill the store from an external source.

        The loading flag is set for the duration of the fetch and cleared
        afterwards, even if the fetch fails. The batch is added all or
        nothing: a duplicate id anywhere in it leaves the store unchanged.

        Args:
            fetch: Coroutine function returning the profiles to add

        Returns:
            Number of profiles added
        """
        self.set_loading(True)
        try:
            profiles = list(await fetch())
            seen = set(self._ids)
            for profile in profiles:
                if profile.id in seen:
                    raise ValidationError(f"A profile with id '{profile.id}' has already been shared")
                seen.add(profile.id)
            for profile in profiles:
                self.append(profile)
        finally:
            self.set_loading(False)
        logger.info(f"Loaded {len(profiles)} community profiles")
        return len(profiles)
