"""Episode directory held by a session."""

from __future__ import annotations

import warnings
from enum import Enum

from akatimestamps.core.errors import EpisodeServiceError
from akatimestamps.core.models import Episode
from akatimestamps.services.api import EpisodeService


class LoadState(Enum):
    """What the directory can show."""

    UNRESOLVED = "unresolved"  # no fetch completed yet
    EMPTY = "empty"  # no episodes, or the fetch failed
    POPULATED = "populated"


class EpisodeDirectory:
    """Holds the episode list fetched from the episode service.

    A failed fetch leaves an empty directory behind instead of raising, so
    callers cannot tell a failure from a service with no episodes.
    """

    def __init__(self, service: EpisodeService) -> None:
        self.service = service
        self._episodes: list[Episode] | None = None

    @property
    def episodes(self) -> list[Episode] | None:
        """Current episodes, None until the first fetch completes."""
        return self._episodes

    @property
    def resolved(self) -> bool:
        return self._episodes is not None

    @property
    def load_state(self) -> LoadState:
        if self._episodes is None:
            return LoadState.UNRESOLVED
        if not self._episodes:
            return LoadState.EMPTY
        return LoadState.POPULATED

    async def refresh_directory(self) -> list[Episode]:
        """
        Replace the held episodes with a fresh listing.

        Returns:
            The new episode list, empty if the fetch failed
        """
        try:
            episodes = await self.service.list_episodes()
        except EpisodeServiceError as e:
            warnings.warn(
                f"Could not load episodes: {e}. Showing an empty directory.",
                UserWarning,
                stacklevel=2,
            )
            episodes = []

        self._episodes = episodes
        return episodes

    def get(self, number: int) -> Episode | None:
        """Find an episode by its number."""
        for episode in self._episodes or []:
            if episode.number == number:
                return episode
        return None
