"""Access-gated refresh of the episode directory.

Asking the episode service for new videos costs it video-platform quota,
so the request is behind an access key. The controller models the gate
the user goes through:

    CLOSED --open()--> OPEN --trigger()--> SUBMITTING
    SUBMITTING --rejected--> OPEN
    SUBMITTING --accepted--> CLOSED (after reloading the directory)

It has no knowledge of how the gate is presented.
"""

from __future__ import annotations

import asyncio
import warnings
from collections.abc import Awaitable, Callable
from enum import Enum

from akatimestamps.core.errors import CredentialStoreError, EpisodeServiceError
from akatimestamps.services.api import EpisodeService
from akatimestamps.services.credentials import ACCESS_KEY_NAME, CredentialStore
from akatimestamps.services.directory import EpisodeDirectory

# Gives the service time to start publishing new results before reloading
DEFAULT_RELOAD_DELAY = 0.5


class GateState(Enum):
    """States of the refresh gate."""

    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"


class RefreshController:
    """Drives key entry, the re-fetch call and the directory reload.

    Args:
        service: Episode service receiving the re-fetch request
        directory: Directory reloaded after an accepted request
        credentials: Store the access key is loaded from and saved to
        reload_delay: Seconds to wait between acceptance and reload
        sleep: Coroutine used for the delay, replaceable in tests
    """

    def __init__(
        self,
        service: EpisodeService,
        directory: EpisodeDirectory,
        credentials: CredentialStore,
        *,
        reload_delay: float = DEFAULT_RELOAD_DELAY,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self.service = service
        self.directory = directory
        self.credentials = credentials
        self.reload_delay = reload_delay
        self._sleep = sleep
        self._state = GateState.CLOSED
        self._error = ""
        self.key = ""

    def current_state(self) -> GateState:
        return self._state

    def last_error(self) -> str:
        """Message of the last rejected request, empty if none."""
        return self._error

    @property
    def is_busy(self) -> bool:
        return self._state is GateState.SUBMITTING

    async def activate(self) -> None:
        """Load the persisted access key. Does not open the gate."""
        try:
            stored = self.credentials.get(ACCESS_KEY_NAME)
        except CredentialStoreError as e:
            warnings.warn(f"Could not load access key: {e}", UserWarning, stacklevel=2)
            return

        if stored:
            self.key = stored

    def open(self) -> bool:
        """Reveal the gate. Returns False if it was not closed."""
        if self._state is not GateState.CLOSED:
            return False
        self._state = GateState.OPEN
        return True

    def close(self) -> bool:
        """Hide the gate again without submitting."""
        if self._state is not GateState.OPEN:
            return False
        self._state = GateState.CLOSED
        return True

    def set_key(self, value: str) -> bool:
        """Edit the access key. Inputs are disabled while submitting."""
        if self.is_busy:
            return False
        self.key = value
        return True

    async def trigger(self) -> bool:
        """
        Submit the access key and reload the directory on success.

        Only acts while the gate is open; a second trigger during a running
        submission is ignored.

        Returns:
            True if the service accepted the request and the directory was
            reloaded, False otherwise (see ``last_error()``)
        """
        if self._state is not GateState.OPEN:
            return False

        self._state = GateState.SUBMITTING
        try:
            self._error = ""
            self._persist_key()

            try:
                response = await self.service.request_refetch(self.key)
                error = response.error
            except EpisodeServiceError as e:
                error = str(e)

            if error:
                self._error = error
                self._state = GateState.OPEN
                return False

            await self._sleep(self.reload_delay)
            await self.directory.refresh_directory()
            self._error = ""
            self._state = GateState.CLOSED
            return True
        finally:
            if self._state is GateState.SUBMITTING:
                self._state = GateState.OPEN

    def _persist_key(self) -> None:
        # Saved even when empty or wrong so it need not be typed again
        try:
            self.credentials.set(ACCESS_KEY_NAME, self.key)
        except CredentialStoreError as e:
            warnings.warn(f"Could not save access key: {e}", UserWarning, stacklevel=3)
