"""One client session: the objects a user works with between start and exit."""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable

import httpx

from akatimestamps.core.config import AkaConfig
from akatimestamps.core.theme import Theme, pick_theme
from akatimestamps.services.api import EpisodeService
from akatimestamps.services.clipboard import Clipboard, SystemClipboard
from akatimestamps.services.credentials import CredentialStore, TomlCredentialStore
from akatimestamps.services.directory import EpisodeDirectory
from akatimestamps.services.refresh import RefreshController


class Session:
    """Builds and owns the directory, the refresh controller and their collaborators.

    Use as an async context manager; the shared HTTP client is closed on exit.

    Args:
        config: Loaded configuration
        client: Optional httpx client; one is created and owned otherwise
        credentials: Optional credential store, defaults to the configured file
        clipboard: Optional clipboard, defaults to the system clipboard
        rng: Random source for the theme
        sleep: Delay coroutine handed to the refresh controller
    """

    def __init__(
        self,
        config: AkaConfig,
        *,
        client: httpx.AsyncClient | None = None,
        credentials: CredentialStore | None = None,
        clipboard: Clipboard | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self.config = config
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=config.get_timeout())
        self.service = EpisodeService(config.api.base_url, client=self.client)
        if credentials is None:
            credentials = TomlCredentialStore(config.get_credentials_path())
        self.credentials = credentials
        self.clipboard = clipboard if clipboard is not None else SystemClipboard()
        self.directory = EpisodeDirectory(self.service)
        self.controller = RefreshController(
            self.service,
            self.directory,
            self.credentials,
            reload_delay=config.refresh.reload_delay,
            sleep=sleep,
        )
        self.theme: Theme = pick_theme(rng)

    async def activate(self) -> None:
        """Load the directory and the persisted access key."""
        await asyncio.gather(
            self.directory.refresh_directory(),
            self.controller.activate(),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> Session:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
