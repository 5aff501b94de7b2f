"""Service modules for akatimestamps."""

from akatimestamps.services.api import EpisodeService
from akatimestamps.services.clipboard import Clipboard, SystemClipboard, copy_timeline
from akatimestamps.services.credentials import (
    ACCESS_KEY_NAME,
    CredentialStore,
    MemoryCredentialStore,
    TomlCredentialStore,
)
from akatimestamps.services.directory import EpisodeDirectory, LoadState
from akatimestamps.services.refresh import GateState, RefreshController

__all__ = [
    "ACCESS_KEY_NAME",
    "Clipboard",
    "CredentialStore",
    "EpisodeDirectory",
    "EpisodeService",
    "GateState",
    "LoadState",
    "MemoryCredentialStore",
    "RefreshController",
    "SystemClipboard",
    "TomlCredentialStore",
    "copy_timeline",
]
