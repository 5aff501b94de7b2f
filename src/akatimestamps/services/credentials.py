"""Persistent storage for the refresh access key."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import tomli
import tomli_w

from akatimestamps.core.errors import CredentialStoreError

ACCESS_KEY_NAME = "aka-timestamps-key"


class CredentialStore(Protocol):
    """Minimal key/value capability used for the access key."""

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...


class MemoryCredentialStore:
    """Credential store that lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self.values[name] = value


class TomlCredentialStore:
    """Credential store backed by a TOML file of ``name = "value"`` pairs."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "rb") as f:
                data = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise CredentialStoreError(f"Invalid TOML in credentials file {self.path}: {e}") from e
        except OSError as e:
            raise CredentialStoreError(f"Cannot read credentials file {self.path}: {e}") from e

        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, name: str) -> str | None:
        """
        Read a stored value.

        Returns:
            The value, or None if the file or the name does not exist

        Raises:
            CredentialStoreError: If the file exists but cannot be read
        """
        return self._read().get(name)

    def set(self, name: str, value: str) -> None:
        """
        Store a value, keeping any other entries in the file.

        Raises:
            CredentialStoreError: If the file cannot be written
        """
        data = self._read()
        data[name] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "wb") as f:
                tomli_w.dump(data, f)
        except OSError as e:
            raise CredentialStoreError(f"Cannot write credentials file {self.path}: {e}") from e
