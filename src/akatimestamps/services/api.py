"""Client for the remote episode service.

The service exposes two endpoints: ``GET /eps`` lists the analysed episodes
and ``POST /eps/re-fetch`` asks it to look for new videos and analyse them.
"""

from __future__ import annotations

from typing import Any

import httpx

from akatimestamps.core.config import DEFAULT_BASE_URL
from akatimestamps.core.errors import EpisodeServiceError
from akatimestamps.core.models import Episode, RefetchResponse, parse_episodes


class EpisodeService:
    """Talks to the episode service over HTTP.

    Args:
        base_url: Service address without a trailing slash
        client: Optional httpx client, mainly for testing. When omitted a
            client is opened and closed around every call.
        timeout: Request timeout in seconds, None for no timeout
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _open_client(self) -> tuple[httpx.AsyncClient, bool]:
        if self._client is not None:
            return self._client, False
        return httpx.AsyncClient(timeout=self.timeout), True

    async def list_episodes(self) -> list[Episode]:
        """
        Fetch the episode directory.

        Returns:
            Episodes in the order the service lists them

        Raises:
            EpisodeServiceError: If the request fails, the service answers
                with an error status, or the payload cannot be decoded
        """
        client, should_close_client = self._open_client()

        try:
            response = await client.get(self._url("/eps"))
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise EpisodeServiceError(
                f"Episode service returned error status {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise EpisodeServiceError(f"Failed to connect to episode service: {e}") from e
        except ValueError as e:
            raise EpisodeServiceError(f"Invalid JSON response from episode service: {e}") from e
        finally:
            if should_close_client:
                await client.aclose()

        return parse_episodes(data)

    async def request_refetch(self, key: str) -> RefetchResponse:
        """
        Ask the service to look for new episodes and analyse them.

        The service answers a rejected key with HTTP 400 and an ``error``
        field, so the body is read before the status code.

        Args:
            key: Access key sent as ``{"key": key}``

        Returns:
            RefetchResponse whose ``error`` is empty on success

        Raises:
            EpisodeServiceError: If the service cannot be reached, or it
                answers with an error status and no error message
        """
        client, should_close_client = self._open_client()

        try:
            response = await client.post(self._url("/eps/re-fetch"), json={"key": key})
        except httpx.RequestError as e:
            raise EpisodeServiceError(f"Failed to connect to episode service: {e}") from e
        finally:
            if should_close_client:
                await client.aclose()

        error = _error_message(response)
        if error:
            return RefetchResponse(error=error)
        if response.is_error:
            raise EpisodeServiceError(
                f"Episode service returned error status {response.status_code}"
            )
        return RefetchResponse()


def _error_message(response: httpx.Response) -> str:
    """Extract a non-empty ``error`` string from a JSON object body."""
    try:
        data: Any = response.json()
    except ValueError:
        return ""

    if not isinstance(data, dict):
        return ""
    error = data.get("error")
    if isinstance(error, str):
        return error
    return ""
