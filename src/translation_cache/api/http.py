# SPDX-License-Identifier: Apache-2.0
"""HTTP client for the language API."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from translation_cache.config import ApiConfig
from translation_cache.errors import TransportError

logger = logging.getLogger(__name__)


class HttpApiClient:
    """Language API client over HTTP.

    Sends ``POST <base_url>?target=..&mode=..&<get params>`` with the post
    parameters as a form body and decodes the JSON answer.
    """

    def __init__(self, config: ApiConfig) -> None:
        """Initialize HttpApiClient.

        Args:
            config: API endpoint configuration.
        """
        self._config = config
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> HttpApiClient:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self._config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    def _build_query(self, target: str, mode: str, get_params: Mapping[str, str]) -> dict[str, str]:
        query = {"target": target, "mode": mode}
        query.update(get_params)
        if self._config.api_key:
            query["api_key"] = self._config.api_key
        return query

    async def call(
        self,
        target: str,
        mode: str,
        get_params: Mapping[str, str],
        post_params: Mapping[str, str],
    ) -> Any:
        """Perform a remote call.

        Returns:
            Decoded JSON response, or ``False`` for an empty body.

        Raises:
            TransportError: On connection failure, HTTP error status or an
                undecodable body.
        """
        session = await self._ensure_session()
        query = self._build_query(target, mode, get_params)
        logger.debug("API call %s/%s %s", target, mode, dict(get_params))

        try:
            async with session.post(
                self._config.base_url, params=query, data=dict(post_params)
            ) as response:
                body = await response.text()
                if response.status >= 400:
                    raise TransportError(
                        f"Language API error (status {response.status})",
                        context=query.get("action", ""),
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Language API request failed: {e}", cause=e) from e

        if not body.strip():
            return False
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise TransportError(
                "Language API returned an invalid JSON body", cause=e
            ) from e

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
