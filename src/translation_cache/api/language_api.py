# SPDX-License-Identifier: Apache-2.0
"""Typed access to the actions of the language API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from translation_cache.api.base import ApiClient
from translation_cache.api.validator import validate_response
from translation_cache.errors import ApiError
from translation_cache.models import API_MODE, API_SYSTEM, API_TARGET, ApiAction

logger = logging.getLogger(__name__)


class LanguageApi:
    """Language service of the remote API.

    Each method performs one action, validates the response and returns the
    payload in the shape that action produces.
    """

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def _call(self, action: ApiAction, post_params: dict[str, str]) -> Any:
        get_params = {"system": API_SYSTEM, "action": action.value}
        logger.debug("Calling %s with %s", action.value, post_params)
        response = await self._client.call(API_TARGET, API_MODE, get_params, post_params)
        return validate_response(response)

    async def get_language_file(self, language: str) -> str:
        """Fetch the language file content for a language."""
        data = await self._call(ApiAction.GET_LANGUAGE_FILE, {"language": language})
        return _as_text(data)

    async def get_applet_languages(self, applet: str) -> list[str]:
        """Fetch the languages available for an applet.

        A JSON object is accepted as well; its values are the languages.
        """
        data = await self._call(ApiAction.GET_APPLET_LANGUAGES, {"applet": applet})
        if isinstance(data, Mapping):
            data = list(data.values())
        if data is None:
            return []
        if not isinstance(data, list):
            raise ApiError(f"Wrong response: {data}", data=data)
        return [str(language) for language in data]

    async def get_applet_language_file(self, applet: str, language: str) -> str:
        """Fetch the language XML of an applet."""
        data = await self._call(
            ApiAction.GET_APPLET_LANGUAGE_FILE,
            {"applet": applet, "language": language},
        )
        return _as_text(data)


def _as_text(data: Any) -> str:
    """Return a file payload as text; only strings and numbers are file content."""
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    if isinstance(data, (int, float)) and not isinstance(data, bool):
        return str(data)
    raise ApiError(f"Wrong response: expected file content, got {type(data).__name__}", data=data)
