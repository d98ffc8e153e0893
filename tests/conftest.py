# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for translation cache tests."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

from translation_cache.config import MappingConfig


class FakeApiClient:
    """Scripted API client.

    ``responses`` maps an action name to a response, or to a callable taking
    the post parameters and returning one.
    """

    def __init__(self, responses: Mapping[str, Any]) -> None:
        self._responses = dict(responses)
        self.calls: list[tuple[str, str, dict[str, str], dict[str, str]]] = []

    async def call(
        self,
        target: str,
        mode: str,
        get_params: Mapping[str, str],
        post_params: Mapping[str, str],
    ) -> Any:
        self.calls.append((target, mode, dict(get_params), dict(post_params)))
        response = self._responses[get_params["action"]]
        if callable(response):
            return response(dict(post_params))
        return response

    async def __aenter__(self) -> FakeApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None

    def actions(self) -> list[str]:
        return [get_params["action"] for _, _, get_params, _ in self.calls]


class ProgressRecorder:
    """Collects progress messages."""

    def __init__(self) -> None:
        self.events: list[tuple[str, int, int, str]] = []

    def __call__(self, stage: str, current: int, total: int, message: str = "") -> None:
        self.events.append((stage, current, total, message))

    @property
    def messages(self) -> list[str]:
        return [message for *_, message in self.events]


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., MappingConfig]:
    """Build a configuration rooted in ``tmp_path``."""

    def _make(applications: Mapping[str, list[str]] | None = None) -> MappingConfig:
        return MappingConfig(
            {
                "system": {
                    "paths": {"root": str(tmp_path)},
                    "translated_applications": dict(applications or {}),
                    "api": {"url": "http://localhost/api"},
                }
            }
        )

    return _make


@pytest.fixture
def progress() -> ProgressRecorder:
    return ProgressRecorder()


@pytest.fixture
def make_client() -> type[FakeApiClient]:
    return FakeApiClient
