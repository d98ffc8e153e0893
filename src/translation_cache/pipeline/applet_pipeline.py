# SPDX-License-Identifier: Apache-2.0
"""Applet language XML pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from translation_cache.api.base import ApiClient
from translation_cache.api.language_api import LanguageApi
from translation_cache.cache.writer import CacheLayout, write_cache
from translation_cache.config import ConfigProvider, get_root_path
from translation_cache.errors import CacheWriteError, DiscoveryEmptyError, ResponseError
from translation_cache.models import DEFAULT_APPLETS, Applet
from translation_cache.pipeline.progress import ProgressCallback
from translation_cache.pipeline.result import GenerationResult, StepResult

logger = logging.getLogger(__name__)


class AppletLanguagePipeline:
    """Discovers applet languages and caches their language XMLs."""

    def __init__(
        self,
        client: ApiClient,
        config: ConfigProvider,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Initialize AppletLanguagePipeline."""
        self._api = LanguageApi(client)
        self._config = config
        self._progress_callback = progress_callback

    async def run(self, applets: Sequence[Applet] = DEFAULT_APPLETS) -> GenerationResult:
        """Cache the language XMLs of every applet.

        Args:
            applets: Applets to process (the built-in list by default).

        Returns:
            Result with the written files; stops at the first failure.
        """
        layout = CacheLayout(get_root_path(self._config))
        total = len(applets)

        logger.info("Getting language XMLs for %d applet(s)", total)
        self._notify("start", 0, total, "Getting applet language XMLs..")

        result = GenerationResult()
        for index, applet in enumerate(applets, start=1):
            step = await self._process_applet(layout, applet, index, total)
            result.written.extend(step.value or [])
            if not step.ok:
                result.error = step.error
                logger.info("Applet language XML generation stopped: %s", step.error)
                return result

        self._notify("finish", total, total, "Applet language XMLs generated.")
        return result

    async def _process_applet(
        self,
        layout: CacheLayout,
        applet: Applet,
        index: int,
        total: int,
    ) -> StepResult[list[Path]]:
        label = f"{applet.identifier} ({applet.directory})"
        self._notify("applet", index, total, f"Getting > {label} language xmls..")

        discovered = await self._discover_languages(applet)
        if not discovered.ok:
            return StepResult(value=[], error=discovered.error)
        languages = discovered.unwrap()
        self._notify("applet", index, total, f"Available languages: {', '.join(languages)}")

        written: list[Path] = []
        for language in languages:
            fetched = await self._fetch_language_xml(applet, language)
            if not fetched.ok:
                return StepResult(value=written, error=fetched.error)

            stored = self._store_language_xml(layout, applet, language, fetched.unwrap())
            if not stored.ok:
                return StepResult(value=written, error=stored.error)

            path = stored.unwrap()
            written.append(path)
            self._notify("language", len(written), len(languages), f"OK saving {path} was successful.")

        self._notify("applet", index, total, f"< {label} language xml cached.")
        return StepResult.success(written)

    async def _discover_languages(self, applet: Applet) -> StepResult[list[str]]:
        try:
            languages = await self._api.get_applet_languages(applet.identifier)
        except ResponseError as exc:
            return StepResult.failure(
                exc.with_context(
                    f"Getting languages for applet ({applet.identifier}) was unsuccessful"
                )
            )
        if not languages:
            return StepResult.failure(DiscoveryEmptyError(applet.identifier))
        return StepResult.success(languages)

    async def _fetch_language_xml(self, applet: Applet, language: str) -> StepResult[str]:
        try:
            content = await self._api.get_applet_language_file(applet.identifier, language)
        except ResponseError as exc:
            return StepResult.failure(
                exc.with_context(
                    f"Getting language xml for applet: ({applet.identifier}) "
                    f"on language: ({language}) was unsuccessful:"
                )
            )
        return StepResult.success(content)

    def _store_language_xml(
        self,
        layout: CacheLayout,
        applet: Applet,
        language: str,
        content: str,
    ) -> StepResult[Path]:
        destination = layout.applet_file(language)
        context = f"{applet.identifier}/{language}"
        try:
            saved = write_cache(layout.cache_dir, destination.relative_to(layout.cache_dir), content)
        except OSError as exc:
            return StepResult.failure(
                CacheWriteError(
                    f"Unable to create cache directory for {destination}: {exc}",
                    context=context,
                    cause=exc,
                )
            )
        if not saved:
            return StepResult.failure(
                CacheWriteError(
                    f"Unable to save applet: ({applet.identifier}) language: ({language}) "
                    f"xml ({destination})!",
                    context=context,
                )
            )
        return StepResult.success(destination)

    def _notify(self, stage: str, current: int, total: int, message: str = "") -> None:
        if self._progress_callback is None:
            return
        self._progress_callback(stage, current, total, message)
