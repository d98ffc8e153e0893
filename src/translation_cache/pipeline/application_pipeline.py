# SPDX-License-Identifier: Apache-2.0
"""Application language file pipeline."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from translation_cache.api.base import ApiClient
from translation_cache.api.language_api import LanguageApi
from translation_cache.cache.writer import CacheLayout, write_cache
from translation_cache.config import ConfigProvider, get_root_path, get_translated_applications
from translation_cache.errors import CacheWriteError, ResponseError
from translation_cache.models import Application
from translation_cache.pipeline.progress import ProgressCallback
from translation_cache.pipeline.result import GenerationResult, StepResult

logger = logging.getLogger(__name__)


class ApplicationLanguagePipeline:
    """Fetches the language files of configured applications into the cache."""

    def __init__(
        self,
        client: ApiClient,
        config: ConfigProvider,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Initialize ApplicationLanguagePipeline."""
        self._api = LanguageApi(client)
        self._config = config
        self._progress_callback = progress_callback

    async def run(
        self,
        applications: Mapping[str, Sequence[str]] | None = None,
    ) -> GenerationResult:
        """Generate language files for every application and language.

        Args:
            applications: ``{application: [languages]}``; read from the
                ``system.translated_applications`` key when omitted.

        Returns:
            Result with the written files; stops at the first failure.
        """
        if applications is None:
            applications = get_translated_applications(self._config)
        layout = CacheLayout(get_root_path(self._config))
        targets = Application.from_mapping(applications)

        logger.info("Generating language files for %d application(s)", len(targets))
        self._notify("start", 0, len(targets), "Generating language files")

        result = GenerationResult()
        for index, application in enumerate(targets, start=1):
            self._notify("application", index, len(targets), f"[APPLICATION: {application.name}]")
            step = await self._process_application(layout, application)
            result.written.extend(step.value or [])
            if not step.ok:
                result.error = step.error
                logger.info("Language file generation stopped: %s", step.error)
                return result

        logger.info("Generated %d language file(s)", len(result.written))
        return result

    async def _process_application(
        self,
        layout: CacheLayout,
        application: Application,
    ) -> StepResult[list[Path]]:
        written: list[Path] = []
        total = len(application.languages)
        for index, language in enumerate(application.languages, start=1):
            fetched = await self._fetch_language_file(application.name, language)
            if not fetched.ok:
                return StepResult(value=written, error=fetched.error)

            stored = self._store_language_file(
                layout, application.name, language, fetched.unwrap()
            )
            if not stored.ok:
                return StepResult(value=written, error=stored.error)

            written.append(stored.unwrap())
            self._notify("language", index, total, f"[LANGUAGE: {language}] OK")
        return StepResult.success(written)

    async def _fetch_language_file(self, application: str, language: str) -> StepResult[str]:
        try:
            content = await self._api.get_language_file(language)
        except ResponseError as exc:
            return StepResult.failure(
                exc.with_context(
                    f"Error during getting language file: ({application}/{language})"
                )
            )
        return StepResult.success(content)

    def _store_language_file(
        self,
        layout: CacheLayout,
        application: str,
        language: str,
        content: str,
    ) -> StepResult[Path]:
        destination = layout.application_file(application, language)
        try:
            saved = write_cache(layout.cache_dir, destination.relative_to(layout.cache_dir), content)
        except OSError as exc:
            return StepResult.failure(
                CacheWriteError(
                    f"Unable to create cache directory for {destination}: {exc}",
                    context=f"{application}/{language}",
                    cause=exc,
                )
            )
        if not saved:
            return StepResult.failure(
                CacheWriteError(
                    "Unable to generate language file!",
                    context=f"{application}/{language}",
                )
            )
        return StepResult.success(destination)

    def _notify(self, stage: str, current: int, total: int, message: str = "") -> None:
        if self._progress_callback is None:
            return
        self._progress_callback(stage, current, total, message)
