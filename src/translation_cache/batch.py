# SPDX-License-Identifier: Apache-2.0
"""Entry points for language cache generation."""

from __future__ import annotations

from collections.abc import Sequence

from translation_cache.api.base import ApiClient
from translation_cache.api.http import HttpApiClient
from translation_cache.config import ApiConfig, ConfigProvider
from translation_cache.models import DEFAULT_APPLETS, Applet
from translation_cache.pipeline.applet_pipeline import AppletLanguagePipeline
from translation_cache.pipeline.application_pipeline import ApplicationLanguagePipeline
from translation_cache.pipeline.progress import ProgressCallback
from translation_cache.pipeline.result import GenerationResult


def create_client(config: ConfigProvider) -> HttpApiClient:
    """Create the production API client from ``system.api.*`` settings."""
    return HttpApiClient(ApiConfig.from_provider(config))


async def generate_language_files(
    config: ConfigProvider,
    client: ApiClient | None = None,
    progress_callback: ProgressCallback | None = None,
) -> GenerationResult:
    """Generate the language files of all translated applications.

    Args:
        config: Configuration provider.
        client: API client; the HTTP client is used when omitted.
        progress_callback: Receives progress lines.
    """
    if client is not None:
        return await ApplicationLanguagePipeline(client, config, progress_callback).run()
    async with create_client(config) as http_client:
        return await ApplicationLanguagePipeline(http_client, config, progress_callback).run()


async def generate_applet_language_xml_files(
    config: ConfigProvider,
    client: ApiClient | None = None,
    progress_callback: ProgressCallback | None = None,
    applets: Sequence[Applet] = DEFAULT_APPLETS,
) -> GenerationResult:
    """Generate the language XMLs of the applets.

    Args:
        config: Configuration provider.
        client: API client; the HTTP client is used when omitted.
        progress_callback: Receives progress lines.
        applets: Applets to process.
    """
    if client is not None:
        return await AppletLanguagePipeline(client, config, progress_callback).run(applets)
    async with create_client(config) as http_client:
        return await AppletLanguagePipeline(http_client, config, progress_callback).run(applets)
