# SPDX-License-Identifier: Apache-2.0
"""Translation cache: stores translated language files from the language API."""

from translation_cache.batch import generate_applet_language_xml_files, generate_language_files
from translation_cache.errors import (
    ApiError,
    CacheWriteError,
    ConfigurationError,
    DiscoveryEmptyError,
    EmptyPayloadError,
    LanguageCacheError,
    ResponseError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "CacheWriteError",
    "ConfigurationError",
    "DiscoveryEmptyError",
    "EmptyPayloadError",
    "LanguageCacheError",
    "ResponseError",
    "TransportError",
    "generate_applet_language_xml_files",
    "generate_language_files",
]
