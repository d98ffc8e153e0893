# SPDX-License-Identifier: Apache-2.0
"""Language API access.

Usage:
    from translation_cache.api import HttpApiClient, LanguageApi

    async with HttpApiClient(api_config) as client:
        api = LanguageApi(client)
        content = await api.get_language_file("en")
"""

from translation_cache.api.base import ApiClient
from translation_cache.api.http import HttpApiClient
from translation_cache.api.language_api import LanguageApi
from translation_cache.api.validator import validate_response

__all__ = [
    "ApiClient",
    "HttpApiClient",
    "LanguageApi",
    "validate_response",
]
