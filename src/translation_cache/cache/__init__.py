# SPDX-License-Identifier: Apache-2.0
"""On-disk language cache."""

from .writer import CACHE_DIR_MODE, CacheLayout, write_cache

__all__ = [
    "CACHE_DIR_MODE",
    "CacheLayout",
    "write_cache",
]
