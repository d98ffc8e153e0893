# SPDX-License-Identifier: Apache-2.0
"""Configuration access for language cache generation."""

from __future__ import annotations

import copy
import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Protocol, runtime_checkable

from dotenv import load_dotenv

from translation_cache.errors import ConfigurationError

logger = logging.getLogger(__name__)

KEY_APPLICATIONS = "system.translated_applications"
KEY_ROOT = "system.paths.root"
KEY_API_URL = "system.api.url"
KEY_API_KEY = "system.api.key"
KEY_API_TIMEOUT = "system.api.timeout"

_MISSING = object()


@runtime_checkable
class ConfigProvider(Protocol):
    """Read-only key-value configuration lookup."""

    def get(self, key: str) -> Any:
        """Return the value of a dotted key.

        Raises:
            ConfigurationError: If the key is not configured.
        """
        ...


class MappingConfig:
    """Configuration backed by a nested mapping.

    Dotted keys walk the nesting: ``system.paths.root`` reads
    ``data["system"]["paths"]["root"]``.
    """

    # Environment variable -> dotted key
    ENV_VARS: ClassVar[dict[str, str]] = {
        "LANGUAGE_CACHE_ROOT": KEY_ROOT,
        "LANGUAGE_CACHE_APPLICATIONS": KEY_APPLICATIONS,
        "LANGUAGE_API_URL": KEY_API_URL,
        "LANGUAGE_API_KEY": KEY_API_KEY,
        "LANGUAGE_API_TIMEOUT": KEY_API_TIMEOUT,
    }

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(dict(data or {}))

    @classmethod
    def from_file(cls, path: Path) -> MappingConfig:
        """Load configuration from a JSON file.

        Raises:
            ConfigurationError: If the file is missing or not a JSON object.
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigurationError(f"Config file not found: {path}", cause=e) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {path}: {e}", cause=e) from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a JSON object: {path}")
        logger.debug("Loaded configuration from %s", path)
        return cls(data)

    @classmethod
    def from_env(cls, base: MappingConfig | None = None) -> MappingConfig:
        """Apply environment variables (and a ``.env`` file) on top of ``base``.

        ``LANGUAGE_CACHE_APPLICATIONS`` holds a JSON object of
        ``{application: [languages]}``.
        """
        load_dotenv()
        overrides: dict[str, Any] = {}
        for env_var, key in cls.ENV_VARS.items():
            value = os.environ.get(env_var)
            if not value:
                continue
            if key == KEY_APPLICATIONS:
                try:
                    overrides[key] = json.loads(value)
                except json.JSONDecodeError as e:
                    raise ConfigurationError(
                        f"{env_var} must be a JSON object: {e}", cause=e
                    ) from e
            else:
                overrides[key] = value
        return (base or cls()).with_overrides(overrides)

    def with_overrides(self, overrides: Mapping[str, Any]) -> MappingConfig:
        """Return a new configuration with dotted-key values replaced."""
        result = MappingConfig(self._data)
        for key, value in overrides.items():
            if value is None:
                continue
            node = result._data
            *parents, leaf = key.split(".")
            for part in parents:
                child = node.get(part)
                if not isinstance(child, dict):
                    child = {}
                    node[part] = child
                node = child
            node[leaf] = value
        return result

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Return the value of a dotted key.

        Raises:
            ConfigurationError: If the key is missing and no default is given.
        """
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                if default is not _MISSING:
                    return default
                raise ConfigurationError(f"Missing configuration key: {key}", context=key)
            node = node[part]
        return node


def get_translated_applications(config: ConfigProvider) -> dict[str, list[str]]:
    """Read the ``{application: [languages]}`` map.

    Raises:
        ConfigurationError: If the value is not a mapping of language lists.
    """
    applications = config.get(KEY_APPLICATIONS)
    if not isinstance(applications, Mapping):
        raise ConfigurationError(
            f"{KEY_APPLICATIONS} must map applications to language lists",
            context=KEY_APPLICATIONS,
        )
    result: dict[str, list[str]] = {}
    for application, languages in applications.items():
        if isinstance(languages, str) or not isinstance(languages, (list, tuple)):
            raise ConfigurationError(
                f"Languages of application {application} must be a list",
                context=KEY_APPLICATIONS,
            )
        result[str(application)] = [str(language) for language in languages]
    return result


def get_root_path(config: ConfigProvider) -> Path:
    """Read the root directory under which ``cache/`` lives."""
    return Path(str(config.get(KEY_ROOT)))


@dataclass
class ApiConfig:
    """Language API endpoint configuration.

    Attributes:
        base_url: Endpoint URL.
        api_key: Optional API key sent with every request.
        timeout: Total request timeout in seconds.
    """

    base_url: str
    api_key: str | None = None
    timeout: float = 30.0

    @classmethod
    def from_provider(cls, config: ConfigProvider) -> ApiConfig:
        """Build API configuration from ``system.api.*`` keys.

        Raises:
            ConfigurationError: If the URL is missing or the timeout is invalid.
        """
        base_url = config.get(KEY_API_URL)
        try:
            api_key = config.get(KEY_API_KEY)
        except ConfigurationError:
            api_key = None
        try:
            timeout = float(config.get(KEY_API_TIMEOUT))
        except ConfigurationError:
            timeout = cls.timeout
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid API timeout: {e}", cause=e) from e
        return cls(base_url=str(base_url), api_key=api_key or None, timeout=timeout)
