# SPDX-License-Identifier: Apache-2.0
"""Data models for language cache generation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

# Routing key of the language service on the remote API
API_TARGET = "system_api"
API_MODE = "language_api"
API_SYSTEM = "LanguageFiles"

# Success marker of API responses
STATUS_OK = "OK"


class ApiAction(str, Enum):
    """Actions of the language API.

    The payload shape of a response is decided by the action that produced it:
    file actions return text, discovery returns a list of language identifiers.
    """

    GET_LANGUAGE_FILE = "getLanguageFile"
    GET_APPLET_LANGUAGES = "getAppletLanguages"
    GET_APPLET_LANGUAGE_FILE = "getAppletLanguageFile"


@dataclass(frozen=True)
class Application:
    """Application that requires translated language files.

    Attributes:
        name: Application identifier (also the cache subdirectory).
        languages: Language identifiers in configuration order.
    """

    name: str
    languages: tuple[str, ...]

    @classmethod
    def from_mapping(cls, applications: Mapping[str, Sequence[str]]) -> list[Application]:
        """Build applications from the ``{name: [languages]}`` configuration."""
        return [
            cls(name=str(name), languages=tuple(str(lang) for lang in languages))
            for name, languages in applications.items()
        ]


@dataclass(frozen=True)
class Applet:
    """Legacy applet whose languages are discovered through the API.

    Attributes:
        identifier: Applet identifier on the API.
        directory: Local directory name of the applet.
    """

    identifier: str
    directory: str


DEFAULT_APPLETS: tuple[Applet, ...] = (
    Applet(identifier="JSM2_MemberApplet", directory="memberapplet"),
)
