# SPDX-License-Identifier: Apache-2.0
"""Error definitions for language cache generation."""

from __future__ import annotations

from typing import Any, TypeVar

_E = TypeVar("_E", bound="ResponseError")


class LanguageCacheError(Exception):
    """Base exception for language cache generation."""

    def __init__(
        self,
        message: str,
        context: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.cause = cause


class ConfigurationError(LanguageCacheError):
    """Missing or invalid configuration value.

    This error type is NOT recoverable - fix the configuration first.
    """


class ResponseError(LanguageCacheError):
    """API call did not produce a usable payload."""

    def with_context(self: _E, message: str) -> _E:
        """Return a copy of this error with a contextual message prepended.

        The copy keeps the concrete error class so callers can still tell a
        transport failure from a rejected request.
        """
        error = self._copy(f"{message} {self}".rstrip())
        error.context = message
        error.cause = self
        return error

    def _copy(self: _E, message: str) -> _E:
        return type(self)(message)


class TransportError(ResponseError):
    """The API call itself failed (no response or malformed response)."""


class ApiError(ResponseError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        context: str = "",
        cause: Exception | None = None,
        error_type: str | None = None,
        error_code: str | None = None,
        data: Any = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)
        self.error_type = error_type
        self.error_code = error_code
        self.data = data

    def _copy(self, message: str) -> ApiError:
        return ApiError(
            message,
            error_type=self.error_type,
            error_code=self.error_code,
            data=self.data,
        )


class EmptyPayloadError(ResponseError):
    """The API reported success but returned no content."""


class CacheWriteError(LanguageCacheError):
    """A payload could not be stored in the cache."""


class DiscoveryEmptyError(LanguageCacheError):
    """An applet has no available languages."""

    def __init__(self, applet: str) -> None:
        super().__init__(
            f"There is no available languages for the {applet} applet.",
            context=applet,
        )
        self.applet = applet
