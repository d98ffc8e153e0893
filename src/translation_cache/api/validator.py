# SPDX-License-Identifier: Apache-2.0
"""Validation of language API responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from translation_cache.errors import ApiError, EmptyPayloadError, TransportError
from translation_cache.models import STATUS_OK


def _is_blank(value: Any) -> bool:
    # Error fields left empty by the API: falsy values and the string "0"
    return not value or value == "0"


def _render_data(data: Any) -> str:
    if data is None or data is False:
        return ""
    return str(data)


def validate_response(response: Any) -> Any:
    """Check an API response and return its payload.

    Args:
        response: Decoded API response (mapping), or ``False`` when the call
            produced nothing.

    Returns:
        The ``data`` field, unchanged.

    Raises:
        TransportError: If there is no response or its status is missing or null.
        ApiError: If the status is not the success marker.
        EmptyPayloadError: If the call succeeded but ``data`` is ``False``.
    """
    if response is None or response is False:
        raise TransportError("Error during the api call")
    if not isinstance(response, Mapping) or response.get("status") is None:
        raise TransportError("Error during the api call")

    if response["status"] != STATUS_OK:
        error_type = response.get("error_type")
        error_code = response.get("error_code")
        data = response.get("data")
        message = "Wrong response: "
        if not _is_blank(error_type):
            message += f"Type({error_type}) "
        if not _is_blank(error_code):
            message += f"Code({error_code}) "
        message += _render_data(data)
        raise ApiError(
            message,
            error_type=None if _is_blank(error_type) else str(error_type),
            error_code=None if _is_blank(error_code) else str(error_code),
            data=data,
        )

    data = response.get("data")
    if data is False:
        raise EmptyPayloadError("Wrong content!")
    return data
