# SPDX-License-Identifier: Apache-2.0
"""Protocol definition for language API clients."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ApiClient(Protocol):
    """Protocol for clients performing remote API calls.

    All client implementations must conform to this protocol.
    """

    async def call(
        self,
        target: str,
        mode: str,
        get_params: Mapping[str, str],
        post_params: Mapping[str, str],
    ) -> Any:
        """Perform a remote call.

        Args:
            target: Routing target ("system_api").
            mode: Routing mode ("language_api").
            get_params: Query parameters (system and action selector).
            post_params: Body parameters (applet and language selectors).

        Returns:
            Decoded response mapping, or ``False`` if nothing was returned.

        Raises:
            TransportError: On transport failure.
        """
        ...
