# SPDX-License-Identifier: Apache-2.0
"""Progress reporting for language cache pipelines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressCallback(Protocol):
    """Receives one call per progress line of a cache run.

    Stages emitted by the pipelines:

    - ``start`` / ``finish``: run banners (``current`` is 0 or ``total``).
    - ``application``: ``[APPLICATION: <name>]``, counted over applications.
    - ``applet``: applet start/end markers and the discovered language list,
      counted over applets.
    - ``language``: one line per cached file, counted over the languages of
      the current application or applet.

    Lines emitted before a failure stay with the callback; the failure
    itself is reported through the run result, not here.
    """

    def __call__(
        self,
        stage: str,
        current: int,
        total: int,
        message: str = "",
    ) -> None: ...
