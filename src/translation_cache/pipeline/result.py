# SPDX-License-Identifier: Apache-2.0
"""Result types returned by pipeline steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

from translation_cache.errors import LanguageCacheError

T = TypeVar("T")


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Outcome of a single pipeline step: a value or an error."""

    value: T | None = None
    error: LanguageCacheError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> StepResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: LanguageCacheError) -> StepResult[T]:
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value, raising the error of a failed step."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


@dataclass
class GenerationResult:
    """Outcome of a pipeline run.

    Attributes:
        written: Cache files written before the run finished or stopped.
        error: The error that stopped the run, None on success.
    """

    written: list[Path] = field(default_factory=list)
    error: LanguageCacheError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the error that stopped the run, if any."""
        if self.error is not None:
            raise self.error

    def merge(self, other: GenerationResult) -> GenerationResult:
        """Combine with a run that followed this one."""
        return GenerationResult(
            written=[*self.written, *other.written],
            error=self.error or other.error,
        )
