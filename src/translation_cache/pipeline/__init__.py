# SPDX-License-Identifier: Apache-2.0
"""Language cache pipeline package."""

from .applet_pipeline import AppletLanguagePipeline
from .application_pipeline import ApplicationLanguagePipeline
from .progress import ProgressCallback
from .result import GenerationResult, StepResult

__all__ = [
    "AppletLanguagePipeline",
    "ApplicationLanguagePipeline",
    "GenerationResult",
    "ProgressCallback",
    "StepResult",
]
