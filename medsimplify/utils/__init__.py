"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    SimplifierError,
    InferenceError,
    FontLoadError,
    IntakeError,
    ReportGenerationError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "SimplifierError",
    "InferenceError",
    "FontLoadError",
    "IntakeError",
    "ReportGenerationError",
]
