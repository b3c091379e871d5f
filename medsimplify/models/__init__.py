"""
API and domain models for report simplification and export.
"""
from .report import (
    Section,
    GeneratedReport,
    SimplifiedReport,
    SimplificationOutput,
    SimplificationRequest,
    SimplifyResponse,
    LanguagesResponse,
    HealthResponse,
)

__all__ = [
    "Section",
    "GeneratedReport",
    "SimplifiedReport",
    "SimplificationOutput",
    "SimplificationRequest",
    "SimplifyResponse",
    "LanguagesResponse",
    "HealthResponse",
]
