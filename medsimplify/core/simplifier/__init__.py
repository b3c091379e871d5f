"""
Report Simplifier

Rewrites a medical report in plain language and the reader's language.
Never fails outward: upstream failures yield a placeholder report.
"""
from .report_simplifier import (
    ReportSimplifier,
    SimplificationResult,
    RealResult,
    FallbackResult,
    ResultSource,
)
from .placeholders import PLACEHOLDER_LANGUAGES, placeholder_report

__all__ = [
    "ReportSimplifier",
    "SimplificationResult",
    "RealResult",
    "FallbackResult",
    "ResultSource",
    "PLACEHOLDER_LANGUAGES",
    "placeholder_report",
]
