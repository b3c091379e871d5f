"""
Custom Exception Hierarchy

Provides specific exception types for the simplification and rendering
paths, with structured error information for API responses.
"""
from typing import Optional, Dict, Any


class SimplifierError(Exception):
    """Base exception for all report simplifier errors."""

    status_code: int = 500
    
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class InferenceError(SimplifierError):
    """Errors from the upstream language model call."""

    status_code = 502
    
    def __init__(
        self,
        message: str,
        model: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INFERENCE_ERROR",
            details={"model": model, **(details or {})}
        )
        self.model = model


class FontLoadError(SimplifierError):
    """Errors while fetching or parsing a script-specific font."""
    
    def __init__(
        self,
        message: str,
        language: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="FONT_LOAD_ERROR",
            details={"language": language, **(details or {})}
        )
        self.language = language


class IntakeError(SimplifierError):
    """Errors while reading an uploaded report file."""

    def __init__(
        self,
        message: str,
        filename: str = "unknown",
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INTAKE_ERROR",
            details={"filename": filename, **(details or {})}
        )
        self.filename = filename
        self.status_code = status_code


class ReportGenerationError(SimplifierError):
    """Errors during PDF report generation."""
    
    def __init__(
        self,
        message: str,
        report_type: str = "pdf",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="REPORT_ERROR",
            details={"report_type": report_type, **(details or {})}
        )
        self.report_type = report_type
