"""
Report Models

Pydantic models shared by the simplifier, the PDF renderer and the HTTP API.
JSON field names are camelCase to match the browser client; Python attribute
names are snake_case.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LANGUAGE = "English"


class Section(BaseModel):
    """One headed block of a simplified report."""
    model_config = ConfigDict(frozen=True)

    heading: str = Field(..., description="The heading of the section.")
    content: str = Field(..., description="The simplified content of the section.")


class GeneratedReport(BaseModel):
    """Report body exactly as the language model is asked to produce it."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="The title of the simplified report.")
    sections: List[Section] = Field(
        default_factory=list,
        description="The sections of the simplified report.",
    )


class SimplifiedReport(GeneratedReport):
    """
    A simplified report plus the language it was written in.

    The language picks the font used for PDF export.
    """
    language: Optional[str] = Field(
        default=None,
        description="The target language of the report (e.g. \"Hindi\").",
    )


class SimplificationOutput(BaseModel):
    """Structured output schema declared to the language model."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    simplified_report: GeneratedReport = Field(
        ...,
        alias="simplifiedReport",
        description="The simplified medical report.",
    )


class SimplificationRequest(BaseModel):
    """Request body for POST /api/v1/simplify."""
    model_config = ConfigDict(populate_by_name=True)

    report_text: str = Field(
        ...,
        alias="reportText",
        min_length=1,
        description="The text content of the medical report to be simplified.",
    )
    language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="The target language for the simplified report.",
    )

    @field_validator("report_text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("reportText must not be blank")
        return value


class SimplifyResponse(BaseModel):
    """Response body for the simplify endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    simplified_report: SimplifiedReport = Field(..., alias="simplifiedReport")
    demo_mode: bool = Field(
        default=False,
        alias="demoMode",
        description="True when the placeholder report was returned instead of a model answer.",
    )


class LanguagesResponse(BaseModel):
    """Selectable target languages."""
    default: str = DEFAULT_LANGUAGE
    languages: List[str]
    remote_font_languages: List[str]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: str
    uptime_seconds: float
    llm_available: bool
