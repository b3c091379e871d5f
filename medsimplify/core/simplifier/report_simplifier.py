"""
Report Simplifier

Sends a medical report to the language model with a fixed instruction and
a strict output schema. One attempt only; on any failure the localized
placeholder report is returned instead, marked as a fallback.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from medsimplify.core.llm import GeminiClient
from medsimplify.models import SimplificationOutput, SimplifiedReport
from medsimplify.models.report import DEFAULT_LANGUAGE
from medsimplify.utils import get_logger, InferenceError

from .placeholders import placeholder_report
from .prompts import build_simplify_prompt

logger = get_logger(__name__)


class ResultSource(str, Enum):
    """Where a simplified report came from."""
    MODEL = "model"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class SimplificationResult:
    """Outcome of one simplify call."""
    report: SimplifiedReport
    source: ResultSource

    @property
    def is_fallback(self) -> bool:
        return self.source is ResultSource.PLACEHOLDER

    def to_output(self) -> Dict[str, Any]:
        """The ``{simplifiedReport: {...}}`` shape returned to the browser."""
        return {"simplifiedReport": self.report.model_dump(mode="json")}


@dataclass(frozen=True)
class RealResult(SimplificationResult):
    """Report produced by the language model."""
    source: ResultSource = ResultSource.MODEL


@dataclass(frozen=True)
class FallbackResult(SimplificationResult):
    """Placeholder report substituted after an upstream failure."""
    source: ResultSource = ResultSource.PLACEHOLDER
    error: Optional[str] = None


class ReportSimplifier:
    """
    Simplifies and translates medical reports.

    Holds no per-request state; concurrent calls are independent.
    """

    def __init__(self, client: Optional[GeminiClient] = None):
        self.client = client if client is not None else GeminiClient()

    async def simplify(
        self,
        report_text: str,
        language: Optional[str] = DEFAULT_LANGUAGE,
    ) -> SimplificationResult:
        """
        Simplify a report into ``language``.

        Args:
            report_text: Raw report text
            language: Free-form display name, passed to the model verbatim

        Returns:
            RealResult, or FallbackResult if the model call failed for any reason
        """
        language = language or DEFAULT_LANGUAGE
        prompt = build_simplify_prompt(report_text, language)

        try:
            output = await self.client.generate_structured(prompt, SimplificationOutput)
            generated = output.simplified_report
            if not generated.sections:
                raise InferenceError("Model returned a report with no sections")
        except Exception as e:
            logger.error(
                f"AI service error (possible quota exceeded), returning placeholder "
                f"report for language={language!r}: {e}"
            )
            return FallbackResult(report=placeholder_report(language), error=str(e))

        report = SimplifiedReport(
            title=generated.title,
            sections=generated.sections,
            language=language,
        )
        logger.info(f"Report simplified into {language} ({len(report.sections)} sections)")
        return RealResult(report=report)
