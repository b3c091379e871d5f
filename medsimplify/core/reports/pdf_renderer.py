"""
PDF Document Renderer

Builds the downloadable PDF for a simplified report: a title, then each
section's heading and content in order. Font resolution failures degrade to
Helvetica; document build failures raise ReportGenerationError.
"""
import asyncio
import io
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple
from xml.sax.saxutils import escape

import httpx
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate

from medsimplify import config as settings
from medsimplify.models import SimplifiedReport
from medsimplify.models.report import DEFAULT_LANGUAGE
from medsimplify.utils import get_logger, ReportGenerationError

from .fonts import DEFAULT_BOLD_FONT, DEFAULT_FONT, FONT_URLS, FontManifest, FontResolver

logger = get_logger(__name__)

TITLE_COLOR = "#0e7490"
HEADING_COLOR = "#06b6d4"
CONTENT_COLOR = "#334155"
TEXT_COLOR = "#1e293b"


def download_filename(language: Optional[str] = None) -> str:
    """File name offered to the browser for the exported report."""
    return f"simplified-report-{language or DEFAULT_LANGUAGE}.pdf"


@dataclass(frozen=True)
class RendererConfig:
    """Renderer settings, passed in explicitly instead of living in module state."""
    font_urls: Mapping[str, str] = field(default_factory=lambda: dict(FONT_URLS))
    default_font: str = DEFAULT_FONT
    default_bold_font: str = DEFAULT_BOLD_FONT
    font_fetch_timeout: float = field(default_factory=lambda: settings.FONT_FETCH_TIMEOUT_SECONDS)
    page_size: Tuple[float, float] = A4
    margin: float = 40.0  # points


class DocumentRenderer:
    """
    Renders SimplifiedReport objects to PDF bytes.

    Each call resolves its own fonts; nothing is shared between renders
    apart from reportlab's font registry.
    """

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or RendererConfig()
        self.fonts = FontResolver(
            font_urls=self.config.font_urls,
            timeout=self.config.font_fetch_timeout,
            default_font=self.config.default_font,
            default_bold_font=self.config.default_bold_font,
            transport=transport,
        )

    async def render(self, report: SimplifiedReport) -> bytes:
        """
        Render a report to PDF.

        Args:
            report: Title, ordered sections and optional language

        Returns:
            The finished PDF as bytes

        Raises:
            ReportGenerationError: the document could not be built
        """
        language = report.language or DEFAULT_LANGUAGE
        manifest = await self.fonts.resolve(language)

        try:
            pdf_bytes = await asyncio.to_thread(self._build, report, manifest)
        except Exception as e:
            logger.error(f"PDF generation failed for {language}: {e}")
            raise ReportGenerationError(
                f"Failed to generate PDF: {e}",
                details={"language": language, "font": manifest.font_name},
            ) from e

        logger.info(
            f"PDF generated: {len(report.sections)} sections, "
            f"font={manifest.font_name}, {len(pdf_bytes)} bytes"
        )
        return pdf_bytes

    def _build(self, report: SimplifiedReport, manifest: FontManifest) -> bytes:
        """Blocking reportlab build; runs in a worker thread."""
        if manifest.ttfont is not None:
            pdfmetrics.registerFont(manifest.ttfont)
            # Same glyph file for every style variant
            pdfmetrics.registerFontFamily(
                manifest.font_name,
                normal=manifest.font_name,
                bold=manifest.font_name,
                italic=manifest.font_name,
                boldItalic=manifest.font_name,
            )

        buffer = io.BytesIO()
        margin = self.config.margin
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.config.page_size,
            leftMargin=margin,
            rightMargin=margin,
            topMargin=margin,
            bottomMargin=margin,
            title=report.title,
        )
        doc.build(self.build_story(report, manifest))
        return buffer.getvalue()

    def build_story(self, report: SimplifiedReport, manifest: FontManifest) -> List[Flowable]:
        """Title block, then heading + content blocks in section order."""
        styles = self.build_styles(manifest)
        story: List[Flowable] = [Paragraph(_markup(report.title), styles["header"])]
        for section in report.sections:
            story.append(Paragraph(_markup(section.heading), styles["sectionHeader"]))
            story.append(Paragraph(_markup(section.content), styles["sectionContent"]))
        return story

    @staticmethod
    def build_styles(manifest: FontManifest) -> Dict[str, ParagraphStyle]:
        base = ParagraphStyle(
            name="default",
            fontName=manifest.font_name,
            fontSize=12,
            leading=15,
            textColor=HexColor(TEXT_COLOR),
        )
        return {
            "default": base,
            "header": ParagraphStyle(
                name="header",
                parent=base,
                fontName=manifest.bold_font_name,
                fontSize=22,
                leading=27,
                spaceAfter=20,
                textColor=HexColor(TITLE_COLOR),
            ),
            "sectionHeader": ParagraphStyle(
                name="sectionHeader",
                parent=base,
                fontName=manifest.bold_font_name,
                fontSize=16,
                leading=20,
                spaceBefore=10,
                spaceAfter=5,
                textColor=HexColor(HEADING_COLOR),
            ),
            "sectionContent": ParagraphStyle(
                name="sectionContent",
                parent=base,
                fontSize=12,
                leading=15,
                spaceAfter=10,
                textColor=HexColor(CONTENT_COLOR),
            ),
        }


def _markup(text: str) -> str:
    """Escape text for a reportlab Paragraph, keeping line breaks."""
    return escape(text or "").replace("\n", "<br/>")
