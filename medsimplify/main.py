"""
Medical Report Simplifier - FastAPI Application

API endpoints for:
- Report simplification and translation (JSON body or file upload)
- PDF export of a simplified report
- Health and language listing
"""
from contextlib import asynccontextmanager
from datetime import datetime
from urllib.parse import quote

from fastapi import Depends, FastAPI, File, Form, Request, Response, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from medsimplify import __version__
from medsimplify import config as settings
from medsimplify.core.reports import DocumentRenderer, download_filename
from medsimplify.core.simplifier import PLACEHOLDER_LANGUAGES, ReportSimplifier
from medsimplify.models import (
    HealthResponse,
    LanguagesResponse,
    SimplificationRequest,
    SimplifiedReport,
    SimplifyResponse,
)
from medsimplify.models.report import DEFAULT_LANGUAGE
from medsimplify.services import read_report_upload
from medsimplify.utils import SimplifierError, get_logger, setup_logging

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)
logger = get_logger(__name__)


# ---- Adapters ----
_simplifier = ReportSimplifier()
_renderer = DocumentRenderer()
START_TIME = datetime.now()


def get_simplifier() -> ReportSimplifier:
    return _simplifier


def get_renderer() -> DocumentRenderer:
    return _renderer


# ---- Application Lifespan ----

@asynccontextmanager
async def lifespan(app: FastAPI):
    if _simplifier.client.is_available:
        logger.info("API ready, language model available")
    else:
        logger.warning("API ready in demo mode: simplify will return placeholder reports")
    yield
    logger.info("Medical Report Simplifier API shut down.")


# ---- FastAPI Application ----

app = FastAPI(
    title="Medical Report Simplifier API",
    description="Plain-language, translated medical report summaries with PDF export",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SimplifierError)
async def simplifier_error_handler(request: Request, exc: SimplifierError):
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _content_disposition(filename: str) -> str:
    """Attachment header; non-ASCII names use the RFC 5987 form."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


async def _simplify(simplifier: ReportSimplifier, report_text: str, language: str) -> SimplifyResponse:
    result = await simplifier.simplify(report_text, language)
    return SimplifyResponse(simplified_report=result.report, demo_mode=result.is_fallback)


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health(simplifier: ReportSimplifier = Depends(get_simplifier)):
    """Health check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
        llm_available=simplifier.client.is_available,
    )


@app.get("/api/v1/languages", response_model=LanguagesResponse, tags=["Simplify"])
async def list_languages(renderer: DocumentRenderer = Depends(get_renderer)):
    """Languages offered in the UI and which of them need a downloaded font."""
    return LanguagesResponse(
        default=DEFAULT_LANGUAGE,
        languages=PLACEHOLDER_LANGUAGES,
        remote_font_languages=[
            language for language in PLACEHOLDER_LANGUAGES
            if renderer.fonts.needs_remote_font(language)
        ],
    )


@app.post("/api/v1/simplify", response_model=SimplifyResponse, tags=["Simplify"])
async def simplify_report(
    request: SimplificationRequest,
    simplifier: ReportSimplifier = Depends(get_simplifier),
):
    """
    Simplify and translate pasted report text.

    Never fails because of the language model: when it is unavailable the
    placeholder report is returned with ``demoMode`` set.
    """
    return await _simplify(simplifier, request.report_text, request.language)


@app.post("/api/v1/simplify/upload", response_model=SimplifyResponse, tags=["Simplify"])
async def simplify_upload(
    file: UploadFile = File(...),
    language: str = Form(DEFAULT_LANGUAGE),
    simplifier: ReportSimplifier = Depends(get_simplifier),
):
    """Simplify an uploaded .txt/.pdf/.docx report (read as raw text)."""
    content = await file.read()
    report_text = read_report_upload(file.filename, content)
    logger.info(f"Received report upload {file.filename} ({len(content)} bytes)")
    return await _simplify(simplifier, report_text, language)


@app.post(
    "/api/v1/reports/pdf",
    tags=["Reports"],
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def export_pdf(
    report: SimplifiedReport,
    renderer: DocumentRenderer = Depends(get_renderer),
):
    """Render a simplified report as a PDF download."""
    pdf_bytes = await renderer.render(report)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": _content_disposition(download_filename(report.language))},
    )


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
