"""
Integration Tests for the FastAPI application

Uses async httpx against the ASGI app. The LLM client and the font CDN
are replaced through dependency overrides.
"""
import pytest
import httpx
from unittest.mock import AsyncMock, Mock

from medsimplify.core.reports import DocumentRenderer
from medsimplify.core.simplifier import ReportSimplifier, placeholder_report
from medsimplify.main import app, get_renderer, get_simplifier
from medsimplify.utils import ReportGenerationError


@pytest.fixture
def demo_mode_app(failing_client, no_network):
    """App whose language model always fails."""
    app.dependency_overrides[get_simplifier] = lambda: ReportSimplifier(client=failing_client)
    app.dependency_overrides[get_renderer] = lambda: DocumentRenderer(transport=no_network)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def live_app(working_client, font_server):
    """App with a working language model and font CDN."""
    app.dependency_overrides[get_simplifier] = lambda: ReportSimplifier(client=working_client)
    app.dependency_overrides[get_renderer] = lambda: DocumentRenderer(transport=font_server)
    yield app
    app.dependency_overrides.clear()


def _client(asgi_app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=asgi_app), base_url="http://test")


@pytest.mark.asyncio
class TestHealthEndpoints:
    """Tests for health and metadata endpoints."""

    async def test_root_endpoint(self, demo_mode_app):
        async with _client(demo_mode_app) as client:
            response = await client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert data["llm_available"] is True

    async def test_health_endpoint(self, demo_mode_app):
        async with _client(demo_mode_app) as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_languages(self, demo_mode_app):
        async with _client(demo_mode_app) as client:
            response = await client.get("/api/v1/languages")

        data = response.json()
        assert data["default"] == "English"
        assert data["languages"][0] == "English"
        assert len(data["languages"]) == 8
        assert set(data["remote_font_languages"]) == {"Hindi", "Bengali", "Chinese", "Japanese"}


@pytest.mark.asyncio
class TestSimplifyEndpoint:
    """Tests for POST /api/v1/simplify."""

    async def test_model_result(self, live_app, sample_report_text):
        async with _client(live_app) as client:
            response = await client.post(
                "/api/v1/simplify",
                json={"reportText": sample_report_text, "language": "Spanish"},
            )

        assert response.status_code == 200
        data = response.json()
        assert data["demoMode"] is False
        assert data["simplifiedReport"]["title"] == "Your Chest X-ray Explained"
        assert data["simplifiedReport"]["language"] == "Spanish"
        assert len(data["simplifiedReport"]["sections"]) == 3

    async def test_demo_mode_never_errors(self, demo_mode_app, sample_report_text):
        async with _client(demo_mode_app) as client:
            response = await client.post(
                "/api/v1/simplify",
                json={"reportText": sample_report_text, "language": "French"},
            )

        assert response.status_code == 200
        data = response.json()
        assert data["demoMode"] is True
        assert data["simplifiedReport"]["title"] == placeholder_report("French").title
        assert [s["heading"] for s in data["simplifiedReport"]["sections"]] == [
            "Summary", "Key Findings", "Next Steps"
        ]

    async def test_language_defaults_to_english(self, demo_mode_app):
        async with _client(demo_mode_app) as client:
            response = await client.post("/api/v1/simplify", json={"reportText": "FINDINGS: none."})

        assert response.json()["simplifiedReport"]["language"] == "English"

    @pytest.mark.parametrize("body", [{}, {"reportText": ""}, {"reportText": "   \n"}])
    async def test_blank_report_rejected(self, demo_mode_app, body):
        async with _client(demo_mode_app) as client:
            response = await client.post("/api/v1/simplify", json=body)

        assert response.status_code == 422


@pytest.mark.asyncio
class TestUploadEndpoint:
    """Tests for POST /api/v1/simplify/upload."""

    async def test_upload_text_file(self, live_app, working_client):
        async with _client(live_app) as client:
            response = await client.post(
                "/api/v1/simplify/upload",
                files={"file": ("report.txt", b"IMPRESSION: Mild pneumonia.", "text/plain")},
                data={"language": "Hindi"},
            )

        assert response.status_code == 200
        assert response.json()["simplifiedReport"]["language"] == "Hindi"
        prompt = working_client.generate_structured.await_args.args[0]
        assert "IMPRESSION: Mild pneumonia." in prompt

    async def test_upload_unsupported_type(self, demo_mode_app):
        async with _client(demo_mode_app) as client:
            response = await client.post(
                "/api/v1/simplify/upload",
                files={"file": ("xray.png", b"\x89PNG", "image/png")},
            )

        assert response.status_code == 415
        assert response.json()["error"] == "INTAKE_ERROR"

    async def test_upload_empty_file(self, demo_mode_app):
        async with _client(demo_mode_app) as client:
            response = await client.post(
                "/api/v1/simplify/upload",
                files={"file": ("report.txt", b"", "text/plain")},
            )

        assert response.status_code == 400


@pytest.mark.asyncio
class TestPdfEndpoint:
    """Tests for POST /api/v1/reports/pdf."""

    async def test_download_pdf(self, demo_mode_app):
        report = placeholder_report("German").model_dump(mode="json")

        async with _client(demo_mode_app) as client:
            response = await client.post("/api/v1/reports/pdf", json=report)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert 'filename="simplified-report-German.pdf"' in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    async def test_download_pdf_with_remote_font(self, live_app, font_server):
        report = placeholder_report("Japanese").model_dump(mode="json")

        async with _client(live_app) as client:
            response = await client.post("/api/v1/reports/pdf", json=report)

        assert response.status_code == 200
        assert len(font_server.requests) == 1

    async def test_non_ascii_language_filename(self, demo_mode_app):
        report = {"title": "T", "sections": [], "language": "Français"}

        async with _client(demo_mode_app) as client:
            response = await client.post("/api/v1/reports/pdf", json=report)

        assert response.status_code == 200
        assert "filename*=utf-8''simplified-report-Fran%C3%A7ais.pdf" in response.headers["content-disposition"]

    async def test_simplify_then_download(self, demo_mode_app):
        async with _client(demo_mode_app) as client:
            simplified = await client.post(
                "/api/v1/simplify", json={"reportText": "FINDINGS: normal.", "language": "Spanish"}
            )
            response = await client.post(
                "/api/v1/reports/pdf", json=simplified.json()["simplifiedReport"]
            )

        assert response.status_code == 200
        assert "simplified-report-Spanish.pdf" in response.headers["content-disposition"]

    async def test_render_failure_returns_error(self, demo_mode_app):
        renderer = Mock(spec=DocumentRenderer)
        renderer.render = AsyncMock(side_effect=ReportGenerationError("Failed to generate PDF: boom"))
        app.dependency_overrides[get_renderer] = lambda: renderer

        async with _client(demo_mode_app) as client:
            response = await client.post(
                "/api/v1/reports/pdf", json={"title": "T", "sections": []}
            )

        assert response.status_code == 500
        assert response.json()["error"] == "REPORT_ERROR"

    async def test_invalid_report_rejected(self, demo_mode_app):
        async with _client(demo_mode_app) as client:
            response = await client.post("/api/v1/reports/pdf", json={"sections": "none"})

        assert response.status_code == 422
