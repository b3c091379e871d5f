"""
Pytest Configuration and Fixtures

Shared fixtures for simplifier, renderer and API tests.
"""
import sys
import pytest
import httpx
import reportlab
from pathlib import Path
from typing import List
from unittest.mock import AsyncMock, Mock

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from medsimplify.core.llm import GeminiClient
from medsimplify.models import GeneratedReport, Section, SimplificationOutput, SimplifiedReport
from medsimplify.utils import InferenceError


@pytest.fixture
def sample_report_text() -> str:
    """A short radiology-style report."""
    return (
        "CLINICAL HISTORY: Persistent cough for 3 weeks.\n"
        "FINDINGS: Patchy consolidation in the right lower lobe. No pleural effusion. "
        "Cardiomediastinal silhouette within normal limits.\n"
        "IMPRESSION: Findings consistent with community-acquired pneumonia {follow-up advised}."
    )


@pytest.fixture
def model_output() -> SimplificationOutput:
    """What a well-behaved model returns."""
    return SimplificationOutput(
        simplified_report=GeneratedReport(
            title="Your Chest X-ray Explained",
            sections=[
                Section(heading="What We Found", content="There is an infection in the lower right lung."),
                Section(heading="What It Means", content="This is most likely pneumonia."),
                Section(heading="What To Do", content="Take the antibiotics and rest.\nSee your doctor in a week."),
            ],
        )
    )


@pytest.fixture
def failing_client() -> Mock:
    """LLM client whose only call fails like a quota error."""
    client = Mock(spec=GeminiClient)
    client.is_available = True
    client.generate_structured = AsyncMock(
        side_effect=InferenceError("429 Resource has been exhausted (quota)", model="gemini-2.5-flash")
    )
    return client


@pytest.fixture
def working_client(model_output) -> Mock:
    """LLM client that returns ``model_output``."""
    client = Mock(spec=GeminiClient)
    client.is_available = True
    client.generate_structured = AsyncMock(return_value=model_output)
    return client


@pytest.fixture
def english_report() -> SimplifiedReport:
    return SimplifiedReport(
        title="Simplified Blood Test",
        sections=[
            Section(heading="Summary", content="Your results are mostly normal."),
            Section(heading="Key Findings", content="1. Iron is a little low.\n2. Sugar is normal."),
            Section(heading="Next Steps", content="Eat iron-rich food <and> retest in 3 months & relax."),
        ],
        language="English",
    )


@pytest.fixture
def ttf_bytes() -> bytes:
    """A real TrueType file shipped with reportlab, standing in for Noto Sans."""
    return (Path(reportlab.__file__).parent / "fonts" / "Vera.ttf").read_bytes()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code: int = 200, content: bytes = b""):
        self.requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(status_code, content=content)

        super().__init__(handler)


@pytest.fixture
def font_server(ttf_bytes) -> RecordingTransport:
    """Font CDN that serves a valid TTF."""
    return RecordingTransport(200, ttf_bytes)


@pytest.fixture
def broken_font_server() -> RecordingTransport:
    """Font CDN that answers 404."""
    return RecordingTransport(404, b"Not Found")


@pytest.fixture
def no_network() -> RecordingTransport:
    """Transport for renders that must not fetch anything."""
    return RecordingTransport(500, b"")


@pytest.fixture
def garbage_font_server() -> RecordingTransport:
    """Font CDN that returns bytes that are not a TrueType file."""
    return RecordingTransport(200, b"<html>rate limited</html>")
