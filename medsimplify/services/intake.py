"""
Report file intake.

Uploads are read as raw text whatever their extension. .pdf and .docx are
accepted but not parsed, so binary documents come through garbled.
"""
import os
from typing import Optional

from medsimplify.utils import get_logger, IntakeError

logger = get_logger(__name__)

ACCEPTED_EXTENSIONS = (".txt", ".pdf", ".docx")


def read_report_upload(filename: Optional[str], content: bytes) -> str:
    """
    Decode an uploaded report file to text.

    Args:
        filename: Client-supplied file name, used only for the extension check
        content: Raw file bytes

    Returns:
        The file content as text (invalid UTF-8 replaced)

    Raises:
        IntakeError: unsupported extension (415) or empty content (400)
    """
    name = filename or ""
    extension = os.path.splitext(name)[1].lower()
    if extension not in ACCEPTED_EXTENSIONS:
        raise IntakeError(
            f"Unsupported file type '{extension or name}'. Supported formats: "
            + ", ".join(ACCEPTED_EXTENSIONS),
            filename=name,
            status_code=415,
        )

    text = content.decode("utf-8", errors="replace")
    if not text.strip():
        raise IntakeError("Uploaded report is empty", filename=name, status_code=400)

    if extension != ".txt":
        logger.warning(f"{name}: {extension} files are read as raw text, not parsed")
    return text
