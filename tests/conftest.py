import io
from collections.abc import Callable
from datetime import datetime, timezone

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from app.logging.sinks import MemorySink

FIXED_MOMENT = datetime(2024, 5, 17, 9, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture()
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_MOMENT


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF, the kind of blob a user uploads."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Signed contract")
    c.save()
    return buf.getvalue()
