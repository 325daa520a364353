"""Pytest configuration and shared fixtures."""
import sys
from datetime import date
from pathlib import Path

# Application modules live at the repository root
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from extractor import Category, ExtractedRecord
from messages import EXAMPLE_TEXT


@pytest.fixture
def example_text() -> str:
    """Provide the bundled example document."""
    return EXAMPLE_TEXT


@pytest.fixture
def multi_record_text() -> str:
    """Provide three vouchers separated by asterisk runs; the middle one has no data."""
    return (
        "Category : Zain\n"
        "Brand : Zain Voice\n"
        "Denomination : JOD 5\n"
        "Recharge PIN\n"
        "12345678901234\n"
        "Serial Number : 111-222\n"
        "********\n"
        "just some footer text\n"
        "*****\n"
        "Category : Umniah\n"
        "Brand : Umniah Net\n"
        "Denomination : JOD 3\n"
        "Recharge PIN : 99988877766655\n"
    )


@pytest.fixture
def sample_records():
    """Provide two extracted records with a gap in their ids."""
    return [
        ExtractedRecord(
            id=1,
            category=Category.ORANGE,
            brand="Orange Data",
            denomination="JOD 10",
            recharge_pin="11584463856769",
            serial_number="96277-433361301",
        ),
        ExtractedRecord(
            id=3,
            category=Category.ZAIN,
            brand="Zain Voice",
            denomination="JOD 5",
            recharge_pin="00000000000123",
            serial_number="",
        ),
    ]


@pytest.fixture
def fixed_date() -> date:
    """Provide a fixed calendar date for export names."""
    return date(2025, 11, 29)
