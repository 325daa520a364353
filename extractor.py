"""
Recharge Record Extractor
=========================

Splits pasted voucher text into records and pulls five fields out of each:
Category, Brand, Denomination, Recharge PIN and Serial Number.

Records are separated by runs of four or more asterisks. Fields are found by
pattern matching only, so they may be missing, repeated or out of order.
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from messages import EMPTY_INPUT

logger = logging.getLogger(__name__)

# ---------------- PATTERNS ----------------
RECORD_DELIMITER_RE = re.compile(r"\*{4,}")
RECHARGE_PIN_RE = re.compile(r"\b\d{14}\b", re.ASCII)
RECHARGE_PIN_LABEL_RE = re.compile(r"recharge pin", re.IGNORECASE)


class EmptyInputError(ValueError):
    """Raised when extraction is attempted on blank text."""

    def __init__(self, message=EMPTY_INPUT):
        super().__init__(message)


class Category(str, Enum):
    """Operator a record belongs to, in detection priority order."""
    ORANGE = "Orange"
    ZAIN = "Zain"
    UMNIAH = "Umniah"
    UNKNOWN = "Unknown"


KNOWN_CATEGORIES = (Category.ORANGE, Category.ZAIN, Category.UMNIAH)


@dataclass(frozen=True)
class ExtractedRecord:
    """One voucher as read from the pasted text."""
    id: int
    category: Category
    brand: str = ""
    denomination: str = ""
    recharge_pin: str = ""
    serial_number: str = ""

    def has_substantial_data(self) -> bool:
        return bool(self.recharge_pin or self.brand or self.denomination)

    def to_row(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "Category": self.category.value,
            "Brand": self.brand,
            "Denomination": self.denomination,
            "Recharge PIN": self.recharge_pin,
            "Serial Number": self.serial_number,
        }


def _labeled_field_pattern(label):
    # "<Label> :" then the rest of that line
    return re.compile(re.escape(label) + r" :[ \t]*([^\n\r]*)")


BRAND_RE = _labeled_field_pattern("Brand")
DENOMINATION_RE = _labeled_field_pattern("Denomination")
SERIAL_NUMBER_RE = _labeled_field_pattern("Serial Number")


# ---------------- SEGMENTATION ----------------
def split_records(text: str) -> List[str]:
    """Split on 4+ asterisks and drop segments that are only whitespace."""
    return [segment for segment in RECORD_DELIMITER_RE.split(text) if segment.strip()]


# ---------------- FIELD EXTRACTION ----------------
def detect_category(record: str) -> Category:
    lowered = record.lower()
    for category in KNOWN_CATEGORIES:
        if category.value.lower() in lowered:
            return category
    return Category.UNKNOWN


def extract_labeled_field(pattern, record: str) -> str:
    """
    Return the trimmed value of the first line matching a labeled-field
    pattern, or an empty string. Accepts a label or a compiled pattern.
    """
    if isinstance(pattern, str):
        pattern = _labeled_field_pattern(pattern)
    match = pattern.search(record)
    return match.group(1).strip() if match else ""


def extract_recharge_pin(record: str) -> str:
    """
    Find the 14-digit recharge PIN.

    When the record mentions "recharge pin", only the text from that label
    onward is searched; an earlier 14-digit number is never used instead.
    """
    label = RECHARGE_PIN_LABEL_RE.search(record)
    section = record[label.start():] if label else record
    match = RECHARGE_PIN_RE.search(section)
    return match.group(0) if match else ""


def parse_record(record: str, record_id: int) -> ExtractedRecord:
    return ExtractedRecord(
        id=record_id,
        category=detect_category(record),
        brand=extract_labeled_field(BRAND_RE, record),
        denomination=extract_labeled_field(DENOMINATION_RE, record),
        recharge_pin=extract_recharge_pin(record),
        serial_number=extract_labeled_field(SERIAL_NUMBER_RE, record),
    )


# ---------------- MAIN ENTRY ----------------
def extract_records(text: str) -> List[ExtractedRecord]:
    """
    Extract every voucher record with at least a PIN, brand or denomination.

    IDs follow segment order and are assigned before records without data
    are dropped, so the returned IDs can have gaps.

    Raises EmptyInputError if the text is blank.
    """
    if not text or not text.strip():
        raise EmptyInputError()

    segments = split_records(text)
    extracted = []
    for index, segment in enumerate(segments, start=1):
        record = parse_record(segment, index)
        if record.has_substantial_data():
            extracted.append(record)
        else:
            logger.debug(f"Dropping record {index}: no PIN, brand or denomination")

    logger.info(f"Extracted {len(extracted)} of {len(segments)} record segments")
    return extracted


def category_summary(records) -> Dict[str, int]:
    """Count records per category, in order of first appearance."""
    return dict(Counter(record.category.value for record in records))
