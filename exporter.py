"""
Spreadsheet export for extracted recharge records.

Excel is written through pandas with the openpyxl engine; the same columns
are available as CSV.
"""

import logging
from dataclasses import dataclass
from datetime import date
from io import BytesIO
from typing import Optional

import pandas as pd
from openpyxl.utils import get_column_letter

from messages import NO_DATA_TO_EXPORT
from settings import EXPORT_COLUMNS, EXPORT_FILE_PATTERN, SHEET_NAME

logger = logging.getLogger(__name__)

COLUMN_NAMES = [name for name, _ in EXPORT_COLUMNS]


class NothingToExportError(ValueError):
    """Raised when an export is requested before any records exist."""

    def __init__(self, message=NO_DATA_TO_EXPORT):
        super().__init__(message)


@dataclass(frozen=True)
class ExcelExport:
    file_name: str
    data: bytes
    row_count: int


def records_to_dataframe(records) -> pd.DataFrame:
    rows = [record.to_row() for record in records]
    return pd.DataFrame(rows, columns=COLUMN_NAMES)


def export_file_name(today: Optional[date] = None) -> str:
    today = today or date.today()
    return EXPORT_FILE_PATTERN.format(date=today.isoformat())


def build_excel(records) -> bytes:
    """Write records to a single-sheet workbook with fixed column widths."""
    df = records_to_dataframe(records)

    excel_buffer = BytesIO()
    with pd.ExcelWriter(excel_buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=SHEET_NAME, index=False)

        worksheet = writer.sheets[SHEET_NAME]
        for col_idx, (_, width) in enumerate(EXPORT_COLUMNS, start=1):
            worksheet.column_dimensions[get_column_letter(col_idx)].width = width

    return excel_buffer.getvalue()


def build_csv(records) -> str:
    if not records:
        raise NothingToExportError()
    return records_to_dataframe(records).to_csv(index=False)


def export_to_excel(records, today: Optional[date] = None) -> ExcelExport:
    """
    Build the downloadable workbook for the current records.

    Raises NothingToExportError when there is nothing to export; no file is
    produced in that case.
    """
    if not records:
        raise NothingToExportError()

    data = build_excel(records)
    file_name = export_file_name(today)
    logger.info(f"Built {file_name} with {len(records)} rows ({len(data)} bytes)")
    return ExcelExport(file_name=file_name, data=data, row_count=len(records))
