"""User-facing notice texts and the bundled example document."""

from dataclasses import dataclass

EMPTY_INPUT = "Please enter your recharge data text first"
NO_RECORDS_FOUND = "No recharge data found. Please check your text format."
EXTRACTION_SUCCESS = "Successfully extracted {count} recharge records!"
NO_DATA_TO_EXPORT = "No data to export. Please extract data first."

EXAMPLE_TEXT = """Category : Orange
Date : 2025-11-29T12:27:59.953
PosId : 16002
Brand : Orange Data
Denomination : JOD 10

***

Recharge PIN

11584463856769
***
ExpiryDate : 2030-06-24T00:00:00
Serial Number : 96277-433361301"""


@dataclass(frozen=True)
class Notice:
    """A message for the user; level is one of success, warning or error."""
    level: str
    text: str


def extraction_notice(records) -> Notice:
    if not records:
        return Notice("warning", NO_RECORDS_FOUND)
    return Notice("success", EXTRACTION_SUCCESS.format(count=len(records)))
