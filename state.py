"""
Session state for the extractor page.

The functions take any mutable mapping so they work on st.session_state in
the app and on a plain dict in tests. Each action replaces state wholesale.
"""

import logging
from typing import MutableMapping

from exporter import export_to_excel
from extractor import EmptyInputError, extract_records
from messages import EXAMPLE_TEXT, Notice, extraction_notice

logger = logging.getLogger(__name__)

TEXT_KEY = "raw_text"
RECORDS_KEY = "records"


def init_state(state: MutableMapping):
    state.setdefault(TEXT_KEY, "")
    state.setdefault(RECORDS_KEY, [])


def extract_into(state: MutableMapping) -> Notice:
    """Run extraction on the current text and store the result."""
    try:
        records = extract_records(state.get(TEXT_KEY, ""))
    except EmptyInputError as e:
        # previous records stay on screen
        return Notice("error", str(e))

    state[RECORDS_KEY] = records
    return extraction_notice(records)


def export_from(state: MutableMapping, today=None):
    """Raises NothingToExportError when nothing has been extracted yet."""
    return export_to_excel(state.get(RECORDS_KEY, []), today=today)


def clear_all(state: MutableMapping):
    state[TEXT_KEY] = ""
    state[RECORDS_KEY] = []
    logger.info("Cleared input text and extracted records")


def load_example(state: MutableMapping):
    state[TEXT_KEY] = EXAMPLE_TEXT
