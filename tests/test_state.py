"""Unit tests for session state actions and notices."""
import pytest

from exporter import NothingToExportError
from messages import (
    EMPTY_INPUT,
    EXAMPLE_TEXT,
    NO_RECORDS_FOUND,
    Notice,
    extraction_notice,
)
from state import (
    RECORDS_KEY,
    TEXT_KEY,
    clear_all,
    export_from,
    extract_into,
    init_state,
    load_example,
)


@pytest.fixture
def state():
    """Provide a fresh session state."""
    session = {}
    init_state(session)
    return session


@pytest.mark.unit
class TestExtractionNotice:
    """Tests for extraction notices."""

    def test_no_records(self):
        assert extraction_notice([]) == Notice("warning", NO_RECORDS_FOUND)

    def test_success_carries_count(self, sample_records):
        assert extraction_notice(sample_records) == Notice(
            "success", "Successfully extracted 2 recharge records!"
        )


@pytest.mark.unit
class TestStateActions:
    """Tests for the page actions."""

    def test_init_state_keeps_existing_values(self):
        session = {TEXT_KEY: "kept"}
        init_state(session)

        assert session == {TEXT_KEY: "kept", RECORDS_KEY: []}

    def test_extract_into_stores_records(self, state, example_text):
        state[TEXT_KEY] = example_text

        notice = extract_into(state)

        assert notice == Notice("success", "Successfully extracted 1 recharge records!")
        assert len(state[RECORDS_KEY]) == 1

    def test_empty_text_keeps_previous_records(self, state, sample_records):
        state[RECORDS_KEY] = sample_records
        state[TEXT_KEY] = "   "

        notice = extract_into(state)

        assert notice == Notice("error", EMPTY_INPUT)
        assert state[RECORDS_KEY] == sample_records

    def test_no_matches_replace_previous_records(self, state, sample_records):
        state[RECORDS_KEY] = sample_records
        state[TEXT_KEY] = "nothing useful here"

        notice = extract_into(state)

        assert notice == Notice("warning", NO_RECORDS_FOUND)
        assert state[RECORDS_KEY] == []

    def test_new_extraction_replaces_previous_result(self, state, example_text, multi_record_text):
        state[TEXT_KEY] = multi_record_text
        extract_into(state)
        state[TEXT_KEY] = example_text
        extract_into(state)

        assert [r.id for r in state[RECORDS_KEY]] == [1]
        assert state[RECORDS_KEY][0].brand == "Orange Data"

    def test_export_without_records_is_refused(self, state):
        with pytest.raises(NothingToExportError):
            export_from(state)

    def test_export_from_current_records(self, state, sample_records, fixed_date):
        state[RECORDS_KEY] = sample_records

        result = export_from(state, today=fixed_date)

        assert result.row_count == 2
        assert result.file_name == "recharge_data_2025-11-29.xlsx"

    def test_clear_all(self, state, sample_records):
        state[TEXT_KEY] = "something"
        state[RECORDS_KEY] = sample_records

        clear_all(state)

        assert state[TEXT_KEY] == ""
        assert state[RECORDS_KEY] == []

    def test_load_example_replaces_text(self, state):
        state[TEXT_KEY] = "old text"

        load_example(state)

        assert state[TEXT_KEY] == EXAMPLE_TEXT
        assert state[RECORDS_KEY] == []
