"""
Notes API — Validator Unit Tests
==================================

What:  Tests for the pure input validators (payloads, ids, pagination).
Why:   These decide what reaches the store at all; every rejection here
       is a 400 and every acceptance is a normalized value.

What we test:
    ✅ Create payload: required text, optional date, first-error-wins
    ✅ Update payload: partial semantics (absent/null = unchanged)
    ✅ Note id: digits only, positive, within the column range
    ✅ Pagination: defaults for absent values, rejection otherwise
"""

from datetime import datetime, timedelta, timezone

import pytest

from notes_api.exceptions import ValidationError
from notes_api.validators import (
    MAX_NOTE_ID,
    validate_create_payload,
    validate_note_id,
    validate_pagination,
    validate_update_payload,
)


class TestCreatePayload:
    """Tests for validate_create_payload."""

    def test_text_only(self):
        payload = validate_create_payload({"text": "hello"})
        assert payload.text == "hello"
        assert payload.date is None

    def test_iso_date_is_converted_to_utc(self):
        payload = validate_create_payload(
            {"text": "hello", "date": "2024-01-15T14:00:00+02:00"}
        )
        assert payload.date == datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert payload.date.utcoffset() == timedelta(0)

    def test_naive_date_is_taken_as_utc(self):
        payload = validate_create_payload({"text": "x", "date": "2024-01-15T12:00:00"})
        assert payload.date.tzinfo is not None
        assert payload.date == datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

    def test_epoch_seconds_date(self):
        payload = validate_create_payload({"text": "x", "date": 1705320000})
        assert payload.date == datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

    def test_missing_text_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_payload({"date": "2024-01-15T12:00:00Z"})
        assert exc_info.value.field == "text"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_rejected(self, text):
        with pytest.raises(ValidationError, match="text must not be empty"):
            validate_create_payload({"text": text})

    def test_non_string_text_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_payload({"text": 42})
        assert exc_info.value.field == "text"

    def test_unparsable_date_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_payload({"text": "x", "date": "yesterday-ish"})
        assert exc_info.value.field == "date"

    def test_first_error_wins(self):
        """Both fields are bad; only the first one is reported."""
        with pytest.raises(ValidationError) as exc_info:
            validate_create_payload({"date": "nope"})
        assert exc_info.value.field == "text"
        assert exc_info.value.message.startswith("text: ")

    @pytest.mark.parametrize("raw", [None, [], ["text"], "hello", 5])
    def test_non_object_body_rejected(self, raw):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_create_payload(raw)

    @pytest.mark.parametrize(
        "date", ["9999-12-31T23:59:59-05:00", "0001-01-01T00:00:00+01:00"]
    )
    def test_date_without_utc_equivalent_rejected(self, date):
        with pytest.raises(ValidationError, match="date is out of range") as exc_info:
            validate_create_payload({"text": "x", "date": date})
        assert exc_info.value.field == "date"

    def test_unknown_fields_ignored(self):
        payload = validate_create_payload({"text": "x", "id": 99})
        assert payload.text == "x"


class TestUpdatePayload:
    """Tests for validate_update_payload."""

    def test_empty_body_means_no_changes(self):
        changes = validate_update_payload({})
        assert changes.text is None
        assert changes.date is None

    def test_null_fields_mean_unchanged(self):
        changes = validate_update_payload({"text": None, "date": None})
        assert changes.text is None
        assert changes.date is None

    def test_partial_text(self):
        changes = validate_update_payload({"text": "b"})
        assert changes.text == "b"
        assert changes.date is None

    def test_present_blank_text_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_update_payload({"text": " "})
        assert exc_info.value.field == "text"

    def test_bad_date_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_update_payload({"date": "31/31/2024"})
        assert exc_info.value.field == "date"

    def test_date_without_utc_equivalent_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_update_payload({"date": "9999-12-31T23:59:59-05:00"})
        assert exc_info.value.field == "date"


class TestNoteId:
    """Tests for validate_note_id."""

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), ("007", 7)])
    def test_valid_ids(self, raw, expected):
        assert validate_note_id(raw) == expected

    def test_max_id_accepted(self):
        assert validate_note_id(str(MAX_NOTE_ID)) == MAX_NOTE_ID

    @pytest.mark.parametrize(
        "raw",
        ["abc", "", "-1", "+1", " 1", "1.5", "1e3", "1_000", "١٢", None],
    )
    def test_non_numeric_ids_rejected(self, raw):
        with pytest.raises(ValidationError, match="positive integer"):
            validate_note_id(raw)

    def test_zero_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_note_id("0")
        assert exc_info.value.field == "id"

    def test_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="between 1 and"):
            validate_note_id(str(MAX_NOTE_ID + 1))

    @pytest.mark.parametrize("raw", ["9" * 5000, "1" + "0" * 10])
    def test_overlong_digit_strings_rejected(self, raw):
        with pytest.raises(ValidationError, match="between 1 and"):
            validate_note_id(raw)

    def test_leading_zeros_do_not_count_toward_length(self):
        assert validate_note_id("0" * 20 + "5") == 5


class TestPagination:
    """Tests for validate_pagination."""

    def test_defaults_when_absent(self):
        params = validate_pagination({})
        assert (params.limit, params.page) == (10, 1)
        assert params.offset == 0

    def test_defaults_when_empty_strings(self):
        params = validate_pagination({"limit": "", "page": ""})
        assert (params.limit, params.page) == (10, 1)

    def test_custom_default_limit(self):
        assert validate_pagination({}, default_limit=25).limit == 25

    def test_strings_parsed(self):
        params = validate_pagination({"limit": "5", "page": "2"})
        assert (params.limit, params.page) == (5, 2)
        assert params.offset == 5

    def test_integers_accepted(self):
        params = validate_pagination({"limit": 20, "page": 3})
        assert params.offset == 40

    def test_unparsable_rejected_not_defaulted(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination({"limit": "abc", "page": "abc"})
        # limit is checked first
        assert exc_info.value.field == "limit"

    def test_unparsable_page_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination({"limit": "5", "page": "2.5"})
        assert exc_info.value.field == "page"

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            validate_pagination({"limit": True})

    @pytest.mark.parametrize("field", ["limit", "page"])
    @pytest.mark.parametrize("value", ["0", "-3", 0])
    def test_non_positive_rejected(self, field, value):
        with pytest.raises(ValidationError, match="greater than 0") as exc_info:
            validate_pagination({field: value})
        assert exc_info.value.field == field

    def test_limit_above_max_rejected(self):
        with pytest.raises(ValidationError, match="must not exceed 100"):
            validate_pagination({"limit": "101"})

    def test_limit_at_max_accepted(self):
        assert validate_pagination({"limit": "100"}).limit == 100

    @pytest.mark.parametrize("field", ["limit", "page"])
    def test_overlong_digit_strings_rejected(self, field):
        with pytest.raises(ValidationError, match="out of range") as exc_info:
            validate_pagination({field: "9" * 5000})
        assert exc_info.value.field == field

    def test_overlong_negative_rejected(self):
        with pytest.raises(ValidationError):
            validate_pagination({"limit": "-" + "9" * 5000})

    def test_page_above_max_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination({"page": "11"}, max_page=10)
        assert exc_info.value.field == "page"
