"""Tests for the error taxonomy and its HTTP status mapping."""

import pytest

from meetnotes.api.errors import status_code_for
from meetnotes.domain.errors import (
    GenerationError,
    NotFoundError,
    NotificationError,
    ProviderError,
    StoreError,
    SummaryError,
    ValidationError,
)


class TestSummaryError:
    """Tests for message and details."""

    def test_message_without_original(self):
        error = StoreError("Failed to fetch summaries.")
        assert str(error) == "Failed to fetch summaries."
        assert error.details is None

    def test_details_from_original(self):
        error = StoreError("Failed to fetch summaries.", OSError("db down"))
        assert error.details == "db down"

    def test_details_fall_back_to_class_name(self):
        error = ProviderError("Gemini API request timed out.", TimeoutError())
        assert error.details == "TimeoutError"

    @pytest.mark.parametrize(
        "error_type",
        [ValidationError, NotFoundError, GenerationError, ProviderError, StoreError, NotificationError],
    )
    def test_all_kinds_share_base(self, error_type):
        assert issubclass(error_type, SummaryError)


class TestStatusCodeFor:
    """Tests for status_code_for."""

    @pytest.mark.parametrize(
        ("error", "status"),
        [
            (ValidationError("bad"), 400),
            (NotFoundError("missing"), 404),
            (GenerationError("empty"), 500),
            (ProviderError("down"), 500),
            (StoreError("down"), 500),
            (NotificationError("down"), 500),
            (SummaryError("unknown"), 500),
        ],
    )
    def test_mapping(self, error, status):
        assert status_code_for(error) == status
