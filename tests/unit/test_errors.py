"""
Unit tests for the error taxonomy and its HTTP status mapping.

Tests cover:
- Legacy mapping (401 for domain failures, 501 for store failures)
- Strict mapping (404 / 409)
- StoreError message format
"""

import pytest
from pymongo.errors import OperationFailure

from api.src.errors import (
    ApiError, ConflictError, InvalidCredentialsError, NotFoundError, StoreError
)


class TestStatusMapping:
    """Tests for ApiError.status_for."""

    @pytest.mark.parametrize("error, legacy, strict", [
        (NotFoundError("Invalid teamId."), 401, 404),
        (ConflictError("Username is already in use."), 401, 409),
        (InvalidCredentialsError(), 401, 401),
        (StoreError(OperationFailure("boom")), 501, 501),
        (ApiError("unexpected"), 500, 500),
    ])
    def test_status_codes(self, error, legacy, strict):
        assert error.status_for(strict=False) == legacy
        assert error.status_for(strict=True) == strict


class TestStoreError:
    """Tests for StoreError."""

    def test_message_embeds_driver_error(self):
        error = StoreError(OperationFailure("not authorized on web420DB"), "teams", "find")

        assert error.message == "MongoDB Exception: not authorized on web420DB"
        assert error.collection == "teams"
        assert error.operation == "find"

    def test_invalid_credentials_default_message(self):
        assert InvalidCredentialsError().message == "Invalid username and/or password."
