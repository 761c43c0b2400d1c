"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    AppError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
)


class TestAppError:
    def test_app_error_message(self):
        """AppError should store message."""
        error = AppError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_app_error_default_code(self):
        """AppError should default code to class name."""
        error = AppError("Test error")
        assert error.code == "AppError"

    def test_app_error_custom_code_and_details(self):
        error = AppError("Test error", code="CUSTOM_ERROR", details={"key": "value"})
        assert error.code == "CUSTOM_ERROR"
        assert error.details == {"key": "value"}


class TestStatusCodes:
    @pytest.mark.parametrize(
        "exc_class,status",
        [
            (ValidationError, 400),
            (AuthenticationError, 401),
            (NotFoundError, 404),
            (AppError, 500),
        ],
    )
    def test_status_code_per_class(self, exc_class, status):
        assert exc_class("x").status_code == status

    def test_subclasses_are_app_errors(self):
        for exc_class in (ValidationError, AuthenticationError, NotFoundError):
            assert issubclass(exc_class, AppError)
