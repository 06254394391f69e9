"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    DonorHubError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    DuplicateKeyError,
    ConfigurationError,
)


class TestDonorHubError:
    def test_message(self):
        """DonorHubError should store message."""
        error = DonorHubError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """DonorHubError should default code to class name."""
        error = DonorHubError("Test error")
        assert error.code == "DonorHubError"

    def test_custom_code_and_details(self):
        error = DonorHubError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_default_status_is_500(self):
        assert DonorHubError("boom").status_code == 500

    def test_to_dict_exposes_only_message(self):
        """Codes and details are internal; the body is just the message."""
        error = DonorHubError("Test error", code="TEST", details={"secret": "x"})
        assert error.to_dict() == {"message": "Test error"}


class TestStatusCodes:
    def test_taxonomy(self):
        assert ValidationError("x").status_code == 400
        assert AuthenticationError("x").status_code == 401
        assert AuthorizationError("x").status_code == 403
        assert NotFoundError("x").status_code == 404
        assert ConflictError("x").status_code == 409
        assert ConfigurationError("x").status_code == 500

    def test_all_inherit_base(self):
        for cls in (ValidationError, AuthenticationError, NotFoundError, ConflictError):
            assert isinstance(cls("x"), DonorHubError)


class TestDuplicateKeyError:
    def test_records_constraint(self):
        error = DuplicateKeyError("users_email_key")
        assert error.constraint == "users_email_key"
        assert error.code == "DUPLICATE_KEY"
        assert "users_email_key" in error.message

    def test_unknown_constraint(self):
        error = DuplicateKeyError()
        assert error.constraint is None
        assert "unknown" in error.message

    def test_is_not_a_client_error_by_itself(self):
        """Services must translate it; unhandled it is a 500."""
        assert DuplicateKeyError().status_code == 500
