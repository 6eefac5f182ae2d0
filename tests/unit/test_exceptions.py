"""Unit tests for the exception hierarchy."""

import pytest

from sweather.utils.exceptions import (
    AppException,
    ConfigError,
    ConfigFileNotFoundError,
    EmptyResponseError,
    GatewayError,
    GatewayTransportError,
    GeolocationError,
    ImageError,
    ImageReadError,
    RequestCancelledError,
    ResponseSchemaError,
    StorageCorruptError,
    StorageError,
    StorageQuotaExceededError,
    UIError,
)


class TestAppException:
    """Test the base exception."""

    def test_default_code_from_class_name(self):
        assert AppException("boom").code == "APP_EXCEPTION"

    def test_str_includes_code(self):
        assert str(AppException("boom", code="X")) == "[X] boom"

    def test_to_dict(self):
        error = AppException("boom", code="X", context={"a": 1})

        assert error.to_dict() == {
            "error_type": "AppException",
            "message": "boom",
            "code": "X",
            "context": {"a": 1},
        }


@pytest.mark.parametrize(
    "error, parent, code",
    [
        (ConfigFileNotFoundError(path="/x.yaml"), ConfigError, "CONFIG_FILE_NOT_FOUND"),
        (StorageQuotaExceededError(key="k", size=10, quota=5), StorageError, "STORAGE_QUOTA_EXCEEDED"),
        (StorageCorruptError(path="/s.json"), StorageError, "STORAGE_CORRUPT"),
        (GatewayTransportError(operation="recommend"), GatewayError, "GATEWAY_TRANSPORT"),
        (EmptyResponseError(operation="recommend"), GatewayError, "GATEWAY_EMPTY_RESPONSE"),
        (ResponseSchemaError(operation="recommend"), GatewayError, "GATEWAY_SCHEMA"),
        (RequestCancelledError(), GatewayError, "GATEWAY_CANCELLED"),
        (ImageReadError(source="a.jpg"), ImageError, "IMAGE_READ"),
        (GeolocationError(reason="denied"), UIError, "GEOLOCATION_FAILED"),
    ],
)
def test_hierarchy_and_codes(error, parent, code):
    """Test every concrete error sits under its family with a stable code."""
    assert isinstance(error, parent)
    assert isinstance(error, AppException)
    assert error.code == code


def test_context_fields():
    error = StorageQuotaExceededError("full", key="k", size=10, quota=5)

    assert error.context == {"key": "k", "size": 10, "quota": 5}


def test_schema_error_truncates_payload():
    """Test large model payloads are cut down before being kept for logging."""
    error = ResponseSchemaError(operation="recommend", payload="x" * 2000)

    assert len(error.context["payload"]) == 500
