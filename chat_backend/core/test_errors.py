# chat_backend/core/test_errors.py

import pytest

from chat_backend.core.errors import InvalidArgumentError, UnknownError, require_fields


def test_error_to_dict():
    err = InvalidArgumentError("Required fields (userId) are missing", details={"missing": ["userId"]})
    assert err.http_status == 400
    assert err.to_dict() == {
        "status": "INVALID_ARGUMENT",
        "message": "Required fields (userId) are missing",
        "details": {"missing": ["userId"]},
    }

def test_unknown_error_without_details():
    err = UnknownError("An error occurred while registering")
    assert err.http_status == 500
    assert err.to_dict() == {"status": "UNKNOWN", "message": "An error occurred while registering"}

def test_require_fields():
    require_fields("missing", text="hello", userId="u1")

    with pytest.raises(InvalidArgumentError) as exc_info:
        require_fields("missing", text="", userId=123)
    assert exc_info.value.details == {"missing": ["text", "userId"]}
