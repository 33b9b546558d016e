"""Tests for toolkit_i18n.errors.exceptions module."""

import pytest

from toolkit_i18n.errors import (
    ErrorCode,
    InvalidErrorCodeError,
    ToolkitError,
    coerce_error_code,
    default_message_for,
)
from toolkit_i18n.i18n import I18nError


@pytest.mark.unit
class TestToolkitError:
    """Tests for ToolkitError."""

    def test_carries_code_and_variables(self):
        error = ToolkitError(ErrorCode.FILE_TOO_LARGE, {"maxSize": "50 MB"})
        assert error.code == ErrorCode.FILE_TOO_LARGE
        assert error.variables == {"maxSize": "50 MB"}
        assert error.detail is None

    def test_message_defaults_to_english(self):
        error = ToolkitError(ErrorCode.NETWORK_ERROR)
        assert str(error) == default_message_for(ErrorCode.NETWORK_ERROR)
        assert error.variables == {}

    def test_detail_used_as_message(self):
        error = ToolkitError(ErrorCode.WORKER_FAILED, detail="worker exited with 137")
        assert str(error) == "worker exited with 137"

    def test_variables_are_copied(self):
        variables = {"maxSize": "10 MB"}
        error = ToolkitError(ErrorCode.FILE_TOO_LARGE, variables)
        variables["maxSize"] = "20 MB"
        assert error.variables == {"maxSize": "10 MB"}

    def test_can_be_raised(self):
        with pytest.raises(ToolkitError) as exc_info:
            raise ToolkitError(ErrorCode.INVALID_PASSWORD)
        assert exc_info.value.code == ErrorCode.INVALID_PASSWORD


@pytest.mark.unit
class TestCoerceErrorCode:
    """Tests for coerce_error_code()."""

    def test_valid_string(self):
        assert coerce_error_code("OUT_OF_MEMORY") is ErrorCode.OUT_OF_MEMORY

    def test_enum_member(self):
        assert coerce_error_code(ErrorCode.ENCRYPTED_PDF) is ErrorCode.ENCRYPTED_PDF

    @pytest.mark.parametrize("candidate", ["out_of_memory", "OOM", "", None])
    def test_invalid_raises(self, candidate):
        with pytest.raises(InvalidErrorCodeError) as exc_info:
            coerce_error_code(candidate)
        assert exc_info.value.candidate == candidate

    def test_invalid_error_hierarchy(self):
        error = InvalidErrorCodeError("NOPE")
        assert isinstance(error, I18nError)
        assert isinstance(error, ValueError)
        assert "NOPE" in str(error)
