"""Exceptions carrying error codes between feature code and presentation."""

from typing import Any, Mapping, Optional

from toolkit_i18n.errors.codes import ErrorCode, default_message_for, is_valid_error_code
from toolkit_i18n.i18n.exceptions import I18nError


class InvalidErrorCodeError(I18nError, ValueError):
    """A string outside the error code enumeration was given as an ErrorCode."""

    def __init__(self, candidate: object):
        self.candidate = candidate
        super().__init__(f"Unknown error code: {candidate!r}")


class ToolkitError(Exception):
    """Failure raised by feature code, tagged with an ErrorCode.

    The presentation layer turns ``code`` into text via
    ``render_error_message``; ``detail`` is for logs only and never shown.

    Attributes:
        code: Error code from the closed enumeration.
        variables: Values for placeholders in the translated message.
        detail: Optional technical detail.
    """

    def __init__(
        self,
        code: ErrorCode,
        variables: Optional[Mapping[str, Any]] = None,
        detail: Optional[str] = None,
    ):
        self.code = code
        self.variables = dict(variables or {})
        self.detail = detail
        super().__init__(detail or default_message_for(code))


def coerce_error_code(candidate: object) -> ErrorCode:
    """Convert an untrusted value into an ErrorCode.

    Args:
        candidate: Value received from outside (e.g., a worker message).

    Returns:
        The matching ErrorCode.

    Raises:
        InvalidErrorCodeError: If candidate is not exactly a known code.
    """
    if not is_valid_error_code(candidate):
        raise InvalidErrorCodeError(candidate)
    return ErrorCode(candidate)
