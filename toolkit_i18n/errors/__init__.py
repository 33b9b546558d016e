"""Error codes and their user-facing messages.

Feature code raises ``ToolkitError`` with an ``ErrorCode``; presentation code
converts the code to text with ``render_error_message``.
"""

from toolkit_i18n.errors.codes import (
    DEFAULT_ERROR_MESSAGES,
    ERROR_KEY_NAMESPACE,
    ERROR_MESSAGE_KEYS,
    ErrorCode,
    all_error_codes,
    default_message_for,
    is_valid_error_code,
    message_key_for,
)
from toolkit_i18n.errors.exceptions import (
    InvalidErrorCodeError,
    ToolkitError,
    coerce_error_code,
)
from toolkit_i18n.errors.messages import render_error_message

__all__ = [
    "ErrorCode",
    "ERROR_KEY_NAMESPACE",
    "ERROR_MESSAGE_KEYS",
    "DEFAULT_ERROR_MESSAGES",
    "all_error_codes",
    "message_key_for",
    "default_message_for",
    "is_valid_error_code",
    "InvalidErrorCodeError",
    "ToolkitError",
    "coerce_error_code",
    "render_error_message",
]
