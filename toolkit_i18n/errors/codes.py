"""Error codes raised by the PDF tools and their message mappings.

Two total mappings hang off the closed ``ErrorCode`` enumeration:

- ``ERROR_MESSAGE_KEYS``: code -> translation key under the ``errors.``
  namespace. Presentation code resolves these through a translator.
- ``DEFAULT_ERROR_MESSAGES``: code -> English prose used only when no
  translator or tree can supply the key.

Both are read-only and must gain an entry whenever a code is added; the test
suite checks totality.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

ERROR_KEY_NAMESPACE = "errors."


class ErrorCode(str, Enum):
    """Every distinct failure the PDF tools can report."""

    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"
    FILE_CORRUPTED = "FILE_CORRUPTED"
    PASSWORD_REQUIRED = "PASSWORD_REQUIRED"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    ENCRYPTED_PDF = "ENCRYPTED_PDF"
    INVALID_PAGE_RANGE = "INVALID_PAGE_RANGE"
    PROCESSING_FAILED = "PROCESSING_FAILED"
    WORKER_FAILED = "WORKER_FAILED"
    OUT_OF_MEMORY = "OUT_OF_MEMORY"
    BROWSER_NOT_SUPPORTED = "BROWSER_NOT_SUPPORTED"
    NETWORK_ERROR = "NETWORK_ERROR"


ERROR_MESSAGE_KEYS: Mapping[ErrorCode, str] = MappingProxyType(
    {
        ErrorCode.FILE_TOO_LARGE: "errors.fileTooLarge",
        ErrorCode.INVALID_FILE_TYPE: "errors.fileTypeInvalid",
        ErrorCode.FILE_CORRUPTED: "errors.fileCorrupted",
        ErrorCode.PASSWORD_REQUIRED: "errors.passwordRequired",
        ErrorCode.INVALID_PASSWORD: "errors.invalidPassword",
        ErrorCode.ENCRYPTED_PDF: "errors.encryptedPdf",
        ErrorCode.INVALID_PAGE_RANGE: "errors.invalidPageRange",
        ErrorCode.PROCESSING_FAILED: "errors.processingFailed",
        ErrorCode.WORKER_FAILED: "errors.workerFailed",
        ErrorCode.OUT_OF_MEMORY: "errors.outOfMemory",
        ErrorCode.BROWSER_NOT_SUPPORTED: "errors.browserNotSupported",
        ErrorCode.NETWORK_ERROR: "errors.networkError",
    }
)

DEFAULT_ERROR_MESSAGES: Mapping[ErrorCode, str] = MappingProxyType(
    {
        ErrorCode.FILE_TOO_LARGE: "The file is too large. Please choose a smaller file.",
        ErrorCode.INVALID_FILE_TYPE: "This file type is not supported. Please upload a PDF file.",
        ErrorCode.FILE_CORRUPTED: "The file appears to be damaged and cannot be opened.",
        ErrorCode.PASSWORD_REQUIRED: "This PDF is password protected. Please enter the password.",
        ErrorCode.INVALID_PASSWORD: "The password is incorrect. Please try again.",
        ErrorCode.ENCRYPTED_PDF: "This PDF is encrypted and cannot be edited.",
        ErrorCode.INVALID_PAGE_RANGE: "The page range is not valid for this document.",
        ErrorCode.PROCESSING_FAILED: "Something went wrong while processing your file.",
        ErrorCode.WORKER_FAILED: "The background processor stopped unexpectedly. Please try again.",
        ErrorCode.OUT_OF_MEMORY: "Your device ran out of memory while processing the file.",
        ErrorCode.BROWSER_NOT_SUPPORTED: "Your browser does not support this feature.",
        ErrorCode.NETWORK_ERROR: "A network error occurred. Please check your connection.",
    }
)

_ERROR_CODE_VALUES = frozenset(code.value for code in ErrorCode)


def all_error_codes() -> tuple[ErrorCode, ...]:
    """Every error code, in declaration order."""
    return tuple(ErrorCode)


def message_key_for(code: ErrorCode) -> str:
    """Translation key for an error code (always under ``errors.``)."""
    return ERROR_MESSAGE_KEYS[code]


def default_message_for(code: ErrorCode) -> str:
    """Last-resort English message for an error code."""
    return DEFAULT_ERROR_MESSAGES[code]


def is_valid_error_code(candidate: object) -> bool:
    """Exact membership test against the error code enumeration.

    Casing variants and near misses are invalid.
    """
    return isinstance(candidate, str) and candidate in _ERROR_CODE_VALUES
