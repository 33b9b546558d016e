"""Error code to display text conversion for the presentation layer."""

from typing import TYPE_CHECKING, Any, Mapping, Optional

from toolkit_i18n.errors.codes import ErrorCode, default_message_for
from toolkit_i18n.i18n.translator import interpolate

if TYPE_CHECKING:
    from toolkit_i18n.i18n.translator import Translator


def render_error_message(
    code: ErrorCode,
    translator: Optional["Translator"] = None,
    variables: Optional[Mapping[str, Any]] = None,
) -> str:
    """Display text for an error code.

    Goes through the translator whenever one is available; the default
    English message is only used before any tree is loaded.

    Args:
        code: Error code to describe.
        translator: Translator for the user's locale, if available.
        variables: Optional placeholder values.

    Returns:
        Non-empty display text.
    """
    if translator is not None:
        return translator.error(code, variables)
    return interpolate(default_message_for(code), variables)
