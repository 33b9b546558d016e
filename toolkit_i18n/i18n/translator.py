"""Translators bound to a single resolved message tree.

A Translator resolves dot-paths against one already-merged tree and fills
``{{name}}`` placeholders. It never raises: unresolved keys come back as the
key itself so gaps stay visible in QA without breaking a request.
"""

import re
from typing import Any, Mapping, Optional

from toolkit_i18n.errors.codes import ErrorCode, default_message_for, message_key_for
from toolkit_i18n.i18n.models import Locale
from toolkit_i18n.i18n.tree import MessageTree, resolve
from toolkit_i18n.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def interpolate(message: str, variables: Optional[Mapping[str, Any]] = None) -> str:
    """Replace ``{{name}}`` placeholders with values from ``variables``.

    Placeholders without a matching variable are left as written.

    Args:
        message: Text possibly containing placeholders.
        variables: Placeholder values; converted with ``str()``.

    Returns:
        Interpolated text.
    """
    if not variables:
        return message

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, message)


class Translator:
    """Callable bound to one merged message tree.

    Cheap to create; holds no state beyond the tree and its locale.

    Usage:
        t = make_translator(tree, Locale.FR)
        t("common.buttons.upload")
        t("tools.merge.pages", {"count": 3})
    """

    def __init__(self, tree: MessageTree, locale: Optional[Locale] = None):
        self.tree = tree
        self.locale = locale

    def __call__(
        self, dot_path: str, variables: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Resolve and interpolate a message.

        Args:
            dot_path: Key such as "common.status.processing".
            variables: Optional placeholder values.

        Returns:
            Final display text, or ``dot_path`` if nothing resolves.
        """
        message = self.lookup(dot_path)
        if message is None:
            logger.warning(
                "translation_not_found",
                key=dot_path,
                locale=self.locale.value if self.locale else None,
            )
            return dot_path
        return interpolate(message, variables)

    def lookup(self, dot_path: str) -> Optional[str]:
        """Raw message for a key, or None when missing or blank."""
        message = resolve(self.tree, dot_path)
        return message or None

    def has(self, dot_path: str) -> bool:
        """Check whether a key resolves to non-empty text."""
        return self.lookup(dot_path) is not None

    def error(
        self, code: ErrorCode, variables: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Display text for an error code.

        Resolves the code's message key; uses the code's default message only
        when the key is missing from the tree.
        """
        message = self.lookup(message_key_for(code))
        if message is None:
            logger.warning(
                "error_message_defaulted",
                error_code=code.value,
                locale=self.locale.value if self.locale else None,
            )
            message = default_message_for(code)
        return interpolate(message, variables)


def make_translator(tree: MessageTree, locale: Optional[Locale] = None) -> Translator:
    """Bind a merged tree into a Translator.

    Args:
        tree: Already-merged tree (see ``FallbackResolver.merged_tree``).
        locale: Locale the tree was built for, used in logs.

    Returns:
        Translator callable.
    """
    return Translator(tree, locale)
