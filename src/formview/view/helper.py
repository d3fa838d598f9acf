"""Base class for view helpers.

Carries the pieces every helper shares: an optional translator with its
text domain, and serialization of HTML attributes.
"""

from collections.abc import Mapping
from typing import Any

from formview.config.defaults import DEFAULT_TEXT_DOMAIN
from formview.i18n.translator import Translator
from formview.lib.attributes import create_attributes_string


class AbstractHelper:
    """Translator-aware base for view helpers."""

    def __init__(
        self,
        translator: Translator | None = None,
        text_domain: str = DEFAULT_TEXT_DOMAIN,
    ) -> None:
        self._translator = translator
        self._translator_text_domain = text_domain
        self._translator_enabled = True

    def set_translator(
        self, translator: Translator | None, text_domain: str | None = None
    ):
        """Attach (or detach with None) a translator.

        Returns:
            self, for chaining
        """
        self._translator = translator
        if text_domain is not None:
            self._translator_text_domain = text_domain
        return self

    def get_translator(self) -> Translator | None:
        """Return the translator, or None when unset or disabled."""
        if not self._translator_enabled:
            return None
        return self._translator

    def has_translator(self) -> bool:
        return self.get_translator() is not None

    def set_translator_enabled(self, enabled: bool = True):
        self._translator_enabled = bool(enabled)
        return self

    def is_translator_enabled(self) -> bool:
        return self._translator_enabled

    def set_translator_text_domain(self, text_domain: str = DEFAULT_TEXT_DOMAIN):
        self._translator_text_domain = text_domain
        return self

    def get_translator_text_domain(self) -> str:
        return self._translator_text_domain

    def create_attributes_string(self, attributes: Mapping[str, Any]) -> str:
        """Serialize attributes for an opening tag.

        Human-readable attributes (title, placeholder) are translated with
        the helper's translator when one is available.
        """
        return create_attributes_string(
            attributes,
            translator=self.get_translator(),
            text_domain=self._translator_text_domain,
        )
