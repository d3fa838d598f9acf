"""Translation support for formview view helpers."""

from formview.i18n.translator import (
    DEFAULT_TEXT_DOMAIN,
    CatalogTranslator,
    GettextTranslator,
    Translator,
)

__all__ = [
    "DEFAULT_TEXT_DOMAIN",
    "CatalogTranslator",
    "GettextTranslator",
    "Translator",
]
