"""Translator implementations used by view helpers.

Helpers only depend on the Translator protocol. Two implementations ship
with the package:

- CatalogTranslator: plain dictionaries, optionally loaded from YAML
- GettextTranslator: adapter over compiled gettext catalogs
"""

import gettext
from pathlib import Path
from typing import Protocol, runtime_checkable

import yaml

from formview.config.defaults import DEFAULT_TEXT_DOMAIN
from formview.lib.errors import ConfigError, FileNotFoundError
from formview.lib.logging_config import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Translator(Protocol):
    """Anything that can translate a message within a text domain."""

    def translate(
        self,
        message: str,
        text_domain: str = DEFAULT_TEXT_DOMAIN,
    ) -> str: ...


class CatalogTranslator:
    """Dictionary backed translator.

    Catalogs are keyed by text domain, then by the source message. Messages
    without a translation are returned unchanged.

    Example:
        >>> translator = CatalogTranslator({"default": {"Required": "Requis"}})
        >>> translator.translate("Required")
        'Requis'
    """

    def __init__(self, catalogs: dict[str, dict[str, str]] | None = None) -> None:
        """Initialize the translator with optional catalogs."""
        self._catalogs: dict[str, dict[str, str]] = {}
        for domain, messages in (catalogs or {}).items():
            self.add_messages(domain, messages)

    @property
    def text_domains(self) -> list[str]:
        """Text domains with at least one registered catalog."""
        return list(self._catalogs)

    def add_messages(self, text_domain: str, messages: dict[str, str]) -> None:
        """Register translations for a text domain, replacing duplicates."""
        catalog = self._catalogs.setdefault(text_domain, {})
        catalog.update({str(k): str(v) for k, v in messages.items()})

    def translate(
        self,
        message: str,
        text_domain: str = DEFAULT_TEXT_DOMAIN,
    ) -> str:
        """Translate message, falling back to the original text."""
        return self._catalogs.get(text_domain, {}).get(message, message)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "CatalogTranslator":
        """Load catalogs from a YAML file.

        The file maps text domains to ``message: translation`` mappings:

            default:
              Value is required: Valeur requise

        Args:
            path: Path to the YAML catalog

        Returns:
            CatalogTranslator holding the loaded catalogs

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file is not a valid catalog
        """
        catalog_path = Path(path)
        if not catalog_path.exists():
            raise FileNotFoundError(
                str(catalog_path),
                "Translation catalog not found. Check the --catalog path.",
            )

        try:
            raw_text = catalog_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError("catalog", f"Cannot read {catalog_path}: {e}") from e

        try:
            content = yaml.safe_load(raw_text)
        except yaml.YAMLError as e:
            raise ConfigError("catalog", f"Invalid YAML in {catalog_path}: {e}") from e

        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise ConfigError("catalog", "Catalog must map text domains to messages")

        for domain, messages in content.items():
            if not isinstance(messages, dict):
                raise ConfigError(
                    f"catalog.{domain}",
                    "Text domain must map messages to translations",
                )

        logger.debug(f"Loaded catalog {catalog_path} with domains {list(content)}")
        return cls(content)


class GettextTranslator:
    """Adapter exposing gettext catalogs through the Translator protocol."""

    def __init__(self) -> None:
        self._translations: dict[str, gettext.NullTranslations] = {}

    def add_translation(
        self, text_domain: str, translations: gettext.NullTranslations
    ) -> None:
        """Attach compiled translations to a text domain."""
        self._translations[text_domain] = translations

    @classmethod
    def from_locale_dir(
        cls,
        localedir: str | Path,
        languages: list[str],
        text_domains: list[str],
    ) -> "GettextTranslator":
        """Load ``<localedir>/<lang>/LC_MESSAGES/<domain>.mo`` catalogs.

        Missing catalogs fall back to untranslated output.
        """
        translator = cls()
        for domain in text_domains:
            translator.add_translation(
                domain,
                gettext.translation(
                    domain, localedir=str(localedir), languages=languages, fallback=True
                ),
            )
        return translator

    def translate(
        self,
        message: str,
        text_domain: str = DEFAULT_TEXT_DOMAIN,
    ) -> str:
        """Translate message using the catalog bound to text_domain."""
        translations = self._translations.get(text_domain)
        if translations is None:
            return message
        return translations.gettext(message)
