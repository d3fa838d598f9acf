"""Pytest configuration and shared fixtures for formview tests."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from formview.form.element import Element
from formview.i18n.translator import CatalogTranslator
from formview.view.element_errors import FormElementErrors


class StringToArrayFilter:
    """Test asset filter splitting a comma separated string into a list."""

    def __init__(self, separator: str = ",") -> None:
        self.separator = separator

    def filter(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return [part.strip() for part in value.split(self.separator) if part.strip()]


class ElementWithStringToArrayFilter(Element):
    """Test asset element declaring a required input filtered to a list."""

    def get_input_specification(self) -> dict[str, Any]:
        return {
            "name": self.get_name(),
            "required": True,
            "filters": [
                {"name": StringToArrayFilter},
            ],
        }


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def helper() -> FormElementErrors:
    """FormElementErrors with default configuration and no translator."""
    return FormElementErrors()


@pytest.fixture
def translator() -> CatalogTranslator:
    """Catalog translator with a French default domain and a custom domain."""
    return CatalogTranslator(
        {
            "default": {
                "Value is required": "Valeur requise",
                "Bad value": "Mauvaise valeur",
                "Error list": "Liste des erreurs",
            },
            "forms": {"Value is required": "Champ obligatoire"},
        }
    )


@pytest.fixture
def element_with_string_to_array_filter() -> ElementWithStringToArrayFilter:
    """Element fixture declaring a StringToArrayFilter input specification."""
    return ElementWithStringToArrayFilter("tags")
