"""HTML attribute serialization for view helpers.

Turns a mapping of attribute names to values into the fragment that goes
inside an opening tag, e.g. ``class="errors" id="name-errors"``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from markupsafe import escape

from formview.lib.logging_config import get_logger

if TYPE_CHECKING:
    from formview.i18n.translator import Translator

logger = get_logger(__name__)

ATTRIBUTE_NAME_RE = re.compile(r"^[a-z_:][a-z0-9_:.\-]*$")

# Attributes holding human-readable text
TRANSLATABLE_ATTRIBUTES = frozenset({"placeholder", "title", "aria-label"})


def is_valid_attribute_name(name: str) -> bool:
    """Check whether name can be emitted as an HTML attribute."""
    return bool(ATTRIBUTE_NAME_RE.match(name))


def attribute_value(value: Any) -> str:
    """Render a prepared attribute value as text; sequences are space-joined."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return " ".join(str(item) for item in value)
    return str(value)


def prepare_attributes(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize attribute names and drop the ones that cannot be rendered.

    Names are lowercased. Invalid names and attributes whose value is None
    or False are removed; True becomes the attribute name itself.

    Args:
        attributes: Raw attribute mapping

    Returns:
        New dictionary safe to serialize, in the original order
    """
    prepared: dict[str, Any] = {}
    for raw_key, value in attributes.items():
        key = str(raw_key).lower()
        if not is_valid_attribute_name(key):
            logger.debug(f"Dropping invalid attribute name: {raw_key!r}")
            continue
        if value is None or value is False:
            continue
        if value is True:
            value = key
        prepared[key] = value
    return prepared


def normalize_attributes(attributes: Mapping[str, Any]) -> dict[str, str]:
    """Reduce attributes to the plain strings create_attributes_string emits.

    Serializing the result gives the same fragment as serializing the input.
    """
    return {
        key: attribute_value(value)
        for key, value in prepare_attributes(attributes).items()
    }


def create_attributes_string(
    attributes: Mapping[str, Any],
    translator: Translator | None = None,
    text_domain: str = "default",
) -> str:
    """Serialize attributes into an escaped HTML attribute fragment.

    Args:
        attributes: Attribute name to value mapping
        translator: Optional translator for human-readable attributes
        text_domain: Text domain passed to the translator

    Returns:
        Space separated ``key="value"`` pairs, or an empty string
    """
    parts: list[str] = []
    for key, value in prepare_attributes(attributes).items():
        text = attribute_value(value)
        if translator is not None and key in TRANSLATABLE_ATTRIBUTES:
            text = translator.translate(text, text_domain)
        parts.append(f'{key}="{escape(text)}"')
    return " ".join(parts)


def merge_attributes(
    defaults: Mapping[str, Any], overrides: Mapping[str, Any]
) -> dict[str, Any]:
    """Merge two attribute sets, with overrides winning on shared keys."""
    merged = dict(defaults)
    merged.update(overrides)
    return merged
