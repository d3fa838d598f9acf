"""Default configuration for formview helpers."""

# FormElementErrors defaults
DEFAULT_RENDER_CONFIG: dict[str, str | bool | dict[str, str]] = {
    "open_format": "<ul%s><li>",
    "close_string": "</li></ul>",
    "separator_string": "</li><li>",
    "attributes": {},
    "translate_messages": True,
}

# Section name used in YAML configuration files
RENDER_CONFIG_SECTION = "form_element_errors"

DEFAULT_TEXT_DOMAIN = "default"
