"""formview - render form element validation errors as markup.

Main features:
- FormElementErrors view helper with configurable open/separator/close markup
- Optional message translation through pluggable translators
- Escaped HTML attribute rendering
- YAML configuration with environment overrides
- Jinja2 template integration and a small CLI
"""

from formview.config.loader import ConfigLoader
from formview.form.element import Element, ElementInterface
from formview.lib.errors import ConfigError, FormViewError
from formview.models.config import RenderConfig
from formview.view.element_errors import FormElementErrors

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "ConfigLoader",
    "Element",
    "ElementInterface",
    "FormElementErrors",
    "FormViewError",
    "RenderConfig",
]
