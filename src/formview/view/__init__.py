"""View helpers rendering form elements."""

from formview.view.element_errors import FormElementErrors, flatten_messages
from formview.view.helper import AbstractHelper
from formview.view.jinja import register_helpers

__all__ = ["AbstractHelper", "FormElementErrors", "flatten_messages", "register_helpers"]
