"""Jinja2 integration for formview helpers.

Templates call the helper exactly like code does:

    {{ form_element_errors(element, {"class": "errors"}) }}

The helper returns Markup, so autoescaping environments leave the
generated tags intact.
"""

from jinja2 import Environment

from formview.lib.logging_config import get_logger
from formview.view.element_errors import FormElementErrors

logger = get_logger(__name__)

HELPER_GLOBAL_NAME = "form_element_errors"


def register_helpers(
    env: Environment, helper: FormElementErrors | None = None
) -> FormElementErrors:
    """Expose the error helper as a template global.

    Args:
        env: Jinja2 environment to register into
        helper: Preconfigured helper; a default one is created if omitted

    Returns:
        The registered helper
    """
    if helper is None:
        helper = FormElementErrors()
    env.globals[HELPER_GLOBAL_NAME] = helper
    logger.debug(f"Registered template global '{HELPER_GLOBAL_NAME}'")
    return helper
