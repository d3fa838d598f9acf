"""Click command for rendering error messages from a file.

This module implements the 'formview render' command which reads a nested
messages document (YAML or JSON), renders it with FormElementErrors and
prints the markup.
"""

import sys
from pathlib import Path

import click
import yaml

from formview.config.loader import ConfigLoader
from formview.form.element import Element
from formview.i18n.translator import CatalogTranslator
from formview.lib.errors import ConfigError, FormViewError
from formview.lib.logging_config import get_logger, setup_logging
from formview.view.element_errors import FormElementErrors

logger = get_logger(__name__)

EXIT_CONFIG_ERROR = 2


def _parse_attribute(value: str) -> tuple[str, str]:
    key, sep, attr_value = value.partition("=")
    if not sep or not key.strip():
        raise click.BadParameter(f"expected key=value, got {value!r}")
    return key.strip(), attr_value


def _load_messages(path: Path) -> object:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError("messages", f"Cannot read {path}: {e}") from e

    try:
        return yaml.safe_load(raw_text)
    except yaml.YAMLError as e:
        raise ConfigError("messages", f"Invalid YAML/JSON in {path}: {e}") from e


@click.command(name="render")
@click.argument("messages_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_file",
    default=None,
    type=click.Path(),
    help="Path to a YAML render configuration file",
)
@click.option(
    "--attr",
    "attrs",
    multiple=True,
    help="Attribute for the opening tag as key=value (repeatable)",
)
@click.option(
    "--catalog",
    default=None,
    type=click.Path(),
    help="YAML translation catalog mapping text domains to messages",
)
@click.option(
    "--text-domain",
    default="default",
    help="Text domain used for translation (default: default)",
)
@click.option(
    "--no-translate",
    is_flag=True,
    help="Render messages untranslated even when a catalog is given",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors")
def render(
    messages_file: str,
    config_file: str | None,
    attrs: tuple[str, ...],
    catalog: str | None,
    text_domain: str,
    no_translate: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Render the error messages in MESSAGES_FILE as markup.

    MESSAGES_FILE holds a (possibly nested) mapping or list of messages.

    Example:

        formview render errors.yaml

        formview render errors.json --attr class=errors --catalog fr.yaml
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        attributes = dict(_parse_attribute(attr) for attr in attrs)
    except click.BadParameter as e:
        raise click.UsageError(str(e)) from e

    try:
        config = ConfigLoader().load_render_config(config_file)
        translator = CatalogTranslator.from_yaml(catalog) if catalog else None

        helper = FormElementErrors.from_config(
            config, translator=translator, text_domain=text_domain
        )
        if no_translate:
            helper.set_translate_messages(False)

        messages = _load_messages(Path(messages_file))
        element = Element(Path(messages_file).stem, messages or {})
        markup = helper.render(element, attributes)
    except FormViewError as e:
        logger.error(f"Render failed: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    if markup:
        click.echo(markup)
