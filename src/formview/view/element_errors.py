"""View helper rendering the validation errors of a form element.

Example:
    >>> from formview.form import Element
    >>> helper = FormElementErrors()
    >>> helper(Element("email", ["Required"]))
    Markup('<ul><li>Required</li></ul>')
"""

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from markupsafe import Markup

from formview.config.defaults import DEFAULT_RENDER_CONFIG, DEFAULT_TEXT_DOMAIN
from formview.form.element import ElementInterface, Messages
from formview.i18n.translator import Translator
from formview.lib.attributes import merge_attributes, normalize_attributes
from formview.lib.logging_config import get_logger
from formview.models.config import RenderConfig
from formview.view.helper import AbstractHelper

logger = get_logger(__name__)


def iter_messages(messages: Any) -> Iterator[Any]:
    """Yield every leaf of a nested message structure.

    Mappings and non-string sequences are walked depth-first, left to
    right; anything else is a leaf.
    """
    if isinstance(messages, Mapping):
        children = messages.values()
    elif isinstance(messages, (list, tuple)):
        children = messages
    else:
        yield messages
        return

    for child in children:
        yield from iter_messages(child)


def flatten_messages(
    messages: Messages, transform: Callable[[Any], str] | None = None
) -> list[str]:
    """Flatten nested messages into a list, applying transform to each leaf.

    Leaves are converted with str() when no transform is given.
    """
    if transform is None:
        transform = str
    return [transform(message) for message in iter_messages(messages)]


class FormElementErrors(AbstractHelper):
    """Render the error messages of an element as a markup list.

    Messages are flattened, optionally translated, then wrapped as
    ``open_format % attributes + separator.join(messages) + close_string``.
    With the defaults this yields ``<ul><li>a</li><li>b</li></ul>``.

    Setters return the helper, so configuration can be chained:

        helper.set_message_open_format('<div%s>').set_message_close_string('</div>')
    """

    def __init__(
        self,
        translator: Translator | None = None,
        text_domain: str = DEFAULT_TEXT_DOMAIN,
    ) -> None:
        super().__init__(translator=translator, text_domain=text_domain)
        self._message_open_format = str(DEFAULT_RENDER_CONFIG["open_format"])
        self._message_close_string = str(DEFAULT_RENDER_CONFIG["close_string"])
        self._message_separator_string = str(DEFAULT_RENDER_CONFIG["separator_string"])
        self._attributes: dict[str, Any] = {}
        self._translate_error_messages = True

    @classmethod
    def from_config(
        cls,
        config: RenderConfig,
        translator: Translator | None = None,
        text_domain: str = DEFAULT_TEXT_DOMAIN,
    ) -> "FormElementErrors":
        """Build a helper from a validated RenderConfig."""
        helper = cls(translator=translator, text_domain=text_domain)
        return (
            helper.set_message_open_format(config.open_format)
            .set_message_close_string(config.close_string)
            .set_message_separator_string(config.separator_string)
            .set_attributes(config.attributes)
            .set_translate_messages(config.translate_messages)
        )

    @property
    def config(self) -> RenderConfig:
        """Immutable snapshot of the current markup configuration.

        Attributes are normalized to the strings they render as, so
        from_config(helper.config) renders the same markup as helper.
        The open format is validated, so a helper configured with a format
        lacking its %s slot raises pydantic.ValidationError here.
        """
        return RenderConfig(
            open_format=self._message_open_format,
            close_string=self._message_close_string,
            separator_string=self._message_separator_string,
            attributes=normalize_attributes(self._attributes),
            translate_messages=self._translate_error_messages,
        )

    def __call__(
        self,
        element: ElementInterface | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> "FormElementErrors | str":
        """Invoke helper as functor.

        Proxies to render() if an element is passed, otherwise returns the
        helper itself.
        """
        if element is None:
            return self
        return self.render(element, attributes)

    def render(
        self,
        element: ElementInterface,
        attributes: Mapping[str, Any] | None = None,
    ) -> str:
        """Render validation errors for the provided element.

        If translation is enabled and a translator is available, each
        message is translated in the helper's text domain.

        Args:
            element: Element exposing get_messages()
            attributes: Attributes for the opening tag, overriding the
                helper's default attributes

        Returns:
            Markup string, or "" when the element has no messages
        """
        messages = element.get_messages()
        if not messages:
            logger.debug("Element has no messages")
            return ""

        flattened = self._flatten_messages(messages)
        if not flattened:
            logger.debug("Element messages flattened to nothing")
            return ""

        merged = merge_attributes(self._attributes, attributes or {})
        attributes_string = self.create_attributes_string(merged)
        if attributes_string:
            attributes_string = " " + attributes_string

        markup = self._message_open_format % attributes_string
        markup += self._message_separator_string.join(flattened)
        markup += self._message_close_string

        logger.debug(f"Rendered {len(flattened)} error message(s)")
        return Markup(markup)

    def _flatten_messages(self, messages: Messages) -> list[str]:
        translator = self.get_translator()
        if not self._translate_error_messages or translator is None:
            return flatten_messages(messages)

        text_domain = self.get_translator_text_domain()
        return flatten_messages(
            messages, lambda message: str(translator.translate(message, text_domain))
        )

    def set_attributes(self, attributes: Mapping[str, Any]) -> "FormElementErrors":
        """Set the attributes that will go on the message open format."""
        self._attributes = dict(attributes)
        return self

    def get_attributes(self) -> dict[str, Any]:
        return self._attributes

    def set_message_close_string(self, message_close_string: str) -> "FormElementErrors":
        self._message_close_string = str(message_close_string)
        return self

    def get_message_close_string(self) -> str:
        return self._message_close_string

    def set_message_open_format(self, message_open_format: str) -> "FormElementErrors":
        """Set the format used to open the message list.

        The format must hold one %s slot, which receives the attributes.
        """
        self._message_open_format = str(message_open_format)
        return self

    def get_message_open_format(self) -> str:
        return self._message_open_format

    def set_message_separator_string(
        self, message_separator_string: str
    ) -> "FormElementErrors":
        self._message_separator_string = str(message_separator_string)
        return self

    def get_message_separator_string(self) -> str:
        return self._message_separator_string

    def set_translate_messages(self, flag: bool) -> "FormElementErrors":
        """Set whether error messages are translated during render."""
        self._translate_error_messages = bool(flag)
        return self

    def get_translate_messages(self) -> bool:
        return self._translate_error_messages
