"""Form element abstractions consumed by view helpers.

Helpers never build or validate elements; they only read the accumulated
error messages through ElementInterface.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

# Leaves are message strings; containers nest to any depth.
Messages = Mapping[str, Any] | Sequence[Any]


@runtime_checkable
class ElementInterface(Protocol):
    """A form field exposing its validation error messages."""

    def get_name(self) -> str | None: ...

    def get_messages(self) -> Messages: ...


@runtime_checkable
class InputProviderInterface(Protocol):
    """An element that describes how its input should be filtered."""

    def get_input_specification(self) -> dict[str, Any]: ...


class Element:
    """Minimal form element holding a name and error messages."""

    def __init__(self, name: str | None = None, messages: Messages | None = None) -> None:
        self._name = name
        self._messages: Messages = messages if messages is not None else {}

    def set_name(self, name: str) -> "Element":
        self._name = name
        return self

    def get_name(self) -> str | None:
        return self._name

    def set_messages(self, messages: Messages) -> "Element":
        """Replace the element's error messages."""
        self._messages = messages
        return self

    def get_messages(self) -> Messages:
        return self._messages

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
