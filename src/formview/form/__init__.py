"""Form element interfaces used by formview helpers."""

from formview.form.element import (
    Element,
    ElementInterface,
    InputProviderInterface,
    Messages,
)

__all__ = ["Element", "ElementInterface", "InputProviderInterface", "Messages"]
