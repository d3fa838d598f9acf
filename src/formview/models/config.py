"""Configuration models for formview helpers.

RenderConfig is the immutable counterpart of the setters exposed by
FormElementErrors. It is what configuration files are validated into and
what FormElementErrors.config hands back as a snapshot.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderConfig(BaseModel):
    """Markup configuration for rendering element error messages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    open_format: str = Field(
        default="<ul%s><li>",
        description="Opening markup with a single %s slot for attributes",
    )
    close_string: str = Field(
        default="</li></ul>",
        description="Closing markup appended after the last message",
    )
    separator_string: str = Field(
        default="</li><li>",
        description="Markup placed between consecutive messages",
    )
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Default attributes for the opening tag",
    )
    translate_messages: bool = Field(
        default=True,
        description="Translate messages when a translator is configured",
    )

    @field_validator("open_format")
    @classmethod
    def validate_open_format(cls, v: str) -> str:
        """Require exactly one %s substitution slot and no stray % signs."""
        slots = v.replace("%%", "").count("%s")
        if slots != 1:
            raise ValueError(
                f"open_format must contain exactly one %s slot (found {slots})"
            )
        try:
            v % ""
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"open_format is not a valid format, escape literal % as %%: {e}"
            ) from e
        return v
