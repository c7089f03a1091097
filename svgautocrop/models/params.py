"""Autocrop pass parameters.

Accepts both snake_case names and the camelCase keys used by svgo-style
plugin configuration (``includeWidthAndHeightAttributes``, ``setColorIssue``).
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ColorIssuePolicy = Literal["warn", "fail", "ignore", "rollback"]


class PaddingEdges(BaseModel):
    """Per-edge padding in user units."""

    model_config = ConfigDict(extra="forbid")

    top: int
    bottom: int
    left: int
    right: int


# (new_viewport, viewport, root, params, info) -> None, mutating new_viewport
PaddingCallback = Callable[..., Any]


class AutocropParams(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    autocrop: bool = Field(default=True, description="Compute visible bounds on the first pass")
    include_width_and_height_attributes: bool | None = Field(
        default=None,
        description="True = always write width/height, False = always omit, None = keep original presence",
    )
    padding: Union[int, PaddingEdges, PaddingCallback, None] = Field(
        default=None,
        description="Uniform padding, per-edge padding or a callback adjusting the new viewport",
    )

    remove_class: bool = False
    remove_style: bool = False
    remove_deprecated: bool = False

    set_color: str | None = Field(default=None, description="Target paint, e.g. currentColor")
    set_color_issue: ColorIssuePolicy = "warn"

    disable_translate: bool = False
    disable_translate_warning: bool = False

    @field_validator("padding", mode="before")
    @classmethod
    def reject_bool_padding(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("padding must be an integer, a {top, bottom, left, right} mapping or a callable")
        return value

