"""Rule options for the single-line / multi-line block policy.

The options object mirrors the JSON surface users write in their config
files, camelCase keys included::

    {
      "allowMultipleTags": true,
      "noZeroLineText": true,
      "noSingleLineBlocks": false,
      "singleLineTags": ["lends", "type"],
      "noMultilineBlocks": false,
      "minimumLengthForMultiline": null,
      "multilineTags": ["*"]
    }

Notes
-----
- ``minimumLengthForMultiline`` defaults to infinity, which never exempts a
  block. JSON cannot spell infinity, so ``null`` maps to it on input and it
  serializes back as ``null``.
- ``multilineTags`` accepts the bare string ``"*"`` as a shorthand for
  ``["*"]``.
- Unknown keys are rejected.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

#: Matches every tag name in ``singleLineTags`` / ``multilineTags``.
WILDCARD: Final[str] = "*"

#: Key under which the options may be nested in a shared config file.
CONFIG_SECTION: Final[str] = "multiline-blocks"


class BlockStyleOptions(BaseModel):
    """Immutable, validated rule configuration for one invocation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    allow_multiple_tags: bool = Field(
        default=True,
        description="Tolerate multi-line blocks that could not be collapsed because of their tags.",
    )
    no_zero_line_text: bool = Field(
        default=True,
        description="Forbid text on the line holding the opening marker.",
    )
    no_single_line_blocks: bool = Field(
        default=False,
        description="Forbid one-line blocks unless their tag is listed in singleLineTags.",
    )
    single_line_tags: tuple[str, ...] = Field(
        default=("lends", "type"),
        description="Tag names allowed on one-line blocks ('*' allows any tag).",
    )
    no_multiline_blocks: bool = Field(
        default=False,
        description="Forbid multi-line blocks unless exempted.",
    )
    minimum_length_for_multiline: int | float = Field(
        default=math.inf,
        description="Descriptions at least this long may stay multi-line.",
    )
    multiline_tags: tuple[str, ...] = Field(
        default=(WILDCARD,),
        description="Tag names that keep a block multi-line ('*' for any tag).",
    )

    @field_validator("multiline_tags", mode="before")
    @classmethod
    def _expand_wildcard(cls, v: Any) -> Any:
        """Accept the bare ``"*"`` shorthand."""
        if v == WILDCARD:
            return (WILDCARD,)
        return v

    @field_validator("minimum_length_for_multiline", mode="before")
    @classmethod
    def _check_minimum_length(cls, v: Any) -> Any:
        """Allow non-negative integers, ``null`` or positive infinity."""
        if v is None:
            return math.inf
        if isinstance(v, bool):
            raise ValueError("minimumLengthForMultiline must be an integer")
        if isinstance(v, int):
            if v < 0:
                raise ValueError("minimumLengthForMultiline must not be negative")
            return v
        if isinstance(v, float) and v == math.inf:
            return v
        if isinstance(v, float) and v.is_integer() and v >= 0:
            return int(v)
        raise ValueError("minimumLengthForMultiline must be a non-negative integer")

    def allows_single_line_tag(self, tag_name: str) -> bool:
        """Return True if ``tag_name`` is excepted from the single-line ban."""
        return tag_name in self.single_line_tags or WILDCARD in self.single_line_tags


def load_options(path: Path) -> BlockStyleOptions:
    """Read rule options from a JSON file.

    The file holds either the options object itself or a wrapper object with
    the options under the ``"multiline-blocks"`` key.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the file is not valid JSON or does not hold a JSON object.
    pydantic.ValidationError
        If an option has the wrong type or an unknown key is present.
    """
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}: invalid JSON ({exc.msg})") from exc

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of options")
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ValueError(f"{path}: '{CONFIG_SECTION}' must be a JSON object")
    return BlockStyleOptions.model_validate(section)


__all__ = ["BlockStyleOptions", "CONFIG_SECTION", "WILDCARD", "load_options"]
