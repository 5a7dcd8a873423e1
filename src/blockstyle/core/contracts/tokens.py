"""Token-line contract: one physical line of a doc block, split into slots.

Every line of a block shares the same fixed set of string slots, each of
which may be empty::

    start delimiter postDelimiter tag postTag type postType name postName description end
      |      |          |          |      |     |      |      |      |         |        |
    "  "   "*"         " "     "@param"  " " "{int}"  " "   "count"  " "   "how many"  ""

Concatenating the slots in :data:`TOKEN_ORDER` reproduces the line text
exactly. Rewrites keep that property for every line they do not touch.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

#: Slot names in the order they appear on a line.
TOKEN_ORDER: Final[tuple[str, ...]] = (
    "start",
    "delimiter",
    "post_delimiter",
    "tag",
    "post_tag",
    "type",
    "post_type",
    "name",
    "post_name",
    "description",
    "end",
)

#: Marker opening a doc block.
OPEN_MARKER: Final[str] = "/**"
#: Continuation marker at the head of inner lines.
LINE_MARKER: Final[str] = "*"
#: Marker closing a doc block.
CLOSE_MARKER: Final[str] = "*/"


class Line(BaseModel):
    """A single block line as a flat record of token slots.

    Fields serialize under camelCase aliases (``postDelimiter`` ...) and
    accept either spelling on input. Instances are mutable: fixers rewrite
    slots in place.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start: str = ""
    delimiter: str = ""
    post_delimiter: str = ""
    tag: str = ""
    post_tag: str = ""
    type: str = ""
    post_type: str = ""
    name: str = ""
    post_name: str = ""
    description: str = ""
    end: str = ""

    @property
    def text(self) -> str:
        """Return the line text rebuilt from its slots."""
        return "".join(getattr(self, slot) for slot in TOKEN_ORDER)

    @property
    def tag_name(self) -> str:
        """Return the tag without its leading ``@`` marker ("" when untagged)."""
        return self.tag[1:] if self.tag.startswith("@") else self.tag

    def tokens(self) -> dict[str, str]:
        """Return a plain ``slot -> value`` mapping (snake_case keys)."""
        return {slot: getattr(self, slot) for slot in TOKEN_ORDER}

    def clear(self, *, keep: tuple[str, ...] = ()) -> None:
        """Reset every slot to ``""`` except those named in ``keep``."""
        for slot in TOKEN_ORDER:
            if slot not in keep:
                setattr(self, slot, "")


def seed_tokens(**overrides: str) -> Line:
    """Return a fresh :class:`Line` with every slot empty unless overridden.

    Raises
    ------
    ValueError
        If an override names something that is not a token slot.
    """
    unknown = set(overrides) - set(TOKEN_ORDER)
    if unknown:
        raise ValueError(f"Unknown token slot(s): {', '.join(sorted(unknown))}")
    return Line(**overrides)


__all__ = [
    "CLOSE_MARKER",
    "LINE_MARKER",
    "Line",
    "OPEN_MARKER",
    "TOKEN_ORDER",
    "seed_tokens",
]
