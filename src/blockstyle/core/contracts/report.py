"""
Reporting contracts: what the rule engine hands back to its host.

- :class:`Report`: one policy violation found in one block, optionally
  carrying a *fixer*, a zero-argument callable that rewrites the block in
  place. The host decides whether to call it.
- :class:`Finding`: the serializable record the host builds from a Report
  once the block's position in the source file is known.

Violations are values, never exceptions. A clean block yields no Report.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ViolationKind = Literal[
    "single_line_prohibited",
    "multiline_prohibited",
    "multiline_prohibited_but_single_line_also_prohibited",
    "multiline_prohibited_multiple_tags",
    "multiline_prohibited_tagged_description",
    "zero_line_text_present",
]

#: A deferred in-place rewrite of the block a Report was raised for.
Fixer = Callable[[], None]

_MULTILINE_PROHIBITED = "Multiline jsdoc blocks are prohibited by your configuration"

#: Fixed human-readable message per violation kind.
MESSAGES: Final[dict[ViolationKind, str]] = {
    "single_line_prohibited": "Single line blocks are not permitted by your configuration.",
    "multiline_prohibited": f"{_MULTILINE_PROHIBITED}.",
    "multiline_prohibited_but_single_line_also_prohibited": (
        f"{_MULTILINE_PROHIBITED} but fixing would result in a single line block "
        "which you have prohibited with `noSingleLineBlocks`."
    ),
    "multiline_prohibited_multiple_tags": (
        f"{_MULTILINE_PROHIBITED} but the block has multiple tags."
    ),
    "multiline_prohibited_tagged_description": (
        f"{_MULTILINE_PROHIBITED} but the block has a description with a tag."
    ),
    "zero_line_text_present": 'Should have no text on the "0th" line (after the `/**`).',
}


@dataclass(frozen=True, slots=True)
class Report:
    """
    A single policy violation for one block.

    Attributes
    ----------
    kind : ViolationKind
        Machine label of the violated policy.
    message : str
        Human-readable diagnostic.
    line : int | None
        Line index within the block to point at; ``None`` means the block's
        default location (its opening line).
    fixer : Fixer | None
        In-place rewrite bringing the block into compliance, or ``None`` when
        no automatic fix exists.
    replace_block : bool
        ``True`` when the fix restructures the whole block rather than
        editing a few slots.
    """

    kind: ViolationKind
    message: str
    line: int | None = None
    fixer: Fixer | None = None
    replace_block: bool = False

    @property
    def fixable(self) -> bool:
        return self.fixer is not None

    def apply(self) -> bool:
        """Run the fixer if there is one; return whether anything ran."""
        if self.fixer is None:
            return False
        self.fixer()
        return True


def report(
    kind: ViolationKind,
    *,
    line: int | None = None,
    fixer: Fixer | None = None,
    replace_block: bool = False,
) -> Report:
    """Build a :class:`Report` carrying the standard message for ``kind``."""
    return Report(
        kind=kind,
        message=MESSAGES[kind],
        line=line,
        fixer=fixer,
        replace_block=replace_block,
    )


class Finding(BaseModel):
    """A Report placed in its source file, ready for display or JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    line: int = Field(..., ge=1, description="1-indexed source line of the block.")
    column: int = Field(..., ge=1, description="1-indexed source column of the block.")
    kind: ViolationKind
    message: str
    fixable: bool = Field(default=False, description="Whether an automatic fix exists.")
    fixed: bool = Field(default=False, description="Whether the fix was applied.")


__all__ = ["Finding", "Fixer", "MESSAGES", "Report", "ViolationKind", "report"]
