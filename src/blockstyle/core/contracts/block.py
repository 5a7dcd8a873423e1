"""
Block Contract

A Block is one structured documentation comment, held as an ordered list of
:class:`~blockstyle.core.contracts.tokens.Line` records. The tokenizer
builds it, the rule engine reads it and (when fixing) mutates it in place,
and the host stringifies it back into source text.

Derived views
-------------
- ``source_length``: number of lines.
- ``tags``: one :class:`TagSpec` per tag section. A section starts at a line
  whose ``tag`` slot is set and runs over the following untagged lines.
- ``description``: the block-level description, i.e. the text of every line
  before the first tag, compacted (stripped fragments joined by one space).

The views are recomputed from ``lines`` on every access, so they always
reflect the latest in-place rewrite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pydantic import BaseModel, Field

from .tokens import Line, seed_tokens


def compact_join(fragments: Iterable[str]) -> str:
    """Strip each fragment, drop empty ones and join the rest with one space."""
    return " ".join(part for part in (f.strip() for f in fragments) if part)


@dataclass(frozen=True, slots=True)
class TagSpec:
    """
    Read-only view over the tag section that starts at ``lines[line]``.

    Attributes
    ----------
    tag : str
        Tag name without the ``@`` marker (e.g. ``"param"``).
    type : str
        Type annotation with the surrounding braces removed.
    name : str
        Identifier attached to the tag, if any.
    description : str
        Compacted description across the whole section.
    line : int
        Index of the line carrying the tag token.
    """

    tag: str
    type: str
    name: str
    description: str
    line: int


class Block(BaseModel):
    """An ordered sequence of token lines forming one doc comment."""

    lines: list[Line] = Field(..., min_length=1, description="Lines in source order.")

    @property
    def source_length(self) -> int:
        return len(self.lines)

    def _sections(self) -> list[list[int]]:
        sections: list[list[int]] = []
        for idx, line in enumerate(self.lines):
            if line.tag:
                sections.append([idx])
            elif sections:
                sections[-1].append(idx)
        return sections

    @property
    def tags(self) -> list[TagSpec]:
        specs: list[TagSpec] = []
        for section in self._sections():
            head = self.lines[section[0]]
            raw_type = head.type
            if raw_type.startswith("{") and raw_type.endswith("}"):
                raw_type = raw_type[1:-1]
            specs.append(
                TagSpec(
                    tag=head.tag_name,
                    type=raw_type,
                    name=head.name,
                    description=compact_join(self.lines[i].description for i in section),
                    line=section[0],
                )
            )
        return specs

    @property
    def description(self) -> str:
        fragments: list[str] = []
        for line in self.lines:
            if line.tag:
                break
            fragments.append(line.description)
        return compact_join(fragments)

    # ----------------------------------------------------------------------
    # Helper operations used by the rule engine
    # ----------------------------------------------------------------------

    def has_a_tag(self, names: Iterable[str]) -> bool:
        """Return True if any tag of the block is named in ``names``."""
        wanted = set(names)
        return any(spec.tag in wanted for spec in self.tags)

    def filter_tags(self, predicate: Callable[[str], bool]) -> list[TagSpec]:
        """Return the tags whose name (without ``@``) satisfies ``predicate``."""
        return [spec for spec in self.tags if predicate(spec.tag)]

    def add_line(self, index: int, **tokens: str) -> Line:
        """Insert a seeded line at ``index`` and return it.

        Raises
        ------
        IndexError
            If ``index`` lies outside ``0..source_length``.
        """
        if not 0 <= index <= len(self.lines):
            raise IndexError(f"Cannot insert line at {index} in a {len(self.lines)}-line block")
        line = seed_tokens(**tokens)
        self.lines.insert(index, line)
        return line

    def stringify(self) -> str:
        """Return the block text, one rebuilt line per ``\\n``-separated row."""
        return "\n".join(line.text for line in self.lines)


__all__ = ["Block", "TagSpec", "compact_join"]
