"""
Request/response models for the blockstyle HTTP API.

Payloads use camelCase keys on the wire, matching the options surface
(``noSingleLineBlocks`` ...). Python code uses the snake_case names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blockstyle.core.contracts.options import BlockStyleOptions
from blockstyle.core.contracts.report import Finding


class LintRequest(BaseModel):
    """Body of ``POST /lint``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    source: str = Field(..., description="Program text containing doc blocks.")
    options: BlockStyleOptions | None = Field(
        default=None,
        description="Rule options; server defaults apply when omitted.",
    )
    fix: bool = Field(default=False, description="Return the fixed source text.")


class LintResponse(BaseModel):
    """Body returned by ``POST /lint``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    findings: list[Finding] = Field(default_factory=list)
    fixed_source: str | None = Field(
        default=None, description="Rewritten text, present only when fixing."
    )
    fixes_applied: int = Field(default=0, ge=0)
    blocks_checked: int = Field(default=0, ge=0)


__all__ = ["LintRequest", "LintResponse"]
