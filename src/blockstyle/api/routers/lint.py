"""
API routes for linting doc blocks.

Endpoints
---------
- ``POST /lint``: run the block-style rule over a source text and return
  the findings, plus the fixed text when ``fix`` is set.

The rule engine is synchronous and stateless, so the request is served
inline; there is no job queue.
"""

from __future__ import annotations

from fastapi import APIRouter

from blockstyle.api.schemas import LintRequest, LintResponse
from blockstyle.core.contracts.options import BlockStyleOptions, load_options
from blockstyle.core.settings import load_settings
from blockstyle.pipelines.lint_source import run_pipeline

router = APIRouter(tags=["Lint"])


def _default_options() -> BlockStyleOptions:
    """Return the options file named by ``BLOCKSTYLE_CONFIG``, else defaults."""
    config_path = load_settings().config_path
    if config_path is None:
        return BlockStyleOptions()
    return load_options(config_path)


@router.post(
    "/lint",
    response_model=LintResponse,
    summary="Check doc blocks in a source text",
)
def lint_source(request: LintRequest) -> LintResponse:
    """
    Lint every ``/** ... */`` block in ``request.source``.

    Returns
    -------
    LintResponse
        One finding per offending block; ``fixedSource`` is ``null`` unless
        ``fix`` was requested.
    """
    options = request.options if request.options is not None else _default_options()
    result = run_pipeline(request.source, options, fix=request.fix)
    return LintResponse(
        findings=result["findings"],
        fixed_source=result["fixed_source"],
        fixes_applied=result["fixes_applied"],
        blocks_checked=result["blocks_checked"],
    )


__all__ = ["router"]
