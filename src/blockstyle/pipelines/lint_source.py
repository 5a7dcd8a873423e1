"""
Source linting pipeline: from a source text to findings and fixed text.

This module is the host around the rule engine. For one source text it:

1. Finds every ``/** ... */`` doc block, in order (``/***`` banners and the
   empty ``/**/`` are skipped).
2. Tokenizes each block with :func:`parse_comment`; blocks the tokenizer
   rejects are skipped and logged.
3. Works out the block's indentation and runs :func:`check_block` once per
   block with the same options.
4. Records a :class:`Finding` per report and, when fixing, runs the report's
   fixer and splices the re-stringified block back into the text.

Edits are applied right to left so earlier offsets stay valid. Reports
without a fixer are recorded but leave the text untouched.
"""

from __future__ import annotations

import re
from typing import TypedDict

from blockstyle.core.contracts.options import BlockStyleOptions
from blockstyle.core.contracts.report import Finding
from blockstyle.core.settings import get_logger
from blockstyle.parsing.tokenizer import parse_comment
from blockstyle.rules.multiline_blocks import check_block

logger = get_logger(__name__)

_DOC_BLOCK = re.compile(r"/\*\*(?![*/]).*?\*/", flags=re.DOTALL)


class LintResult(TypedDict):
    """Structured payload returned by :func:`run_pipeline`.

    Attributes
    ----------
    findings:
        One entry per reported block, in source order.
    fixed_source:
        The rewritten text when fixing was requested, else ``None``.
    fixes_applied:
        Number of blocks rewritten.
    blocks_checked:
        Number of doc blocks the engine evaluated.
    """

    findings: list[Finding]
    fixed_source: str | None
    fixes_applied: int
    blocks_checked: int


def block_indent(source: str, offset: int) -> str:
    """Return the indentation for a block opening at ``offset``.

    The leading whitespace character of the block's source line is repeated
    up to the block's column; a line that is not indented yields spaces.
    """
    line_start = source.rfind("\n", 0, offset) + 1
    column = offset - line_start
    if column == 0:
        return ""
    first = source[line_start]
    fill = first if first in " \t" else " "
    return fill * column


def _position(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-indexed (line, column) of ``offset``."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def run_pipeline(
    source: str,
    options: BlockStyleOptions | None = None,
    *,
    fix: bool = False,
) -> LintResult:
    """Lint every doc block in ``source``.

    Parameters
    ----------
    source : str
        Program text containing doc blocks.
    options : BlockStyleOptions | None
        Rule configuration shared by every block; defaults when omitted.
    fix : bool, default False
        If True, apply each available fixer and return the rewritten text.

    Returns
    -------
    LintResult
        Findings, the fixed text (or ``None``) and run counters.
    """
    opts = options if options is not None else BlockStyleOptions()
    findings: list[Finding] = []
    edits: list[tuple[int, int, str]] = []
    checked = 0

    for match in _DOC_BLOCK.finditer(source):
        parsed = parse_comment(match.group(0))
        if parsed.is_err():
            logger.debug("skipping block at offset %d: %s", match.start(), parsed.unwrap_err())
            continue

        block = parsed.unwrap()
        checked += 1
        found = check_block(block, opts, indent=block_indent(source, match.start()))
        line, column = _position(source, match.start())
        logger.debug(
            "block at %d:%d (%d line(s)): %s",
            line,
            column,
            block.source_length,
            found.kind if found is not None else "ok",
        )
        if found is None:
            continue

        fixed = fix and found.apply()
        if fixed:
            edits.append((match.start(), match.end(), block.stringify()))

        findings.append(
            Finding(
                line=line,
                column=column,
                kind=found.kind,
                message=found.message,
                fixable=found.fixable,
                fixed=fixed,
            )
        )

    fixed_source: str | None = None
    if fix:
        fixed_source = source
        for start, end, replacement in reversed(edits):
            fixed_source = fixed_source[:start] + replacement + fixed_source[end:]

    logger.info(
        "checked %d block(s): %d finding(s), %d fixed",
        checked,
        len(findings),
        len(edits),
    )
    return {
        "findings": findings,
        "fixed_source": fixed_source,
        "fixes_applied": len(edits),
        "blocks_checked": checked,
    }


__all__ = ["LintResult", "block_indent", "run_pipeline"]
