"""
Single-line / multi-line policy for doc comment blocks.

The rule inspects one tokenized :class:`Block` and returns at most one
:class:`Report`. Evaluators run in a fixed precedence:

1. **Single line** (block has exactly one line): is a one-line block
   allowed? The fix expands it to open / content / close lines.
2. **Multi-line prohibition** (``noMultilineBlocks``): must the block be
   collapsed onto one line? The fix folds every line into one.
3. **Zero-line text**: is there text right after the opening marker? The
   fix moves it down to a line of its own.

Steps 1 and 2 end the evaluation whenever they apply, whether or not they
report anything. Fixers mutate the block in place and are only run by the
host.
"""

from __future__ import annotations

from blockstyle.core.contracts.block import Block
from blockstyle.core.contracts.options import WILDCARD, BlockStyleOptions
from blockstyle.core.contracts.report import Report, report
from blockstyle.core.contracts.tokens import (
    CLOSE_MARKER,
    LINE_MARKER,
    OPEN_MARKER,
    seed_tokens,
)
from blockstyle.core.settings import get_logger

logger = get_logger(__name__)

_OPEN_LINE_SLOTS = ("start", "delimiter")


def is_invalid_single_line(tag_name: str, options: BlockStyleOptions) -> bool:
    """Return True if a one-line block tagged ``tag_name`` breaks the policy.

    Untagged one-line blocks (``tag_name == ""``) are invalid whenever
    ``noSingleLineBlocks`` is on.
    """
    return options.no_single_line_blocks and (
        not tag_name or not options.allows_single_line_tag(tag_name)
    )


# --------------------------------------------------------------------------- #
# Single-line evaluator
# --------------------------------------------------------------------------- #


def expand_single_line(block: Block, *, indent: str = "") -> None:
    """Rewrite a one-line block into open, content and close lines.

    The content line takes over the tag/type/name/description tokens. Its
    description loses the whitespace that sat in front of the closing
    marker. With no description, one dangling separator is dropped, checked
    in the order ``postName``, ``postType``, ``postTag``.
    """
    if block.source_length != 1:
        raise ValueError("expand_single_line() needs a one-line block")

    first = block.lines[0]
    post_name, post_type, post_tag = first.post_name, first.post_type, first.post_tag
    if not first.description:
        if post_name:
            post_name = ""
        elif post_type:
            post_type = ""
        elif post_tag:
            post_tag = ""

    captured = first.model_copy()
    first.clear(keep=_OPEN_LINE_SLOTS)

    margin = indent + " "
    block.add_line(
        1,
        start=margin,
        delimiter=LINE_MARKER,
        post_delimiter=captured.post_delimiter,
        tag=captured.tag,
        post_tag=post_tag,
        type=captured.type,
        post_type=post_type,
        name=captured.name,
        post_name=post_name,
        description=captured.description.rstrip(),
    )
    block.add_line(2, start=margin, end=CLOSE_MARKER)


def check_single_line(
    block: Block, options: BlockStyleOptions, *, indent: str = ""
) -> Report | None:
    """Evaluate a one-line block against ``noSingleLineBlocks``."""
    if block.source_length != 1:
        raise ValueError("check_single_line() needs a one-line block")

    if not is_invalid_single_line(block.lines[0].tag_name, options):
        return None

    def fixer() -> None:
        expand_single_line(block, indent=indent)

    return report("single_line_prohibited", fixer=fixer, replace_block=True)


# --------------------------------------------------------------------------- #
# Multi-line evaluator
# --------------------------------------------------------------------------- #


def collapse(block: Block) -> None:
    """Fold every line of ``block`` into a single ``/** ... */`` line.

    Field precedence while folding, line by line:

    - ``type``: last non-empty value wins.
    - ``postType``: from a line carrying tag, type and name together.
    - ``name``, ``tag``, ``description``: concatenated in order.
    - ``postName``: from a line carrying both name and description.
    - ``postTag``: from the tagged line, a single space when it had none.

    A trailing space is reserved before ``*/`` when type, name or
    description is set.
    """
    merged = seed_tokens(
        delimiter=OPEN_MARKER,
        post_delimiter=" ",
        end=CLOSE_MARKER,
    )
    for line in block.lines:
        if line.type:
            merged.type = line.type
        if line.tag and line.type and line.name:
            merged.post_type = line.post_type
        if line.name:
            merged.name += line.name
        if line.name and line.description:
            merged.post_name = line.post_name
        merged.description += line.description

        # Multi-tag blocks never reach this point.
        merged.tag += line.tag
        if line.tag:
            merged.post_tag = line.post_tag or " "

    if merged.type or merged.name or merged.description:
        merged.description += " "

    block.lines = [merged]


def check_multiline(block: Block, options: BlockStyleOptions) -> Report | None:
    """Evaluate a multi-line block against ``noMultilineBlocks``.

    Exempt blocks (a tag listed in ``multilineTags``, or a description at
    least ``minimumLengthForMultiline`` long) yield no report. Otherwise the
    block is classified; only a plain collapse carries a fixer.
    """
    tags = block.tags
    if tags and (
        WILDCARD in options.multiline_tags or block.has_a_tag(options.multiline_tags)
    ):
        return None

    description = block.description
    if len(description) >= options.minimum_length_for_multiline:
        return None

    if options.no_single_line_blocks and (
        not tags
        or not block.filter_tags(lambda name: not is_invalid_single_line(name, options))
    ):
        return report("multiline_prohibited_but_single_line_also_prohibited")

    if len(tags) > 1:
        if options.allow_multiple_tags:
            return None
        return report("multiline_prohibited_multiple_tags")

    if len(tags) == 1 and description.strip():
        if options.allow_multiple_tags:
            return None
        return report("multiline_prohibited_tagged_description")

    def fixer() -> None:
        collapse(block)

    return report("multiline_prohibited", fixer=fixer)


# --------------------------------------------------------------------------- #
# Zero-line-text evaluator
# --------------------------------------------------------------------------- #


def move_zero_line_text(block: Block) -> None:
    """Move the text after ``/**`` onto a new line right below it.

    The new line copies the margin and continuation marker of the line that
    used to follow the opening one, so it carries no marker when that line
    is the bare closing one.
    """
    if block.source_length < 2:
        raise ValueError("move_zero_line_text() needs a multi-line block")

    first = block.lines[0]
    captured = first.model_copy()
    first.clear(keep=_OPEN_LINE_SLOTS)

    sibling = block.lines[1]
    tokens = captured.tokens()
    tokens["start"] = sibling.start
    tokens["delimiter"] = sibling.delimiter
    block.add_line(1, **tokens)


def check_zero_line_text(block: Block, options: BlockStyleOptions) -> Report | None:
    """Report text on the opening line when ``noZeroLineText`` is on."""
    first = block.lines[0]
    if not options.no_zero_line_text or not (first.tag or first.description):
        return None

    def fixer() -> None:
        move_zero_line_text(block)

    return report("zero_line_text_present", fixer=fixer)


# --------------------------------------------------------------------------- #
# Entry point
# --------------------------------------------------------------------------- #


def check_block(
    block: Block,
    options: BlockStyleOptions | None = None,
    *,
    indent: str = "",
) -> Report | None:
    """Run the evaluators on ``block`` and return the first violation, if any.

    Parameters
    ----------
    block : Block
        Tokenized doc block; fixers attached to the result mutate it.
    options : BlockStyleOptions | None
        Rule configuration; defaults apply when omitted.
    indent : str, default ""
        Whitespace preceding the block's opening marker in the source, used
        to indent lines created by the single-line expansion.

    Returns
    -------
    Report | None
        The violation found, or ``None`` when the block complies.
    """
    opts = options if options is not None else BlockStyleOptions()

    if block.source_length == 1:
        result = check_single_line(block, opts, indent=indent)
    elif opts.no_multiline_blocks:
        result = check_multiline(block, opts)
    else:
        result = check_zero_line_text(block, opts)

    if result is not None:
        logger.debug(
            "%s (%d-line block, fixable=%s)",
            result.kind,
            block.source_length,
            result.fixable,
        )
    return result


__all__ = [
    "check_block",
    "check_multiline",
    "check_single_line",
    "check_zero_line_text",
    "collapse",
    "expand_single_line",
    "is_invalid_single_line",
    "move_zero_line_text",
]
