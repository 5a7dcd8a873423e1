"""Tests for the multi-line prohibition evaluator and the collapse fold."""

from __future__ import annotations

import pytest

from blockstyle.core.contracts.block import Block
from blockstyle.core.contracts.options import BlockStyleOptions
from blockstyle.core.contracts.tokens import seed_tokens
from blockstyle.parsing.tokenizer import parse_comment
from blockstyle.rules.multiline_blocks import check_block, check_multiline, collapse

NO_MULTI = BlockStyleOptions(no_multiline_blocks=True, multiline_tags=())


def _parse(text: str) -> Block:
    return parse_comment(text).unwrap()


def test_collapse_type_tag() -> None:
    """A lone @type line folds into the canonical one-line form."""
    block = _parse("/**\n * @type {string}\n */")
    found = check_block(block, NO_MULTI)
    assert found is not None
    assert found.kind == "multiline_prohibited"
    assert found.message == "Multiline jsdoc blocks are prohibited by your configuration."
    assert found.replace_block is False
    found.apply()
    assert block.source_length == 1
    assert block.stringify() == "/** @type {string} */"


@pytest.mark.parametrize(  # type: ignore[misc]
    ("text", "expected"),
    [
        (
            "/**\n * @param {string} foo The foo\n */",
            "/** @param {string} foo The foo */",
        ),
        (
            "/**\n * @lends This can be safely fixed to a single line.\n */",
            "/** @lends This can be safely fixed to a single line. */",
        ),
        (
            "/**\n * @type {aType} This can be safely fixed.\n */",
            "/** @type {aType} This can be safely fixed. */",
        ),
        ("/**\n * @abstract\n */", "/** @abstract */"),
        ("/**\n * @param foo\n */", "/** @param foo */"),
        (
            "/**\n * This comment is bad\n * It is multiline\n */",
            "/** This comment is badIt is multiline */",
        ),
        ("/**\n */", "/** */"),
    ],
)
def test_collapse_shapes(text: str, expected: str) -> None:
    """The fold keeps token adjacency for every shape it accepts."""
    block = _parse(text)
    collapse(block)
    assert block.stringify() == expected


def test_collapse_concatenates_descriptions_verbatim() -> None:
    """Description tokens are appended as they are, inner whitespace included."""
    block = Block(
        lines=[
            seed_tokens(delimiter="/**"),
            seed_tokens(
                start=" ", delimiter="*", post_delimiter=" ", description="  indented   text"
            ),
            seed_tokens(start=" ", end="*/"),
        ]
    )
    collapse(block)
    assert block.lines[0].description == "  indented   text "


def test_collapse_post_type_needs_a_name() -> None:
    """Without a name on the tagged line, the separator after the type is dropped."""
    block = Block(
        lines=[
            seed_tokens(delimiter="/**"),
            seed_tokens(
                start=" ",
                delimiter="*",
                post_delimiter=" ",
                tag="@returns",
                post_tag=" ",
                type="{string}",
                post_type=" ",
                description="The value",
            ),
            seed_tokens(start=" ", end="*/"),
        ]
    )
    collapse(block)
    [line] = block.lines
    assert line.post_type == ""
    assert line.text == "/** @returns {string}The value */"


def test_collapse_is_idempotent() -> None:
    """After collapsing, the block is single-line and passes the same options."""
    block = _parse("    /**\n     * @param foo\n     */")
    found = check_block(block, NO_MULTI)
    assert found is not None
    found.apply()
    assert check_block(block, NO_MULTI) is None


def test_multiline_tags_exemption() -> None:
    """A block carrying a tag listed in multilineTags may stay multi-line."""
    opts = BlockStyleOptions(no_multiline_blocks=True, multiline_tags=("type",))
    assert check_block(_parse("/**\n * @type {string}\n */"), opts) is None
    assert check_block(_parse("/**\n * @param foo\n */"), opts) is not None


def test_wildcard_exempts_tagged_blocks_only() -> None:
    """The default `*` exempts any tagged block; untagged ones still collapse."""
    opts = BlockStyleOptions(no_multiline_blocks=True)
    assert check_block(_parse("/**\n * @param foo\n */"), opts) is None
    found = check_block(_parse("/**\n * Just text\n */"), opts)
    assert found is not None and found.kind == "multiline_prohibited"


def test_minimum_length_exemption() -> None:
    """Descriptions at least minimumLengthForMultiline long stay multi-line."""
    opts = BlockStyleOptions(no_multiline_blocks=True, minimum_length_for_multiline=10)
    assert check_block(_parse("/**\n * Long enough text\n */"), opts) is None
    assert check_block(_parse("/**\n * Short\n */"), opts) is not None


def test_multiple_tags_rejected_without_fixer() -> None:
    """Two tags cannot share one line when multiple tags are not allowed."""
    opts = NO_MULTI.model_copy(update={"allow_multiple_tags": False})
    block = _parse("/**\n * @param a\n * @param b\n */")
    found = check_block(block, opts)
    assert found is not None
    assert found.kind == "multiline_prohibited_multiple_tags"
    assert found.message.endswith("but the block has multiple tags.")
    assert found.fixer is None
    assert not found.apply()
    assert block.source_length == 4


def test_multiple_tags_tolerated_by_default() -> None:
    """With allowMultipleTags on, such blocks are left alone."""
    assert check_block(_parse("/**\n * @param a\n * @param b\n */"), NO_MULTI) is None


def test_tagged_description_rejected() -> None:
    """A description plus a tag cannot be collapsed cleanly."""
    opts = NO_MULTI.model_copy(update={"allow_multiple_tags": False})
    block = _parse("/**\n * Does things.\n * @param a\n */")
    found = check_block(block, opts)
    assert found is not None
    assert found.kind == "multiline_prohibited_tagged_description"
    assert found.fixer is None
    assert check_block(_parse("/**\n * Does things.\n * @param a\n */"), NO_MULTI) is None


def test_irreconcilable_with_single_line_ban() -> None:
    """Collapsing would create a forbidden single-line block: report, no fix."""
    opts = BlockStyleOptions(
        no_multiline_blocks=True,
        no_single_line_blocks=True,
        single_line_tags=(),
        multiline_tags=(),
    )
    tagged = check_block(_parse("/**\n * @param foo\n */"), opts)
    assert tagged is not None
    assert tagged.kind == "multiline_prohibited_but_single_line_also_prohibited"
    assert tagged.fixer is None
    assert "`noSingleLineBlocks`" in tagged.message

    untagged = check_block(_parse("/**\n * Only text\n */"), opts)
    assert untagged is not None and untagged.fixer is None


def test_single_line_exception_makes_collapse_possible() -> None:
    """A tag excepted from the single-line ban can still be collapsed."""
    opts = BlockStyleOptions(
        no_multiline_blocks=True,
        no_single_line_blocks=True,
        single_line_tags=("lends",),
        multiline_tags=(),
    )
    block = _parse("/**\n * @lends Foo.prototype\n */")
    found = check_multiline(block, opts)
    assert found is not None and found.kind == "multiline_prohibited"
    found.apply()
    assert block.stringify() == "/** @lends Foo.prototype */"
    assert check_block(block, opts) is None


def test_multiline_policy_skips_zero_line_check() -> None:
    """Once noMultilineBlocks applies, text on the opening line is not reported."""
    opts = BlockStyleOptions(no_multiline_blocks=True)
    assert check_block(_parse("/** Text\n * @param a\n */"), opts) is None
