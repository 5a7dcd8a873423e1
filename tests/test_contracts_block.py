"""Unit tests for the token-line and block contracts."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from blockstyle.core.contracts.block import Block, compact_join
from blockstyle.core.contracts.tokens import TOKEN_ORDER, Line, seed_tokens


def _block() -> Block:
    """A four-line block: description, two tag sections, close."""
    return Block(
        lines=[
            seed_tokens(delimiter="/**"),
            seed_tokens(start=" ", delimiter="*", post_delimiter=" ", description="Adds things."),
            seed_tokens(
                start=" ",
                delimiter="*",
                post_delimiter=" ",
                tag="@param",
                post_tag=" ",
                type="{number}",
                post_type=" ",
                name="a",
                post_name=" ",
                description="first",
            ),
            seed_tokens(start=" ", delimiter="*", post_delimiter="   ", description="operand"),
            seed_tokens(
                start=" ",
                delimiter="*",
                post_delimiter=" ",
                tag="@returns",
                post_tag=" ",
                type="{number}",
            ),
            seed_tokens(start=" ", end="*/"),
        ]
    )


def test_line_text_joins_slots_in_order() -> None:
    """Slots concatenate in the fixed order to rebuild the line."""
    line = Line(**{slot: str(idx) for idx, slot in enumerate(TOKEN_ORDER)})
    assert line.text == "012345678910"


def test_line_accepts_camel_case_aliases() -> None:
    """Both `postDelimiter` and `post_delimiter` populate the same slot."""
    assert Line(postDelimiter=" ").post_delimiter == " "
    assert Line(post_delimiter=" ").post_delimiter == " "


def test_seed_tokens_defaults_and_unknown_slot() -> None:
    """Unset slots are empty; unknown slot names are rejected."""
    line = seed_tokens(end="*/")
    assert line.end == "*/"
    assert all(getattr(line, slot) == "" for slot in TOKEN_ORDER if slot != "end")
    with pytest.raises(ValueError):
        seed_tokens(lineEnd="")


def test_line_clear_keeps_named_slots() -> None:
    """`clear(keep=...)` empties everything else."""
    line = seed_tokens(start="  ", delimiter="/**", post_delimiter=" ", description="x")
    line.clear(keep=("start", "delimiter"))
    assert line.text == "  /**"


def test_block_requires_a_line() -> None:
    """A block with zero lines is rejected at construction."""
    with pytest.raises(ValidationError):
        Block(lines=[])


def test_block_tags_are_views_over_sections() -> None:
    """Each tag section yields a TagSpec with its compacted description."""
    block = _block()
    tags = block.tags
    assert [t.tag for t in tags] == ["param", "returns"]
    assert tags[0].type == "number"
    assert tags[0].name == "a"
    assert tags[0].description == "first operand"
    assert tags[0].line == 2
    assert tags[1].description == ""


def test_block_description_stops_at_first_tag() -> None:
    """The block description covers only the lines before the first tag."""
    assert _block().description == "Adds things."
    assert _block().source_length == 6


def test_has_a_tag_and_filter_tags() -> None:
    """Tag helpers compare names without the `@` marker."""
    block = _block()
    assert block.has_a_tag(["returns"])
    assert not block.has_a_tag(["@returns", "type"])
    assert [t.tag for t in block.filter_tags(lambda name: name != "param")] == ["returns"]


def test_add_line_inserts_seeded_line() -> None:
    """`add_line` inserts at the index and rejects out-of-range positions."""
    block = Block(lines=[seed_tokens(delimiter="/**", end="*/")])
    block.add_line(1, start=" ", end="*/")
    assert block.stringify() == "/***/\n */"
    with pytest.raises(IndexError):
        block.add_line(5, description="x")


def test_stringify_round_trips_untouched_lines() -> None:
    """Stringify rebuilds every line from its slots."""
    assert _block().stringify() == (
        "/**\n"
        " * Adds things.\n"
        " * @param {number} a first\n"
        " *   operand\n"
        " * @returns {number}\n"
        " */"
    )


def test_compact_join() -> None:
    """Fragments are stripped, empties dropped, joined by one space."""
    assert compact_join(["  a ", "", " ", "b"]) == "a b"
