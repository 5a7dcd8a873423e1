"""Tokenizer: split raw ``/** ... */`` comment text into a :class:`Block`.

Every physical line becomes one :class:`Line` whose slots concatenate back
to the original text, so ``parse_comment(text).unwrap().stringify() == text``
holds for any comment the tokenizer accepts.

Per line
--------
1. ``start``: leading whitespace.
2. ``delimiter``: ``/**`` on the first line; on later lines a leading ``*``
   that does not begin ``*/``. ``postDelimiter`` is the whitespace after it.
3. ``end``: a closing ``*/`` and whatever trails it.
4. ``description``: the rest, including whitespace in front of ``*/``.

Tag lines (description starting with ``@`` followed by a non-space) are
then split further into ``tag``/``postTag``, a braced ``type``/``postType``
and, for tags that take one, a ``name``/``postName``.

Examples
--------
>>> block = parse_comment("/** @param {int} count how many */").unwrap()
>>> line = block.lines[0]
>>> (line.tag, line.type, line.name, line.description)
('@param', '{int}', 'count', 'how many ')
"""

from __future__ import annotations

import re
from typing import Final

from blockstyle.core.contracts.block import Block
from blockstyle.core.contracts.tokens import (
    CLOSE_MARKER,
    LINE_MARKER,
    OPEN_MARKER,
    Line,
    seed_tokens,
)
from blockstyle.core.result import Result, err, ok

#: Tags whose first word is description text rather than a name. Every other
#: tag, ``@type`` and ``@lends`` included, takes a name when text follows.
NO_NAME_TAGS: Final[frozenset[str]] = frozenset(
    {
        "access",
        "author",
        "default",
        "defaultvalue",
        "description",
        "example",
        "exception",
        "file",
        "fileoverview",
        "kind",
        "license",
        "overview",
        "return",
        "returns",
        "since",
        "summary",
        "throws",
        "version",
        "variation",
    }
)

_TAG_START = re.compile(r"@\S")
_WORD = re.compile(r"\S+")


def _split_space(text: str) -> tuple[str, str]:
    """Split ``text`` into its leading whitespace and the remainder."""
    rest = text.lstrip()
    return text[: len(text) - len(rest)], rest


def _balanced(text: str, opener: str, closer: str) -> int:
    """Return the length of the balanced group opening ``text`` (0 if unbalanced)."""
    depth = 0
    for idx, ch in enumerate(text):
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return idx + 1
    return 0


def _tokenize_line(raw: str, *, first: bool) -> Line:
    line = seed_tokens()
    line.start, rest = _split_space(raw)

    if first:
        line.delimiter = OPEN_MARKER
        line.post_delimiter, rest = _split_space(rest[len(OPEN_MARKER) :])
    elif rest.startswith(LINE_MARKER) and not rest.startswith(CLOSE_MARKER):
        line.delimiter = LINE_MARKER
        line.post_delimiter, rest = _split_space(rest[len(LINE_MARKER) :])

    trimmed = rest.rstrip()
    if trimmed.endswith(CLOSE_MARKER):
        cut = len(trimmed) - len(CLOSE_MARKER)
        line.end = rest[cut:]
        rest = rest[:cut]

    line.description = rest
    return line


def _tokenize_tag(line: Line) -> None:
    """Split a tag line's description into tag, type, name and description."""
    rest = line.description
    match = _WORD.match(rest)
    if match is None:
        return
    line.tag = match.group(0)
    line.post_tag, rest = _split_space(rest[match.end() :])

    if rest.startswith("{"):
        width = _balanced(rest, "{", "}")
        if width:
            line.type = rest[:width]
            line.post_type, rest = _split_space(rest[width:])

    if rest and line.tag_name not in NO_NAME_TAGS:
        if rest.startswith("["):
            width = _balanced(rest, "[", "]")
        else:
            word = _WORD.match(rest)
            width = word.end() if word else 0
        if width:
            line.name = rest[:width]
            line.post_name, rest = _split_space(rest[width:])

    line.description = rest


def parse_comment(text: str) -> Result[Block, str]:
    """Tokenize one doc comment.

    Parameters
    ----------
    text : str
        The comment from its opening ``/**`` through its closing ``*/``.
        Leading whitespace ends up in the first line's ``start`` slot.

    Returns
    -------
    Result[Block, str]
        ``Ok(block)`` on success, ``Err(reason)`` when ``text`` is not a
        well-formed doc block (plain ``/*`` comment, ``/***`` banner, empty
        ``/**/`` or a missing close).
    """
    raw_lines = text.split("\n")
    head = raw_lines[0].lstrip()
    if not head.startswith(OPEN_MARKER) or head.startswith(OPEN_MARKER + LINE_MARKER):
        return err("not a doc block: must open with '/**'")
    body = text.strip()
    if len(body) < len(OPEN_MARKER) + len(CLOSE_MARKER) or not body.endswith(CLOSE_MARKER):
        return err("unterminated doc block: missing '*/'")
    if CLOSE_MARKER in body[len(OPEN_MARKER) : -len(CLOSE_MARKER)]:
        return err("doc block closes before its last line")

    lines = [_tokenize_line(raw, first=idx == 0) for idx, raw in enumerate(raw_lines)]
    for line in lines:
        if _TAG_START.match(line.description):
            _tokenize_tag(line)
    return ok(Block(lines=lines))


__all__ = ["NO_NAME_TAGS", "parse_comment"]
