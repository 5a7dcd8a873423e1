from __future__ import annotations

from .tokenizer import NO_NAME_TAGS, parse_comment

__all__ = ["NO_NAME_TAGS", "parse_comment"]
