"""Formatting rules for doc comment blocks.

Currently exposed:

- :func:`check_block`: single-line / multi-line block policy, implemented in
  ``multiline_blocks.py``.
"""

from __future__ import annotations

from .multiline_blocks import check_block

__all__ = ["check_block"]
