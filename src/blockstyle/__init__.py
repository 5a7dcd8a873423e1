"""blockstyle: single-line / multi-line formatting policy for doc comment blocks.

The engine lives in :mod:`blockstyle.rules.multiline_blocks`; the tokenizer,
source pipeline, CLI and HTTP API wrap it.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
