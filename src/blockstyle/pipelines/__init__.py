"""Pipeline entry points for blockstyle.

Currently exposed:

- :func:`run_pipeline`: lint (and optionally fix) every doc block in a
  source text, implemented in ``lint_source.py``.
"""

from __future__ import annotations

from .lint_source import LintResult, run_pipeline

__all__ = ["run_pipeline", "LintResult"]
