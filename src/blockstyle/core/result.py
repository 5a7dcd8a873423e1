"""Typed Result container for collaborator operations that may fail.

Policy violations are *not* failures: the rule engine returns
:class:`~blockstyle.core.contracts.report.Report` values for those. This
module covers the other kind of outcome, where a collaborator cannot do its
job at all, e.g. the tokenizer handed a comment that is not a doc block.
Such callers return ``Result[Block, str]`` instead of raising, so the host
loop can skip the input and keep going.

Example
-------
>>> from blockstyle.core.result import ok, err, Result
>>> def parse_width(x: str) -> Result[int, str]:
...     return ok(int(x)) if x.isdigit() else err("not a width")
>>> parse_width("4").map(lambda w: w * 2).unwrap()
8
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Sum type holding either a value (`Ok[T]`) or an error payload (`Err[E]`)."""

    def is_ok(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` if this is an :class:`Err` value."""
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the inner value, raising ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def unwrap_err(self) -> E:
        """Return the error payload, raising ``RuntimeError`` on ``Ok``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value; propagate the error unchanged."""
        if isinstance(self, Ok):
            return Ok(fn(cast(Ok[T, E], self).value))
        return cast(Result[U, E], self)

    def get_or(self, default: T) -> T:
        """Return the success value, or ``default`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return default


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)
