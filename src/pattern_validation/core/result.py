"""Typed Result container for the binary validation outcome.

A pre-save check either accepts the prepared post (passing it through
unmodified) or rejects it with a structured failure. We model that as a
`Result[T, E]` with two variants:

- `Ok(value)`: the post was accepted.
- `Err(error)`: the post was rejected; ``error`` carries the failure payload.

Validators are chained with :meth:`Result.flat_map`, so a rejection raised by
an earlier check flows through later checks untouched.

Example
-------
>>> from pattern_validation.core.result import ok, err
>>> ok(3).flat_map(lambda n: ok(n * 2)).unwrap()
6
>>> err("rejected").flat_map(lambda n: ok(n * 2)).unwrap_err()
'rejected'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Sum type: either an accepted value (`Ok[T]`) or a rejection (`Err[E]`)."""

    def is_ok(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` if this is an :class:`Err` value."""
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the accepted value, or raise ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def unwrap_err(self) -> E:
        """Return the rejection payload, or raise ``RuntimeError`` on ``Ok``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Run the next check on an accepted value; propagate rejections unchanged."""
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return cast(Result[U, E], self)

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        if isinstance(self, Ok):
            return f"Ok({cast(Ok[T, E], self).value!r})"
        if isinstance(self, Err):
            return f"Err({cast(Err[T, E], self).error!r})"
        return "Result(?)"


@dataclass(frozen=True, repr=False)
class Ok(Result[T, E]):
    """Accepted outcome wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True, repr=False)
class Err(Result[T, E]):
    """Rejected outcome wrapping an error payload of type ``E``."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)
