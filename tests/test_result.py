"""Unit tests for the Result container used as the validation outcome."""

from __future__ import annotations

import pytest

from pattern_validation.core.result import Err, Ok, Result, err, ok


def test_flat_map_chains_accepted_values() -> None:
    """`Ok` should feed its value into the next check."""
    r: Result[int, str] = ok(10)
    r2 = r.flat_map(lambda x: ok(x + 5)).flat_map(lambda x: ok(x * 2))
    assert r2.is_ok() and r2.unwrap() == 30


def test_err_short_circuits_flat_map() -> None:
    """An `Err` skips later checks and keeps the same error payload."""
    calls: list[int] = []

    def check(x: int) -> Result[int, str]:
        calls.append(x)
        return ok(x)

    r: Result[int, str] = err("rejected")
    out = r.flat_map(check)
    assert out is r
    assert out.is_err() and out.unwrap_err() == "rejected"
    assert calls == []


def test_unwrap_mismatches_raise() -> None:
    """Unwrapping the wrong variant is a programming error."""
    with pytest.raises(RuntimeError):
        err("e").unwrap()
    with pytest.raises(RuntimeError):
        ok(1).unwrap_err()


def test_variants_are_dataclasses() -> None:
    """`Ok`/`Err` compare by value."""
    assert ok(3) == Ok(3)
    assert err("x") == Err("x")
    assert ok(3) != err(3)
