"""Tests for ghrel.core.result module."""

from __future__ import annotations

import pytest

from ghrel.core.result import Err, Ok, Result


def _lookup(tag: str) -> Result[int, str]:
    if not tag:
        return Err("empty tag")
    return Ok(42)


class TestOk:
    def test_holds_value(self) -> None:
        assert Ok("v1.0.0").value == "v1.0.0"

    def test_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Ok(2)
        assert Ok(1) != Err(1)

    def test_repr(self) -> None:
        assert repr(Ok("tag")) == "Ok('tag')"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]


class TestErr:
    def test_holds_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


class TestMatching:
    def test_match_ok(self) -> None:
        match _lookup("v1"):
            case Ok(value):
                assert value == 42
            case Err():
                pytest.fail("expected Ok")

    def test_match_err(self) -> None:
        match _lookup(""):
            case Ok():
                pytest.fail("expected Err")
            case Err(error):
                assert error == "empty tag"

    def test_isinstance_narrowing(self) -> None:
        result = _lookup("")
        assert isinstance(result, Err)
        assert not isinstance(result, Ok)
