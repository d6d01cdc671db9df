"""Tests for ghrel.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from ghrel.core.config import (
    DEFAULT_API_URL,
    ConfigError,
    RunnerConfig,
    load_runner_config,
    parse_bool_input,
)
from ghrel.core.errors import ErrorCode
from ghrel.core.result import Err, Ok


def _env(**overrides: str) -> dict[str, str]:
    env = {"GITHUB_TOKEN": "t0ken", "GITHUB_REPOSITORY": "octo/widgets"}
    env.update(overrides)
    return env


class TestParseBoolInput:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("false", False), ("", False), ("TRUE", False), ("1", False)],
    )
    def test_parse_bool(self, raw: str, expected: bool) -> None:
        assert parse_bool_input(raw) is expected


class TestLoadRunnerConfig:
    def test_minimal(self) -> None:
        result = load_runner_config(_env())
        assert result == Ok(RunnerConfig(token="t0ken", repository="octo/widgets"))
        assert isinstance(result, Ok)
        assert result.value.api_url == DEFAULT_API_URL

    def test_full(self, tmp_path: Path) -> None:
        out = tmp_path / "out.txt"
        result = load_runner_config(
            _env(
                GITHUB_API_URL="https://ghe.example.test/api/v3/",
                GITHUB_SHA="abc123",
                GITHUB_OUTPUT=str(out),
            )
        )
        assert isinstance(result, Ok)
        assert result.value.api_url == "https://ghe.example.test/api/v3"
        assert result.value.sha == "abc123"
        assert result.value.output_path == out

    def test_missing_token(self) -> None:
        env = _env()
        del env["GITHUB_TOKEN"]
        result = load_runner_config(env)
        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert "GITHUB_TOKEN" in result.error.message

    @pytest.mark.parametrize("repo", ["", "widgets", "octo/", "/widgets", "a/b/c"])
    def test_bad_repository(self, repo: str) -> None:
        result = load_runner_config(_env(GITHUB_REPOSITORY=repo))
        assert isinstance(result, Err)
        assert "GITHUB_REPOSITORY" in result.error.message

    def test_frozen(self) -> None:
        config = RunnerConfig(token="t", repository="o/r")
        with pytest.raises(AttributeError):
            config.token = "x"  # type: ignore[misc]


class TestErrorCode:
    def test_values_are_stable(self) -> None:
        assert int(ErrorCode.OK) == 0
        assert int(ErrorCode.CONFIG_ERROR) == 1
        assert int(ErrorCode.API_ERROR) == 4
        assert int(ErrorCode.UPLOAD_ERROR) == 5
