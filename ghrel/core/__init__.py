"""Core types shared by every layer."""

from .config import ConfigError, RunnerConfig, load_runner_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "RunnerConfig",
    "load_runner_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
