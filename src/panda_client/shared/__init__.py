"""Shared utilities package."""

from panda_client.shared.logging import setup_logger, get_logger
from panda_client.shared.retry import RetryStrategy
from panda_client.shared.types import PathLike, Params, WireParams

__all__ = [
    "setup_logger",
    "get_logger",
    "RetryStrategy",
    "PathLike",
    "Params",
    "WireParams",
]
