"""Retry utilities with exponential backoff."""

import time
import random
import logging
from typing import Callable, TypeVar, Optional, Type, Tuple

T = TypeVar('T')


class RetryStrategy:
    """Configurable retry strategy.

    Only the exception types listed in ``exceptions`` are retried; anything
    else propagates on the first attempt.
    """

    def __init__(
        self,
        max_attempts: int = 1,
        backoff_seconds: float = 0.5,
        exponential: bool = True,
        jitter: bool = True,
        max_backoff: float = 30.0,
        exceptions: Tuple[Type[BaseException], ...] = (Exception,),
        logger: Optional[logging.Logger] = None
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got: {max_attempts}")

        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self.exponential = exponential
        self.jitter = jitter
        self.max_backoff = max_backoff
        self.exceptions = exceptions
        self.logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        func: Callable[..., T],
        *args,
        **kwargs
    ) -> T:
        """
        Execute a function with retry logic.

        Args:
            func: Function to execute
            *args: Positional arguments for the function
            **kwargs: Keyword arguments for the function

        Returns:
            Function result

        Raises:
            Last exception if all attempts fail
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                return func(*args, **kwargs)
            except self.exceptions as e:
                if attempt == self.max_attempts:
                    raise

                wait_time = self._calculate_backoff(attempt)
                self.logger.warning(
                    f"Attempt {attempt}/{self.max_attempts} failed: {e}; "
                    f"retrying in {wait_time:.2f}s"
                )
                time.sleep(wait_time)

        raise RuntimeError("Retry logic failed unexpectedly")

    def _calculate_backoff(self, attempt: int) -> float:
        """Calculate backoff time for given attempt number."""
        if self.exponential:
            wait_time = self.backoff_seconds * (2 ** (attempt - 1))
        else:
            wait_time = self.backoff_seconds * attempt

        wait_time = min(wait_time, self.max_backoff)

        if self.jitter:
            wait_time = wait_time * (0.5 + random.random())

        return wait_time
