"""
Unit tests for retry utilities.
"""

from unittest.mock import Mock, patch

import pytest

from panda_client.shared.retry import RetryStrategy


class TestRetryStrategy:
    """Test RetryStrategy."""

    def test_success_first_attempt(self):
        """Test a successful call is not repeated."""
        func = Mock(return_value="ok")

        assert RetryStrategy(max_attempts=3).execute(func, 1, key="v") == "ok"
        func.assert_called_once_with(1, key="v")

    @patch('panda_client.shared.retry.time.sleep')
    def test_retries_listed_exceptions(self, sleep):
        """Test listed exceptions are retried until success."""
        func = Mock(side_effect=[ConnectionError(), ConnectionError(), "ok"])

        result = RetryStrategy(max_attempts=3, exceptions=(ConnectionError,)).execute(func)

        assert result == "ok"
        assert func.call_count == 3
        assert sleep.call_count == 2

    @patch('panda_client.shared.retry.time.sleep')
    def test_gives_up_after_max_attempts(self, sleep):
        """Test the last exception is raised."""
        func = Mock(side_effect=ConnectionError("down"))

        with pytest.raises(ConnectionError, match="down"):
            RetryStrategy(max_attempts=2, exceptions=(ConnectionError,)).execute(func)

        assert func.call_count == 2

    def test_other_exceptions_not_retried(self):
        """Test unlisted exceptions propagate immediately."""
        func = Mock(side_effect=ValueError("bad"))

        with pytest.raises(ValueError):
            RetryStrategy(max_attempts=5, exceptions=(ConnectionError,)).execute(func)

        func.assert_called_once()

    def test_backoff_capped(self):
        """Test backoff grows and is capped."""
        strategy = RetryStrategy(backoff_seconds=1.0, jitter=False, max_backoff=3.0)

        assert strategy._calculate_backoff(1) == 1.0
        assert strategy._calculate_backoff(2) == 2.0
        assert strategy._calculate_backoff(5) == 3.0

    def test_invalid_attempts(self):
        """Test at least one attempt is required."""
        with pytest.raises(ValueError):
            RetryStrategy(max_attempts=0)
