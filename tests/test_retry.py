"""Unit tests for with_retry."""
import pytest
from unittest.mock import Mock

from app.utils.retry import with_retry


class TestWithRetry:
    """Test suite for the constant-delay retry helper."""

    def test_returns_first_success_without_sleeping(self, recording_sleep):
        """Test a call that succeeds at once is made exactly once."""
        fn = Mock(return_value="ok")

        assert with_retry(fn, max_retries=3, delay=0.5, sleep=recording_sleep) == "ok"
        assert fn.call_count == 1
        assert recording_sleep.calls == []

    def test_retries_until_success(self, recording_sleep):
        """Test two failures followed by a success."""
        fn = Mock(side_effect=[ValueError("a"), ValueError("b"), "ok"])

        result = with_retry(fn, max_retries=3, delay=0.5, retry_on=(ValueError,), sleep=recording_sleep)

        assert result == "ok"
        assert fn.call_count == 3
        assert recording_sleep.calls == [0.5, 0.5]

    @pytest.mark.parametrize("budget", [0, 1, 2, 5])
    def test_exhausted_budget_makes_budget_plus_one_attempts(self, budget, recording_sleep):
        """Test a permanently failing call: N+1 attempts, N sleeps, last error re-raised."""
        fn = Mock(side_effect=ValueError("down"))

        with pytest.raises(ValueError, match="down"):
            with_retry(fn, max_retries=budget, delay=0.25, retry_on=(ValueError,), sleep=recording_sleep)

        assert fn.call_count == budget + 1
        assert recording_sleep.calls == [0.25] * budget

    def test_delay_does_not_grow(self, recording_sleep):
        """Test every pause uses the same delay."""
        fn = Mock(side_effect=[KeyError(), KeyError(), KeyError(), "done"])

        with_retry(fn, max_retries=3, delay=1.5, retry_on=(KeyError,), sleep=recording_sleep)

        assert recording_sleep.calls == [1.5, 1.5, 1.5]

    def test_unlisted_exception_is_not_retried(self, recording_sleep):
        """Test exceptions outside retry_on propagate on the first attempt."""
        fn = Mock(side_effect=TypeError("bug"))

        with pytest.raises(TypeError):
            with_retry(fn, max_retries=3, retry_on=(ValueError,), sleep=recording_sleep)

        assert fn.call_count == 1
        assert recording_sleep.calls == []

    def test_negative_budget_rejected(self):
        """Test a negative budget is a programming error."""
        with pytest.raises(ValueError, match="max_retries"):
            with_retry(lambda: None, max_retries=-1)
