import pytest

from travel_planner.errors import NetworkError
from travel_planner.retry import call_with_overload_retry, is_overloaded


def test_overload_markers():
    assert is_overloaded(NetworkError("503 Service Unavailable"))
    assert is_overloaded(RuntimeError("The model is overloaded. Please try again later."))
    assert not is_overloaded(NetworkError("429 Too Many Requests"))


def test_last_overload_error_propagates():
    calls = []
    sleeps = []

    def always_overloaded():
        calls.append(1)
        raise NetworkError(f"503 attempt {len(calls)}")

    with pytest.raises(NetworkError, match="attempt 3"):
        call_with_overload_retry(always_overloaded, sleep=sleeps.append)

    assert len(calls) == 3
    assert sleeps == [3.0, 3.0]


def test_attempts_and_delay_are_configurable():
    sleeps = []
    outcomes = [NetworkError("503"), "done"]

    def flaky():
        outcome = outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    assert call_with_overload_retry(flaky, max_attempts=2, delay_seconds=0.5, sleep=sleeps.append) == "done"
    assert sleeps == [0.5]
