"""Tests for the Result carrier."""

import pytest

from guessing_utils.domain.errors import GuessRangeError
from guessing_utils.domain.types import Result


def test_success_carries_value():
    result = Result.success(7)
    assert result.ok
    assert result.value == 7
    assert result.error is None
    assert result.unwrap() == 7


def test_failure_carries_error_and_unwrap_raises_it():
    err = GuessRangeError(200)
    result = Result.failure(err)
    assert not result.ok
    assert result.value is None
    assert result.error is err
    with pytest.raises(GuessRangeError) as exc_info:
        result.unwrap()
    assert exc_info.value is err


def test_unwrap_of_failure_without_error_raises_value_error():
    with pytest.raises(ValueError, match="failure Result without error"):
        Result(ok=False).unwrap()
