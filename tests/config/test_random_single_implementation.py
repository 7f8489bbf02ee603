"""Test to enforce a single RandomPort implementation in infrastructure."""

import inspect

import pytest

from guessing_utils.application.ports.random_port import RandomPort
from guessing_utils.infrastructure.randomness import thread_local_random


def test_only_one_random_implementation():
    impls = [
        cls
        for _, cls in inspect.getmembers(thread_local_random, inspect.isclass)
        if issubclass(cls, RandomPort) and cls is not RandomPort
    ]
    assert len(impls) == 1, f"Expected exactly one RandomPort implementation, found: {impls}"
    assert impls[0].__name__ == "ThreadLocalRandom"


def test_random_port_is_abstract():
    with pytest.raises(TypeError):
        RandomPort()  # type: ignore[abstract]
