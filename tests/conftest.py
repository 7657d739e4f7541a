"""Shared test fixtures and configuration for listops tests."""

import pytest


@pytest.fixture
def numbers():
    """Small unsorted integer sequence."""
    return (3, 1, 4, 1, 5, 9, 2, 6)


@pytest.fixture
def records():
    """(name, age) records with repeated ages for stability checks."""
    return (
        ("ada", 36),
        ("bob", 25),
        ("cy", 36),
        ("dee", 19),
        ("eve", 25),
    )


@pytest.fixture
def pairs():
    return ((1, "a"), (2, "b"), (3, "c"))
