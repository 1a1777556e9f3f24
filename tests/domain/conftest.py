"""Pytest configuration for domain package tests."""

import pytest

from resume_schema import Basics


@pytest.fixture
def minimal_basics() -> Basics:
    return Basics(name="John Doe", label="Software Engineer", email="john@example.com")
