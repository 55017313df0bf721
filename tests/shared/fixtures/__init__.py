"""Shared fixtures and fakes for all test suites."""

from tests.shared.fixtures.factories import TestBankFactory, TestUserFactory
from tests.shared.fixtures.fake_aggregator import FakeAggregator

__all__ = [
    "FakeAggregator",
    "TestBankFactory",
    "TestUserFactory",
]
