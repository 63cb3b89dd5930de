"""Shared test fixtures."""

from tests.shared.fixtures.factories import TestUserFactory

__all__ = ["TestUserFactory"]
