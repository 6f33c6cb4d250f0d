"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from lsp_bank.accounts import CurrentAccount, FixedTermAccount, SavingsAccount
from lsp_bank.sinks import MemorySink


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def savings() -> SavingsAccount:
    """Empty savings account."""
    return SavingsAccount(Decimal("0"), account_id="sav-test-001")


@pytest.fixture
def current() -> CurrentAccount:
    """Empty current account."""
    return CurrentAccount(Decimal("0"), account_id="cur-test-001")


@pytest.fixture
def fixed_term() -> FixedTermAccount:
    """Empty fixed-term account."""
    return FixedTermAccount(Decimal("0"), account_id="fix-test-001")


@pytest.fixture
def memory_sink() -> MemorySink:
    """Sink that keeps reports in memory."""
    return MemorySink()
