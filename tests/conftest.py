"""
Pytest configuration and shared fixtures.

Provides the account sets and calendar days used across the unit,
integration and CLI tests.
"""

from datetime import date, timedelta

import pytest

from payment_instructions.shared.data_contracts import Account


@pytest.fixture
def today() -> date:
    """Fixed evaluation day so schedule checks are deterministic."""
    return date(2025, 6, 15)


@pytest.fixture
def usd_accounts() -> list[Account]:
    """Two USD accounts: A1 funded with 200, A2 with 50."""
    return [
        Account(id="A1", balance=200, currency="USD"),
        Account(id="A2", balance=50, currency="USD"),
    ]


@pytest.fixture
def account_payloads() -> list[dict]:
    """Request-body form of the USD accounts."""
    return [
        {"id": "A1", "balance": 200, "currency": "USD"},
        {"id": "A2", "balance": 50, "currency": "USD"},
    ]


@pytest.fixture
def tomorrow() -> date:
    """The real calendar day after today."""
    return date.today() + timedelta(days=1)
