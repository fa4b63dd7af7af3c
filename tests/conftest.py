"""
Pytest configuration and shared fixtures for the refinance planner tests.
"""

import os
from unittest.mock import patch

import pytest

# Settings require a SECRET_KEY; provide one before the app is imported
os.environ.setdefault("SECRET_KEY", "test-secret-key-123")

from refi_planner import create_app  # noqa: E402
from refi_planner.config import reset_global_settings  # noqa: E402
from refi_planner.models.scenario import Debt, RefinanceInputs  # noqa: E402


@pytest.fixture
def app():
    """Create a Flask app configured for testing."""
    reset_global_settings()
    with patch.dict(
        os.environ, {"SECRET_KEY": "test-secret-key-123", "APP_ENV": "testing"}
    ):
        application = create_app("testing")
    yield application
    reset_global_settings()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def sample_debts():
    """Three credit card debts, all included."""
    return [
        Debt(balance=5000, min_payment=150, include=True),
        Debt(balance=10000, min_payment=300, include=True),
        Debt(balance=4000, min_payment=120, include=True),
    ]


@pytest.fixture
def sample_inputs(sample_debts):
    """$500k at 6.5%/30y against a 5.75%/30y offer."""
    return RefinanceInputs(
        mortgage_balance=500000,
        current_apr=0.065,
        current_term_years=30,
        offer_rate=0.0575,
        offer_term_years=30,
        debts=sample_debts,
    )
