"""Shared fixtures for verification ladder tests."""

import pytest

PAYMENT_CODE = (
    "async function processPayment(amount){ await stripeCharge(amount); await db.save(tx); }"
)
PLAIN_CODE = "function add(a,b){ return a+b; }"


@pytest.fixture
def payment_code():
    return PAYMENT_CODE


@pytest.fixture
def plain_code():
    return PLAIN_CODE


@pytest.fixture
def sample_user():
    """Nested user payload with every string format represented."""
    return {
        "id": "550e8400-e29b-41d4-a716-446655440000",
        "email": "user@example.com",
        "name": "Jane Doe",
        "age": 28,
        "active": True,
        "createdAt": "2024-01-15T10:30:00Z",
        "roles": ["user", "admin"],
        "metadata": {
            "lastLogin": "2024-01-20T14:22:00Z",
            "preferences": {
                "theme": "dark",
                "notifications": True,
            },
        },
    }


@pytest.fixture
def write_risk_table(tmp_path):
    """Write a risk_patterns.yaml into tmp_path and return the directory."""

    def _write(content: str):
        (tmp_path / "risk_patterns.yaml").write_text(content)
        return tmp_path

    return _write
