"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- Gateway settings with test credentials
- Sample payment methods and options
- A gateway wired to the in-process MockTransport
"""

import pytest

from vantiv_gateway import (
    Check,
    CreditCard,
    NetworkTokenCard,
    Registration,
    StoredToken,
    TransactionOptions,
    VantivGateway,
    VantivSettings,
)
from vantiv_gateway.transport import MockTransport


@pytest.fixture
def settings() -> VantivSettings:
    """Settings with test credentials."""
    return VantivSettings(
        login="test-user",
        password="test-password",
        merchant_id="101",
        url=None,
        test=True,
    )


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport(seed=42)


@pytest.fixture
def gateway(settings: VantivSettings, mock_transport: MockTransport) -> VantivGateway:
    """Gateway wired to the in-process mock transport."""
    return VantivGateway(settings, transport=mock_transport)


@pytest.fixture
def credit_card() -> CreditCard:
    return CreditCard(
        brand="visa",
        number="4457010000000009",
        month="01",
        year="2021",
        verification_value="349",
        first_name="John",
        last_name="Smith",
    )


@pytest.fixture
def swiped_card() -> CreditCard:
    return CreditCard(
        number="4457010000000009",
        track_data="%B4457010000000009^SMITH/JOHN^2101101000000000000000000000000?",
    )


@pytest.fixture
def network_token_card() -> NetworkTokenCard:
    return NetworkTokenCard(
        brand="visa",
        number="4100200300011001",
        month="05",
        year="2021",
        verification_value="463",
        payment_cryptogram="BwABBJQ1AgAAAAAgJDUCAAAAAAA=",
        source="apple_pay",
    )


@pytest.fixture
def check() -> Check:
    return Check(
        account_holder_type="business",
        account_number="4099999992",
        account_type="checking",
        routing_number="011075150",
    )


@pytest.fixture
def registration() -> Registration:
    return Registration(
        "cDZJcmd1VjNlYXNaSlRMTGpocVZQY1NNlYE4ZW5UTko4NU",
        month="9",
        verification_value="424",
        year="2021",
    )


@pytest.fixture
def stored_token() -> StoredToken:
    return StoredToken.create("1111000100000196", month="11", verification_value="987", year="2021")


@pytest.fixture
def billing_options() -> TransactionOptions:
    return TransactionOptions.model_validate(
        {
            "order_id": "1",
            "billing_address": {
                "name": "John & Mary Smith",
                "address1": "1 Main St.",
                "city": "Burlington",
                "state": "MA",
                "zip": "01803-3747",
                "country": "US",
            },
        }
    )
