"""
Test configuration and fixtures for the Move demo tests
"""

import pytest
from aptos_sdk.account import Account

# Test private keys (for testing only - never use in production)
test_private_keys = [
    "0x" + "11" * 32,
    "0x" + "22" * 32,
    "0x" + "33" * 32,
]


@pytest.fixture
def dev():
    return Account.load_key(test_private_keys[0])


@pytest.fixture
def seller():
    return Account.load_key(test_private_keys[1])


@pytest.fixture
def buyer():
    return Account.load_key(test_private_keys[2])


@pytest.fixture
def alice(dev):
    return dev


@pytest.fixture
def bob(seller):
    return seller
