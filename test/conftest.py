"""
Shared pytest configuration and fixtures for the fee schedule tests.
"""

import pytest

from ledgerfees.config import LedgerConfig, LedgerNetwork
from ledgerfees.fee_schedule import (
    CustomFees, FeeCollector, FixedFee, Fraction, FractionalFee, RoyaltyFee
)


@pytest.fixture(scope="session")
def base_test_data():
    """
    Provides common test data that can be reused across test modules.
    Session scope means this fixture is created once per test session.
    """
    return {
        'collector_account_id': '0.0.1001',
        'second_collector_account_id': '0.0.1002',
        'token_id': '0.0.500',
        'topic_id': '0.0.7001',
        'consensus_timestamp': '1700000000.123456789',
        'ed25519_key': 'ab' * 32
    }


@pytest.fixture
def collector(base_test_data):
    """Collector account that is not exempt from other fees."""
    return FeeCollector.of(base_test_data['collector_account_id'])


@pytest.fixture
def fixed_fee(collector):
    """Native fixed fee of 100 tinybar."""
    return FixedFee(amount=100, collector=collector)


@pytest.fixture
def token_fixed_fee(collector, base_test_data):
    """Fixed fee denominated in a token."""
    return FixedFee(amount=25, collector=collector, denominating_token_id=base_test_data['token_id'])


@pytest.fixture
def fractional_fee(collector):
    """5% fee with a minimum of 1 and a maximum of 100 units."""
    return FractionalFee(
        amount=Fraction(5, 100),
        minimum=1,
        maximum=100,
        net_of_transfers=False,
        collector=collector
    )


@pytest.fixture
def royalty_fee(collector):
    """10% royalty with a native fallback of 5."""
    return RoyaltyFee(
        amount=Fraction(10, 100),
        collector=collector,
        fallback_fee=FixedFee(amount=5, collector=collector)
    )


@pytest.fixture
def full_schedule(fixed_fee, fractional_fee, royalty_fee):
    """Schedule holding one fee of every type."""
    return CustomFees(
        fixed_fees=[fixed_fee],
        fractional_fees=[fractional_fee],
        royalty_fees=[royalty_fee]
    )


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point the config registry at an empty directory for every test."""
    monkeypatch.setenv("LEDGERFEES_CONFIG_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def ledger_config():
    """Testnet configuration with the fee limit enforced."""
    return LedgerConfig(network=LedgerNetwork.TESTNET)


# Pytest marks for categorizing tests
pytestmark = pytest.mark.unit
