"""
Ledger domain configuration classes.

Settings describing the target ledger network: the per-token custom fee
limit and the native currency the fixed fees fall back to.
"""

from dataclasses import dataclass
from typing import Dict, Any
from enum import Enum

from ledgerfees.core.exceptions import ConfigurationError


class LedgerNetwork(Enum):
    """Ledger networks a request can target."""
    MAINNET = "mainnet"
    TESTNET = "testnet"
    PREVIEWNET = "previewnet"
    LOCAL = "local"


@dataclass
class LedgerConfig:
    """
    Ledger network configuration.

    ``max_custom_fees`` is the network's per-token limit on custom fees
    (10 on the reference network). With ``enforce_fee_limit`` set, requests
    whose schedule exceeds it are rejected locally; otherwise a warning is
    logged and the network gets the final word.
    """
    network: LedgerNetwork = LedgerNetwork.TESTNET
    max_custom_fees: int = 10
    native_currency: str = "HBAR"
    native_decimals: int = 8
    enforce_fee_limit: bool = True

    def __post_init__(self):
        if isinstance(self.max_custom_fees, bool) or not isinstance(self.max_custom_fees, int) \
                or self.max_custom_fees < 1:
            raise ConfigurationError("max_custom_fees", str(self.max_custom_fees), "must be a positive integer")
        if isinstance(self.native_decimals, bool) or not isinstance(self.native_decimals, int) \
                or not 0 <= self.native_decimals <= 18:
            raise ConfigurationError("native_decimals", str(self.native_decimals), "must be between 0 and 18")

    @property
    def smallest_units_per_native(self) -> int:
        """Smallest native units (e.g. tinybar) in one whole native coin."""
        return 10 ** self.native_decimals

    def to_dict(self) -> Dict[str, Any]:
        return {
            'network': self.network.value,
            'max_custom_fees': self.max_custom_fees,
            'native_currency': self.native_currency,
            'native_decimals': self.native_decimals,
            'enforce_fee_limit': self.enforce_fee_limit
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LedgerConfig':
        defaults = cls()
        network = defaults.network
        if 'network' in data:
            try:
                network = LedgerNetwork(data['network'])
            except ValueError:
                raise ConfigurationError("network", data['network'], "unknown ledger network")

        return cls(
            network=network,
            max_custom_fees=data.get('max_custom_fees', defaults.max_custom_fees),
            native_currency=data.get('native_currency', defaults.native_currency),
            native_decimals=data.get('native_decimals', defaults.native_decimals),
            enforce_fee_limit=data.get('enforce_fee_limit', defaults.enforce_fee_limit)
        )
