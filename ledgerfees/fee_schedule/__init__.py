"""
Custom fee schedule model for ledger tokens.

This package represents a token's fee structure (fixed, fractional and
royalty fees), validates it, and converts it into the ledger-native fee list
expected by token-create and fee-schedule-update transactions.
"""

from .fraction import Fraction
from .base import FeeCollector
from .fixed_fee import FixedFee
from .fractional_fee import FractionalFee
from .royalty_fee import RoyaltyFee
from .custom_fees import CustomFee, CustomFees, ValidatedCustomFees
from .network import NetworkFee, NetworkFixedFee, NetworkFractionalFee, NetworkRoyaltyFee
from .converter import to_network_fee
from .validators import FeeValidator

__all__ = [
    "Fraction",
    "FeeCollector",
    "FixedFee",
    "FractionalFee",
    "RoyaltyFee",
    "CustomFee",
    "CustomFees",
    "ValidatedCustomFees",
    "NetworkFee",
    "NetworkFixedFee",
    "NetworkFractionalFee",
    "NetworkRoyaltyFee",
    "to_network_fee",
    "FeeValidator"
]
