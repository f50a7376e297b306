"""
Fee-related enums for the ledgerfees package.
"""

from enum import Enum


class FeeType(Enum):
    """Custom fee variants a token fee schedule can hold."""
    FIXED = "fixed"
    FRACTIONAL = "fractional"
    ROYALTY = "royalty"


class FeeAssessmentMethod(Enum):
    """How a fractional fee is taken from a transfer."""
    INCLUSIVE = "inclusive"  # netted out of the amount the receiver gets
    EXCLUSIVE = "exclusive"  # charged to the sender on top of the transfer

    @classmethod
    def from_net_of_transfers(cls, net_of_transfers: bool) -> "FeeAssessmentMethod":
        return cls.EXCLUSIVE if net_of_transfers else cls.INCLUSIVE


class Denomination(Enum):
    """Unit a fixed fee amount is expressed in."""
    NATIVE = "native"
    TOKEN = "token"
