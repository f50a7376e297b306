"""
Token-related enums for the ledgerfees package.
"""

from enum import Enum


class TokenType(Enum):
    """Token types supported by the ledger token service."""
    FUNGIBLE_COMMON = "FUNGIBLE_COMMON"
    NON_FUNGIBLE_UNIQUE = "NON_FUNGIBLE_UNIQUE"


class TokenSupplyType(Enum):
    """Supply policies for a token."""
    INFINITE = "INFINITE"
    FINITE = "FINITE"
