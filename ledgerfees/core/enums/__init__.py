"""
Core enums for the ledgerfees package.
"""

# Fee enums
from .fees import (
    FeeType,
    FeeAssessmentMethod,
    Denomination
)

# Token enums
from .token import (
    TokenType,
    TokenSupplyType
)

__all__ = [
    # Fee enums
    'FeeType',
    'FeeAssessmentMethod',
    'Denomination',

    # Token enums
    'TokenType',
    'TokenSupplyType'
]
