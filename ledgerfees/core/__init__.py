"""
Core building blocks shared across the ledgerfees package: enums,
exceptions and ledger entity identifiers.
"""

from .identifiers import EntityId, AccountId, TokenId, TopicId

__all__ = [
    'EntityId',
    'AccountId',
    'TokenId',
    'TopicId'
]
