"""
Request shapes that embed a custom fee schedule.

Every request composes the same :class:`RequestEnvelope` (optional sender
and governance blocks) instead of redeclaring it.
"""

from .envelope import PublicKey, KeyList, Sender, DaoConfig, RequestEnvelope
from .token_create import TokenCreateRequest
from .update_fees import FeeScheduleUpdateRequest

__all__ = [
    "PublicKey",
    "KeyList",
    "Sender",
    "DaoConfig",
    "RequestEnvelope",
    "TokenCreateRequest",
    "FeeScheduleUpdateRequest"
]
