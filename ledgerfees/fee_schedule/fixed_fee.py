from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from ..core.enums import FeeType
from ..core.identifiers import TokenId
from .base import FeeCollector
from .converter import fixed_to_network
from .network import NetworkFixedFee
from .validators import FeeValidator


@dataclass(frozen=True)
class FixedFee:
    """
    Fee of a constant amount, independent of the transfer size.

    ``amount`` is in the smallest unit of its denomination: units of
    ``denominating_token_id`` when set, the native currency's smallest unit
    (tinybar) otherwise. A zero amount is structurally legal.
    """
    amount: int
    collector: FeeCollector
    denominating_token_id: Optional[TokenId] = None

    fee_type: ClassVar[FeeType] = FeeType.FIXED

    def __post_init__(self):
        FeeValidator.validate_non_negative_int("amount", self.amount)
        FeeValidator.validate_collector(self.collector)
        object.__setattr__(
            self, "denominating_token_id",
            FeeValidator.validate_token_id(self.denominating_token_id)
        )

    @property
    def is_native(self) -> bool:
        """True when the fee is charged in the ledger's native currency."""
        return self.denominating_token_id is None

    def to_network_fee(self) -> NetworkFixedFee:
        return fixed_to_network(self)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "amount": self.amount,
            "denominating_token_id": str(self.denominating_token_id) if self.denominating_token_id else None
        }
        result.update(self.collector.to_dict())
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_collector: Optional[FeeCollector] = None) -> "FixedFee":
        """
        Build a fixed fee from request-payload keys.

        ``default_collector`` is used when the payload names no collector,
        which is how a royalty fallback inherits its royalty's collector.
        """
        FeeValidator.validate_mapping("fixed_fee", data)
        if default_collector is not None and not data.get("collector_account_id"):
            collector = default_collector
        else:
            collector = FeeCollector.from_dict(data)
        return cls(
            amount=data.get("amount", 0),
            collector=collector,
            denominating_token_id=data.get("denominating_token_id")
        )
