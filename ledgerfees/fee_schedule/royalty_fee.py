from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from ..core.enums import FeeType
from ..core.exceptions import StructuralValidationError
from .base import FeeCollector
from .fixed_fee import FixedFee
from .fraction import Fraction
from .converter import royalty_to_network
from .network import NetworkRoyaltyFee
from .validators import FeeValidator


@dataclass(frozen=True)
class RoyaltyFee:
    """
    Royalty charged on non-fungible token transfers.

    The royalty is ``amount`` of the fungible value exchanged for the NFT.
    When the transfer carries no fungible counter-value the ``fallback_fee``
    is charged instead.
    """
    amount: Fraction
    collector: FeeCollector
    fallback_fee: Optional[FixedFee] = None

    fee_type: ClassVar[FeeType] = FeeType.ROYALTY

    def __post_init__(self):
        FeeValidator.validate_is_fraction("amount", self.amount)
        FeeValidator.validate_collector(self.collector)
        if self.fallback_fee is not None and not isinstance(self.fallback_fee, FixedFee):
            raise StructuralValidationError(
                "fallback_fee", self.fallback_fee,
                f"must be a FixedFee, got {type(self.fallback_fee).__name__}"
            )

    @property
    def has_fallback(self) -> bool:
        """True when a non-zero fallback will be attached to the network fee."""
        return self.fallback_fee is not None and self.fallback_fee.amount > 0

    def assess(self, exchanged_value: int) -> int:
        """Royalty owed on the fungible value exchanged for the NFT, rounded down."""
        FeeValidator.validate_non_negative_int("exchanged_value", exchanged_value)
        return exchanged_value * self.amount.numerator // self.amount.denominator

    def assess_fallback(self) -> Optional[FixedFee]:
        """Fee charged when the transfer has no fungible counter-value."""
        return self.fallback_fee if self.has_fallback else None

    def to_network_fee(self) -> NetworkRoyaltyFee:
        return royalty_to_network(self)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "amount": self.amount.to_dict(),
            "fallback_fee": self.fallback_fee.to_dict() if self.fallback_fee else None
        }
        result.update(self.collector.to_dict())
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoyaltyFee":
        FeeValidator.validate_mapping("royalty_fee", data)
        collector = FeeCollector.from_dict(data)
        fallback_data = data.get("fallback_fee")
        fallback_fee = None
        if fallback_data is not None:
            FeeValidator.validate_mapping("fallback_fee", fallback_data)
            try:
                fallback_fee = FixedFee.from_dict(fallback_data, default_collector=collector)
            except StructuralValidationError as e:
                raise StructuralValidationError(
                    f"fallback_fee.{e.field}", e.value, e.reason, bound=e.bound
                ) from e
        return cls(
            amount=Fraction.from_dict(data.get("amount", {})),
            collector=collector,
            fallback_fee=fallback_fee
        )
