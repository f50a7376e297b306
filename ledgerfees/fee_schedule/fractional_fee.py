from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from ..core.enums import FeeAssessmentMethod, FeeType
from .base import FeeCollector
from .fraction import Fraction
from .converter import fractional_to_network
from .network import NetworkFractionalFee
from .validators import FeeValidator


@dataclass(frozen=True)
class FractionalFee:
    """
    Fee proportional to the transferred amount, bounded by a minimum and maximum.

    For a transfer of ``v`` units the assessed fee is
    ``clamp(v * numerator // denominator, minimum, maximum)``.

    ``maximum >= minimum`` is required only for a non-zero maximum. Zero is
    the ledger's "unset" value: the fee is left uncapped and any
    ``minimum`` is accepted.

    When ``net_of_transfers`` is set the fee is charged to the sender on top of
    the transfer; otherwise it is deducted from what the receiver gets.
    """
    amount: Fraction
    minimum: int
    maximum: int
    net_of_transfers: bool
    collector: FeeCollector

    fee_type: ClassVar[FeeType] = FeeType.FRACTIONAL

    def __post_init__(self):
        FeeValidator.validate_is_fraction("amount", self.amount)
        FeeValidator.validate_bounds(self.minimum, self.maximum)
        FeeValidator.validate_flag("net_of_transfers", self.net_of_transfers)
        FeeValidator.validate_collector(self.collector)

    @property
    def is_capped(self) -> bool:
        return self.maximum > 0

    @property
    def assessment_method(self) -> FeeAssessmentMethod:
        return FeeAssessmentMethod.from_net_of_transfers(self.net_of_transfers)

    def assess(self, transfer_amount: int) -> int:
        """
        Compute the fee owed on a transfer.

        Parameters
        ----------
        transfer_amount : int
            Transferred units of the token (always >= 0)

        Returns
        -------
        int
            Fee in units of the transferred token, rounded down before clamping
        """
        FeeValidator.validate_non_negative_int("transfer_amount", transfer_amount)
        fee = transfer_amount * self.amount.numerator // self.amount.denominator
        fee = max(fee, self.minimum)
        if self.is_capped:
            fee = min(fee, self.maximum)
        return fee

    def to_network_fee(self) -> NetworkFractionalFee:
        return fractional_to_network(self)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "amount": self.amount.to_dict(),
            "minimum": self.minimum,
            "maximum": self.maximum,
            "net_of_transfers": self.net_of_transfers
        }
        result.update(self.collector.to_dict())
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FractionalFee":
        FeeValidator.validate_mapping("fractional_fee", data)
        return cls(
            amount=Fraction.from_dict(data.get("amount", {})),
            minimum=data.get("minimum", 0),
            maximum=data.get("maximum", 0),
            net_of_transfers=data.get("net_of_transfers", False),
            collector=FeeCollector.from_dict(data)
        )
