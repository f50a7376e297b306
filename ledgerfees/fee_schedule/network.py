"""
Ledger-native custom fee representation.

These are the shapes handed to the transaction execution layer, mirroring the
ledger's ``CustomFee`` message: a collector, the collector exemption flag and
exactly one of ``fixed_fee``, ``fractional_fee`` or ``royalty_fee``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..core.enums import Denomination, FeeAssessmentMethod
from ..core.exceptions import StructuralValidationError
from ..core.identifiers import AccountId, TokenId


def _collector_fields(collector: Optional[AccountId], exempt: bool) -> Dict[str, Any]:
    return {
        "fee_collector_account_id": str(collector) if collector else None,
        "all_collectors_are_exempt": exempt
    }


@dataclass(frozen=True)
class NetworkFixedFee:
    """
    Fixed fee in ledger-native form.

    Token-denominated and native-currency fees are mutually exclusive; build
    them with :meth:`in_token` or :meth:`in_native`. A fixed fee embedded as a
    royalty fallback has no collector of its own.
    """
    amount: int
    denomination: Denomination
    denominating_token_id: Optional[TokenId] = None
    fee_collector_account_id: Optional[AccountId] = None
    all_collectors_are_exempt: bool = False

    def __post_init__(self):
        if self.denomination is Denomination.TOKEN and self.denominating_token_id is None:
            raise StructuralValidationError(
                "denominating_token_id", None, "token-denominated fee requires a token id"
            )
        if self.denomination is Denomination.NATIVE and self.denominating_token_id is not None:
            raise StructuralValidationError(
                "denominating_token_id", str(self.denominating_token_id),
                "native-currency fee cannot carry a token id"
            )

    @classmethod
    def in_token(
        cls,
        amount: int,
        token_id: TokenId,
        fee_collector_account_id: Optional[AccountId] = None,
        all_collectors_are_exempt: bool = False
    ) -> "NetworkFixedFee":
        return cls(amount, Denomination.TOKEN, token_id, fee_collector_account_id, all_collectors_are_exempt)

    @classmethod
    def in_native(
        cls,
        amount: int,
        fee_collector_account_id: Optional[AccountId] = None,
        all_collectors_are_exempt: bool = False
    ) -> "NetworkFixedFee":
        return cls(amount, Denomination.NATIVE, None, fee_collector_account_id, all_collectors_are_exempt)

    @property
    def is_token_denominated(self) -> bool:
        return self.denomination is Denomination.TOKEN

    def fixed_fee_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"amount": self.amount}
        if self.denominating_token_id is not None:
            body["denominating_token_id"] = str(self.denominating_token_id)
        return body

    def to_dict(self) -> Dict[str, Any]:
        result = _collector_fields(self.fee_collector_account_id, self.all_collectors_are_exempt)
        result["fixed_fee"] = self.fixed_fee_body()
        return result


@dataclass(frozen=True)
class NetworkFractionalFee:
    """Fractional fee in ledger-native form; a maximum of 0 means uncapped."""
    numerator: int
    denominator: int
    minimum_amount: int
    maximum_amount: int
    assessment_method: FeeAssessmentMethod
    fee_collector_account_id: AccountId
    all_collectors_are_exempt: bool = False

    @property
    def net_of_transfers(self) -> bool:
        return self.assessment_method is FeeAssessmentMethod.EXCLUSIVE

    def to_dict(self) -> Dict[str, Any]:
        result = _collector_fields(self.fee_collector_account_id, self.all_collectors_are_exempt)
        result["fractional_fee"] = {
            "fractional_amount": {"numerator": self.numerator, "denominator": self.denominator},
            "minimum_amount": self.minimum_amount,
            "maximum_amount": self.maximum_amount,
            "net_of_transfers": self.net_of_transfers
        }
        return result


@dataclass(frozen=True)
class NetworkRoyaltyFee:
    """Royalty fee in ledger-native form, with an optional fixed fallback."""
    numerator: int
    denominator: int
    fee_collector_account_id: AccountId
    fallback_fee: Optional[NetworkFixedFee] = None
    all_collectors_are_exempt: bool = False

    def to_dict(self) -> Dict[str, Any]:
        result = _collector_fields(self.fee_collector_account_id, self.all_collectors_are_exempt)
        body: Dict[str, Any] = {
            "exchange_value_fraction": {"numerator": self.numerator, "denominator": self.denominator}
        }
        if self.fallback_fee is not None:
            body["fallback_fee"] = self.fallback_fee.fixed_fee_body()
        result["royalty_fee"] = body
        return result


NetworkFee = Union[NetworkFixedFee, NetworkFractionalFee, NetworkRoyaltyFee]
