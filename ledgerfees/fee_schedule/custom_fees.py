"""
Custom fee schedule aggregate.

A :class:`CustomFees` owns the fixed, fractional and royalty fees of one
token. It must hold at least one fee; a token without custom fees omits the
schedule entirely. The ledger additionally caps the number of fees per token
(10 on the reference network); that limit is exposed through
:meth:`CustomFees.exceeds_limit` and enforced by the request layer.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple, Union

from ..core.exceptions import (
    AggregateEmptyError,
    ConversionPreconditionError,
    StructuralValidationError
)
from ..logger import get_ledgerfees_logger
from .fixed_fee import FixedFee
from .fractional_fee import FractionalFee
from .network import NetworkFee
from .royalty_fee import RoyaltyFee
from .validators import FeeValidator

logger = get_ledgerfees_logger(__name__)

CustomFee = Union[FixedFee, FractionalFee, RoyaltyFee]


def _coerce_fees(name: str, fees, fee_cls) -> tuple:
    """Revalidate every element of one fee sequence, failing on the first bad one."""
    if fees is None:
        return ()
    if isinstance(fees, (str, bytes, dict)) or not isinstance(fees, Iterable):
        raise StructuralValidationError(
            name, type(fees).__name__, f"must be a sequence of {fee_cls.__name__}"
        )

    coerced = []
    for index, fee in enumerate(fees):
        position = f"{name}[{index}]"
        try:
            if isinstance(fee, dict):
                fee = fee_cls.from_dict(fee)
            elif isinstance(fee, fee_cls):
                fee = dataclasses.replace(fee)
            else:
                raise StructuralValidationError(
                    position, type(fee).__name__, f"must be a {fee_cls.__name__}"
                )
        except StructuralValidationError as e:
            if e.field.startswith(position):
                raise
            raise StructuralValidationError(
                f"{position}.{e.field}", e.value, e.reason, bound=e.bound
            ) from e
        coerced.append(fee)
    return tuple(coerced)


@dataclass(frozen=True)
class CustomFees:
    """
    The complete set of custom fees attached to a token.

    Instances are immutable. Adding fees returns a new schedule, which has to
    be validated again before it can be converted.
    """
    fixed_fees: Tuple[FixedFee, ...] = ()
    fractional_fees: Tuple[FractionalFee, ...] = ()
    royalty_fees: Tuple[RoyaltyFee, ...] = ()
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "fixed_fees", _coerce_fees("fixed_fees", self.fixed_fees, FixedFee))
        object.__setattr__(self, "fractional_fees", _coerce_fees("fractional_fees", self.fractional_fees, FractionalFee))
        object.__setattr__(self, "royalty_fees", _coerce_fees("royalty_fees", self.royalty_fees, RoyaltyFee))

    @property
    def fee_count(self) -> int:
        return len(self.fixed_fees) + len(self.fractional_fees) + len(self.royalty_fees)

    @property
    def is_empty(self) -> bool:
        return self.fee_count == 0

    @property
    def is_validated(self) -> bool:
        return self._validated

    def all_fees(self) -> Tuple[CustomFee, ...]:
        """Every fee in submission order: fixed, then fractional, then royalty."""
        return self.fixed_fees + self.fractional_fees + self.royalty_fees

    def exceeds_limit(self, max_fees: int) -> bool:
        return self.fee_count > max_fees

    def validate(self) -> bool:
        """
        Check the aggregate invariant.

        Returns:
            True when the schedule holds at least one fee

        Raises:
            AggregateEmptyError: If all three sequences are empty
        """
        if self.is_empty:
            logger.debug("Custom fee schedule rejected", reason="empty")
            raise AggregateEmptyError()

        object.__setattr__(self, "_validated", True)
        logger.debug(
            "Custom fee schedule validated",
            fixed=len(self.fixed_fees),
            fractional=len(self.fractional_fees),
            royalty=len(self.royalty_fees)
        )
        return True

    def validated(self) -> "ValidatedCustomFees":
        return ValidatedCustomFees(self)

    def to_network_fees(self) -> List[NetworkFee]:
        """
        Flatten the schedule into the ledger-native fee list.

        Raises:
            ConversionPreconditionError: If :meth:`validate` has not succeeded
        """
        if not self._validated:
            raise ConversionPreconditionError("to_network_fees")
        return [fee.to_network_fee() for fee in self.all_fees()]

    def with_fixed_fees(self, *fees: FixedFee) -> "CustomFees":
        return CustomFees(self.fixed_fees + fees, self.fractional_fees, self.royalty_fees)

    def with_fractional_fees(self, *fees: FractionalFee) -> "CustomFees":
        return CustomFees(self.fixed_fees, self.fractional_fees + fees, self.royalty_fees)

    def with_royalty_fees(self, *fees: RoyaltyFee) -> "CustomFees":
        return CustomFees(self.fixed_fees, self.fractional_fees, self.royalty_fees + fees)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fixed_fees": [fee.to_dict() for fee in self.fixed_fees],
            "fractional_fees": [fee.to_dict() for fee in self.fractional_fees],
            "royalty_fees": [fee.to_dict() for fee in self.royalty_fees]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomFees":
        FeeValidator.validate_mapping("custom_fees", data)
        return cls(
            fixed_fees=data.get("fixed_fees") or (),
            fractional_fees=data.get("fractional_fees") or (),
            royalty_fees=data.get("royalty_fees") or ()
        )


@dataclass(frozen=True)
class ValidatedCustomFees:
    """A fee schedule known to satisfy the non-empty invariant."""
    fees: CustomFees

    def __post_init__(self):
        if not isinstance(self.fees, CustomFees):
            raise TypeError(f"fees must be CustomFees, got {type(self.fees).__name__}")
        self.fees.validate()

    @property
    def fee_count(self) -> int:
        return self.fees.fee_count

    def to_network_fees(self) -> List[NetworkFee]:
        network_fees = self.fees.to_network_fees()
        logger.debug("Custom fee schedule converted", fee_count=len(network_fees))
        return network_fees
