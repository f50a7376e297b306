"""
Conversion of fee schedule values into ledger-native fees.

One stateless function per fee variant, plus :func:`to_network_fee` which
dispatches on the variant tag.
"""

from typing import Callable, Dict

from ..core.enums import FeeType
from .network import NetworkFee, NetworkFixedFee, NetworkFractionalFee, NetworkRoyaltyFee


def fixed_to_network(fee) -> NetworkFixedFee:
    collector = fee.collector
    if fee.denominating_token_id is not None:
        return NetworkFixedFee.in_token(
            fee.amount,
            fee.denominating_token_id,
            collector.account_id,
            collector.all_collectors_are_exempt
        )
    return NetworkFixedFee.in_native(
        fee.amount,
        collector.account_id,
        collector.all_collectors_are_exempt
    )


def fractional_to_network(fee) -> NetworkFractionalFee:
    return NetworkFractionalFee(
        numerator=fee.amount.numerator,
        denominator=fee.amount.denominator,
        minimum_amount=fee.minimum,
        maximum_amount=fee.maximum,
        assessment_method=fee.assessment_method,
        fee_collector_account_id=fee.collector.account_id,
        all_collectors_are_exempt=fee.collector.all_collectors_are_exempt
    )


def royalty_to_network(fee) -> NetworkRoyaltyFee:
    """
    Convert a royalty fee.

    The fallback is attached only when its amount is positive, and it must take
    the token branch whenever the fallback names a denominating token.
    """
    fallback = None
    if fee.has_fallback:
        source = fee.fallback_fee
        if source.denominating_token_id is not None:
            fallback = NetworkFixedFee.in_token(source.amount, source.denominating_token_id)
        else:
            fallback = NetworkFixedFee.in_native(source.amount)

    return NetworkRoyaltyFee(
        numerator=fee.amount.numerator,
        denominator=fee.amount.denominator,
        fee_collector_account_id=fee.collector.account_id,
        fallback_fee=fallback,
        all_collectors_are_exempt=fee.collector.all_collectors_are_exempt
    )


_CONVERTERS: Dict[FeeType, Callable] = {
    FeeType.FIXED: fixed_to_network,
    FeeType.FRACTIONAL: fractional_to_network,
    FeeType.ROYALTY: royalty_to_network,
}


def to_network_fee(fee) -> NetworkFee:
    """Convert any fee variant by its ``fee_type`` tag."""
    try:
        converter = _CONVERTERS[fee.fee_type]
    except (AttributeError, KeyError):
        raise TypeError(f"Unsupported fee variant: {type(fee).__name__}")
    return converter(fee)
