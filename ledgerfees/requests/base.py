"""
Helpers shared by the requests that embed a custom fee schedule.
"""

from typing import Any, Dict, List, Optional

from ..config import get_ledger_config
from ..config.ledger import LedgerConfig
from ..core.exceptions import (
    FeeLimitExceededError, RequestValidationError, StructuralValidationError, ValidationError
)
from ..fee_schedule import CustomFees, ValidatedCustomFees


def validate_fee_schedule(
    request_type: str,
    custom_fees,
    ledger_config: Optional[LedgerConfig],
    logger
) -> ValidatedCustomFees:
    """
    Validate a schedule embedded in a request and check the per-token fee limit.

    The limit is a network-side rule: it is enforced locally only when the
    ledger configuration asks for it, otherwise a breach is logged. Without
    an explicit ``ledger_config`` the registered ``ledger`` domain is read.

    Raises:
        RequestValidationError: If ``custom_fees`` is neither a CustomFees nor a valid payload
        AggregateEmptyError: If the schedule holds no fee
        FeeLimitExceededError: If the limit is exceeded and enforced
    """
    if isinstance(custom_fees, dict):
        try:
            custom_fees = CustomFees.from_dict(custom_fees)
        except StructuralValidationError as e:
            raise RequestValidationError(
                request_type, f"custom_fees.{e.field}", e.value, e.reason
            ) from e
    if not isinstance(custom_fees, CustomFees):
        raise RequestValidationError(
            request_type, "custom_fees", type(custom_fees).__name__, "must be a CustomFees instance"
        )

    validated = custom_fees.validated()

    if ledger_config is None:
        ledger_config = get_ledger_config()
    if custom_fees.exceeds_limit(ledger_config.max_custom_fees):
        if ledger_config.enforce_fee_limit:
            raise FeeLimitExceededError(custom_fees.fee_count, ledger_config.max_custom_fees)
        logger.warning(
            "Custom fee schedule exceeds network limit",
            fee_count=custom_fees.fee_count,
            max_custom_fees=ledger_config.max_custom_fees,
            network=ledger_config.network.value
        )

    return validated


def reraise_as_request_error(request_type: str, error: ValidationError):
    """Re-raise a field error under the request it was found in."""
    raise RequestValidationError(request_type, error.field, error.value, error.reason) from error


def network_fees_payload(validated: Optional[ValidatedCustomFees]) -> List[Dict[str, Any]]:
    if validated is None:
        return []
    return [fee.to_dict() for fee in validated.to_network_fees()]
