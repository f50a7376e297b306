from dataclasses import dataclass, field, InitVar
from typing import Any, Dict, List, Optional

from ..config.ledger import LedgerConfig
from ..core.exceptions import RequestValidationError, StructuralValidationError
from ..core.identifiers import TokenId
from ..fee_schedule import CustomFees, NetworkFee, ValidatedCustomFees
from ..logger import get_ledgerfees_logger
from .base import network_fees_payload, reraise_as_request_error, validate_fee_schedule
from .envelope import RequestEnvelope, require_mapping

logger = get_ledgerfees_logger(__name__)


@dataclass(frozen=True)
class FeeScheduleUpdateRequest:
    """
    Replace a token's custom fee schedule.

    The sender key must match the token's fee schedule key; that check belongs
    to the execution layer. ``envelope.dao`` records the governance decision
    that approved the change, when there is one.
    """
    token_id: TokenId
    custom_fees: CustomFees
    envelope: RequestEnvelope = field(default_factory=RequestEnvelope)
    ledger_config: InitVar[Optional[LedgerConfig]] = None
    _validated_fees: Optional[ValidatedCustomFees] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self, ledger_config: Optional[LedgerConfig]):
        try:
            object.__setattr__(self, "token_id", TokenId.parse(self.token_id, "token_id"))
        except StructuralValidationError as e:
            reraise_as_request_error("FeeScheduleUpdateRequest", e)

        if not isinstance(self.envelope, RequestEnvelope):
            raise RequestValidationError(
                "FeeScheduleUpdateRequest", "envelope", type(self.envelope).__name__, "must be a RequestEnvelope"
            )
        if self.custom_fees is None:
            raise RequestValidationError(
                "FeeScheduleUpdateRequest", "custom_fees", None, "a fee schedule update requires custom fees"
            )

        validated = validate_fee_schedule("FeeScheduleUpdateRequest", self.custom_fees, ledger_config, logger)
        object.__setattr__(self, "custom_fees", validated.fees)
        object.__setattr__(self, "_validated_fees", validated)

        logger.debug(
            "Fee schedule update request built",
            token_id=str(self.token_id),
            custom_fee_count=validated.fee_count,
            governed=self.envelope.dao is not None
        )

    @property
    def sender(self):
        return self.envelope.sender

    @property
    def dao(self):
        return self.envelope.dao

    def network_custom_fees(self) -> List[NetworkFee]:
        return self._validated_fees.to_network_fees()

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "tokenId": str(self.token_id),
            "customFees": network_fees_payload(self._validated_fees)
        }
        payload.update(self.envelope.to_payload())
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any], ledger_config: Optional[LedgerConfig] = None) -> "FeeScheduleUpdateRequest":
        require_mapping("FeeScheduleUpdateRequest", "payload", data)
        custom_fees = data.get("customFees", data.get("custom_fees"))
        if custom_fees is None:
            raise RequestValidationError(
                "FeeScheduleUpdateRequest", "custom_fees", None, "a fee schedule update requires custom fees"
            )
        return cls(
            token_id=data.get("tokenId", data.get("token_id")),
            custom_fees=custom_fees,
            envelope=RequestEnvelope.from_dict(data),
            ledger_config=ledger_config
        )
