from dataclasses import dataclass, field, InitVar
from typing import Any, Dict, List, Optional

from ..config.ledger import LedgerConfig
from ..core.enums import TokenSupplyType, TokenType
from ..core.exceptions import RequestValidationError, StructuralValidationError
from ..core.identifiers import AccountId
from ..fee_schedule import CustomFees, NetworkFee, ValidatedCustomFees
from ..logger import get_ledgerfees_logger
from .base import network_fees_payload, reraise_as_request_error, validate_fee_schedule
from .envelope import CONSENSUS_TIMESTAMP_PATTERN, RequestEnvelope

logger = get_ledgerfees_logger(__name__)

MAX_DECIMALS = 18
MAX_TEXT_BYTES = 100

KEY_FLAGS = (
    "admin_key", "kyc_key", "freeze_key", "wipe_key",
    "supply_key", "fee_schedule_key", "pause_key"
)


@dataclass(frozen=True)
class TokenCreateRequest:
    """
    Token creation request.

    The custom fee schedule is optional; when present it must hold at least
    one fee and respect the token type (fractional fees only on fungible
    tokens, royalty fees only on non-fungible ones).
    """
    name: str
    symbol: str
    decimals: int
    token_type: TokenType
    supply_type: TokenSupplyType
    max_transaction_fee: int
    validator_consensus_timestamp: str
    freeze_default: bool = False
    treasury_account_id: Optional[AccountId] = None
    initial_supply: Optional[int] = None
    max_supply: Optional[int] = None
    admin_key: bool = False
    kyc_key: bool = False
    freeze_key: bool = False
    wipe_key: bool = False
    supply_key: bool = False
    fee_schedule_key: bool = False
    pause_key: bool = False
    memo: Optional[str] = None
    custom_fees: Optional[CustomFees] = None
    envelope: RequestEnvelope = field(default_factory=RequestEnvelope)
    ledger_config: InitVar[Optional[LedgerConfig]] = None
    _validated_fees: Optional[ValidatedCustomFees] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self, ledger_config: Optional[LedgerConfig]):
        self._validate_metadata()
        self._validate_supply()

        if self.treasury_account_id is not None:
            try:
                object.__setattr__(
                    self, "treasury_account_id",
                    AccountId.parse(self.treasury_account_id, "treasury_account_id")
                )
            except StructuralValidationError as e:
                reraise_as_request_error("TokenCreateRequest", e)

        if not isinstance(self.envelope, RequestEnvelope):
            raise RequestValidationError(
                "TokenCreateRequest", "envelope", type(self.envelope).__name__, "must be a RequestEnvelope"
            )

        if self.custom_fees is not None:
            validated = validate_fee_schedule("TokenCreateRequest", self.custom_fees, ledger_config, logger)
            object.__setattr__(self, "custom_fees", validated.fees)
            object.__setattr__(self, "_validated_fees", validated)
            self._validate_fee_types()

        logger.debug(
            "Token create request built",
            symbol=self.symbol,
            token_type=self.token_type.value,
            custom_fee_count=self.custom_fees.fee_count if self.custom_fees else 0
        )

    def _fail(self, field_name: str, value, message: str):
        raise RequestValidationError("TokenCreateRequest", field_name, value, message)

    def _validate_metadata(self):
        for name in ("name", "symbol"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                self._fail(name, value, "must be a non-empty string")
            if len(value.encode("utf-8")) > MAX_TEXT_BYTES:
                self._fail(name, value, f"must be at most {MAX_TEXT_BYTES} bytes")

        if self.memo is not None and (
                not isinstance(self.memo, str) or len(self.memo.encode("utf-8")) > MAX_TEXT_BYTES):
            self._fail("memo", self.memo, f"must be at most {MAX_TEXT_BYTES} bytes")

        if not isinstance(self.token_type, TokenType):
            self._fail("token_type", self.token_type, "must be a TokenType")
        if not isinstance(self.supply_type, TokenSupplyType):
            self._fail("supply_type", self.supply_type, "must be a TokenSupplyType")

        if not _is_int(self.decimals) or not 0 <= self.decimals <= MAX_DECIMALS:
            self._fail("decimals", self.decimals, f"must be between 0 and {MAX_DECIMALS}")
        if not _is_int(self.max_transaction_fee) or self.max_transaction_fee < 0:
            self._fail("max_transaction_fee", self.max_transaction_fee, "must be non-negative")

        if not isinstance(self.validator_consensus_timestamp, str) \
                or not CONSENSUS_TIMESTAMP_PATTERN.match(self.validator_consensus_timestamp):
            self._fail(
                "validator_consensus_timestamp", self.validator_consensus_timestamp,
                'must be in format "seconds.nanoseconds"'
            )

        for flag in KEY_FLAGS + ("freeze_default",):
            if not isinstance(getattr(self, flag), bool):
                self._fail(flag, getattr(self, flag), "must be a boolean")

    def _validate_supply(self):
        for name in ("initial_supply", "max_supply"):
            value = getattr(self, name)
            if value is not None and (not _is_int(value) or value < 0):
                self._fail(name, value, "must be non-negative")

        if self.supply_type is TokenSupplyType.FINITE:
            if not self.max_supply:
                self._fail("max_supply", self.max_supply, "finite supply tokens require a positive max_supply")
            if (self.initial_supply or 0) > self.max_supply:
                self._fail("initial_supply", self.initial_supply, f"cannot exceed max_supply ({self.max_supply})")

        if self.token_type is TokenType.NON_FUNGIBLE_UNIQUE:
            if self.decimals != 0:
                self._fail("decimals", self.decimals, "non-fungible tokens must have 0 decimals")
            if self.initial_supply:
                self._fail("initial_supply", self.initial_supply, "non-fungible tokens start with no supply")

    def _validate_fee_types(self):
        if self.token_type is TokenType.FUNGIBLE_COMMON and self.custom_fees.royalty_fees:
            self._fail("custom_fees.royalty_fees", len(self.custom_fees.royalty_fees),
                       "royalty fees are only allowed on non-fungible tokens")
        if self.token_type is TokenType.NON_FUNGIBLE_UNIQUE and self.custom_fees.fractional_fees:
            self._fail("custom_fees.fractional_fees", len(self.custom_fees.fractional_fees),
                       "fractional fees are only allowed on fungible tokens")

    @property
    def sender(self):
        return self.envelope.sender

    @property
    def dao(self):
        return self.envelope.dao

    def network_custom_fees(self) -> List[NetworkFee]:
        """Ledger-native fee list, empty when the token carries no custom fees."""
        if self._validated_fees is None:
            return []
        return self._validated_fees.to_network_fees()

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "tokenType": self.token_type.value,
            "supplyType": self.supply_type.value,
            "maxTransactionFee": self.max_transaction_fee,
            "freezeDefault": self.freeze_default,
            "validatorConsensusTimestamp": self.validator_consensus_timestamp,
            "treasuryAccountId": str(self.treasury_account_id) if self.treasury_account_id else None,
            "initialSupply": self.initial_supply,
            "maxSupply": self.max_supply,
            "memo": self.memo,
            "customFees": network_fees_payload(self._validated_fees)
        }
        for flag in KEY_FLAGS:
            payload[_camel_case(flag)] = getattr(self, flag)
        payload.update(self.envelope.to_payload())
        return payload


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)
