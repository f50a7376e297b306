from ledgerfees.logger import init_logger
from ledgerfees.config import get_config_registry, get_system_config

# Initialize configuration system
config_registry = get_config_registry()
system_config = get_system_config(config_registry)

# Initialize logger
log = init_logger(system_config)

from ledgerfees.fee_schedule import (  # noqa: E402
    Fraction, FeeCollector, FixedFee, FractionalFee, RoyaltyFee,
    CustomFees, ValidatedCustomFees, to_network_fee
)
from ledgerfees.requests import (  # noqa: E402
    Sender, DaoConfig, RequestEnvelope, TokenCreateRequest, FeeScheduleUpdateRequest
)

__all__ = [
    "config_registry",
    "system_config",
    "log",
    "Fraction",
    "FeeCollector",
    "FixedFee",
    "FractionalFee",
    "RoyaltyFee",
    "CustomFees",
    "ValidatedCustomFees",
    "to_network_fee",
    "Sender",
    "DaoConfig",
    "RequestEnvelope",
    "TokenCreateRequest",
    "FeeScheduleUpdateRequest"
]
