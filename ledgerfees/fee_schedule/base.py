from dataclasses import dataclass
from typing import Any, Dict, Union

from ..core.identifiers import AccountId
from .validators import FeeValidator


@dataclass(frozen=True)
class FeeCollector:
    """
    Collector settings shared by every fee variant.

    ``all_collectors_are_exempt`` excludes every account that is a collector of
    any fee on the token from paying this fee. The ledger enforces it; it is
    carried through to the network fee unchanged.
    """
    account_id: AccountId
    all_collectors_are_exempt: bool = False

    def __post_init__(self):
        object.__setattr__(
            self, "account_id",
            FeeValidator.validate_account_id(self.account_id, "collector_account_id")
        )
        FeeValidator.validate_flag("all_collectors_are_exempt", self.all_collectors_are_exempt)

    @classmethod
    def of(cls, account_id: Union[AccountId, str], all_collectors_are_exempt: bool = False) -> "FeeCollector":
        return cls(account_id, all_collectors_are_exempt)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeeCollector":
        FeeValidator.validate_mapping("collector", data)
        return cls(
            account_id=data.get("collector_account_id", ""),
            all_collectors_are_exempt=data.get("all_collectors_are_exempt", False)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "collector_account_id": str(self.account_id),
            "all_collectors_are_exempt": self.all_collectors_are_exempt
        }
