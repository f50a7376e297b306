from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict

from .validators import FeeValidator


@dataclass(frozen=True)
class Fraction:
    """
    Proportional rate used by fractional and royalty fees.

    The fraction is ``numerator / denominator``; a 2.5% fee is
    ``Fraction(25, 1000)``. Division is left to the fees that consume it.
    """
    numerator: int
    denominator: int

    def __post_init__(self):
        FeeValidator.validate_fraction(self.numerator, self.denominator)

    def as_decimal(self) -> Decimal:
        return Decimal(self.numerator) / Decimal(self.denominator)

    def to_dict(self) -> Dict[str, int]:
        return {"numerator": self.numerator, "denominator": self.denominator}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], field: str = "amount") -> "Fraction":
        FeeValidator.validate_mapping(field, data)
        return cls(
            numerator=data.get("numerator", 0),
            denominator=data.get("denominator", 1)
        )

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
