"""
Ledger entity identifiers.

Every ledger entity (account, token, topic) is addressed by a
``shard.realm.num`` triple. The identifier classes share one parser but are
distinct types, so a token id never compares equal to an account id with the
same numbers.
"""

import re
from dataclasses import dataclass
from typing import Union

from .exceptions import StructuralValidationError

_ENTITY_ID_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True)
class EntityId:
    """A ``shard.realm.num`` ledger entity identifier."""
    shard: int
    realm: int
    num: int

    def __post_init__(self):
        for part in ("shard", "realm", "num"):
            value = getattr(self, part)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise StructuralValidationError(
                    part, value, "must be a non-negative integer", bound=">= 0"
                )

    @classmethod
    def from_string(cls, text: str, field: str = None) -> "EntityId":
        """
        Parse a ``shard.realm.num`` string.

        Parameters
        ----------
        text : str
            Identifier text, e.g. ``"0.0.12345"``
        field : str, optional
            Field name reported when parsing fails

        Raises
        ------
        StructuralValidationError
            If the text is not a well-formed identifier
        """
        field = field or cls.__name__
        if not isinstance(text, str):
            raise StructuralValidationError(
                field, text, f"{cls.__name__} must be a 'shard.realm.num' string"
            )
        match = _ENTITY_ID_PATTERN.match(text)
        if match is None:
            raise StructuralValidationError(
                field, text, f"{cls.__name__} must be in format 'shard.realm.num'"
            )
        shard, realm, num = (int(part) for part in match.groups())
        return cls(shard, realm, num)

    @classmethod
    def parse(cls, value: Union["EntityId", str], field: str = None) -> "EntityId":
        """Accept an identifier of this type or its string form."""
        if isinstance(value, cls):
            return value
        if isinstance(value, EntityId):
            raise StructuralValidationError(
                field or cls.__name__, str(value),
                f"expected {cls.__name__}, got {type(value).__name__}"
            )
        return cls.from_string(value, field)

    def __str__(self) -> str:
        return f"{self.shard}.{self.realm}.{self.num}"


class AccountId(EntityId):
    """Identifier of a ledger account."""


class TokenId(EntityId):
    """Identifier of a ledger token."""


class TopicId(EntityId):
    """Identifier of a consensus topic."""
