"""
Request envelope shared by every ledger request.

Each request may carry an optional ``sender`` authorization block and an
optional ``dao`` block recording the governance decision that approved it.
Authorization itself is checked by the execution layer; the envelope only
guarantees the shapes are well formed.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ..core.exceptions import RequestValidationError, StructuralValidationError
from ..core.identifiers import AccountId, TopicId

_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]+$")
# raw ED25519, compressed ECDSA, DER ED25519, DER compressed ECDSA(secp256k1)
_PUBLIC_KEY_BYTE_LENGTHS = (32, 33, 44, 47)
_TOPIC_ID_PATTERN = re.compile(r"^0\.0\.\d+$")
CONSENSUS_TIMESTAMP_PATTERN = re.compile(r"^\d+\.\d{9}$")


def require_mapping(request_type: str, field: str, value) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise RequestValidationError(request_type, field, type(value).__name__, "must be a mapping")
    return value


@dataclass(frozen=True)
class PublicKey:
    """Hex-encoded ED25519 or ECDSA public key, raw or DER."""
    key_hex: str

    def __post_init__(self):
        key_hex = self.key_hex
        if not isinstance(key_hex, str):
            raise RequestValidationError("Sender", "key", key_hex, "public key must be a hex string")
        if key_hex.startswith("0x"):
            key_hex = key_hex[2:]
        if not _HEX_PATTERN.match(key_hex) or len(key_hex) % 2:
            raise RequestValidationError("Sender", "key", self.key_hex, "public key must be hex encoded")
        if len(key_hex) // 2 not in _PUBLIC_KEY_BYTE_LENGTHS:
            raise RequestValidationError(
                "Sender", "key", self.key_hex,
                f"public key must be {', '.join(map(str, _PUBLIC_KEY_BYTE_LENGTHS))} bytes long"
            )
        object.__setattr__(self, "key_hex", key_hex.lower())

    def to_payload(self) -> str:
        return self.key_hex


@dataclass(frozen=True)
class KeyList:
    """A list of keys, optionally satisfied by a threshold of signatures."""
    keys: Tuple[Union[PublicKey, "KeyList"], ...]
    threshold: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.keys, (str, bytes, dict)) or not isinstance(self.keys, Iterable):
            raise RequestValidationError(
                "Sender", "key", type(self.keys).__name__, "key list must be a sequence of keys"
            )
        keys = tuple(self.keys)
        if not keys:
            raise RequestValidationError("Sender", "key", None, "key list cannot be empty")
        for key in keys:
            if not isinstance(key, (PublicKey, KeyList)):
                raise RequestValidationError(
                    "Sender", "key", type(key).__name__, "key list entries must be PublicKey or KeyList"
                )
        if self.threshold is not None and (
                isinstance(self.threshold, bool) or not isinstance(self.threshold, int)
                or not 1 <= self.threshold <= len(keys)):
            raise RequestValidationError(
                "Sender", "key.threshold", self.threshold, f"threshold must be between 1 and {len(keys)}"
            )
        object.__setattr__(self, "keys", keys)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "keys": [key.to_payload() for key in self.keys],
            "threshold": self.threshold
        }


Key = Union[PublicKey, KeyList]


def key_from_payload(data: Union[str, Dict[str, Any]]) -> Key:
    if isinstance(data, dict):
        keys = data.get("keys") or ()
        if not isinstance(keys, (list, tuple)):
            raise RequestValidationError(
                "Sender", "key", type(keys).__name__, "key list must be a sequence of keys"
            )
        return KeyList(
            keys=tuple(key_from_payload(item) for item in keys),
            threshold=data.get("threshold")
        )
    return PublicKey(data)


@dataclass(frozen=True)
class Sender:
    """Who signs the request: a key, an account, or both."""
    key: Optional[Key] = None
    account_id: Optional[AccountId] = None

    def __post_init__(self):
        if self.key is not None and not isinstance(self.key, (PublicKey, KeyList)):
            raise RequestValidationError(
                "Sender", "key", type(self.key).__name__, "must be a PublicKey or KeyList instance"
            )
        if self.account_id is not None:
            try:
                object.__setattr__(self, "account_id", AccountId.parse(self.account_id, "account_id"))
            except StructuralValidationError as e:
                raise RequestValidationError("Sender", "account_id", e.value, e.reason) from e

    def to_payload(self) -> Dict[str, Any]:
        return {
            "key": self.key.to_payload() if self.key is not None else None,
            "account_id": str(self.account_id) if self.account_id is not None else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sender":
        require_mapping("Sender", "payload", data)
        key = data.get("key")
        return cls(
            key=key_from_payload(key) if key else None,
            account_id=data.get("account_id") or data.get("id")
        )


@dataclass(frozen=True)
class DaoConfig:
    """Governance record: the topic and consensus timestamp of the approving vote."""
    topic_id: str
    consensus_timestamp: str

    def __post_init__(self):
        if not isinstance(self.topic_id, str) or not _TOPIC_ID_PATTERN.match(self.topic_id):
            raise RequestValidationError(
                "DaoConfig", "topic_id", self.topic_id, 'Topic ID must be in format "0.0.{number}"'
            )
        if not isinstance(self.consensus_timestamp, str) \
                or not CONSENSUS_TIMESTAMP_PATTERN.match(self.consensus_timestamp):
            raise RequestValidationError(
                "DaoConfig", "consensus_timestamp", self.consensus_timestamp,
                'Consensus timestamp must be in format "seconds.nanoseconds" (e.g. 1234567890.123456789)'
            )

    @property
    def topic(self) -> TopicId:
        return TopicId.from_string(self.topic_id, "topic_id")

    def to_payload(self) -> Dict[str, str]:
        return {"topicId": self.topic_id, "consensusTimestamp": self.consensus_timestamp}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DaoConfig":
        require_mapping("DaoConfig", "payload", data)
        return cls(
            topic_id=data.get("topicId", data.get("topic_id")),
            consensus_timestamp=data.get("consensusTimestamp", data.get("consensus_timestamp"))
        )


@dataclass(frozen=True)
class RequestEnvelope:
    """Optional sender and governance blocks composed into every request."""
    sender: Optional[Sender] = None
    dao: Optional[DaoConfig] = None

    def __post_init__(self):
        if self.sender is not None and not isinstance(self.sender, Sender):
            raise RequestValidationError("RequestEnvelope", "sender", type(self.sender).__name__, "must be a Sender")
        if self.dao is not None and not isinstance(self.dao, DaoConfig):
            raise RequestValidationError("RequestEnvelope", "dao", type(self.dao).__name__, "must be a DaoConfig")

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.sender is not None:
            payload["sender"] = self.sender.to_payload()
        if self.dao is not None:
            payload["dao"] = self.dao.to_payload()
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RequestEnvelope":
        require_mapping("RequestEnvelope", "payload", data)
        sender = data.get("sender")
        dao = data.get("dao")
        return cls(
            sender=Sender.from_dict(require_mapping("RequestEnvelope", "sender", sender)) if sender else None,
            dao=DaoConfig.from_dict(require_mapping("RequestEnvelope", "dao", dao)) if dao else None
        )
