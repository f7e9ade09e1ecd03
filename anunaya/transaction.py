"""Transfer transactions accepted by the sequencer, signed and unsigned."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from anunaya.signing import Signature, to_checksum_address

_U64_MAX = 2**64 - 1


def _check_u64(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{name} out of range: {value}")
    return value


def _parse_address(value: Any) -> bytes:
    if not isinstance(value, str):
        raise ValueError(f"expected an address string, got {value!r}")
    text = value[2:] if value.startswith(("0x", "0X")) else value
    try:
        raw = bytes.fromhex(text)
    except ValueError as exc:
        raise ValueError(f"invalid address: {value!r}") from exc
    if len(raw) != 20:
        raise ValueError(f"address must be 20 bytes, got {len(raw)}")
    return raw


def _to_json_bytes(data: dict[str, Any]) -> bytes:
    return json.dumps(data, separators=(",", ":")).encode("utf-8")


@dataclass(frozen=True)
class Transaction:
    """Transfer of ``amount`` to ``destination`` with a sender nonce."""

    amount: int
    destination: bytes
    nonce: int

    def __post_init__(self) -> None:
        _check_u64("amount", self.amount)
        _check_u64("nonce", self.nonce)
        if not isinstance(self.destination, (bytes, bytearray)) or len(
            self.destination
        ) != 20:
            raise ValueError("destination must be 20 bytes")
        object.__setattr__(self, "destination", bytes(self.destination))

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "destination": to_checksum_address(self.destination),
            "nonce": self.nonce,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transaction:
        if not isinstance(data, dict):
            raise ValueError("transaction must be an object")
        try:
            return cls(
                amount=data["amount"],
                destination=_parse_address(data["destination"]),
                nonce=data["nonce"],
            )
        except KeyError as exc:
            raise ValueError(f"missing transaction field: {exc.args[0]}") from exc

    def encode(self) -> bytes:
        """The compact JSON bytes that are signed."""
        return _to_json_bytes(self.to_dict())


@dataclass(frozen=True)
class SignedTransaction:
    """A transaction with the signature of its sender."""

    transaction: Transaction
    signature: Signature

    def to_dict(self) -> dict[str, Any]:
        return {
            "transaction": self.transaction.to_dict(),
            "signature": self.signature.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SignedTransaction:
        if not isinstance(data, dict):
            raise ValueError("signed transaction must be an object")
        try:
            return cls(
                Transaction.from_dict(data["transaction"]),
                Signature.from_dict(data["signature"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing field: {exc.args[0]}") from exc

    def encode(self) -> bytes:
        """Compact JSON bytes of the signed transaction."""
        return _to_json_bytes(self.to_dict())

    @classmethod
    def decode(cls, data: bytes | str) -> SignedTransaction | None:
        """Parse JSON bytes; return None if they are not a signed transaction."""
        try:
            return cls.from_dict(json.loads(data))
        except (ValueError, TypeError):
            return None

    def recover(self) -> bytes:
        """Recover the address of the signer; raises SignatureError."""
        return self.signature.recover_address_from_msg(self.transaction.encode())