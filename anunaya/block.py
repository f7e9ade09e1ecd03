"""Block headers and blocks of a rollup chain."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Protocol, TypeVar

from anunaya.hashing import keccak256

_U64_MAX = 2**64 - 1


class _SerializableTransaction(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


TxT = TypeVar("TxT", bound=_SerializableTransaction)


def _encode_hex(value: bytes) -> str:
    return "0x" + value.hex()


def _decode_hex(value: Any) -> bytes:
    if not isinstance(value, str):
        raise ValueError(f"expected a hex string, got {value!r}")
    text = value[2:] if value.startswith(("0x", "0X")) else value
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise ValueError(f"invalid hex string: {value!r}") from exc


@dataclass(frozen=True)
class BlockHeader:
    """Header of a block: its number, state root and parent hash."""

    number: int
    state_root: bytes
    parent_hash: bytes
    hasher: Callable[[bytes], bytes] = field(
        default=keccak256, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise TypeError("block number must be an integer")
        if not 0 <= self.number <= _U64_MAX:
            raise ValueError(f"block number out of range: {self.number}")
        for name in ("state_root", "parent_hash"):
            value = getattr(self, name)
            if not isinstance(value, (bytes, bytearray)):
                raise TypeError(f"{name} must be bytes")
            object.__setattr__(self, name, bytes(value))

    def encode(self) -> bytes:
        """Encode as parent hash, 4-byte little-endian number, state root."""
        number = (self.number & 0xFFFFFFFF).to_bytes(4, "little")
        return self.parent_hash + number + self.state_root

    def hash(self) -> bytes:
        """Hash of the encoded header."""
        return self.hasher(self.encode())

    def to_dict(self) -> dict[str, Any]:
        return {
            "parent_hash": _encode_hex(self.parent_hash),
            "number": self.number,
            "state_root": _encode_hex(self.state_root),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BlockHeader:
        try:
            return cls(
                number=data["number"],
                state_root=_decode_hex(data["state_root"]),
                parent_hash=_decode_hex(data["parent_hash"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing header field: {exc.args[0]}") from exc


@dataclass
class Block(Generic[TxT]):
    """A block header together with its transactions."""

    header: BlockHeader
    transactions: list[TxT] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "transactions": [tx.to_dict() for tx in self.transactions],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], decode_transaction: Callable[[Any], TxT]
    ) -> Block[TxT]:
        try:
            header = BlockHeader.from_dict(data["header"])
            raw_transactions = data["transactions"]
        except KeyError as exc:
            raise ValueError(f"missing block field: {exc.args[0]}") from exc
        if not isinstance(raw_transactions, list):
            raise ValueError("transactions must be a list")
        return cls(header, [decode_transaction(tx) for tx in raw_transactions])

    @classmethod
    def from_json(
        cls, text: str | bytes, decode_transaction: Callable[[Any], TxT]
    ) -> Block[TxT]:
        return cls.from_dict(json.loads(text), decode_transaction)