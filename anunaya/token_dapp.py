"""Example token rollup: accounts, transfer transactions and state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from anunaya.hashing import keccak256
from anunaya.state_machine import AppState

_U64_MAX = 2**64 - 1


class TokenDappRollupError(Exception):
    """Error raised by the token rollup."""


def _check_u64(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{name} out of range: {value}")
    return value


def _parse_hex(value: Any, length: int) -> bytes:
    if not isinstance(value, str):
        raise ValueError(f"expected a hex string, got {value!r}")
    text = value[2:] if value.startswith(("0x", "0X")) else value
    try:
        raw = bytes.fromhex(text)
    except ValueError as exc:
        raise ValueError(f"invalid hex string: {value!r}") from exc
    if len(raw) != length:
        raise ValueError(f"expected {length} bytes, got {len(raw)}")
    return raw


def _checksum(address: bytes) -> str:
    lower = address.hex()
    digest = keccak256(lower.encode("ascii")).hex()
    return "0x" + "".join(
        char.upper() if int(nibble, 16) >= 8 else char
        for char, nibble in zip(lower, digest)
    )


def _check_address(value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray)) or len(value) != 20:
        raise ValueError("address must be 20 bytes")
    return bytes(value)


def _check_hash(name: str, value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray)) or len(value) != 32:
        raise ValueError(f"{name} must be 32 bytes")
    return bytes(value)


@dataclass
class Account:
    """Token balance and nonce of an account."""

    balance: int = 0
    nonce: int = 0

    def __post_init__(self) -> None:
        _check_u64("balance", self.balance)
        _check_u64("nonce", self.nonce)


@dataclass(frozen=True)
class TokenTransaction:
    """Transfer of ``amount`` tokens to ``destination``."""

    amount: int
    destination: bytes
    nonce: int

    def __post_init__(self) -> None:
        _check_u64("amount", self.amount)
        _check_u64("nonce", self.nonce)
        object.__setattr__(self, "destination", _check_address(self.destination))

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "destination": _checksum(self.destination),
            "nonce": self.nonce,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TokenTransaction:
        try:
            return cls(
                amount=data["amount"],
                destination=_parse_hex(data["destination"], 20),
                nonce=data["nonce"],
            )
        except KeyError as exc:
            raise ValueError(f"missing transaction field: {exc.args[0]}") from exc


@dataclass
class TokenDappState(AppState):
    """Accounts of the token rollup together with its state roots."""

    accounts: dict[bytes, Account] = field(default_factory=dict)
    current_root: bytes = bytes(32)
    prev_root: bytes | None = None
    block_hash: bytes | None = None

    def __post_init__(self) -> None:
        self.current_root = _check_hash("state root", self.current_root)
        if self.prev_root is not None:
            self.prev_root = _check_hash("previous state root", self.prev_root)
        if self.block_hash is not None:
            self.block_hash = _check_hash("block hash", self.block_hash)
        self.accounts = {
            _check_address(address): account
            for address, account in self.accounts.items()
        }

    def state_root(self) -> bytes:
        return self.current_root

    def previous_state_root(self) -> bytes | None:
        return self.prev_root

    def to_dict(self) -> dict[str, Any]:
        return {
            "accounts": {
                _checksum(address): {"balance": account.balance, "nonce": account.nonce}
                for address, account in sorted(self.accounts.items())
            },
            "state_root": "0x" + self.current_root.hex(),
            "prev_state_root": None if self.prev_root is None else "0x" + self.prev_root.hex(),
            "block_hash": None if self.block_hash is None else "0x" + self.block_hash.hex(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TokenDappState:
        try:
            accounts = {
                _parse_hex(address, 20): Account(entry["balance"], entry["nonce"])
                for address, entry in data["accounts"].items()
            }
            prev_root = data.get("prev_state_root")
            block_hash = data.get("block_hash")
            return cls(
                accounts=accounts,
                current_root=_parse_hex(data["state_root"], 32),
                prev_root=None if prev_root is None else _parse_hex(prev_root, 32),
                block_hash=None if block_hash is None else _parse_hex(block_hash, 32),
            )
        except KeyError as exc:
            raise ValueError(f"missing state field: {exc.args[0]}") from exc