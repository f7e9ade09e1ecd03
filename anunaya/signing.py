"""Signing and recovery of Ethereum-style personal messages on secp256k1."""

from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from anunaya.errors import SignatureError
from anunaya.hashing import keccak256

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)
_U256_MAX = 2**256 - 1

_Point = Optional[Tuple[int, int]]


def _point_add(p: _Point, q: _Point) -> _Point:
    if p is None:
        return q
    if q is None:
        return p
    x1, y1 = p
    x2, y2 = q
    if x1 == x2:
        if (y1 + y2) % _P == 0:
            return None
        slope = 3 * x1 * x1 * pow(2 * y1, -1, _P) % _P
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, _P) % _P
    x3 = (slope * slope - x1 - x2) % _P
    y3 = (slope * (x1 - x3) - y1) % _P
    return x3, y3


def _point_mul(scalar: int, point: _Point) -> _Point:
    result: _Point = None
    for bit in bin(scalar)[2:]:
        result = _point_add(result, result)
        if bit == "1":
            result = _point_add(result, point)
    return result


def _address_of(point: Tuple[int, int]) -> bytes:
    x, y = point
    return keccak256(x.to_bytes(32, "big") + y.to_bytes(32, "big"))[12:]


def to_checksum_address(address: bytes) -> str:
    """Format a 20-byte address as mixed-case checksummed hex."""
    if not isinstance(address, (bytes, bytearray)) or len(address) != 20:
        raise ValueError("address must be 20 bytes")
    lower = bytes(address).hex()
    digest = keccak256(lower.encode("ascii")).hex()
    return "0x" + "".join(
        char.upper() if int(nibble, 16) >= 8 else char
        for char, nibble in zip(lower, digest)
    )


def hash_message(message: bytes) -> bytes:
    """Hash ``message`` with the Ethereum signed-message prefix."""
    message = bytes(message)
    prefix = b"\x19Ethereum Signed Message:\n" + str(len(message)).encode("ascii")
    return keccak256(prefix + message)


def _parse_quantity(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"invalid quantity: {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not value.startswith(("0x", "0X")):
        raise ValueError(f"invalid quantity: {value!r}")
    try:
        return int(value[2:], 16)
    except ValueError as exc:
        raise ValueError(f"invalid quantity: {value!r}") from exc


@dataclass(frozen=True)
class Signature:
    """An ECDSA signature with the parity of the nonce point's y coordinate."""

    r: int
    s: int
    y_parity: bool

    def __post_init__(self) -> None:
        for name in ("r", "s"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer")
            if not 0 <= value <= _U256_MAX:
                raise ValueError(f"{name} out of range")
        object.__setattr__(self, "y_parity", bool(self.y_parity))

    def to_dict(self) -> dict[str, Any]:
        return {
            "r": hex(self.r),
            "s": hex(self.s),
            "yParity": "0x1" if self.y_parity else "0x0",
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Signature:
        if not isinstance(data, dict):
            raise ValueError("signature must be an object")
        try:
            r = _parse_quantity(data["r"])
            s = _parse_quantity(data["s"])
        except KeyError as exc:
            raise ValueError(f"missing signature field: {exc.args[0]}") from exc
        if "yParity" in data:
            parity = _parse_quantity(data["yParity"])
        elif "v" in data:
            v = _parse_quantity(data["v"])
            parity = v - 27 if v >= 27 else v
        else:
            raise ValueError("missing signature field: yParity")
        if parity not in (0, 1):
            raise ValueError(f"invalid signature parity: {parity}")
        return cls(r, s, bool(parity))

    def recover_address_from_msg(self, message: bytes) -> bytes:
        """Recover the 20-byte address that signed ``message``."""
        return self._recover_address(hash_message(message))

    def _recover_address(self, digest: bytes) -> bytes:
        r, s = self.r, self.s
        if not (1 <= r < _N and 1 <= s < _N):
            raise SignatureError("signature scalar out of range")
        alpha = (pow(r, 3, _P) + 7) % _P
        beta = pow(alpha, (_P + 1) // 4, _P)
        if beta * beta % _P != alpha:
            raise SignatureError("signature r is not on the curve")
        y = beta if (beta & 1) == int(self.y_parity) else _P - beta
        z = int.from_bytes(digest, "big")
        r_inv = pow(r, -1, _N)
        public = _point_add(
            _point_mul(s * r_inv % _N, (r, y)),
            _point_mul(-z * r_inv % _N, _G),
        )
        if public is None:
            raise SignatureError("recovered public key is the point at infinity")
        return _address_of(public)


def _nonces(scalar: int, digest: bytes) -> Iterator[int]:
    """Deterministic nonce candidates as specified by RFC 6979 with SHA-256."""
    key_bytes = scalar.to_bytes(32, "big")
    hashed = (int.from_bytes(digest, "big") % _N).to_bytes(32, "big")
    v = b"\x01" * 32
    k = b"\x00" * 32

    def mac(key: bytes, data: bytes) -> bytes:
        return hmac.new(key, data, hashlib.sha256).digest()

    k = mac(k, v + b"\x00" + key_bytes + hashed)
    v = mac(k, v)
    k = mac(k, v + b"\x01" + key_bytes + hashed)
    v = mac(k, v)
    while True:
        v = mac(k, v)
        candidate = int.from_bytes(v, "big")
        if 1 <= candidate < _N:
            yield candidate
        k = mac(k, v + b"\x00")
        v = mac(k, v)


class PrivateKeySigner:
    """A secp256k1 private key that signs personal messages."""

    def __init__(self, scalar: int | bytes) -> None:
        if isinstance(scalar, (bytes, bytearray)):
            if len(scalar) != 32:
                raise ValueError("private key must be 32 bytes")
            scalar = int.from_bytes(scalar, "big")
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            raise TypeError("private key must be an integer or 32 bytes")
        if not 1 <= scalar < _N:
            raise ValueError("private key out of range")
        self._scalar = scalar
        public = _point_mul(scalar, _G)
        assert public is not None
        self._address = _address_of(public)

    @classmethod
    def random(cls) -> PrivateKeySigner:
        """Create a signer with a fresh random key."""
        return cls(secrets.randbelow(_N - 1) + 1)

    def address(self) -> bytes:
        """The 20-byte address of this key."""
        return self._address

    def sign_message(self, message: bytes) -> Signature:
        """Sign ``message`` with the signed-message prefix; s is kept low."""
        digest = hash_message(message)
        z = int.from_bytes(digest, "big")
        for k in _nonces(self._scalar, digest):
            point = _point_mul(k, _G)
            assert point is not None
            r = point[0] % _N
            if r == 0:
                continue
            s = pow(k, -1, _N) * (z + r * self._scalar) % _N
            if s == 0:
                continue
            parity = point[1] & 1
            if s > _N // 2:
                s = _N - s
                parity ^= 1
            return Signature(r, s, bool(parity))
        raise SignatureError("no valid nonce found")

    def __repr__(self) -> str:
        return f"PrivateKeySigner({to_checksum_address(self._address)})"