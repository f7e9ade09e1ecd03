"""Keccak-256 hashing used for block headers and addresses."""

from __future__ import annotations

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


class KeccakHasher:
    """Hasher producing 32-byte Keccak-256 digests."""

    output_size = 32

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Hash ``data`` and return the 32-byte digest."""
        return keccak256(data)