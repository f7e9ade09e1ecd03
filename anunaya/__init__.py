"""Rollup building blocks: blocks, prime-field erasure coding, the MinRoot VDF, signed transactions and a sequencer."""

__version__ = "0.1.0"