"""Sequencer context: configuration and the mempool of accepted transactions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from anunaya.errors import SequencerError
from anunaya.store import TransactionStore
from anunaya.transaction import SignedTransaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequencerConfig:
    """Configuration of the sequencer."""


@dataclass
class SequencerContext:
    """State shared by the sequencer for its whole lifetime."""

    config: SequencerConfig
    store: TransactionStore

    def accept_tx(self, tx: bytes) -> None:
        """Decode an encoded signed transaction and add it to the mempool."""
        tx = bytes(tx)
        logger.info("Accepting tx: 0x%s", tx.hex())
        signed_tx = SignedTransaction.decode(tx)
        if signed_tx is None:
            raise SequencerError("Failed to decode transaction")
        self.store.push(signed_tx)