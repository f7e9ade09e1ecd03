"""Bounded, thread-safe mempool of signed transactions."""

from __future__ import annotations

import threading
from collections import deque

from anunaya.errors import IndexOutOfBoundsError, MempoolFullError
from anunaya.transaction import SignedTransaction


class TransactionStore:
    """A FIFO mempool holding at most ``mempool_max_txs_count`` transactions."""

    def __init__(self, mempool_max_txs_count: int) -> None:
        self.mempool_max_txs_count = mempool_max_txs_count
        self._mempool: deque[SignedTransaction] = deque()
        self._lock = threading.Lock()

    def push(self, transaction: SignedTransaction) -> None:
        """Append a transaction; raises MempoolFullError when full."""
        with self._lock:
            if len(self._mempool) >= self.mempool_max_txs_count:
                raise MempoolFullError()
            self._mempool.append(transaction)

    def remove(self, index: int) -> SignedTransaction:
        """Remove and return the transaction at ``index``."""
        with self._lock:
            if not 0 <= index < len(self._mempool):
                raise IndexOutOfBoundsError()
            transaction = self._mempool[index]
            del self._mempool[index]
            return transaction

    def size(self) -> int:
        """Number of transactions in the mempool."""
        with self._lock:
            return len(self._mempool)

    def peek_front(self) -> SignedTransaction | None:
        """The oldest transaction, without removing it."""
        with self._lock:
            return self._mempool[0] if self._mempool else None

    def pop_front(self) -> SignedTransaction | None:
        """Remove and return the oldest transaction, if any."""
        with self._lock:
            return self._mempool.popleft() if self._mempool else None

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"TransactionStore(size={self.size()}, max={self.mempool_max_txs_count})"