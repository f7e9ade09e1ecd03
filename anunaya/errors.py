"""Errors raised by the sequencer and its transaction store."""

from __future__ import annotations

from http import HTTPStatus


class SequencerError(Exception):
    """Base error of the sequencer."""


class SignatureError(SequencerError):
    """A transaction signature is malformed or cannot be recovered."""


class TxStoreError(SequencerError):
    """Error raised by the transaction store."""


class MempoolFullError(TxStoreError):
    """The mempool holds its maximum number of transactions."""

    def __init__(self, message: str = "Mempool is full") -> None:
        super().__init__(message)


class IndexOutOfBoundsError(TxStoreError):
    """An index does not refer to a transaction in the mempool."""

    def __init__(self, message: str = "Index out of bounds") -> None:
        super().__init__(message)


class LockError(TxStoreError):
    """The mempool lock could not be acquired."""

    def __init__(self, message: str = "Failed to acquire lock") -> None:
        super().__init__(message)


class ApiError(Exception):
    """Error returned by an HTTP handler: a status code and a message."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = int(status)
        self.message = message

    @classmethod
    def from_sequencer_error(cls, error: Exception) -> ApiError:
        """Report a sequencer error as an internal server error."""
        return cls(HTTPStatus.INTERNAL_SERVER_ERROR, str(error))

    def __repr__(self) -> str:
        return f"ApiError({self.status}, {self.message!r})"