from http import HTTPStatus

import pytest

from anunaya.errors import (
    ApiError,
    IndexOutOfBoundsError,
    LockError,
    MempoolFullError,
    SequencerError,
    SignatureError,
    TxStoreError,
)


@pytest.mark.parametrize(
    "error_class, message",
    [
        (MempoolFullError, "Mempool is full"),
        (IndexOutOfBoundsError, "Index out of bounds"),
        (LockError, "Failed to acquire lock"),
    ],
)
def test_store_error_messages(error_class, message):
    error = error_class()
    assert str(error) == message
    assert isinstance(error, TxStoreError)
    assert isinstance(error, SequencerError)


def test_signature_error_is_sequencer_error():
    error = SignatureError("bad signature")
    assert isinstance(error, SequencerError)
    assert str(error) == "bad signature"


def test_api_error_from_sequencer_error():
    api_error = ApiError.from_sequencer_error(MempoolFullError())
    assert api_error.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert api_error.message == "Mempool is full"


def test_api_error_from_generic_error_keeps_message():
    api_error = ApiError.from_sequencer_error(
        SequencerError("Failed to decode transaction")
    )
    assert api_error.message == "Failed to decode transaction"
    assert str(api_error) == "Failed to decode transaction"