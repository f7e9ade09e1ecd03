import pytest

from anunaya.block import Block, BlockHeader
from anunaya.hashing import keccak256
from anunaya.state_machine import AppState
from anunaya.token_dapp import (
    Account,
    TokenDappRollupError,
    TokenDappState,
    TokenTransaction,
)

EIP55_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
ADDRESS_A = bytes(range(20))
ADDRESS_B = bytes([0xFF] * 20)


def test_error_message():
    error = TokenDappRollupError("insufficient balance")
    assert str(error) == "insufficient balance"
    assert isinstance(error, Exception)


def test_default_state_roots():
    state = TokenDappState()
    assert state.state_root() == bytes(32)
    assert state.previous_state_root() is None
    assert isinstance(state, AppState) and state.accounts == {}


def test_account_defaults_to_zero():
    account = Account()
    assert (account.balance, account.nonce) == (0, 0)


def test_account_rejects_negative_balance():
    with pytest.raises(ValueError):
        Account(balance=-1)


def test_transaction_destination_is_checksummed():
    tx = TokenTransaction.from_dict(
        {"amount": 100, "destination": EIP55_ADDRESS.lower(), "nonce": 1}
    )
    assert tx.to_dict()["destination"] == EIP55_ADDRESS


def test_transaction_round_trip():
    tx = TokenTransaction(amount=100, destination=ADDRESS_A, nonce=1)
    assert TokenTransaction.from_dict(tx.to_dict()) == tx


@pytest.mark.parametrize("amount", [-1, 2**64])
def test_transaction_amount_range(amount):
    with pytest.raises(ValueError):
        TokenTransaction(amount=amount, destination=ADDRESS_A, nonce=0)


def test_transaction_bad_address_rejected():
    with pytest.raises(ValueError):
        TokenTransaction.from_dict({"amount": 1, "destination": "0x1234", "nonce": 0})


def test_transaction_missing_field_rejected():
    with pytest.raises(ValueError):
        TokenTransaction.from_dict({"amount": 1, "nonce": 0})


def test_state_round_trip():
    state = TokenDappState(
        accounts={ADDRESS_B: Account(5, 1), ADDRESS_A: Account(10, 2)},
        current_root=keccak256(b"state"),
        prev_root=keccak256(b"parent"),
        block_hash=keccak256(b"block"),
    )
    restored = TokenDappState.from_dict(state.to_dict())
    assert restored == state
    assert restored.previous_state_root() == keccak256(b"parent")


def test_state_accounts_serialized_in_address_order():
    state = TokenDappState(accounts={ADDRESS_B: Account(), ADDRESS_A: Account()})
    keys = [key.lower() for key in state.to_dict()["accounts"]]
    assert keys == ["0x" + ADDRESS_A.hex(), "0x" + ADDRESS_B.hex()]


def test_state_rejects_short_root():
    with pytest.raises(ValueError):
        TokenDappState(current_root=b"\x00" * 31)


def test_block_of_token_transactions_round_trip():
    header = BlockHeader(1, keccak256(b"state"), keccak256(b"parent"))
    block = Block(header, [TokenTransaction(100, ADDRESS_A, 1)])
    restored = Block.from_json(block.to_json(), TokenTransaction.from_dict)
    assert restored == block