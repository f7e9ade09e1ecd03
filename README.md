# anunaya

Building blocks for writing rollups in Python.

- **Hashing** (`anunaya.hashing`): `keccak256(data)` and `KeccakHasher.hash(data)`,
  both returning a 32-byte Keccak-256 digest.
- **Blocks** (`anunaya.block`): `BlockHeader(number, state_root, parent_hash)`
  with a 68-byte `encode()` (parent hash, the number as 4 little-endian bytes,
  state root) and `hash()` of that encoding with Keccak-256 by default.
  `Block(header, transactions)` holds a header and its transactions and
  round-trips through `to_dict`/`to_json` and `from_dict`/`from_json`; the
  latter take a function that turns each transaction's dict back into a
  transaction.
- **State machines** (`anunaya.state_machine`): the abstract `AppState`
  (`state_root()`, `previous_state_root()`) and `StateTransitionFunction`
  (`validate_block(state, block)`, `apply_block(state, block)`).
- **Example token application** (`anunaya.token_dapp`): `Account`,
  `TokenTransaction`, `TokenDappState` (an `AppState` with JSON-friendly
  `to_dict`/`from_dict`) and `TokenDappRollupError`.
- **Prime fields** (`anunaya.field`): `PrimeField` and `FieldElement` with
  `+ - * /`, negation, `**` and `inverse()`, plus the predefined fields
  `BN254_FQ`, `BN254_FR`, `BLS12_377_FQ`, `BLS12_381_FQ`, `BLS12_381_FR`
  and `PALLAS_FR`.
- **Erasure coding** (`anunaya.erasure`): a Reed–Solomon code. `encode`
  evaluates the data polynomial at `1..n`; `decode` rebuilds the data from
  any `data_size` shards by Lagrange interpolation.
- **Verifiable delay function** (`anunaya.vdf`): the MinRoot VDF over
  `BN254_FR`, `BLS12_381_FR` and `PALLAS_FR`.
- **Signatures** (`anunaya.signing`): secp256k1 `PrivateKeySigner` and
  `Signature` for Ethereum-style signed messages, with address recovery,
  `hash_message` and `to_checksum_address`.
- **Sequencer** (`anunaya.transaction`, `anunaya.store`, `anunaya.sequencer`,
  `anunaya.server`): signed transactions, a bounded thread-safe mempool and
  an HTTP API for submitting transactions.

## Installation

```
pip install .
```

## Blocks

```python
from anunaya.block import Block, BlockHeader
from anunaya.hashing import keccak256
from anunaya.token_dapp import TokenTransaction

header = BlockHeader(number=1, state_root=keccak256(b"state"), parent_hash=keccak256(b"parent"))
assert len(header.encode()) == 68

tx = TokenTransaction(amount=5, destination=bytes(20), nonce=0)
block = Block(header, [tx])
again = Block.from_json(block.to_json(), TokenTransaction.from_dict)
assert again.header == header
```

## Erasure coding

```python
from anunaya.field import BN254_FQ as F
from anunaya.erasure import encode, decode

data = [F(1), F(2)]                   # the polynomial 2x + 1
shards = encode(data, parity_size=1)  # values 3, 5, 7 at indices 1, 2, 3
assert decode(shards[1:], 2) == data
```

`decode` raises `InsufficientSharesError` (an `ErasureCodeError`) when it is
given fewer shards than `data_size`, and `ErasureCodeError` when the shards
used have duplicate indices.

## MinRoot VDF

```python
from anunaya.field import BN254_FR as F
from anunaya.vdf import MinRoot, MinRootElement

vdf = MinRoot(F)
pp = vdf.setup(100)
start = MinRootElement(F.one(), F.one())
output, proof = vdf.eval(pp, start)
vdf.verify(pp, start, output, proof)  # raises VerificationError on mismatch
```

`MinRoot` raises `ValueError` for a field it has no exponent for, unless one
is passed as `exp_coef`.

## Signed transactions

```python
from anunaya.signing import PrivateKeySigner
from anunaya.transaction import Transaction, SignedTransaction

signer = PrivateKeySigner.random()
tx = Transaction(amount=100, destination=signer.address(), nonce=1)
signed = SignedTransaction(transaction=tx, signature=signer.sign_message(tx.encode()))
assert signed.recover() == signer.address()
assert SignedTransaction.decode(signed.encode()) == signed
```

## Mempool

`TransactionStore(max_count)` is a FIFO queue of signed transactions.
`push` raises `MempoolFullError` when full, `remove(index)` raises
`IndexOutOfBoundsError` for a bad index, and `peek_front`/`pop_front`
return `None` when empty. Both errors are `TxStoreError`s, which are
`SequencerError`s. `SequencerContext.accept_tx(tx)` decodes encoded
transaction bytes and pushes them, raising `SequencerError` if they do not
decode.

## Running the sequencer

```
anunaya-sequencer [--host HOST] [--port PORT]
```

The server listens on `0.0.0.0:3033` by default, logs at info level, and
serves:

- `GET /api/v1/info`: returns `{"version": "v0.0.1-rc1"}`.
- `POST /api/v1/submit_transaction`: takes a signed transaction as JSON
  (`Content-Type: application/json`) and adds it to the mempool, answering
  `{"tx_commit": ...}`. A wrong content type gives 415, malformed JSON 400,
  and a body that is not a signed transaction 422. The mempool holds at most
  100 transactions; when it is full the request fails with status 500.

Responses carry permissive CORS headers. `build_app(ctx)` returns the
`aiohttp` application for embedding, and `serve(ctx, host, port)` runs it
until cancelled.

## What it does not do

- The mempool lives in memory only; nothing is stored on disk.
- The sequencer does not check signatures when it accepts a transaction,
  and it does not build or publish batches or blocks.
- The token application defines its accounts, transactions and state, but
  no `StateTransitionFunction` for them: blocks are not validated or applied.

## Tests

```
pip install .[test]
pytest
```