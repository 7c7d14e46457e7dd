# ordwallet

Building blocks for an ordinal-aware bitcoin wallet. The library covers
outpoints, sat locations and inscription ids. It parses and encodes
addresses and computes dust limits. It serializes transactions and gives
their sizes and ids, and it computes fees. It can also find listed sats
among a wallet's outputs and compute the hand angles of the block-height
clock. The library has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Outpoints, satpoints and inscription ids

`ordwallet.primitives` has three frozen, ordered value types. Each has a
`parse` static method that raises `ValueError` on malformed text. `str()`
gives the same text form back.

```python
from ordwallet.primitives import InscriptionId, OutPoint, SatPoint

outpoint = OutPoint.parse("1" * 64 + ":1")          # <txid>:<vout>
satpoint = SatPoint.parse(f"{outpoint}:0")          # <txid>:<vout>:<offset>
inscription = InscriptionId.parse("1" * 64 + "i1")  # <txid>i<index>

OutPoint.null().is_null()   # True: the outpoint that coinbase inputs spend
```

## Addresses

`ordwallet.address.Address.parse` accepts base58 (P2PKH, P2SH), bech32 and
bech32m addresses for mainnet, testnet and regtest. It raises `AddressError`,
a `ValueError`, for invalid input.

```python
from ordwallet.address import Address, Network, dust_value

recipient = Address.parse("tb1q6en7qjxgw4ev8xwx94pzdry6a6ky7wlfeqzunz")
script = recipient.script_pubkey()       # output script bytes
dust_value(script)                       # 294
recipient.is_valid_for_network(Network.SIGNET)   # True
str(recipient)                           # re-encodes the address
```

## Transactions and fees

`ordwallet.transaction` has the frozen dataclasses `TxIn`, `TxOut` and
`Transaction`, and `FeeRate`, a rate in sats per virtual byte.
`FeeRate.fee(vsize)` rounds up. `TxIn` defaults to the null outpoint, an
empty script, no witness and a sequence that signals replace-by-fee.

```python
from ordwallet.address import Address
from ordwallet.primitives import OutPoint
from ordwallet.transaction import FeeRate, Transaction, TxIn, TxOut

recipient = Address.parse("tb1q6en7qjxgw4ev8xwx94pzdry6a6ky7wlfeqzunz")
tx = Transaction(
    inputs=[TxIn(OutPoint.parse("1" * 64 + ":1"))],
    outputs=[TxOut(4_901, recipient.script_pubkey())],
)

tx.serialize()            # consensus bytes, witness included when present
tx.size(), tx.weight(), tx.vsize()
tx.txid()                 # hex, display byte order
tx.is_explicitly_rbf()    # True
FeeRate(1.0).fee(tx.vsize())
```

## Finding sats

`ordwallet.sats.sats_from_tsv(utxos, tsv)` takes a list of
`(OutPoint, [(start, end), ...])` pairs and a tab-separated text. It returns
`(OutPoint, text)` pairs for every sat in the first column that falls in one
of the half-open ranges, in order of sat number. Blank lines and lines
starting with `#` are skipped. A first column that is not a sat number raises
`TsvParseError`. The error carries the value, the 1-based line number and the
reason.

```python
from ordwallet.primitives import OutPoint
from ordwallet.sats import sats_from_tsv

outpoint = OutPoint.parse("1" * 64 + ":1")
sats_from_tsv([(outpoint, [(0, 2)])], "1\n0\n")
# [(outpoint, "0"), (outpoint, "1")]
```

## Block clock

`ordwallet.clock.clock_angles(height)` returns a `Clock` with the height and
three angles in degrees. `hour` is the position in the subsidy schedule,
`minute` the position in the halving epoch, and `second` the position in the
difficulty period.

```python
from ordwallet.clock import clock_angles

clock_angles(1008).second    # 180.0
clock_angles(52_500).minute  # 90.0
```

## Counting nouns

```python
from ordwallet.tally import tally

tally("output", 1)   # "1 output"
tally("output", 2)   # "2 outputs"
```

## What this package does not do

- It does no coin selection. It does not assemble a transaction that moves a
  chosen sat to a recipient, and it does not check such a transaction against
  the ordinal rules. You construct `Transaction` objects yourself.
- It does not sign transactions, talk to a bitcoin node, keep an index or
  store wallet state.
- It has no command-line program.