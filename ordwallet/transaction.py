"""Bitcoin transactions: serialization, sizes, ids and fee rates."""

from __future__ import annotations

import hashlib
import math
import struct
from dataclasses import dataclass, field

from ordwallet.primitives import OutPoint

SEQUENCE_MAX = 0xFFFFFFFF
SEQUENCE_ENABLE_RBF_NO_LOCKTIME = 0xFFFFFFFD
_SEQUENCE_MIN_NO_RBF = 0xFFFFFFFE
_WITNESS_SCALE_FACTOR = 4


def _compact_size(n: int) -> bytes:
    if n < 0xFD:
        return bytes([n])
    if n <= 0xFFFF:
        return b"\xfd" + struct.pack("<H", n)
    if n <= 0xFFFFFFFF:
        return b"\xfe" + struct.pack("<I", n)
    return b"\xff" + struct.pack("<Q", n)


def _var_bytes(data: bytes) -> bytes:
    return _compact_size(len(data)) + data


@dataclass(frozen=True)
class FeeRate:
    """A fee rate in sats per virtual byte."""

    rate: float

    def __post_init__(self) -> None:
        rate = float(self.rate)
        if math.isnan(rate) or math.isinf(rate) or math.copysign(1.0, rate) < 0:
            raise ValueError(f"invalid fee rate: {self.rate}")
        object.__setattr__(self, "rate", rate)

    def fee(self, vsize: int) -> int:
        """Fee in sats for a transaction of ``vsize`` virtual bytes, rounded up."""
        return math.ceil(self.rate * vsize)


@dataclass(frozen=True)
class TxIn:
    """A transaction input."""

    previous_output: OutPoint = field(default_factory=OutPoint.null)
    script_sig: bytes = b""
    sequence: int = SEQUENCE_ENABLE_RBF_NO_LOCKTIME
    witness: tuple[bytes, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "script_sig", bytes(self.script_sig))
        object.__setattr__(self, "witness", tuple(bytes(item) for item in self.witness))
        if not 0 <= self.sequence <= SEQUENCE_MAX:
            raise ValueError(f"sequence out of range: {self.sequence}")

    def _serialize(self) -> bytes:
        outpoint = self.previous_output
        return (
            bytes.fromhex(outpoint.txid)[::-1]
            + struct.pack("<I", outpoint.vout)
            + _var_bytes(self.script_sig)
            + struct.pack("<I", self.sequence)
        )

    def _serialize_witness(self) -> bytes:
        return _compact_size(len(self.witness)) + b"".join(
            _var_bytes(item) for item in self.witness
        )


@dataclass(frozen=True)
class TxOut:
    """A transaction output."""

    value: int
    script_pubkey: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "script_pubkey", bytes(self.script_pubkey))
        if not 0 <= self.value < 2**64:
            raise ValueError(f"output value out of range: {self.value}")

    def _serialize(self) -> bytes:
        return struct.pack("<Q", self.value) + _var_bytes(self.script_pubkey)


@dataclass(frozen=True)
class Transaction:
    """A Bitcoin transaction."""

    version: int = 1
    lock_time: int = 0
    inputs: tuple[TxIn, ...] = ()
    outputs: tuple[TxOut, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

    def _has_witness(self) -> bool:
        return any(tx_in.witness for tx_in in self.inputs)

    def serialize(self, include_witness: bool = True) -> bytes:
        """Consensus encoding, with witness data when ``include_witness`` is set."""
        segwit = include_witness and (not self.inputs or self._has_witness())
        parts = [struct.pack("<i", self.version)]
        if segwit:
            parts.append(b"\x00\x01")
        parts.append(_compact_size(len(self.inputs)))
        parts.extend(tx_in._serialize() for tx_in in self.inputs)
        parts.append(_compact_size(len(self.outputs)))
        parts.extend(tx_out._serialize() for tx_out in self.outputs)
        if segwit:
            parts.extend(tx_in._serialize_witness() for tx_in in self.inputs)
        parts.append(struct.pack("<I", self.lock_time))
        return b"".join(parts)

    def size(self) -> int:
        """Length in bytes of the full serialization."""
        return len(self.serialize(True))

    def weight(self) -> int:
        base = len(self.serialize(False))
        if not self._has_witness():
            return base * _WITNESS_SCALE_FACTOR
        return base * (_WITNESS_SCALE_FACTOR - 1) + len(self.serialize(True))

    def vsize(self) -> int:
        return -(-self.weight() // _WITNESS_SCALE_FACTOR)

    def txid(self) -> str:
        """The transaction id, hex encoded in display byte order."""
        digest = hashlib.sha256(hashlib.sha256(self.serialize(False)).digest()).digest()
        return digest[::-1].hex()

    def is_explicitly_rbf(self) -> bool:
        """Whether any input signals replace-by-fee."""
        return any(tx_in.sequence < _SEQUENCE_MIN_NO_RBF for tx_in in self.inputs)