"""Transaction outpoints, sat locations and inscription identifiers."""

from __future__ import annotations

import functools
import string
from dataclasses import dataclass

_TXID_HEX_LEN = 64
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1
_MAX_OUTPOINT_LEN = 75
_HEX_DIGITS = frozenset(string.hexdigits)


def _check_txid(text: str) -> str:
    if len(text) != _TXID_HEX_LEN or not all(c in _HEX_DIGITS for c in text):
        raise ValueError(f"invalid txid: {text!r}")
    return text.lower()


def _parse_uint(text: str, maximum: int, what: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"invalid {what}: {text!r}")
    value = int(text)
    if value > maximum:
        raise ValueError(f"{what} out of range: {text!r}")
    return value


def _txid_key(txid: str) -> bytes:
    # Transaction ids are displayed byte-reversed; order by the internal bytes.
    return bytes.fromhex(txid)[::-1]


@functools.total_ordering
@dataclass(frozen=True)
class OutPoint:
    """A reference to one output of a transaction."""

    txid: str
    vout: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "txid", _check_txid(self.txid))
        if not 0 <= self.vout <= _U32_MAX:
            raise ValueError(f"vout out of range: {self.vout}")

    @staticmethod
    def parse(text: str) -> OutPoint:
        """Parse ``<txid>:<vout>``."""
        if len(text) > _MAX_OUTPOINT_LEN:
            raise ValueError(f"outpoint too long: {text!r}")
        txid, sep, vout = text.rpartition(":")
        if not sep or not txid or not vout:
            raise ValueError(f"invalid outpoint format: {text!r}")
        if len(vout) > 1 and vout.startswith("0"):
            raise ValueError(f"non-canonical vout: {vout!r}")
        return OutPoint(_check_txid(txid), _parse_uint(vout, _U32_MAX, "vout"))

    @staticmethod
    def null() -> OutPoint:
        """The outpoint spent by coinbase inputs."""
        return OutPoint("0" * _TXID_HEX_LEN, _U32_MAX)

    def is_null(self) -> bool:
        return self == OutPoint.null()

    def _key(self) -> tuple[bytes, int]:
        return (_txid_key(self.txid), self.vout)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OutPoint):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.txid}:{self.vout}"


@dataclass(frozen=True, order=True)
class SatPoint:
    """The location of a sat: an outpoint and an offset into its value."""

    outpoint: OutPoint
    offset: int

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= _U64_MAX:
            raise ValueError(f"offset out of range: {self.offset}")

    @staticmethod
    def parse(text: str) -> SatPoint:
        """Parse ``<txid>:<vout>:<offset>``."""
        outpoint, sep, offset = text.rpartition(":")
        if not sep:
            raise ValueError(f"satpoint should be of the form TXID:VOUT:OFFSET: {text!r}")
        return SatPoint(OutPoint.parse(outpoint), _parse_uint(offset, _U64_MAX, "offset"))

    def __str__(self) -> str:
        return f"{self.outpoint}:{self.offset}"


@functools.total_ordering
@dataclass(frozen=True)
class InscriptionId:
    """An inscription, named by its reveal transaction and an index."""

    txid: str
    index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "txid", _check_txid(self.txid))
        if not 0 <= self.index <= _U32_MAX:
            raise ValueError(f"index out of range: {self.index}")

    @staticmethod
    def parse(text: str) -> InscriptionId:
        """Parse ``<txid>i<index>``."""
        if len(text) < _TXID_HEX_LEN + 2:
            raise ValueError(f"invalid inscription id length: {text!r}")
        txid, separator, index = (
            text[:_TXID_HEX_LEN],
            text[_TXID_HEX_LEN],
            text[_TXID_HEX_LEN + 1 :],
        )
        if separator != "i":
            raise ValueError(f"invalid inscription id separator: {separator!r}")
        return InscriptionId(_check_txid(txid), _parse_uint(index, _U32_MAX, "index"))

    def _key(self) -> tuple[bytes, int]:
        return (_txid_key(self.txid), self.index)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, InscriptionId):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.txid}i{self.index}"