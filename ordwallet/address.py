"""Bitcoin addresses: parsing, encoding, output scripts and dust limits."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum


class Network(Enum):
    BITCOIN = "bitcoin"
    TESTNET = "testnet"
    SIGNET = "signet"
    REGTEST = "regtest"


class AddressError(ValueError):
    """Raised for text that is not a valid address."""


class _Kind(Enum):
    P2PKH = "p2pkh"
    P2SH = "p2sh"
    SEGWIT = "segwit"


_BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_BECH32_CONST = 1
_BECH32M_CONST = 0x2BC830A3
_BECH32_MAX_LEN = 90
_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_HRP_NETWORKS = {"bc": Network.BITCOIN, "tb": Network.TESTNET, "bcrt": Network.REGTEST}
_NETWORK_HRPS = {
    Network.BITCOIN: "bc",
    Network.TESTNET: "tb",
    Network.SIGNET: "tb",
    Network.REGTEST: "bcrt",
}
_LEGACY_PREFIXES = {
    0x00: (_Kind.P2PKH, Network.BITCOIN),
    0x05: (_Kind.P2SH, Network.BITCOIN),
    0x6F: (_Kind.P2PKH, Network.TESTNET),
    0xC4: (_Kind.P2SH, Network.TESTNET),
}

_OP_0 = 0x00
_OP_PUSHNUM_1 = 0x51
_OP_PUSHNUM_16 = 0x60
_OP_PUSHBYTES_2 = 0x02
_OP_PUSHBYTES_40 = 0x28
_OP_RETURN = 0x6A
_DUST_RELAY_TX_FEE = 3000


def _polymod(values: list[int]) -> int:
    generator = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, g in enumerate(generator):
            if (top >> bit) & 1:
                checksum ^= g
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _bech32_decode(text: str) -> tuple[str, list[int], int]:
    if any(not 33 <= ord(c) <= 126 for c in text):
        raise AddressError(f"invalid character in address: {text!r}")
    if text.lower() != text and text.upper() != text:
        raise AddressError(f"mixed case address: {text!r}")
    text = text.lower()
    if len(text) > _BECH32_MAX_LEN:
        raise AddressError(f"address too long: {text!r}")
    pos = text.rfind("1")
    if pos < 1 or pos + 7 > len(text):
        raise AddressError(f"invalid bech32 separator position: {text!r}")
    hrp = text[:pos]
    try:
        data = [_BECH32_CHARSET.index(c) for c in text[pos + 1 :]]
    except ValueError:
        raise AddressError(f"invalid bech32 character: {text!r}") from None
    const = _polymod(_hrp_expand(hrp) + data)
    if const not in (_BECH32_CONST, _BECH32M_CONST):
        raise AddressError(f"invalid bech32 checksum: {text!r}")
    return hrp, data[:-6], const


def _bech32_encode(hrp: str, data: list[int], const: int) -> str:
    polymod = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ const
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(_BECH32_CHARSET[d] for d in data + checksum)


def _convert_bits(data: list[int] | bytes, from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    result = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value >> from_bits:
            raise AddressError("invalid data value")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((acc >> bits) & maxv)
    if pad:
        if bits:
            result.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or (acc << (to_bits - bits)) & maxv:
        raise AddressError("invalid bech32 padding")
    return result


def _double_sha256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def _base58_decode(text: str) -> bytes:
    number = 0
    for c in text:
        digit = _BASE58_ALPHABET.find(c)
        if digit < 0:
            raise AddressError(f"invalid base58 character {c!r}")
        number = number * 58 + digit
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    leading = len(text) - len(text.lstrip("1"))
    return b"\x00" * leading + body


def _base58_encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_BASE58_ALPHABET[remainder])
    leading = len(data) - len(data.lstrip(b"\x00"))
    return "1" * leading + "".join(reversed(digits))


def _compact_size_len(n: int) -> int:
    if n < 0xFD:
        return 1
    if n <= 0xFFFF:
        return 3
    if n <= 0xFFFFFFFF:
        return 5
    return 9


def _is_witness_program(script: bytes) -> bool:
    return (
        4 <= len(script) <= 42
        and (script[0] == _OP_0 or _OP_PUSHNUM_1 <= script[0] <= _OP_PUSHNUM_16)
        and _OP_PUSHBYTES_2 <= script[1] <= _OP_PUSHBYTES_40
        and len(script) - 2 == script[1]
    )


def dust_value(script_pubkey: bytes) -> int:
    """Minimum non-dust value in sats of an output paying to ``script_pubkey``."""
    encoded_len = _compact_size_len(len(script_pubkey)) + len(script_pubkey)
    if script_pubkey[:1] == bytes([_OP_RETURN]):
        size = 0
    elif _is_witness_program(script_pubkey):
        size = 32 + 4 + 1 + (107 // 4) + 4 + 8 + encoded_len
    else:
        size = 32 + 4 + 1 + 107 + 4 + 8 + encoded_len
    return _DUST_RELAY_TX_FEE // 1000 * size


@dataclass(frozen=True)
class Address:
    """A payment address on a particular network."""

    network: Network
    kind: _Kind
    program: bytes
    witness_version: int | None = None

    @staticmethod
    def parse(text: str) -> Address:
        """Parse a base58 or bech32/bech32m address."""
        hrp_end = text.lower().rfind("1")
        hrp = text[:hrp_end].lower() if hrp_end > 0 else ""
        if hrp in _HRP_NETWORKS:
            return Address._parse_segwit(text)
        return Address._parse_base58(text)

    @staticmethod
    def _parse_segwit(text: str) -> Address:
        hrp, data, const = _bech32_decode(text)
        if not data:
            raise AddressError(f"empty witness data: {text!r}")
        version = data[0]
        if version > 16:
            raise AddressError(f"invalid witness version {version}")
        program = bytes(_convert_bits(data[1:], 5, 8, False))
        if not 2 <= len(program) <= 40:
            raise AddressError(f"invalid witness program length {len(program)}")
        if version == 0 and len(program) not in (20, 32):
            raise AddressError(f"invalid segwit v0 program length {len(program)}")
        expected = _BECH32_CONST if version == 0 else _BECH32M_CONST
        if const != expected:
            raise AddressError(f"invalid checksum variant for witness version {version}")
        return Address(_HRP_NETWORKS[hrp], _Kind.SEGWIT, program, version)

    @staticmethod
    def _parse_base58(text: str) -> Address:
        if len(text) > 50:
            raise AddressError(f"base58 address too long: {text!r}")
        raw = _base58_decode(text)
        if len(raw) < 4:
            raise AddressError(f"base58 data too short: {text!r}")
        payload, checksum = raw[:-4], raw[-4:]
        if _double_sha256(payload)[:4] != checksum:
            raise AddressError(f"invalid base58 checksum: {text!r}")
        if len(payload) != 21:
            raise AddressError(f"invalid base58 payload length {len(payload)}")
        try:
            kind, network = _LEGACY_PREFIXES[payload[0]]
        except KeyError:
            raise AddressError(f"unknown address version byte {payload[0]:#04x}") from None
        return Address(network, kind, payload[1:])

    def script_pubkey(self) -> bytes:
        """The output script that pays to this address."""
        if self.kind is _Kind.P2PKH:
            return b"\x76\xa9\x14" + self.program + b"\x88\xac"
        if self.kind is _Kind.P2SH:
            return b"\xa9\x14" + self.program + b"\x87"
        assert self.witness_version is not None
        opcode = _OP_0 if self.witness_version == 0 else _OP_PUSHNUM_1 + self.witness_version - 1
        return bytes([opcode, len(self.program)]) + self.program

    def is_valid_for_network(self, network: Network) -> bool:
        if self.network == network:
            return True
        if Network.BITCOIN in (self.network, network):
            return False
        is_legacy = self.kind in (_Kind.P2PKH, _Kind.P2SH)
        if Network.REGTEST in (self.network, network) and not is_legacy:
            return False
        return True

    def __str__(self) -> str:
        if self.kind is _Kind.SEGWIT:
            assert self.witness_version is not None
            const = _BECH32_CONST if self.witness_version == 0 else _BECH32M_CONST
            data = [self.witness_version] + _convert_bits(self.program, 8, 5, True)
            return _bech32_encode(_NETWORK_HRPS[self.network], data, const)
        mainnet = self.network is Network.BITCOIN
        if self.kind is _Kind.P2PKH:
            prefix = 0x00 if mainnet else 0x6F
        else:
            prefix = 0x05 if mainnet else 0xC4
        payload = bytes([prefix]) + self.program
        return _base58_encode(payload + _double_sha256(payload)[:4])