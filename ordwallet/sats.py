"""Locating listed sats among a wallet's unspent output ranges."""

from __future__ import annotations

from collections.abc import Iterable

from ordwallet.primitives import OutPoint

_U64_MAX = 2**64 - 1


class TsvParseError(ValueError):
    """Raised when a line of a TSV file does not start with a sat number."""

    def __init__(self, value: str, line: int, reason: str) -> None:
        super().__init__(
            f'failed to parse sat from string "{value}" on line {line}: {reason}'
        )
        self.value = value
        self.line = line
        self.reason = reason


def _parse_sat(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _U64_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def sats_from_tsv(
    utxos: Iterable[tuple[OutPoint, Iterable[tuple[int, int]]]], tsv: str
) -> list[tuple[OutPoint, str]]:
    """Find the outputs holding sats listed in the first column of ``tsv``.

    Blank lines and lines starting with ``#`` are ignored. Results come in
    order of sat number, each paired with the text it was listed as.
    """
    needles = []
    for number, line in enumerate(_lines(tsv), start=1):
        if not line or line.startswith("#"):
            continue
        value = line.split("\t", 1)[0]
        try:
            sat = _parse_sat(value)
        except ValueError as err:
            raise TsvParseError(value, number, str(err)) from None
        needles.append((sat, value))
    needles.sort()

    haystacks = sorted(
        (start, end, outpoint) for outpoint, ranges in utxos for start, end in ranges
    )

    results = []
    needle_iter = iter(needles)
    haystack_iter = iter(haystacks)
    needle = next(needle_iter, None)
    haystack = next(haystack_iter, None)
    while needle is not None and haystack is not None:
        sat, value = needle
        start, end, outpoint = haystack
        if start <= sat < end:
            results.append((outpoint, value))
        if sat >= end:
            haystack = next(haystack_iter, None)
        else:
            needle = next(needle_iter, None)

    return results