import time

import pytest

from ordwallet.primitives import OutPoint
from ordwallet.sats import TsvParseError, sats_from_tsv

COIN_VALUE = 100_000_000


def outpoint(n):
    return OutPoint(f"{n:x}" * 64, n)


def test_identify_from_tsv_none():
    assert sats_from_tsv([(outpoint(1), [(0, 1)])], "1\n") == []


def test_identify_from_tsv_single():
    assert sats_from_tsv([(outpoint(1), [(0, 1)])], "0\n") == [(outpoint(1), "0")]


def test_identify_from_tsv_two_in_one_range():
    assert sats_from_tsv([(outpoint(1), [(0, 2)])], "0\n1\n") == [
        (outpoint(1), "0"),
        (outpoint(1), "1"),
    ]


def test_identify_from_tsv_out_of_order_tsv():
    assert sats_from_tsv([(outpoint(1), [(0, 2)])], "1\n0\n") == [
        (outpoint(1), "0"),
        (outpoint(1), "1"),
    ]


def test_identify_from_tsv_out_of_order_ranges():
    assert sats_from_tsv([(outpoint(1), [(1, 2), (0, 1)])], "1\n0\n") == [
        (outpoint(1), "0"),
        (outpoint(1), "1"),
    ]


def test_identify_from_tsv_two_in_two_ranges():
    assert sats_from_tsv([(outpoint(1), [(0, 1), (1, 2)])], "0\n1\n") == [
        (outpoint(1), "0"),
        (outpoint(1), "1"),
    ]


def test_identify_from_tsv_two_in_two_outputs():
    assert sats_from_tsv(
        [(outpoint(1), [(0, 1)]), (outpoint(2), [(1, 2)])], "0\n1\n"
    ) == [(outpoint(1), "0"), (outpoint(2), "1")]


def test_identify_from_tsv_ignores_extra_columns():
    assert sats_from_tsv([(outpoint(1), [(0, 1)])], "0\t===\n") == [(outpoint(1), "0")]


def test_identify_from_tsv_ignores_empty_lines():
    assert sats_from_tsv([(outpoint(1), [(0, 1)])], "0\n\n\n") == [(outpoint(1), "0")]


def test_identify_from_tsv_ignores_comments():
    assert sats_from_tsv([(outpoint(1), [(0, 1)])], "0\n#===\n") == [(outpoint(1), "0")]


def test_parse_error_reports_line_and_value():
    with pytest.raises(TsvParseError) as info:
        sats_from_tsv([(outpoint(1), [(0, 1)])], "0\n===\n")
    assert str(info.value) == (
        'failed to parse sat from string "===" on line 2: invalid digit found in string'
    )
    assert info.value.line == 2
    assert info.value.value == "==="


def test_identify_from_tsv_is_fast():
    start = 0
    utxos = []
    results = []
    for i in range(16):
        ranges = []
        op = outpoint(i)
        for _ in range(100):
            end = start + 50 * COIN_VALUE
            ranges.append((start, end))
            results.extend((op, start + j * COIN_VALUE) for j in range(50))
            start = end
        utxos.append((op, ranges))

    tsv = "".join(f"{i * COIN_VALUE}\n" for i in range(start // COIN_VALUE))

    began = time.monotonic()
    found = [(op, int(s)) for op, s in sats_from_tsv(utxos, tsv)]
    assert found == results
    assert time.monotonic() - began < 10