import pytest

from ordwallet.primitives import InscriptionId, OutPoint, SatPoint


def txid(n):
    return format(n, "x") * 64


def outpoint(n):
    return OutPoint.parse(f"{txid(n)}:{n}")


def test_outpoint_round_trip():
    text = f"{txid(1)}:1"
    assert str(OutPoint.parse(text)) == text


def test_outpoint_fields():
    parsed = OutPoint.parse(f"{txid(2)}:7")
    assert parsed.txid == txid(2)
    assert parsed.vout == 7


def test_outpoint_uppercase_txid_is_normalised():
    assert OutPoint.parse(f"{'A' * 64}:0") == OutPoint("a" * 64, 0)


def test_null_outpoint_display():
    assert str(OutPoint.null()) == (
        "0000000000000000000000000000000000000000000000000000000000000000:4294967295"
    )


def test_is_null():
    assert OutPoint.null().is_null()
    assert not outpoint(1).is_null()


@pytest.mark.parametrize(
    "text",
    [
        "abc:0",
        f"{txid(1)}",
        f"{txid(1)}:",
        f":{1}",
        f"{txid(1)}:01",
        f"{txid(1)}:4294967296",
        f"{txid(1)}:-1",
        f"{'g' * 64}:0",
    ],
)
def test_outpoint_parse_errors(text):
    with pytest.raises(ValueError):
        OutPoint.parse(text)


def test_outpoint_ordering_uses_internal_byte_order():
    low = OutPoint("01" + "00" * 31, 0)
    high = OutPoint("00" * 31 + "01", 0)
    assert sorted([high, low]) == [low, high]


def test_outpoint_ordering_by_vout():
    a = OutPoint(txid(3), 0)
    b = OutPoint(txid(3), 5)
    assert a < b
    assert max(a, b) == b


def test_outpoints_hashable():
    assert len({outpoint(1), outpoint(1), outpoint(2)}) == 2


def test_satpoint_round_trip():
    text = f"{txid(1)}:1:0"
    satpoint = SatPoint.parse(text)
    assert str(satpoint) == text
    assert satpoint.outpoint == outpoint(1)
    assert satpoint.offset == 0


def test_satpoint_ordering():
    a = SatPoint(outpoint(1), 10)
    b = SatPoint(outpoint(1), 2)
    c = SatPoint(outpoint(2), 0)
    assert sorted([c, a, b]) == [b, a, c]


@pytest.mark.parametrize("text", [txid(1), f"{txid(1)}:1:x", f"{txid(1)}:1:"])
def test_satpoint_parse_errors(text):
    with pytest.raises(ValueError):
        SatPoint.parse(text)


def test_inscription_id_round_trip():
    text = f"{txid(1)}i1"
    inscription_id = InscriptionId.parse(text)
    assert str(inscription_id) == text
    assert inscription_id.index == 1
    assert inscription_id.txid == txid(1)


def test_inscription_id_default_index():
    assert str(InscriptionId(txid(4))) == f"{txid(4)}i0"


@pytest.mark.parametrize(
    "text", [txid(1), f"{txid(1)}i", f"{txid(1)}x1", f"{txid(1)}i-1", "abci0"]
)
def test_inscription_id_parse_errors(text):
    with pytest.raises(ValueError):
        InscriptionId.parse(text)