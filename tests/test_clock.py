import pytest

from ordwallet.clock import clock_angles


@pytest.mark.parametrize(
    "height,expected",
    [
        (0, 0.0),
        (504, 90.0),
        (1008, 180.0),
        (1512, 270.0),
        (2016, 0.0),
        (6930000, 180.0),
        (6930504, 270.0),
    ],
)
def test_second(height, expected):
    assert clock_angles(height).second == expected


@pytest.mark.parametrize(
    "height,expected",
    [
        (0, 0.0),
        (52500, 90.0),
        (105000, 180.0),
        (157500, 270.0),
        (210000, 0.0),
        (6930000, 0.0),
        (6930001, 0.0),
    ],
)
def test_minute(height, expected):
    assert clock_angles(height).minute == expected


@pytest.mark.parametrize(
    "height,expected",
    [
        (0, 0.0),
        (1732500, 90.0),
        (3465000, 180.0),
        (5197500, 270.0),
        (6930000, 0.0),
        (6930001, 0.0),
    ],
)
def test_hour(height, expected):
    assert clock_angles(height).hour == expected


def test_final_subsidy_height():
    clock = clock_angles(6929999)
    assert clock.second == 1007.0 / 2016.0 * 360.0
    assert clock.minute == 209_999.0 / 210_000.0 * 360.0
    assert clock.hour == 6929999.0 / 6930000.0 * 360.0


def test_first_post_subsidy_height():
    clock = clock_angles(6930000)
    assert clock.second == 180.0
    assert clock.minute == 0.0
    assert clock.hour == 0.0


def test_rendered_angles():
    clock = clock_angles(6929999)
    assert clock.height == 6929999
    assert str(clock.hour) == "359.9999480519481"
    assert str(clock.minute) == "359.9982857142857"
    assert str(clock.second) == "179.82142857142858"


def test_negative_height():
    with pytest.raises(ValueError):
        clock_angles(-1)