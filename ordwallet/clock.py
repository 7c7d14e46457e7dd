"""Clock-face angles for a block height."""

from __future__ import annotations

from dataclasses import dataclass

SUBSIDY_HALVING_INTERVAL = 210_000
DIFFCHANGE_INTERVAL = 2016
FIRST_POST_SUBSIDY_HEIGHT = 33 * SUBSIDY_HALVING_INTERVAL


@dataclass(frozen=True)
class Clock:
    """Hand angles in degrees: hour for subsidy, minute for epoch, second for period."""

    height: int
    hour: float
    minute: float
    second: float


def clock_angles(height: int) -> Clock:
    """Compute the clock hand angles for ``height``."""
    if height < 0:
        raise ValueError(f"height must not be negative: {height}")
    capped = min(height, FIRST_POST_SUBSIDY_HEIGHT)
    return Clock(
        height=height,
        hour=(capped % FIRST_POST_SUBSIDY_HEIGHT) / FIRST_POST_SUBSIDY_HEIGHT * 360.0,
        minute=(capped % SUBSIDY_HALVING_INTERVAL) / SUBSIDY_HALVING_INTERVAL * 360.0,
        second=(height % DIFFCHANGE_INTERVAL) / DIFFCHANGE_INTERVAL * 360.0,
    )