"""Point table per bid.

`points` returns the team point for the declaring side. For solo bids the
declarer later receives three times this value (see `deal.distribute`).
"""
from .bids import Bid, BidKind
from .errors import OutOfRangeTricks

ALL_TRICKS = 13

SOLO_SLIM_CAP = 6
SOLO_8_MADE = 7
SOLO_8_PENALTY = 15

DUO_ALL_TRICKS = 30
DUO_BASE = {8: 8, 9: 11, 10: 14, 11: 17, 12: 20, 13: 23}

ABONDANCE_MADE = {
    9: {9: 10, 10: 15, 11: 20, 12: 30, 13: 60},
    10: {10: 15, 11: 20, 12: 30, 13: 60},
    11: {11: 20, 12: 30, 13: 60},
    12: {12: 30, 13: 60},
}
ABONDANCE_FAILED = {9: -10, 10: -15, 11: -20, 12: -30}

MISERY = {
    BidKind.SMALL_MISERY: 6,
    BidKind.LARGE_MISERY: 12,
    BidKind.OPEN_MISERY: 24,
}

TRULL_TRICKS = 8
TRULL_POINTS = 16
GRAND_SLAM_POINTS = 60


def check_tricks(achieved) -> int:
    # bool is an int subclass; True tricks is not a trick count
    if isinstance(achieved, bool) or not isinstance(achieved, int):
        raise OutOfRangeTricks(f'Tricks must be an integer, got {achieved!r}')
    if not 0 <= achieved <= ALL_TRICKS:
        raise OutOfRangeTricks(f'Tricks must be between 0 and {ALL_TRICKS}, got {achieved}')
    return achieved


def _solo(level: int, achieved: int) -> int:
    if level == 8:
        return SOLO_8_MADE if achieved >= 8 else achieved - SOLO_8_PENALTY
    if achieved >= level:
        return min(achieved - 2, SOLO_SLIM_CAP)
    return achieved - (level + 3)


def _duo(level: int, achieved: int) -> int:
    if achieved == ALL_TRICKS:
        return DUO_ALL_TRICKS
    base = DUO_BASE[level]
    if achieved >= level:
        return base + 3 * (achieved - level)
    return 3 * (achieved - level) - base


def _abondance(level: int, achieved: int) -> int:
    return ABONDANCE_MADE[level].get(achieved, ABONDANCE_FAILED[level])


def points(bid: Bid, achieved: int) -> int:
    """Team point for `bid` when the declaring side took `achieved` tricks."""
    check_tricks(achieved)
    kind = bid.kind
    if kind is BidKind.SOLO:
        return _solo(bid.level, achieved)
    if kind is BidKind.DUO:
        return _duo(bid.level, achieved)
    if kind is BidKind.ABONDANCE:
        return _abondance(bid.level, achieved)
    if kind in MISERY:
        return MISERY[kind] if achieved == 0 else -MISERY[kind]
    if kind is BidKind.TRULL:
        return TRULL_POINTS if achieved >= TRULL_TRICKS else -TRULL_POINTS
    if kind is BidKind.GRAND_SLAM:
        return GRAND_SLAM_POINTS if achieved == ALL_TRICKS else -GRAND_SLAM_POINTS
    raise ValueError(f'No scoring rule for {kind}')
