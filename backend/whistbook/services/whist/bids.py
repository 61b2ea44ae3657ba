"""Bid catalogue.

The labels are the ones players pick from when entering a deal. Solo bids
are played by one declarer against three opponents, duo bids by two
partners against two opponents.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Optional

from .errors import UnknownBid

SOLO_BIDS = (
    'Solo 5',
    'Solo 6',
    'Solo 7',
    'Solo 8',
    'Kleine Miserie',
    'Grote Miserie',
    'Open Miserie',
    'Abondance 9',
    'Abondance 10',
    'Abondance 11',
    'Abondance 12',
    'Solo Slim',
)

DUO_BIDS = (
    'Samen 8', 'Samen 9', 'Samen 10', 'Samen 11', 'Samen 12', 'Samen 13', 'Troel',
)


class BidKind(Enum):
    SOLO = 'solo'
    DUO = 'duo'
    ABONDANCE = 'abondance'
    SMALL_MISERY = 'small_misery'
    LARGE_MISERY = 'large_misery'
    OPEN_MISERY = 'open_misery'
    TRULL = 'trull'
    GRAND_SLAM = 'grand_slam'


# Kinds that carry a level, with the levels the catalogue offers.
LEVELS = MappingProxyType({
    BidKind.SOLO: (5, 6, 7, 8),
    BidKind.DUO: (8, 9, 10, 11, 12, 13),
    BidKind.ABONDANCE: (9, 10, 11, 12),
})

DUO_KINDS = frozenset({BidKind.DUO, BidKind.TRULL})

_PREFIXES = MappingProxyType({
    BidKind.SOLO: 'Solo',
    BidKind.DUO: 'Samen',
    BidKind.ABONDANCE: 'Abondance',
})

_NAMES = MappingProxyType({
    BidKind.SMALL_MISERY: 'Kleine Miserie',
    BidKind.LARGE_MISERY: 'Grote Miserie',
    BidKind.OPEN_MISERY: 'Open Miserie',
    BidKind.TRULL: 'Troel',
    BidKind.GRAND_SLAM: 'Solo Slim',
})


@dataclass(frozen=True)
class Bid:
    kind: BidKind
    level: Optional[int] = None

    def __post_init__(self):
        allowed = LEVELS.get(self.kind)
        if allowed is None:
            if self.level is not None:
                raise UnknownBid(f'{self.kind.value} does not take a level')
        elif self.level not in allowed:
            raise UnknownBid(f'{self.kind.value} {self.level} is not a valid bid')

    @property
    def is_solo(self) -> bool:
        """True when the bid is played by a single declarer."""
        return self.kind not in DUO_KINDS

    @property
    def label(self) -> str:
        if self.kind in _PREFIXES:
            return f'{_PREFIXES[self.kind]} {self.level}'
        return _NAMES[self.kind]

    def __str__(self):
        return self.label


def _index():
    catalogue = {}
    for kind, levels in LEVELS.items():
        for level in levels:
            bid = Bid(kind, level)
            catalogue[bid.label.lower()] = bid
    for kind in _NAMES:
        bid = Bid(kind)
        catalogue[bid.label.lower()] = bid
    return MappingProxyType(catalogue)


CATALOGUE = _index()


def solo_bids() -> List[str]:
    return list(SOLO_BIDS)


def duo_bids() -> List[str]:
    return list(DUO_BIDS)


def parse(label: str) -> Bid:
    """Look up a bid by its label, ignoring case."""
    if not isinstance(label, str):
        raise UnknownBid(f'Unknown bid: {label!r}')
    try:
        return CATALOGUE[label.lower()]
    except KeyError:
        raise UnknownBid(f'Unknown bid: {label!r}') from None
