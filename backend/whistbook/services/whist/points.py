from typing import Iterable, List


class Points:
    """Per-seat score vector.

    Immutable; `+` and `-` work element-wise and need both sides to have the
    same number of seats.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[int]):
        values = tuple(values)
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f'Points must be integers, got {v!r}')
        self._values = values

    @classmethod
    def zeros(cls, num_seats: int) -> 'Points':
        return cls([0] * num_seats)

    def _check_arity(self, other: 'Points') -> None:
        if len(self) != len(other):
            raise ValueError(f'Cannot combine {len(self)} seats with {len(other)} seats')

    def __add__(self, other: 'Points') -> 'Points':
        if not isinstance(other, Points):
            return NotImplemented
        self._check_arity(other)
        return Points(a + b for a, b in zip(self._values, other._values))

    def __sub__(self, other: 'Points') -> 'Points':
        if not isinstance(other, Points):
            return NotImplemented
        self._check_arity(other)
        return Points(a - b for a, b in zip(self._values, other._values))

    def __neg__(self) -> 'Points':
        return Points(-v for v in self._values)

    def __getitem__(self, seat: int) -> int:
        return self._values[seat]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other):
        if isinstance(other, Points):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return list(self._values) == list(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._values)

    def __repr__(self):
        return f'Points({list(self._values)})'

    @property
    def total(self) -> int:
        return sum(self._values)

    def is_positive(self, seat: int) -> bool:
        return self._values[seat] > 0

    def to_list(self) -> List[int]:
        return list(self._values)
