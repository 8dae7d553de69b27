r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
seeded sequence generator for the seqy property tests.
'''

import numpy as np
from faker import Faker
from seqy import from_iterable, Sequence
from typing import Any, Dict, List, Optional, Callable


class Generator:
    """seeded source of words and numbers, with controllable duplication."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def words(self, count: int, unique: bool = False) -> List[str]:
        """faker words; with unique=True no word repeats."""
        if count <= 0:
            return []
        return self._fake.words(nb=count, unique=unique)

    def integers(self, count: int, low: int = 0, high: int = 100) -> List[int]:
        """uniform integers in [low, high], as native python ints."""
        if count <= 0:
            return []
        return self._rng.integers(low, high, size=count, endpoint=True).tolist()

    def floats(self, count: int, low: float = 0.0, high: float = 1.0) -> List[float]:
        if count <= 0:
            return []
        return self._rng.uniform(low, high, size=count).tolist()

    def with_duplicates(self, pool: List[Any], count: int) -> List[Any]:
        """draw count items from pool with replacement, so repeats are likely."""
        if not pool or count <= 0:
            return []
        picks = self._rng.integers(0, len(pool), size=count)
        return [pool[i] for i in picks]

    def length(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high, endpoint=True))


_KINDS: Dict[str, Callable[[Generator, int], List[Any]]] = {
    'word': lambda g, n: g.with_duplicates(g.words(max(1, n // 2), unique=True), n),
    'int': lambda g, n: g.integers(n, 0, max(1, n)),
    'float': lambda g, n: g.floats(n),
}


class _SequenceProvider:
    def __init__(self, kind: str, min_length: int, max_length: int, seed: Optional[int] = None):
        if kind not in _KINDS:
            raise ValueError(f"unknown kind '{kind}', expected one of {sorted(_KINDS)}")
        self._make = _KINDS[kind]
        self._min_length = min_length
        self._max_length = max_length
        self._generator = Generator(seed)

    def lists(self, count: int) -> List[List[Any]]:
        """count raw lists with random lengths"""
        g = self._generator
        return [self._make(g, g.length(self._min_length, self._max_length)) for _ in range(count)]

    def pairs(self, count: int) -> List[tuple]:
        """count (a, b) pairs of raw lists, e.g. for the set-algebra laws"""
        data = self.lists(count * 2)
        return list(zip(data[::2], data[1::2]))

    def take(self, count: int) -> List[Sequence]:
        return [from_iterable(data) for data in self.lists(count)]


def sequences(kind: str = 'word', min_length: int = 0, max_length: int = 30,
              seed: Optional[int] = None) -> _SequenceProvider:
    return _SequenceProvider(kind, min_length, max_length, seed)
