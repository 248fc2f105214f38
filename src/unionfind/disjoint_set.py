# https://en.wikipedia.org/wiki/Disjoint-set_data_structure

import collections
import operator
from typing import FrozenSet, List, Optional, Tuple


class OutOfRangeError(IndexError):
    pass


class InvalidSizeError(ValueError):
    pass


# int-likes such as numpy integers are accepted, bool is not
def _as_index(e) -> Optional[int]:
    if isinstance(e, bool):
        return None
    try:
        return operator.index(e)
    except TypeError:
        return None


class DisjointSet:
    """Union-find over the dense integer ids [0, size).

    Not thread-safe: find and union both rewrite parent/rank, callers sharing
    an instance across threads must hold their own lock around every call.
    """

    def __init__(self, size: int):
        self.size = _as_index(size)
        if self.size is None or self.size < 0:
            raise InvalidSizeError(f"size must be a non-negative int, got {size!r}")
        size = self.size
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self.component_count = size

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"DisjointSet(size={self.size}, components={self.component_count})"

    def _check(self, e: int) -> int:
        index = _as_index(e)
        if index is None or not 0 <= index < self.size:
            raise OutOfRangeError(f"{e!r} not in [0, {self.size})")
        return index

    # find with path compression
    def find(self, e: int) -> int:
        e = self._check(e)
        root = e
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[e] != root:
            self.parent[e], e = root, self.parent[e]
        return root

    # union by rank
    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y.

        Returns False if they were already in the same set. On equal ranks the
        root of y is attached under the root of x.
        """
        self._check(x)
        self._check(y)
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False  # already in the same set
        if self.rank[x_root] < self.rank[y_root]:
            x_root, y_root = y_root, x_root

        self.parent[y_root] = x_root
        if self.rank[x_root] == self.rank[y_root]:
            self.rank[x_root] += 1
        self.component_count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        self._check(x)
        self._check(y)
        return self.find(x) == self.find(y)

    def roots(self) -> Tuple[int, ...]:
        return tuple(e for e in range(self.size) if self.parent[e] == e)

    def sets(self) -> FrozenSet[FrozenSet[int]]:
        sets = collections.defaultdict(set)
        for e in range(self.size):
            sets[self.find(e)].add(e)
        return frozenset(frozenset(s) for s in sets.values())

    def sorted(self) -> Tuple[Tuple[int, ...], ...]:
        """Sorted tuple of sorted tuples edition of sets()."""
        return tuple(sorted(tuple(sorted(s)) for s in self.sets()))
