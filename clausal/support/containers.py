from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

ε = TypeVar('ε')
"""A type variable denoting the type of the elements of the clauses.
"""


class ClauseAccumulator(Generic[ε]):
    """A set of clauses, where clauses are :class:`frozenset` instances. The
    clauses are kept in buckets according to their cardinality. Subset and
    superset queries for a given clause `c` then only visit the buckets of
    clauses that are smaller or larger than `c`, respectively.

    >>> acc: ClauseAccumulator[str] = ClauseAccumulator()
    >>> acc.add(frozenset({'a', 'b'}))
    >>> acc.add(frozenset({'a', 'b', 'c'}))
    >>> acc.add(frozenset({'a', 'b'}))
    >>> len(acc)
    2
    >>> acc.has_subset_of(frozenset({'a', 'b', 'd'}))
    True
    >>> acc.remove_supersets_of(frozenset({'a'}))
    >>> acc.to_set()
    set()
    """

    def __init__(self) -> None:
        self._buckets: list[Optional[set[frozenset[ε]]]] = []

    def __contains__(self, clause: object) -> bool:
        if not isinstance(clause, frozenset) or len(clause) >= len(self._buckets):
            return False
        bucket = self._buckets[len(clause)]
        return bucket is not None and clause in bucket

    def __iter__(self) -> Iterator[frozenset[ε]]:
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets if bucket is not None)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.to_set()!r})'

    def add(self, clause: frozenset[ε]) -> None:
        self._bucket(clause).add(clause)

    def remove(self, clause: frozenset[ε]) -> None:
        """Remove `clause` if present.
        """
        self._bucket(clause).discard(clause)

    def to_set(self) -> set[frozenset[ε]]:
        """All clauses as one new set.
        """
        return set(self)

    def _bucket(self, clause: frozenset[ε]) -> set[frozenset[ε]]:
        if not isinstance(clause, frozenset):
            raise ValueError(f'expecting frozenset as clause; {clause!r} is {type(clause)}')
        size = len(clause)
        if size >= len(self._buckets):
            self._buckets.extend([None] * (size + 1 - len(self._buckets)))
        bucket = self._buckets[size]
        if bucket is None:
            bucket = self._buckets[size] = set()
        return bucket

    def _smaller(self, clause: frozenset[ε]) -> Iterator[set[frozenset[ε]]]:
        for bucket in self._buckets[:len(clause)]:
            if bucket is not None:
                yield bucket

    def _larger(self, clause: frozenset[ε]) -> Iterator[set[frozenset[ε]]]:
        for bucket in self._buckets[len(clause) + 1:]:
            if bucket is not None:
                yield bucket

    def has_subset_of(self, superset: frozenset[ε]) -> bool:
        """Test whether some clause is a proper subset of `superset`.

        >>> acc: ClauseAccumulator[str] = ClauseAccumulator()
        >>> acc.add(frozenset({'a', 'b'}))
        >>> acc.has_subset_of(frozenset({'a', 'b'}))
        False
        >>> acc.has_subset_of(frozenset({'a', 'b', 'c'}))
        True
        """
        return any(clause < superset
                   for bucket in self._smaller(superset) for clause in bucket)

    def remove_subsets_of(self, superset: frozenset[ε]) -> None:
        """Remove all clauses that are proper subsets of `superset`.
        """
        for bucket in self._smaller(superset):
            bucket.difference_update([clause for clause in bucket if clause < superset])

    def has_superset_of(self, subset: frozenset[ε]) -> bool:
        """Test whether some clause is a proper superset of `subset`.
        """
        return any(clause > subset
                   for bucket in self._larger(subset) for clause in bucket)

    def remove_supersets_of(self, subset: frozenset[ε]) -> None:
        """Remove all clauses that are proper supersets of `subset`.

        >>> acc: ClauseAccumulator[str] = ClauseAccumulator()
        >>> acc.add(frozenset({'a', 'b', 'c'}))
        >>> acc.add(frozenset({'a', 'd'}))
        >>> acc.remove_supersets_of(frozenset({'a', 'b'}))
        >>> acc.to_set() == {frozenset({'a', 'd'})}
        True
        """
        for bucket in self._larger(subset):
            bucket.difference_update([clause for clause in bucket if clause > subset])
