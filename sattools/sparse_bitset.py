"""A bitset that remembers which positions were set, for cheap clearing."""

from __future__ import annotations

from sattools.bitset import Bitset

# Below this ratio of set positions to size, clearing bucket by bucket wins.
_SPARSE_THRESHOLD = 300


class SparseBitset:
    """Set and unset integers in ``[0, size)``, optimised for sparse use."""

    __slots__ = ("_bitset", "_to_clear")

    def __init__(self, size: int = 0) -> None:
        self._bitset = Bitset(size)
        self._to_clear: list[int] = []

    def __len__(self) -> int:
        return len(self._bitset)

    def sparse_clear_all(self) -> None:
        """Clear only the words that hold positions set since the last clear."""
        for index in self._to_clear:
            self._bitset.clear_bucket(index)
        self._to_clear.clear()

    def clear_all(self) -> None:
        """Clear every bit."""
        self._bitset.clear_all()
        self._to_clear.clear()

    def clear_and_resize(self, size: int) -> None:
        """Clear every bit and change the size to ``size``."""
        if len(self._to_clear) * _SPARSE_THRESHOLD < size:
            self.sparse_clear_all()
            self._bitset.resize(size)
        else:
            self._bitset.clear_and_resize(size)
            self._to_clear.clear()

    def resize(self, size: int) -> None:
        """Change the size, forgetting positions that fall out of range."""
        if size < len(self._bitset):
            self._to_clear = [index for index in self._to_clear if index < size]
        self._bitset.resize(size)

    def __getitem__(self, index: int) -> bool:
        return self._bitset[index]

    def set(self, index: int) -> None:
        """Set the bit at ``index``."""
        if not self._bitset[index]:
            self._bitset.set(index)
            self._to_clear.append(index)

    def clear(self, index: int) -> None:
        """Clear the bit at ``index``."""
        self._bitset.clear(index)

    def number_of_set_calls_with_different_arguments(self) -> int:
        """Return how many distinct positions were set since the last clear."""
        return len(self._to_clear)

    def positions_set_at_least_once(self) -> list[int]:
        """Return the positions set since the last clear, in the order set."""
        return list(self._to_clear)

    def notify_all_clear(self) -> None:
        """Forget the set positions once the caller has cleared them all."""
        still_set = [index for index in self._to_clear if self._bitset[index]]
        if still_set:
            raise ValueError(f"positions still set: {still_set}")
        self._to_clear.clear()