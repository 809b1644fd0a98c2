"""Growable bitsets backed by 64-bit words, and a bit queue with a fast top."""

from __future__ import annotations

from collections.abc import Iterator

from sattools.bitops import (
    interval_down,
    least_significant_bit_position,
    most_significant_bit_position,
)

_WIDTH = 64
_ALL_BITS = (1 << _WIDTH) - 1
_ALL_BITS_BUT_LSB = _ALL_BITS - 1


def _word_count(size: int) -> int:
    return (size + _WIDTH - 1) // _WIDTH


def _two_bits_mask(pos: int) -> int:
    """Return a mask with bits ``pos % 64`` and ``(pos ^ 1) % 64`` set."""
    return 3 << (pos & 62)


class Bitset:
    """A fixed-size sequence of bits that can iterate cheaply over set positions."""

    __slots__ = ("_size", "_words")

    def __init__(self, size: int = 0) -> None:
        self._size = max(size, 0)
        self._words = [0] * _word_count(self._size)

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self._size:
            raise IndexError(f"bit index {i} out of range for size {self._size}")

    def __len__(self) -> int:
        return self._size

    def push_back(self, value: bool) -> None:
        """Append a bit at the end of the bitset."""
        self._size += 1
        if len(self._words) < _word_count(self._size):
            self._words.append(0)
        self.set(self._size - 1, value)

    def resize(self, size: int) -> None:
        """Change the number of bits; bits that come into range are 0."""
        if size < 0:
            raise ValueError(f"size must be non-negative, not {size}")
        count = _word_count(size)
        if count < len(self._words):
            del self._words[count:]
        else:
            self._words.extend([0] * (count - len(self._words)))
        if size < self._size and size % _WIDTH:
            self._words[-1] &= interval_down(size % _WIDTH - 1)
        self._size = size

    def clear_and_resize(self, size: int) -> None:
        """Change the number of bits and clear all of them."""
        if size < 0:
            raise ValueError(f"size must be non-negative, not {size}")
        self._size = size
        self._words = [0] * _word_count(size)

    def clear_all(self) -> None:
        """Set every bit to 0."""
        self._words = [0] * len(self._words)

    def clear(self, i: int) -> None:
        """Set bit ``i`` to 0."""
        self._check_index(i)
        self._words[i >> 6] &= ~(1 << (i & 63)) & _ALL_BITS

    def clear_bucket(self, i: int) -> None:
        """Clear the whole word that holds bit ``i``."""
        self._check_index(i)
        self._words[i >> 6] = 0

    def clear_two_bits(self, i: int) -> None:
        """Clear bits ``i`` and ``i ^ 1``."""
        self._check_index(i)
        self._words[i >> 6] &= ~_two_bits_mask(i) & _ALL_BITS

    def are_one_of_two_bits_set(self, i: int) -> bool:
        """Tell whether bit ``i`` or bit ``i ^ 1`` is set."""
        self._check_index(i)
        return bool(self._words[i >> 6] & _two_bits_mask(i))

    def is_set(self, i: int) -> bool:
        """Tell whether bit ``i`` is set."""
        self._check_index(i)
        return bool(self._words[i >> 6] >> (i & 63) & 1)

    def __getitem__(self, i: int) -> bool:
        return self.is_set(i)

    def set(self, i: int, value: bool = True) -> None:
        """Set bit ``i`` to ``value``."""
        self._check_index(i)
        if value:
            self._words[i >> 6] |= 1 << (i & 63)
        else:
            self._words[i >> 6] &= ~(1 << (i & 63)) & _ALL_BITS

    def copy_bucket(self, other: Bitset, i: int) -> None:
        """Copy the word holding bit ``i`` from ``other`` into this bitset."""
        offset = i >> 6
        self._words[offset] = other._words[offset]

    def set_content_from(self, other: Bitset) -> None:
        """Copy ``other`` into this bitset without resizing it.

        Bits beyond the end of ``other`` keep their value; bits of ``other``
        beyond the end of this bitset are ignored.
        """
        common = min(len(self._words), len(other._words))
        if common == 0:
            return
        last_common = self._words[common - 1]
        self._words[:common] = other._words[:common]
        if len(self._words) >= len(other._words):
            keep = (_ALL_BITS_BUT_LSB << ((other._size - 1) & 63)) & _ALL_BITS
            self._words[common - 1] = (self._words[common - 1] & ~keep) | (
                last_common & keep
            )

    def intersection(self, other: Bitset) -> None:
        """Keep only bits also set in ``other``; missing bits count as 0."""
        common = min(len(self._words), len(other._words))
        for offset, word in enumerate(other._words[:common]):
            self._words[offset] &= word
        for offset in range(common, len(self._words)):
            self._words[offset] = 0

    def union(self, other: Bitset) -> None:
        """Also set every bit set in ``other`` that fits in this bitset."""
        common = min(len(self._words), len(other._words))
        for offset, word in enumerate(other._words[:common]):
            self._words[offset] |= word

    def __iter__(self) -> Iterator[int]:
        for offset, word in enumerate(self._words):
            base = offset * _WIDTH
            while word:
                yield base + least_significant_bit_position(word)
                word &= word - 1

    def set_bit_from_other_bitsets(
        self, i: int, other1: Bitset, use1: int, other2: Bitset, use2: int
    ) -> None:
        """Set bit ``i`` to ``(other1[i] and use1) xor (other2[i] and use2)``."""
        if len(other1._words) != len(self._words) or len(other2._words) != len(
            self._words
        ):
            raise ValueError("bitsets must have the same number of words")
        if use1 not in (0, 1) or use2 not in (0, 1):
            raise ValueError("use flags must be 0 or 1")
        self._check_index(i)
        bucket, pos = i >> 6, i & 63
        bit = ((other1._words[bucket] >> pos) & use1) ^ (
            (other2._words[bucket] >> pos) & use2
        )
        self._words[bucket] = (self._words[bucket] & ~(1 << pos) & _ALL_BITS) | (
            (bit & 1) << pos
        )

    def __str__(self) -> str:
        return "".join("1" if self.is_set(i) else "0" for i in range(self._size))

    def __repr__(self) -> str:
        return f"Bitset({self._size}, {str(self)!r})"


class BitQueue:
    """A bitset that knows its highest set bit at all times."""

    __slots__ = ("_size", "_top", "_words")

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, not {size}")
        self._size = size
        self._top = -1
        self._words = [0] * _word_count(size)

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self._size:
            raise IndexError(f"bit index {i} out of range for size {self._size}")

    def increase_size(self, size: int) -> None:
        """Grow the queue to ``size`` bits; it may not shrink."""
        if size < self._size:
            raise ValueError(f"cannot shrink from {self._size} to {size}")
        self._size = size
        self._words.extend([0] * (_word_count(size) - len(self._words)))

    def clear_and_resize(self, size: int) -> None:
        """Clear every bit and set the size to ``size``."""
        if size < 0:
            raise ValueError(f"size must be non-negative, not {size}")
        self._top = -1
        self._size = size
        self._words = [0] * _word_count(size)

    def set(self, i: int) -> None:
        """Set bit ``i``."""
        self._check_index(i)
        self._top = max(self._top, i)
        self._words[i >> 6] |= 1 << (i & 63)

    def set_all_before(self, i: int) -> None:
        """Set every bit from 0 to ``i - 1``."""
        self._check_index(i)
        self._top = max(self._top, i - 1)
        bucket = i >> 6
        self._words[bucket] |= (1 << (i & 63)) - 1
        self._words[:bucket] = [_ALL_BITS] * bucket

    def top(self) -> int | None:
        """Return the position of the highest set bit, or None if none is set."""
        return None if self._top == -1 else self._top

    def clear_top(self) -> None:
        """Clear the highest set bit and find the next one."""
        if self._top == -1:
            raise IndexError("clear_top on an empty queue")
        bucket_index = self._top >> 6
        self._words[bucket_index] &= ~(1 << (self._top & 63)) & _ALL_BITS
        while bucket_index >= 0 and not self._words[bucket_index]:
            bucket_index -= 1
        if bucket_index < 0:
            self._top = -1
            return
        self._top = bucket_index * _WIDTH + most_significant_bit_position(
            self._words[bucket_index]
        )