"""Bit operations on single words and on bitsets stored as lists of words.

A bitset is a list of non-negative integers, each holding ``width`` bits
(32 or 64).  Bit ``pos`` of the bitset lives in word ``pos // width`` at
bit ``pos % width``.  All ranges are inclusive on both ends.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence

WORD_WIDTHS = (32, 64)


def _check_width(width: int) -> int:
    if width not in WORD_WIDTHS:
        raise ValueError(f"word width must be 32 or 64, not {width}")
    return (1 << width) - 1


def _check_word(n: int) -> None:
    if n < 0:
        raise ValueError(f"word must be non-negative, not {n}")


def one_bit(pos: int) -> int:
    """Return a word with only bit ``pos`` set."""
    if pos < 0:
        raise ValueError(f"bit position must be non-negative, not {pos}")
    return 1 << pos


def bit_count(n: int) -> int:
    """Return the number of bits set in ``n``."""
    _check_word(n)
    return n.bit_count()


def least_significant_bit_word(n: int) -> int:
    """Return a word with only the least significant set bit of ``n`` set."""
    _check_word(n)
    return n & -n


def least_significant_bit_position(n: int) -> int:
    """Return the position of the lowest set bit of ``n``, which must not be 0."""
    _check_word(n)
    if n == 0:
        raise ValueError("a zero word has no set bit")
    return (n & -n).bit_length() - 1


def most_significant_bit_position(n: int) -> int:
    """Return the position of the highest set bit of ``n``, or 0 for 0."""
    _check_word(n)
    return max(n.bit_length() - 1, 0)


def one_range(start: int, end: int, width: int = 64) -> int:
    """Return a word with bits ``start`` to ``end`` (inclusive) set."""
    mask = _check_width(width)
    if not 0 <= start <= end < width:
        raise ValueError(f"invalid bit range {start}..{end} for width {width}")
    return (mask << start) & mask & ~((mask - 1) << end) & mask


def interval_up(start: int, width: int = 64) -> int:
    """Return a word with the ``start`` least significant bits unset."""
    mask = _check_width(width)
    if not 0 <= start < width:
        raise ValueError(f"bit position {start} out of range for width {width}")
    return (mask << start) & mask


def interval_down(end: int, width: int = 64) -> int:
    """Return a word with bits 0 to ``end`` (inclusive) set."""
    mask = _check_width(width)
    if not 0 <= end < width:
        raise ValueError(f"bit position {end} out of range for width {width}")
    return mask >> (width - 1 - end)


def is_bit_set(words: Sequence[int], pos: int, width: int = 64) -> bool:
    """Tell whether bit ``pos`` of the bitset is set."""
    _check_width(width)
    offset, bit = divmod(pos, width)
    return bool(words[offset] >> bit & 1)


def set_bit(words: MutableSequence[int], pos: int, width: int = 64) -> None:
    """Set bit ``pos`` of the bitset in place."""
    _check_width(width)
    offset, bit = divmod(pos, width)
    words[offset] |= 1 << bit


def clear_bit(words: MutableSequence[int], pos: int, width: int = 64) -> None:
    """Clear bit ``pos`` of the bitset in place."""
    mask = _check_width(width)
    offset, bit = divmod(pos, width)
    words[offset] &= ~(1 << bit) & mask


def _masked_words(
    words: Sequence[int], start: int, end: int, width: int
) -> Iterator[tuple[int, int]]:
    """Yield (word offset, word restricted to the range) for each word in range."""
    mask = _check_width(width)
    if start < 0 or start > end:
        raise ValueError(f"invalid bit range {start}..{end}")
    offset_start, pos_start = divmod(start, width)
    offset_end, pos_end = divmod(end, width)
    if offset_start == offset_end:
        yield offset_start, words[offset_start] & one_range(pos_start, pos_end, width)
        return
    yield offset_start, words[offset_start] & interval_up(pos_start, width)
    for offset in range(offset_start + 1, offset_end):
        yield offset, words[offset] & mask
    yield offset_end, words[offset_end] & interval_down(pos_end, width)


def bit_count_range(words: Sequence[int], start: int, end: int, width: int = 64) -> int:
    """Return the number of bits set between ``start`` and ``end`` inclusive."""
    return sum(word.bit_count() for _, word in _masked_words(words, start, end, width))


def is_empty_range(words: Sequence[int], start: int, end: int, width: int = 64) -> bool:
    """Tell whether no bit is set between ``start`` and ``end`` inclusive."""
    return not any(word for _, word in _masked_words(words, start, end, width))


def first_set_in_range(
    words: Sequence[int], start: int, end: int, width: int = 64
) -> int | None:
    """Return the first set bit between ``start`` and ``end``, or None."""
    for offset, word in _masked_words(words, start, end, width):
        if word:
            return offset * width + least_significant_bit_position(word)
    return None


def last_set_in_range(
    words: Sequence[int], start: int, end: int, width: int = 64
) -> int | None:
    """Return the last set bit between ``start`` and ``end``, or None."""
    for offset, word in reversed(list(_masked_words(words, start, end, width))):
        if word:
            return offset * width + most_significant_bit_position(word)
    return None