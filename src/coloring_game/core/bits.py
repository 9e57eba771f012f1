"""
Bit manipulation helpers for 64-bit vertex and color masks.

Vertex sets and color palettes are both stored as plain Python ints used as
bitmasks: bit i set means vertex (or color) i is a member. Masks never exceed
64 bits since graphs are capped at 64 vertices and palettes at 63 colors.
"""

from typing import Iterator, List

MAX_VERTICES = 64  # Width of one adjacency mask
MAX_COLORS = MAX_VERTICES - 1  # Palette sizes are in [1, 63]


def all_ones(width: int) -> int:
    """Mask with the lowest `width` bits set."""
    if width < 0 or width > MAX_VERTICES:
        raise ValueError(f"Mask width {width} out of range [0, {MAX_VERTICES}]")
    return (1 << width) - 1


def popcount(mask: int) -> int:
    """Number of set bits in mask."""
    return mask.bit_count()


def lowest_bit(mask: int) -> int:
    """
    Index of the lowest set bit.

    Args:
        mask: Non-zero bitmask

    Returns:
        Position of the least significant set bit
    """
    if mask == 0:
        raise ValueError("Empty mask has no lowest bit")
    return (mask & -mask).bit_length() - 1


def iter_bits(mask: int) -> Iterator[int]:
    """
    Yield set bit positions in increasing order.

    Extracts and clears the lowest set bit until the mask is empty. The
    generator works on its own copy of the mask, so it is finite and cannot
    be restarted; call again for a fresh traversal.
    """
    while mask:
        lsb = mask & -mask
        yield lsb.bit_length() - 1
        mask ^= lsb


def next_combination(combo: List[int], n: int) -> bool:
    """
    Advance a sorted index list to the next k-subset of {0, ..., n-1}.

    Combinations are visited in increasing lexicographic order, starting from
    [0, 1, ..., k-1]. The list is modified in place.

    Args:
        combo: Strictly increasing indices, len(combo) = k >= 1
        n: Size of the ground set

    Returns:
        True if combo now holds the next combination, False if it was
        already the last one (combo is left unchanged)
    """
    k = len(combo)
    if k == 0 or k > n:
        return False

    if combo[k - 1] < n - 1:
        combo[k - 1] += 1
        return True

    # Rightmost position that can still move up
    j = k - 2
    while j >= 0 and combo[j] >= n - k + j:
        j -= 1

    if j < 0:
        return False

    combo[j] += 1
    for i in range(j + 1, k):
        combo[i] = combo[i - 1] + 1

    return True
