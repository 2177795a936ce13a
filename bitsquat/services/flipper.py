from typing import List, Sequence

# --- Flip Generator ---


def generate_variants(bits: Sequence[int], strict: bool = False) -> List[List[int]]:
    """
    Produces the single-bit-flip variants of a bit sequence.

    In the default (compatible) layout the result has ``len(bits) + 1`` entries:
    entry 0 is an untouched copy and entry ``i`` (1..N) has bit ``i`` complemented.
    Bit 0 is therefore never flipped, and the flip for ``i == N`` lands one slot
    past the last bit, leaving that entry equal to the input as well. Candidate
    counts downstream depend on this layout, so it is kept as is.

    With ``strict=True`` the result has exactly ``len(bits)`` entries, entry ``k``
    having bit ``k`` (0..N-1) complemented, i.e. every true single-bit neighbour.

    Args:
        bits (Sequence[int]): Source bits (0/1). Never modified.
        strict (bool): Use the strict layout described above.

    Returns:
        List[List[int]]: Fresh lists, one per variant, each ``len(bits)`` long.
    """
    size = len(bits)
    if strict:
        positions = range(size)
        variants = [list(bits) for _ in positions]
        for k in positions:
            variants[k][k] ^= 1
        return variants

    variants = [list(bits) for _ in range(size + 1)]
    for i in range(1, size + 1):
        # Position `size` is outside the vector
        if i < size:
            variants[i][i] ^= 1
    return variants


def hamming_distance(first: Sequence[int], second: Sequence[int]) -> int:
    """Number of positions at which two equally long bit sequences differ."""
    if len(first) != len(second):
        raise ValueError("Bit sequences must have the same length")
    return sum(a != b for a, b in zip(first, second))
