from typing import List, Sequence

from bitsquat.config.bconfig import BYTE
from bitsquat.services.errors import EncodingError, InvalidLength

# --- Bit Codec ---
# A label is turned into a flat list of 0/1 ints, 8 bits per character,
# most significant bit first, and back again.

MAX_CODE_POINT = (1 << BYTE) - 1


def encode(label: str) -> List[int]:
    """
    Converts a label into its bit-level representation.

    Args:
        label (str): Domain label or extension. Every character must fit in one
                     byte (code point 0-255).

    Returns:
        List[int]: ``8 * len(label)`` bits, character order, MSB first.

    Raises:
        EncodingError: If a character is outside the single-byte range.
    """
    bits: List[int] = []
    for position, char in enumerate(label):
        code = ord(char)
        if code > MAX_CODE_POINT:
            raise EncodingError(
                f"Character {char!r} at position {position} of '{label}' does not fit in {BYTE} bits")
        # Shift/mask from the top bit down
        bits.extend((code >> shift) & 1 for shift in range(BYTE - 1, -1, -1))
    return bits


def decode(bits: Sequence[int], length: int) -> str:
    """
    Inverse of :func:`encode`: reads each group of 8 bits as an unsigned byte.

    Args:
        bits (Sequence[int]): The bit sequence, exactly ``8 * length`` long.
        length (int): Number of characters the bits stand for.

    Returns:
        str: The decoded label.

    Raises:
        InvalidLength: If the bit count is not a multiple of 8 or does not
                       match ``length``.
        EncodingError: If an element is neither 0 nor 1.
    """
    if len(bits) % BYTE != 0:
        raise InvalidLength(f"Bit count {len(bits)} is not a multiple of {BYTE}")
    if length < 0 or len(bits) != BYTE * length:
        raise InvalidLength(f"Bit count {len(bits)} does not match a label of {length} characters")

    chars = []
    for start in range(0, len(bits), BYTE):
        code = 0
        for bit in bits[start:start + BYTE]:
            if bit not in (0, 1):
                raise EncodingError(f"Invalid bit value {bit!r} at offset {start}")
            code = (code << 1) | bit
        chars.append(chr(code))
    return ''.join(chars)


def to_bitstring(bits: Sequence[int]) -> str:
    """Renders bits as a '0'/'1' string, the form shown in verbose output."""
    return ''.join('1' if bit else '0' for bit in bits)
