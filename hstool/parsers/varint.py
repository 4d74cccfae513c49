"""
Unsigned LEB128 varint reader.

Each byte carries 7 payload bits, least significant group first. The high bit
is set on every byte except the last.

The accumulator is 32 bits wide. There is no limit on the number of
continuation bytes: bits that land at offset 32 or above are dropped, so
over-long varints wrap instead of failing. Deckstrings produced by the game
never need more than 5 bytes per value.
"""

from hstool.models.failure import UnexpectedEndOfInputError

UINT32_MASK = 0xFFFFFFFF

_PAYLOAD_BITS = 0x7F
_CONTINUATION_BIT = 0x80


def read_varint(data: bytes, index: int) -> tuple[int, int]:
    """
    Read one varint starting at `index`.

    Args:
        data: Buffer to read from
        index: Position of the first byte of the varint

    Returns:
        Tuple of (value, position just past the varint)

    Raises:
        UnexpectedEndOfInputError: If the buffer ends before the final byte
    """
    result = 0
    shift = 0

    while True:
        if index >= len(data):
            raise UnexpectedEndOfInputError(position=index)
        byte = data[index]
        index += 1
        result = (result | ((byte & _PAYLOAD_BITS) << shift)) & UINT32_MASK
        if not byte & _CONTINUATION_BIT:
            return result, index
        shift += 7
