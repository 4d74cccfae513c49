from hstool.parsers.deckstring import (
    decode_base64,
    parse_deck_bytes,
    parse_deckstring,
)
from hstool.parsers.varint import read_varint

__all__ = [
    "decode_base64",
    "parse_deck_bytes",
    "parse_deckstring",
    "read_varint",
]
