"""
Decoder for deckstrings (base64 deck codes).

Binary layout, every integer a varint unless noted:

    byte     reserved marker, always 0
    varint   version, always 1
    varint   format code (1 wild, 2 standard, else unknown)
    varint   hero count, then that many hero ids
    varint   count, then that many card ids            (1 copy each)
    varint   count, then that many card ids            (2 copies each)
    varint   count, then that many (id, copies) pairs
    optional:
    byte     sideboard marker, 1 if sideboards follow
    varint   count, then that many (id, owner) pairs          (1 copy each)
    varint   count, then that many (id, owner) pairs          (2 copies each)
    varint   count, then that many (id, copies, owner) triples

Trailing data after the main deck that does not start with the sideboard
marker is ignored.

Example:
    AAEBAZCaBgjlsASotgSX7wTvkQXipAX9xAXPxgXGxwUQvp8EobYElrcE+dsEuNwEutwE9vAEho
    MFopkF4KQFlMQFu8QFu8cFuJ4Gz54G0Z4GAAED8J8E/cQFuNkE/cQF/+EE/cQFAAA=
"""

import base64
import binascii
from collections.abc import Callable
from typing import TypeVar

from hstool.models.deckstring import CardInclude, Deck, FormatType, SideboardEntry
from hstool.models.failure import (
    InvalidDeckstringError,
    InvalidEncodingError,
    UnsupportedVersionError,
)
from hstool.parsers.varint import read_varint

DECKSTRING_MARKER = 0
SUPPORTED_VERSION = 1
SIDEBOARD_MARKER = 1

# Copies per entry for the three card groups; None means encoded per entry
GROUP_COUNTS: tuple[int | None, ...] = (1, 2, None)

EntryT = TypeVar("EntryT")
EntryReader = Callable[[bytes, int, int | None], tuple[EntryT, int]]


def decode_base64(deckstring: str) -> bytes:
    """
    Decode the base64 transport layer of a deckstring.

    Only canonical standard-alphabet base64 with padding is accepted: no
    whitespace, no excess padding, and unused trailing bits must be zero.

    Raises:
        InvalidEncodingError: If the text is not valid base64
    """
    try:
        encoded = deckstring.encode("ascii")
        data = binascii.a2b_base64(encoded, strict_mode=True)
    except ValueError as e:
        # binascii.Error (bad alphabet/padding/length) and non-ASCII text
        raise InvalidEncodingError(detail=str(e)) from e

    if base64.b64encode(data) != encoded:
        raise InvalidEncodingError(detail="Non-canonical padding or trailing bits")
    return data


def parse_deckstring(deckstring: str) -> Deck:
    """
    Decode a deckstring into a Deck.

    Args:
        deckstring: Base64 deck code, e.g. copied from the game client

    Returns:
        Decoded Deck with heroes, cards and sideboards sorted

    Raises:
        InvalidEncodingError: Text is not valid base64
        InvalidDeckstringError: Decoded data is empty or lacks the marker byte
        UnsupportedVersionError: Version field is not 1
        UnexpectedEndOfInputError: Data ends in the middle of a field
    """
    return parse_deck_bytes(decode_base64(deckstring))


def parse_deck_bytes(data: bytes) -> Deck:
    """
    Decode the binary body of a deckstring.

    Same as parse_deckstring() without the base64 step.
    """
    if not data or data[0] != DECKSTRING_MARKER:
        raise InvalidDeckstringError(detail="Missing reserved marker byte")
    index = 1

    version, index = read_varint(data, index)
    if version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(version)

    format_code, index = read_varint(data, index)

    heroes: list[int] = []
    hero_count, index = read_varint(data, index)
    for _ in range(hero_count):
        hero_id, index = read_varint(data, index)
        heroes.append(hero_id)
    heroes.sort()

    cards, index = _read_groups(data, index, _read_card)
    # list.sort is stable: equal ids keep group order
    cards.sort(key=lambda card: card.id)

    sideboards: list[SideboardEntry] = []
    if index < len(data) and data[index] == SIDEBOARD_MARKER:
        sideboards, index = _read_groups(data, index + 1, _read_sideboard_entry)
        sideboards.sort(key=lambda entry: (entry.owner, entry.id))

    return Deck(
        format=FormatType.from_code(format_code),
        heroes=tuple(heroes),
        cards=tuple(cards),
        sideboards=tuple(sideboards),
    )


def _read_groups(
    data: bytes,
    index: int,
    read_entry: EntryReader[EntryT],
) -> tuple[list[EntryT], int]:
    """Read the three back-to-back length-prefixed card groups."""
    entries: list[EntryT] = []
    for copies in GROUP_COUNTS:
        group_size, index = read_varint(data, index)
        for _ in range(group_size):
            entry, index = read_entry(data, index, copies)
            entries.append(entry)
    return entries, index


def _read_card(data: bytes, index: int, copies: int | None) -> tuple[CardInclude, int]:
    card_id, index = read_varint(data, index)
    if copies is None:
        copies, index = read_varint(data, index)
    return CardInclude(id=card_id, count=copies), index


def _read_sideboard_entry(
    data: bytes, index: int, copies: int | None
) -> tuple[SideboardEntry, int]:
    card_id, index = read_varint(data, index)
    if copies is None:
        copies, index = read_varint(data, index)
    owner, index = read_varint(data, index)
    return SideboardEntry(id=card_id, count=copies, owner=owner), index
