"""
Deckstring API endpoints.

Decodes deck codes pasted by users into card ids and counts.
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from hstool.config import settings
from hstool.models.deckstring import Deck, FormatType
from hstool.models.failure import (
    ApiResponse,
    DeckstringError,
    FailureKind,
    RefusalError,
    create_success,
)
from hstool.parsers.deckstring import parse_deckstring

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/deckstring", tags=["deckstring"])

EXAMPLE_DECKSTRING = (
    "AAEBAZCaBgjlsASotgSX7wTvkQXipAX9xAXPxgXGxwUQvp8EobYElrcE+dsEuNwEutwE9vAEhoMFopkF"
    "4KQFlMQFu8QFu8cFuJ4Gz54G0Z4GAAED8J8E/cQFuNkE/cQF/+EE/cQFAAA="
)


class DecodeRequest(BaseModel):
    """Request model for decoding a deckstring."""

    deckstring: str = Field(
        ...,
        description="Base64 deck code as exported by the game client",
        examples=[EXAMPLE_DECKSTRING],
    )


class CardIncludeResponse(BaseModel):
    """A main-deck card and its number of copies."""

    id: int
    count: int


class SideboardEntryResponse(BaseModel):
    """A sideboard card and the main-deck card that owns it."""

    id: int
    count: int
    owner: int


class DeckResponse(BaseModel):
    """Response model for a decoded deck."""

    format: FormatType
    heroes: list[int] = Field(default_factory=list)
    cards: list[CardIncludeResponse] = Field(default_factory=list)
    sideboards: list[SideboardEntryResponse] = Field(default_factory=list)
    total_cards: int = Field(
        default=0,
        description="Main-deck card count including copies",
    )

    @classmethod
    def from_deck(cls, deck: Deck) -> "DeckResponse":
        return cls(
            format=deck.format,
            heroes=list(deck.heroes),
            cards=[CardIncludeResponse(id=c.id, count=c.count) for c in deck.cards],
            sideboards=[
                SideboardEntryResponse(id=s.id, count=s.count, owner=s.owner)
                for s in deck.sideboards
            ],
            total_cards=deck.total_cards(),
        )


@router.post("/decode", response_model=ApiResponse[DeckResponse])
async def decode_deckstring(request: DecodeRequest) -> ApiResponse[DeckResponse]:
    """
    Decode a deckstring.

    Surrounding whitespace is ignored. Decode failures are returned as
    known failures naming the reason (invalid_encoding, invalid_deckstring,
    unsupported_version, unexpected_end_of_input).
    """
    deckstring = request.deckstring.strip()

    if len(deckstring) > settings.max_deckstring_length:
        raise RefusalError(
            kind=FailureKind.INPUT_TOO_LARGE,
            message="Deckstring is too long to be a deck code.",
            detail=(
                f"Got {len(deckstring)} characters, "
                f"limit is {settings.max_deckstring_length}"
            ),
            suggestion="Paste only the deck code line.",
        )

    try:
        deck = parse_deckstring(deckstring)
    except DeckstringError as e:
        logger.warning("Deckstring rejected: %s (%s)", e.kind.value, e.detail)
        raise

    logger.info(
        "Decoded %s deck: %d heroes, %d cards, %d sideboard entries",
        deck.format.value,
        len(deck.heroes),
        deck.total_cards(),
        len(deck.sideboards),
    )
    return create_success(DeckResponse.from_deck(deck))
