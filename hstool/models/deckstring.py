from dataclasses import dataclass, field
from enum import Enum


class FormatType(str, Enum):
    """Game format a deck is built for."""

    UNKNOWN = "unknown"
    WILD = "wild"
    STANDARD = "standard"

    @classmethod
    def from_code(cls, code: int) -> "FormatType":
        """
        Map an encoded format code to a FormatType.

        Unrecognized codes (including 0) map to UNKNOWN instead of failing.
        """
        return _FORMATS_BY_CODE.get(code, cls.UNKNOWN)


_FORMATS_BY_CODE: dict[int, FormatType] = {
    1: FormatType.WILD,
    2: FormatType.STANDARD,
}


@dataclass(frozen=True, slots=True)
class CardInclude:
    """
    A main-deck card with its number of copies.

    Attributes:
        id: Card database id (DBF id)
        count: Number of copies in the deck
    """

    id: int
    count: int


@dataclass(frozen=True, slots=True)
class SideboardEntry:
    """
    A sideboard card attached to an owning card in the main deck.

    Attributes:
        id: Card database id of the sideboard card
        count: Number of copies
        owner: Card database id of the main-deck card owning this sideboard
    """

    id: int
    count: int
    owner: int


@dataclass(frozen=True)
class Deck:
    """
    A decoded deck.

    Attributes:
        format: Format the deck was encoded for
        heroes: Hero card ids, ascending (duplicates kept)
        cards: Main-deck cards, ascending by id (equal ids keep encoded order)
        sideboards: Sideboard cards, ascending by (owner, id)
    """

    format: FormatType = FormatType.UNKNOWN
    heroes: tuple[int, ...] = field(default_factory=tuple)
    cards: tuple[CardInclude, ...] = field(default_factory=tuple)
    sideboards: tuple[SideboardEntry, ...] = field(default_factory=tuple)

    def total_cards(self) -> int:
        """Total number of main-deck cards, counting copies."""
        return sum(card.count for card in self.cards)

    def unique_cards(self) -> int:
        """Number of distinct main-deck card ids."""
        return len({card.id for card in self.cards})

    @property
    def has_sideboards(self) -> bool:
        """True if any sideboard cards were encoded."""
        return len(self.sideboards) > 0

    def sideboard_owners(self) -> list[int]:
        """Distinct owner ids, ascending."""
        return sorted({entry.owner for entry in self.sideboards})

    def sideboard_for(self, owner: int) -> list[SideboardEntry]:
        """Sideboard entries belonging to `owner`, in deck order."""
        return [entry for entry in self.sideboards if entry.owner == owner]
