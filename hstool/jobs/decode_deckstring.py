"""
Decode a deckstring from the command line.

Usage:
    hstool-decode AAEBAZCaBgjlsASotgSX7wTvkQXipAX9xAXPxgXGxwUQvp8E...
    hstool-decode --json AAEBAZCaBgjlsASotgSX7wTvkQXipAX9xAXPxgXGxwUQvp8E...
"""

import argparse
import dataclasses
import json
import logging
import sys

from hstool.config import settings
from hstool.models.deckstring import Deck
from hstool.models.failure import DeckstringError
from hstool.parsers.deckstring import parse_deckstring

logger = logging.getLogger(__name__)


def format_deck(deck: Deck) -> str:
    """Render a deck as a plain-text listing."""
    lines = [
        f"Format: {deck.format.value}",
        f"Heroes: {', '.join(str(h) for h in deck.heroes) or '-'}",
        f"Cards ({deck.unique_cards()} unique, {deck.total_cards()} total):",
    ]
    lines.extend(f"  {card.count}x {card.id}" for card in deck.cards)

    if deck.has_sideboards:
        lines.append("Sideboards:")
        for owner in deck.sideboard_owners():
            lines.append(f"  {owner}:")
            lines.extend(
                f"    {entry.count}x {entry.id}" for entry in deck.sideboard_for(owner)
            )

    return "\n".join(lines)


def deck_to_json(deck: Deck) -> str:
    """Render a deck as JSON."""
    payload = dataclasses.asdict(deck)
    payload["format"] = deck.format.value
    return json.dumps(payload, indent=2)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Decode a deckstring")
    parser.add_argument("deckstring", help="Base64 deck code")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the deck as JSON instead of a listing",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        deck = parse_deckstring(args.deckstring.strip())
    except DeckstringError as e:
        logger.error("Failed to decode deckstring: %s: %s", e.kind.value, e.message)
        if e.detail:
            logger.debug("Detail: %s", e.detail)
        return 1

    print(deck_to_json(deck) if args.json else format_deck(deck))
    return 0


if __name__ == "__main__":
    sys.exit(main())
