"""Tests for the command-line decoder."""

import json
import logging

import pytest

from hstool.jobs.decode_deckstring import deck_to_json, format_deck, main
from hstool.models.deckstring import CardInclude, Deck, FormatType, SideboardEntry


@pytest.fixture
def small_deck() -> Deck:
    return Deck(
        format=FormatType.STANDARD,
        heroes=(7,),
        cards=(CardInclude(id=10, count=2), CardInclude(id=20, count=1)),
        sideboards=(SideboardEntry(id=30, count=1, owner=20),),
    )


class TestFormatDeck:
    def test_listing(self, small_deck: Deck) -> None:
        text = format_deck(small_deck)

        assert text.splitlines() == [
            "Format: standard",
            "Heroes: 7",
            "Cards (2 unique, 3 total):",
            "  2x 10",
            "  1x 20",
            "Sideboards:",
            "  20:",
            "    1x 30",
        ]

    def test_listing_without_sideboards(self) -> None:
        text = format_deck(Deck())

        assert "Sideboards" not in text
        assert "Heroes: -" in text

    def test_json(self, small_deck: Deck) -> None:
        payload = json.loads(deck_to_json(small_deck))

        assert payload == {
            "format": "standard",
            "heroes": [7],
            "cards": [{"id": 10, "count": 2}, {"id": 20, "count": 1}],
            "sideboards": [{"id": 30, "count": 1, "owner": 20}],
        }


class TestMain:
    def test_decodes_known_deckstring(
        self, known_deckstring: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([known_deckstring]) == 0

        out = capsys.readouterr().out
        assert "Format: wild" in out
        assert "Heroes: 101648" in out
        assert "  90749:" in out

    def test_json_output(self, known_deckstring: str, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", known_deckstring]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["format"] == "wild"
        assert len(payload["cards"]) == 24

    def test_decode_error_exit_status(
        self, caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with caplog.at_level(logging.ERROR):
            assert main(["AAIB"]) == 1

        assert "unsupported_version" in caplog.text
        assert capsys.readouterr().out == ""
