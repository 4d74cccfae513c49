"""Tests for deckstring API endpoints."""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from hstool.config import settings
from hstool.main import app


@pytest.fixture
async def client():
    """Provide an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestDecodeEndpoint:
    async def test_decode_known_deckstring(
        self, client: AsyncClient, known_deckstring: str
    ) -> None:
        response = await client.post("/deckstring/decode", json={"deckstring": known_deckstring})

        assert response.status_code == 200
        body = response.json()
        assert body["outcome"] == "success"
        assert body["failure"] is None

        deck = body["data"]
        assert deck["format"] == "wild"
        assert deck["heroes"] == [101648]
        assert len(deck["cards"]) == 24
        assert deck["cards"][0] == {"id": 69566, "count": 2}
        assert deck["cards"][-1] == {"id": 102225, "count": 2}
        assert deck["total_cards"] == 40
        assert [s["owner"] for s in deck["sideboards"]] == [90749, 90749, 90749]
        assert [s["id"] for s in deck["sideboards"]] == [69616, 76984, 78079]

    async def test_surrounding_whitespace_ignored(
        self, client: AsyncClient, known_deckstring: str
    ) -> None:
        response = await client.post(
            "/deckstring/decode", json={"deckstring": f"  {known_deckstring}\n"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["format"] == "wild"

    async def test_deck_without_sideboards(self, client: AsyncClient) -> None:
        # marker, version 1, standard, no heroes, no cards
        response = await client.post("/deckstring/decode", json={"deckstring": "AAECAAAAAA=="})

        assert response.status_code == 200
        deck = response.json()["data"]
        assert deck["format"] == "standard"
        assert deck["cards"] == []
        assert deck["sideboards"] == []


class TestDecodeFailures:
    @pytest.mark.parametrize(
        ("deckstring", "kind"),
        [
            ("not base64!", "invalid_encoding"),
            ("AAE", "invalid_encoding"),
            ("", "invalid_deckstring"),
            ("AQ==", "invalid_deckstring"),
            ("AAIB", "unsupported_version"),
            ("AAEB", "unexpected_end_of_input"),
        ],
    )
    async def test_failure_kinds(self, client: AsyncClient, deckstring: str, kind: str) -> None:
        response = await client.post("/deckstring/decode", json={"deckstring": deckstring})

        assert response.status_code == 400
        body = response.json()
        assert body["outcome"] == "known_failure"
        assert body["data"] is None
        assert body["failure"]["kind"] == kind
        assert body["failure"]["message"]

    async def test_too_long_is_refused(self, client: AsyncClient) -> None:
        with patch.object(settings, "max_deckstring_length", 8):
            response = await client.post(
                "/deckstring/decode", json={"deckstring": "AAEBAAAAAAAAAAAA"}
            )

        assert response.status_code == 400
        body = response.json()
        assert body["outcome"] == "refusal"
        assert body["failure"]["kind"] == "input_too_large"

    async def test_missing_field_is_validation_error(self, client: AsyncClient) -> None:
        response = await client.post("/deckstring/decode", json={})

        assert response.status_code == 422
