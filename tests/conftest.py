import pytest

KNOWN_DECKSTRING = (
    "AAEBAZCaBgjlsASotgSX7wTvkQXipAX9xAXPxgXGxwUQvp8EobYElrcE+dsEuNwEutwE9v"
    "AEhoMFopkF4KQFlMQFu8QFu8cFuJ4Gz54G0Z4GAAED8J8E/cQFuNkE/cQF/+EE/cQFAAA="
)


@pytest.fixture
def known_deckstring() -> str:
    """Deckstring for a wild deck with one hero and a sideboard."""
    return KNOWN_DECKSTRING
