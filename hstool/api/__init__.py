from hstool.api.deckstring import router as deckstring_router
from hstool.api.health import router as health_router

__all__ = [
    "deckstring_router",
    "health_router",
]
