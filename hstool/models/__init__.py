from hstool.models.deckstring import CardInclude, Deck, FormatType, SideboardEntry
from hstool.models.failure import (
    UNKNOWN_FAILURE_MESSAGE,
    UNKNOWN_FAILURE_SUGGESTION,
    ApiResponse,
    DeckstringError,
    FailureDetail,
    FailureKind,
    InvalidDeckstringError,
    InvalidEncodingError,
    KnownError,
    OutcomeType,
    RefusalError,
    UnexpectedEndOfInputError,
    UnsupportedVersionError,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)

__all__ = [
    "UNKNOWN_FAILURE_MESSAGE",
    "UNKNOWN_FAILURE_SUGGESTION",
    "ApiResponse",
    "CardInclude",
    "Deck",
    "DeckstringError",
    "FailureDetail",
    "FailureKind",
    "FormatType",
    "InvalidDeckstringError",
    "InvalidEncodingError",
    "KnownError",
    "OutcomeType",
    "RefusalError",
    "SideboardEntry",
    "UnexpectedEndOfInputError",
    "UnsupportedVersionError",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
    "is_finalized",
]
