"""
Failure envelope and deckstring error taxonomy.

Every response leaving the HTTP surface is wrapped in an ApiResponse and
classified into one of four outcomes:

- Success: the deckstring decoded
- Refusal: the service chose not to decode (input over a configured limit)
- KnownFailure: decoding failed for a known reason (bad base64, bad header,
  unsupported version, truncated data)
- UnknownFailure: something else went wrong

All user-visible responses pass through `finalize_response()`.

Decode errors are raised as DeckstringError subclasses. They are terminal:
decoding is deterministic, so retrying the same input cannot succeed.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, PrivateAttr


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INPUT_TOO_LARGE = "input_too_large"

    # Deckstring decode failures
    INVALID_ENCODING = "invalid_encoding"
    INVALID_DECKSTRING = "invalid_deckstring"
    UNSUPPORTED_VERSION = "unsupported_version"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    REFUSAL = "refusal"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope for all API endpoints.

    Every response is classified into one of four outcome types.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    # Set only by finalize_response()
    _finalized: bool = PrivateAttr(default=False)

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def refusal(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a refusal response.

        Use when the service chose not to proceed due to a constraint.
        Example: deckstring longer than the configured limit.
        """
        return cls(
            outcome=OutcomeType.REFUSAL,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the service knows exactly why the operation failed.
        Example: the deckstring is not valid base64.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class RefusalError(Exception):
    """
    Exception for constraint-based refusals.

    Use when the service refuses to proceed due to a configured constraint.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.refusal(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


# =============================================================================
# DECKSTRING ERRORS
# =============================================================================


class DeckstringError(KnownError):
    """Base class for deckstring decode failures."""


class InvalidEncodingError(DeckstringError):
    """The deckstring is not valid padded base64."""

    def __init__(self, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_ENCODING,
            message="Deckstring is not valid base64.",
            detail=detail,
            suggestion="Copy the whole deck code again, including any trailing '='.",
        )


class InvalidDeckstringError(DeckstringError):
    """The decoded buffer is empty or does not start with the reserved marker byte."""

    def __init__(self, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_DECKSTRING,
            message="Input is not a deckstring.",
            detail=detail,
            suggestion="Check that the text is a deck code exported from the game.",
        )


class UnsupportedVersionError(DeckstringError):
    """The deckstring version field is not one this decoder reads."""

    def __init__(self, version: int):
        self.version = version
        super().__init__(
            kind=FailureKind.UNSUPPORTED_VERSION,
            message=f"Deckstring version {version} is not supported.",
            detail=f"version={version}",
        )


class UnexpectedEndOfInputError(DeckstringError):
    """The buffer ran out while a varint or byte was still required."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            kind=FailureKind.UNEXPECTED_END_OF_INPUT,
            message="Deckstring ended unexpectedly.",
            detail=f"Ran out of data at byte {position}",
            suggestion="The deck code looks truncated. Copy it again.",
        )


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================
#
# All user-visible responses MUST pass through this boundary.
#
# =============================================================================


# Fixed text for unknown failures. It never echoes the exception.

UNKNOWN_FAILURE_MESSAGE = (
    "I failed and I don't know why. Try simplifying the request or retrying."
)
UNKNOWN_FAILURE_SUGGESTION = "If this persists, please report the issue."


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response through the authority boundary.

    Every response that passes through this function is guaranteed to:
    1. Have a valid outcome classification
    2. Have failure details if not successful

    Args:
        response: The ApiResponse to finalize

    Returns:
        The same response, marked as having passed through the boundary

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")

    response._finalized = True

    return response


def is_finalized(response: ApiResponse[Any]) -> bool:
    """Check if a response has passed through the authority boundary."""
    return response._finalized


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse[Any]:
    """
    Create an unknown failure response from an exception.

    The message is fixed. Only the exception type name is exposed, never
    its text.

    Args:
        exception: The exception that caused the failure
        include_type: Whether to include exception type in detail

    Returns:
        A finalized unknown failure response
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=UNKNOWN_FAILURE_MESSAGE,
            detail=detail,
            suggestion=UNKNOWN_FAILURE_SUGGESTION,
        ),
    )

    return finalize_response(response)


def create_success(data: T) -> ApiResponse[T]:
    """Create a finalized success response."""
    return finalize_response(ApiResponse[T].success(data))
