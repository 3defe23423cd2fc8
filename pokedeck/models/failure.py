"""
Failure envelope for API responses.

Every failure the API reports deliberately is a KnownError. The application
exception handlers render failures as a FailureResponse so the frontend
always gets the same shape:

    {"outcome": "known_failure", "failure": {"kind": ..., "message": ...}}

Outcomes:
- KnownFailure: the service knows why it failed (4xx)
- UnknownFailure: anything else that escaped a handler (500)

Successful calls return their own response models, not this envelope.
"""

from enum import Enum

from pydantic import BaseModel, Field

UNKNOWN_FAILURE_MESSAGE = "Something went wrong and we don't know why. Try again."


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input failures
    INVALID_INPUT = "invalid_input"
    INVALID_DECK_FORMAT = "invalid_deck_format"

    # Rule violations
    FORMAT_ILLEGAL = "format_illegal"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


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


class FailureResponse(BaseModel):
    """Body of every error response the API renders itself."""

    outcome: OutcomeType
    failure: FailureDetail

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "FailureResponse":
        """
        Create a known failure response.

        Example: unparseable deck JSON, illegal deck on a strict export.
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

    @classmethod
    def unknown_failure(cls, detail: str | None = None) -> "FailureResponse":
        """
        Create an unknown failure response.

        The detail names the exception type only; messages may carry input.
        """
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message=UNKNOWN_FAILURE_MESSAGE,
                detail=detail,
                suggestion="If this persists, please report the issue.",
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

    def to_response(self) -> FailureResponse:
        """Convert to a FailureResponse."""
        return FailureResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InvalidInputError(KnownError):
    """Raised when a request is well-formed but its content can't be used."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=message,
            suggestion=suggestion,
            status_code=400,
        )


class InvalidDeckFormatError(KnownError):
    """Raised when deck JSON cannot be parsed or is not a TCG Live export."""

    def __init__(self, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_DECK_FORMAT,
            message="Invalid deck format",
            detail=detail,
            suggestion="Paste the JSON exactly as exported, with name, format and cards.",
            status_code=400,
        )


class DeckRuleViolationError(KnownError):
    """
    Raised when a deck breaks its format rules on a path that requires legality.

    Importing never raises this; only explicit strict paths do.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(
            kind=FailureKind.FORMAT_ILLEGAL,
            message="Deck is not legal for its format",
            detail="; ".join(self.errors),
            suggestion="Fix the listed problems or export without strict checking.",
            status_code=422,
        )
