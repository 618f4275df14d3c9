"""
Mockgen Exception Hierarchy

Every error carries an HTTP status code and a short `kind` used in error
payloads, so the API layer can map failures without inspecting types.

Guide:
    1. Malformed interface grammar -> NotFoundError family, never recovered in the core
    2. Template or syntax failure of the generated code -> RenderError (core bug signal)
    3. Collaborator I/O failures -> IOFailure, wrapping the original OSError

Example:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise IOFailure(f"failed to read {path}", {"path": str(path)}) from e
"""

from typing import Any


class MockgenError(Exception):
    """Base exception for all mockgen errors."""

    http_status_code: int = 500
    kind: str = "internal"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize mockgen error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message

    def to_payload(self) -> dict[str, Any]:
        """Structured error body for API responses."""
        return {"error": self.message, "kind": self.kind, "details": self.details}


# ============================================================
# Grammar Errors
# ============================================================


class NotFoundError(MockgenError):
    """An interface, or one of its methods, did not match the expected grammar."""

    http_status_code = 422
    kind = "not_found"


class InterfaceNotFoundError(NotFoundError):
    """The named interface is not declared in the source."""

    pass


class MethodNotFoundError(NotFoundError):
    """A method line could not be parsed into name, parameters and returns."""

    pass


class AmbiguousInputError(MockgenError):
    """Single-request input declares more than one interface."""

    http_status_code = 422
    kind = "ambiguous_input"


# ============================================================
# Rendering Errors
# ============================================================


class RenderError(MockgenError):
    """
    Template expansion or validation of the generated source failed.

    The raw expansion is kept on `unformatted` for diagnosis.
    """

    http_status_code = 500
    kind = "render_error"

    def __init__(self, message: str, unformatted: str = "", details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.unformatted = unformatted

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["details"] = {**self.details, "unformatted": self.unformatted}
        return payload


# ============================================================
# Collaborator Errors
# ============================================================


class IOFailure(MockgenError):
    """Read, write or formatter invocation failure of a single unit."""

    http_status_code = 500
    kind = "io_failure"


class FormatterError(IOFailure):
    """External source formatter failed."""

    pass


class InvalidInputError(MockgenError):
    """Request payload could not be decoded."""

    http_status_code = 400
    kind = "invalid_input"


class UsageError(MockgenError):
    """Neither a file path nor interface names were given."""

    http_status_code = 400
    kind = "usage"
