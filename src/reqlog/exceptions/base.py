"""
Custom exceptions for request-log format compilation and the request logger.
"""


# canonical configuration-time exception

class FormatError(ValueError):
    """
    Base exception for template compilation errors.

    - message: human-friendly message (safe to print at startup)
    - token: optional offending placeholder text (e.g., 'unknown')
    - position: optional zero-based index of the opening brace in the template
    - error_code: canonical short code (e.g., 'unknown_field') used by callers and tests

    Subclasses ValueError so pydantic field validators turn it into a
    ValidationError when the template comes from Settings.
    """

    def __init__(self, message: str, *, token: str | None = None,
                 position: int | None = None, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.token = token
        self.position = position
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.token is not None:
            parts.append(f"token: {self.token!r}")
        if self.position is not None:
            parts.append(f"position: {self.position}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def to_payload(self) -> dict:
        """
        Return a JSON-serializable dict describing the error.
        Standard shape:
            {
                "detail": "Unknown field token in request log template",
                "code": "unknown_field",
                "token": "unknown",
                "position": 0,
            }
        Pass it as `extra=` when logging a startup failure.
        """
        payload: dict = {"detail": self.message}
        if self.error_code:
            payload["code"] = self.error_code
        if self.token is not None:
            payload["token"] = self.token
        if self.position is not None:
            payload["position"] = self.position
        return payload


class UnterminatedPlaceholderError(FormatError):
    """Raised when a '{' has no matching '}' before the end of the template."""

    def __init__(self, position: int):
        super().__init__(
            "Unterminated placeholder in request log template",
            position=position,
            error_code="unterminated_placeholder",
        )


class UnknownFieldTokenError(FormatError):
    """Raised when a '{...}' placeholder names a field that does not exist."""

    def __init__(self, token: str, *, position: int | None = None):
        super().__init__(
            "Unknown field token in request log template",
            token=token,
            position=position,
            error_code="unknown_field",
        )


class StartTimeMissingError(RuntimeError):
    """
    Raised by the request logger when a request completes but its start was never
    recorded. This is a wiring bug in the middleware chain, not a render-time condition.
    """


__all__ = [
    "FormatError",
    "UnterminatedPlaceholderError",
    "UnknownFieldTokenError",
    "StartTimeMissingError",
]
