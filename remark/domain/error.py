"""Domain layer errors.

Every domain error carries a short machine-readable ``code`` that the API
returns to clients unchanged (``{"ok": false, "error": code}``).
"""


class DomainError(Exception):
    """Base domain error."""

    code: str = "domain_error"

    def __init__(self, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        super().__init__(self.code)


class ValidationError(DomainError):
    """Input has the wrong shape or length."""

    code = "invalid_request"


class AuthError(DomainError):
    """Missing, malformed or forged credentials."""

    code = "invalid_token"


class QuotaExceededError(DomainError):
    """Raised when a user document already holds the maximum number of comments."""

    code = "too_many_comments"


class ConcurrentModificationError(DomainError):
    """Raised when a conditional write keeps losing to concurrent writers."""

    code = "write_conflict"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource}_not_found")
