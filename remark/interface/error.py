"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error: a request rejected before reaching a use case."""

    status_code: int = 400
    code: str = "invalid_request"

    def __init__(self, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        super().__init__(self.code)


class MalformedBodyError(InterfaceError):
    """Request body is not parseable JSON."""

    code = "invalid_json"
