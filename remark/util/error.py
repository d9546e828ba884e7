"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigError(UtilError):
    """Configuration error.

    Raised lazily, on the first operation that needs the missing value.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(code)
