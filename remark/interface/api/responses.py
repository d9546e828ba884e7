"""Response helpers."""

from fastapi.responses import JSONResponse


class NoStoreJSONResponse(JSONResponse):
    """JSON response that intermediaries must not cache.

    Comment listings change with every post, and token responses are
    credentials.
    """

    def __init__(self, content, status_code: int = 200, headers=None, **kwargs) -> None:
        headers = {**(headers or {}), "cache-control": "no-store"}
        super().__init__(content, status_code=status_code, headers=headers, **kwargs)


def error_response(code: str, status_code: int) -> NoStoreJSONResponse:
    """Uniform error envelope: ``{"ok": false, "error": code}``."""
    return NoStoreJSONResponse({"ok": False, "error": code}, status_code=status_code)
