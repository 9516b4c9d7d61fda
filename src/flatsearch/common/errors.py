from __future__ import annotations


class FlatsearchError(RuntimeError):
    pass


class AuthError(FlatsearchError):
    def __init__(self, reason: str = "authentication failed", status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class SearchError(FlatsearchError):
    def __init__(self, reason: str = "search failed", status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class AuthExpiredError(SearchError):
    """The search endpoint rejected the bearer token; a fresh one may succeed."""

    def __init__(self, status_code: int | None = 401) -> None:
        super().__init__("token rejected", status_code=status_code)


class EmptyBatchError(FlatsearchError, ValueError):
    def __init__(self) -> None:
        super().__init__("no listings to flatten")
