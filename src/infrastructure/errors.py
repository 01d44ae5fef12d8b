"""Infrastructure errors raised by adapters and stores."""

from collections.abc import Sequence

from domain.exceptions import CatalogError


class TransportError(CatalogError):
    """HTTP status, transport or decode failure talking to a judge API."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"{message} ({url})")


class PersistenceError(CatalogError):
    """A chunk of upserts failed and was rolled back."""

    def __init__(self, ids: Sequence[str], message: str):
        self.ids = list(ids)
        super().__init__(f"{message}; affected ids: {', '.join(self.ids)}")


class QueryError(CatalogError):
    """A read query failed."""

    pass
