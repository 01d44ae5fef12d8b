"""Library Checker (Yosupo Online Judge) problem categories."""

import tomllib

from loguru import logger

from infrastructure.errors import TransportError

from .interfaces import HTTPClientProtocol, RawRecord

CATEGORIES_URL = (
    "https://raw.githubusercontent.com/yosupo06/library-checker-problems/master/categories.toml"
)


class YosupoApiClient:
    def __init__(self, http_client: HTTPClientProtocol):
        self.http_client = http_client

    async def fetch_categories(self) -> list[RawRecord]:
        """Categories as ``{"name": str, "problems": [str, ...]}``."""
        logger.debug("Fetching Library Checker categories")
        raw_toml = await self.http_client.get_text(CATEGORIES_URL)

        try:
            document = tomllib.loads(raw_toml)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Failed to parse categories.toml: {e}")
            raise TransportError(CATEGORIES_URL, f"Invalid TOML: {e}") from e

        return list(document.get("categories", []))
