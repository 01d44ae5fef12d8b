"""Protocol interfaces for the judge API adapters.

Adapters return records exactly as the judge serves them (decoded JSON, or
decoded TOML for Library Checker). All reshaping happens in the assemblers.
"""

from typing import Any, Protocol

RawRecord = dict[str, Any]


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str, params: dict[str, Any] | None = None) -> str:
        """Get text content from URL."""
        ...

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Get decoded JSON from URL."""
        ...


class AtcoderSourceProtocol(Protocol):
    async def fetch_contests(self) -> list[RawRecord]: ...

    async def fetch_problems(self) -> list[RawRecord]: ...

    async def fetch_problem_models(self) -> dict[str, RawRecord]: ...

    async def fetch_recent_submissions(self) -> list[RawRecord]: ...

    async def fetch_user_submissions(self, user_id: str, from_second: int) -> list[RawRecord]: ...


class CodeforcesSourceProtocol(Protocol):
    async def fetch_problemset(self) -> RawRecord: ...

    async def fetch_contests(self) -> list[RawRecord]: ...

    async def fetch_recent_submissions(self, count: int = 100) -> list[RawRecord]: ...

    async def fetch_user_submissions(
        self, handle: str, from_index: int = 1, count: int = 100
    ) -> list[RawRecord]: ...


class YukicoderSourceProtocol(Protocol):
    async def fetch_problems(self) -> list[RawRecord]: ...

    async def fetch_past_contests(self) -> list[RawRecord]: ...

    async def fetch_problem_detail(self, problem_id: int) -> RawRecord: ...


class AojSourceProtocol(Protocol):
    async def fetch_volume_ids(self) -> list[int]: ...

    async def fetch_volume_problems(self, volume_id: int) -> list[RawRecord]: ...

    async def fetch_challenge_classes(self) -> list[tuple[str, str]]: ...

    async def fetch_challenge_contests(self, large_cl: str, middle_cl: str) -> list[RawRecord]: ...

    async def fetch_recent_submissions(self) -> list[RawRecord]: ...

    async def fetch_user_submissions(
        self, user_id: str, page: int | None = None, size: int | None = None
    ) -> list[RawRecord]: ...


class YosupoSourceProtocol(Protocol):
    async def fetch_categories(self) -> list[RawRecord]: ...
