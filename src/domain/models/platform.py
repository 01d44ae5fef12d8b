"""Platform value object."""

from enum import Enum


class Platform(str, Enum):
    """Judge platforms known to the catalog."""

    ATCODER = "atcoder"
    CODEFORCES = "codeforces"
    YUKICODER = "yukicoder"
    AOJ = "aoj"
    YOSUPO = "yosupo_online_judge"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "Platform":
        """Parse a platform tag, mapping anything unrecognized to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def supported(cls) -> list["Platform"]:
        return [p for p in cls if p is not cls.UNKNOWN]

    def __str__(self) -> str:
        return self.value
