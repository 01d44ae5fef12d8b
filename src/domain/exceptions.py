"""Domain-level exceptions."""


class CatalogError(Exception):
    """Base exception for the judge catalog."""

    pass


class ReferentialIntegrityError(CatalogError):
    """A fetched problem or contest references an entity missing from the same fetch."""

    def __init__(self, platform: str, message: str):
        self.platform = platform
        super().__init__(f"[{platform}] {message}")


class UnsupportedPlatformError(CatalogError):
    """The requested operation is not available for this platform."""

    def __init__(self, platform: str, operation: str = "this operation"):
        self.platform = platform
        self.operation = operation
        super().__init__(f"Platform {platform!r} does not support {operation}")


class SyncError(CatalogError):
    """A platform synchronization failed during ``fetch`` or ``persist``."""

    def __init__(self, platform: str, phase: str, cause: Exception):
        self.platform = platform
        self.phase = phase
        self.cause = cause
        super().__init__(f"Sync of {platform} failed during {phase}: {cause}")
