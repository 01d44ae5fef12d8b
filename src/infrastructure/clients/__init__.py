"""Source adapters for the supported judges."""

from .aoj import AojApiClient
from .atcoder import AtcoderApiClient
from .codeforces import CodeforcesApiClient
from .interfaces import (
    AojSourceProtocol,
    AtcoderSourceProtocol,
    CodeforcesSourceProtocol,
    HTTPClientProtocol,
    RawRecord,
    YosupoSourceProtocol,
    YukicoderSourceProtocol,
)
from .yosupo import YosupoApiClient
from .yukicoder import YukicoderApiClient

__all__ = [
    "AojApiClient",
    "AojSourceProtocol",
    "AtcoderApiClient",
    "AtcoderSourceProtocol",
    "CodeforcesApiClient",
    "CodeforcesSourceProtocol",
    "HTTPClientProtocol",
    "RawRecord",
    "YosupoApiClient",
    "YosupoSourceProtocol",
    "YukicoderApiClient",
    "YukicoderSourceProtocol",
]
