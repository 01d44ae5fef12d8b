"""Per-platform aggregation: raw records -> (problems, contests) or submissions."""

from .aoj import AojAssembler
from .atcoder import AtcoderAssembler
from .base import Catalog, CatalogAssembler
from .codeforces import CodeforcesAssembler
from .yosupo import YosupoAssembler
from .yukicoder import YukicoderAssembler

__all__ = [
    "AojAssembler",
    "AtcoderAssembler",
    "Catalog",
    "CatalogAssembler",
    "CodeforcesAssembler",
    "YosupoAssembler",
    "YukicoderAssembler",
]
