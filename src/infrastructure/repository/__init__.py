from .contest import SqlContestStore
from .database import Base, create_engine, create_session_factory, init_schema
from .interfaces import ContestStore, ProblemStore
from .problem import SqlProblemStore
from .query import ContestFilter, ProblemFilter
from .technical_tag import Algorithm, TechnicalTag, TechnicalTagStore

__all__ = [
    "Algorithm",
    "Base",
    "ContestFilter",
    "ContestStore",
    "ProblemFilter",
    "ProblemStore",
    "SqlContestStore",
    "SqlProblemStore",
    "TechnicalTag",
    "TechnicalTagStore",
    "create_engine",
    "create_session_factory",
    "init_schema",
]
