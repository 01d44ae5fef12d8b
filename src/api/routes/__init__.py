from api.routes.problem import ContestController, ProblemController
from api.routes.submission import SubmissionController
from api.routes.sync import SyncController, TagController, health

__all__ = [
    "ContestController",
    "ProblemController",
    "SubmissionController",
    "SyncController",
    "TagController",
    "health",
]
