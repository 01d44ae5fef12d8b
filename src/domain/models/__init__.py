from .category import (
    AojCategory,
    AtcoderCategory,
    CodeforcesCategory,
    ContestCategory,
    YosupoCategory,
    YukicoderCategory,
)
from .contest import Contest
from .identifiers import ContestIdentifier, ProblemIdentifier, SubmissionIdentifier
from .language import Language
from .phase import Phase
from .platform import Platform
from .problem import Problem
from .submission import ProblemInfo, Submission
from .verdict import Verdict

__all__ = [
    "AojCategory",
    "AtcoderCategory",
    "CodeforcesCategory",
    "Contest",
    "ContestCategory",
    "ContestIdentifier",
    "Language",
    "Phase",
    "Platform",
    "Problem",
    "ProblemIdentifier",
    "ProblemInfo",
    "Submission",
    "SubmissionIdentifier",
    "Verdict",
    "YosupoCategory",
    "YukicoderCategory",
]
