"""Verdict value object and the per-platform mapping tables."""

from enum import Enum


class Verdict(str, Enum):
    """Judge outcome, stored by its short code."""

    COMPILE_ERROR = "CE"
    WRONG_ANSWER = "WA"
    TIME_LIMIT_EXCEEDED = "TLE"
    MEMORY_LIMIT_EXCEEDED = "MLE"
    ACCEPTED = "AC"
    WAITING = "WJ"
    OUTPUT_LIMIT_EXCEEDED = "OLE"
    RUNTIME_ERROR = "RE"
    PRESENTATION_ERROR = "PE"
    FAILED = "FAILED"
    OK = "OK"
    PARTIAL = "PARTIAL"
    IDLENESS_LIMIT_EXCEEDED = "ILE"
    SECURITY_VIOLATED = "SV"
    CRASHED = "CRASHED"
    INPUT_PREPARATION_CRASHED = "IPC"
    CHALLENGED = "CHALLENGED"
    SKIPPED = "SKIPPED"
    TESTING = "TESTING"
    REJECTED = "REJECTED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_code(cls, code: str | None) -> "Verdict":
        """Map a short verdict code (AtCoder style) to a Verdict."""
        if code is None:
            return cls.UNKNOWN
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def from_codeforces(cls, verdict: str | None) -> "Verdict":
        """Map a Codeforces verdict name such as ``WRONG_ANSWER``."""
        if verdict is None:
            return cls.TESTING
        return CODEFORCES_VERDICTS.get(verdict, cls.UNKNOWN)

    @classmethod
    def from_aoj_status(cls, status: int | None) -> "Verdict":
        """Map an AOJ numeric status (see developers.u-aizu.ac.jp)."""
        return AOJ_STATUSES.get(status, cls.UNKNOWN)

    def __str__(self) -> str:
        return self.value


CODEFORCES_VERDICTS: dict[str, Verdict] = {
    "FAILED": Verdict.FAILED,
    "OK": Verdict.ACCEPTED,
    "PARTIAL": Verdict.PARTIAL,
    "COMPILATION_ERROR": Verdict.COMPILE_ERROR,
    "RUNTIME_ERROR": Verdict.RUNTIME_ERROR,
    "WRONG_ANSWER": Verdict.WRONG_ANSWER,
    "PRESENTATION_ERROR": Verdict.PRESENTATION_ERROR,
    "TIME_LIMIT_EXCEEDED": Verdict.TIME_LIMIT_EXCEEDED,
    "MEMORY_LIMIT_EXCEEDED": Verdict.MEMORY_LIMIT_EXCEEDED,
    "IDLENESS_LIMIT_EXCEEDED": Verdict.IDLENESS_LIMIT_EXCEEDED,
    "SECURITY_VIOLATED": Verdict.SECURITY_VIOLATED,
    "CRASHED": Verdict.CRASHED,
    "INPUT_PREPARATION_CRASHED": Verdict.INPUT_PREPARATION_CRASHED,
    "CHALLENGED": Verdict.CHALLENGED,
    "SKIPPED": Verdict.SKIPPED,
    "TESTING": Verdict.TESTING,
    "REJECTED": Verdict.REJECTED,
}

AOJ_STATUSES: dict[int, Verdict] = {
    0: Verdict.COMPILE_ERROR,
    1: Verdict.WRONG_ANSWER,
    2: Verdict.TIME_LIMIT_EXCEEDED,
    3: Verdict.MEMORY_LIMIT_EXCEEDED,
    4: Verdict.ACCEPTED,
    5: Verdict.WAITING,
    6: Verdict.OUTPUT_LIMIT_EXCEEDED,
    7: Verdict.RUNTIME_ERROR,
    8: Verdict.PRESENTATION_ERROR,
    9: Verdict.RUNTIME_ERROR,
}
