"""Unit tests for canonical identifiers and derived metrics."""

import math

import pytest

from domain.metrics import clip_difficulty, success_rate
from domain.models import ContestIdentifier, Platform, Problem, ProblemIdentifier
from domain.models.identifiers import contest_id, num_to_alphabet, problem_id, submission_id


def test_canonical_ids_are_platform_namespaced():
    """Test that ids are platform + raw id (+ index), raw ids untouched."""
    assert contest_id(Platform.ATCODER, "abc100") == "atcoder_abc100"
    assert problem_id(Platform.ATCODER, "abc100", "A") == "atcoder_abc100_A"
    assert submission_id(Platform.CODEFORCES, "123456") == "codeforces_123456"
    assert contest_id(Platform.YOSUPO, "Data Structure") == "yosupo_online_judge_Data Structure"


def test_identifier_value_objects_match_functions():
    """Test that identifier objects render the same canonical strings."""
    identifier = ProblemIdentifier(Platform.AOJ, "volume_0", "0001")

    assert str(identifier) == "aoj_volume_0_0001"
    assert identifier.contest == ContestIdentifier(Platform.AOJ, "volume_0")
    assert str(identifier.contest) == "aoj_volume_0"


def test_problem_reconstruct_is_deterministic():
    """Test that rebuilding a problem from the same fields yields equal values."""
    fields = dict(
        platform=Platform.CODEFORCES,
        contest_raw_id="1900",
        index="B",
        name="Two Arrays",
        category="Div. 2",
        url="https://codeforces.com/contest/1900/problem/B",
    )

    first = Problem.reconstruct(**fields)
    second = Problem.reconstruct(**fields)

    assert first == second
    assert first.id == "codeforces_1900_B"
    assert first.contest_id == "codeforces_1900"
    assert first.title == "B. Two Arrays"
    assert first.tags == ()


@pytest.mark.parametrize(
    "position,expected",
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA"), (701, "ZZ"), (702, "AAA")],
)
def test_num_to_alphabet(position, expected):
    assert num_to_alphabet(position) == expected


def test_num_to_alphabet_rejects_negative():
    with pytest.raises(ValueError):
        num_to_alphabet(-1)


def test_clip_boundary():
    """Test the clip boundary: 400 stays 400, anything below stays below."""
    assert clip_difficulty(400) == 400
    assert clip_difficulty(399.999) < 400
    assert clip_difficulty(399.5) < 400
    assert clip_difficulty(1234.5) == 1235
    assert clip_difficulty(2800.4) == 2800


def test_clip_compresses_low_values():
    """Test that low estimates follow 400 / exp(1 - d / 400)."""
    assert clip_difficulty(0) == round(400 / math.e)
    assert clip_difficulty(-1000) == round(400 / math.exp(1 + 1000 / 400))
    assert clip_difficulty(-100000) == 0


def test_clip_is_monotone():
    values = [x / 4 for x in range(-4000, 4000)]
    clipped = [clip_difficulty(v) for v in values]

    assert all(a <= b for a, b in zip(clipped, clipped[1:]))


def test_clip_missing_estimate_stays_missing():
    assert clip_difficulty(None) is None


@pytest.mark.parametrize(
    "solved,submitted,expected",
    [
        (1, 4, 25.0),
        (0, 10, 0.0),
        (5, 5, 100.0),
        (3, 0, None),
        (None, 10, None),
        (3, None, None),
        (None, None, None),
    ],
)
def test_success_rate(solved, submitted, expected):
    assert success_rate(solved, submitted) == expected


def test_problem_success_rate_presence():
    """Test that success rate is present iff both counts are present and submissions > 0."""
    base = dict(
        platform=Platform.AOJ,
        contest_raw_id="volume_0",
        index="0000",
        name="QQ",
        category="Volume",
        url="https://example.com",
    )

    assert Problem.reconstruct(**base, solver_count=3, submissions=12).success_rate == 25.0
    assert Problem.reconstruct(**base, solver_count=3, submissions=0).success_rate is None
    assert Problem.reconstruct(**base, solver_count=3).success_rate is None
