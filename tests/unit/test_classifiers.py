"""Unit tests for the per-platform contest classifiers."""

import pytest

from domain.classifiers import (
    classify_aoj_contest,
    classify_atcoder_contest,
    classify_codeforces_contest,
    classify_yosupo_category,
    classify_yukicoder_contest,
    rated_target,
)
from domain.classifiers.atcoder import AGC_001_START, MARATHON_IDS
from domain.models import (
    AojCategory,
    AtcoderCategory,
    CodeforcesCategory,
    YosupoCategory,
    YukicoderCategory,
)

RATED_START = AGC_001_START + 86400


@pytest.mark.parametrize(
    "contest_id,expected",
    [
        ("abc001", AtcoderCategory.ABC),
        ("abc1000", AtcoderCategory.ABC),
        ("arc001", AtcoderCategory.ARC),
        ("agc001", AtcoderCategory.AGC),
        ("ahc001", AtcoderCategory.AHC),
        ("toyota2023summer-final", AtcoderCategory.AHC),
        ("past15-open", AtcoderCategory.PAST),
        ("joi2006yo", AtcoderCategory.JOI),
        ("jag2015summer-day2", AtcoderCategory.JAG),
        ("JAG2015summer-day2", AtcoderCategory.JAG),
        ("other", AtcoderCategory.OTHER),
    ],
)
def test_atcoder_by_id(contest_id, expected):
    assert classify_atcoder_contest(contest_id, "") is expected


def test_atcoder_series_wins_over_sponsor_keyword():
    """Test that the abc prefix rule fires before the sponsor title rule."""
    category = classify_atcoder_contest("abc001", "CODE FESTIVAL presents ABC 001")

    assert category is AtcoderCategory.ABC


def test_atcoder_ids_need_three_digits():
    assert classify_atcoder_contest("abc01", "") is AtcoderCategory.OTHER


@pytest.mark.parametrize(
    "rate_change,expected",
    [
        (" ~ 1999", AtcoderCategory.ABC_LIKE),
        ("~ 1199", AtcoderCategory.ABC_LIKE),
        (" ~ 2799", AtcoderCategory.ARC_LIKE),
        ("1200 ~ 2799", AtcoderCategory.ARC_LIKE),
        ("All", AtcoderCategory.AGC_LIKE),
        ("1200 ~ ", AtcoderCategory.AGC_LIKE),
    ],
)
def test_atcoder_rated_ranges(rate_change, expected):
    category = classify_atcoder_contest("keyence2021", "KEYENCE 2021", rate_change, RATED_START, 6)

    assert category is expected


def test_atcoder_rated_requires_more_than_two_problems():
    category = classify_atcoder_contest("keyence2021", "KEYENCE 2021", " ~ 1999", RATED_START, 2)

    assert category is AtcoderCategory.OTHER


def test_atcoder_rated_requires_start_after_agc001():
    category = classify_atcoder_contest(
        "code-festival-2015-quala", "CODE FESTIVAL 2015 予選A", "All", AGC_001_START - 1, 8
    )

    assert category is AtcoderCategory.OTHER_SPONSORED


@pytest.mark.parametrize("rate_change", ["~", "abc ~ xyz", "1 ~ 2 ~ 3", "", "-"])
def test_atcoder_malformed_range_falls_through(rate_change):
    """Test that a malformed range is treated as unrated and never raises."""
    assert rated_target(rate_change, RATED_START) is None
    category = classify_atcoder_contest("jag2017", "JAG Practice", rate_change, RATED_START, 10)

    assert category is AtcoderCategory.JAG


@pytest.mark.parametrize(
    "title",
    ["Chokudai Contest 005", "第一回日本最強プログラマー学生選手権 ハーフマラソン", "HACK TO THE FUTURE 2022", "Asprova Programming Contest", "Heuristics Contest 001"],
)
def test_atcoder_marathon_titles(title):
    assert classify_atcoder_contest("someid", title) is AtcoderCategory.MARATHON


@pytest.mark.parametrize(
    "contest_id",
    ["future-meets-you-contest-2019", "hokudai-hitachi2019-1", "toyota-hc-2023spring", *sorted(MARATHON_IDS)],
)
def test_atcoder_marathon_ids(contest_id):
    assert classify_atcoder_contest(contest_id, "") is AtcoderCategory.MARATHON


@pytest.mark.parametrize(
    "title",
    ["ドワンゴからの挑戦状", "Mujin Programming Challenge", "CODE FESTIVAL 2017 qual A", "DISCO presents", "Toyota Programming Contest"],
)
def test_atcoder_sponsored_titles(title):
    assert classify_atcoder_contest("sponsored", title) is AtcoderCategory.OTHER_SPONSORED


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Educational Codeforces Round 165 (Rated for Div. 2)", CodeforcesCategory.EDUCATIONAL),
        ("Codeforces Global Round 16", CodeforcesCategory.GLOBAL),
        ("Kotlin Heroes: Episode 8", CodeforcesCategory.KOTLIN),
        ("2021-2022 ICPC, NERC, Northern Eurasia Onsite", CodeforcesCategory.ICPC),
        ("Microsoft Q# Coding Contest - Summer 2020", CodeforcesCategory.QSHARP),
        ("Codeforces Round #726 (Div. 1 + Div. 2)", CodeforcesCategory.DIV1_AND_DIV2),
        ("Codeforces Round #726 (Div. 1)", CodeforcesCategory.DIV1),
        ("Codeforces Round #726 (Div. 2)", CodeforcesCategory.DIV2),
        ("Codeforces Round #726 (Div. 3)", CodeforcesCategory.DIV3),
        ("Codeforces Round #726 (Div. 4)", CodeforcesCategory.DIV4),
        ("April Fools Day Contest 2024", CodeforcesCategory.OTHER),
    ],
)
def test_codeforces_names(name, expected):
    assert classify_codeforces_contest(name) is expected


def test_yukicoder():
    assert classify_yukicoder_contest("yukicoder contest 400") is YukicoderCategory.NORMAL
    assert classify_yukicoder_contest("Advent Calendar Contest 2023") is YukicoderCategory.OTHER


def test_yosupo():
    assert classify_yosupo_category("Data Structure") is YosupoCategory.DATA_STRUCTURE
    assert classify_yosupo_category("Geometry") is YosupoCategory.GEOMETRY
    assert classify_yosupo_category("Brand New") is YosupoCategory.OTHER


@pytest.mark.parametrize(
    "contest_id,large_cl,expected",
    [
        ("volume_10", None, AojCategory.VOLUME),
        ("JOI_Prelim_2020_1", "JOI", AojCategory.JOI),
        ("PCK_Final_2019_1", "pck", AojCategory.PCK),
        ("ICPC_Regional_2018_1", "ICPC", AojCategory.ICPC),
        ("Foo_Bar_2018_1", "Foo", AojCategory.OTHER),
        ("Foo_Bar_2018_1", None, AojCategory.OTHER),
    ],
)
def test_aoj(contest_id, large_cl, expected):
    assert classify_aoj_contest(contest_id, large_cl) is expected
