"""AtCoder contest classification.

Rules are evaluated top to bottom and the first match wins:

1. Official series by id prefix (abc/arc/agc/ahc followed by 3+ digits).
2. Heuristic contests that do not follow the naming convention.
3. Other rated contests, bucketed by the upper bound of their rated range.
4. PAST / JOI / JAG by id prefix.
5. Marathon contests by title, id pattern or id allow-list.
6. Sponsored contests by title keyword.
7. Everything else.
"""

import re

from domain.models.category import AtcoderCategory

# Start of AGC 001. Contests before it predate the current rating system.
AGC_001_START = 1_468_670_400

AHC_SPECIAL_CONTESTS = frozenset({"toyota2023summer-final"})

_SERIES_PATTERNS: tuple[tuple[re.Pattern[str], AtcoderCategory], ...] = (
    (re.compile(r"^abc\d{3,}"), AtcoderCategory.ABC),
    (re.compile(r"^arc\d{3,}"), AtcoderCategory.ARC),
    (re.compile(r"^agc\d{3,}"), AtcoderCategory.AGC),
    (re.compile(r"^ahc\d{3,}"), AtcoderCategory.AHC),
)

_JAG_ID = re.compile(r"^(jag|JAG)")

_MARATHON_TITLE = re.compile(
    r"(^Chokudai Contest|ハーフマラソン|^HACK TO THE FUTURE|Asprova|Heuristics Contest)"
)
_MARATHON_ID = re.compile(r"(^future-meets-you-contest|^hokudai-hitachi|^toyota-hc)")
MARATHON_IDS = frozenset(
    {
        "toyota2023summer-final-open",
        "genocon2021",
        "stage0-2021",
        "caddi2019",
        "pakencamp-2019-day2",
        "kuronekoyamato-contest2019",
        "wn2017_1",
    }
)

_SPONSORED_TITLE = re.compile(
    r"ドワンゴ|^Mujin|SoundHound|^codeFlyer|^COLOCON|みんなのプロコン|CODE THANKS FESTIVAL"
    r"|CODE FESTIVAL|^DISCO|日本最強プログラマー学生選手権|全国統一プログラミング王|Indeed"
    r"|^Donuts|^dwango|^DigitalArts|^Code Formula|天下一プログラマーコンテスト|^Toyota"
)

# Rated ranges with an upper bound below this are beginner-level.
_ARC_LOWER_BOUND = 2000


def rated_target(rate_change: str, start_epoch_second: int) -> AtcoderCategory | None:
    """
    Bucket a rated range into ABC-Like, ARC-Like or AGC-Like.

    Returns None when the contest is unrated or the range cannot be read.
    """
    if start_epoch_second < AGC_001_START:
        return None

    rate_change = rate_change.strip()
    if rate_change == "-" or not rate_change:
        return None
    if rate_change == "All":
        return AtcoderCategory.AGC_LIKE

    bounds = [part.strip() for part in rate_change.split("~")]
    if len(bounds) != 2:
        return None

    lower, upper = bounds
    if not upper:
        # "lo ~" has no ceiling
        return AtcoderCategory.AGC_LIKE if lower else None

    try:
        ceiling = int(upper)
    except ValueError:
        return None

    if ceiling < _ARC_LOWER_BOUND:
        return AtcoderCategory.ABC_LIKE
    return AtcoderCategory.ARC_LIKE


def is_rated_contest(rate_change: str, start_epoch_second: int, problem_count: int) -> bool:
    return (
        rate_change != "-" and start_epoch_second >= AGC_001_START and problem_count > 2
    )


def classify_atcoder_contest(
    contest_id: str,
    title: str,
    rate_change: str = "-",
    start_epoch_second: int = 0,
    problem_count: int = 0,
) -> AtcoderCategory:
    """Classify an AtCoder contest. Never raises; unknown input is OTHER."""
    for pattern, category in _SERIES_PATTERNS:
        if pattern.match(contest_id):
            return category

    if contest_id in AHC_SPECIAL_CONTESTS:
        return AtcoderCategory.AHC

    if is_rated_contest(rate_change, start_epoch_second, problem_count):
        target = rated_target(rate_change, start_epoch_second)
        if target is not None:
            return target

    if contest_id.startswith("past"):
        return AtcoderCategory.PAST
    if contest_id.startswith("joi"):
        return AtcoderCategory.JOI
    if _JAG_ID.match(contest_id):
        return AtcoderCategory.JAG

    if (
        _MARATHON_TITLE.search(title)
        or _MARATHON_ID.search(contest_id)
        or contest_id in MARATHON_IDS
    ):
        return AtcoderCategory.MARATHON

    if _SPONSORED_TITLE.search(title):
        return AtcoderCategory.OTHER_SPONSORED

    return AtcoderCategory.OTHER
