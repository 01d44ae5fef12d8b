"""Pure, first-match-wins contest classifiers, one per platform."""

from .atcoder import classify_atcoder_contest, rated_target
from .codeforces import classify_codeforces_contest
from .others import classify_aoj_contest, classify_yosupo_category, classify_yukicoder_contest

__all__ = [
    "classify_aoj_contest",
    "classify_atcoder_contest",
    "classify_codeforces_contest",
    "classify_yosupo_category",
    "classify_yukicoder_contest",
    "rated_target",
]
