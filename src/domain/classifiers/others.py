"""Classifiers for yukicoder, Library Checker (Yosupo) and AOJ pseudo-contests."""

from domain.models.category import AojCategory, YosupoCategory, YukicoderCategory

AOJ_VOLUME_PREFIX = "volume_"


def classify_yukicoder_contest(name: str) -> YukicoderCategory:
    if name.startswith("yukicoder contest"):
        return YukicoderCategory.NORMAL
    return YukicoderCategory.OTHER


def classify_yosupo_category(category_name: str) -> YosupoCategory:
    """Map a ``categories.toml`` category name; unknown names become OTHER."""
    try:
        return YosupoCategory(category_name)
    except ValueError:
        return YosupoCategory.OTHER


def classify_aoj_contest(contest_id: str, large_cl: str | None = None) -> AojCategory:
    """
    Classify an AOJ pseudo-contest.

    Volume pseudo-contests are recognized by their id prefix. Challenge
    pseudo-contests use their large classification (``ICPC``, ``JOI``, ...).
    """
    if contest_id.startswith(AOJ_VOLUME_PREFIX):
        return AojCategory.VOLUME
    if not large_cl:
        return AojCategory.OTHER

    normalized = large_cl.strip().upper()
    for category in AojCategory:
        if category is not AojCategory.VOLUME and category.value == normalized:
            return category
    return AojCategory.OTHER
