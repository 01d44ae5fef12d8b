"""Codeforces contest classification by name substring."""

from domain.models.category import CodeforcesCategory

# Order matters: "Div. 1 + Div. 2" must be tested before "Div. 1", and the
# named series before any division marker they may also carry.
_RULES: tuple[tuple[str, CodeforcesCategory], ...] = (
    ("Educational", CodeforcesCategory.EDUCATIONAL),
    ("Global Round", CodeforcesCategory.GLOBAL),
    ("Kotlin", CodeforcesCategory.KOTLIN),
    ("ICPC", CodeforcesCategory.ICPC),
    ("Q#", CodeforcesCategory.QSHARP),
    ("Div. 1 + Div. 2", CodeforcesCategory.DIV1_AND_DIV2),
    ("Div. 1", CodeforcesCategory.DIV1),
    ("Div. 2", CodeforcesCategory.DIV2),
    ("Div. 3", CodeforcesCategory.DIV3),
    ("Div. 4", CodeforcesCategory.DIV4),
)


def classify_codeforces_contest(name: str) -> CodeforcesCategory:
    for marker, category in _RULES:
        if marker in name:
            return category
    return CodeforcesCategory.OTHER
