"""Library Checker (Yosupo Online Judge) catalog assembly."""

from loguru import logger

from domain.classifiers import classify_yosupo_category
from domain.models import Contest, Phase, Platform, Problem
from domain.models.identifiers import num_to_alphabet
from infrastructure.clients import YosupoSourceProtocol

from .base import Catalog, CatalogAssembler, flatten_problems

SITE_URL = "https://judge.yosupo.jp/"
PROBLEM_URL = "https://judge.yosupo.jp/problem/{name}"


def title_case(snake_name: str) -> str:
    """``point_add_range_sum`` -> ``Point Add Range Sum``."""
    return " ".join(word.capitalize() for word in snake_name.split("_") if word)


class YosupoAssembler(CatalogAssembler):
    """One pseudo-contest per category; problems are indexed by their position."""

    platform = Platform.YOSUPO

    def __init__(self, client: YosupoSourceProtocol):
        self.client = client

    async def assemble(self) -> Catalog:
        logger.info("Assembling Library Checker catalog")
        contests = []
        for raw in await self.client.fetch_categories():
            name = raw["name"]
            category = classify_yosupo_category(name).value
            problems = [
                Problem.reconstruct(
                    platform=self.platform,
                    contest_raw_id=name,
                    index=num_to_alphabet(position),
                    name=title_case(problem_name),
                    category=category,
                    url=PROBLEM_URL.format(name=problem_name),
                )
                for position, problem_name in enumerate(raw.get("problems", []))
            ]
            contests.append(
                Contest.reconstruct(
                    platform=self.platform,
                    raw_id=name,
                    name=name,
                    category=category,
                    phase=Phase.FINISHED,
                    url=SITE_URL,
                    problems=problems,
                )
            )

        problems = flatten_problems(contests)
        logger.info(f"Assembled {len(contests)} Library Checker categories, {len(problems)} problems")
        return problems, contests
