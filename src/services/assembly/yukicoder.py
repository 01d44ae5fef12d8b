"""yukicoder catalog assembly."""

import asyncio
from datetime import datetime

from loguru import logger

from domain.classifiers import classify_yukicoder_contest
from domain.exceptions import ReferentialIntegrityError
from domain.models import Contest, Phase, Platform, Problem
from domain.models.identifiers import num_to_alphabet
from infrastructure.clients import RawRecord, YukicoderSourceProtocol

from .base import Catalog, CatalogAssembler, flatten_problems

CONTEST_URL = "https://yukicoder.me/contests/{contest_id}"
PROBLEM_URL = "https://yukicoder.me/problems/no/{no}"


def _epoch(timestamp: str | None) -> int | None:
    if not timestamp:
        return None
    return int(datetime.fromisoformat(timestamp).timestamp())


def _split_tags(raw_tags: str | None) -> list[str]:
    if not raw_tags:
        return []
    return [tag.strip() for tag in raw_tags.split(",") if tag.strip()]


def build_problem(contest_id: str, index: str, category: str, detail: RawRecord) -> Problem:
    statistics = detail.get("Statistics") or {}
    return Problem.reconstruct(
        platform=Platform.YUKICODER,
        contest_raw_id=contest_id,
        index=index,
        name=detail["Title"],
        category=category,
        url=PROBLEM_URL.format(no=detail["No"]),
        raw_point=detail.get("Level"),
        tags=_split_tags(detail.get("Tags")),
        solver_count=statistics.get("Solved"),
        submissions=statistics.get("Total"),
    )


def build_contest(raw: RawRecord, category: str, problems: list[Problem]) -> Contest:
    start = _epoch(raw.get("Date"))
    end = _epoch(raw.get("EndDate"))
    duration = end - start if start is not None and end is not None else None
    return Contest.reconstruct(
        platform=Platform.YUKICODER,
        raw_id=str(raw["Id"]),
        name=raw["Name"],
        category=category,
        phase=Phase.FINISHED,
        url=CONTEST_URL.format(contest_id=raw["Id"]),
        start_time_seconds=start,
        duration_seconds=duration,
        problems=problems,
    )


class YukicoderAssembler(CatalogAssembler):
    """Builds contests from past contests; problems outside any past contest are skipped.

    Statistics are only served by the per-problem endpoint, so this issues
    one (rate limited) call per contest problem and is slow by nature.
    """

    platform = Platform.YUKICODER

    def __init__(self, client: YukicoderSourceProtocol):
        self.client = client

    async def assemble(self) -> Catalog:
        logger.info("Assembling yukicoder catalog")
        raw_problems, raw_contests = await asyncio.gather(
            self.client.fetch_problems(),
            self.client.fetch_past_contests(),
        )
        known_problems = {p["ProblemId"] for p in raw_problems}

        contests = []
        for raw in raw_contests:
            contest_id = str(raw["Id"])
            category = classify_yukicoder_contest(raw["Name"]).value

            problems = []
            for position, problem_id in enumerate(raw.get("ProblemIdList", [])):
                if problem_id not in known_problems:
                    raise ReferentialIntegrityError(
                        self.platform.value,
                        f"contest {contest_id} references unknown problem {problem_id}",
                    )
                detail = await self.client.fetch_problem_detail(problem_id)
                problems.append(
                    build_problem(contest_id, num_to_alphabet(position), category, detail)
                )

            contests.append(build_contest(raw, category, problems))
            logger.debug(f"Assembled yukicoder contest {contest_id} ({len(problems)} problems)")

        problems = flatten_problems(contests)
        logger.info(f"Assembled {len(contests)} yukicoder contests, {len(problems)} problems")
        return problems, contests
