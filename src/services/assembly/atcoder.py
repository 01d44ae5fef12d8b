"""AtCoder catalog assembly."""

import asyncio

from loguru import logger

from domain.classifiers import classify_atcoder_contest
from domain.metrics import clip_difficulty
from domain.models import Contest, Phase, Platform, Problem, ProblemInfo, Submission, Verdict
from infrastructure.clients import AtcoderSourceProtocol, RawRecord

from .base import Catalog, CatalogAssembler, flatten_problems, group_by_contest

CONTEST_URL = "https://atcoder.jp/contests/{contest_id}"
PROBLEM_URL = "https://atcoder.jp/contests/{contest_id}/tasks/{problem_id}"


def build_problem(raw: RawRecord, category: str, model: RawRecord | None) -> Problem:
    model = model or {}
    return Problem.reconstruct(
        platform=Platform.ATCODER,
        contest_raw_id=raw["contest_id"],
        index=raw["problem_index"],
        name=raw["name"],
        category=category,
        url=PROBLEM_URL.format(contest_id=raw["contest_id"], problem_id=raw["id"]),
        raw_point=raw.get("point"),
        difficulty=clip_difficulty(model.get("difficulty")),
        is_experimental=model.get("is_experimental"),
        solver_count=raw.get("solver_count"),
        submissions=raw.get("submission_count"),
    )


def build_submission(raw: RawRecord) -> Submission:
    # The submission API has no problem name, point or difficulty
    return Submission.reconstruct(
        platform=Platform.ATCODER,
        raw_id=str(raw["id"]),
        user_id=raw["user_id"],
        raw_language=raw["language"],
        verdict=Verdict.from_code(raw.get("result")),
        submission_date=raw["epoch_second"],
        execution_time=raw.get("execution_time"),
        code_size=raw.get("length"),
        problem=ProblemInfo(contest_id=raw.get("contest_id"), index=raw.get("problem_id")),
    )


class AtcoderAssembler(CatalogAssembler):
    platform = Platform.ATCODER

    def __init__(self, client: AtcoderSourceProtocol):
        self.client = client

    async def assemble(self) -> Catalog:
        logger.info("Assembling AtCoder catalog")
        raw_contests, raw_problems, models = await asyncio.gather(
            self.client.fetch_contests(),
            self.client.fetch_problems(),
            self.client.fetch_problem_models(),
        )

        grouped = group_by_contest(
            self.platform,
            raw_problems,
            lambda p: p["contest_id"],
            {c["id"] for c in raw_contests},
        )

        contests = []
        for raw in raw_contests:
            members = grouped.get(raw["id"], [])
            category = classify_atcoder_contest(
                raw["id"],
                raw.get("title", ""),
                raw.get("rate_change", "-"),
                raw.get("start_epoch_second", 0),
                len(members),
            ).value
            problems = [build_problem(p, category, models.get(p["id"])) for p in members]
            contests.append(
                Contest.reconstruct(
                    platform=self.platform,
                    raw_id=raw["id"],
                    name=raw.get("title", raw["id"]),
                    category=category,
                    phase=Phase.FINISHED,
                    url=CONTEST_URL.format(contest_id=raw["id"]),
                    start_time_seconds=raw.get("start_epoch_second"),
                    duration_seconds=raw.get("duration_second"),
                    problems=problems,
                )
            )

        problems = flatten_problems(contests)
        logger.info(f"Assembled {len(contests)} AtCoder contests, {len(problems)} problems")
        return problems, contests

    async def recent_submissions(self) -> list[Submission]:
        raw = await self.client.fetch_recent_submissions()
        return [build_submission(s) for s in raw]

    async def user_submissions(
        self,
        user_id: str,
        *,
        from_second: int | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> list[Submission]:
        raw = await self.client.fetch_user_submissions(user_id, from_second or 0)
        return [build_submission(s) for s in raw]
