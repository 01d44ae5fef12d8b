"""Codeforces catalog assembly."""

import asyncio

from loguru import logger

from domain.classifiers import classify_codeforces_contest
from domain.models import Contest, Phase, Platform, Problem, ProblemInfo, Submission, Verdict
from infrastructure.clients import CodeforcesSourceProtocol, RawRecord

from .base import Catalog, CatalogAssembler, flatten_problems, group_by_contest

CONTEST_URL = "https://codeforces.com/contest/{contest_id}"
PROBLEM_URL = "https://codeforces.com/contest/{contest_id}/problem/{index}"


def build_problem(raw: RawRecord, category: str, solved_count: int | None) -> Problem:
    contest_id = str(raw["contestId"])
    return Problem.reconstruct(
        platform=Platform.CODEFORCES,
        contest_raw_id=contest_id,
        index=raw["index"],
        name=raw["name"],
        category=category,
        url=PROBLEM_URL.format(contest_id=contest_id, index=raw["index"]),
        raw_point=raw.get("points"),
        # Codeforces publishes ratings directly; they are not estimates
        difficulty=raw.get("rating"),
        tags=raw.get("tags", []),
        solver_count=solved_count,
    )


def build_submission(raw: RawRecord) -> Submission:
    problem = raw.get("problem", {})
    members = raw.get("author", {}).get("members") or [{}]
    memory_bytes = raw.get("memoryConsumedBytes")
    contest_id = raw.get("contestId")
    return Submission.reconstruct(
        platform=Platform.CODEFORCES,
        raw_id=str(raw["id"]),
        user_id=members[0].get("handle", ""),
        raw_language=raw.get("programmingLanguage", ""),
        verdict=Verdict.from_codeforces(raw.get("verdict")),
        submission_date=raw["creationTimeSeconds"],
        execution_time=raw.get("timeConsumedMillis"),
        memory=memory_bytes // 1024 if memory_bytes is not None else None,
        problem=ProblemInfo(
            contest_id=str(contest_id) if contest_id is not None else None,
            index=problem.get("index"),
            name=problem.get("name"),
            raw_point=problem.get("points"),
            difficulty=problem.get("rating"),
        ),
    )


class CodeforcesAssembler(CatalogAssembler):
    platform = Platform.CODEFORCES

    def __init__(self, client: CodeforcesSourceProtocol):
        self.client = client

    async def assemble(self) -> Catalog:
        logger.info("Assembling Codeforces catalog")
        problemset, raw_contests = await asyncio.gather(
            self.client.fetch_problemset(),
            self.client.fetch_contests(),
        )

        # Statistics are parallel to problems but keyed explicitly to be safe
        solved = {
            (str(stat["contestId"]), stat["index"]): stat.get("solvedCount")
            for stat in problemset.get("problemStatistics", [])
        }

        grouped = group_by_contest(
            self.platform,
            problemset.get("problems", []),
            lambda p: str(p.get("contestId")),
            {str(c["id"]) for c in raw_contests},
        )

        contests = []
        for raw in raw_contests:
            contest_id = str(raw["id"])
            category = classify_codeforces_contest(raw.get("name", "")).value
            problems = [
                build_problem(p, category, solved.get((contest_id, p["index"])))
                for p in grouped.get(contest_id, [])
            ]
            contests.append(
                Contest.reconstruct(
                    platform=self.platform,
                    raw_id=contest_id,
                    name=raw.get("name", contest_id),
                    category=category,
                    phase=Phase.parse(raw.get("phase")),
                    url=CONTEST_URL.format(contest_id=contest_id),
                    start_time_seconds=raw.get("startTimeSeconds"),
                    duration_seconds=raw.get("durationSeconds"),
                    problems=problems,
                )
            )

        problems = flatten_problems(contests)
        logger.info(f"Assembled {len(contests)} Codeforces contests, {len(problems)} problems")
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
        raw = await self.client.fetch_user_submissions(
            user_id, from_index=page or 1, count=size or 100
        )
        return [build_submission(s) for s in raw]
