"""Aizu Online Judge catalog assembly.

AOJ has no contests in the usual sense. Two kinds of pseudo-contest are
built: one per problem volume, and one per challenge (large class, middle
class, year, day).
"""

from loguru import logger

from domain.classifiers import classify_aoj_contest
from domain.classifiers.others import AOJ_VOLUME_PREFIX
from domain.models import Contest, Phase, Platform, Problem, ProblemInfo, Submission, Verdict
from infrastructure.clients import AojSourceProtocol, RawRecord

from .base import Catalog, CatalogAssembler, flatten_problems

SITE_URL = "https://onlinejudge.u-aizu.ac.jp"
VOLUME_PROBLEM_URL = SITE_URL + "/challenges/search/volumes/{problem_id}"
CHALLENGE_URL = SITE_URL + "/challenges/sources/{large_cl}/{middle_cl}"
CHALLENGE_PROBLEM_URL = CHALLENGE_URL + "/{problem_id}?year={year}"


def build_problem(contest_id: str, category: str, raw: RawRecord, url: str) -> Problem:
    return Problem.reconstruct(
        platform=Platform.AOJ,
        contest_raw_id=contest_id,
        index=raw["id"],
        name=raw["name"],
        category=category,
        url=url,
        solver_count=raw.get("solvedUser"),
        submissions=raw.get("submissions"),
    )


def build_submission(raw: RawRecord) -> Submission:
    cpu_time = raw.get("cpuTime")
    return Submission.reconstruct(
        platform=Platform.AOJ,
        raw_id=str(raw["judgeId"]),
        user_id=raw["userId"],
        raw_language=raw.get("language", ""),
        verdict=Verdict.from_aoj_status(raw.get("status")),
        # submissionDate is in milliseconds, cpuTime in centiseconds
        submission_date=raw["submissionDate"] // 1000,
        execution_time=cpu_time * 10 if cpu_time is not None else None,
        memory=raw.get("memory"),
        code_size=raw.get("codeSize"),
        problem=ProblemInfo(index=raw.get("problemId"), name=raw.get("problemTitle")),
    )


class AojAssembler(CatalogAssembler):
    platform = Platform.AOJ

    def __init__(self, client: AojSourceProtocol):
        self.client = client

    async def _volume_contests(self) -> list[Contest]:
        contests = []
        for volume_id in await self.client.fetch_volume_ids():
            contest_id = f"{AOJ_VOLUME_PREFIX}{volume_id}"
            category = classify_aoj_contest(contest_id).value
            problems = [
                build_problem(
                    contest_id, category, raw, VOLUME_PROBLEM_URL.format(problem_id=raw["id"])
                )
                for raw in await self.client.fetch_volume_problems(volume_id)
            ]
            contests.append(
                Contest.reconstruct(
                    platform=self.platform,
                    raw_id=contest_id,
                    name=f"Volume {volume_id}",
                    category=category,
                    phase=Phase.FINISHED,
                    url=f"{SITE_URL}/challenges/search/volumes",
                    problems=problems,
                )
            )
        return contests

    async def _challenge_contests(self) -> list[Contest]:
        contests = []
        for large_cl, middle_cl in await self.client.fetch_challenge_classes():
            for yearly in await self.client.fetch_challenge_contests(large_cl, middle_cl):
                year = yearly["year"]
                for day_number, day in enumerate(yearly.get("days", []), start=1):
                    # A year can have several days; each becomes its own contest
                    contest_id = f"{large_cl}_{middle_cl}_{year}_{day_number}"
                    category = classify_aoj_contest(contest_id, large_cl).value
                    problems = [
                        build_problem(
                            contest_id,
                            category,
                            raw,
                            CHALLENGE_PROBLEM_URL.format(
                                large_cl=large_cl,
                                middle_cl=middle_cl,
                                problem_id=raw["id"],
                                year=year,
                            ),
                        )
                        for raw in day.get("problems", [])
                    ]
                    contests.append(
                        Contest.reconstruct(
                            platform=self.platform,
                            raw_id=contest_id,
                            name=day.get("title") or f"{large_cl} {middle_cl} {year}",
                            category=category,
                            phase=Phase.FINISHED,
                            url=CHALLENGE_URL.format(large_cl=large_cl, middle_cl=middle_cl),
                            problems=problems,
                        )
                    )
        return contests

    async def assemble(self) -> Catalog:
        logger.info("Assembling AOJ catalog")
        contests = await self._volume_contests() + await self._challenge_contests()
        problems = flatten_problems(contests)
        logger.info(f"Assembled {len(contests)} AOJ pseudo-contests, {len(problems)} problems")
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
        raw = await self.client.fetch_user_submissions(user_id, page, size)
        return [build_submission(s) for s in raw]
