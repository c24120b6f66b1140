"""Codeforces submission adapter."""

from typing import Any

from loguru import logger

from config import DEFAULT_CODEFORCES_API_URL
from domain.exceptions import FetchError
from domain.models import Judge, ProblemIdentifier, SolvedProblem, format_epoch
from domain.parsers import URLParser

from .interfaces import HTTPClientProtocol

STATUS_OK = "OK"
VERDICT_ACCEPTED = "OK"


class CodeforcesAdapter:
    """Fetches solved problems from the Codeforces ``user.status`` API."""

    judge = Judge.CODEFORCES

    def __init__(self, http_client: HTTPClientProtocol, api_url: str = DEFAULT_CODEFORCES_API_URL):
        self.http_client = http_client
        self.api_url = api_url

    async def fetch(self, handle: str) -> list[SolvedProblem]:
        logger.debug(f"Fetching Codeforces submissions for {handle}")

        data = await self.http_client.get_json(
            f"{self.api_url}/user.status", params={"handle": handle}
        )

        if not isinstance(data, dict) or data.get("status") != STATUS_OK:
            comment = data.get("comment") if isinstance(data, dict) else None
            logger.error(f"Codeforces API returned an error for {handle}: {comment}")
            message = "Failed to fetch Codeforces submissions"
            raise FetchError(f"{message}: {comment}" if comment else message)

        earliest = self.collect_first_accepted(data.get("result", []))
        problems = [self._to_problem(submission) for submission in earliest.values()]

        logger.info(f"Fetched {len(problems)} solved Codeforces problems for {handle}")
        return problems

    @staticmethod
    def collect_first_accepted(submissions: list[dict[str, Any]]) -> dict[str, dict[str, Any]]:
        """Earliest accepted submission per ``contestId-index``."""
        solved: dict[str, dict[str, Any]] = {}
        for submission in submissions:
            if submission.get("verdict") != VERDICT_ACCEPTED:
                continue
            key = _identifier(submission).key
            current = solved.get(key)
            if current is None or submission["creationTimeSeconds"] < current["creationTimeSeconds"]:
                solved[key] = submission
        return solved

    @staticmethod
    def _to_problem(submission: dict[str, Any]) -> SolvedProblem:
        problem = submission.get("problem", {})
        rating = problem.get("rating")

        return SolvedProblem(
            problem_url=URLParser.build_problem_url(_identifier(submission)),
            difficulty=str(rating) if rating is not None else "",
            solution_note="",
            tags=", ".join(problem.get("tags", [])),
            solved_at=format_epoch(submission["creationTimeSeconds"]),
        )


def _identifier(submission: dict[str, Any]) -> ProblemIdentifier:
    problem = submission.get("problem", {})
    contest_id = submission.get("contestId", problem.get("contestId"))
    return ProblemIdentifier(
        judge=Judge.CODEFORCES,
        contest_id=str(contest_id),
        problem_id=str(problem.get("index")),
    )
