"""AtCoder submission adapter backed by the AtCoder Problems API."""

import asyncio
from typing import Any

from loguru import logger

from config import DEFAULT_ATCODER_API_URL, DEFAULT_ATCODER_RESOURCES_URL
from domain.exceptions import FetchError
from domain.models import Judge, ProblemIdentifier, SolvedProblem, format_epoch
from domain.parsers import URLParser
from domain.rating import convert_rating

from .interfaces import HTTPClientProtocol

RESULT_ACCEPTED = "AC"


class AtCoderAdapter:
    """Fetches solved problems and rates them with the AtCoder Problems difficulty models."""

    judge = Judge.ATCODER

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        api_url: str = DEFAULT_ATCODER_API_URL,
        resources_url: str = DEFAULT_ATCODER_RESOURCES_URL,
    ):
        self.http_client = http_client
        self.api_url = api_url
        self.resources_url = resources_url

    async def fetch(self, handle: str) -> list[SolvedProblem]:
        logger.debug(f"Fetching AtCoder submissions and problem models for {handle}")

        submissions, models = await asyncio.gather(
            self.http_client.get_json(
                f"{self.api_url}/v3/user/submissions",
                params={"user": handle, "from_second": 0},
            ),
            self.http_client.get_json(f"{self.resources_url}/problem-models.json"),
        )

        if not isinstance(submissions, list) or not isinstance(models, dict):
            logger.error(f"Unexpected AtCoder Problems payload for {handle}")
            raise FetchError("Failed to fetch AtCoder submissions")

        earliest = self.collect_first_accepted(submissions)
        problems = [self._to_problem(submission, models) for submission in earliest.values()]

        logger.info(f"Fetched {len(problems)} solved AtCoder problems for {handle}")
        return problems

    @staticmethod
    def collect_first_accepted(submissions: list[dict[str, Any]]) -> dict[str, dict[str, Any]]:
        """Earliest accepted submission per problem id."""
        solved: dict[str, dict[str, Any]] = {}
        for submission in submissions:
            if submission.get("result") != RESULT_ACCEPTED:
                continue
            key = submission["problem_id"]
            current = solved.get(key)
            if current is None or submission["epoch_second"] < current["epoch_second"]:
                solved[key] = submission
        return solved

    @staticmethod
    def _to_problem(submission: dict[str, Any], models: dict[str, Any]) -> SolvedProblem:
        identifier = ProblemIdentifier(
            judge=Judge.ATCODER,
            contest_id=submission["contest_id"],
            problem_id=submission["problem_id"],
        )

        difficulty = ""
        model = models.get(identifier.problem_id) or {}
        if model.get("difficulty") is not None:
            difficulty = str(convert_rating(model["difficulty"]))

        return SolvedProblem(
            problem_url=URLParser.build_problem_url(identifier),
            difficulty=difficulty,
            solution_note="",
            tags="",
            solved_at=format_epoch(submission["epoch_second"]),
        )
