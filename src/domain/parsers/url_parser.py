"""Builder and parser for judge problem URLs."""

import re

from loguru import logger

from domain.exceptions import URLParsingError
from domain.models import Judge, ProblemIdentifier


class URLParser:
    """Parser for Codeforces and AtCoder problem URLs."""

    CODEFORCES_PATTERN = r"codeforces\.(?:com|ru)/(?:contest/(\d+)/problem|problemset/problem/(\d+))/([A-Za-z]\d*)"
    ATCODER_PATTERN = r"atcoder\.jp/contests/([\w-]+)/tasks/([\w-]+)"

    @classmethod
    def parse(cls, url: str) -> ProblemIdentifier:
        """
        Parse problem URL and extract problem identifier.
        """
        match = re.search(cls.CODEFORCES_PATTERN, url)
        if match:
            contest_id = match.group(1) or match.group(2)
            return ProblemIdentifier(
                judge=Judge.CODEFORCES,
                contest_id=contest_id,
                problem_id=match.group(3),
            )

        match = re.search(cls.ATCODER_PATTERN, url)
        if match:
            contest_id, problem_id = match.groups()
            return ProblemIdentifier(
                judge=Judge.ATCODER,
                contest_id=contest_id,
                problem_id=problem_id,
            )

        raise URLParsingError(f"Unrecognized problem URL format: {url}")

    @classmethod
    def parse_judge(cls, url: str) -> Judge | None:
        """Judge of a problem URL, None for free-form entries."""
        try:
            return cls.parse(url).judge
        except URLParsingError:
            return None

    @classmethod
    def build_problem_url(cls, identifier: ProblemIdentifier) -> str:
        """
        Build problem URL from identifier.
        """
        if identifier.judge is Judge.CODEFORCES:
            url = f"https://codeforces.com/contest/{identifier.contest_id}/problem/{identifier.problem_id}"
        else:
            url = f"https://atcoder.jp/contests/{identifier.contest_id}/tasks/{identifier.problem_id}"

        logger.trace(f"Built problem URL: {url}")
        return url
