"""Value objects for problem identification."""

from dataclasses import dataclass
from enum import Enum


class Judge(str, Enum):
    """Supported online judges."""

    CODEFORCES = "codeforces"
    ATCODER = "atcoder"

    @property
    def display_name(self) -> str:
        return "Codeforces" if self is Judge.CODEFORCES else "AtCoder"


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a specific problem on a judge."""

    judge: Judge
    contest_id: str
    problem_id: str

    @property
    def key(self) -> str:
        """Key used to collapse repeated solves of the same problem."""
        if self.judge is Judge.CODEFORCES:
            return f"{self.contest_id}-{self.problem_id}"
        return self.problem_id

    def __str__(self) -> str:
        """String representation."""
        return f"{self.judge.value}/{self.contest_id}/{self.problem_id}"
