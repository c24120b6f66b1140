# tests/url_parser_test.py
import pytest

from domain.exceptions import URLParsingError
from domain.models import Judge, ProblemIdentifier
from domain.parsers import URLParser


@pytest.mark.parametrize(
    "url, expected_judge, expected_contest, expected_problem",
    [
        ("https://codeforces.com/contest/500/problem/A", Judge.CODEFORCES, "500", "A"),
        ("https://codeforces.ru/problemset/problem/1234/C", Judge.CODEFORCES, "1234", "C"),
        ("https://codeforces.com/problemset/problem/1350/B1", Judge.CODEFORCES, "1350", "B1"),
        ("https://atcoder.jp/contests/abc300/tasks/abc300_a", Judge.ATCODER, "abc300", "abc300_a"),
    ],
)
def test_parse_valid_urls(url, expected_judge, expected_contest, expected_problem) -> None:
    """Test that supported problem URLs parse into identifiers."""
    identifier = URLParser.parse(url)

    assert identifier.judge is expected_judge
    assert identifier.contest_id == expected_contest
    assert identifier.problem_id == expected_problem


def test_parse_unknown_url_raises() -> None:
    """Test that an unrecognized URL raises URLParsingError."""
    with pytest.raises(URLParsingError):
        URLParser.parse("https://example.com/problem/1")


def test_parse_judge_returns_none_for_free_form_entry() -> None:
    """Test that free-form entries have no judge."""
    assert URLParser.parse_judge("two pointers warmup") is None


def test_build_codeforces_problem_url() -> None:
    """Test building a Codeforces problem URL."""
    identifier = ProblemIdentifier(judge=Judge.CODEFORCES, contest_id="1234", problem_id="A")
    url = URLParser.build_problem_url(identifier)
    assert url == "https://codeforces.com/contest/1234/problem/A"


def test_build_atcoder_problem_url() -> None:
    """Test building an AtCoder problem URL."""
    identifier = ProblemIdentifier(judge=Judge.ATCODER, contest_id="arc150", problem_id="arc150_b")
    url = URLParser.build_problem_url(identifier)
    assert url == "https://atcoder.jp/contests/arc150/tasks/arc150_b"


def test_identifier_keys() -> None:
    """Test the dedup key of each judge."""
    codeforces = ProblemIdentifier(judge=Judge.CODEFORCES, contest_id="100", problem_id="A")
    atcoder = ProblemIdentifier(judge=Judge.ATCODER, contest_id="abc300", problem_id="abc300_a")

    assert codeforces.key == "100-A"
    assert atcoder.key == "abc300_a"
