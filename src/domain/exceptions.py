"""Domain exceptions for the solve tracker."""


class SolveTrackerError(Exception):
    """Base exception for all solve tracker errors."""

    pass


class ValidationError(SolveTrackerError):
    """Invalid user input, detected before any I/O."""

    pass


class FetchError(SolveTrackerError):
    """Judge request failed or returned an unusable response."""

    pass


class StoreError(SolveTrackerError):
    """Problem store operation failed."""

    pass


class ProblemNotFoundError(StoreError):
    """No stored problem with the requested id."""

    def __init__(self, problem_id: int):
        self.problem_id = problem_id
        super().__init__(f"Problem not found: {problem_id}")


class URLParsingError(ValidationError):
    """Problem URL does not match any supported judge."""

    pass
