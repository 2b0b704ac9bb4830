class JoinPlanError(Exception):
    """Base class for all errors raised by joinplan."""


class ShapeMismatchError(JoinPlanError, ValueError):
    """
    A row's length does not match the relation's column count.
    """
    def __init__(self, expected: int, actual: int, row_index: int = None) -> None:
        self.expected = expected
        self.actual = actual
        self.row_index = row_index
        where = f" at row {row_index}" if row_index is not None else ""
        super().__init__(f"Row length mismatch{where}: expected {expected} values, got {actual}.")


class EmptyPlanError(JoinPlanError, ValueError):
    """Folding zero relations has no defined result."""
    def __init__(self, message: str = "Cannot fold an empty sequence of relations.") -> None:
        super().__init__(message)


class PlannerConsumedError(JoinPlanError, RuntimeError):
    """The planner was already consumed by a plan call."""
    def __init__(self, message: str = "Planner has already been consumed by plan().") -> None:
        super().__init__(message)


class UnknownImplementationError(JoinPlanError, ValueError):
    pass
