"""
Enumerations for the join implementations available to Relation.join.
"""
from enum import Enum

class JoinImplementation(str, Enum):
    """
    Available join backends.

    HASH is the in-process build/probe hash join; PANDAS expresses the same
    inner equi-join with DataFrame.merge.
    """
    HASH = "hash"
    PANDAS = "pandas"

    @classmethod
    def get_all_implementations(cls) -> list[str]:
        """Return a list of all available implementation names."""
        return [impl.value for impl in cls]

    @classmethod
    def is_valid(cls, implementation: str) -> bool:
        """Check if an implementation name is valid."""
        return implementation in [impl.value for impl in cls]
