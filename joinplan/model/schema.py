from dataclasses import dataclass, field
from typing import Optional

@dataclass(frozen=True, slots=True)
class RelationSchema:
    """
    Relation schema: optional relation name and ordered column names.

    Column names are not required to be unique; lookups by name resolve to
    the first occurrence.
    """
    colnames: tuple[str, ...]
    name: str = ""
    _positions: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        colnames = tuple(self.colnames)
        object.__setattr__(self, "colnames", colnames)
        positions = {}
        for i, col in enumerate(colnames):
            positions.setdefault(col, i)
        object.__setattr__(self, "_positions", positions)

    @property
    def arity(self) -> int:
        return len(self.colnames)

    def position(self, col: str) -> Optional[int]:
        return self._positions.get(col)

    def has_column(self, col: str) -> bool:
        return col in self._positions

    def common_columns(self, other: 'RelationSchema') -> tuple[str, ...]:
        """Column names present in both schemas, in this schema's order."""
        return tuple(col for col in self.colnames if other.has_column(col))

    def shares_column_with(self, other: 'RelationSchema') -> bool:
        return any(other.has_column(col) for col in self.colnames)
