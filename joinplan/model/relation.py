from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Optional
import logging

import numpy as np
import pandas as pd

from .schema import RelationSchema
from .errors import ShapeMismatchError

logger = logging.getLogger(__name__)

class Relation:
    """
    An in-memory table: ordered column names plus integer rows.

    Every row has exactly as many values as there are columns. Relations
    produced by a join are new objects; joins never modify their inputs.

    Example:
        r = Relation(["a", "b"]).row([1, 2]).row([3, 4])
        s = Relation(["b", "c"], [(2, 10), (4, 20)])
        r.join(s).to_records()
        # [{'a': 1, 'b': 2, 'c': 10}, {'a': 3, 'b': 4, 'c': 20}]
    """
    __slots__ = ("_schema", "_rows")

    def __init__(self, col_names: Iterable[str], rows: Optional[Iterable[Iterable[Any]]] = None,
                 name: str = "") -> None:
        self._schema = RelationSchema(colnames=tuple(str(c) for c in col_names), name=name)
        self._rows: List[tuple] = []
        if rows is not None:
            self._rows = self._validated(rows)

    def _validated(self, rows: Iterable[Iterable[Any]]) -> List[tuple]:
        arity = self._schema.arity
        validated = []
        for i, values in enumerate(rows):
            row = tuple(values)
            if len(row) != arity:
                logger.error(f"[RELATION][SHAPE] Row {i} has {len(row)} values, columns={list(self._schema.colnames)}")
                raise ShapeMismatchError(expected=arity, actual=len(row), row_index=i)
            validated.append(row)
        return validated

    @property
    def schema(self) -> RelationSchema:
        return self._schema

    @property
    def name(self) -> str:
        return self._schema.name

    def columns(self) -> List[str]:
        return list(self._schema.colnames)

    def num_rows(self) -> int:
        return len(self._rows)

    def append_row(self, values: Iterable[Any]) -> None:
        """Append one row. Raises ShapeMismatchError if its length is wrong."""
        row = tuple(values)
        if len(row) != self._schema.arity:
            raise ShapeMismatchError(expected=self._schema.arity, actual=len(row), row_index=len(self._rows))
        self._rows.append(row)

    def row(self, values: Iterable[Any]) -> 'Relation':
        """Append one row and return this relation, for chained construction."""
        self.append_row(values)
        return self

    def rows(self, rows: Iterable[Iterable[Any]]) -> 'Relation':
        """Replace all row data and return this relation."""
        self._rows = self._validated(rows)
        return self

    def join(self, other: 'Relation') -> 'Relation':
        """Inner equi-join on all shared column names.

        With no shared columns every pair of rows matches, producing the
        cross product.

        Args:
            other: Relation to join with

        Returns:
            New Relation with this relation's columns followed by the
            columns of `other` not present here
        """
        from ..engine.join_factory import JoinFactory
        join_fn = JoinFactory.get_join_function()
        return join_fn(self, other)

    def to_records(self) -> List[Dict[str, Any]]:
        cols = self._schema.colnames
        return [dict(zip(cols, row)) for row in self._rows]

    def to_frame(self, sort_columns: bool = False) -> pd.DataFrame:
        """Return the relation as a pandas DataFrame.

        Columns are int64; values outside the int64 range fall back to
        object dtype holding Python ints.

        Args:
            sort_columns: If True, columns are ordered by name

        Returns:
            DataFrame holding a copy of the rows
        """
        cols = list(self._schema.colnames)
        if self._rows:
            try:
                data = np.array(self._rows, dtype=np.int64)
            except OverflowError:
                data = np.array(self._rows, dtype=object)
            data = data.reshape(len(self._rows), len(cols))
        else:
            data = np.empty((0, len(cols)), dtype=np.int64)
        df = pd.DataFrame(data, columns=cols)
        if sort_columns:
            order = sorted(range(len(cols)), key=lambda i: (cols[i], i))
            df = df.iloc[:, order]
        return df

    @classmethod
    def from_frame(cls, df: pd.DataFrame, name: str = "") -> 'Relation':
        columns = [str(c) for c in df.columns]
        return cls(columns, df.to_numpy().tolist(), name=name)

    def to_string(self) -> str:
        """Render as a text table with columns sorted by name."""
        return self.to_frame(sort_columns=True).to_string(index=False)

    def equivalent(self, other: 'Relation') -> bool:
        """True if both relations hold the same rows, ignoring column and row order."""
        if sorted(self._schema.colnames) != sorted(other._schema.colnames):
            return False
        # repeated names are matched by their order of occurrence
        mine = [i for _, i in sorted((c, i) for i, c in enumerate(self._schema.colnames))]
        theirs = [i for _, i in sorted((c, i) for i, c in enumerate(other._schema.colnames))]
        left = Counter(tuple(r[i] for i in mine) for r in self._rows)
        right = Counter(tuple(r[i] for i in theirs) for r in other._rows)
        return left == right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return (self._schema.colnames == other._schema.colnames
                and Counter(self._rows) == Counter(other._rows))

    __hash__ = None

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[tuple]:
        return iter(self._rows)

    def __repr__(self) -> str:
        label = f"{self.name}" if self.name else "Relation"
        return f"{label}({', '.join(self._schema.colnames)})[{len(self._rows)} rows]"
