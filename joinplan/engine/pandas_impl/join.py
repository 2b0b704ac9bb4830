import pandas as pd
import logging

from ...model.relation import Relation
from ..join import common_columns, output_columns

logger = logging.getLogger(__name__)

def pandas_join(left: Relation, right: Relation, sort: bool = False) -> Relation:
    """
    Inner equi-join through DataFrame.merge.

    Produces the same multiset of rows as the hash join. Both relations must
    have unique column names; row order follows pandas.
    """
    common = common_columns(left, right)
    out_cols = output_columns(left, right)
    for label, rel in (("left", left), ("right", right)):
        cols = rel.columns()
        if len(set(cols)) != len(cols):
            raise ValueError(f"pandas join requires unique column names; {label} has {cols}")
    left_df = left.to_frame()
    right_df = right.to_frame()

    logger.debug(f"[PANDAS_JOIN] Merging on {common}: left rows={len(left_df)}, right rows={len(right_df)}")
    if common:
        merged = left_df.merge(right_df, how="inner", on=common, sort=sort)
    else:
        merged = left_df.merge(right_df, how="cross")
    merged = merged[out_cols].reset_index(drop=True)
    logger.debug(f"[PANDAS_JOIN] Result: rows={len(merged)}, columns={out_cols}")
    return Relation.from_frame(merged)
