"""
Hash equi-join between two relations.

The left relation is the build side: its rows are bucketed by the composite
key formed from the shared columns. The right relation is the probe side.
Shared columns appear once in the output, at the left relation's position.
"""
import logging
import os
from collections import defaultdict

from ..model.relation import Relation

logger = logging.getLogger(__name__)
log_level_str = os.environ.get("JOINPLAN_DEBUG", "INFO").upper()
try:
    logger.setLevel(getattr(logging, log_level_str))
except AttributeError:
    logger.setLevel(logging.INFO)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter('[%(levelname)s] %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def common_columns(left: Relation, right: Relation) -> list[str]:
    """Column names shared by both relations, in the left relation's order."""
    return list(left.schema.common_columns(right.schema))


def right_payload_positions(left: Relation, right: Relation) -> list[int]:
    """Positions of the right columns whose names the left relation lacks."""
    return [i for i, col in enumerate(right.columns()) if not left.schema.has_column(col)]


def output_columns(left: Relation, right: Relation) -> list[str]:
    """Left columns followed by the right columns the left does not have.

    Repeated names on the right are kept, one output column per position.
    """
    right_cols = right.columns()
    return left.columns() + [right_cols[i] for i in right_payload_positions(left, right)]


def hash_join(left: Relation, right: Relation) -> Relation:
    """Inner equi-join of `left` and `right` on every shared column name.

    With no shared columns the key is the empty tuple on both sides, so the
    result is the cross product.

    Args:
        left: Build side; all of its columns lead the output
        right: Probe side; contributes its non-key columns

    Returns:
        A new Relation. Neither input is modified.
    """
    common = common_columns(left, right)
    out_cols = output_columns(left, right)
    left_key = [left.schema.position(col) for col in common]
    right_key = [right.schema.position(col) for col in common]
    right_rest = right_payload_positions(left, right)

    logger.debug(f"[JOIN] left={left.columns()} rows={left.num_rows()}, right={right.columns()} rows={right.num_rows()}")
    logger.debug(f"[JOIN] Common columns: {common}, left_key={left_key}, right_key={right_key}")
    if not common:
        logger.debug(f"[JOIN] No common columns, result is the cross product")

    # Build
    table = defaultdict(list)
    for row in left:
        table[tuple(row[i] for i in left_key)].append(row)
    logger.debug(f"[JOIN][BUILD] {len(table)} distinct keys from {left.num_rows()} rows")

    # Probe
    result = []
    for row in right:
        matches = table.get(tuple(row[i] for i in right_key))
        if not matches:
            continue
        extra = tuple(row[i] for i in right_rest)
        for left_row in matches:
            result.append(left_row + extra)
    logger.debug(f"[JOIN][PROBE] Result: rows={len(result)}, columns={out_cols}")

    return Relation(out_cols, result)
