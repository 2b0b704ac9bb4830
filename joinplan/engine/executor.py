import logging
from typing import Iterable, List, Optional, Union

from tqdm import tqdm

from ..model.relation import Relation
from ..model.errors import EmptyPlanError
from .planner import Planner
from .config import config

logger = logging.getLogger(__name__)

def fold_relations(relations: Iterable[Relation], progress: Optional[bool] = None) -> Relation:
    """
    Join relations pairwise from left to right.

    Args:
        relations: Relations in join order, typically the output of Planner.plan()
        progress: Show a tqdm progress bar; defaults to the `fold.progress` setting

    Returns:
        The joined Relation

    Raises:
        EmptyPlanError: if no relations are given
    """
    relations = list(relations)
    if not relations:
        raise EmptyPlanError()
    if progress is None:
        progress = bool(config.get('fold.progress', False))

    result = relations[0]
    steps = relations[1:]
    for i, right in enumerate(tqdm(steps, desc="join", disable=not progress), start=1):
        result = result.join(right)
        logger.debug(f"[FOLD][STEP{i}] rows={result.num_rows()}, columns={result.columns()}")
        if result.num_rows() == 0:
            logger.debug(f"[FOLD][STEP{i}] Join produced EMPTY result")
    return result

def execute_plan(planner: Planner, per_component: bool = False) -> Union[Relation, List[Relation]]:
    """Plan and fold in one call.

    With per_component=True each connected component is folded on its own,
    so no cross product is formed between components.
    """
    if per_component:
        return [fold_relations(group) for group in planner.plan_components()]
    return fold_relations(planner.plan())
