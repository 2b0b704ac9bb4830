"""
Join-order planning from column-name connectivity.

Relations that share a column name are adjacent in a JoinGraph. The plan is a
depth-first walk of that graph, one connected component after another, so that
every relation other than a component's seed follows some relation it can
join with.
"""
import logging
import os
import random
from typing import List, Optional

from ..model.relation import Relation
from ..model.errors import PlannerConsumedError
from .graph import JoinGraph
from .config import config

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

SEED_POLICIES = ("smallest", "random")

class Planner:
    """
    Accumulates relations and derives a join order.

    Holds:
      - _relations: list of Relation; the list index is the graph vertex id
      - _graph: JoinGraph built as relations are added
    A planner is consumed by plan() or plan_components(); it cannot be
    planned twice or extended afterwards.
    """
    def __init__(self, seed_policy: Optional[str] = None, random_seed: Optional[int] = None) -> None:
        if seed_policy is None:
            seed_policy = config.get_seed_policy()
        if seed_policy not in SEED_POLICIES:
            raise ValueError(f"Unknown seed policy: {seed_policy}. Valid options: {list(SEED_POLICIES)}")
        if random_seed is None:
            random_seed = config.get('planner.random_seed')
        self.seed_policy = seed_policy
        self._rng = random.Random(random_seed)
        self._relations: list[Optional[Relation]] = []
        self._graph = JoinGraph()
        self._consumed = False

    @property
    def graph(self) -> JoinGraph:
        return self._graph

    def add_relation(self, relation: Relation) -> 'Planner':
        """
        Add a relation, linking it to every earlier relation it shares a
        column with. Returns the planner so calls can be chained.
        """
        if self._consumed:
            raise PlannerConsumedError()
        new_id = len(self._relations)
        for i, existing in enumerate(self._relations):
            if relation.schema.shares_column_with(existing.schema):
                logger.debug(f"[PLAN][EDGE] {new_id} -- {i} via {list(relation.schema.common_columns(existing.schema))}")
                self._graph.edge(new_id, i)
        self._relations.append(relation)
        return self

    join = add_relation

    def _pick_seed(self, remaining: set) -> int:
        if self.seed_policy == "random":
            return self._rng.choice(sorted(remaining))
        return min(remaining)

    def _traverse(self) -> List[List[int]]:
        """Depth-first walk grouping vertex ids by connected component."""
        remaining = set(range(len(self._relations)))
        groups = []
        while remaining:
            seed = self._pick_seed(remaining)
            logger.debug(f"[PLAN][SEED] Starting component at {seed}, remaining={len(remaining)}")
            order = []
            frontier = [seed]
            while frontier:
                vertex = frontier.pop()
                if vertex not in remaining:
                    continue
                remaining.remove(vertex)
                order.append(vertex)
                frontier.extend(n for n in self._graph.neighbours(vertex) if n in remaining)
            groups.append(order)
        return groups

    def _take(self, ids: List[int]) -> List[Relation]:
        taken = []
        for i in ids:
            taken.append(self._relations[i])
            self._relations[i] = None
        return taken

    def _consume(self) -> List[List[int]]:
        if self._consumed:
            raise PlannerConsumedError()
        groups = self._traverse()
        self._consumed = True
        logger.debug(f"[PLAN] {len(self._relations)} relations, {len(groups)} components, order={groups}")
        return groups

    def plan(self) -> List[Relation]:
        """Return all relations in join order, components concatenated.

        Folding the result left to right joins each relation against columns
        already accumulated; a component boundary yields a cross product.
        """
        groups = self._consume()
        return self._take([i for group in groups for i in group])

    def plan_components(self) -> List[List[Relation]]:
        """Return one join-ordered list of relations per connected component."""
        groups = self._consume()
        return [self._take(group) for group in groups]

    def __len__(self) -> int:
        return len(self._relations)

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "open"
        return f"Planner(relations={len(self._relations)}, {self._graph!r}, {state})"
