"""
In-memory equi-join engine with a connectivity-based join planner.
"""
from .model.relation import Relation
from .model.errors import (
    JoinPlanError,
    ShapeMismatchError,
    EmptyPlanError,
    PlannerConsumedError,
    UnknownImplementationError,
)
from .engine.planner import Planner
from .engine.executor import fold_relations, execute_plan

__all__ = [
    'Relation',
    'Planner',
    'fold_relations',
    'execute_plan',
    'JoinPlanError',
    'ShapeMismatchError',
    'EmptyPlanError',
    'PlannerConsumedError',
    'UnknownImplementationError',
]
