#!/usr/bin/env python
"""
Demonstrates hash joins between small relations and planning a join order
for a shuffled chain of relations.
"""
import os
import logging
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from joinplan.engine.join_factory import JoinFactory
from joinplan.engine.planner import Planner
from joinplan.engine.executor import fold_relations
from joinplan.model.relation import Relation


def show(title, relation):
    print(f"{title}:")
    print(relation.to_string())
    print()


def main():
    logging.basicConfig(level=logging.INFO,
                        format='[%(levelname)s] %(message)s')
    logger = logging.getLogger(__name__)

    config_file = os.path.join(project_root, "config", "joinplan.yaml")
    if os.path.exists(config_file):
        logger.info(f"Loading configuration from {config_file}")
        JoinFactory.load_config_from_file(config_file)

    r = Relation(["a", "b"]).row([1, 2]).row([3, 4]).row([5, 6])
    s = Relation(["b", "c"]).row([2, 10]).row([4, 20]).row([6, 30])
    t = Relation(["c", "d"]).row([10, 100]).row([20, 200]).row([30, 300])

    show("R", r)
    show("S", s)
    show("R join S", r.join(s))
    show("R join T join S", r.join(t).join(s))

    r2 = Relation(["a", "b"]).rows((i, i * 10) for i in range(1000))
    s2 = Relation(["b", "c"]).rows((i * 10, i * 100) for i in range(1000))
    t2 = Relation(["c", "d"]).rows((i * 100, i * 1000) for i in range(1000))
    logger.info(f"R2 join T2 join S2: {r2.join(t2).join(s2).num_rows()} rows")

    plan = Planner().join(r).join(t).join(s).plan()
    show("Planned R, T, S", fold_relations(plan))

    many_relations = [
        Relation([f"col_{i}", f"col_{i + 1}"],
                 [(j * 10 ** i, j * 10 ** (i + 1)) for j in range(10)])
        for i in range(10)
    ]
    random.shuffle(many_relations)

    planner = Planner()
    for rel in many_relations:
        planner.add_relation(rel)
    plan = planner.plan()
    for rel in plan:
        show(" / ".join(rel.columns()), rel)

    show("Chain result", fold_relations(plan, progress=True))


if __name__ == "__main__":
    main()
