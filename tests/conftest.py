import pytest

from joinplan.engine.config import config
from joinplan.engine.join_factory import JoinFactory
from joinplan.model.relation import Relation


@pytest.fixture(autouse=True)
def reset_config():
    """Each test starts from the default configuration and hash join."""
    config.reset()
    JoinFactory.reset()
    yield
    config.reset()
    JoinFactory.reset()


@pytest.fixture
def r():
    return Relation(["a", "b"], name="R").row([1, 2]).row([3, 4]).row([5, 6])


@pytest.fixture
def s():
    return Relation(["b", "c"], name="S").row([2, 10]).row([4, 20]).row([6, 30])


@pytest.fixture
def t():
    return Relation(["c", "d"], name="T").row([10, 100]).row([20, 200]).row([30, 300])


def chain(n, rows=10):
    """Relations col_i/col_{i+1} that join into a single chain."""
    return [
        Relation([f"col_{i}", f"col_{i + 1}"],
                 [(j * 10 ** i, j * 10 ** (i + 1)) for j in range(rows)])
        for i in range(n)
    ]
