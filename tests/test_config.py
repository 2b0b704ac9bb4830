import pytest
import yaml

from joinplan.engine.config import config, Config, DEFAULT_CONFIG
from joinplan.engine.join_factory import JoinFactory
from joinplan.engine.pandas_impl.join import pandas_join


def test_defaults():
    assert config.get_join_implementation() == "hash"
    assert config.get_seed_policy() == "smallest"
    assert config.get('fold.progress') is False
    assert config.get('missing.path', 5) == 5


def test_singleton():
    assert Config.get_instance() is config
    with pytest.raises(RuntimeError):
        Config()


def test_set_creates_path():
    config.set('planner.extra.depth', 2)
    assert config.get('planner.extra.depth') == 2


def test_reset_does_not_leak_into_defaults():
    config.set('join.implementations.pandas.sort', True)
    config.reset()
    assert DEFAULT_CONFIG['join']['implementations']['pandas']['sort'] is False
    assert config.get('join.implementations.pandas.sort') is False


def test_load_from_file_merges(tmp_path):
    path = tmp_path / "joinplan.yaml"
    path.write_text(yaml.dump({"join": {"implementation": "pandas"}}))
    JoinFactory.load_config_from_file(str(path))
    assert config.get_join_implementation() == "pandas"
    assert config.get_seed_policy() == "smallest"
    assert JoinFactory.get_current_implementation_name() is None
    join_fn = JoinFactory.get_join_function()
    assert join_fn.func is pandas_join
    assert JoinFactory.get_current_implementation_name() == "pandas"


def test_load_missing_file_keeps_defaults(tmp_path):
    config.load_from_file(str(tmp_path / "absent.yaml"))
    assert config.get_join_implementation() == "hash"


def test_load_invalid_yaml_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("join: [unclosed")
    with pytest.raises(yaml.YAMLError):
        config.load_from_file(str(path))


def test_save_round_trip(tmp_path):
    path = tmp_path / "saved.yaml"
    config.set('planner.random_seed', 42)
    config.save(str(path))
    saved = yaml.safe_load(path.read_text())
    assert saved['planner']['random_seed'] == 42
