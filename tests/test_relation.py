import pandas as pd
import pytest

from joinplan.model.relation import Relation
from joinplan.model.schema import RelationSchema
from joinplan.model.errors import ShapeMismatchError


def test_construct_empty():
    rel = Relation(["a", "b"])
    assert rel.columns() == ["a", "b"]
    assert rel.num_rows() == 0
    assert len(rel) == 0


def test_construct_with_rows():
    rel = Relation(["a", "b"], [[1, 2], (3, 4)])
    assert list(rel) == [(1, 2), (3, 4)]
    assert rel.to_records() == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]


def test_construct_rejects_short_row():
    with pytest.raises(ShapeMismatchError) as excinfo:
        Relation(["a", "b"], [(1, 2), (3,)])
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 1
    assert excinfo.value.row_index == 1


def test_append_rejects_long_row():
    rel = Relation(["a"])
    with pytest.raises(ShapeMismatchError):
        rel.append_row([1, 2])
    assert rel.num_rows() == 0


def test_shape_error_is_value_error():
    with pytest.raises(ValueError):
        Relation(["a"]).row([])


def test_builder_chaining(r):
    assert r.num_rows() == 3
    assert r.name == "R"


def test_rows_replaces_data():
    rel = Relation(["a", "b"]).row([9, 9]).rows((i, i * 10) for i in range(4))
    assert list(rel) == [(0, 0), (1, 10), (2, 20), (3, 30)]


def test_equality_ignores_row_order():
    one = Relation(["a", "b"], [(1, 2), (3, 4)])
    two = Relation(["a", "b"], [(3, 4), (1, 2)])
    assert one == two


def test_equality_counts_duplicates():
    one = Relation(["a"], [(1,), (1,)])
    two = Relation(["a"], [(1,)])
    assert one != two


def test_equality_respects_column_order():
    one = Relation(["a", "b"], [(1, 2)])
    two = Relation(["b", "a"], [(2, 1)])
    assert one != two
    assert one.equivalent(two)


def test_equivalent_detects_different_values():
    one = Relation(["a", "b"], [(1, 2)])
    two = Relation(["b", "a"], [(1, 2)])
    assert not one.equivalent(two)


def test_same_construction_twice_is_equal():
    rows = [(1, 2), (3, 4), (5, 6)]
    assert Relation(["a", "b"], rows) == Relation(["a", "b"], list(reversed(rows)))


def test_to_frame_and_back(r):
    df = r.to_frame()
    assert list(df.columns) == ["a", "b"]
    assert df["a"].tolist() == [1, 3, 5]
    assert Relation.from_frame(df) == r


def test_to_frame_empty_has_columns():
    df = Relation(["x", "y"]).to_frame()
    assert list(df.columns) == ["x", "y"]
    assert len(df) == 0


def test_to_frame_sorted_columns():
    rel = Relation(["c", "a", "b"], [(3, 1, 2)])
    df = rel.to_frame(sort_columns=True)
    assert list(df.columns) == ["a", "b", "c"]
    assert df.iloc[0].tolist() == [1, 2, 3]


def test_to_string_lists_sorted_columns():
    text = Relation(["b", "a"], [(20, 10)]).to_string()
    header = text.splitlines()[0].split()
    assert header == ["a", "b"]


def test_from_frame_reads_values():
    df = pd.DataFrame({"k": [1, 2], "v": [10, 20]})
    rel = Relation.from_frame(df, name="kv")
    assert rel.columns() == ["k", "v"]
    assert list(rel) == [(1, 10), (2, 20)]
    assert rel.name == "kv"


def test_schema_positions_use_first_occurrence():
    schema = RelationSchema(colnames=("a", "b", "a"))
    assert schema.arity == 3
    assert schema.position("a") == 0
    assert schema.position("b") == 1
    assert schema.position("z") is None


def test_schema_common_columns_in_left_order():
    left = RelationSchema(colnames=("x", "b", "a"))
    right = RelationSchema(colnames=("a", "b", "c"))
    assert left.common_columns(right) == ("b", "a")
    assert left.shares_column_with(right)
    assert not left.shares_column_with(RelationSchema(colnames=("q",)))


def test_equivalent_with_repeated_names():
    one = Relation(["a", "b", "a"], [(1, 2, 3)])
    same = Relation(["b", "a", "a"], [(2, 1, 3)])
    swapped = Relation(["b", "a", "a"], [(2, 3, 1)])
    assert one.equivalent(same)
    assert not one.equivalent(swapped)


def test_to_string_with_values_beyond_int64():
    big = 2 ** 70
    rel = Relation(["a"], [(big,), (1,)])
    assert rel.to_frame()["a"].dtype == object
    assert str(big) in rel.to_string()
