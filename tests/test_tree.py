"""
Tests for the configuration tree.
"""

import pytest

from dsfilter.exceptions import TreeError
from dsfilter.tree import (
    BoolVal,
    Dict,
    FloatVal,
    IntVal,
    Key,
    List,
    StrVal,
    insert,
    lookup,
    new_tree,
    remove_key,
    replace,
    to_python,
)


@pytest.fixture
def config():
    return {
        "outputs": {"default": {"type": "elasticsearch"}},
        "datasources": [
            {"id": "system", "enabled": True, "period": 10},
            {"id": "nginx", "ratio": 0.5},
        ],
    }


class TestNewTree:
    """Building trees from plain data."""

    def test_node_types(self, config):
        tree = new_tree(config)

        assert isinstance(tree, Dict)
        assert isinstance(lookup(tree, "datasources"), List)
        assert lookup(tree, "datasources.0.id") == StrVal("system")
        assert lookup(tree, "datasources.0.enabled") == BoolVal(True)
        assert lookup(tree, "datasources.0.period") == IntVal(10)
        assert lookup(tree, "datasources.1.ratio") == FloatVal(0.5)

    def test_back_to_python(self, config):
        assert to_python(new_tree(config)) == config

    def test_key_order_kept(self):
        tree = new_tree({"b": 1, "a": 2, "c": 3})
        assert [k.name for k in tree.value] == ["b", "a", "c"]

    def test_null_value(self):
        tree = new_tree({"datasources": None})
        assert tree.find("datasources") == Key("datasources", None)
        assert lookup(tree, "datasources") is None

    def test_unsupported_value(self):
        with pytest.raises(TreeError):
            new_tree({"when": object()})


class TestLookup:
    """Path lookups."""

    def test_unwraps_keys(self, config):
        tree = new_tree(config)
        assert lookup(tree, "outputs.default.type") == StrVal("elasticsearch")

    def test_missing(self, config):
        tree = new_tree(config)
        assert lookup(tree, "inputs") is None
        assert lookup(tree, "datasources.5.id") is None
        assert lookup(tree, "datasources.first") is None
        assert lookup(tree, "outputs.default.type.deeper") is None

    def test_find_on_scalars(self):
        assert StrVal("x").find("x") is None

    def test_str(self, config):
        tree = new_tree(config)
        assert str(lookup(tree, "datasources.0.id")) == "system"
        assert str(lookup(tree, "datasources.0.enabled")) == "true"
        assert str(lookup(tree, "datasources.0.period")) == "10"


class TestReplace:
    """Atomic value replacement."""

    def test_replace_list(self, config):
        tree = new_tree(config)
        survivor = lookup(tree, "datasources").value[1]

        replace(tree, "datasources", List([survivor]))

        assert lookup(tree, "datasources").value[0] is survivor
        assert to_python(tree)["datasources"] == [{"id": "nginx", "ratio": 0.5}]
        # key keeps its position
        assert [k.name for k in tree.value] == ["outputs", "datasources"]

    def test_replace_nested(self, config):
        tree = new_tree(config)
        replace(tree, "outputs.default.type", StrVal("logstash"))
        assert lookup(tree, "outputs.default.type") == StrVal("logstash")

    def test_missing_key_leaves_tree_untouched(self, config):
        tree = new_tree(config)
        with pytest.raises(TreeError):
            replace(tree, "inputs", List())
        assert to_python(tree) == config

    def test_parent_not_a_dict(self, config):
        tree = new_tree(config)
        with pytest.raises(TreeError):
            replace(tree, "outputs.default.type.name", StrVal("x"))


class TestInsertRemove:
    """Insert and remove operations."""

    def test_insert_new_key(self, config):
        tree = new_tree(config)
        insert(tree, List([StrVal("a")]), "inputs")
        assert to_python(tree)["inputs"] == ["a"]

    def test_insert_creates_parents(self):
        tree = new_tree({})
        insert(tree, IntVal(1), "a.b.c")
        assert to_python(tree) == {"a": {"b": {"c": 1}}}

    def test_insert_overwrites(self, config):
        tree = new_tree(config)
        insert(tree, StrVal("kafka"), "outputs.default.type")
        assert lookup(tree, "outputs.default.type") == StrVal("kafka")

    def test_insert_through_scalar_fails(self, config):
        tree = new_tree(config)
        with pytest.raises(TreeError):
            insert(tree, IntVal(1), "outputs.default.type.x")

    def test_remove_key(self, config):
        tree = new_tree(config)
        remove_key(tree, "datasources")
        assert "datasources" not in to_python(tree)

    def test_remove_missing_key(self, config):
        tree = new_tree(config)
        remove_key(tree, "inputs")
        remove_key(tree, "nothing.here")
        assert to_python(tree) == config
