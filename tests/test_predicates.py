from dataclasses import dataclass

import modeltree.predicates as mt_predicates
from modeltree.node import TreeNode


@dataclass
class Item:
    name: str
    value: int


def test_property_equals_on_mapping():
    predicate = mt_predicates.property_equals("name", "child1")
    assert predicate(TreeNode({"name": "child1"})) is True
    assert predicate(TreeNode({"name": "child2"})) is False
    assert predicate(TreeNode({"other": "child1"})) is False


def test_property_equals_on_object():
    predicate = mt_predicates.property_equals("value", 30)
    assert predicate(TreeNode(Item("child2", 30))) is True
    assert predicate(TreeNode(Item("child1", 20))) is False


def test_missing_property_never_matches():
    predicate = mt_predicates.property_equals("name", None)
    assert predicate(TreeNode({})) is False
    assert predicate(TreeNode(Item("x", 1))) is False
    assert predicate(TreeNode({"name": None})) is True


def test_read_property():
    assert mt_predicates.read_property({"a": 1}, "a") == 1
    assert mt_predicates.read_property(Item("x", 2), "value") == 2
    missing = mt_predicates.read_property({"a": 1}, "b")
    assert missing is mt_predicates.read_property(Item("x", 2), "nope")
    assert missing is not None
