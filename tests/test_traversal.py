import pytest

import modeltree.traversal as mt_traversal
from modeltree.exceptions import ValidationError
from modeltree.node import TreeNode


def make_simple_tree():
    # (a (b d (e h)) (c f (g i)))
    a = TreeNode("a")
    b, c, d, e, f, g, h, i = (TreeNode(x) for x in "bcdefghi")
    a.add_child(b)
    a.add_child(c)
    b.add_child(d)
    b.add_child(e)
    c.add_child(f)
    c.add_child(g)
    e.add_child(h)
    g.add_child(i)
    return a


def models(nodes):
    return "".join(node.model for node in nodes)


def test_depth_first_orders():
    tree = make_simple_tree()
    assert models(mt_traversal.depth_first_search(tree, "pre-order")) == "abdehcfgi"
    assert models(mt_traversal.depth_first_search(tree, "post-order")) == "dhebfigca"
    assert models(mt_traversal.depth_first_search(tree, "in-order")) == "dhebfigca"
    assert models(mt_traversal.depth_first_search(tree, "reverse-pre-order")) == "igfchedba"
    assert models(mt_traversal.depth_first_search(tree, "reverse-post-order")) == "acgifbehd"
    assert models(mt_traversal.depth_first_search(tree, "reverse-in-order")) == "acgifbehd"


def test_depth_first_default_is_in_order():
    tree = make_simple_tree()
    assert mt_traversal.depth_first_search(tree) == mt_traversal.depth_first_search(
        tree, mt_traversal.TraversalOrder.IN_ORDER
    )


def test_in_order_matches_post_order():
    tree = make_simple_tree()
    for node in mt_traversal.depth_first_search(tree, "pre-order"):
        assert mt_traversal.depth_first_search(node, "in-order") == mt_traversal.depth_first_search(
            node, "post-order"
        )


def test_reverse_orders_are_reversed_forward_orders():
    tree = make_simple_tree()
    for forward in ("pre-order", "post-order", "in-order"):
        expected = list(reversed(mt_traversal.depth_first_search(tree, forward)))
        assert mt_traversal.depth_first_search(tree, "reverse-" + forward) == expected


def test_enum_and_string_orders_agree():
    tree = make_simple_tree()
    for order in mt_traversal.TraversalOrder:
        assert mt_traversal.depth_first_search(tree, order) == mt_traversal.depth_first_search(
            tree, order.value
        )


def test_unknown_order():
    with pytest.raises(ValidationError) as exc_info:
        mt_traversal.depth_first_search(make_simple_tree(), "sideways")
    assert exc_info.value.context["order"] == "sideways"
    assert "pre-order" in exc_info.value.context["valid_orders"]


def test_single_node():
    leaf = TreeNode("x")
    for order in mt_traversal.TraversalOrder:
        assert mt_traversal.depth_first_search(leaf, order) == [leaf]
    assert mt_traversal.breadth_first_order(leaf) == [leaf]


def test_breadth_first_order():
    tree = make_simple_tree()
    assert models(mt_traversal.breadth_first_order(tree)) == "abcdefghi"
    b = tree.children[0]
    assert models(mt_traversal.breadth_first_order(b)) == "bdeh"


def test_deep_tree_does_not_recurse():
    root = TreeNode(0)
    node = root
    for depth in range(1, 5000):
        child = TreeNode(depth)
        node.add_child(child)
        node = child
    assert len(mt_traversal.depth_first_search(root, "pre-order")) == 5000
    post = mt_traversal.depth_first_search(root, "post-order")
    assert post[0] is node
    assert post[-1] is root
    assert root.get_path(node)[-1] is node
    assert root.get_parent(node).model == 4998


def test_order_properties():
    assert mt_traversal.TraversalOrder.REVERSE_IN_ORDER.is_reversed is True
    assert mt_traversal.TraversalOrder.IN_ORDER.is_reversed is False
    assert mt_traversal.TraversalOrder.PRE_ORDER.emits_parent_first is True
    assert mt_traversal.TraversalOrder.REVERSE_PRE_ORDER.emits_parent_first is True
    assert mt_traversal.TraversalOrder.POST_ORDER.emits_parent_first is False


def test_parse_order():
    assert mt_traversal.parse_order("pre-order") is mt_traversal.TraversalOrder.PRE_ORDER
    order = mt_traversal.TraversalOrder.POST_ORDER
    assert mt_traversal.parse_order(order) is order
    with pytest.raises(ValidationError):
        mt_traversal.parse_order("preorder")


def test_strategies():
    tree = make_simple_tree()
    assert models(mt_traversal.DepthFirstStrategy("pre-order")(tree)) == "abdehcfgi"
    assert models(mt_traversal.DepthFirstStrategy()(tree)) == "dhebfigca"
    assert models(mt_traversal.BreadthFirstStrategy()(tree)) == "abcdefghi"


def test_strategy_equality_and_repr():
    assert mt_traversal.DepthFirstStrategy("pre-order") == mt_traversal.DepthFirstStrategy(
        mt_traversal.TraversalOrder.PRE_ORDER
    )
    assert mt_traversal.DepthFirstStrategy("pre-order") != mt_traversal.DepthFirstStrategy("post-order")
    assert mt_traversal.BreadthFirstStrategy() == mt_traversal.BreadthFirstStrategy()
    assert mt_traversal.BreadthFirstStrategy() != mt_traversal.DepthFirstStrategy()
    assert len({mt_traversal.BreadthFirstStrategy(), mt_traversal.BreadthFirstStrategy()}) == 1
    assert repr(mt_traversal.DepthFirstStrategy("pre-order")) == "DepthFirstStrategy('pre-order')"
    assert repr(mt_traversal.BreadthFirstStrategy()) == "BreadthFirstStrategy('breadth-first')"


def test_resolve_strategy():
    assert mt_traversal.resolve_strategy() == mt_traversal.DepthFirstStrategy("in-order")
    assert mt_traversal.resolve_strategy("breadth-first") == mt_traversal.BreadthFirstStrategy()
    assert mt_traversal.resolve_strategy("reverse-pre-order") == mt_traversal.DepthFirstStrategy(
        "reverse-pre-order"
    )
    strategy = mt_traversal.BreadthFirstStrategy()
    assert mt_traversal.resolve_strategy(strategy) is strategy
    with pytest.raises(ValidationError) as exc_info:
        mt_traversal.resolve_strategy("sideways")
    assert "breadth-first" in exc_info.value.context["valid_strategies"]


def test_strategy_names():
    assert mt_traversal.strategy_names() == [
        "pre-order",
        "post-order",
        "in-order",
        "reverse-pre-order",
        "reverse-post-order",
        "reverse-in-order",
        "breadth-first",
    ]
