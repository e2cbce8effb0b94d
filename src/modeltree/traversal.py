"""Traversal orders and strategies for flattening a tree into a node list.

Two traversal families are provided:

- Depth-first, in six named orders (``TraversalOrder``). For an N-ary tree
  ``in-order`` has no middle position to emit a node at, so it places the node
  after its children exactly like ``post-order``. Both names are accepted and
  produce identical sequences. The ``reverse-*`` orders are the forward result
  reversed end-to-end, not a separately defined walk.
- Breadth-first (level order): every node at depth d before any at depth d+1,
  siblings in child-list order.

A ``TraversalStrategy`` wraps one of these so a ``Tree`` can hold "how to
flatten me" as a value and swap it at runtime:

    ```python
    from modeltree.traversal import BreadthFirstStrategy, DepthFirstStrategy

    tree = Tree(data, strategy=DepthFirstStrategy("pre-order"))
    tree.set_strategy(BreadthFirstStrategy())
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Deque, List, Tuple, Union

from modeltree.exceptions import ValidationError

if TYPE_CHECKING:
    from modeltree.node import TreeNode

BREADTH_FIRST = "breadth-first"


class TraversalOrder(Enum):
    """Depth-first emission orders."""

    PRE_ORDER = "pre-order"
    POST_ORDER = "post-order"
    IN_ORDER = "in-order"
    REVERSE_PRE_ORDER = "reverse-pre-order"
    REVERSE_POST_ORDER = "reverse-post-order"
    REVERSE_IN_ORDER = "reverse-in-order"

    @property
    def is_reversed(self) -> bool:
        return self.value.startswith("reverse-")

    @property
    def emits_parent_first(self) -> bool:
        return self in (TraversalOrder.PRE_ORDER, TraversalOrder.REVERSE_PRE_ORDER)


OrderLike = Union[TraversalOrder, str]


def parse_order(order: OrderLike) -> TraversalOrder:
    """Coerce an order name or enum member to a ``TraversalOrder``.

    Raises:
        ValidationError: If ``order`` names no known depth-first order.
    """
    if isinstance(order, TraversalOrder):
        return order
    try:
        return TraversalOrder(order)
    except ValueError:
        raise ValidationError(
            f"Unknown traversal order {order!r}",
            context={
                "order": order,
                "valid_orders": [member.value for member in TraversalOrder],
            },
        ) from None


def depth_first_search(
    node: TreeNode, order: OrderLike = TraversalOrder.IN_ORDER
) -> List[TreeNode]:
    """Collect every node of the subtree rooted at ``node`` depth-first.

    Args:
        node: Root of the subtree to walk.
        order: One of the ``TraversalOrder`` members or its string value.
            Defaults to ``in-order`` (children before their parent).

    Returns:
        All nodes of the subtree in the requested order.

    Raises:
        ValidationError: If ``order`` is not a known order name.

    Example:
        ```python
        # root -> [child1 -> [grandchild1], child2]
        depth_first_search(root, "pre-order")
        # [root, child1, grandchild1, child2]
        depth_first_search(root, "post-order")
        # [grandchild1, child1, child2, root]
        depth_first_search(root, "reverse-pre-order")
        # [child2, grandchild1, child1, root]
        ```
    """
    order = parse_order(order)
    result: List[TreeNode] = []
    if order.emits_parent_first:
        queue: Deque[TreeNode] = deque([node])
        while queue:
            item = queue.popleft()
            result.append(item)
            queue.extendleft(reversed(item.children))
    else:
        stack: List[Tuple[TreeNode, bool]] = [(node, False)]
        while stack:
            item, expanded = stack.pop()
            if expanded:
                result.append(item)
                continue
            stack.append((item, True))
            stack.extend((child, False) for child in reversed(item.children))
    if order.is_reversed:
        result.reverse()
    return result


def breadth_first_order(node: TreeNode) -> List[TreeNode]:
    """Collect every node of the subtree rooted at ``node`` in level order."""
    result: List[TreeNode] = []
    queue: Deque[TreeNode] = deque([node])
    while queue:
        item = queue.popleft()
        result.append(item)
        queue.extend(item.children)
    return result


class TraversalStrategy(ABC):
    """Flattens a subtree into an ordered list of nodes."""

    name: str

    @abstractmethod
    def __call__(self, node: TreeNode) -> List[TreeNode]:
        """Return the nodes of the subtree rooted at ``node``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraversalStrategy):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self), self.name))


class DepthFirstStrategy(TraversalStrategy):
    """Depth-first traversal in a fixed ``TraversalOrder``."""

    def __init__(self, order: OrderLike = TraversalOrder.IN_ORDER):
        self.order = parse_order(order)
        self.name = self.order.value

    def __call__(self, node: TreeNode) -> List[TreeNode]:
        return depth_first_search(node, self.order)


class BreadthFirstStrategy(TraversalStrategy):
    """Level-order traversal."""

    name = BREADTH_FIRST

    def __call__(self, node: TreeNode) -> List[TreeNode]:
        return breadth_first_order(node)


StrategyLike = Union[TraversalStrategy, TraversalOrder, str, None]


def resolve_strategy(strategy: StrategyLike = None) -> TraversalStrategy:
    """Turn any accepted strategy selector into a ``TraversalStrategy``.

    Args:
        strategy: A strategy instance (returned as is), a ``TraversalOrder``,
            an order name, ``"breadth-first"``, or None for the default
            depth-first ``in-order`` strategy.

    Returns:
        The selected strategy.

    Raises:
        ValidationError: If a name selects no known strategy.
    """
    if strategy is None:
        return DepthFirstStrategy()
    if isinstance(strategy, TraversalStrategy):
        return strategy
    if strategy == BREADTH_FIRST:
        return BreadthFirstStrategy()
    if isinstance(strategy, str) and strategy not in strategy_names():
        raise ValidationError(
            f"Unknown traversal strategy {strategy!r}",
            context={"strategy": strategy, "valid_strategies": strategy_names()},
        )
    return DepthFirstStrategy(strategy)


def strategy_names() -> List[str]:
    """All names accepted by ``resolve_strategy``."""
    return [member.value for member in TraversalOrder] + [BREADTH_FIRST]
