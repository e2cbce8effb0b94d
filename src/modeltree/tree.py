"""Tree container: an optional root node plus a traversal strategy.

``Tree`` wraps a ``TreeNode`` graph with whole-tree operations: building the
graph from nested plain data, searching from the root, and removing or moving
nodes anywhere in the tree. The recursive work is delegated to ``TreeNode``.

Every operation on an empty tree is a no-op that returns None, and nodes that
are not part of the tree are ignored rather than reported.

Typical usage example:

    ```python
    from modeltree import Tree

    tree = Tree({
        "model": {"name": "root", "value": 10},
        "index": 0,
        "children": [
            {"model": {"name": "child1", "value": 20},
             "children": [{"model": {"name": "grandchild1", "value": 40}}]},
            {"model": {"name": "child2", "value": 30}},
        ],
    })

    child2 = tree.find(lambda n: n.model["value"] == 30)
    child1 = tree.find_by_property("name", "child1")
    tree.move(child1, child2)
    tree.get_parent(child1)  # child2
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Dict, Generic, List, Sequence, TypeVar, Union

import graphviz

from modeltree.config import TreeConfig
from modeltree.node import TreeNode
from modeltree.predicates import Predicate, property_equals
from modeltree.traversal import StrategyLike, TraversalStrategy, resolve_strategy

logger = logging.getLogger(__name__)

M = TypeVar("M")


class Tree(Generic[M]):
    """A tree of ``TreeNode`` objects reached through an optional root.

    Attributes:
        root: The root node, or None for an empty tree.
        strategy: The ``TraversalStrategy`` used by ``all`` and
            ``insert_child``. Defaults to depth-first ``in-order``, which
            emits children before their parent.
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        strategy: StrategyLike = None,
    ):
        """Initialize a tree, optionally parsing nested plain data.

        Args:
            data: Nested ``{"model", "index", "children"}`` mapping, or None
                (or any falsy value) for an empty tree.
            strategy: Traversal strategy selector: a ``TraversalStrategy``,
                a ``TraversalOrder``, an order name, ``"breadth-first"``, or
                None for the default.

        Raises:
            ValidationError: If ``strategy`` names no known strategy.
        """
        self.strategy: TraversalStrategy = resolve_strategy(strategy)
        self.root: TreeNode[M] | None = self.parse(data)

    def __repr__(self) -> str:
        return f"Tree({self.root!r})" if self.root is not None else "Tree(None)"

    @classmethod
    def from_config(
        cls,
        config: Union[TreeConfig, Mapping[str, Any]],
        data: Mapping[str, Any] | None = None,
    ) -> Tree[M]:
        """Create a tree whose options come from a ``TreeConfig`` or mapping.

        Raises:
            ConfigurationError: If ``config`` is not a valid configuration.
        """
        if not isinstance(config, TreeConfig):
            config = TreeConfig.from_dict(config)
        return cls(data, strategy=config.build_strategy())

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def set_strategy(self, strategy: StrategyLike) -> None:
        """Select the traversal strategy used from now on.

        Accepts the same selectors as the constructor.
        """
        self.strategy = resolve_strategy(strategy)
        logger.debug("Tree traversal strategy set to %s", self.strategy.name)

    def parse(self, data: Mapping[str, Any] | None) -> TreeNode[M] | None:
        """Build a node graph from nested plain data.

        The root takes ``data["model"]`` and ``data.get("index")``. Every
        descendant takes its ``model`` and an index equal to its 1-based
        position among its siblings; indices present in the data below the
        root are ignored. Entries are not validated, so a missing ``model``
        raises ``KeyError``.

        This does not change ``root``; the constructor assigns the result.

        Args:
            data: ``{"model": ..., "index"?: int, "children"?: [...]}`` or a
                falsy value.

        Returns:
            The new root node, or None for falsy ``data``.
        """
        if not data:
            return None
        root: TreeNode[M] = TreeNode(data["model"], data.get("index"))
        self._parse_children(root, data.get("children"))
        return root

    def _parse_children(
        self, parent: TreeNode[M], children: Sequence[Mapping[str, Any]] | None
    ) -> None:
        pending = [(parent, children)]
        while pending:
            node, entries = pending.pop()
            for pos, entry in enumerate(entries or (), start=1):
                child: TreeNode[M] = TreeNode(entry["model"], pos)
                node.add_child(child)
                if entry.get("children"):
                    pending.append((child, entry["children"]))

    def to_dict(self) -> Dict[str, Any] | None:
        """Convert the tree back to nested plain data, or None when empty."""
        return self.root.to_dict() if self.root is not None else None

    def all(self) -> List[TreeNode[M]] | None:
        """All nodes in ``strategy`` order, or None for an empty tree."""
        return self.strategy(self.root) if self.root is not None else None

    def remove(self, node: TreeNode[M] | None) -> None:
        """Remove ``node`` (and its subtree) from the tree.

        Removing the root empties the whole tree. Otherwise ``node`` is
        spliced out of every children list in the tree that holds it. A node
        that is not in the tree is ignored.
        """
        if self.root is None or node is None:
            return
        if node is self.root:
            logger.debug("Removed root node; tree is now empty")
            self.root = None
            return
        pending = [self.root]
        while pending:
            current = pending.pop()
            current.remove_child(node)
            pending.extend(current.children)

    def find(self, predicate: Predicate) -> TreeNode[M] | None:
        """Find the first node below the root accepted by ``predicate``.

        See ``TreeNode.find_child`` for the search order. The root itself is
        not tested.
        """
        return self.root.find_child(predicate) if self.root is not None else None

    def find_by_property(self, name: str, value: Any) -> TreeNode[M] | None:
        """Find the first node below the root whose model field ``name`` equals ``value``."""
        return self.find(property_equals(name, value))

    def move(self, node: TreeNode[M] | None, new_parent: TreeNode[M] | None) -> None:
        """Re-attach ``node`` as the last child of ``new_parent``.

        ``node`` is detached from its current parent, found by searching the
        tree from the root. If it has no parent in this tree, it is simply
        attached. ``new_parent`` is not checked for membership in this tree
        and must not be a descendant of ``node``. No-op unless both
        arguments are given.
        """
        if node is None or new_parent is None:
            return
        current_parent = self.root.get_parent(node) if self.root is not None else None
        if current_parent is None:
            logger.debug("Node to move has no parent in this tree; attaching only")
        else:
            current_parent.remove_child(node)
        new_parent.add_child(node)

    def get_path(self, node: TreeNode[M] | None) -> List[TreeNode[M]] | None:
        """Nodes from the root down to ``node`` inclusive, or None."""
        return self.root.get_path(node) if self.root is not None else None

    def get_reverse_path(self, node: TreeNode[M] | None) -> List[TreeNode[M]] | None:
        """Nodes from ``node`` up to the root inclusive, or None."""
        return self.root.get_reverse_path(node) if self.root is not None else None

    def get_parent(self, node: TreeNode[M] | None) -> TreeNode[M] | None:
        """The node in this tree whose children include ``node``, or None."""
        return self.root.get_parent(node) if self.root is not None else None

    def walk(self, callback: Callable[[TreeNode[M]], Any]) -> None:
        """Call ``callback`` once per node, children before their parent.

        Always uses depth-first ``in-order`` regardless of ``strategy``, so a
        parent's callback runs after those of all its descendants. Return
        values of ``callback`` are ignored.
        """
        if self.root is None:
            return
        for node in self.root.depth_first_search(self.root):
            callback(node)

    def insert_child(self, child: TreeNode[M] | None, predicate: Predicate) -> None:
        """Append ``child`` to the first node (in ``strategy`` order) matching ``predicate``.

        Note:
            This is not ``TreeNode.insert_child``: the child is added to the
            matched node's own children (at the end), not placed among the
            matched node's siblings. Nothing happens if no node matches.
        """
        nodes = self.strategy(self.root) if self.root is not None else []
        for node in nodes:
            if predicate(node):
                node.add_child(child)
                return
        logger.debug("No node matched; child not inserted")

    def insert_child_by_property(self, child: TreeNode[M] | None, name: str, value: Any) -> None:
        self.insert_child(child, property_equals(name, value))

    def build_dot(
        self, node_name_fn: Callable[[TreeNode[M]], str] | None = None, **kwargs: Any
    ) -> graphviz.Digraph | None:
        """Build a Graphviz Digraph of the whole tree, or None when empty."""
        if self.root is None:
            return None
        return self.root.build_dot(node_name_fn=node_name_fn, **kwargs)
