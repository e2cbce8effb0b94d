"""Tree node holding a model payload and an ordered list of owned children.

A ``TreeNode`` owns its children outright and keeps no reference to its
parent. Anything that needs the parent (``get_parent``, ``get_path``) searches
downward from a known ancestor instead, so moving a subtree never leaves a
stale back-link behind.

Typical usage example:

    ```python
    from modeltree import TreeNode

    root = TreeNode({"name": "root"}, 0)
    child1 = TreeNode({"name": "child1"}, 1)
    child2 = TreeNode({"name": "child2"}, 2)
    root.add_child(child1)
    root.add_child(child2)
    child1.add_child(TreeNode({"name": "grandchild1"}, 1))

    found = root.find_child_by_property("name", "grandchild1")
    path = root.get_path(found)      # [root, child1, grandchild1]
    parent = root.get_parent(found)  # child1
    ```
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Any, Deque, Dict, Generic, Iterator, List, TypeVar

import graphviz

from modeltree.predicates import Predicate, property_equals
from modeltree.traversal import (
    OrderLike,
    TraversalOrder,
    breadth_first_order,
    depth_first_search,
)
from modeltree.visualize import build_dot

M = TypeVar("M")


class TreeNode(Generic[M]):
    """A tree vertex with a model payload and ordered, owned children.

    Attributes:
        model: The caller's payload. Never interpreted except by
            property-value predicates.
        index: Informational ordinal. ``Tree.parse`` sets it to the node's
            1-based position among its siblings. Not used for ordering.
        children: Child nodes in insertion order. Never contains None.

    Note:
        The container does not guard against cycles. Attaching a node beneath
        one of its own descendants makes every later traversal undefined.
    """

    def __init__(self, model: M, index: int | None = None):
        self.model = model
        self.index = index
        self.children: List[TreeNode[M]] = []

    def __repr__(self) -> str:
        return self.as_string(delim="  ", multiline=True)

    @property
    def num_children(self) -> int:
        """Number of direct children."""
        return len(self.children)

    def has_children(self) -> bool:
        return len(self.children) > 0

    def add_child(self, child: TreeNode[M] | None) -> None:
        """Append ``child`` to this node's children.

        None is ignored. No duplicate check is made.
        """
        if child is not None:
            self.children.append(child)

    def remove_child(self, child: TreeNode[M] | None) -> None:
        """Detach the first child that is ``child`` (by identity).

        No-op when ``child`` is None or not a direct child.
        """
        if child is None:
            return
        for pos, existing in enumerate(self.children):
            if existing is child:
                del self.children[pos]
                return

    def move_child(self, child: TreeNode[M] | None, new_parent: TreeNode[M] | None) -> None:
        """Detach ``child`` from this node and append it to ``new_parent``.

        No-op unless both arguments are given. ``new_parent`` must not be
        ``child`` or one of its descendants.
        """
        if child is not None and new_parent is not None:
            self.remove_child(child)
            new_parent.add_child(child)

    def find_child(self, predicate: Predicate) -> TreeNode[M] | None:
        """Find the first descendant accepted by ``predicate``.

        Descendants are tested in pre-order: each child is tested before any
        node of its subtree, and a child's subtree is searched before the
        next sibling. This node itself is never tested.

        Args:
            predicate: Function taking a node and returning True on a match.

        Returns:
            The first matching descendant, or None.

        Example:
            ```python
            # root -> [child1 -> [grandchild1], child2]
            root.find_child(lambda n: n.model["value"] > 10)  # child1
            root.find_child(lambda n: n.model["value"] == 40)  # grandchild1
            ```
        """
        queue: Deque[TreeNode[M]] = deque(self.children)
        while queue:
            item = queue.popleft()
            if predicate(item):
                return item
            queue.extendleft(reversed(item.children))
        return None

    def find_child_by_property(self, name: str, value: Any) -> TreeNode[M] | None:
        """Find the first descendant whose model field ``name`` equals ``value``."""
        return self.find_child(property_equals(name, value))

    def find_children(self, predicate: Predicate) -> List[TreeNode[M]]:
        """Return the direct children accepted by ``predicate``, in order.

        Unlike ``find_child`` this looks one level down only.
        """
        return [child for child in self.children if predicate(child)]

    def find_children_by_property(self, name: str, value: Any) -> List[TreeNode[M]]:
        return self.find_children(property_equals(name, value))

    def delete_children(self, predicate: Predicate) -> None:
        """Remove every direct child accepted by ``predicate``.

        The remaining children keep their relative order.
        """
        self.children[:] = [child for child in self.children if not predicate(child)]

    def delete_children_by_property(self, name: str, value: Any) -> None:
        self.delete_children(property_equals(name, value))

    def insert_child(self, child: TreeNode[M] | None, predicate: Predicate) -> None:
        """Insert ``child`` in front of the first direct child matching ``predicate``.

        The matched child and everything after it shift one position right.
        When no child matches, ``child`` is appended. None is ignored.

        Example:
            ```python
            # parent.children == [a(value=10), b(value=20), c(value=30)]
            parent.insert_child(new, lambda n: n.model["value"] > 15)
            # parent.children == [a, new, b, c]
            ```
        """
        if child is None:
            return
        for pos, existing in enumerate(self.children):
            if predicate(existing):
                self.children.insert(pos, child)
                return
        self.children.append(child)

    def insert_child_by_property(self, child: TreeNode[M] | None, name: str, value: Any) -> None:
        self.insert_child(child, property_equals(name, value))

    def get_path(self, target: TreeNode[M] | None) -> List[TreeNode[M]] | None:
        """Get the chain of nodes from this node down to ``target``.

        Walks the subtree depth-first in pre-order, backtracking out of
        branches that do not contain ``target``.

        Args:
            target: The node to reach (matched by identity).

        Returns:
            Nodes from this node to ``target`` inclusive, starting with this
            node, or None if ``target`` is not in this subtree.

        Example:
            ```python
            path = root.get_path(grandchild1)
            [n.model["name"] for n in path]  # ["root", "child1", "grandchild1"]
            ```
        """
        if target is None:
            return None
        if self is target:
            return [self]
        path: List[TreeNode[M]] = [self]
        pending: List[Iterator[TreeNode[M]]] = [iter(self.children)]
        while pending:
            child = next(pending[-1], None)
            if child is None:
                pending.pop()
                path.pop()
                continue
            path.append(child)
            if child is target:
                return path
            pending.append(iter(child.children))
        return None

    def get_reverse_path(self, target: TreeNode[M] | None) -> List[TreeNode[M]] | None:
        """Get the chain of nodes from ``target`` up to this node.

        Returns:
            ``get_path(target)`` reversed (``target`` first, this node last),
            or None if ``target`` is not in this subtree.
        """
        path = self.get_path(target)
        if path is None:
            return None
        path.reverse()
        return path

    def get_parent(self, child: TreeNode[M] | None) -> TreeNode[M] | None:
        """Find the node in this subtree whose children include ``child``.

        This node is itself a candidate owner. A node is never its own
        parent, so asking for this node's parent returns None.

        Args:
            child: The node whose owner is wanted (matched by identity).

        Returns:
            The owning node, or None if ``child`` is None or not found.
        """
        if child is None:
            return None
        for node in depth_first_search(self, TraversalOrder.PRE_ORDER):
            if any(existing is child for existing in node.children):
                return node
        return None

    def depth_first_search(
        self,
        node: TreeNode[M] | None = None,
        order: OrderLike = TraversalOrder.IN_ORDER,
    ) -> List[TreeNode[M]]:
        """List the subtree rooted at ``node`` (default: this node) depth-first.

        See ``modeltree.traversal.depth_first_search`` for the six orders.
        """
        return depth_first_search(self if node is None else node, order)

    def breadth_first_order(self, node: TreeNode[M] | None = None) -> List[TreeNode[M]]:
        """List the subtree rooted at ``node`` (default: this node) in level order."""
        return breadth_first_order(self if node is None else node)

    def to_dict(self) -> Dict[str, Any]:
        """Convert this subtree to the nested plain-data form ``Tree.parse`` reads.

        Models are included as is, not copied.

        Returns:
            ``{"model": ..., "index": ..., "children": [...]}``
        """
        result: Dict[str, Any] = {"model": self.model, "index": self.index, "children": []}
        pending = [(self, result)]
        while pending:
            node, entry = pending.pop()
            for child in node.children:
                child_entry = {"model": child.model, "index": child.index, "children": []}
                entry["children"].append(child_entry)
                pending.append((child, child_entry))
        return result

    def as_string(self, delim: str = " ", multiline: bool = False) -> str:
        """Get a parenthesized display string for this subtree.

        Args:
            delim: Separator (or, when multiline, the per-level indentation).
            multiline: If True, put each node on its own indented line.

        Returns:
            e.g. ``(root (child1 grandchild1) child2)`` for models whose ``str``
            is their name.
        """
        btwn = "\n" if multiline else ""
        parts: List[str] = []
        # Entries are either literal text or (node, level) still to render.
        pending: List[Any] = [(self, 0)]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            node, level = item
            if not node.children:
                parts.append(str(node.model))
                continue
            parts.append("(" + str(node.model))
            pending.append(")")
            d = ((level + 1) if multiline else 1) * delim
            for child in reversed(node.children):
                pending.append((child, level + 1))
                pending.append(btwn + d)
        return "".join(parts)

    def build_dot(
        self, node_name_fn: Callable[[TreeNode[M]], str] | None = None, **kwargs: Any
    ) -> graphviz.Digraph:
        """Build a Graphviz Digraph of this subtree.

        See ``modeltree.visualize.build_dot``.
        """
        return build_dot(self, node_name_fn=node_name_fn, **kwargs)
