"""Graphviz rendering of trees for inspection.

Builds a ``graphviz.Digraph`` that can be rendered to PNG, SVG, PDF and the
other Graphviz output formats, or shown inline in a notebook. This is a
display aid only; there is no reader for the DOT it produces.

Example:
    ```python
    dot = tree.build_dot(name="MyTree", format="png")
    print(dot.source)
    dot.render("/tmp/tree")  # needs the Graphviz system binaries
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Dict

import graphviz

from modeltree.traversal import breadth_first_order

if TYPE_CHECKING:
    from modeltree.node import TreeNode


def build_dot(
    node: TreeNode,
    node_name_fn: Callable[[TreeNode], str] | None = None,
    **kwargs: Any,
) -> graphviz.Digraph:
    """Build a Graphviz Digraph for the subtree rooted at ``node``.

    Vertices are numbered in breadth-first order (``N_000`` is ``node``
    itself) and there is one edge per parent-child pair.

    Args:
        node: Root of the subtree to draw.
        node_name_fn: Optional function producing a node's label. Defaults to
            ``str(node.model)``.
        **kwargs: Passed to the ``graphviz.Digraph`` constructor (e.g. name,
            format, node_attr, edge_attr).

    Returns:
        A ``graphviz.Digraph``.
    """
    if node_name_fn is None:
        def node_name_fn(n):
            return str(n.model)
    dot = graphviz.Digraph(**kwargs)
    ids: Dict[int, int] = {}  # ids[id(node)] -> vertex number
    nodes = breadth_first_order(node)
    for idx, item in enumerate(nodes):
        ids[id(item)] = idx
        dot.node(f"N_{idx:03}", node_name_fn(item))
    for item in nodes:
        for child in item.children:
            dot.edge(f"N_{ids[id(item)]:03}", f"N_{ids[id(child)]:03}")
    return dot
