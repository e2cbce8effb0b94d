"""Generic in-memory tree container.

The modeltree package provides a tree of nodes that each carry an opaque
payload (the "model") and an ordered list of owned children, plus a thin
``Tree`` wrapper for whole-tree operations.

## Modules

### TreeNode - A single vertex
- Add, remove, move and positionally insert children
- Deep (pre-order) search and one-level filtering of children
- Path and parent lookup by searching downward (no parent back-links)
- Depth-first traversal in six orders and breadth-first traversal

### Tree - Root wrapper
- Build from nested plain data (``{"model", "index", "children"}``)
- Search, remove and move anywhere in the tree
- Pluggable traversal strategy, selectable at runtime or from configuration

### Traversal
- ``TraversalOrder``: pre-order, post-order, in-order and their reverses
- ``DepthFirstStrategy`` and ``BreadthFirstStrategy``

## Quick Example

```python
from modeltree import Tree

tree = Tree({
    "model": {"name": "root"},
    "children": [
        {"model": {"name": "child1"}, "children": [{"model": {"name": "grandchild1"}}]},
        {"model": {"name": "child2"}},
    ],
})

grandchild = tree.find_by_property("name", "grandchild1")
[n.model["name"] for n in tree.get_path(grandchild)]
# ['root', 'child1', 'grandchild1']

tree.set_strategy("breadth-first")
[n.model["name"] for n in tree.all()]
# ['root', 'child1', 'child2', 'grandchild1']
```
"""

from modeltree.config import TreeConfig
from modeltree.exceptions import ConfigurationError, ModelTreeError, ValidationError
from modeltree.node import TreeNode
from modeltree.predicates import property_equals
from modeltree.traversal import (
    BreadthFirstStrategy,
    DepthFirstStrategy,
    TraversalOrder,
    TraversalStrategy,
    breadth_first_order,
    depth_first_search,
)
from modeltree.tree import Tree

__version__ = "1.0.0"

__all__ = [
    "BreadthFirstStrategy",
    "ConfigurationError",
    "DepthFirstStrategy",
    "ModelTreeError",
    "TraversalOrder",
    "TraversalStrategy",
    "Tree",
    "TreeConfig",
    "TreeNode",
    "ValidationError",
    "breadth_first_order",
    "depth_first_search",
    "property_equals",
]
