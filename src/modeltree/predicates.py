"""Node predicates used for searching and matching.

A predicate is any callable taking a node and returning a bool. Most callers
pass a lambda directly; ``property_equals`` builds the common "named model
field equals a value" predicate so the ``*_by_property`` entry points on
``TreeNode`` and ``Tree`` share one definition of equality.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modeltree.node import TreeNode

Predicate = Callable[["TreeNode"], bool]

_MISSING = object()


def read_property(model: Any, name: str) -> Any:
    """Read a named field off a model.

    Mappings are read by key, anything else by attribute.

    Args:
        model: The node's model.
        name: The field name.

    Returns:
        The field value, or a private sentinel when the model has no such
        field (so a missing field never compares equal to a caller's value).
    """
    if isinstance(model, Mapping):
        return model.get(name, _MISSING)
    return getattr(model, name, _MISSING)


def property_equals(name: str, value: Any) -> Predicate:
    """Build a predicate matching nodes whose model field ``name`` equals ``value``.

    Args:
        name: The model field to compare.
        value: The value the field must equal.

    Returns:
        A predicate over nodes.

    Example:
        ```python
        is_child2 = property_equals("name", "child2")
        node = tree.find(is_child2)
        ```
    """

    def predicate(node: TreeNode) -> bool:
        found = read_property(node.model, name)
        return found is not _MISSING and found == value

    return predicate
