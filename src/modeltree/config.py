"""Tree configuration loaded from plain dictionaries.

Lets the traversal strategy be chosen from configuration data rather than
code:

    ```python
    from modeltree import Tree, TreeConfig

    config = TreeConfig.from_dict({"traversal": "breadth-first"})
    tree = Tree.from_config(config, data)

    # or straight from a mapping
    tree = Tree.from_config({"traversal": "pre-order"}, data)
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Dict

from modeltree.exceptions import ConfigurationError
from modeltree.traversal import TraversalOrder, TraversalStrategy, resolve_strategy, strategy_names


@dataclass
class TreeConfig:
    """Options for building a ``Tree``.

    Attributes:
        traversal: Name of the traversal strategy used by ``Tree.all`` and
            ``Tree.insert_child``: one of the six depth-first order names or
            ``"breadth-first"``.
    """

    traversal: str = TraversalOrder.IN_ORDER.value

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if self.traversal not in strategy_names():
            raise ConfigurationError(
                f"Unknown traversal strategy {self.traversal!r}",
                context={"traversal": self.traversal, "valid_strategies": strategy_names()},
            )

    def to_dict(self) -> Dict[str, Any]:
        return {"traversal": self.traversal}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TreeConfig:
        """Create a config from a mapping.

        Args:
            data: Mapping of option names to values. Missing options take
                their defaults.

        Returns:
            TreeConfig instance

        Raises:
            ConfigurationError: If ``data`` is not a mapping, has unknown
                keys, or names an unknown traversal strategy.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Tree configuration must be a mapping, got {type(data).__name__}",
                context={"data_type": type(data).__name__},
            )
        valid_keys = [f.name for f in fields(cls)]
        unknown_keys = sorted(set(data) - set(valid_keys))
        if unknown_keys:
            raise ConfigurationError(
                "Unknown tree configuration keys",
                context={"unknown_keys": unknown_keys, "valid_keys": valid_keys},
            )
        return cls(**dict(data))

    def build_strategy(self) -> TraversalStrategy:
        """Create the traversal strategy this config names.

        Raises:
            ConfigurationError: If ``traversal`` was changed to an unknown name.
        """
        self._validate()
        return resolve_strategy(self.traversal)
