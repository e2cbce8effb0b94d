"""Custom exceptions for the modeltree package.

Lookups in a tree never raise: a missing node, an empty tree or a predicate
that matches nothing is reported as ``None``. The exceptions here are reserved
for bad options handed to the package, such as an unknown traversal order or a
malformed configuration mapping. They are built on the common exception
framework from dataknobs_common, so each carries a ``context`` dictionary.

Example:
    ```python
    from modeltree.exceptions import ValidationError

    try:
        node.depth_first_search(order="sideways")
    except ValidationError as e:
        print(e)          # Unknown traversal order 'sideways'
        print(e.context)  # {'order': 'sideways', 'valid_orders': [...]}
    ```
"""

from dataknobs_common import (
    ConfigurationError as BaseConfigurationError,
    DataknobsError,
    ValidationError as BaseValidationError,
)


class ModelTreeError(DataknobsError):
    """Base exception for all modeltree errors."""

    pass


class ValidationError(ModelTreeError, BaseValidationError):
    """Raised when an argument value is not acceptable."""

    pass


class ConfigurationError(ModelTreeError, BaseConfigurationError):
    """Raised when a tree configuration is invalid."""

    pass


__all__ = [
    "ModelTreeError",
    "ValidationError",
    "ConfigurationError",
]
