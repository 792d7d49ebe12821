"""
Built-in transform lookup.
"""
from __future__ import annotations

from typing import Any

from .transforms import BaseTransform, get_transform_registry


def create_transform(transform_id: str, **kwargs: Any) -> BaseTransform:
    """
    Instantiate a registered transform by id.

    Args:
        transform_id: Registry id, e.g. "coarse_geocode".
        **kwargs: Passed to the transform's constructor.

    Returns:
        BaseTransform: The configured transform.

    Raises:
        KeyError: If no transform is registered under transform_id.
    """
    registry = get_transform_registry()
    if transform_id not in registry:
        raise KeyError(f"Unknown transform '{transform_id}'. Registered: {sorted(registry)}")
    return registry[transform_id](**kwargs)
