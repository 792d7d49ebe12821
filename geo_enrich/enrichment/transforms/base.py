"""
Base classes for value transforms.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, List, Type

from geo_enrich.enrichment.field_enrichment import FieldEnrichment, ValueTransform

logger = logging.getLogger(__name__)

# Transform Registry
_TRANSFORM_REGISTRY: Dict[str, Type['BaseTransform']] = {}


def register_transform(cls: Type['BaseTransform']) -> Type['BaseTransform']:
    """
    Decorator to register a transform class in the global registry.

    Usage:
        @register_transform
        class MyTransform(BaseTransform):
            transform_id = "my_transform"
            ...
    """
    if getattr(cls, 'transform_id', ''):
        _TRANSFORM_REGISTRY[cls.transform_id] = cls
        logger.debug(f"Registered value transform: {cls.transform_id}")
    else:
        logger.warning(f"Transform {cls.__name__} missing 'transform_id' attribute, not registered")
    return cls


def get_transform_registry() -> Dict[str, Type['BaseTransform']]:
    """Get the global transform registry."""
    return _TRANSFORM_REGISTRY.copy()


class BaseTransform(ABC):
    """
    Base class for value transforms.

    Attributes:
        transform_id: Unique identifier for this transform
    """
    transform_id: str = ""

    @abstractmethod
    def transform(self, value: Any) -> List[Any]:
        """
        Transform a single field value.

        Args:
            value: The current value

        Returns:
            List of replacement values
        """
        pass

    def enrich(self, record: Any, *field_specs: Any) -> Any:
        """
        Apply this transform to the given fields of a copy of record.

        See FieldEnrichment.enrich for the field spec forms.
        """
        return FieldEnrichment(self).enrich(record, *field_specs)
