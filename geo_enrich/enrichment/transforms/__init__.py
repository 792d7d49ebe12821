"""Value transforms: per-value enrichments applied by FieldEnrichment.

Built-in transforms:
    - CoarseGeocode: Geocodes Place values and fills in GeoNames data

Extensibility:
    Create custom transforms by:
        1. Subclass BaseTransform or implement the ValueTransform Protocol
        2. Implement transform(value) → list of replacement values
        3. Use @register_transform decorator for automatic registration

Example:
    >>> from geo_enrich.enrichment.transforms import BaseTransform, register_transform
    >>> @register_transform
    ... class StripWhitespace(BaseTransform):
    ...     transform_id = "strip_whitespace"
    ...     def transform(self, value):
    ...         return [value.strip()] if isinstance(value, str) else [value]
"""

from .base import ValueTransform
from .base import BaseTransform
from .base import register_transform
from .base import get_transform_registry
from .coarse_geocode import CoarseGeocode

__all__ = [
    'ValueTransform',
    'BaseTransform',
    'register_transform',
    'get_transform_registry',
    'CoarseGeocode',
]
