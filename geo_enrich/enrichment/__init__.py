"""Enrichment module: field-by-field enrichment of metadata records.

Applies pluggable value transforms to record fields addressed by field
specs: a bare name, an ordered path through nested records, or a
single-branch mapping. Transform results replace the leaf field's values,
with None and empty results dropped.

Core classes:
    - FieldEnrichment: Walks field chains and applies a transform at the leaf
    - ValueTransform: Protocol for per-value transforms
    - BaseTransform: Base class for registered transforms
    - GeocodeConfig: Configuration for coarse geocoding

Built-in transforms:
    - CoarseGeocode: Geocodes Place values against a Twofishes server
    - MatchHeuristic: Bounding box / distance acceptance of candidates
    - FeatureMapper: Copies a matched feature onto a Place

Example:
    >>> from geo_enrich.enrichment import CoarseGeocode
    >>> geocode = CoarseGeocode()
    >>> enriched = geocode.enrich(record, {'sourceResource': 'spatial'})
"""

from .config import GeocodeConfig
from .transforms import ValueTransform
from .transforms import BaseTransform
from .transforms import register_transform
from .transforms import get_transform_registry
from .transforms import CoarseGeocode
from .field_enrichment import FieldEnrichment
from .field_enrichment import ALL_FIELDS
from .match import MatchHeuristic
from .feature_mapper import FeatureMapper
from .defaults import create_transform

__all__ = [
    'GeocodeConfig',
    'ValueTransform',
    'BaseTransform',
    'register_transform',
    'get_transform_registry',
    'CoarseGeocode',
    'FieldEnrichment',
    'ALL_FIELDS',
    'MatchHeuristic',
    'FeatureMapper',
    'create_transform',
]
