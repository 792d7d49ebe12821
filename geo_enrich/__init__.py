"""geo_enrich package: Field-chain enrichment of metadata records, with coarse geocoding of places."""

from geo_enrich.field_chain import FieldChain, FieldSpecError
from geo_enrich.lat_lon import BoundingBox, LatLon
from geo_enrich.place import Place
from geo_enrich.record import FieldAccessible, Record
from geo_enrich.twofishes import Feature, FeatureId, GeocoderError, Geometry, Interpretation, TwofishesClient
from geo_enrich.enrichment import CoarseGeocode, FieldEnrichment, GeocodeConfig

__all__ = [
    "BoundingBox",
    "CoarseGeocode",
    "Feature",
    "FeatureId",
    "FieldAccessible",
    "FieldChain",
    "FieldEnrichment",
    "FieldSpecError",
    "GeocodeConfig",
    "GeocoderError",
    "Geometry",
    "Interpretation",
    "LatLon",
    "Place",
    "Record",
    "TwofishesClient",
]
