from __future__ import annotations

import logging
import re
from typing import Iterable, List

from geo_enrich.place import Place
from geo_enrich.twofishes import Feature

from .config import DEFAULT_CLOSE_MATCH_PATTERNS, DEFAULT_GEONAMES_BASE_URI, DEFAULT_GEONAMES_SOURCE

logger = logging.getLogger(__name__)

class FeatureMapper:
    """
    Copies a matched geocoder feature onto a Place.

    exactMatch is reserved for GeoNames URIs built from the feature's own ids.
    Related entries in other authorities whose URLs match close_match_patterns
    become closeMatch.

    Attributes:
        geonames_base_uri (str): Base for exactMatch URIs.
        geonames_source (str): Id source that marks a GeoNames id.
        close_match_patterns (List[re.Pattern]): Compiled closeMatch patterns.
    """
    def __init__(
        self,
        close_match_patterns: Iterable[str] = DEFAULT_CLOSE_MATCH_PATTERNS,
        geonames_base_uri: str = DEFAULT_GEONAMES_BASE_URI,
        geonames_source: str = DEFAULT_GEONAMES_SOURCE
    ) -> None:
        self.geonames_base_uri = geonames_base_uri.rstrip('/')
        self.geonames_source = geonames_source
        self.close_match_patterns = [re.compile(p) for p in close_match_patterns]

    def exact_matches(self, feature: Feature) -> List[str]:
        """
        GeoNames URIs for the feature, e.g. 'http://sws.geonames.org/4197000/'.
        """
        return [
            f"{self.geonames_base_uri}/{feature_id.id}/"
            for feature_id in feature.ids
            if feature_id.source == self.geonames_source
        ]

    def close_matches(self, feature: Feature) -> List[str]:
        """Feature URLs matching any of the close match patterns."""
        return [url for url in feature.urls if any(p.match(url) for p in self.close_match_patterns)]

    def apply(self, feature: Feature, place: Place) -> Place:
        """
        Overwrite place data with the feature's. Identity and providedLabel are
        left alone; every other field is replaced, not merged.

        Args:
            feature (Feature): The accepted feature.
            place (Place): The place to update in place.

        Returns:
            Place: The same place.
        """
        center = feature.geometry.center
        place.set('label', [feature.display_name])
        place.set('exactMatch', self.exact_matches(feature))
        place.set('closeMatch', self.close_matches(feature))
        place.set('countryCode', [feature.country_code])
        place.set('lat', [center.lat])
        place.set('long', [center.lon])
        return place
