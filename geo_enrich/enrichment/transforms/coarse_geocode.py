from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from geo_enrich.place import Place
from geo_enrich.twofishes import Geocoder, Interpretation, TwofishesClient

from ..config import GeocodeConfig
from ..feature_mapper import FeatureMapper
from ..match import MatchHeuristic
from .base import BaseTransform, register_transform

logger = logging.getLogger(__name__)

@register_transform
class CoarseGeocode(BaseTransform):
    """
    Enriches a Place by running its provided label through a Twofishes
    geocoder, picking a matching GeoNames feature, and repopulating the Place
    from that feature.

    Existing coordinates on the Place are used as context: a candidate is only
    accepted if the point lies within its bounding box or, for candidates
    without one, within distance_threshold kilometres of its center.

    Example:
        >>> place = Place(providedLabel='Georgia', lat=41.9997, long=43.4998)
        >>> CoarseGeocode().transform(place)[0].get('countryCode')
        ['GE']

    Attributes:
        config (GeocodeConfig): Geocoder and heuristic settings.
        geocoder (Geocoder): Client used for requests, built once from config.
        heuristic (MatchHeuristic): Candidate acceptance test.
        mapper (FeatureMapper): Feature to Place field mapping.
    """
    transform_id = "coarse_geocode"

    def __init__(
        self,
        config: Optional[GeocodeConfig] = None,
        config_yaml: Optional[Path] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        geocoder: Optional[Geocoder] = None
    ) -> None:
        """
        Initialize with configuration.

        Args:
            config: Ready-made configuration. Takes precedence over config_yaml.
            config_yaml: YAML config file. If neither config nor config_yaml is
                given, the packaged config.yaml is used.
            config_dict: Values overriding the loaded configuration.
            geocoder: Geocoder client; defaults to a TwofishesClient built from config.
        """
        if config is None:
            config = GeocodeConfig.from_yaml(config_yaml)
        if config_dict:
            config = GeocodeConfig.from_dict({**asdict(config), **config_dict})
        self.config = config

        self.geocoder = geocoder or TwofishesClient(
            host=config.twofishes_host,
            port=config.twofishes_port,
            timeout=config.twofishes_timeout,
            retries=config.twofishes_retries,
        )
        self.heuristic = MatchHeuristic(distance_threshold=config.distance_threshold)
        self.mapper = FeatureMapper(
            close_match_patterns=config.close_match_patterns,
            geonames_base_uri=config.geonames_base_uri,
            geonames_source=config.geonames_source,
        )

    def transform(self, value: Any) -> List[Any]:
        """
        Geocode a Place. Values that are not places with a provided label,
        and places with no accepted candidate, are returned unchanged.

        Raises:
            GeocoderError: If the geocoder fails after its retries.
        """
        if not isinstance(value, Place) or not value.provided_label:
            return [value]

        label = value.provided_label
        interpretations = self.geocoder.geocode(label, self.config.max_interpretations)
        match = next((i for i in interpretations if self.match(i, value)), None)
        if match is None:
            logger.info(f"No accepted geocode match for '{label}' among {len(interpretations)} candidates")
            return [value]

        logger.info(f"Geocoded '{label}' to '{match.feature.display_name}' ({match.feature.country_code})")
        return [self.mapper.apply(match.feature, value)]

    def match(self, interpretation: Interpretation, place: Place) -> bool:
        """Whether interpretation is an acceptable match for place."""
        return self.heuristic.match(interpretation, place)
