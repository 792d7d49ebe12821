from __future__ import annotations

import logging
from dataclasses import dataclass

from geo_enrich.place import Place
from geo_enrich.twofishes import Interpretation

from .config import DEFAULT_DISTANCE_THRESHOLD_KMS

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class MatchHeuristic:
    """
    Accept/reject test for geocoder candidates, using a place's existing
    coordinate as context.

    A place with no coordinate accepts any candidate. Otherwise the point must
    fall inside the candidate's bounding box (edges inclusive), or, when the
    candidate has no bounding box, lie strictly closer than distance_threshold
    kilometres to the candidate's center.
    """
    distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD_KMS

    def match(self, interpretation: Interpretation, place: Place) -> bool:
        point = place.point
        if point is None:
            return True

        geometry = interpretation.geometry
        if geometry.bounds is None:
            distance = geometry.center.distance_km(point)
            accepted = distance < self.distance_threshold
            logger.debug(f"'{interpretation.feature.display_name}' is {distance:.1f} km from {point}: "
                         f"{'accepted' if accepted else 'rejected'}")
            return accepted

        accepted = geometry.bounds.contains(point)
        logger.debug(f"'{interpretation.feature.display_name}' bounds {'contain' if accepted else 'exclude'} {point}")
        return accepted
