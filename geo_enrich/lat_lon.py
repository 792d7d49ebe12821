"""
lat_lon.py - Latitude/longitude value types for place enrichment.

Provides LatLon points and BoundingBox extents as returned by the geocoder,
plus the great-circle distance used when matching candidates.

Module: geo_enrich.lat_lon
"""
__all__ = ['LatLon', 'BoundingBox']

import logging
from dataclasses import dataclass
from typing import Any, Optional

from geopy.distance import great_circle

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class LatLon:
    """
    A geographic point in decimal degrees.

    Attributes:
        lat (float): Latitude.
        lon (float): Longitude.
    """
    lat: float
    lon: float

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> Optional["LatLon"]:
        """
        Build a LatLon from a geocoder point dict ({'lat': .., 'lng': ..}).

        Returns:
            Optional[LatLon]: The point, or None if either coordinate is missing.
        """
        if not d:
            return None
        lat = d.get('lat')
        lon = d.get('lng', d.get('lon'))
        if lat is None or lon is None:
            return None
        return cls(lat=float(lat), lon=float(lon))

    def distance_km(self, other: "LatLon") -> float:
        """Great-circle distance to another point, in kilometres."""
        return great_circle((self.lat, self.lon), (other.lat, other.lon)).km

    def __str__(self):
        return f"({self.lat}, {self.lon})"

@dataclass(frozen=True)
class BoundingBox:
    """
    A rectangular extent given by its north-east and south-west corners.

    A box whose south-west longitude is greater than its north-east longitude
    crosses the antimeridian.
    """
    ne: LatLon
    sw: LatLon

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> Optional["BoundingBox"]:
        if not d:
            return None
        ne = LatLon.from_dict(d.get('ne'))
        sw = LatLon.from_dict(d.get('sw'))
        if ne is None or sw is None:
            return None
        return cls(ne=ne, sw=sw)

    @property
    def crosses_antimeridian(self) -> bool:
        return self.sw.lon > self.ne.lon

    def contains(self, point: Any) -> bool:
        """
        Check whether a point lies within the box. Edges count as inside.

        Args:
            point (LatLon): The point to test.

        Returns:
            bool: True if the point is within the box.
        """
        if not (self.sw.lat <= point.lat <= self.ne.lat):
            return False
        if self.crosses_antimeridian:
            return point.lon >= self.sw.lon or point.lon <= self.ne.lon
        return self.sw.lon <= point.lon <= self.ne.lon
