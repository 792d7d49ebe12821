"""
place.py - Place record for geographic enrichment.

Module: geo_enrich.place
"""
from __future__ import annotations

__all__ = ['Place']

import logging
from typing import Optional

from .lat_lon import LatLon
from .record import Record

logger = logging.getLogger(__name__)

class Place(Record):
    """
    A geographic place as described in a metadata record.

    Fields:
        providedLabel: The place name as supplied by the data provider.
        label: Preferred display label.
        lat, long: Coordinates in decimal degrees.
        countryCode: ISO alpha-2 country code.
        exactMatch: URIs of the authority entry this place is.
        closeMatch: URIs of closely related entries in other authorities.
    """
    FIELDS = (
        'providedLabel', 'label', 'lat', 'long', 'countryCode', 'exactMatch', 'closeMatch'
    )

    @property
    def provided_label(self) -> Optional[str]:
        """The first provided label, or None."""
        labels = self.get('providedLabel')
        return labels[0] if labels else None

    @property
    def point(self) -> Optional[LatLon]:
        """
        The place's existing coordinate from the first lat/long values.

        Returns:
            Optional[LatLon]: The point, or None if either coordinate is
                missing or is not a number.
        """
        lat = self.get('lat')
        lon = self.get('long')
        if not lat or not lon:
            return None
        try:
            return LatLon(lat=float(lat[0]), lon=float(lon[0]))
        except (TypeError, ValueError):
            logger.warning(f"Ignoring unparseable coordinate ({lat[0]!r}, {lon[0]!r}) on {self.identity}")
            return None
