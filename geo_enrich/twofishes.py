"""
twofishes.py - Client for a Twofishes coarse geocoding server.

Sends geocode requests over the server's HTTP/JSON interface and parses the
ranked interpretations it returns into Interpretation, Feature and Geometry
objects.

Module: geo_enrich.twofishes
"""
from __future__ import annotations

__all__ = [
    'FeatureId', 'Geometry', 'Feature', 'Interpretation',
    'GeocoderError', 'Geocoder', 'TwofishesClient'
]

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

import requests

from .lat_lon import BoundingBox, LatLon

# Re-use higher-level logger (inherits configuration from main script)
logger = logging.getLogger(__name__)

class GeocoderError(Exception):
    """Raised when the geocoder cannot be reached or returns an unusable response."""

@dataclass(frozen=True)
class FeatureId:
    """An identifier for a feature, tagged with the authority that issued it."""
    source: str
    id: str

@dataclass(frozen=True)
class Geometry:
    """
    Feature geometry.

    Attributes:
        center (LatLon): Center coordinate.
        bounds (Optional[BoundingBox]): Bounding box, if the geocoder has one.
    """
    center: LatLon
    bounds: Optional[BoundingBox] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Geometry":
        center = LatLon.from_dict(d.get('center'))
        if center is None:
            raise GeocoderError(f"Geometry has no center: {d!r}")
        return cls(center=center, bounds=BoundingBox.from_dict(d.get('bounds')))

@dataclass
class Feature:
    """
    The geocoder's canonical data for a place.

    Attributes:
        ids (List[FeatureId]): Identifiers tagged by source authority.
        display_name (str): Full display name, e.g. 'Georgia, United States'.
        name (str): Short name.
        country_code (str): ISO alpha-2 country code.
        geometry (Geometry): Center and optional bounds.
        urls (List[str]): URLs of related entries in other authorities.
    """
    ids: List[FeatureId]
    display_name: str
    country_code: str
    geometry: Geometry
    name: str = ''
    urls: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Feature":
        """
        Create a Feature from the JSON 'feature' object of an interpretation.
        """
        if 'geometry' not in d:
            raise GeocoderError(f"Feature has no geometry: {d.get('displayName')!r}")
        attributes = d.get('attributes') or {}
        return cls(
            ids=[FeatureId(source=str(i.get('source', '')), id=str(i.get('id', ''))) for i in d.get('ids', [])],
            display_name=d.get('displayName') or d.get('name', ''),
            name=d.get('name', ''),
            country_code=d.get('cc', ''),
            geometry=Geometry.from_dict(d['geometry']),
            urls=list(attributes.get('urls', [])),
        )

@dataclass
class Interpretation:
    """One ranked candidate answer from the geocoder."""
    feature: Feature
    what: str = ''
    where: str = ''

    @property
    def geometry(self) -> Geometry:
        return self.feature.geometry

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Interpretation":
        if 'feature' not in d:
            raise GeocoderError("Interpretation has no feature")
        return cls(
            feature=Feature.from_dict(d['feature']),
            what=d.get('what', ''),
            where=d.get('where', ''),
        )

class Geocoder(Protocol):
    """
    Protocol for geocoding services used by place enrichment.

    Methods:
        geocode(query, max_interpretations) -> List[Interpretation]:
            Candidates for a location string, best match first.
    """
    def geocode(self, query: str, max_interpretations: int) -> List[Interpretation]:
        ...

class TwofishesClient:
    """
    HTTP client for a Twofishes server.

    Attributes:
        host (str): Server hostname.
        port (int): Server port.
        timeout (float): Request timeout in seconds.
        retries (int): Additional attempts after a failed request.
        session (requests.Session): Session reused across requests.
    """
    def __init__(
        self,
        host: str = 'localhost',
        port: int = 8080,
        timeout: float = 10,
        retries: int = 2,
        session: Optional[requests.Session] = None
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.retries = retries
        self.session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    def geocode(self, query: str, max_interpretations: int) -> List[Interpretation]:
        """
        Request interpretations of a location string.

        Args:
            query (str): The location text.
            max_interpretations (int): Maximum number of candidates to return.

        Returns:
            List[Interpretation]: Candidates, best match first.

        Raises:
            GeocoderError: If every attempt fails or the response is malformed.
        """
        params = {'query': query, 'maxInterpretations': max_interpretations}
        max_attempts = self.retries + 1
        last_error = None
        for attempt in range(max_attempts):
            try:
                response = self.session.get(self.base_url, params=params, timeout=self.timeout)
                response.raise_for_status()
                break
            except requests.exceptions.RequestException as e:
                last_error = e
                logger.warning(f"Error geocoding {query!r}: {e}")
                if attempt < max_attempts - 1:
                    logger.info(f"Retrying geocode for {query!r} (attempt {attempt+2}/{max_attempts})")
        else:
            logger.error(f"Giving up on geocoding {query!r} after {max_attempts} attempts.")
            raise GeocoderError(f"Geocoding {query!r} failed after {max_attempts} attempts") from last_error

        try:
            payload = response.json()
        except ValueError as e:
            raise GeocoderError(f"Invalid JSON from geocoder for {query!r}: {e}") from e
        if not isinstance(payload, dict):
            raise GeocoderError(f"Unexpected geocoder response for {query!r}: {payload!r}")
        interpretations = [Interpretation.from_dict(i) for i in payload.get('interpretations') or []]
        logger.debug(f"Geocoder returned {len(interpretations)} interpretations for {query!r}")
        return interpretations
