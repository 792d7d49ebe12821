"""
Pytest fixtures for enrichment tests.
"""
from __future__ import annotations

import pytest
from typing import List

from geo_enrich.lat_lon import BoundingBox, LatLon
from geo_enrich.place import Place
from geo_enrich.record import Record
from geo_enrich.twofishes import Feature, FeatureId, Geometry, Interpretation
from geo_enrich.enrichment.config import GeocodeConfig


class SourceResource(Record):
    FIELDS = ('title', 'spatial', 'subject')


class Aggregation(Record):
    FIELDS = ('sourceResource', 'provider')


class FakeGeocoder:
    """In-memory geocoder returning canned interpretations per query."""
    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.requests = []

    def geocode(self, query: str, max_interpretations: int) -> List[Interpretation]:
        self.requests.append((query, max_interpretations))
        if self.error is not None:
            raise self.error
        return list(self.responses.get(query, []))[:max_interpretations]


@pytest.fixture
def make_interpretation():
    """Factory for interpretations with a single feature."""
    def _create(display_name: str, cc: str, center, bounds=None, ids=None, urls=None) -> Interpretation:
        bbox = None
        if bounds:
            sw, ne = bounds
            bbox = BoundingBox(ne=LatLon(*ne), sw=LatLon(*sw))
        feature = Feature(
            ids=[FeatureId(source=s, id=i) for s, i in (ids or [])],
            display_name=display_name,
            name=display_name.split(',')[0],
            country_code=cc,
            geometry=Geometry(center=LatLon(*center), bounds=bbox),
            urls=list(urls or []),
        )
        return Interpretation(feature=feature)
    return _create


@pytest.fixture
def georgia_us(make_interpretation):
    return make_interpretation(
        "Georgia, United States", "US",
        center=(32.75042, -83.50018),
        bounds=((30.35576, -85.60516), (35.00066, -80.75143)),
        ids=[("geonameid", "4197000"), ("woeid", "2347569")],
        urls=["http://id.loc.gov/authorities/names/n79023113", "http://en.wikipedia.org/wiki/Georgia_(U.S._state)"],
    )


@pytest.fixture
def georgia_ge(make_interpretation):
    return make_interpretation(
        "Georgia", "GE",
        center=(41.99998, 43.4999),
        bounds=((41.05339, 40.00597), (43.58640, 46.73612)),
        ids=[("geonameid", "614540")],
    )


@pytest.fixture
def fake_geocoder(georgia_us, georgia_ge):
    return FakeGeocoder({"Georgia": [georgia_us, georgia_ge]})


@pytest.fixture
def failing_geocoder():
    def _create(error: Exception) -> FakeGeocoder:
        return FakeGeocoder(error=error)
    return _create


@pytest.fixture
def spatial_record():
    """Wraps places in a record whose 'spatial' field holds them."""
    def _create(*places: Place) -> SourceResource:
        return SourceResource(spatial=list(places))
    return _create


@pytest.fixture
def geocode_config():
    return GeocodeConfig()


@pytest.fixture
def record_classes():
    """Nested record types: Aggregation -> SourceResource -> Place."""
    return Aggregation, SourceResource


@pytest.fixture
def nested_record():
    """An aggregation whose source resource holds two places and a title."""
    georgia = Place(providedLabel="Georgia", lat=41.9997, long=43.4998)
    atlantis = Place(providedLabel="Atlantis")
    source = SourceResource(title=["  A title  "], spatial=[georgia, atlantis], subject=["maps"])
    return Aggregation("http://example.org/item/1", sourceResource=[source], provider=["Example"])
