from unittest.mock import MagicMock

import pytest
import requests

from geo_enrich.lat_lon import LatLon
from geo_enrich.twofishes import FeatureId, GeocoderError, Interpretation, TwofishesClient

GEORGIA_RESPONSE = {
    "interpretations": [
        {
            "what": "",
            "where": "georgia",
            "feature": {
                "cc": "US",
                "geometry": {
                    "center": {"lat": 32.75042, "lng": -83.50018},
                    "bounds": {
                        "ne": {"lat": 35.000659, "lng": -80.751429},
                        "sw": {"lat": 30.355757, "lng": -85.605165},
                    },
                },
                "name": "Georgia",
                "displayName": "Georgia, United States",
                "woeType": 8,
                "ids": [{"source": "geonameid", "id": "4197000"}, {"source": "woeid", "id": "2347569"}],
                "attributes": {"urls": ["http://id.loc.gov/authorities/names/n79023113"]},
            },
        },
        {
            "feature": {
                "cc": "GE",
                "geometry": {"center": {"lat": 41.99998, "lng": 43.4999}},
                "name": "Georgia",
                "ids": [{"source": "geonameid", "id": "614540"}],
            },
        },
    ]
}


def make_response(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_client(*responses, retries=2):
    session = MagicMock()
    session.get.side_effect = list(responses)
    return TwofishesClient(host="geo.example.org", port=8081, timeout=3, retries=retries, session=session), session


def test_geocode_parses_interpretations():
    client, session = make_client(make_response(GEORGIA_RESPONSE))
    interpretations = client.geocode("Georgia", 5)

    assert len(interpretations) == 2
    us, ge = interpretations
    assert isinstance(us, Interpretation)
    assert us.where == "georgia"
    assert us.feature.display_name == "Georgia, United States"
    assert us.feature.country_code == "US"
    assert us.feature.ids == [FeatureId("geonameid", "4197000"), FeatureId("woeid", "2347569")]
    assert us.feature.urls == ["http://id.loc.gov/authorities/names/n79023113"]
    assert us.geometry.center == LatLon(32.75042, -83.50018)
    assert us.geometry.bounds.ne == LatLon(35.000659, -80.751429)
    # no displayName, no bounds, no attributes
    assert ge.feature.display_name == "Georgia"
    assert ge.geometry.bounds is None
    assert ge.feature.urls == []


def test_geocode_request_parameters():
    client, session = make_client(make_response({"interpretations": []}))
    client.geocode("Atlantis", 3)

    session.get.assert_called_once_with(
        "http://geo.example.org:8081/",
        params={"query": "Atlantis", "maxInterpretations": 3},
        timeout=3,
    )


def test_geocode_no_interpretations():
    client, _ = make_client(make_response({}))
    assert client.geocode("Atlantis", 5) == []


def test_geocode_retries_then_succeeds():
    client, session = make_client(
        requests.exceptions.ConnectionError("refused"),
        make_response(status_error=requests.exceptions.HTTPError("503")),
        make_response(GEORGIA_RESPONSE),
    )
    assert len(client.geocode("Georgia", 5)) == 2
    assert session.get.call_count == 3


def test_geocode_gives_up_after_retries():
    client, session = make_client(
        requests.exceptions.Timeout("slow"),
        requests.exceptions.Timeout("slow"),
        retries=1,
    )
    with pytest.raises(GeocoderError) as excinfo:
        client.geocode("Georgia", 5)

    assert session.get.call_count == 2
    assert isinstance(excinfo.value.__cause__, requests.exceptions.Timeout)


def test_geocode_invalid_json():
    client, session = make_client(make_response(json_error=ValueError("not json")))
    with pytest.raises(GeocoderError):
        client.geocode("Georgia", 5)
    assert session.get.call_count == 1


def test_geocode_unexpected_payload():
    client, _ = make_client(make_response(["not", "a", "dict"]))
    with pytest.raises(GeocoderError):
        client.geocode("Georgia", 5)


def test_feature_without_geometry_rejected():
    client, _ = make_client(make_response({"interpretations": [{"feature": {"cc": "US"}}]}))
    with pytest.raises(GeocoderError):
        client.geocode("Georgia", 5)


def test_default_connection_settings():
    client = TwofishesClient()
    assert client.base_url == "http://localhost:8080/"
    assert client.timeout == 10
    assert client.retries == 2
    assert isinstance(client.session, requests.Session)
