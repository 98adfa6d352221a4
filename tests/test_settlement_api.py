import pytest
import requests

from solar_farm_locator.core.errors import SettlementLookupFailure
from solar_farm_locator.core.models import Coordinate
from solar_farm_locator.core.settlement_api import SettlementAPI, extract_settlement_name

from conftest import FakeResponse, FakeSession

BEST = Coordinate(26.25, 73.0)


@pytest.mark.parametrize("address,name", [
    ({"city": "Jodhpur", "town": "Mandore", "village": "Banar"}, "Jodhpur"),
    ({"town": "Mandore", "village": "Banar", "hamlet": "Dhani"}, "Mandore"),
    ({"village": "Banar", "hamlet": "Dhani"}, "Banar"),
    ({"hamlet": "Dhani"}, "Dhani"),
    ({"state": "Rajasthan", "country": "India"}, "Unknown"),
    ({"city": "", "town": "Mandore"}, "Mandore"),
    ({}, "Unknown"),
])
def test_name_precedence(address, name):
    assert extract_settlement_name(address) == name


def test_resolves_name_and_coordinate():
    payload = {"lat": "26.2967719", "lon": "73.0351433", "address": {"city": "Jodhpur"}}
    api = SettlementAPI(session=FakeSession(FakeResponse(payload=payload)))

    settlement = api.resolve_settlement(BEST)

    assert settlement.name == "Jodhpur"
    assert settlement.coordinate == Coordinate(26.2967719, 73.0351433)
    assert api.session.requests[0]["params"] == {"lat": 26.25, "lon": 73.0, "format": "json"}


def test_missing_coordinate_falls_back_to_query_point():
    api = SettlementAPI(session=FakeSession(FakeResponse(payload={"address": {"hamlet": "Dhani"}})))
    settlement = api.resolve_settlement(BEST)
    assert settlement.coordinate == BEST


def test_unknown_name_is_not_an_error():
    payload = {"lat": "26.25", "lon": "73.0", "address": {"country": "India"}}
    api = SettlementAPI(session=FakeSession(FakeResponse(payload=payload)))
    assert api.resolve_settlement(BEST).name == "Unknown"


@pytest.mark.parametrize("response", [
    requests.exceptions.ConnectionError("down"),
    FakeResponse(status_code=429),
    FakeResponse(text="<html>"),
    FakeResponse(payload={"error": "Unable to geocode"}),
    FakeResponse(payload={"lat": "x", "lon": "73.0", "address": {"city": "Jodhpur"}}),
])
def test_failures_raise_lookup_failure(response):
    api = SettlementAPI(session=FakeSession(response))
    with pytest.raises(SettlementLookupFailure):
        api.resolve_settlement(BEST)
