"""Shared fixtures: in-memory gazetteer, fake upstream sources, Flask client."""

import os

os.environ.setdefault("FLASK_ENV", "testing")

import threading

import pytest
import requests

from solar_farm_locator.config import TestingConfig
from solar_farm_locator.core.analysis import FeasibilityAnalyzer
from solar_farm_locator.core.errors import CellFetchFailure, SettlementLookupFailure
from solar_farm_locator.core.gazetteer import Gazetteer
from solar_farm_locator.core.grid_sampler import GridSampler
from solar_farm_locator.core.models import Coordinate, GazetteerEntry, SettlementInfo


class FakeIrradianceSource:
    """Returns twelve identical monthly values computed from the coordinate."""

    def __init__(self, value_fn=None, fail_fn=None):
        self.value_fn = value_fn or (lambda lat, lon: 120.0)
        self.fail_fn = fail_fn or (lambda lat, lon: False)
        self.calls = []
        self._lock = threading.Lock()

    def get_monthly_irradiance(self, lat, lon, year, deadline=None):
        with self._lock:
            self.calls.append((lat, lon, year))
        if self.fail_fn(lat, lon):
            raise CellFetchFailure(lat, lon, "simulated outage")
        return [self.value_fn(lat, lon)] * 12


class FakeSettlementSource:
    def __init__(self, name="Testville", coordinate=None, fail=False):
        self.name = name
        self.coordinate = coordinate
        self.fail = fail
        self.calls = []

    def resolve_settlement(self, coordinate):
        self.calls.append(coordinate)
        if self.fail:
            raise SettlementLookupFailure("simulated outage")
        return SettlementInfo(name=self.name, coordinate=self.coordinate or coordinate)


class FakeResponse:
    def __init__(self, status_code=200, text="", payload=None):
        self.status_code = status_code
        self.text = text
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    """Plays back queued responses (or exceptions) in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.headers = {}
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def gazetteer():
    return Gazetteer([
        GazetteerEntry("Paris", "Paris", 48.85341, 2.3488),
        GazetteerEntry("Jodhpur", "Jodhpur", 26.26841, 73.00594),
        GazetteerEntry("Paris", "Paris", 33.66094, -95.55551),
        GazetteerEntry("São Paulo", "Sao Paulo", -23.5475, -46.63611),
    ])


@pytest.fixture
def irradiance_source():
    return FakeIrradianceSource()


@pytest.fixture
def settlement_source():
    return FakeSettlementSource(coordinate=Coordinate(26.3, 73.05))


@pytest.fixture
def analyzer(gazetteer, irradiance_source, settlement_source):
    sampler = GridSampler(irradiance_source, max_workers=4, timeout=30)
    return FeasibilityAnalyzer(gazetteer, irradiance_source, settlement_source, sampler=sampler)


@pytest.fixture
def client(analyzer):
    from solar_farm_locator.web import create_app

    app = create_app(analyzer=analyzer, config_object=TestingConfig)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
