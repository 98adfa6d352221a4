import pytest

from solar_farm_locator.core.analysis import AnalysisRequest, FeasibilityAnalyzer
from solar_farm_locator.core.errors import AllSamplesFailed, InvalidParameters, NotFound
from solar_farm_locator.core.geo import distance_km
from solar_farm_locator.core.grid_sampler import GridSampler
from solar_farm_locator.core.models import Coordinate, FeasibilityTier

from conftest import FakeIrradianceSource, FakeSettlementSource


def make_analyzer(gazetteer, irradiance=None, settlement=None):
    irradiance = irradiance or FakeIrradianceSource()
    settlement = settlement or FakeSettlementSource(coordinate=Coordinate(26.3, 73.05))
    sampler = GridSampler(irradiance, max_workers=2, timeout=30)
    return FeasibilityAnalyzer(gazetteer, irradiance, settlement, sampler=sampler)


def test_from_payload_accepts_frontend_field_names():
    request = AnalysisRequest.from_payload({
        "method": "city", "city": "Jodhpur", "latitude": None, "longitude": None,
        "delta": 0.3, "scale": 0.05, "price": 7.5, "powerScale": 5, "year": 2023,
    })
    assert request.method == "city"
    assert request.city == "Jodhpur"
    assert request.step == 0.05
    assert request.capacity_mw == 5.0
    assert request.year == 2023


def test_from_payload_accepts_descriptive_names_and_defaults():
    request = AnalysisRequest.from_payload({"latitude": "26.2", "longitude": "73.0", "step": 0.1, "capacity_mw": 12})
    assert request.method == "coords"
    assert (request.latitude, request.longitude) == (26.2, 73.0)
    assert request.step == 0.1
    assert request.capacity_mw == 12.0
    assert request.delta == 0.3
    assert request.price == 7.5


@pytest.mark.parametrize("payload", [
    {"delta": "wide"},
    {"year": 2023.5},
    {"price": True},
    ["not", "an", "object"],
])
def test_from_payload_rejects_malformed_fields(payload):
    with pytest.raises(InvalidParameters):
        AnalysisRequest.from_payload(payload)


def test_city_mode_resolves_center_from_gazetteer(gazetteer):
    irradiance = FakeIrradianceSource()
    analyzer = make_analyzer(gazetteer, irradiance)

    result = analyzer.analyze(AnalysisRequest(method="city", city="JODHPUR", delta=0.1, step=0.1))

    assert result.base == Coordinate(26.26841, 73.00594)
    assert len(irradiance.calls) == 9


@pytest.mark.parametrize("city", [None, "", "Atlantis"])
def test_unknown_city_fails_before_sampling(gazetteer, city):
    irradiance = FakeIrradianceSource()
    analyzer = make_analyzer(gazetteer, irradiance)

    with pytest.raises(NotFound):
        analyzer.analyze(AnalysisRequest(method="city", city=city))
    assert irradiance.calls == []


@pytest.mark.parametrize("request_kwargs", [
    {"latitude": None, "longitude": 73.0},
    {"latitude": 95.0, "longitude": 73.0},
    {"latitude": 26.0, "longitude": 73.0, "delta": 0},
    {"latitude": 26.0, "longitude": 73.0, "step": -0.1},
    {"latitude": 26.0, "longitude": 73.0, "price": 3.74},
    {"latitude": 26.0, "longitude": 73.0, "capacity_mw": 0},
    {"latitude": 26.0, "longitude": 73.0, "year": 1066},
    {"method": "address", "latitude": 26.0, "longitude": 73.0},
])
def test_invalid_requests_are_rejected_before_any_network_call(gazetteer, request_kwargs):
    irradiance = FakeIrradianceSource()
    settlement = FakeSettlementSource()
    analyzer = make_analyzer(gazetteer, irradiance, settlement)

    with pytest.raises(InvalidParameters):
        analyzer.analyze(AnalysisRequest(**request_kwargs))
    assert irradiance.calls == []
    assert settlement.calls == []


def test_full_analysis(gazetteer):
    irradiance = FakeIrradianceSource(value_fn=lambda lat, lon: 150.0 + lat - 26.0 + (lon - 73.0))
    settlement = FakeSettlementSource(name="Jodhpur", coordinate=Coordinate(26.3, 73.05))
    analyzer = make_analyzer(gazetteer, irradiance, settlement)

    result = analyzer.analyze(AnalysisRequest(latitude=26.0, longitude=73.0, delta=0.2, step=0.1,
                                              capacity_mw=5, price=7.5))

    best = Coordinate(26.0 + 0.2, 73.0 + 0.2)
    assert result.best_point.coordinate == best
    assert settlement.calls == [best]
    assert result.settlement.name == "Jodhpur"
    assert result.economics.capital_expenditure == pytest.approx(21.25)
    assert result.economics.distance_km == pytest.approx(distance_km(best, Coordinate(26.3, 73.05)))
    assert result.economics.transmission_cost == pytest.approx(1.8 * result.economics.distance_km)


def test_settlement_failure_leaves_settlement_and_economics_absent(gazetteer):
    analyzer = make_analyzer(gazetteer, settlement=FakeSettlementSource(fail=True))

    result = analyzer.analyze(AnalysisRequest(latitude=26.0, longitude=73.0, delta=0.1, step=0.1))

    assert result.settlement is None
    assert result.economics is None
    assert sum(len(points) for points in result.tiers.values()) == 9


def test_total_failure_skips_settlement_and_economics(gazetteer):
    irradiance = FakeIrradianceSource(fail_fn=lambda lat, lon: True)
    settlement = FakeSettlementSource()
    analyzer = make_analyzer(gazetteer, irradiance, settlement)

    with pytest.raises(AllSamplesFailed):
        analyzer.analyze(AnalysisRequest(latitude=26.0, longitude=73.0, delta=0.1, step=0.1))
    assert settlement.calls == []


def test_result_payload_shape(gazetteer):
    analyzer = make_analyzer(gazetteer, FakeIrradianceSource(value_fn=lambda lat, lon: 210.0))
    payload = analyzer.analyze(AnalysisRequest(latitude=26.0, longitude=73.0, delta=0.1, step=0.1)).to_dict()

    assert payload["base"] == {"lat": 26.0, "lon": 73.0}
    assert set(payload["ranges"]) == {tier.value for tier in FeasibilityTier}
    assert len(payload["ranges"]["excellent"]) == 9
    assert payload["max"]["value"] == 210.0
    assert payload["max"]["monthly"] == [210.0] * 12
    assert payload["settlement"]["name"] == "Testville"
    assert payload["economics"]["recoveryYears"] > 0
    assert payload["stats"] == {"sampled": 9, "failed": 0, "total": 9}
