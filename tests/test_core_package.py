import solar_farm_locator.core as core
from solar_farm_locator.config import TestingConfig, get_config
from solar_farm_locator.core.models import Coordinate

from conftest import FakeIrradianceSource, FakeSettlementSource


def test_testing_config_is_selected():
    assert get_config() is TestingConfig


def test_create_analyzer_wires_real_clients(gazetteer):
    analyzer = core.create_analyzer(gazetteer)

    assert analyzer.gazetteer is gazetteer
    assert isinstance(analyzer.sampler.irradiance_source, core.IrradianceAPI)
    assert isinstance(analyzer.settlement_source, core.SettlementAPI)


def test_quick_analysis_uses_default_grid(monkeypatch):
    irradiance = FakeIrradianceSource(value_fn=lambda lat, lon: 160.0)
    monkeypatch.setattr(core, "IrradianceAPI", lambda: irradiance)
    monkeypatch.setattr(core, "SettlementAPI", lambda: FakeSettlementSource())

    result = core.quick_analysis(26.0, 73.0)

    assert result.base == Coordinate(26.0, 73.0)
    assert len(irradiance.calls) == 13 * 13
    assert len(result.tiers[core.FeasibilityTier.GOOD]) == 169
    assert result.economics is not None
