"""Tests for settings and the Earth radius table."""

import pytest

from latlng import config
from latlng.geo import distance
from latlng.point import LatLng
from latlng.units import LengthUnit


class TestEarthRadius:
    """Tests for the shared Earth radius."""

    def test_default_radius(self):
        assert config.get_earth_radius(LengthUnit.KILOMETER) == pytest.approx(6371.009)
        assert config.get_earth_radius(LengthUnit.METER) == pytest.approx(6371009.0)
        assert config.get_earth_radius(LengthUnit.MILE) == pytest.approx(3958.76, abs=0.01)

    def test_set_radius_in_other_unit(self):
        config.set_earth_radius(3958.76, LengthUnit.MILE)
        assert config.get_earth_radius(LengthUnit.MILE) == pytest.approx(3958.76)
        assert config.get_earth_radius(LengthUnit.KILOMETER) == pytest.approx(6371.0, abs=0.01)

    def test_radius_scales_distances(self):
        p1, p2 = LatLng(0, 0), LatLng(0, 1)
        before = distance(p1, p2, LengthUnit.KILOMETER)
        config.set_earth_radius(2 * config.EARTH_MEAN_RADIUS_KILOMETERS, LengthUnit.KILOMETER)
        assert distance(p1, p2, LengthUnit.KILOMETER) == pytest.approx(2 * before)

    def test_table_is_read_only(self):
        table = config.build_radius_table(1.0, LengthUnit.KILOMETER)
        assert set(table) == set(LengthUnit)
        with pytest.raises(TypeError):
            table[LengthUnit.KILOMETER] = 2.0

    def test_reset_from_settings(self, monkeypatch):
        monkeypatch.setattr(config.settings, "earth_radius", 1000.0)
        monkeypatch.setattr(config.settings, "earth_radius_unit", LengthUnit.METER)
        config.reset_earth_radius()
        assert config.get_earth_radius(LengthUnit.KILOMETER) == pytest.approx(1.0)

    def test_set_radius_is_logged(self, caplog):
        with caplog.at_level("INFO", logger="latlng.config"):
            config.set_earth_radius(6371.0, LengthUnit.KILOMETER)
        assert "Earth radius set to 6371.0 kilometer" in caplog.text


class TestSettings:
    """Tests for environment driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("LATLNG_EARTH_RADIUS", "LATLNG_EARTH_RADIUS_UNIT", "LATLNG_DEFAULT_UNIT"):
            monkeypatch.delenv(name, raising=False)
        settings = config.Settings()
        assert settings.earth_radius == config.EARTH_MEAN_RADIUS_KILOMETERS
        assert settings.earth_radius_unit is LengthUnit.KILOMETER
        assert settings.default_unit is LengthUnit.KILOMETER

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LATLNG_EARTH_RADIUS", "3959")
        monkeypatch.setenv("LATLNG_EARTH_RADIUS_UNIT", "mile")
        monkeypatch.setenv("LATLNG_DEFAULT_UNIT", "nautical_mile")
        settings = config.Settings()
        assert settings.earth_radius == 3959.0
        assert settings.earth_radius_unit is LengthUnit.MILE
        assert settings.default_unit is LengthUnit.NAUTICAL_MILE
