"""Tests for geopotential models and epoch/sidereal time formulas."""

import datetime
import math

import pytest

from sgpjax import (
    GEOPOTENTIALS,
    WGS72,
    WGS72OLD,
    WGS84,
    Elements,
    afspc_epoch_to_sidereal_time,
    epoch_to_j2000_years,
    epoch_to_j2000_years_afspc,
    iau_epoch_to_sidereal_time,
    resolve_geopotential,
)
from sgpjax.constants import TWOPI


class TestGeopotential:
    def test_wgs72old_truncated_ke(self) -> None:
        assert WGS72OLD.ke == 0.0743669161

    def test_wgs72_ke(self) -> None:
        assert WGS72.ke == pytest.approx(60.0 / math.sqrt(6378.135**3 / 398600.8), rel=1e-15)

    def test_wgs84_radius(self) -> None:
        assert WGS84.ae == 6378.137

    def test_j3oj2(self) -> None:
        assert WGS72.j3oj2 == pytest.approx(WGS72.j3 / WGS72.j2)

    def test_kms_per_unit_velocity(self) -> None:
        assert WGS84.kms_per_unit_velocity == pytest.approx(WGS84.ae * WGS84.ke / 60.0)

    @pytest.mark.parametrize("name", ["wgs72old", "wgs72", "wgs84", "WGS84"])
    def test_resolve_by_name(self, name: str) -> None:
        assert resolve_geopotential(name) is GEOPOTENTIALS[name.lower()]

    def test_resolve_instance(self) -> None:
        assert resolve_geopotential(WGS72) is WGS72

    def test_resolve_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            resolve_geopotential("egm96")


class TestEpoch:
    def test_j2000_is_zero(self) -> None:
        assert epoch_to_j2000_years(datetime.datetime(2000, 1, 1, 12)) == 0.0

    def test_j2000_is_zero_afspc(self) -> None:
        assert epoch_to_j2000_years_afspc(datetime.datetime(2000, 1, 1, 12)) == 0.0

    def test_one_julian_year(self) -> None:
        epoch = datetime.datetime(2000, 1, 1, 12) + datetime.timedelta(days=365.25)
        assert epoch_to_j2000_years(epoch) == pytest.approx(1.0, abs=1e-12)

    def test_before_j2000_is_negative(self) -> None:
        assert epoch_to_j2000_years(datetime.datetime(1980, 1, 1)) < 0.0

    def test_formulas_agree(self) -> None:
        epoch = datetime.datetime(2008, 9, 20, 12, 25, 40, 104192)
        assert epoch_to_j2000_years_afspc(epoch) == pytest.approx(
            epoch_to_j2000_years(epoch), abs=1e-10
        )

    def test_aware_datetime_converted_to_utc(self) -> None:
        naive = datetime.datetime(2006, 6, 25, 12, 0, 0)
        aware = datetime.datetime(
            2006, 6, 25, 14, 0, 0, tzinfo=datetime.timezone(datetime.timedelta(hours=2))
        )
        assert epoch_to_j2000_years(aware) == epoch_to_j2000_years(naive)

    def test_elements_methods(self, iss_elements: Elements) -> None:
        assert iss_elements.j2000_years() == epoch_to_j2000_years(iss_elements.epoch)
        assert iss_elements.j2000_years_afspc() == epoch_to_j2000_years_afspc(iss_elements.epoch)


class TestSiderealTime:
    def test_iau_at_j2000(self) -> None:
        # 67310.54841 s of sidereal time
        assert iau_epoch_to_sidereal_time(0.0) == pytest.approx(
            math.radians(67310.54841 / 240.0), abs=1e-12
        )

    def test_formulas_agree(self) -> None:
        for epoch in (-20.0, 0.0, 6.48, 8.72):
            afspc = afspc_epoch_to_sidereal_time(epoch)
            iau = iau_epoch_to_sidereal_time(epoch)
            difference = (afspc - iau + math.pi) % TWOPI - math.pi
            assert abs(difference) < 1e-6

    @pytest.mark.parametrize("epoch", [-50.0, -30.0, -0.5, 0.0, 0.25, 6.48, 40.0])
    def test_range(self, epoch: float) -> None:
        for formula in (afspc_epoch_to_sidereal_time, iau_epoch_to_sidereal_time):
            value = formula(epoch)
            assert 0.0 <= value < TWOPI
