"""
Tests for configuration models and YAML loading.
"""

from datetime import date
from pathlib import Path

import numpy as np
import pytest
import yaml
from pydantic import ValidationError

from discount_core.config import (
    CurveConfig,
    DiscountFactorsConfig,
    build_curve,
    build_discount_factors,
    create_default_discount_factors_config,
    load_discount_factors,
    load_discount_factors_config,
)
from discount_core.discounting import ZeroRatePeriodicDiscountFactors
from discount_core.market import USD, DayCount, ValueType


def _curve_data(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "name": "USD-DSC",
        "day_count": "ACT/365F",
        "compounding_per_year": 2,
        "tenors": [1.0, 2.0, 5.0],
        "rates": [0.03, 0.032, 0.035],
    }
    data.update(overrides)
    return data


class TestCurveConfig:
    """Tests for CurveConfig validation."""

    def test_valid(self) -> None:
        config = CurveConfig(**_curve_data())
        assert config.day_count is DayCount.ACT_365F
        assert config.compounding_per_year == 2

    def test_day_count_any_case(self) -> None:
        config = CurveConfig(**_curve_data(day_count="act/360"))
        assert config.day_count is DayCount.ACT_360

    def test_unknown_day_count_raises(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported day count"):
            CurveConfig(**_curve_data(day_count="BUS/252"))

    def test_mismatched_lengths_raise(self) -> None:
        with pytest.raises(ValidationError, match="same length"):
            CurveConfig(**_curve_data(rates=[0.03, 0.032]))

    def test_non_increasing_tenors_raise(self) -> None:
        with pytest.raises(ValidationError, match="strictly increasing"):
            CurveConfig(**_curve_data(tenors=[1.0, 5.0, 2.0]))

    @pytest.mark.parametrize("frequency", [0, -1])
    def test_non_positive_compounding_raises(self, frequency: int) -> None:
        with pytest.raises(ValidationError):
            CurveConfig(**_curve_data(compounding_per_year=frequency))

    def test_unusual_compounding_warns(self) -> None:
        with pytest.warns(UserWarning, match="unusual"):
            CurveConfig(**_curve_data(compounding_per_year=3))

    def test_empty_nodes_raise(self) -> None:
        with pytest.raises(ValidationError):
            CurveConfig(**_curve_data(tenors=[], rates=[]))


class TestDiscountFactorsConfig:
    """Tests for DiscountFactorsConfig validation."""

    def test_currency_upper_cased(self) -> None:
        config = DiscountFactorsConfig(
            currency="usd", valuation_date="2025-01-02", curve=_curve_data()
        )
        assert config.currency == "USD"
        assert config.valuation_date == date(2025, 1, 2)

    @pytest.mark.parametrize("currency", ["US", "USDX", "U1D"])
    def test_invalid_currency_raises(self, currency: str) -> None:
        with pytest.raises(ValidationError):
            DiscountFactorsConfig(
                currency=currency, valuation_date=date(2025, 1, 2), curve=_curve_data()
            )


class TestBuilders:
    """Tests for building curves and discount factors from configuration."""

    def test_build_curve(self) -> None:
        curve = build_curve(CurveConfig(**_curve_data()))
        assert curve.name == "USD-DSC"
        assert curve.metadata.x_value_type is ValueType.YEAR_FRACTION
        assert curve.metadata.y_value_type is ValueType.ZERO_RATE
        assert np.array_equal(curve.x_values, [1.0, 2.0, 5.0])

    def test_build_discount_factors(self) -> None:
        dfs = build_discount_factors(create_default_discount_factors_config())
        assert isinstance(dfs, ZeroRatePeriodicDiscountFactors)
        assert dfs.currency == USD
        assert dfs.frequency == 2
        assert dfs.day_count is DayCount.ACT_365F
        assert dfs.parameter_count == 6


class TestLoader:
    """Tests for YAML loading."""

    def _write(self, path: Path, data: dict[str, object]) -> Path:
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    def test_load_flat_file(self, tmp_path: Path) -> None:
        path = self._write(
            tmp_path / "dfs.yaml",
            {"currency": "EUR", "valuation_date": "2025-03-31", "curve": _curve_data()},
        )
        config = load_discount_factors_config(path)
        assert config.currency == "EUR"
        assert config.valuation_date == date(2025, 3, 31)

    def test_load_nested_file(self, tmp_path: Path) -> None:
        path = self._write(
            tmp_path / "dfs.yaml",
            {
                "discount_factors": {
                    "currency": "USD",
                    "valuation_date": date(2025, 1, 1),
                    "curve": _curve_data(tenors=[1.0], rates=[0.03]),
                }
            },
        )
        dfs = load_discount_factors(str(path))
        assert dfs.discount_factor(date(2026, 1, 1)) == pytest.approx(0.970662, abs=1e-6)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            load_discount_factors_config(tmp_path / "missing.yaml")

    def test_invalid_content_raises(self, tmp_path: Path) -> None:
        path = self._write(
            tmp_path / "bad.yaml",
            {"currency": "USD", "valuation_date": "2025-01-01", "curve": _curve_data(rates=[0.01])},
        )
        with pytest.raises(ValidationError):
            load_discount_factors_config(path)
