"""
Tests for market module: currencies, day counts, metadata, curves and perturbations.
"""

from datetime import date, datetime

import numpy as np
import pytest
import QuantLib as ql

from discount_core.market import (
    EUR,
    USD,
    Currency,
    Curve,
    CurveInfoType,
    CurveMetadata,
    DayCount,
    InterpolatedNodalCurve,
    ParallelShiftPerturbation,
    PointShiftPerturbation,
    ValueType,
)


class TestCurrency:
    """Tests for Currency."""

    def test_of_normalises_case(self) -> None:
        assert Currency.of("usd") == USD
        assert Currency.of(" eur ") == EUR

    def test_of_returns_same_instance(self) -> None:
        assert Currency.of(USD) is USD

    @pytest.mark.parametrize("code", ["US", "USDX", "U5D", "usd", ""])
    def test_invalid_code_raises(self, code: str) -> None:
        with pytest.raises(ValueError, match="three upper-case letters"):
            Currency(code)

    def test_str(self) -> None:
        assert str(Currency("GBP")) == "GBP"


class TestDayCount:
    """Tests for day count conventions."""

    def test_act_365f_one_year(self) -> None:
        yf = DayCount.ACT_365F.year_fraction(date(2025, 1, 1), date(2026, 1, 1))
        assert yf == 1.0

    def test_act_360(self) -> None:
        yf = DayCount.ACT_360.year_fraction(date(2025, 1, 1), date(2025, 7, 1))
        assert np.isclose(yf, 181 / 360)

    def test_act_365_25(self) -> None:
        yf = DayCount.ACT_365_25.year_fraction(date(2024, 1, 1), date(2025, 1, 1))
        assert np.isclose(yf, 366 / 365.25)

    def test_thirty_360_end_of_month(self) -> None:
        yf = DayCount.THIRTY_360.year_fraction(date(2025, 1, 31), date(2025, 2, 28))
        assert np.isclose(yf, 28 / 360)

    def test_thirty_360_both_month_end(self) -> None:
        yf = DayCount.THIRTY_360.year_fraction(date(2025, 1, 31), date(2025, 3, 31))
        assert np.isclose(yf, 60 / 360)

    def test_act_act_isda_across_leap_year(self) -> None:
        yf = DayCount.ACT_ACT_ISDA.year_fraction(date(2023, 7, 1), date(2024, 7, 1))
        assert np.isclose(yf, 184 / 365 + 182 / 366)

    def test_act_act_isda_same_year(self) -> None:
        yf = DayCount.ACT_ACT_ISDA.year_fraction(date(2024, 1, 1), date(2024, 12, 31))
        assert np.isclose(yf, 365 / 366)

    def test_relative_year_fraction_negative(self) -> None:
        yf = DayCount.ACT_365F.relative_year_fraction(date(2026, 1, 1), date(2025, 1, 1))
        assert yf == -1.0

    def test_relative_year_fraction_zero(self) -> None:
        assert DayCount.ACT_360.relative_year_fraction(date(2025, 1, 1), date(2025, 1, 1)) == 0.0

    def test_year_fraction_rejects_reversed_dates(self) -> None:
        with pytest.raises(ValueError, match="before start date"):
            DayCount.ACT_360.year_fraction(date(2026, 1, 1), date(2025, 1, 1))

    def test_accepts_datetime(self) -> None:
        yf = DayCount.ACT_365F.year_fraction(datetime(2025, 1, 1, 15, 30), date(2026, 1, 1))
        assert yf == 1.0

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("ACT/365F", DayCount.ACT_365F),
            ("act/360", DayCount.ACT_360),
            ("30/360", DayCount.THIRTY_360),
            ("act/act isda", DayCount.ACT_ACT_ISDA),
            ("ACT_365_25", DayCount.ACT_365_25),
        ],
    )
    def test_of(self, name: str, expected: DayCount) -> None:
        assert DayCount.of(name) is expected

    def test_of_unknown_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported day count"):
            DayCount.of("BUS/252")

    @pytest.mark.parametrize(
        "day_count, ql_day_count",
        [
            (DayCount.ACT_360, ql.Actual360()),
            (DayCount.ACT_365F, ql.Actual365Fixed()),
            (DayCount.THIRTY_360, ql.Thirty360(ql.Thirty360.BondBasis)),
            (DayCount.ACT_ACT_ISDA, ql.ActualActual(ql.ActualActual.ISDA)),
        ],
    )
    def test_matches_quantlib(self, day_count: DayCount, ql_day_count: ql.DayCounter) -> None:
        start, end = date(2023, 8, 31), date(2028, 2, 29)
        expected = ql_day_count.yearFraction(ql.Date(31, 8, 2023), ql.Date(29, 2, 2028))
        assert day_count.year_fraction(start, end) == pytest.approx(expected, rel=1e-14)
        assert day_count.relative_year_fraction(end, start) == pytest.approx(-expected, rel=1e-14)

    def test_thirty_360_accepts_datetime(self) -> None:
        yf = DayCount.THIRTY_360.year_fraction(datetime(2025, 1, 31, 9), datetime(2025, 3, 31, 17))
        assert np.isclose(yf, 60 / 360)


class TestCurveMetadata:
    """Tests for CurveMetadata."""

    def test_zero_rates_factory(self, zero_metadata: CurveMetadata) -> None:
        assert zero_metadata.x_value_type is ValueType.YEAR_FRACTION
        assert zero_metadata.y_value_type is ValueType.ZERO_RATE
        assert zero_metadata.find_info(CurveInfoType.DAY_COUNT) is DayCount.ACT_365F
        assert zero_metadata.find_info(CurveInfoType.COMPOUNDING_PER_YEAR) == 2

    def test_find_info_missing_returns_none(self) -> None:
        meta = CurveMetadata("EMPTY")
        assert meta.find_info(CurveInfoType.DAY_COUNT) is None

    def test_get_info_missing_raises(self) -> None:
        meta = CurveMetadata("EMPTY")
        with pytest.raises(ValueError, match="does not contain DAY_COUNT"):
            meta.get_info(CurveInfoType.DAY_COUNT)

    def test_with_and_without_info(self, zero_metadata: CurveMetadata) -> None:
        updated = zero_metadata.with_info(CurveInfoType.COMPOUNDING_PER_YEAR, 4)
        removed = zero_metadata.without_info(CurveInfoType.DAY_COUNT)

        assert updated.get_info(CurveInfoType.COMPOUNDING_PER_YEAR) == 4
        assert zero_metadata.get_info(CurveInfoType.COMPOUNDING_PER_YEAR) == 2
        assert removed.find_info(CurveInfoType.DAY_COUNT) is None

    def test_info_is_read_only(self, zero_metadata: CurveMetadata) -> None:
        with pytest.raises(TypeError):
            zero_metadata.info[CurveInfoType.DAY_COUNT] = DayCount.ACT_360  # type: ignore[index]

    def test_equality_and_hash(self) -> None:
        a = CurveMetadata.zero_rates("C", DayCount.ACT_360, 1)
        b = CurveMetadata.zero_rates("C", DayCount.ACT_360, 1)
        assert a == b
        assert hash(a) == hash(b)
        assert a != CurveMetadata.zero_rates("C", DayCount.ACT_360, 2)

    def test_invalid_info_key_raises(self) -> None:
        with pytest.raises(ValueError, match="CurveInfoType"):
            CurveMetadata("C", info={"day_count": DayCount.ACT_360})

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            CurveMetadata("")


class TestInterpolatedNodalCurve:
    """Tests for InterpolatedNodalCurve."""

    def test_satisfies_curve_protocol(self, nodal_curve: InterpolatedNodalCurve) -> None:
        assert isinstance(nodal_curve, Curve)

    def test_name_and_parameter_count(self, nodal_curve: InterpolatedNodalCurve) -> None:
        assert nodal_curve.name == "USD-DSC"
        assert nodal_curve.parameter_count == 4

    def test_y_value_at_nodes(self, nodal_curve: InterpolatedNodalCurve) -> None:
        for x, y in zip(nodal_curve.x_values, nodal_curve.y_values):
            assert np.isclose(nodal_curve.y_value(x), y)

    def test_y_value_interpolates_linearly(self, nodal_curve: InterpolatedNodalCurve) -> None:
        assert np.isclose(nodal_curve.y_value(1.5), 0.0275)

    def test_y_value_flat_extrapolation(self, nodal_curve: InterpolatedNodalCurve) -> None:
        assert nodal_curve.y_value(-1.0) == 0.020
        assert nodal_curve.y_value(30.0) == 0.035

    def test_parameter_sensitivity_between_nodes(
        self, nodal_curve: InterpolatedNodalCurve
    ) -> None:
        sens = nodal_curve.y_value_parameter_sensitivity(1.25)
        assert np.allclose(sens, [0.0, 0.75, 0.25, 0.0])

    def test_parameter_sensitivity_at_node(self, nodal_curve: InterpolatedNodalCurve) -> None:
        sens = nodal_curve.y_value_parameter_sensitivity(2.0)
        assert np.allclose(sens, [0.0, 0.0, 1.0, 0.0])

    def test_parameter_sensitivity_extrapolated(
        self, nodal_curve: InterpolatedNodalCurve
    ) -> None:
        assert np.allclose(nodal_curve.y_value_parameter_sensitivity(-0.5), [1, 0, 0, 0])
        assert np.allclose(nodal_curve.y_value_parameter_sensitivity(10.0), [0, 0, 0, 1])

    def test_parameter_sensitivity_sums_to_one(
        self, nodal_curve: InterpolatedNodalCurve
    ) -> None:
        for x in np.linspace(-1.0, 7.0, 33):
            assert np.isclose(nodal_curve.y_value_parameter_sensitivity(x).sum(), 1.0)

    def test_parameter_sensitivity_matches_node_bump(
        self, nodal_curve: InterpolatedNodalCurve
    ) -> None:
        """Linear interpolation is linear in the nodes, so a unit bump is exact."""
        x = 3.2
        sens = nodal_curve.y_value_parameter_sensitivity(x)
        for i in range(nodal_curve.parameter_count):
            bump = np.zeros(nodal_curve.parameter_count)
            bump[i] = 1.0
            bumped = nodal_curve.with_y_values(nodal_curve.y_values + bump)
            assert np.isclose(bumped.y_value(x) - nodal_curve.y_value(x), sens[i])

    def test_single_node_curve(self, flat_zero_curve: InterpolatedNodalCurve) -> None:
        assert flat_zero_curve.y_value(0.1) == 0.03
        assert flat_zero_curve.y_value(25.0) == 0.03
        assert np.array_equal(flat_zero_curve.y_value_parameter_sensitivity(3.0), [1.0])

    def test_mismatched_lengths_raise(self, zero_metadata: CurveMetadata) -> None:
        with pytest.raises(ValueError, match="same length"):
            InterpolatedNodalCurve(zero_metadata, np.array([1.0, 2.0]), np.array([0.01]))

    def test_non_increasing_raises(self, zero_metadata: CurveMetadata) -> None:
        with pytest.raises(ValueError, match="strictly increasing"):
            InterpolatedNodalCurve(
                zero_metadata, np.array([1.0, 1.0]), np.array([0.01, 0.02])
            )

    def test_empty_raises(self, zero_metadata: CurveMetadata) -> None:
        with pytest.raises(ValueError, match="at least one node"):
            InterpolatedNodalCurve(zero_metadata, np.array([]), np.array([]))

    def test_nodes_are_copied_and_read_only(self, zero_metadata: CurveMetadata) -> None:
        ys = np.array([0.01, 0.02])
        curve = InterpolatedNodalCurve(zero_metadata, np.array([1.0, 2.0]), ys)
        ys[0] = 0.5
        assert curve.y_values[0] == 0.01
        with pytest.raises(ValueError):
            curve.y_values[0] = 0.5

    def test_equality_and_hash(
        self, zero_metadata: CurveMetadata, nodal_curve: InterpolatedNodalCurve
    ) -> None:
        copy = InterpolatedNodalCurve(
            zero_metadata, nodal_curve.x_values.copy(), nodal_curve.y_values.copy()
        )
        assert copy == nodal_curve
        assert hash(copy) == hash(nodal_curve)
        assert nodal_curve.with_y_values(nodal_curve.y_values + 0.001) != nodal_curve

    def test_with_metadata(self, nodal_curve: InterpolatedNodalCurve) -> None:
        meta = CurveMetadata.zero_rates("OTHER", DayCount.ACT_360, 4)
        renamed = nodal_curve.with_metadata(meta)
        assert renamed.name == "OTHER"
        assert np.array_equal(renamed.y_values, nodal_curve.y_values)


class TestPerturbations:
    """Tests for curve perturbations."""

    def test_parallel_shift(self, nodal_curve: InterpolatedNodalCurve) -> None:
        shifted = nodal_curve.apply_perturbation(ParallelShiftPerturbation(0.001))
        assert np.allclose(shifted.y_values, nodal_curve.y_values + 0.001)
        assert shifted.metadata == nodal_curve.metadata

    def test_parallel_shift_from_bps(self) -> None:
        assert ParallelShiftPerturbation.from_bps(25).shift == 0.0025

    def test_point_shift(self, nodal_curve: InterpolatedNodalCurve) -> None:
        shifts = np.array([0.0, 0.001, 0.0, -0.001])
        shifted = nodal_curve.apply_perturbation(PointShiftPerturbation(shifts))
        assert np.allclose(shifted.y_values, nodal_curve.y_values + shifts)

    def test_point_shift_wrong_length_raises(
        self, nodal_curve: InterpolatedNodalCurve
    ) -> None:
        with pytest.raises(ValueError, match="Expected 4 shifts"):
            nodal_curve.apply_perturbation(PointShiftPerturbation(np.array([0.001])))

    def test_original_curve_unchanged(self, nodal_curve: InterpolatedNodalCurve) -> None:
        before = nodal_curve.y_values.copy()
        nodal_curve.apply_perturbation(ParallelShiftPerturbation(0.01))
        assert np.array_equal(nodal_curve.y_values, before)
