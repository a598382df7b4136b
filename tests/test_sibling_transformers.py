"""
Testes dos transformadores Z-Score e Robust e do registro.
"""

import numpy as np
import pandas as pd
import pytest

from wisdom import (
    ColumnTransformer,
    RangeRescaler,
    RobustScaler,
    TransformerRegistry,
    TransformFailure,
    ZScoreStandardizer,
)


class TestZScoreStandardizer:

    def test_population_std(self):
        table = pd.DataFrame({"x": [1.0, 2.0, 3.0]})

        result = ZScoreStandardizer.Charter().found().transform("x", "z", table)

        assert result.is_valid
        assert result[1] == 0.0
        assert result[0] == pytest.approx(-1.2247, abs=1e-4)
        assert result[2] == pytest.approx(1.2247, abs=1e-4)
        assert result.metadata["mean"] == 2.0

    def test_sample_std(self):
        table = pd.DataFrame({"x": [1.0, 2.0, 3.0]})

        result = ZScoreStandardizer.Charter(ddof=1).found().transform("x", "z", table)

        assert list(result) == pytest.approx([-1.0, 0.0, 1.0])
        assert result.metadata["std"] == pytest.approx(1.0)

    def test_constant_column_is_degenerate(self):
        table = pd.DataFrame({"x": [4.0, 4.0]})

        result = ZScoreStandardizer.Charter().found().transform("x", "z", table)

        assert result.reason == TransformFailure.DEGENERATE_RANGE
        assert "z" not in table.columns

    def test_not_enough_values_for_sample_std(self):
        table = pd.DataFrame({"x": [4.0, np.nan]})

        result = ZScoreStandardizer.Charter(ddof=1).found().transform("x", "z", table)

        assert result.reason == TransformFailure.UNDEFINED_EXTREMUM

    def test_negative_ddof_rejected(self):
        with pytest.raises(ValueError):
            ZScoreStandardizer.Charter(ddof=-1)


class TestRobustScaler:

    def test_median_and_iqr(self):
        table = pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0, 5.0]})

        result = RobustScaler.Charter().found().transform("x", "r", table)

        assert list(result) == pytest.approx([-1.0, -0.5, 0.0, 0.5, 1.0])
        assert result.metadata["median"] == 3.0
        assert result.metadata["iqr"] == 2.0

    def test_outlier_does_not_shift_center(self):
        table = pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0, 1000.0]})

        result = RobustScaler.Charter().found().transform("x", "r", table)

        assert result[2] == 0.0

    def test_zero_iqr_is_degenerate(self):
        table = pd.DataFrame({"x": [1.0, 1.0, 1.0, 1.0, 5.0]})

        result = RobustScaler.Charter().found().transform("x", "r", table)

        assert result.reason == TransformFailure.DEGENERATE_RANGE
        assert list(table.columns) == ["x"]

    def test_empty_column(self):
        table = pd.DataFrame({"x": pd.Series([], dtype="float64")})

        result = RobustScaler.Charter().found().transform("x", "r", table)

        assert result.reason == TransformFailure.UNDEFINED_EXTREMUM

    @pytest.mark.parametrize("quantile_range", [(75.0, 25.0), (-1.0, 50.0), (10.0, 101.0), (50.0,)])
    def test_invalid_quantile_range(self, quantile_range):
        with pytest.raises(ValueError):
            RobustScaler.Charter(quantile_range=quantile_range)

    def test_quantile_range_normalized_to_floats(self):
        charter = RobustScaler.Charter(quantile_range=[10, 90])

        assert charter.quantile_range == (10.0, 90.0)


class TestTransformerRegistry:

    def test_builtin_transformers_registered(self):
        names = TransformerRegistry.list_transformers()

        assert {"minmax", "zscore", "robust"} <= set(names)

    def test_create_builds_from_charter_params(self):
        transformer = TransformerRegistry.create("minmax", new_min=0.0, new_max=10.0)

        assert isinstance(transformer, RangeRescaler)
        assert isinstance(transformer, ColumnTransformer)
        assert transformer.new_max == 10.0

    def test_charter_lookup(self):
        charter = TransformerRegistry.charter("robust", quantile_range=(10.0, 90.0))

        assert isinstance(charter, RobustScaler.Charter)
        assert isinstance(charter.found(), RobustScaler)

    def test_unknown_transformer(self):
        with pytest.raises(ValueError, match="log1p"):
            TransformerRegistry.get("log1p")

    def test_created_transformer_works_on_table(self, people_table):
        transformer = TransformerRegistry.create("zscore")

        result = transformer.transform("age", "ageZ", people_table)

        assert result.is_valid
        assert "ageZ" in people_table.columns
