"""
Tests of `covid_insights.coercion`
"""

import re
from contextlib import nullcontext as does_not_raise

import numpy as np
import pandas as pd
import pytest

from covid_insights.coercion import (
    coerce_to_datetime,
    coerce_to_integer,
    safe_percentage,
)
from covid_insights.exceptions import TypeCoercionError


@pytest.mark.parametrize(
    "values, fill_missing, exp",
    (
        pytest.param(
            pd.Series([1, 2, 3]),
            None,
            [1, 2, 3],
            id="ints",
        ),
        pytest.param(
            pd.Series([1.0, np.nan, 3.0]),
            None,
            [1, pd.NA, 3],
            id="floats-keep-missing",
        ),
        pytest.param(
            pd.Series([1.0, np.nan, 3.0]),
            0,
            [1, 0, 3],
            id="floats-fill-missing",
        ),
        pytest.param(
            pd.Series(["12", "", None, "  "], dtype=object),
            None,
            [12, pd.NA, pd.NA, pd.NA],
            id="strings-and-blanks",
        ),
        pytest.param(
            pd.Series([7_874_965_732, 3_000_000_000]),
            None,
            [7_874_965_732, 3_000_000_000],
            id="billions",
        ),
    ),
)
def test_coerce_to_integer(values, fill_missing, exp):
    res = coerce_to_integer(values, name="counts", fill_missing=fill_missing)

    pd.testing.assert_series_equal(
        res, pd.Series(pd.array(exp, dtype="Int64")), check_names=False
    )


@pytest.mark.parametrize(
    "values, exp",
    (
        pytest.param(pd.Series([1, None]), does_not_raise(), id="valid"),
        pytest.param(
            pd.Series(["1", "one"]),
            pytest.raises(
                TypeCoercionError,
                match=re.escape(
                    "Could not convert counts to whole numbers. "
                    "The following values are malformed: ['one']"
                ),
            ),
            id="text",
        ),
        pytest.param(
            pd.Series([1.25, 2.0]),
            pytest.raises(TypeCoercionError, match=re.escape("[1.25]")),
            id="fraction",
        ),
        pytest.param(
            pd.Series([1.0, -np.inf]),
            pytest.raises(TypeCoercionError),
            id="infinite",
        ),
    ),
)
def test_coerce_to_integer_errors(values, exp):
    with exp:
        coerce_to_integer(values, name="counts")


def test_coerce_to_integer_name_defaults_to_series_name():
    with pytest.raises(TypeCoercionError, match="Could not convert new_deaths"):
        coerce_to_integer(pd.Series(["x"], name="new_deaths"))


def test_coerce_to_datetime():
    res = coerce_to_datetime(pd.Series(["2021-03-01", None, ""]), name="date")

    assert res.iloc[0] == pd.Timestamp("2021-03-01")
    assert pd.isna(res.iloc[1])
    assert pd.isna(res.iloc[2])


def test_coerce_to_datetime_error():
    with pytest.raises(
        TypeCoercionError,
        match=re.escape(
            "Could not convert date to dates. "
            "The following values are malformed: ['not a date']"
        ),
    ):
        coerce_to_datetime(pd.Series(["2021-03-01", "not a date"]), name="date")


def test_safe_percentage():
    res = safe_percentage(
        pd.Series(pd.array([80, 10, 10, None], dtype="Int64")),
        pd.Series(pd.array([100, 0, None, 50], dtype="Int64")),
    )

    assert res.dtype == pd.Float64Dtype()
    assert res.iloc[0] == pytest.approx(80.0)
    assert res.iloc[1:].isnull().all()
