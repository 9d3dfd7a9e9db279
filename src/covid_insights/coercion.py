"""
Conversion of raw column values to the types we compute with

Counts are converted to pandas' nullable integer type (`Int64`)
so that accumulation is exact and missing values stay missing
until a caller explicitly decides what they mean.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from covid_insights.exceptions import TypeCoercionError


def blank_to_null(values: pd.Series) -> pd.Series:  # type: ignore # pandas-stubs not up to date
    """
    Replace empty or whitespace-only strings with null

    Exported spreadsheets often write missing values as empty cells,
    which come through as empty strings rather than nulls.

    Parameters
    ----------
    values
        Values to clean

    Returns
    -------
    :
        `values` with blank strings replaced by null
    """
    if not (
        pd.api.types.is_object_dtype(values.dtype)
        or pd.api.types.is_string_dtype(values.dtype)
    ):
        return values

    is_blank = values.map(lambda v: isinstance(v, str) and not v.strip()).astype(bool)

    return values.mask(is_blank)


def coerce_to_integer(
    values: pd.Series,  # type: ignore # pandas-stubs not up to date
    *,
    name: str | None = None,
    fill_missing: int | None = None,
) -> pd.Series:  # type: ignore # pandas-stubs not up to date
    """
    Coerce values to whole numbers

    Parameters
    ----------
    values
        Values to coerce

    name
        Name to use in error messages

        If not supplied, we use `values.name`.

    fill_missing
        Value to use in place of missing values

        If `None`, missing values are kept as `pd.NA`.

    Returns
    -------
    :
        `values` as a nullable integer (`Int64`) series

    Raises
    ------
    TypeCoercionError
        `values` contains non-null values which are not whole numbers
        (e.g. text, fractions or infinite values)
    """
    if name is None:
        name = str(values.name)

    cleaned = blank_to_null(values)
    numeric = pd.to_numeric(cleaned, errors="coerce")

    malformed = numeric.isnull() & cleaned.notnull()
    if not pd.api.types.is_integer_dtype(numeric.dtype):
        as_float = numeric.to_numpy(dtype="float64", na_value=np.nan)
        not_whole = ~np.isnan(as_float) & ~(
            np.isfinite(as_float) & (np.floor(as_float) == as_float)
        )
        malformed = malformed | pd.Series(not_whole, index=values.index)

    if malformed.any():
        raise TypeCoercionError(
            name=name,
            target="whole numbers",
            malformed_values=values[malformed].tolist(),
        )

    res = numeric.astype("Int64")
    if fill_missing is not None:
        res = res.fillna(fill_missing)

    return res


def coerce_to_datetime(
    values: pd.Series,  # type: ignore # pandas-stubs not up to date
    *,
    name: str | None = None,
) -> pd.Series:  # type: ignore # pandas-stubs not up to date
    """
    Coerce values to datetimes

    Missing values are kept as `NaT`.

    Parameters
    ----------
    values
        Values to coerce

    name
        Name to use in error messages

        If not supplied, we use `values.name`.

    Returns
    -------
    :
        `values` as a datetime series

    Raises
    ------
    TypeCoercionError
        `values` contains non-null values which cannot be parsed as dates
    """
    if name is None:
        name = str(values.name)

    cleaned = blank_to_null(values)
    parsed = pd.to_datetime(cleaned, errors="coerce")

    malformed = parsed.isnull() & cleaned.notnull()
    if malformed.any():
        raise TypeCoercionError(
            name=name, target="dates", malformed_values=values[malformed].tolist()
        )

    return parsed


def safe_percentage(
    numerator: pd.Series,  # type: ignore # pandas-stubs not up to date
    denominator: pd.Series,  # type: ignore # pandas-stubs not up to date
) -> pd.Series:  # type: ignore # pandas-stubs not up to date
    """
    Calculate `numerator / denominator * 100`

    Where `denominator` is zero or missing, the result is missing.
    A zero denominator is not an error.

    Parameters
    ----------
    numerator
        Numerator

    denominator
        Denominator

    Returns
    -------
    :
        Percentage as a nullable float (`Float64`) series
    """
    numerator_f = numerator.astype("Float64")
    denominator_f = denominator.astype("Float64")
    denominator_f = denominator_f.mask(denominator_f.fillna(0) == 0)

    return numerator_f / denominator_f * 100
