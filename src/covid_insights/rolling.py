"""
Rolling (cumulative) sums over time series grouped by location

This is the equivalent of a windowed sum
partitioned by location and ordered by date,
e.g. the running total of vaccinations administered in each country.
"""

from __future__ import annotations

import logging

import pandas as pd
from attrs import define

from covid_insights.assertions import assert_has_columns, assert_no_missing_keys
from covid_insights.coercion import coerce_to_integer, safe_percentage
from covid_insights.constants import (
    DATE_COL,
    LOCATION_COL,
    NEW_VACCINATIONS_COL,
    PERCENT_POPULATION_VACCINATED_COL,
    POPULATION_COL,
    ROLLING_VACCINATED_COL,
)
from covid_insights.typing import JoinedDataFrame

logger = logging.getLogger(__name__)


def compute_rolling_sum(
    indf: JoinedDataFrame,
    *,
    location_col: str = LOCATION_COL,
    date_col: str = DATE_COL,
    value_col: str = NEW_VACCINATIONS_COL,
    out_col: str = ROLLING_VACCINATED_COL,
) -> pd.DataFrame:
    """
    Compute the rolling sum of a column within each location

    Records are sorted by location then date (ascending)
    and the running total of `value_col` is accumulated within each location,
    including the current record.
    Missing values in `value_col` count as zero.
    Negative values are added as given (a warning is logged),
    so the running total can only be relied on to never decrease
    if `value_col` has no negative values.

    The sort is stable, so records which share a location and date
    keep the order in which they appear in `indf`.

    Parameters
    ----------
    indf
        Records to aggregate, in any order

        This is not modified.

    location_col
        Column to group by

    date_col
        Column to order by within each group

    value_col
        Column to sum

    out_col
        Column in which to write the rolling sum

    Returns
    -------
    :
        `indf`, sorted by location then date,
        with the rolling sum in `out_col` (as nullable integers)
        and a fresh index

    Raises
    ------
    MissingColumnsError
        `indf` does not have `location_col`, `date_col` or `value_col`

    MissingKeyValuesError
        A record has no location or no date

    TypeCoercionError
        `value_col` contains values which are not whole numbers

    Examples
    --------
    >>> indf = pd.DataFrame(
    ...     {
    ...         "location": ["X", "Y", "X", "Y"],
    ...         "date": [1, 1, 2, 2],
    ...         "new_vaccinations": [10, 3, 4, None],
    ...     }
    ... )
    >>> compute_rolling_sum(indf)["rolling_vaccinated"].tolist()
    [10, 14, 3, 3]
    """
    key_cols = [location_col, date_col]
    assert_has_columns(indf, [*key_cols, value_col])
    assert_no_missing_keys(indf, key_cols)

    res = indf.reset_index(drop=True)
    increments = coerce_to_integer(res[value_col], name=value_col, fill_missing=0)

    n_negative = int((increments < 0).sum())
    if n_negative:
        logger.warning(
            "%s has %d negative value(s), "
            "so %s will decrease for the affected locations",
            value_col,
            n_negative,
            out_col,
        )

    order = res.sort_values(key_cols, kind="stable").index
    res = res.loc[order]
    increments = increments.loc[order]

    res[out_col] = increments.groupby(res[location_col], sort=False).cumsum()
    res = res.reset_index(drop=True)

    logger.debug(
        "Computed %s for %d records across %d locations",
        out_col,
        len(res),
        res[location_col].nunique(),
    )

    return res


@define
class RollingAggregator:
    """
    Aggregator which computes rolling sums within each location

    The configuration is held on the instance,
    the data is passed in when the instance is called.
    """

    location_col: str = LOCATION_COL
    """
    Column to group by
    """

    date_col: str = DATE_COL
    """
    Column to order by within each location
    """

    value_col: str = NEW_VACCINATIONS_COL
    """
    Column to sum
    """

    out_col: str = ROLLING_VACCINATED_COL
    """
    Column in which to write the rolling sum
    """

    def __call__(self, indf: JoinedDataFrame) -> pd.DataFrame:
        """
        Compute the rolling sums

        Parameters
        ----------
        indf
            Records to aggregate

        Returns
        -------
        :
            Records sorted by location and date, with the rolling sum added

            For details, see [compute_rolling_sum][(m).].
        """
        return compute_rolling_sum(
            indf,
            location_col=self.location_col,
            date_col=self.date_col,
            value_col=self.value_col,
            out_col=self.out_col,
        )


def add_percent_population_vaccinated(
    indf: pd.DataFrame,
    *,
    rolling_col: str = ROLLING_VACCINATED_COL,
    population_col: str = POPULATION_COL,
    out_col: str = PERCENT_POPULATION_VACCINATED_COL,
) -> pd.DataFrame:
    """
    Add the percentage of the population which has been vaccinated

    This is `rolling_col / population_col * 100`.
    Where the population is zero or missing, the result is missing.

    Parameters
    ----------
    indf
        Output of [compute_rolling_sum][(m).] (or equivalent)

        This is not modified.

    rolling_col
        Column holding the rolling number of vaccinations

    population_col
        Column holding the population

    out_col
        Column in which to write the percentage

    Returns
    -------
    :
        `indf` with the percentage added as nullable floats

    Raises
    ------
    MissingColumnsError
        `indf` does not have `rolling_col` or `population_col`
    """
    assert_has_columns(indf, [rolling_col, population_col])

    res = indf.copy()
    res[out_col] = safe_percentage(res[rolling_col], res[population_col])

    return res
