"""
Joining of case/death records with vaccination records
"""

from __future__ import annotations

import logging

from covid_insights.assertions import assert_no_missing_keys, assert_unique_records
from covid_insights.constants import DATE_COL, LOCATION_COL
from covid_insights.typing import (
    DeathsDataFrame,
    JoinedDataFrame,
    VaccinationsDataFrame,
)

logger = logging.getLogger(__name__)


def join_deaths_and_vaccinations(
    deaths: DeathsDataFrame,
    vaccinations: VaccinationsDataFrame,
    *,
    location_col: str = LOCATION_COL,
    date_col: str = DATE_COL,
    run_checks: bool = True,
) -> JoinedDataFrame:
    """
    Join case/death records with vaccination records

    This is an inner join on location and date,
    i.e. only locations and dates which appear in both tables are kept.
    Where both tables have a column with the same name
    (other than the join keys), the value from `deaths` is kept.

    Parameters
    ----------
    deaths
        Case/death records

    vaccinations
        Vaccination records

    location_col
        Column which holds the location in both tables

    date_col
        Column which holds the date in both tables

    run_checks
        If `True`, check that both tables have
        at most one record per location and date

        Null keys are always checked for,
        they would otherwise be matched against each other by the join

    Returns
    -------
    :
        Joined records

    Raises
    ------
    MissingColumnsError
        Either table is missing `location_col` or `date_col`

    MissingKeyValuesError
        Either table has records with a null location or date

    DuplicateRecordsError
        Either table has more than one record for a location and date
    """
    key_cols = [location_col, date_col]
    for name, df in (("deaths", deaths), ("vaccinations", vaccinations)):
        assert_no_missing_keys(df, key_cols)
        if run_checks:
            assert_unique_records(df, key_cols, name=name)

    vaccinations_cols = [
        c for c in vaccinations.columns if c in key_cols or c not in deaths.columns
    ]
    res = deaths.merge(vaccinations[vaccinations_cols], on=key_cols, how="inner")

    logger.debug(
        "Joined %d case/death records with %d vaccination records into %d records",
        len(deaths),
        len(vaccinations),
        len(res),
    )

    return res
