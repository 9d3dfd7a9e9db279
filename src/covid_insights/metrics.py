"""
Per-record and global rates from case/death records
"""

from __future__ import annotations

import logging

import pandas as pd
from pandas_openscm.grouping import groupby_except

from covid_insights.assertions import assert_has_columns
from covid_insights.coercion import coerce_to_integer, safe_percentage
from covid_insights.constants import (
    CONTINENT_COL,
    DATE_COL,
    DEATH_PERCENTAGE_COL,
    LOCATION_COL,
    NEW_CASES_COL,
    NEW_DEATHS_COL,
    PERCENT_POPULATION_INFECTED_COL,
    POPULATION_COL,
    TOTAL_CASES_COL,
    TOTAL_DEATHS_COL,
)
from covid_insights.typing import DeathsDataFrame

logger = logging.getLogger(__name__)


def get_death_percentage(
    deaths: DeathsDataFrame,
    *,
    location_contains: str | None = None,
    location_col: str = LOCATION_COL,
    date_col: str = DATE_COL,
    total_cases_col: str = TOTAL_CASES_COL,
    total_deaths_col: str = TOTAL_DEATHS_COL,
) -> pd.DataFrame:
    """
    Get the share of cases which resulted in death for each record

    This is the likelihood of dying if you were infected
    in a given location at a given time.

    Parameters
    ----------
    deaths
        Case/death records

    location_contains
        If supplied, only keep locations which contain this string
        (case-insensitive, e.g. `"states"` to get the United States)

    location_col
        Column holding the location

    date_col
        Column holding the date

    total_cases_col
        Column holding the cumulative number of cases

    total_deaths_col
        Column holding the cumulative number of deaths

    Returns
    -------
    :
        `location_col`, `date_col`, `total_cases_col`, `total_deaths_col` and
        [DEATH_PERCENTAGE_COL][covid_insights.constants.DEATH_PERCENTAGE_COL]
        for each record, sorted by location then date.
        The percentage is missing where there are no cases.
    """
    cols = [location_col, date_col, total_cases_col, total_deaths_col]
    assert_has_columns(deaths, cols)

    res = deaths[cols].copy()
    if location_contains is not None:
        res = res.loc[
            res[location_col].str.contains(location_contains, case=False, regex=False)
        ]

    res[total_cases_col] = coerce_to_integer(res[total_cases_col], name=total_cases_col)
    res[total_deaths_col] = coerce_to_integer(
        res[total_deaths_col], name=total_deaths_col
    )
    res[DEATH_PERCENTAGE_COL] = safe_percentage(
        res[total_deaths_col], res[total_cases_col]
    )

    return res.sort_values([location_col, date_col], kind="stable").reset_index(
        drop=True
    )


def get_percent_population_infected(
    deaths: DeathsDataFrame,
    *,
    location_col: str = LOCATION_COL,
    date_col: str = DATE_COL,
    population_col: str = POPULATION_COL,
    total_cases_col: str = TOTAL_CASES_COL,
) -> pd.DataFrame:
    """
    Get the share of the population which has been infected for each record

    Parameters
    ----------
    deaths
        Case/death records

    location_col
        Column holding the location

    date_col
        Column holding the date

    population_col
        Column holding the population

    total_cases_col
        Column holding the cumulative number of cases

    Returns
    -------
    :
        `location_col`, `date_col`, `population_col`, `total_cases_col` and
        [PERCENT_POPULATION_INFECTED_COL][covid_insights.constants.PERCENT_POPULATION_INFECTED_COL]
        for each record, sorted by location then date.
        The percentage is missing where the population is zero or missing.
    """
    cols = [location_col, date_col, population_col, total_cases_col]
    assert_has_columns(deaths, cols)

    res = deaths[cols].copy()
    res[population_col] = coerce_to_integer(res[population_col], name=population_col)
    res[total_cases_col] = coerce_to_integer(res[total_cases_col], name=total_cases_col)
    res[PERCENT_POPULATION_INFECTED_COL] = safe_percentage(
        res[total_cases_col], res[population_col]
    )

    return res.sort_values([location_col, date_col], kind="stable").reset_index(
        drop=True
    )


def get_global_numbers(  # noqa: PLR0913
    deaths: DeathsDataFrame,
    *,
    by_date: bool = True,
    location_col: str = LOCATION_COL,
    continent_col: str = CONTINENT_COL,
    date_col: str = DATE_COL,
    new_cases_col: str = NEW_CASES_COL,
    new_deaths_col: str = NEW_DEATHS_COL,
) -> pd.DataFrame:
    """
    Get global totals of cases and deaths

    Totals are the sum of new cases and new deaths
    over all records with a continent
    (so aggregates like "World" aren't double counted).
    Missing values are ignored.
    If every value being summed is missing, the total is missing.

    Parameters
    ----------
    deaths
        Case/death records

    by_date
        If `True`, return totals for each date,
        otherwise return a single row with the totals over all dates

    location_col
        Column holding the location

    continent_col
        Column holding the continent

    date_col
        Column holding the date

    new_cases_col
        Column holding the number of new cases

    new_deaths_col
        Column holding the number of new deaths

    Returns
    -------
    :
        [TOTAL_CASES_COL][covid_insights.constants.TOTAL_CASES_COL],
        [TOTAL_DEATHS_COL][covid_insights.constants.TOTAL_DEATHS_COL] and
        [DEATH_PERCENTAGE_COL][covid_insights.constants.DEATH_PERCENTAGE_COL]
        (plus `date_col`, sorted by date, if `by_date` is `True`)
    """
    assert_has_columns(
        deaths,
        [location_col, continent_col, date_col, new_cases_col, new_deaths_col],
    )

    countries = deaths.loc[deaths[continent_col].notnull()]
    new = pd.DataFrame(
        {
            TOTAL_CASES_COL: coerce_to_integer(
                countries[new_cases_col], name=new_cases_col
            ).array,
            TOTAL_DEATHS_COL: coerce_to_integer(
                countries[new_deaths_col], name=new_deaths_col
            ).array,
        },
        index=pd.MultiIndex.from_frame(
            countries[[continent_col, location_col, date_col]]
        ),
    )

    if by_date:
        res = (
            groupby_except(new, [continent_col, location_col])
            .sum(min_count=1)
            .sort_index()
            .reset_index()
        )

    else:
        res = pd.DataFrame(
            {
                col: pd.array([new[col].sum(min_count=1)], dtype="Int64")
                for col in [TOTAL_CASES_COL, TOTAL_DEATHS_COL]
            }
        )

    res[DEATH_PERCENTAGE_COL] = safe_percentage(
        res[TOTAL_DEATHS_COL], res[TOTAL_CASES_COL]
    )

    logger.debug("Calculated global numbers with %d rows", len(res))

    return res
