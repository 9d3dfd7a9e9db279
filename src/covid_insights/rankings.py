"""
Rankings of locations and continents

Note the different treatment of missing values compared to
[covid_insights.rolling][]: here missing counts are ignored
(i.e. they don't take part in the maximum),
they are not treated as zero.
A location with no reported deaths at all reports a missing death count.
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
    HIGHEST_INFECTION_COUNT_COL,
    LOCATION_COL,
    PERCENT_POPULATION_INFECTED_COL,
    POPULATION_COL,
    TOTAL_CASES_COL,
    TOTAL_DEATH_COUNT_COL,
    TOTAL_DEATHS_COL,
)
from covid_insights.typing import DeathsDataFrame

logger = logging.getLogger(__name__)


def sort_descending(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """
    Sort by a column, largest first, with missing values last

    Parameters
    ----------
    df
        Data to sort

    column
        Column to sort by

    Returns
    -------
    :
        Sorted `df` with a fresh index
    """
    return df.sort_values(
        column, ascending=False, na_position="last", kind="stable"
    ).reset_index(drop=True)


def get_highest_infection_rate(
    deaths: DeathsDataFrame,
    *,
    location_col: str = LOCATION_COL,
    population_col: str = POPULATION_COL,
    total_cases_col: str = TOTAL_CASES_COL,
) -> pd.DataFrame:
    """
    Rank locations by the highest share of their population that was infected

    All records are considered, including aggregates like "World".

    Parameters
    ----------
    deaths
        Case/death records

    location_col
        Column holding the location

    population_col
        Column holding the population

    total_cases_col
        Column holding the cumulative number of cases

    Returns
    -------
    :
        One row per location and population with the columns
        `location_col`, `population_col`,
        [HIGHEST_INFECTION_COUNT_COL][covid_insights.constants.HIGHEST_INFECTION_COUNT_COL]
        (maximum of `total_cases_col`) and
        [PERCENT_POPULATION_INFECTED_COL][covid_insights.constants.PERCENT_POPULATION_INFECTED_COL]
        (maximum of `total_cases_col / population_col * 100`),
        sorted by the percentage, largest first

    Raises
    ------
    MissingColumnsError
        `deaths` is missing one of the required columns

    TypeCoercionError
        A count is not a whole number
    """
    assert_has_columns(deaths, [location_col, population_col, total_cases_col])

    df = deaths[[location_col, population_col, total_cases_col]].copy()
    df[population_col] = coerce_to_integer(df[population_col], name=population_col)
    df[total_cases_col] = coerce_to_integer(df[total_cases_col], name=total_cases_col)
    df[PERCENT_POPULATION_INFECTED_COL] = safe_percentage(
        df[total_cases_col], df[population_col]
    )

    res = (
        df.groupby([location_col, population_col], dropna=False)
        .agg(
            **{
                HIGHEST_INFECTION_COUNT_COL: (total_cases_col, "max"),
                PERCENT_POPULATION_INFECTED_COL: (
                    PERCENT_POPULATION_INFECTED_COL,
                    "max",
                ),
            }
        )
        .reset_index()
    )

    logger.debug("Ranked %d locations by infection rate", len(res))

    return sort_descending(res, PERCENT_POPULATION_INFECTED_COL)


def get_highest_death_count(
    deaths: DeathsDataFrame,
    *,
    location_col: str = LOCATION_COL,
    continent_col: str = CONTINENT_COL,
    date_col: str = DATE_COL,
    total_deaths_col: str = TOTAL_DEATHS_COL,
) -> pd.DataFrame:
    """
    Rank locations by their highest reported death count

    Only records with a continent are considered,
    which excludes aggregates like "World" or "Europe".

    Parameters
    ----------
    deaths
        Case/death records

    location_col
        Column holding the location

    continent_col
        Column holding the continent

    date_col
        Column holding the date

    total_deaths_col
        Column holding the cumulative number of deaths

    Returns
    -------
    :
        One row per location with the columns `location_col` and
        [TOTAL_DEATH_COUNT_COL][covid_insights.constants.TOTAL_DEATH_COUNT_COL],
        sorted by the death count, largest first

    Raises
    ------
    MissingColumnsError
        `deaths` is missing one of the required columns

    TypeCoercionError
        A death count is not a whole number
    """
    assert_has_columns(
        deaths, [location_col, continent_col, date_col, total_deaths_col]
    )

    countries = deaths.loc[deaths[continent_col].notnull()]
    total_deaths = coerce_to_integer(
        countries[total_deaths_col], name=total_deaths_col
    ).to_frame(TOTAL_DEATH_COUNT_COL)
    total_deaths.index = pd.MultiIndex.from_frame(
        countries[[location_col, date_col]]
    )

    res = groupby_except(total_deaths, date_col).max().reset_index()

    logger.debug("Ranked %d locations by death count", len(res))

    return sort_descending(res, TOTAL_DEATH_COUNT_COL)


def get_highest_death_count_by_continent(
    deaths: DeathsDataFrame,
    *,
    continent_col: str = CONTINENT_COL,
    total_deaths_col: str = TOTAL_DEATHS_COL,
) -> pd.DataFrame:
    """
    Rank continents by the highest death count reported by any of their locations

    Parameters
    ----------
    deaths
        Case/death records

    continent_col
        Column holding the continent

    total_deaths_col
        Column holding the cumulative number of deaths

    Returns
    -------
    :
        One row per continent with the columns `continent_col` and
        [TOTAL_DEATH_COUNT_COL][covid_insights.constants.TOTAL_DEATH_COUNT_COL],
        sorted by the death count, largest first

    Raises
    ------
    MissingColumnsError
        `deaths` is missing one of the required columns

    TypeCoercionError
        A death count is not a whole number
    """
    assert_has_columns(deaths, [continent_col, total_deaths_col])

    countries = deaths.loc[deaths[continent_col].notnull()]
    total_deaths = coerce_to_integer(countries[total_deaths_col], name=total_deaths_col)

    res = (
        total_deaths.groupby(countries[continent_col])
        .max()
        .rename(TOTAL_DEATH_COUNT_COL)
        .reset_index()
    )

    return sort_descending(res, TOTAL_DEATH_COUNT_COL)
