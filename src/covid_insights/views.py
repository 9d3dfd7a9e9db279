"""
Tables prepared for visualisation tools
"""

from __future__ import annotations

import logging

import pandas as pd

from covid_insights.constants import (
    CONTINENT_COL,
    PERCENT_POPULATION_VACCINATED_VIEW_COLS,
)
from covid_insights.datasets import CovidDataset
from covid_insights.joining import join_deaths_and_vaccinations
from covid_insights.rolling import RollingAggregator, add_percent_population_vaccinated

logger = logging.getLogger(__name__)


def get_percent_population_vaccinated(
    dataset: CovidDataset,
    *,
    exclude_aggregates: bool = True,
    add_percentage: bool = False,
) -> pd.DataFrame:
    """
    Get the percent population vaccinated view

    This joins case/death records with vaccination records
    and adds the rolling number of vaccinations for each location.

    Parameters
    ----------
    dataset
        Dataset to query

    exclude_aggregates
        If `True`, drop records without a continent

        These are aggregates (e.g. "World", "Asia")
        which are mixed into the location column in the source data.

    add_percentage
        If `True`, also add the percentage of the population vaccinated

        Normally this is left to the consumer of the view.

    Returns
    -------
    :
        One row per location and date in both tables,
        sorted by location then date, with columns
        [PERCENT_POPULATION_VACCINATED_VIEW_COLS][covid_insights.constants.PERCENT_POPULATION_VACCINATED_VIEW_COLS]
        (plus the percentage if `add_percentage` is `True`)

    Raises
    ------
    DataError
        A record is missing its location or date,
        or a location and date appear more than once in either table

    TypeCoercionError
        A vaccination count is not a whole number
    """
    joined = join_deaths_and_vaccinations(
        dataset.deaths, dataset.vaccinations, run_checks=dataset.run_checks
    )
    if exclude_aggregates:
        joined = joined.loc[joined[CONTINENT_COL].notnull()]

    rolling = RollingAggregator()(joined)
    res = rolling.loc[:, list(PERCENT_POPULATION_VACCINATED_VIEW_COLS)]

    if add_percentage:
        res = add_percent_population_vaccinated(res)

    logger.info("Created percent population vaccinated view with %d rows", len(res))

    return res
