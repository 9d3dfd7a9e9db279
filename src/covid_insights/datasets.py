"""
The data which all reporting queries run against
"""

from __future__ import annotations

import logging
from typing import Any

import attr
import pandas as pd
from attrs import define, field

from covid_insights.assertions import (
    assert_has_columns,
    assert_no_missing_keys,
    assert_unique_records,
)
from covid_insights.coercion import blank_to_null, coerce_to_datetime, coerce_to_integer
from covid_insights.constants import (
    CONTINENT_COL,
    DATE_COL,
    DEATHS_COLS,
    DEATHS_COUNT_COLS,
    KEY_COLS,
    LOCATION_COL,
    NEW_VACCINATIONS_COL,
    POPULATION_COL,
    VACCINATIONS_COLS,
)
from covid_insights.records import RecordsLike, records_to_frame
from covid_insights.typing import DeathsDataFrame, VaccinationsDataFrame

logger = logging.getLogger(__name__)


def normalise_deaths(indf: pd.DataFrame) -> DeathsDataFrame:
    """
    Normalise the types of case/death records

    Dates are parsed, counts become nullable integers
    and blank continents become null.

    Parameters
    ----------
    indf
        Case/death records with the columns in
        [DEATHS_COLS][covid_insights.constants.DEATHS_COLS]

    Returns
    -------
    :
        Normalised copy of `indf`

    Raises
    ------
    MissingColumnsError
        `indf` does not have all of the required columns

    TypeCoercionError
        A date or count could not be converted
    """
    assert_has_columns(indf, DEATHS_COLS)

    res = indf.copy()
    res[DATE_COL] = coerce_to_datetime(res[DATE_COL], name=DATE_COL)
    res[CONTINENT_COL] = blank_to_null(res[CONTINENT_COL])
    for col in DEATHS_COUNT_COLS:
        res[col] = coerce_to_integer(res[col], name=col)

    return res


def normalise_vaccinations(indf: pd.DataFrame) -> VaccinationsDataFrame:
    """
    Normalise the types of vaccination records

    Parameters
    ----------
    indf
        Vaccination records with the columns in
        [VACCINATIONS_COLS][covid_insights.constants.VACCINATIONS_COLS]

    Returns
    -------
    :
        Normalised copy of `indf`

    Raises
    ------
    MissingColumnsError
        `indf` does not have all of the required columns

    TypeCoercionError
        A date or count could not be converted
    """
    assert_has_columns(indf, VACCINATIONS_COLS)

    res = indf.copy()
    res[DATE_COL] = coerce_to_datetime(res[DATE_COL], name=DATE_COL)
    # Nulls are kept here, what they mean is up to each query
    res[NEW_VACCINATIONS_COL] = coerce_to_integer(
        res[NEW_VACCINATIONS_COL], name=NEW_VACCINATIONS_COL
    )

    return res


@define(frozen=True, eq=False)
class CovidDataset:
    """
    Case/death and vaccination records for a single analysis run

    This is the handle that gets passed to the reporting queries.
    It is not modified by any of them.

    The tables are normalised on the way in
    (see [normalise_deaths][(m).] and [normalise_vaccinations][(m).]),
    so dates and counts have the same types
    however the tables were read.
    """

    deaths: DeathsDataFrame = field(converter=normalise_deaths)
    """
    Case/death records, one per location and date
    """

    vaccinations: VaccinationsDataFrame = field(converter=normalise_vaccinations)
    """
    Vaccination records, one per location and date
    """

    run_checks: bool = True
    """
    If `True`, check the tables when the dataset is created

    If you are sure about where your data comes from,
    you can disable the checks to speed things up.
    """

    @deaths.validator
    def validate_deaths(
        self, attribute: attr.Attribute[Any], value: DeathsDataFrame
    ) -> None:
        """
        Validate the case/death records

        If `self.run_checks` is `False`, then this is a no-op
        """
        if not self.run_checks:
            return

        assert_no_missing_keys(value, KEY_COLS)
        assert_unique_records(value, KEY_COLS, name="deaths")

    @vaccinations.validator
    def validate_vaccinations(
        self, attribute: attr.Attribute[Any], value: VaccinationsDataFrame
    ) -> None:
        """
        Validate the vaccination records

        If `self.run_checks` is `False`, then this is a no-op
        """
        if not self.run_checks:
            return

        assert_no_missing_keys(value, KEY_COLS)
        assert_unique_records(value, KEY_COLS, name="vaccinations")

    @classmethod
    def from_records(
        cls,
        case_records: RecordsLike,
        vaccination_records: RecordsLike,
        run_checks: bool = True,
    ) -> CovidDataset:
        """
        Initialise from the records handed over by the loader

        Parameters
        ----------
        case_records
            Case/death records

            Anything accepted by
            [records_to_frame][covid_insights.records.records_to_frame].

        vaccination_records
            Vaccination records

        run_checks
            Passed to the initialiser

        Returns
        -------
        :
            Initialised dataset

        Raises
        ------
        MissingColumnsError
            Records are missing required fields

        TypeCoercionError
            A date or count could not be converted
        """
        deaths = records_to_frame(
            case_records,
            columns=DEATHS_COLS,
            required_columns=(LOCATION_COL, DATE_COL, POPULATION_COL),
        )
        vaccinations = records_to_frame(
            vaccination_records,
            columns=VACCINATIONS_COLS,
            required_columns=KEY_COLS,
        )

        logger.info(
            "Loaded %d case/death records and %d vaccination records "
            "covering %d locations",
            len(deaths),
            len(vaccinations),
            deaths[LOCATION_COL].nunique(),
        )

        return cls(deaths=deaths, vaccinations=vaccinations, run_checks=run_checks)
