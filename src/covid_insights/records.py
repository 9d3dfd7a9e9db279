"""
Record types delivered by the loader and their conversion to tables
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Collection, Iterable, Mapping
from typing import Any, Union

import attr
import pandas as pd
from attrs import define
from typing_extensions import TypeAlias

from covid_insights.assertions import assert_has_columns
from covid_insights.typing import NUMERIC_DATA


@define(frozen=True)
class CaseRecord:
    """
    Cases and deaths reported for one location on one date
    """

    location: str
    """
    Location (normally a country, but aggregates like "World" also appear)
    """

    date: dt.date
    """
    Date of the report
    """

    population: int
    """
    Population of the location
    """

    continent: str | None = None
    """
    Continent of the location

    `None` for aggregate rows (e.g. "World", "Europe").
    """

    total_cases: NUMERIC_DATA | None = None
    """
    Cumulative confirmed cases
    """

    new_cases: NUMERIC_DATA | None = None
    """
    New confirmed cases
    """

    total_deaths: NUMERIC_DATA | None = None
    """
    Cumulative deaths
    """

    new_deaths: NUMERIC_DATA | None = None
    """
    New deaths
    """


@define(frozen=True)
class VaccinationRecord:
    """
    Vaccinations reported for one location on one date
    """

    location: str
    """
    Location
    """

    date: dt.date
    """
    Date of the report
    """

    new_vaccinations: NUMERIC_DATA | None = None
    """
    New vaccination doses administered
    """


RecordsLike: TypeAlias = Union[
    pd.DataFrame,
    Iterable[Union[CaseRecord, VaccinationRecord, Mapping[str, Any]]],
]
"""
Type alias for the forms in which the loader can hand over records
"""


def record_to_dict(record: Any) -> dict[str, Any]:
    """
    Convert a single record to a dictionary

    Parameters
    ----------
    record
        Record to convert, either an attrs instance or a mapping

    Returns
    -------
    :
        Record as a dictionary

    Raises
    ------
    TypeError
        We don't know how to convert `record`
    """
    if attr.has(type(record)):
        return attr.asdict(record, recurse=False)

    if isinstance(record, Mapping):
        return dict(record)

    raise TypeError(record)


def records_to_frame(
    records: RecordsLike,
    columns: Collection[str],
    required_columns: Collection[str] = (),
) -> pd.DataFrame:
    """
    Convert records to a [pd.DataFrame][pandas.DataFrame]

    Parameters
    ----------
    records
        Records to convert

        This can be a [pd.DataFrame][pandas.DataFrame] already
        or an iterable of [CaseRecord][(m).], [VaccinationRecord][(m).]
        or mappings from column name to value.

    columns
        Columns to include in the output

        Columns which are not in `records` are filled with nulls.
        Columns in `records` which are not in `columns` are dropped.

    required_columns
        Columns which must be in `records`

    Returns
    -------
    :
        `records` as a [pd.DataFrame][pandas.DataFrame] with exactly `columns`

    Raises
    ------
    MissingColumnsError
        `records` does not contain all of `required_columns`
    """
    if isinstance(records, pd.DataFrame):
        df = records

    else:
        rows = [record_to_dict(r) for r in records]
        if rows:
            df = pd.DataFrame(rows)
        else:
            df = pd.DataFrame(columns=list(columns))

    assert_has_columns(df, required_columns)

    res = df.reindex(columns=list(columns)).reset_index(drop=True)

    return res
