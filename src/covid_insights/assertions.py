"""
Useful assertions
"""

from __future__ import annotations

from collections.abc import Collection

import pandas as pd

from covid_insights.exceptions import (
    DuplicateRecordsError,
    MissingColumnsError,
    MissingKeyValuesError,
)


def assert_has_columns(df: pd.DataFrame, columns: Collection[str]) -> None:
    """
    Assert that a [pd.DataFrame][pandas.DataFrame] has the given columns

    Parameters
    ----------
    df
        Data to check

    columns
        Columns that must be present

    Raises
    ------
    MissingColumnsError
        `df` does not have all of `columns`
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise MissingColumnsError(
            missing_columns=missing, available_columns=df.columns.tolist()
        )


def assert_no_missing_keys(df: pd.DataFrame, key_columns: Collection[str]) -> None:
    """
    Assert that no record is missing a value in any of the key columns

    Parameters
    ----------
    df
        Data to check

    key_columns
        Columns which must not contain nulls

    Raises
    ------
    MissingColumnsError
        `df` does not have all of `key_columns`

    MissingKeyValuesError
        At least one record has a null value in one of `key_columns`
    """
    assert_has_columns(df, key_columns)

    missing_key = df[list(key_columns)].isnull().any(axis="columns")
    if missing_key.any():
        raise MissingKeyValuesError(key_columns=key_columns, offending=df[missing_key])


def assert_unique_records(
    df: pd.DataFrame, key_columns: Collection[str], name: str = "The data"
) -> None:
    """
    Assert that there is at most one record for each key

    Parameters
    ----------
    df
        Data to check

    key_columns
        Columns which, together, should identify each record

    name
        Name of the data (used in the error message)

    Raises
    ------
    DuplicateRecordsError
        More than one record shares the same key
    """
    duplicated = df.duplicated(subset=list(key_columns), keep=False)
    if duplicated.any():
        raise DuplicateRecordsError(
            key_columns=key_columns,
            duplicates=df[duplicated].sort_values(list(key_columns)),
            name=name,
        )
