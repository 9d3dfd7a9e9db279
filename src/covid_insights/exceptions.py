"""
Exceptions that are used throughout
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

import pandas as pd


class DataError(ValueError):
    """
    Raised when the data handed to us cannot be used

    This is the base class for the more specific data errors below.
    Catch this if you don't care about the details.
    """


class MissingColumnsError(DataError):
    """
    Raised when a [pd.DataFrame][pandas.DataFrame] is missing required columns
    """

    def __init__(
        self, missing_columns: Collection[str], available_columns: Collection[str]
    ) -> None:
        """
        Initialise the error

        Parameters
        ----------
        missing_columns
            Columns that are required but not present

        available_columns
            Columns that are present
        """
        error_msg = (
            f"The data is missing required columns: {sorted(missing_columns)}. "
            f"Available columns: {list(available_columns)}"
        )
        super().__init__(error_msg)


class MissingKeyValuesError(DataError):
    """
    Raised when records are missing values for the columns we group or order by
    """

    def __init__(self, key_columns: Collection[str], offending: pd.DataFrame) -> None:
        """
        Initialise the error

        Parameters
        ----------
        key_columns
            Key columns which must be non-null

        offending
            Records with at least one null key
        """
        error_msg = (
            f"{len(offending)} record(s) are missing a value "
            f"for at least one of the key columns {list(key_columns)}. "
            f"Offending records:\n{offending}"
        )
        super().__init__(error_msg)


class DuplicateRecordsError(DataError):
    """
    Raised when there is more than one record for the same key
    """

    def __init__(
        self, key_columns: Collection[str], duplicates: pd.DataFrame, name: str
    ) -> None:
        """
        Initialise the error

        Parameters
        ----------
        key_columns
            Columns which should uniquely identify each record

        duplicates
            Records which share a key with another record

        name
            Name of the data being checked (used for the error message)
        """
        error_msg = (
            f"{name} should have at most one record per {tuple(key_columns)}. "
            f"Duplicated records:\n{duplicates}"
        )
        super().__init__(error_msg)


class TypeCoercionError(ValueError):
    """
    Raised when values cannot be converted to the type we need
    """

    def __init__(self, name: str, target: str, malformed_values: list[Any]) -> None:
        """
        Initialise the error

        Parameters
        ----------
        name
            Name of the values (normally the column) being converted

        target
            Description of the type we tried to convert to

        malformed_values
            Values which could not be converted
        """
        error_msg = (
            f"Could not convert {name} to {target}. "
            f"The following values are malformed: {malformed_values}"
        )
        super().__init__(error_msg)
