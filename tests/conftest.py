"""
Re-useable fixtures etc. for tests

See https://docs.pytest.org/en/7.1.x/reference/fixtures.html#conftest-py-sharing-fixtures-across-multiple-files
"""

import pandas as pd
import pytest

from covid_insights.datasets import CovidDataset
from covid_insights.records import CaseRecord, VaccinationRecord


@pytest.fixture(scope="session", autouse=True)
def pandas_terminal_width():
    # Set pandas terminal width so that doctests don't depend on terminal width.

    # We set the display width to 120 because examples should be short,
    # anything more than this is too wide to read in the source.
    pd.set_option("display.width", 120)

    # Display as many columns as you want (i.e. let the display width do the
    # truncation)
    pd.set_option("display.max_columns", 1000)


CASES = (
    # location, date, population, continent,
    # total_cases, new_cases, total_deaths, new_deaths
    ("Albania", "2021-03-01", 2877800, "Europe", 107167, 660, 1816, 10),
    ("Albania", "2021-03-02", 2877800, "Europe", 107931, 764, 1835, 19),
    ("Albania", "2021-03-03", 2877800, "Europe", 108823, 892, None, None),
    ("Chile", "2021-03-01", 19116209, "South America", 840000, 4000, 20800, 60),
    ("Chile", "2021-03-02", 19116209, "South America", 845000, 5000, 20900, 100),
    ("Chile", "2021-03-03", 19116209, "South America", 850000, 5000, 21000, 100),
    ("World", "2021-03-01", 7874965732, None, 114591417, 302128, 2543035, 6936),
    ("World", "2021-03-02", 7874965732, None, 114900000, 308583, 2552000, 8965),
)

VACCINATIONS = (
    # location, date, new_vaccinations
    ("Albania", "2021-03-01", 1000),
    ("Albania", "2021-03-02", None),
    ("Albania", "2021-03-03", 2500),
    ("Chile", "2021-03-02", 150000),
    ("Chile", "2021-03-03", 200000),
    ("Chile", "2021-03-04", 210000),
    ("World", "2021-03-01", 7000000),
    ("World", "2021-03-02", 8000000),
)


@pytest.fixture
def case_records():
    return [CaseRecord(*values) for values in CASES]


@pytest.fixture
def vaccination_records():
    return [VaccinationRecord(*values) for values in VACCINATIONS]


@pytest.fixture
def dataset(case_records, vaccination_records):
    return CovidDataset.from_records(case_records, vaccination_records)
