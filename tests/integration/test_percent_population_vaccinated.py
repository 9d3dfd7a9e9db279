"""
Integration tests of the percent population vaccinated view
"""

import pandas as pd
import pytest

from covid_insights.constants import PERCENT_POPULATION_VACCINATED_VIEW_COLS
from covid_insights.datasets import CovidDataset
from covid_insights.exceptions import DataError
from covid_insights.records import CaseRecord, VaccinationRecord
from covid_insights.views import get_percent_population_vaccinated


def test_view(dataset):
    res = get_percent_population_vaccinated(dataset)

    exp = pd.DataFrame(
        {
            "continent": ["Europe"] * 3 + ["South America"] * 2,
            "location": ["Albania"] * 3 + ["Chile"] * 2,
            "date": pd.to_datetime(
                [
                    "2021-03-01",
                    "2021-03-02",
                    "2021-03-03",
                    "2021-03-02",
                    "2021-03-03",
                ]
            ),
            "population": pd.array([2877800] * 3 + [19116209] * 2, dtype="Int64"),
            "new_vaccinations": pd.array(
                [1000, None, 2500, 150000, 200000], dtype="Int64"
            ),
            "rolling_vaccinated": pd.array(
                [1000, 1000, 3500, 150000, 350000], dtype="Int64"
            ),
        }
    )
    pd.testing.assert_frame_equal(res, exp)


def test_view_including_aggregates(dataset):
    res = get_percent_population_vaccinated(dataset, exclude_aggregates=False)

    world = res.loc[res["location"] == "World"]
    assert world["continent"].isnull().all()
    assert world["rolling_vaccinated"].tolist() == [7000000, 15000000]


def test_view_with_percentage(dataset):
    res = get_percent_population_vaccinated(dataset, add_percentage=True)

    assert res.columns.tolist() == [
        *PERCENT_POPULATION_VACCINATED_VIEW_COLS,
        "percent_population_vaccinated",
    ]
    chile = res.loc[res["location"] == "Chile", "percent_population_vaccinated"]
    assert chile.tolist() == pytest.approx(
        [150000 / 19116209 * 100, 350000 / 19116209 * 100]
    )


def test_view_zero_population():
    dataset = CovidDataset.from_records(
        [CaseRecord("X", "2021-01-01", 0, "Europe")],
        [VaccinationRecord("X", "2021-01-01", 5)],
    )

    res = get_percent_population_vaccinated(dataset, add_percentage=True)

    assert res["rolling_vaccinated"].tolist() == [5]
    assert pd.isna(res["percent_population_vaccinated"].iloc[0])


def test_view_does_not_modify_dataset(dataset):
    deaths_before = dataset.deaths.copy()
    vaccinations_before = dataset.vaccinations.copy()

    get_percent_population_vaccinated(dataset, add_percentage=True)

    pd.testing.assert_frame_equal(dataset.deaths, deaths_before)
    pd.testing.assert_frame_equal(dataset.vaccinations, vaccinations_before)


def test_missing_location_fails_whole_run(case_records):
    with pytest.raises(DataError):
        CovidDataset.from_records(
            case_records, [VaccinationRecord(None, "2021-03-05", 1)]
        )


def test_missing_location_fails_whole_run_without_dataset_checks():
    dataset = CovidDataset.from_records(
        [CaseRecord(None, "2021-03-05", 10, "Europe")],
        [VaccinationRecord(None, "2021-03-05", 1)],
        run_checks=False,
    )

    with pytest.raises(DataError):
        get_percent_population_vaccinated(dataset)
