"""
Default column names and column sets
"""

from __future__ import annotations

LOCATION_COL: str = "location"
CONTINENT_COL: str = "continent"
DATE_COL: str = "date"
POPULATION_COL: str = "population"

TOTAL_CASES_COL: str = "total_cases"
NEW_CASES_COL: str = "new_cases"
TOTAL_DEATHS_COL: str = "total_deaths"
NEW_DEATHS_COL: str = "new_deaths"
NEW_VACCINATIONS_COL: str = "new_vaccinations"

ROLLING_VACCINATED_COL: str = "rolling_vaccinated"
PERCENT_POPULATION_VACCINATED_COL: str = "percent_population_vaccinated"
PERCENT_POPULATION_INFECTED_COL: str = "percent_population_infected"
HIGHEST_INFECTION_COUNT_COL: str = "highest_infection_count"
TOTAL_DEATH_COUNT_COL: str = "total_death_count"
DEATH_PERCENTAGE_COL: str = "death_percentage"

KEY_COLS: tuple[str, ...] = (LOCATION_COL, DATE_COL)
"""
Columns which identify a single record in either table
"""

DEATHS_COUNT_COLS: tuple[str, ...] = (
    POPULATION_COL,
    TOTAL_CASES_COL,
    NEW_CASES_COL,
    TOTAL_DEATHS_COL,
    NEW_DEATHS_COL,
)
"""
Columns of the case/death table that hold counts
"""

DEATHS_COLS: tuple[str, ...] = (
    LOCATION_COL,
    CONTINENT_COL,
    DATE_COL,
    *DEATHS_COUNT_COLS,
)
"""
All columns of the case/death table
"""

VACCINATIONS_COLS: tuple[str, ...] = (LOCATION_COL, DATE_COL, NEW_VACCINATIONS_COL)
"""
All columns of the vaccination table
"""

PERCENT_POPULATION_VACCINATED_VIEW_COLS: tuple[str, ...] = (
    CONTINENT_COL,
    LOCATION_COL,
    DATE_COL,
    POPULATION_COL,
    NEW_VACCINATIONS_COL,
    ROLLING_VACCINATED_COL,
)
"""
Columns of the percent population vaccinated view, in output order
"""
