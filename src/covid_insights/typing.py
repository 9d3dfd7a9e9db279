"""
Type hints that are used throughout
"""

from __future__ import annotations

from typing import Union

import numpy as np
import pandas as pd
from typing_extensions import TypeAlias

NUMERIC_DATA: TypeAlias = Union[float, int, np.floating, np.integer]
"""
Type alias for a single count or rate
"""

DeathsDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the [pandas.DataFrame][pd.DataFrame] holding case/death records

For typing purposes, this is just a direct alias of [pandas.DataFrame][pd.DataFrame].
The point of defining it is to make clear what kind of data we expect.

We expect one row per location and date,
with the columns given by
[DEATHS_COLS][covid_insights.constants.DEATHS_COLS].
Counts are nullable integers, `continent` is null for aggregate rows
(e.g. "World" or "Europe" mixed into the location column).

```python
  location continent       date  population  total_cases  new_cases  total_deaths  new_deaths
0  Albania    Europe 2021-03-01     2877800       107167        660          1816          10
1  Albania    Europe 2021-03-02     2877800       107931        764          1835          19
2    World      <NA> 2021-03-01  7874965732    114591417     302128       2543035        6936
```
"""

VaccinationsDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the [pandas.DataFrame][pd.DataFrame] holding vaccination records

One row per location and date, with the columns given by
[VACCINATIONS_COLS][covid_insights.constants.VACCINATIONS_COLS].
"""

JoinedDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the result of joining case/death and vaccination records

One row per location and date present in both tables.
"""
