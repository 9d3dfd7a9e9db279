"""
Reporting queries over COVID-19 case, death and vaccination records.
"""

import importlib.metadata

__version__ = importlib.metadata.version("covid-insights")
