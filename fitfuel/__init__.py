"""Console nutrition tracker: calorie goals, food catalog, food history and weekly meal plans."""

__version__ = "0.1.0"