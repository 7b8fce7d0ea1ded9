"""The food catalog: an insertion-ordered collection of foods keyed by name."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator

from fitfuel.nutrition import Food

NAME_LIMIT = 99

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)


def _leading_int(text: str) -> int:
    """Integer value of the numeric prefix of text, 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _leading_float(text: str) -> float:
    """Float value of the numeric prefix of text, 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


class _Tokens:
    """Successive tokens of a string, skipping runs of delimiter characters."""

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    def next(self, delims: str) -> str | None:
        text = self._text
        end = len(text)
        pos = self._pos
        while pos < end and text[pos] in delims:
            pos += 1
        if pos >= end:
            self._pos = end
            return None
        start = pos
        while pos < end and text[pos] not in delims:
            pos += 1
        self._pos = pos + 1 if pos < end else end
        return text[start:pos]


def strip_quotes(token: str) -> str:
    """Remove one pair of enclosing double quotes, if both are present."""
    if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
        return token[1:-1]
    return token


def parse_food_row(line: str) -> Food | None:
    """Build a food from a catalog row.

    Columns are name, calories, carbohydrates, protein, fat and fiber.
    Missing numeric columns count as zero. Returns None for a row holding
    no field at all.
    """
    tokens = _Tokens(line)
    name = tokens.next(",")
    if name is None:
        return None
    name = name[:NAME_LIMIT].split("\n", 1)[0]

    def number(delims: str, convert):
        token = tokens.next(delims)
        return convert(strip_quotes(token)) if token is not None else convert("")

    calories = number(",", _leading_int)
    carbs = number(",", _leading_float)
    protein = number(",", _leading_float)
    fat = number(",", _leading_float)
    fiber = number(",\n", _leading_float)
    return Food(name, calories, protein, carbs, fat, fiber)


class FoodCatalog:
    """Foods keyed by name, in the order they were added.

    Adding a food whose name is already present leaves the catalog unchanged.
    """

    def __init__(self, foods: Iterable[Food] = ()):
        self._foods: dict[str, Food] = {}
        for food in foods:
            self.add(food)

    def add(self, food: Food) -> bool:
        """Add a food; returns False when its name was already taken."""
        if food.name in self._foods:
            return False
        self._foods[food.name] = food
        return True

    def get(self, name: str) -> Food | None:
        """The food with this exact name, or None."""
        return self._foods.get(name)

    def search(self, term: str) -> list[Food]:
        """Foods whose name contains term (case-sensitive), in catalog order."""
        return [food for food in self._foods.values() if term in food.name]

    def pages(self, per_page: int) -> Iterator[list[Food]]:
        """Yield the foods in consecutive pages of per_page items."""
        if per_page <= 0:
            raise ValueError("per_page must be positive")
        foods = list(self._foods.values())
        for start in range(0, len(foods), per_page):
            yield foods[start:start + per_page]

    def __iter__(self) -> Iterator[Food]:
        return iter(list(self._foods.values()))

    def __len__(self) -> int:
        return len(self._foods)

    def __contains__(self, name) -> bool:
        return name in self._foods


def load_catalog(path) -> FoodCatalog:
    """Read a catalog CSV file whose first line is a header."""
    catalog = FoodCatalog()
    with Path(path).open("r", encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            food = parse_food_row(line)
            if food is not None:
                catalog.add(food)
    return catalog