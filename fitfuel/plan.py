"""The weekly meal plan and its CSV file format."""

from __future__ import annotations

import re
from dataclasses import replace
from pathlib import Path
from typing import Iterator

from fitfuel.nutrition import Food

DAYS = ("Lunes", "Martes", "Miercoles", "Jueves", "Viernes", "Sabado", "Domingo")
CSV_HEADER = "Dia,Alimento,Calorias,Proteinas,Carbohidratos,Grasas,Fibra"
DAY_LIMIT = 19
NAME_LIMIT = 99

_FIELD = re.compile(r"[^,]+")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_int(text: str | None) -> int:
    match = _INT_PREFIX.match(text or "")
    return int(match.group()) if match else 0


def _leading_float(text: str | None) -> float:
    match = _FLOAT_PREFIX.match(text or "")
    return float(match.group()) if match else 0.0


def parse_plan_row(line: str) -> tuple[str, Food] | None:
    """Read a plan row into (day name, food).

    Columns are day, name, calories, protein, carbohydrates, fat and fiber.
    Missing numeric columns count as zero. Returns None for a row without
    both a day and a food name.
    """
    fields = _FIELD.findall(line)
    if len(fields) < 2:
        return None
    day = fields[0][:DAY_LIMIT]
    name = fields[1][:NAME_LIMIT].split("\n", 1)[0]
    numbers = fields[2:7] + [None] * (7 - len(fields))
    calories = _leading_int(numbers[0])
    protein, carbs, fat, fiber = (_leading_float(field) for field in numbers[1:5])
    return day, Food(name, calories, protein, carbs, fat, fiber)


class WeeklyPlan:
    """Foods planned for each day of the week, Monday to Sunday."""

    def __init__(self):
        self._days: dict[str, list[Food]] = {day: [] for day in DAYS}

    def _day_name(self, day) -> str:
        if isinstance(day, str):
            if day not in self._days:
                raise KeyError(f"unknown day: {day!r}")
            return day
        if isinstance(day, int) and not isinstance(day, bool):
            if not 0 <= day < len(DAYS):
                raise IndexError(f"day index out of range: {day}")
            return DAYS[day]
        raise TypeError(f"day must be a name or an index, not {type(day).__name__}")

    def add(self, day_index, food: Food) -> None:
        """Add a copy of food to the given day (index 0 is Monday)."""
        self._days[self._day_name(day_index)].append(replace(food))

    def foods_for(self, day) -> list[Food]:
        """Foods planned for a day, given by name or index."""
        return list(self._days[self._day_name(day)])

    def day_calories(self, day) -> int:
        """Total calories planned for one day."""
        return sum(food.calories for food in self._days[self._day_name(day)])

    def week_calories(self) -> int:
        """Total calories planned for the whole week."""
        return sum(self.day_calories(day) for day in DAYS)

    def __iter__(self) -> Iterator[tuple[str, list[Food]]]:
        for day in DAYS:
            yield day, list(self._days[day])

    def export_csv(self, path) -> Path:
        """Write the plan as CSV and return the path written."""
        target = Path(path)
        with target.open("w", encoding="utf-8") as handle:
            handle.write(CSV_HEADER + "\n")
            for day, foods in self:
                for food in foods:
                    handle.write(
                        f"{day},{food.name},{food.calories},{food.protein:.2f},"
                        f"{food.carbs:.2f},{food.fat:.2f},{food.fiber:.2f}\n"
                    )
        return target

    @classmethod
    def import_csv(cls, path) -> "WeeklyPlan":
        """Read a plan written by export_csv; rows for unknown days are skipped."""
        plan = cls()
        with Path(path).open("r", encoding="utf-8") as handle:
            next(handle, None)
            for line in handle:
                row = parse_plan_row(line)
                if row is None:
                    continue
                day, food = row
                if day in plan._days:
                    plan._days[day].append(food)
        return plan