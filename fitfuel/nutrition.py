"""Nutrition data types and the calorie arithmetic behind the daily goal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Sex(Enum):
    """Biological sex used by the Mifflin-St Jeor style formula."""

    MALE = "M"
    FEMALE = "F"

    @classmethod
    def parse(cls, text):
        """Read a sex from user input such as 'M', 'f' or ' m '."""
        letter = str(text).strip()[:1].upper()
        try:
            return cls(letter)
        except ValueError:
            raise ValueError(f"invalid sex: {text!r} (expected M or F)") from None


class Goal(Enum):
    """Training goal; each one shifts the daily calorie target."""

    GAIN_MUSCLE = 1
    LOSE_FAT = 2
    RECOMPOSITION = 3

    @classmethod
    def parse(cls, value):
        """Read a goal from its menu number (1, 2 or 3)."""
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"invalid goal: {value!r}") from None
        try:
            return cls(number)
        except ValueError:
            raise ValueError(f"invalid goal: {value!r} (expected 1, 2 or 3)") from None

    @property
    def calorie_adjustment(self) -> int:
        """Calories added to the base requirement for this goal."""
        return _GOAL_ADJUSTMENT[self]


_GOAL_ADJUSTMENT = {
    Goal.GAIN_MUSCLE: 500,
    Goal.LOSE_FAT: -500,
    Goal.RECOMPOSITION: 0,
}


@dataclass
class Food:
    """A food item with its calories and macronutrients in grams."""

    name: str
    calories: int = 0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class NutritionTotals:
    """Summed nutrition values of a set of foods."""

    calories: int = 0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    count: int = 0


def body_mass_index(weight_kg, height_cm) -> float:
    """Body mass index: weight in kg over the square of height in metres."""
    if height_cm <= 0:
        raise ValueError("height must be positive")
    height_m = height_cm / 100.0
    return weight_kg / (height_m * height_m)


def base_calories(weight_kg, height_cm, age, sex: Sex) -> float:
    """Resting calorie requirement before the goal adjustment."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if sex is Sex.MALE:
        return base + 5
    if sex is Sex.FEMALE:
        return base - 161
    raise ValueError(f"invalid sex: {sex!r}")


def daily_calories(weight_kg, height_cm, age, sex: Sex, goal: Goal | None) -> int:
    """Daily calorie target; a missing goal means maintenance."""
    adjustment = goal.calorie_adjustment if goal is not None else 0
    return int(base_calories(weight_kg, height_cm, age, sex) + adjustment)


@dataclass(frozen=True)
class User:
    """Personal data entered by the user."""

    height_cm: int
    weight_kg: int
    age: int
    sex: Sex
    goal: Goal | None = None

    @property
    def bmi(self) -> float:
        """The user's body mass index."""
        return body_mass_index(self.weight_kg, self.height_cm)

    @property
    def daily_calories(self) -> int:
        """The user's recommended daily calories."""
        return daily_calories(self.weight_kg, self.height_cm, self.age, self.sex, self.goal)


def summarize(foods: Iterable[Food]) -> NutritionTotals:
    """Add up calories and macronutrients of the given foods."""
    calories = 0
    protein = carbs = fat = fiber = 0.0
    count = 0
    for food in foods:
        calories += food.calories
        protein += food.protein
        carbs += food.carbs
        fat += food.fat
        fiber += food.fiber
        count += 1
    return NutritionTotals(calories, protein, carbs, fat, fiber, count)


def calorie_gap(consumed: int, target: int) -> int:
    """Calories still missing to reach the target; zero or negative once met."""
    return target - consumed