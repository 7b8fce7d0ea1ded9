# fitfuel

fitfuel is an interactive console nutrition tracker. Its menus and messages
are in Spanish. It:

- works out your body mass index and a daily calorie target from height,
  weight, age, sex and goal (gain muscle +500 kcal, lose fat −500 kcal, or
  recomposition ±0), using a Mifflin–St Jeor style formula;
- loads a food table from `tabla_de_alimentos.csv` and lets you browse it
  page by page, search it by part of a name, and add your own foods;
- keeps a history of the foods you ate in this session and compares the
  totals with your target;
- builds a weekly meal plan, shows it with the calories for each day and for
  the week, and saves it to `plan_semanal.csv` so it can be loaded again in a
  later session.

## Installation

```
pip install .
```

## Usage

```
fitfuel [--workdir DIR] [--no-delay]
```

- `--workdir DIR` – directory holding `tabla_de_alimentos.csv` and
  `plan_semanal.csv` (default: the current directory).
- `--no-delay` – print messages at once instead of character by character,
  and skip the pause before the daily report.

On start it asks whether to load the previous weekly plan (`S`/`N`). If the
plan file cannot be opened, an empty plan is used. Then it shows the main
menu:

1. Enter personal data
2. Load foods from CSV
3. Browse foods
4. Add a custom food
5. Add a consumed food
6. Remove the last food eaten
7. Calorie count and daily goal
8. Show food history
9. Plan the week
10. Show the weekly plan
11. Quit

Option 11 or the end of input ends the program. The calorie report
(option 7) needs personal data (option 1) and at least one consumed food.
Planning the week (option 9) needs a loaded or non-empty food catalog; for
each day it asks how many foods to add, then searches by keyword for each.

### Food table

The first line of `tabla_de_alimentos.csv` is a header and is skipped. Each
row after it holds, in order: name, calories, carbohydrates, protein, fat and
fibre. Numeric fields may be enclosed in double quotes; missing or
non-numeric values count as zero. A food whose name is already in the
catalog is ignored. Searches are case-sensitive.

### Weekly plan file

`plan_semanal.csv` starts with the header
`Dia,Alimento,Calorias,Proteinas,Carbohidratos,Grasas,Fibra` and holds one
row per planned food. Day names run from `Lunes` to `Domingo`; when the file
is loaded, rows for any other day name are skipped.

## What it does not do

Only the weekly plan is written to disk. Personal data, the history of
consumed foods and foods added with option 4 last only for the session; the
food table is never written back.

## Library use

The building blocks can be used without the menu:

```python
from fitfuel.nutrition import Food, Goal, Sex, User, daily_calories, summarize
from fitfuel.catalog import load_catalog
from fitfuel.plan import WeeklyPlan

target = daily_calories(70, 175, 30, Sex.parse("M"), Goal.parse(2))
user = User(175, 70, 30, Sex.MALE, Goal.LOSE_FAT)
print(round(user.bmi, 2), user.daily_calories)

catalog = load_catalog("tabla_de_alimentos.csv")
plan = WeeklyPlan()
for food in catalog.search("Arroz"):
    plan.add(0, food)            # 0 is Lunes
print(plan.day_calories("Lunes"), plan.week_calories())
plan.export_csv("plan_semanal.csv")
same_plan = WeeklyPlan.import_csv("plan_semanal.csv")

totals = summarize(catalog.search("Arroz"))
print(totals.calories, totals.protein, totals.count)
```

Other modules:

- `fitfuel.catalog` – `FoodCatalog` (insertion-ordered, `add`, `get`,
  `search`, `pages`), `parse_food_row`, `strip_quotes`, `load_catalog`.
- `fitfuel.plan` – `WeeklyPlan`, `parse_plan_row`, `DAYS`.
- `fitfuel.console` – `Console` for colored (`Color.RED`, `Color.GREEN`) and
  character-by-character output, and `clear_screen()`.
- `fitfuel.csvline` – `parse_csv_line` and `read_csv` for lines with
  optionally quoted fields, and `split_string`, which splits on any of a set
  of delimiter characters and trims spaces.
- `fitfuel.priority` – `PriorityQueue`, a max-heap with `push(data,
  priority)`, `top()` (None when empty) and `pop()` (IndexError when empty).
- `fitfuel.app` – `FitFuelApp`, the menu itself, and `main`, the command.

## Running the tests

```
pip install ".[test]"
pytest
```