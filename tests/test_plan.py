import pytest

from fitfuel.nutrition import Food
from fitfuel.plan import CSV_HEADER, DAYS, WeeklyPlan, parse_plan_row


def test_new_plan_lists_seven_empty_days_in_order():
    plan = WeeklyPlan()
    days = list(plan)
    assert [day for day, _ in days] == list(DAYS)
    assert days[0][0] == "Lunes"
    assert days[-1][0] == "Domingo"
    assert all(foods == [] for _, foods in days)


def test_add_by_index_visible_by_name_and_index():
    plan = WeeklyPlan()
    food = Food("Pollo", 200, 30.0, 0.0, 8.0, 0.0)
    plan.add(1, food)
    assert plan.foods_for("Martes") == [food]
    assert plan.foods_for(1) == [food]
    assert plan.foods_for(0) == []


def test_add_stores_a_copy():
    plan = WeeklyPlan()
    food = Food("Pan", 80)
    plan.add(0, food)
    food.calories = 999
    assert plan.foods_for(0)[0].calories == 80


@pytest.mark.parametrize("index", [-1, 7])
def test_add_out_of_range_raises(index):
    plan = WeeklyPlan()
    with pytest.raises(IndexError):
        plan.add(index, Food("Pan", 80))
    assert plan.week_calories() == 0


def test_unknown_day_name_raises():
    with pytest.raises(KeyError):
        WeeklyPlan().foods_for("Feriado")


def test_day_and_week_calories():
    plan = WeeklyPlan()
    plan.add(0, Food("A", 100))
    plan.add(0, Food("B", 250))
    plan.add(4, Food("C", 50))
    assert plan.day_calories(0) == 350
    assert plan.day_calories("Viernes") == 50
    assert plan.week_calories() == sum(plan.day_calories(day) for day in DAYS)


def test_export_writes_header_and_formatted_rows(tmp_path):
    plan = WeeklyPlan()
    plan.add(0, Food("Pollo", 200, 30.0, 0.0, 8.5, 0.0))
    path = plan.export_csv(tmp_path / "plan.csv")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines[0] == "Dia,Alimento,Calorias,Proteinas,Carbohidratos,Grasas,Fibra"
    assert lines[1] == "Lunes,Pollo,200,30.00,0.00,8.50,0.00"
    assert len(lines) == 2


def test_export_import_round_trip(tmp_path):
    plan = WeeklyPlan()
    plan.add(0, Food("Pollo", 200, 30.0, 0.0, 8.5, 0.0))
    plan.add(3, Food("Arroz", 130, 2.75, 28.0, 0.25, 0.5))
    plan.add(6, Food("Avena", 380, 13.0, 60.0, 7.0, 10.0))
    path = plan.export_csv(tmp_path / "plan.csv")
    loaded = WeeklyPlan.import_csv(path)
    assert list(loaded) == list(plan)
    assert loaded.week_calories() == plan.week_calories()


def test_import_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        WeeklyPlan.import_csv(tmp_path / "missing.csv")


def test_import_skips_unknown_days_and_short_rows(tmp_path):
    path = tmp_path / "plan.csv"
    path.write_text(
        CSV_HEADER + "\nFeriado,X,1,1,1,1,1\nMartes\nMartes,Arroz,130,2.7,28,0.3,0.4\n",
        encoding="utf-8",
    )
    plan = WeeklyPlan.import_csv(path)
    assert [food.name for food in plan.foods_for("Martes")] == ["Arroz"]
    assert plan.week_calories() == plan.day_calories("Martes")


def test_parse_plan_row_full():
    row = parse_plan_row("Martes,Arroz,130,2.7,28,0.3,0.4\n")
    assert row == ("Martes", Food("Arroz", 130, 2.7, 28.0, 0.3, 0.4))


def test_parse_plan_row_missing_numbers_default_to_zero():
    assert parse_plan_row("Lunes,Agua\n") == ("Lunes", Food("Agua"))


@pytest.mark.parametrize("line", ["", "\n", "Lunes\n", ",,,"])
def test_parse_plan_row_without_name_is_none(line):
    assert parse_plan_row(line) is None