"""The interactive FitFuel menu."""

from __future__ import annotations

import argparse
import time
from dataclasses import replace
from pathlib import Path
from typing import Callable

from fitfuel.catalog import FoodCatalog, load_catalog
from fitfuel.console import Color, Console, clear_screen
from fitfuel.nutrition import Food, Goal, Sex, User, calorie_gap, summarize
from fitfuel.plan import DAYS, WeeklyPlan

CATALOG_FILE = "tabla_de_alimentos.csv"
PLAN_FILE = "plan_semanal.csv"
NAME_LIMIT = 99
SEPARATOR = "-------------------------\n"

MENU = (
    "Menu Principal\n",
    "1. Ingresar datos personales",
    "2. Cargar alimentos desde CSV",
    "3. Ver alimentos",
    "4. Agregar comida propia",
    "5. Agregar comida consumida",
    "6. Eliminar ultima comida ingerida",
    "7. Conteo de calorias y meta diaria",
    "8. Ver historial de alimentos",
    "9. Planificar plan semanal",
    "10. Mostrar plan semanal",
    "11. Salir",
    "Seleccione una opcion: ",
)
EXIT_OPTION = 11


def _food_block(food: Food) -> str:
    return (
        f"Alimento: {food.name}\n"
        f"Calorias: {food.calories}\n"
        f"Proteinas: {food.protein:.2f} g\n"
        f"Carbohidratos: {food.carbs:.2f} g\n"
        f"Grasas: {food.fat:.2f} g\n"
        f"Fibra: {food.fiber:.2f} g\n"
        + SEPARATOR
    )


def _parse_int(text: str, default: int | None = None) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return default


class FitFuelApp:
    """Menu-driven nutrition tracker reading answers from input_func."""

    def __init__(self, console: Console | None = None,
                 input_func: Callable[[], str] = input, workdir="."):
        self.console = console if console is not None else Console()
        self._input = input_func
        self.workdir = Path(workdir)
        self.user: User | None = None
        self.catalog: FoodCatalog | None = None
        self.history: list[Food] = []
        self.plan = WeeklyPlan()

    # -- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        self.console.stream.write(text)
        self.console.stream.flush()

    def _red(self, text: str) -> None:
        self.console.write_colored(text, Color.RED)

    def _green(self, text: str) -> None:
        self.console.write_colored(text, Color.GREEN)

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._input()

    def _ask_int(self, prompt: str) -> int:
        while True:
            value = _parse_int(self._ask(prompt))
            if value is not None:
                return value
            self._red("Entrada no valida. Ingrese un numero entero.\n")

    def _ask_float(self, prompt: str) -> float:
        while True:
            try:
                return float(self._ask(prompt).strip())
            except ValueError:
                self._red("Entrada no valida. Ingrese un numero.\n")

    def _clear(self) -> None:
        isatty = getattr(self.console.stream, "isatty", None)
        if isatty is not None and isatty():
            clear_screen()

    # -- main loop --------------------------------------------------------

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        try:
            self._load_previous_plan()
            self.console.progressive("Bienvenido a FitFuel!\n\n", 10)
            actions = {
                1: self.enter_user_data,
                2: self.load_foods,
                3: self.show_foods,
                4: self.add_custom_food,
                5: self.add_consumed_food,
                6: self.remove_last_food,
                7: self.daily_report,
                8: self.show_history,
                9: self.plan_week,
                10: self.show_plan,
            }
            while True:
                for line in MENU:
                    self.console.progressive(line, 1)
                option = _parse_int(self._input())
                self._clear()
                if option == EXIT_OPTION:
                    break
                action = actions.get(option)
                if action is None:
                    self._red("Opcion no valida.\n")
                else:
                    action()
        except EOFError:
            self._write("\n")
        self._write("Saliendo de FitFuel. Hasta luego!\n")

    def _load_previous_plan(self) -> None:
        answer = self._ask("Deseas cargar tu plan semanal anterior? (S/N): ").strip()
        if answer[:1] not in ("S", "s") or not answer:
            self.plan = WeeklyPlan()
            return
        try:
            self.plan = WeeklyPlan.import_csv(self.workdir / PLAN_FILE)
        except OSError:
            self._red("No se pudo cargar el plan anterior. Se creara uno nuevo.\n")
            self.plan = WeeklyPlan()
        else:
            self._green("Plan semanal anterior cargado exitosamente.\n")

    # -- menu actions -----------------------------------------------------

    def enter_user_data(self) -> User:
        """Ask for personal data and show BMI and daily calories."""
        height = self._ask_int("Ingrese su altura en cm: ")
        while height <= 0:
            self._red("La altura debe ser positiva.\n")
            height = self._ask_int("Ingrese su altura en cm: ")
        weight = self._ask_int("\nIngrese su peso en kg: ")
        age = self._ask_int("\nIngrese su edad: ")
        while True:
            try:
                sex = Sex.parse(self._ask("\nIngrese su sexo (M/F): "))
                break
            except ValueError:
                self._red("Sexo no valido.\n")
        goal_number = self._ask_int(
            "\nIngrese su objetivo (1: ganar masa muscular, 2: perder grasa, "
            "3: recomposicion corporal): "
        )
        try:
            goal = Goal.parse(goal_number)
        except ValueError:
            self._write("Objetivo no valido. Se establecera a mantenimiento.\n")
            goal = None
        self.user = User(height, weight, age, sex, goal)
        self._write(
            "\nDatos ingresados:\n"
            f"Altura: {height} cm\n"
            f"Peso: {weight} kg\n"
            f"Edad: {age} anyos\n"
            f"Sexo: {sex.value}\n"
            f"Objetivo: {goal_number}\n"
            f"IMC: {self.user.bmi:.2f}\n"
            f"Calorias diarias recomendadas: {self.user.daily_calories}\n\n"
        )
        return self.user

    def load_foods(self) -> FoodCatalog | None:
        """Load the food table from the working directory."""
        try:
            self.catalog = load_catalog(self.workdir / CATALOG_FILE)
        except OSError as exc:
            self._write(f"Error al abrir el archivo: {exc.strerror or exc}\n")
            self.catalog = None
            self.console.progressive_colored("Error al cargar los alimentos.\n", Color.RED, 5)
        else:
            self.console.progressive_colored(
                "Alimentos cargados exitosamente.\n", Color.GREEN, 5
            )
        return self.catalog

    def show_foods(self) -> None:
        """List the catalog page by page."""
        if self.catalog is None:
            self._write("No hay alimentos cargados.\n")
            return
        per_page = self._ask_int("Ingrese la cantidad de alimentos que desea ver por pagina: \n")
        while per_page <= 0:
            self._red("La cantidad debe ser positiva.\n")
            per_page = self._ask_int(
                "Ingrese la cantidad de alimentos que desea ver por pagina: \n"
            )
        for number, page in enumerate(self.catalog.pages(per_page), 1):
            for food in page:
                self._write(_food_block(food))
            self._write(f"Pagina {number}\n")
            if len(page) == per_page:
                self._write("Presione Enter para continuar...\n")
                self._input()
        self._write("\nFin de la lista de alimentos.\n\n")

    def add_custom_food(self) -> Food:
        """Ask for a new food and add it to the catalog."""
        name = self._ask("Ingrese el nombre del alimento: ").split("\n", 1)[0][:NAME_LIMIT]
        calories = self._ask_int("Ingrese el valor nutricional (calorias): ")
        protein = self._ask_float("Ingrese la cantidad de proteinas (g): ")
        carbs = self._ask_float("Ingrese la cantidad de carbohidratos (g): ")
        fat = self._ask_float("Ingrese la cantidad de grasas (g): ")
        fiber = self._ask_float("Ingrese la cantidad de fibra (g): ")
        food = Food(name, calories, protein, carbs, fat, fiber)
        if self.catalog is None:
            self.catalog = FoodCatalog()
        self.catalog.add(food)
        self._write("Nuevo alimento agregado exitosamente.\n\n")
        return food

    def add_consumed_food(self) -> Food | None:
        """Search the catalog and add the chosen food to today's history."""
        query = self._ask("Ingrese parte del nombre del alimento consumido: ")
        matches = self.catalog.search(query) if self.catalog is not None else []
        if not matches:
            self._red("No se encontraron alimentos que coincidan con la busqueda.\n")
            return None
        self._green("\nResultados encontrados:\n\n")
        for index, food in enumerate(matches):
            self._write(f"[{index}] {food.name} - {food.calories} kcal\n")
        index = _parse_int(
            self._ask("\nSeleccione el numero del alimento que desea agregar al historial: "),
            -1,
        )
        if not 0 <= index < len(matches):
            self._red("Indice invalido. No se agrego ningun alimento.\n")
            return None
        chosen = replace(matches[index])
        self.history.append(chosen)
        self._green("Alimento agregado al historial correctamente.\n\n")
        return chosen

    def remove_last_food(self) -> Food | None:
        """Remove and return the most recently consumed food."""
        if not self.history:
            self._write("No hay alimentos en el historial para eliminar.\n")
            return None
        food = self.history.pop()
        self._write(f"Se ha eliminado el alimento: '{food.name}'\n\n")
        return food

    def daily_report(self):
        """Show today's totals and how they compare with the calorie goal."""
        if not self.history:
            self.console.progressive_colored("No hay alimentos en el historial.\n", Color.RED, 5)
            return None
        if self.user is None:
            self.console.progressive_colored(
                "Primero ingrese sus datos personales.\n", Color.RED, 5
            )
            return None
        self.console.progressive("Calculando conteo de calorias y meta diaria...\n", 1)
        time.sleep(2.0 * self.console.delay_scale)
        totals = summarize(self.history)
        target = self.user.daily_calories
        say = self.console.progressive
        say("Conteo de calorias y meta diaria:\n", 5)
        say(f"Calorias diarias recomendadas: {target}", 5)
        self.console.progressive_colored("Analisis:\n", Color.GREEN, 5)
        say(f"Total de calorias consumidas: {totals.calories}", 5)
        say(f"Total de proteinas consumidas: {totals.protein:.2f} g", 5)
        say(f"Total de carbohidratos consumidos: {totals.carbs:.2f} g", 5)
        say(f"Total de grasas consumidas: {totals.fat:.2f} g", 5)
        say(f"Total de fibra consumida: {totals.fiber:.2f} g\n", 5)
        missing = calorie_gap(totals.calories, target)
        if missing > 0:
            self.console.progressive_colored(
                "No se ha cumplido la meta de calorias diarias.", Color.RED, 5
            )
            self.console.progressive_colored(
                f"Faltan {missing} calorias para alcanzar tu meta diaria.\n", Color.RED, 5
            )
        else:
            self.console.progressive_colored(
                "Meta de calorias diarias cumplida!", Color.GREEN, 5
            )
            self.console.progressive_colored(
                f"Te excediste por {-missing} calorias.", Color.GREEN, 5
            )
        return totals

    def show_history(self) -> None:
        """List every food consumed today."""
        if not self.history:
            self._write("No hay alimentos en el historial.\n")
            return
        for food in self.history:
            self._write(_food_block(food) + "\n")

    def plan_week(self) -> Path | None:
        """Ask for each day's foods, then export the plan as CSV."""
        if not self.catalog:
            self._write("No hay alimentos cargados.\n")
            return None
        for index, day in enumerate(DAYS):
            self._green(day)
            count = self._ask_int(" Cuantos alimentos desea agregar para este dia?: ")
            added = 0
            while added < count:
                term = self._ask(
                    f"\nIngrese una palabra clave para buscar el alimento "
                    f"#{added + 1} de {day}: "
                )
                matches = self.catalog.search(term)
                for number, food in enumerate(matches, 1):
                    self._write(f"{number}. {food.name} - Calorias: {food.calories}\n")
                if not matches:
                    self._red("No se encontraron alimentos con esa palabra. Intente con otra.\n")
                    continue
                choice = _parse_int(
                    self._ask("Seleccione el numero del alimento que desea agregar: \n"), 0
                )
                if not 1 <= choice <= len(matches):
                    self._red("Seleccion invalida. Intente nuevamente.\n")
                    continue
                self.plan.add(index, matches[choice - 1])
                added += 1
        path = self.workdir / PLAN_FILE
        try:
            self.plan.export_csv(path)
        except OSError as exc:
            self._red(f"No se pudo crear el archivo: {exc.strerror or exc}\n")
            return None
        self._write(f"\n Plan semanal guardado en '{path}'\n")
        self._green("\nPlan semanal creado y exportado exitosamente!\n")
        return path

    def show_plan(self) -> int:
        """Show the weekly plan with daily and weekly calories."""
        for day, foods in self.plan:
            self._green(day)
            self._write(":\n")
            if not foods:
                self._write("  (Sin alimentos registrados)\n\n")
                continue
            for food in foods:
                self._write(f"  - {food.name} ({food.calories} kcal)\n")
            self._write(f"  Calorias totales del dia: {self.plan.day_calories(day)} kcal\n\n")
        total = self.plan.week_calories()
        self._write(f"\n Calorias totales de la semana: {total} kcal\n\n")
        return total


def main(argv=None) -> int:
    """Start the interactive menu."""
    parser = argparse.ArgumentParser(prog="fitfuel", description="Nutrition tracker.")
    parser.add_argument("--workdir", default=".", help="directory holding the CSV files")
    parser.add_argument("--no-delay", action="store_true", help="print without pauses")
    args = parser.parse_args(argv)
    console = Console(delay_scale=0.0 if args.no_delay else 1.0)
    FitFuelApp(console, input, args.workdir).run()
    return 0