from meal_prep_calculator.cli import cli

cli(prog_name="mealprep")
