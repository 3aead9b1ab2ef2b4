"""Meal-prep calculator: recipe scaling, batch cooking time and container sizing."""
