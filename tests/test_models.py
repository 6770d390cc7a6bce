"""Tests for the recipe value objects and the ingredients block format."""

import dataclasses

import pytest

from bakingtime.lib.models import Ingredient, Recipe, Step, format_ingredients


class TestIngredients:
    def test_single_ingredient_block(self):
        ingredients = [Ingredient(quantity="2", measure="cups", ingredient="flour")]
        assert format_ingredients(ingredients) == "• flour (2 cups)\n"

    def test_block_keeps_source_order(self):
        ingredients = [
            Ingredient(quantity="2", measure="cups", ingredient="flour"),
            Ingredient(quantity="1", measure="TSP", ingredient="salt"),
        ]
        assert format_ingredients(ingredients) == (
            "• flour (2 cups)\n" "• salt (1 TSP)\n"
        )

    def test_no_ingredients_gives_empty_block(self):
        assert format_ingredients([]) == ""


class TestValueObjects:
    def test_recipe_is_immutable(self):
        recipe = Recipe(id="1", name="Pie", servings=8, ingredients="", steps=())
        with pytest.raises(dataclasses.FrozenInstanceError):
            recipe.name = "Cake"

    def test_step_is_immutable(self):
        step = Step(id="0", short_description="Intro", description="Intro")
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.video_url = "https://example.com/v.mp4"

    def test_step_video_is_optional(self):
        assert not Step(id="0", short_description="a", description="b").has_video
        assert Step(
            id="0", short_description="a", description="b", video_url="https://x/v.mp4"
        ).has_video
