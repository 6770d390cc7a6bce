from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from bakingtime.lib.client import FetchResult
from bakingtime.lib.models import Recipe, Step


class StepModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    short_description: str = Field(alias="shortDescription")
    description: str
    video_url: str = Field(alias="videoURL")

    @classmethod
    def from_step(cls, step: Step) -> "StepModel":
        return cls(
            id=step.id,
            short_description=step.short_description,
            description=step.description,
            video_url=step.video_url,
        )


class RecipeModel(BaseModel):
    id: str
    name: str
    servings: int
    ingredients: str
    steps: list[StepModel]

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeModel":
        return cls(
            id=recipe.id,
            name=recipe.name,
            servings=recipe.servings,
            ingredients=recipe.ingredients,
            steps=[StepModel.from_step(step) for step in recipe.steps],
        )


class RecipesResponse(BaseModel):
    recipes: list[RecipeModel]
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: FetchResult) -> "RecipesResponse":
        return cls(
            recipes=[RecipeModel.from_recipe(recipe) for recipe in result.recipes],
            error=str(result.error) if result.error else None,
        )
