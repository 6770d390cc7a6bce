from functools import lru_cache
from typing import Optional
from fastapi import APIRouter, Depends, Response, status

from bakingtime.config import Settings, load_settings
from bakingtime.lib.client import RecipeClient
from bakingtime.web.models import RecipesResponse

router = APIRouter()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def get_recipe_client(settings: Settings = Depends(get_settings)) -> RecipeClient:
    return RecipeClient(
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
    )


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/recipes", response_model=RecipesResponse)
async def get_recipes(
    response: Response,
    url: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    recipe_client: RecipeClient = Depends(get_recipe_client),
):
    result = await recipe_client.fetch_async(url or settings.recipes_url)
    if not result.ok:
        response.status_code = status.HTTP_502_BAD_GATEWAY

    return RecipesResponse.from_result(result)
