import httpx
import pytest

from bakingtime.lib.client import RecipeClient


@pytest.fixture
def baking_payload():
    """Two recipes shaped like the published baking.json document."""
    return [
        {
            "id": 1,
            "name": "Nutella Pie",
            "ingredients": [
                {"quantity": 2, "measure": "CUP", "ingredient": "Graham Cracker crumbs"},
                {"quantity": 0.5, "measure": "TSP", "ingredient": "salt"},
            ],
            "steps": [
                {
                    "id": 0,
                    "shortDescription": "Recipe Introduction",
                    "description": "Recipe Introduction",
                    "videoURL": "https://example.com/intro.mp4",
                    "thumbnailURL": "",
                },
                {
                    "id": 1,
                    "shortDescription": "Starting prep",
                    "description": "1. Preheat the oven to 350°F.",
                    "videoURL": "",
                    "thumbnailURL": "",
                },
            ],
            "servings": 8,
            "image": "",
        },
        {
            "id": "2",
            "name": "Brownies",
            "ingredients": [
                {"quantity": "350", "measure": "G", "ingredient": "Bittersweet chocolate"},
            ],
            "steps": [],
            "servings": "8",
            "image": "",
        },
    ]


class ClosingMockTransport(httpx.MockTransport):
    """MockTransport that counts how often the owning client released it."""

    def __init__(self, handler):
        super().__init__(handler)
        self.close_calls = 0
        self.aclose_calls = 0

    def close(self) -> None:
        self.close_calls += 1

    async def aclose(self) -> None:
        self.aclose_calls += 1


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def make_client(requests_seen):
    """Build a RecipeClient whose HTTP traffic is answered by ``handler``."""

    def _make(handler, **kwargs):
        def record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return RecipeClient(transport=ClosingMockTransport(record), **kwargs)

    return _make
