"""Fetch a recipes JSON document over HTTP and map it into domain objects.

Every fetch is a single blocking attempt (or a single awaited attempt for the
``*_async`` variants): no retries, and the HTTP client is opened and closed
within the call. Failures never escape ``fetch``/``fetch_recipes``; they are
logged and degrade to an empty result.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from bakingtime.lib.errors import (
    FetchError,
    HttpStatusError,
    MalformedRequestError,
    ParseError,
    TransportError,
)
from bakingtime.lib.models import Ingredient, Recipe, Step, format_ingredients

CONNECT_TIMEOUT = 15.0
READ_TIMEOUT = 10.0
HTTP_OK = 200


@dataclass(frozen=True)
class FetchResult:
    recipes: tuple[Recipe, ...] = ()
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecipeClient:
    def __init__(
        self,
        connect_timeout: float = CONNECT_TIMEOUT,
        read_timeout: float = READ_TIMEOUT,
        transport: Optional[httpx.BaseTransport | httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            connect_timeout: Seconds allowed to establish the connection.
            read_timeout: Seconds allowed between bytes of the response.
            transport: Optional httpx transport shared by the sync and async
                clients. It must support the call style used, e.g.
                ``httpx.MockTransport`` supports both.
        """
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self._transport = transport
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.read_timeout, connect=self.connect_timeout)

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.timeout, transport=self._transport, follow_redirects=True
        )

    def _async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport, follow_redirects=True
        )

    def create_url(self, request_url: Optional[str]) -> httpx.URL:
        if not request_url:
            raise MalformedRequestError("Request URL is empty")
        try:
            url = httpx.URL(request_url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise MalformedRequestError(
                f"Error with creating URL {request_url!r}"
            ) from exc

        if url.scheme not in ("http", "https") or not url.host:
            raise MalformedRequestError(
                f"URL {request_url!r} is not an absolute http(s) URL"
            )
        return url

    def make_http_request(self, url: httpx.URL) -> str:
        try:
            with self._client() as client:
                response = client.get(url)
        except httpx.RequestError as exc:
            raise TransportError(
                f"Problem retrieving the recipes JSON results from {url}"
            ) from exc
        return self._read_body(response)

    async def make_http_request_async(self, url: httpx.URL) -> str:
        try:
            async with self._async_client() as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            raise TransportError(
                f"Problem retrieving the recipes JSON results from {url}"
            ) from exc
        return self._read_body(response)

    @staticmethod
    def _read_body(response: httpx.Response) -> str:
        if response.status_code != HTTP_OK:
            raise HttpStatusError(response.status_code, response.reason_phrase)
        return response.content.decode("utf-8", errors="replace")

    def extract_recipes(self, body: Optional[str]) -> list[Recipe]:
        if not body:
            raise ParseError("Response body is empty")
        try:
            payload = json.loads(body)
        except (ValueError, RecursionError) as exc:
            raise ParseError("Problem parsing the recipes JSON results") from exc

        if not isinstance(payload, list):
            raise ParseError(
                f"Expected a JSON array of recipes, got {type(payload).__name__}"
            )
        return [
            extract_recipe(item, f"recipes[{index}]")
            for index, item in enumerate(payload)
        ]

    def fetch(self, request_url: Optional[str]) -> FetchResult:
        self.logger.debug(f"Fetching recipes from {request_url!r}")
        try:
            url = self.create_url(request_url)
            body = self.make_http_request(url)
            recipes = self.extract_recipes(body)
        except FetchError as exc:
            self._log_failure(exc)
            return FetchResult(error=exc)
        return FetchResult(recipes=tuple(recipes))

    async def fetch_async(self, request_url: Optional[str]) -> FetchResult:
        self.logger.debug(f"Fetching recipes from {request_url!r}")
        try:
            url = self.create_url(request_url)
            body = await self.make_http_request_async(url)
            recipes = self.extract_recipes(body)
        except FetchError as exc:
            self._log_failure(exc)
            return FetchResult(error=exc)
        return FetchResult(recipes=tuple(recipes))

    def fetch_recipes(self, request_url: Optional[str]) -> list[Recipe]:
        """Blocks the calling thread until the fetch completes or times out."""
        return list(self.fetch(request_url).recipes)

    async def fetch_recipes_async(self, request_url: Optional[str]) -> list[Recipe]:
        result = await self.fetch_async(request_url)
        return list(result.recipes)

    def _log_failure(self, exc: FetchError) -> None:
        cause = exc.__cause__
        if cause is not None:
            self.logger.error(f"Recipe fetch failed, {exc}", exc_info=cause)
        else:
            self.logger.error(f"Recipe fetch failed, {exc}")


def extract_recipe(data: Any, where: str) -> Recipe:
    data = _require_object(data, where)

    ingredients = [
        Ingredient(
            quantity=_get_string(item, "quantity", item_where),
            measure=_get_string(item, "measure", item_where),
            ingredient=_get_string(item, "ingredient", item_where),
        )
        for item, item_where in _iter_objects(data, "ingredients", where)
    ]
    steps = tuple(
        Step(
            id=_get_string(item, "id", item_where),
            short_description=_get_string(item, "shortDescription", item_where),
            description=_get_string(item, "description", item_where),
            video_url=_get_string(item, "videoURL", item_where),
        )
        for item, item_where in _iter_objects(data, "steps", where)
    )

    return Recipe(
        id=_get_string(data, "id", where),
        name=_get_string(data, "name", where),
        servings=_get_servings(data, "servings", where),
        ingredients=format_ingredients(ingredients),
        steps=steps,
    )


def _require_object(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise ParseError(f"{where} is not a JSON object")
    return value


def _get(data: dict, key: str, where: str) -> Any:
    if key not in data:
        raise ParseError(f"{where} has no value for {key!r}")
    return data[key]


def _get_string(data: dict, key: str, where: str) -> str:
    value = _get(data, key, where)
    # JSON numbers are accepted for string fields, e.g. "quantity": 2
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ParseError(f"{where}.{key} is not a string")
    return value if isinstance(value, str) else str(value)


def _get_servings(data: dict, key: str, where: str) -> int:
    value = _get(data, key, where)
    if isinstance(value, bool):
        raise ParseError(f"{where}.{key} is not an integer")

    if isinstance(value, int):
        servings = value
    elif isinstance(value, float) and value.is_integer():
        servings = int(value)
    elif isinstance(value, str):
        try:
            servings = int(value.strip())
        except ValueError as exc:
            raise ParseError(f"{where}.{key} is not an integer") from exc
    else:
        raise ParseError(f"{where}.{key} is not an integer")

    if servings < 0:
        raise ParseError(f"{where}.{key} must not be negative")
    return servings


def _iter_objects(data: dict, key: str, where: str):
    items = _get(data, key, where)
    if not isinstance(items, list):
        raise ParseError(f"{where}.{key} is not a JSON array")
    for index, item in enumerate(items):
        item_where = f"{where}.{key}[{index}]"
        yield _require_object(item, item_where), item_where


def fetch_recipes(request_url: Optional[str]) -> list[Recipe]:
    return RecipeClient().fetch_recipes(request_url)
