from dataclasses import dataclass, field

BULLET = "•"


@dataclass(frozen=True)
class Ingredient:
    quantity: str
    measure: str
    ingredient: str

    @property
    def bullet_line(self) -> str:
        return f"{BULLET} {self.ingredient} ({self.quantity} {self.measure})\n"


def format_ingredients(ingredients: list[Ingredient]) -> str:
    return "".join(item.bullet_line for item in ingredients)


@dataclass(frozen=True)
class Step:
    id: str
    short_description: str
    description: str
    video_url: str = ""

    @property
    def has_video(self) -> bool:
        return bool(self.video_url)


@dataclass(frozen=True)
class Recipe:
    id: str
    name: str
    servings: int
    ingredients: str
    steps: tuple[Step, ...] = field(default_factory=tuple)
