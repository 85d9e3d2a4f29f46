from pydantic import BaseModel, ConfigDict


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    rgb: tuple[int, int, int]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


RED = Color(name="Red", rgb=(255, 0, 0))
YELLOW = Color(name="Yellow", rgb=(255, 255, 0))
GREEN = Color(name="Green", rgb=(0, 255, 0))
BLUE = Color(name="Blue", rgb=(0, 0, 255))
PURPLE = Color(name="Purple", rgb=(128, 0, 128))

PALETTE: tuple[Color, ...] = (RED, YELLOW, GREEN, BLUE, PURPLE)


def get_color(name: str, palette: tuple[Color, ...] = PALETTE) -> Color | None:
    for color in palette:
        if color.name == name:
            return color
    return None
