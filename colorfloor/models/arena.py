from pydantic import BaseModel, Field

from .color import Color

Vec3 = tuple[float, float, float]


class Pad(BaseModel):
    name: str
    position: Vec3
    size: Vec3 = (4.0, 1.0, 4.0)
    teleport_location: Vec3 | None = None
    color: Color | None = None

    @property
    def color_name(self) -> str | None:
        return self.color.name if self.color else None

    def contains_below(self, point: Vec3, probe_depth: float) -> bool:
        """Whether a downward probe of ``probe_depth`` from ``point`` lands on this pad's top face."""
        px, py, pz = self.position
        sx, sy, sz = self.size
        x, y, z = point
        if abs(x - px) > sx / 2 or abs(z - pz) > sz / 2:
            return False
        height = y - (py + sy / 2)
        return 0 <= height <= probe_depth


class Screen(BaseModel):
    name: str
    color: Color | None = None
    target_color_name: str | None = None
    label: str = ""


class MapTemplate(BaseModel):
    name: str = "Overworld"
    pads: list[Pad] | None = Field(default_factory=list)
    screens: list[Screen] | None = None


class ArenaLayout(BaseModel):
    template: MapTemplate | None = None
    lobby_spawn: Vec3 | None = None
    loser_spawn: Vec3 | None = None


class PadContainer(BaseModel):
    map_name: str
    pads: list[Pad] = Field(default_factory=list)


class ScreenContainer(BaseModel):
    screens: list[Screen] = Field(default_factory=list)


class RoundMap(BaseModel):
    name: str
    pads: PadContainer | None = None
    screens: ScreenContainer | None = None


def grid_layout(rows: int = 6, cols: int = 6, spacing: float = 6.0) -> ArenaLayout:
    """A square floor of pads with a lobby to one side and a loser pit to the other."""
    pads = [
        Pad(name=f"Pad_{row}_{col}", position=(col * spacing, 0.0, row * spacing))
        for row in range(rows)
        for col in range(cols)
    ]
    screens = [Screen(name="NorthScreen"), Screen(name="SouthScreen")]
    width = cols * spacing
    return ArenaLayout(
        template=MapTemplate(pads=pads, screens=screens),
        lobby_spawn=(-20.0, 5.0, 0.0),
        loser_spawn=(width + 20.0, 5.0, 0.0),
    )
