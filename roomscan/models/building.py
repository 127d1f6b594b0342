"""Building element models — walls, rooms and open corners."""

from __future__ import annotations
import uuid
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .elements import Door, Outlet, Switch, Window, WallElement
from .geometry import Bounds2D, Point3D, Vector3D, centroid


class WallTexture(str, Enum):
    WHITE_PAINT = "white_paint"
    BEIGE_PAINT = "beige_paint"
    GRAY_PAINT = "gray_paint"
    BRICK = "brick"
    WHITE_BRICK = "white_brick"
    WOOD = "wood"
    DARK_WOOD = "dark_wood"
    CONCRETE = "concrete"
    WALLPAPER = "wallpaper"
    TILE = "tile"
    STONE = "stone"
    MARBLE = "marble"

    @property
    def display_name(self) -> str:
        return _TEXTURE_INFO[self][0]

    @property
    def color_hex(self) -> str:
        return _TEXTURE_INFO[self][1]

    @property
    def roughness(self) -> float:
        return _TEXTURE_INFO[self][2]


_TEXTURE_INFO: dict[WallTexture, tuple[str, str, float]] = {
    WallTexture.WHITE_PAINT: ("White Paint", "#FFFFFF", 0.3),
    WallTexture.BEIGE_PAINT: ("Beige Paint", "#F5F5DC", 0.3),
    WallTexture.GRAY_PAINT: ("Gray Paint", "#808080", 0.3),
    WallTexture.BRICK: ("Red Brick", "#B22222", 0.8),
    WallTexture.WHITE_BRICK: ("White Brick", "#F0F0F0", 0.7),
    WallTexture.WOOD: ("Wood Panels", "#8B4513", 0.5),
    WallTexture.DARK_WOOD: ("Dark Wood", "#3E2723", 0.5),
    WallTexture.CONCRETE: ("Concrete", "#A9A9A9", 0.6),
    WallTexture.WALLPAPER: ("Wallpaper", "#FFE4E1", 0.2),
    WallTexture.TILE: ("Ceramic Tile", "#E0E0E0", 0.1),
    WallTexture.STONE: ("Stone", "#696969", 0.9),
    WallTexture.MARBLE: ("Marble", "#F8F8FF", 0.2),
}


def new_id() -> str:
    return uuid.uuid4().hex


class Wall(BaseModel):
    """
    A planar wall quad.

    Corners wind floor-then-ceiling: c0 -> c1 along the floor,
    c2 above c1, c3 above c0.
    """
    id: str = Field(default_factory=new_id)
    corners: list[Point3D] = Field(min_length=4, max_length=4)
    normal: Vector3D
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    plane_id: str = ""
    texture: WallTexture = WallTexture.WHITE_PAINT
    elements: list[WallElement] = []
    inferred: bool = False

    @property
    def width(self) -> float:
        return self.corners[0].distance_to(self.corners[1])

    @property
    def height(self) -> float:
        return self.corners[0].distance_to(self.corners[3])

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point3D:
        return centroid(self.corners)

    @property
    def bounds(self) -> Bounds2D:
        """Face rectangle in (x, y), the frame element detection works in."""
        return Bounds2D(
            left=min(c.x for c in self.corners),
            top=min(c.y for c in self.corners),
            right=max(c.x for c in self.corners),
            bottom=max(c.y for c in self.corners),
        )


class Gap(BaseModel):
    """An unmatched wall corner, live for one reconstruction pass."""
    model_config = ConfigDict(frozen=True)

    position: Point3D
    normal: Vector3D
    wall_id: str = ""


class RoomType(str, Enum):
    LIVING_ROOM = "living_room"
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    KITCHEN = "kitchen"
    DINING_ROOM = "dining_room"
    CLOSET = "closet"
    HALLWAY = "hallway"
    GENERIC = "generic"

    @property
    def display_name(self) -> str:
        if self is RoomType.GENERIC:
            return "Room"
        return self.value.replace("_", " ").title()


class Room(BaseModel):
    """
    A single room: walls in detection order.

    No two walls may share a plane id. Construction keeps the first wall
    per plane and `add_wall` ignores a wall whose plane is already present.
    """
    id: str = Field(default_factory=new_id)
    walls: list[Wall] = []
    name: str = "Untitled Room"

    @field_validator("walls")
    @classmethod
    def _unique_planes(cls, walls: list[Wall]) -> list[Wall]:
        planes: set[str] = set()
        kept: list[Wall] = []
        for w in walls:
            if w.plane_id and w.plane_id in planes:
                continue
            planes.add(w.plane_id)
            kept.append(w)
        return kept

    def add_wall(self, wall: Wall) -> bool:
        """Append a wall unless its plane is already present."""
        if wall.plane_id and any(w.plane_id == wall.plane_id for w in self.walls):
            return False
        self.walls.append(wall)
        return True

    def get_wall(self, wall_id: str) -> Wall | None:
        for w in self.walls:
            if w.id == wall_id:
                return w
        return None

    def get_wall_by_plane(self, plane_id: str) -> Wall | None:
        if not plane_id:
            return None
        for w in self.walls:
            if w.plane_id == plane_id:
                return w
        return None

    @property
    def sensed_walls(self) -> list[Wall]:
        return [w for w in self.walls if not w.inferred]

    @property
    def total_area(self) -> float:
        return sum(w.area for w in self.walls)

    @property
    def total_elements(self) -> int:
        return sum(len(w.elements) for w in self.walls)

    def element_count(self, kind: str) -> int:
        return sum(1 for w in self.walls for e in w.elements if e.kind == kind)

    def estimate_room_type(self) -> RoomType:
        area = self.total_area
        doors = self.element_count("door")
        windows = self.element_count("window")

        if area < 10 and doors == 1 and windows == 0:
            return RoomType.BATHROOM
        if area < 15 and doors == 1:
            return RoomType.BEDROOM
        if area > 30 and windows > 2:
            return RoomType.LIVING_ROOM
        if doors == 0 and windows == 0:
            return RoomType.CLOSET
        return RoomType.GENERIC


def element_label(element: WallElement) -> str:
    """Plan marker tag for an element."""
    match element:
        case Door():
            return "door"
        case Window():
            return "window"
        case Outlet():
            return "outlet"
        case Switch():
            return "switch"
    return "unknown"
