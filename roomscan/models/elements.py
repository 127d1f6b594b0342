"""Fixtures detected on a wall's surface."""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field

from .geometry import Point3D, Size2D


class OutletType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    USB = "usb"
    GFCI = "gfci"


class WindowType(str, Enum):
    STANDARD = "standard"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BAY = "bay"
    SKYLIGHT = "skylight"


class DoorType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    SLIDING = "sliding"
    FRENCH = "french"


class Outlet(BaseModel):
    kind: Literal["outlet"] = "outlet"
    position: Point3D
    size: Size2D = Size2D(width=0.1, height=0.1)
    outlet_type: OutletType = OutletType.SINGLE
    confidence: float = 0.8


class Switch(BaseModel):
    kind: Literal["switch"] = "switch"
    position: Point3D
    size: Size2D = Size2D(width=0.08, height=0.12)
    gang_count: int = 1
    confidence: float = 0.75


class Window(BaseModel):
    kind: Literal["window"] = "window"
    position: Point3D
    size: Size2D
    window_type: WindowType = WindowType.STANDARD
    confidence: float = 0.85


class Door(BaseModel):
    kind: Literal["door"] = "door"
    position: Point3D
    size: Size2D
    door_type: DoorType = DoorType.SINGLE
    confidence: float = 0.9


# Tagged union; `kind` is the wire discriminator
WallElement = Annotated[
    Union[Outlet, Switch, Window, Door],
    Field(discriminator="kind"),
]
