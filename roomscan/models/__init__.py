from .geometry import (
    Point2D, Point3D, Vector3D, Size2D, Bounds2D, Bounds3D,
    centroid, shoelace_area,
)
from .elements import (
    Outlet, Switch, Window, Door, WallElement,
    OutletType, WindowType, DoorType,
)
from .building import (
    Wall, WallTexture, Gap, Room, RoomType, element_label, new_id,
)
from .observation import PlaneObservation, TrackingState, identity_pose
from .plan import FloorPlan, WallSegment, ElementMarker
from .parameters import ReconstructionParams
from .context import ReconstructionContext, PassState

__all__ = [
    "Point2D", "Point3D", "Vector3D", "Size2D", "Bounds2D", "Bounds3D",
    "centroid", "shoelace_area",
    "Outlet", "Switch", "Window", "Door", "WallElement",
    "OutletType", "WindowType", "DoorType",
    "Wall", "WallTexture", "Gap", "Room", "RoomType", "element_label", "new_id",
    "PlaneObservation", "TrackingState", "identity_pose",
    "FloorPlan", "WallSegment", "ElementMarker",
    "ReconstructionParams",
    "ReconstructionContext", "PassState",
]
