"""Scenes of shapes, lighting and frame animations."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

Vec3 = tuple[float, float, float]


def _vec3(value) -> Vec3:
    x, y, z = (float(v) for v in value)
    return (x, y, z)


class ShapeNotFoundError(LookupError):
    """Raised when a named shape does not exist in a scene."""

    def __init__(self, shape_id: str) -> None:
        super().__init__(f"Shape with ID '{shape_id}' not found")
        self.shape_id = shape_id

    def __str__(self) -> str:
        return self.args[0]


@dataclass
class AmbientLight:
    intensity: float
    color: Vec3


@dataclass
class DirectionalLight:
    direction: Vec3
    intensity: float
    color: Vec3


@dataclass
class PointLight:
    position: Vec3
    intensity: float
    color: Vec3


def _default_ambient() -> AmbientLight:
    return AmbientLight(intensity=0.1, color=(1.0, 1.0, 1.0))


def _default_directional() -> Optional[DirectionalLight]:
    return DirectionalLight(
        direction=(-1000.0, 1000.0, 5000.0),
        intensity=1.0,
        color=(1.0, 0.97, 0.97),
    )


@dataclass
class Lighting:
    """Lights attached to the camera."""

    ambient: AmbientLight = field(default_factory=_default_ambient)
    directionals: Optional[DirectionalLight] = field(default_factory=_default_directional)
    points: Optional[PointLight] = None


@dataclass
class Scene:
    """A collection of named and unnamed shapes with view settings."""

    background_color: Vec3 = (1.0, 1.0, 1.0)
    camera_state: Optional[Any] = None
    named_shapes: dict[str, Any] = field(default_factory=dict)
    unnamed_shapes: list[Any] = field(default_factory=list)
    scale: float = 1.0
    viewport: Optional[tuple[int, int]] = None
    scene_center: Vec3 = (0.0, 0.0, 0.0)
    camera_lights: Optional[Lighting] = None

    def recenter(self, center) -> None:
        self.scene_center = _vec3(center)

    def set_scale(self, scale: float) -> None:
        self.scale = float(scale)

    def add_shape_with_id(self, shape_id: str, shape: Any) -> None:
        """Add or overwrite a shape under ``shape_id``."""
        self.named_shapes[str(shape_id)] = shape

    def add_shape(self, shape: Any) -> None:
        self.unnamed_shapes.append(shape)

    def replace_shape(self, shape_id: str, shape: Any) -> None:
        """Replace an existing named shape; raise if there is none."""
        if shape_id not in self.named_shapes:
            raise ShapeNotFoundError(shape_id)
        self.named_shapes[shape_id] = shape

    def remove_shape(self, shape_id: str) -> None:
        if self.named_shapes.pop(shape_id, None) is None:
            raise ShapeNotFoundError(shape_id)

    def set_background_color(self, color) -> None:
        self.background_color = _vec3(color)

    def use_black_background(self) -> None:
        self.background_color = (0.0, 0.0, 0.0)

    def model_matrix(self) -> np.ndarray:
        """Model transform: translate the scaled scene centre to the origin."""
        matrix = np.eye(4, dtype=np.float32)
        matrix[:3, 3] = -np.asarray(self.scene_center, dtype=np.float32) * np.float32(self.scale)
        return matrix

    def normal_matrix(self) -> np.ndarray:
        """Inverse transpose of the model matrix's linear part."""
        linear = self.model_matrix()[:3, :3].astype(np.float64)
        return np.linalg.inv(linear).T.astype(np.float32)

    def merge_shapes(self, other: "Scene") -> None:
        """Append copies of all of ``other``'s shapes as unnamed shapes."""
        self.unnamed_shapes.extend(copy.deepcopy(s) for s in other.named_shapes.values())
        self.unnamed_shapes.extend(copy.deepcopy(s) for s in other.unnamed_shapes)

    def add_camera_light(self, light: Lighting) -> None:
        self.camera_lights = light

    def interpolate(self, other: "Scene", t: float) -> "Scene":
        """Blend towards ``other`` by ``t``.

        Named shapes present in both scenes and unnamed shapes paired by
        position are blended with their own ``interpolate`` method; centre and
        scale are blended linearly; other settings come from this scene.
        """
        named = {
            key: shape.interpolate(other.named_shapes[key], t)
            for key, shape in self.named_shapes.items()
            if key in other.named_shapes
        }
        unnamed = [a.interpolate(b, t) for a, b in zip(self.unnamed_shapes, other.unnamed_shapes)]
        center = tuple(a * (1.0 - t) + b * t for a, b in zip(self.scene_center, other.scene_center))
        return Scene(
            background_color=self.background_color,
            camera_state=self.camera_state,
            named_shapes=named,
            unnamed_shapes=unnamed,
            scale=self.scale * (1.0 - t) + other.scale * t,
            viewport=self.viewport,
            scene_center=_vec3(center),
            camera_lights=None,
        )


class Animation:
    """A sequence of scenes played at a fixed interval.

    ``interval`` is given in seconds and stored in whole milliseconds;
    ``loops`` of -1 repeats forever.
    """

    def __init__(self, interval: float, loops: int = -1, interpolate: bool = True) -> None:
        millis = float(np.float32(interval) * np.float32(1000.0))
        self.interval: int = max(0, int(millis))
        self.loops = int(loops)
        self.interpolate = bool(interpolate)
        self.frames: list[Scene] = []
        self.static_scene: Optional[Scene] = None

    def add_frame(self, frame: Scene) -> None:
        self.frames.append(frame)

    def set_static_scene(self, scene: Scene) -> None:
        self.static_scene = scene