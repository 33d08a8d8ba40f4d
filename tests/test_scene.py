from dataclasses import dataclass

import numpy as np
import pytest

from cosmolview.scene import (
    Animation,
    Lighting,
    Scene,
    ShapeNotFoundError,
)


@dataclass
class FakeShape:
    value: float

    def interpolate(self, other, t):
        return FakeShape(self.value * (1 - t) + other.value * t)


def test_add_and_replace_named_shape():
    scene = Scene()
    scene.add_shape_with_id("a", FakeShape(1.0))
    scene.replace_shape("a", FakeShape(2.0))
    assert scene.named_shapes["a"] == FakeShape(2.0)


def test_replace_missing_shape_raises():
    scene = Scene()
    with pytest.raises(ShapeNotFoundError) as info:
        scene.replace_shape("missing", FakeShape(1.0))
    assert "missing" in str(info.value)


def test_remove_shape_and_missing_remove():
    scene = Scene()
    scene.add_shape_with_id("a", FakeShape(1.0))
    scene.remove_shape("a")
    assert "a" not in scene.named_shapes
    with pytest.raises(ShapeNotFoundError):
        scene.remove_shape("a")


def test_add_unnamed_shapes_keeps_order():
    scene = Scene()
    scene.add_shape(FakeShape(1.0))
    scene.add_shape(FakeShape(2.0))
    assert scene.unnamed_shapes == [FakeShape(1.0), FakeShape(2.0)]


def test_background_colors():
    scene = Scene()
    scene.set_background_color([0.2, 0.4, 0.6])
    assert scene.background_color == pytest.approx((0.2, 0.4, 0.6))
    scene.use_black_background()
    assert scene.background_color == (0.0, 0.0, 0.0)


def test_model_matrix_moves_scaled_center_to_origin():
    scene = Scene()
    scene.recenter([1.0, 2.0, 3.0])
    scene.set_scale(2.0)
    point = np.append(np.array(scene.scene_center) * scene.scale, 1.0)
    assert np.allclose(scene.model_matrix() @ point, [0.0, 0.0, 0.0, 1.0])


def test_normal_matrix_of_translation_is_identity():
    scene = Scene()
    scene.recenter([5.0, -1.0, 2.0])
    assert np.allclose(scene.normal_matrix(), np.eye(3))


def test_merge_shapes_copies_everything_as_unnamed():
    target = Scene()
    target.add_shape_with_id("keep", FakeShape(0.0))
    other = Scene()
    other.add_shape_with_id("x", FakeShape(1.0))
    other.add_shape(FakeShape(2.0))
    target.merge_shapes(other)
    assert target.unnamed_shapes == [FakeShape(1.0), FakeShape(2.0)]
    assert list(target.named_shapes) == ["keep"]
    target.unnamed_shapes[0].value = 99.0
    assert other.named_shapes["x"] == FakeShape(1.0)


def test_default_lighting():
    light = Lighting()
    assert light.ambient.intensity == pytest.approx(0.1)
    assert light.directionals.direction == pytest.approx((-1000.0, 1000.0, 5000.0))
    assert light.points is None


def test_add_camera_light():
    scene = Scene()
    light = Lighting()
    scene.add_camera_light(light)
    assert scene.camera_lights is light


def _pair():
    a = Scene()
    a.add_shape_with_id("s", FakeShape(0.0))
    a.add_shape_with_id("only_a", FakeShape(5.0))
    a.add_shape(FakeShape(1.0))
    a.add_shape(FakeShape(3.0))
    a.recenter([0.0, 0.0, 0.0])
    a.set_scale(1.0)
    a.add_camera_light(Lighting())
    b = Scene()
    b.add_shape_with_id("s", FakeShape(10.0))
    b.add_shape(FakeShape(7.0))
    b.recenter([2.0, 4.0, 6.0])
    b.set_scale(3.0)
    b.use_black_background()
    return a, b


def test_interpolate_endpoints():
    a, b = _pair()
    start = a.interpolate(b, 0.0)
    end = a.interpolate(b, 1.0)
    assert start.scene_center == pytest.approx(a.scene_center)
    assert end.scene_center == pytest.approx(b.scene_center)
    assert start.scale == pytest.approx(a.scale)
    assert end.scale == pytest.approx(b.scale)
    assert end.named_shapes["s"] == b.named_shapes["s"]


def test_interpolate_keeps_common_shapes_and_own_settings():
    a, b = _pair()
    mid = a.interpolate(b, 0.5)
    assert set(mid.named_shapes) == {"s"}
    assert len(mid.unnamed_shapes) == min(len(a.unnamed_shapes), len(b.unnamed_shapes))
    assert mid.background_color == a.background_color
    assert mid.camera_lights is None


def test_animation_interval_in_milliseconds():
    anim = Animation(0.05, -1, True)
    assert anim.interval == 50
    assert anim.loops == -1
    assert anim.frames == []


def test_animation_negative_interval_clamps():
    assert Animation(-1.0, 1, False).interval == 0


def test_animation_frames_and_static_scene():
    anim = Animation(0.1, 2, False)
    first, second, static = Scene(), Scene(), Scene()
    anim.add_frame(first)
    anim.add_frame(second)
    anim.set_static_scene(static)
    assert anim.frames == [first, second]
    assert anim.static_scene is static
    assert anim.interpolate is False