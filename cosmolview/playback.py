"""Choosing which scene to show at a given moment of an animation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .camera import CameraState
from .scene import Animation, Scene


@dataclass(frozen=True)
class FrameSelection:
    """The scene to render now, with where it sits in the animation.

    ``frame_index`` and ``next_index`` are the two frames blended by ``t``
    when interpolation is on; ``finished`` marks that the last loop has ended
    and the final frame is being held.
    """

    scene: Scene
    static_scene: Optional[Scene]
    frame_index: int
    next_index: int
    t: float
    finished: bool


class AnimationPlayer:
    """Tracks playback time of an :class:`Animation` and picks frames.

    The clock starts on the first call to :meth:`frame_at`. Without
    interpolation a frame is only handed out when it differs from the last one
    handed out; otherwise every call yields a freshly blended scene.
    """

    def __init__(self, animation: Animation) -> None:
        if not animation.frames:
            raise ValueError("Animation must have at least one frame")
        self.animation = animation
        self.interpolate_enabled = animation.interpolate
        self.start_time: Optional[float] = None
        self.last_frame_id: Optional[int] = None

    def initial_camera(self) -> CameraState:
        """The first frame's camera, or the default camera if it has none."""
        camera = self.animation.frames[0].camera_state
        return camera if camera is not None else CameraState()

    def frame_at(self, now: float) -> Optional[FrameSelection]:
        """Select the scene for time ``now`` (seconds), or None if nothing changed."""
        animation = self.animation
        if self.start_time is None:
            self.start_time = now

        frames = animation.frames
        frame_count = len(frames)
        frame_duration = animation.interval / 1000.0
        total_duration = frame_duration * frame_count
        elapsed = now - self.start_time

        finished = False
        if animation.loops != -1:
            max_time = total_duration * max(animation.loops, 0)
            finished = elapsed >= max_time

        if frame_duration > 0.0:
            anim_time = math.fmod(elapsed, total_duration)
            frame_index = max(0, math.floor(anim_time / frame_duration))
            t = math.fmod(anim_time, frame_duration) / frame_duration
        else:
            frame_index = 0
            t = 0.0

        index_a = min(frame_index, frame_count - 1)
        index_b = index_a + 1 if index_a + 1 < frame_count else index_a
        static_scene = animation.static_scene

        if finished:
            last = frame_count - 1
            return FrameSelection(frames[last], static_scene, last, last, 0.0, True)

        if self.interpolate_enabled:
            scene = frames[index_a].interpolate(frames[index_b], t)
            return FrameSelection(scene, static_scene, index_a, index_b, t, False)

        if index_a == self.last_frame_id:
            return None
        self.last_frame_id = index_a
        return FrameSelection(frames[index_a], static_scene, index_a, index_b, t, False)