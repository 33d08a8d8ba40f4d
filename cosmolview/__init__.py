"""SDF reading, backbone hydrogen bonds, scenes, camera and animation playback."""

__version__ = "0.2.8"

__all__ = [
    "camera",
    "hbonds",
    "playback",
    "scene",
    "sdf",
    "structures",
]