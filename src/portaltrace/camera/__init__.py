"""Camera module for view and ray generation.

Components:
    pinhole: Pinhole (perspective) camera model

Camera responsibilities:
    - Transform normalized device coordinates to world-space rays
    - Map pixel coordinates to device coordinates for any aspect ratio
    - Stay immutable so render workers and portal textures can share it

Ray generation uses normalized device coordinates:
    nx in [-1, 1]: left to right across the larger image dimension
    ny in [-1, 1]: top to bottom across the larger image dimension
"""

from .pinhole import PinholeCamera

__all__ = [
    "PinholeCamera",
]
