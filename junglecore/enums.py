"""Editor enumerations and icon font code points."""

from __future__ import annotations

from enum import IntEnum


class ObjectType(IntEnum):
    """Kinds of object the editor can spawn."""

    SPHERE = 0
    CUBE = 1
    SPOT_LIGHT = 2
    PARTICLE = 3
    TEXT = 4
    FOG = 5
    TRIANGLE = 6
    CAMERA = 7
    PLAYER = 8
    HEIGHT_FOG = 9
    DIRECTIONAL_LIGHT = 10
    POINT_LIGHT = 11
    FIREBALL = 12


class ArrowDir(IntEnum):
    """Axis of a gizmo arrow."""

    X = 0
    Y = 1
    Z = 2


class ControlMode(IntEnum):
    """What a gizmo drag changes."""

    TRANSLATION = 0
    ROTATION = 1
    SCALE = 2


class CoordiMode(IntEnum):
    """Coordinate space a gizmo works in."""

    WORLD = 0
    LOCAL = 1


class PrimitiveColor(IntEnum):
    """Colour slot of a gizmo part."""

    RED_X = 0
    GREEN_Y = 1
    BLUE_Z = 2
    NONE = 3
    RED_X_ROT = 4
    GREEN_Y_ROT = 5
    BLUE_Z_ROT = 6


class Icon(IntEnum):
    """Code points of the icon font glyphs."""

    MOVE = 0xE9BC
    ROTATE = 0xE9D3
    SCALE = 0xE9AB
    MONITOR = 0xE9B7
    BAR_GRAPH = 0xE918
    NEW = 0xE96D
    SAVE = 0xE9D6
    LOAD = 0xE950
    MENU = 0xE9AD
    SLIDER = 0xE9C4
    PLUS = 0xE9C8
    PIE_PLAY = 0xE9A8
    PIE_PAUSE = 0xE99C
    PIE_STOP = 0xE9E4

    @property
    def char(self) -> str:
        """The glyph as a one-character string."""
        return chr(self.value)