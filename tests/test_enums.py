import pytest

from junglecore.enums import (
    ArrowDir,
    ControlMode,
    CoordiMode,
    Icon,
    ObjectType,
    PrimitiveColor,
)


@pytest.mark.parametrize(
    "enum_cls", [ObjectType, ArrowDir, ControlMode, CoordiMode, PrimitiveColor]
)
def test_values_are_consecutive_from_zero(enum_cls):
    assert [member.value for member in enum_cls] == list(range(len(enum_cls)))


def test_object_type_order():
    assert ObjectType(0) is ObjectType.SPHERE
    assert ObjectType(1) is ObjectType.CUBE
    assert ObjectType(0) < ObjectType(1) < ObjectType.FIREBALL
    assert list(ObjectType)[-1] is ObjectType.FIREBALL


def test_primitive_color_rotation_after_none():
    assert PrimitiveColor(3) is PrimitiveColor.NONE
    assert PrimitiveColor(3) < PrimitiveColor(4)
    assert PrimitiveColor(4) is PrimitiveColor.RED_X_ROT
    assert PrimitiveColor(2) < PrimitiveColor(3)


def test_arrow_dir_lookup_by_value():
    assert ArrowDir(2) is ArrowDir.Z


@pytest.mark.parametrize(
    "icon, code",
    [
        (Icon.MOVE, 0xE9BC),
        (Icon.ROTATE, 0xE9D3),
        (Icon.SCALE, 0xE9AB),
        (Icon.SAVE, 0xE9D6),
        (Icon.PIE_PLAY, 0xE9A8),
        (Icon.PIE_STOP, 0xE9E4),
    ],
)
def test_icon_code_points(icon, code):
    assert icon == code


def test_icon_char():
    assert Icon(0xE950).char == "\ue950"
    assert all(ord(Icon(icon.value).char) == icon.value for icon in Icon)


def test_icon_code_points_unique():
    assert all(Icon(icon.value) is icon for icon in Icon)
    assert len({icon.value for icon in Icon}) == len(Icon)


def test_invalid_control_mode_raises():
    with pytest.raises(ValueError):
        ControlMode(7)