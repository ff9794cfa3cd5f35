from junglecore.factory import construct_object, construct_object_from, gen_uuid
from junglecore.names import Name
from junglecore.object_hash import OBJECT_ARRAY, get_objects_of_class
from junglecore.uobject import UObject, cast


class Widget(UObject):
    def __init__(self):
        super().__init__()
        self.payload = []


class Gizmo(Widget):
    pass


def test_gen_uuid_is_consecutive():
    first = gen_uuid()
    second = gen_uuid()
    assert second == first + 1


def test_construct_object():
    obj = construct_object(Widget)
    assert isinstance(obj, Widget)
    assert obj.uclass is Widget.static_class()
    assert obj.name == f"Widget_{obj.uuid}"
    assert obj.fname == Name(f"Widget_{obj.uuid}")
    assert obj in OBJECT_ARRAY
    assert obj in get_objects_of_class(Widget.static_class(), False)


def test_construct_object_ids_increase():
    objects = [construct_object(Widget) for _ in range(3)]
    start = objects[0].uuid
    assert [obj.uuid for obj in objects] == [start, start + 1, start + 2]


def test_derived_object_visible_from_base_class():
    gizmo = construct_object(Gizmo)
    assert gizmo in get_objects_of_class(Widget.static_class(), True)
    assert gizmo not in get_objects_of_class(Widget.static_class(), False)


def test_construct_object_from():
    source = construct_object(Widget)
    source.payload.append("part")
    clone = construct_object_from(source)
    assert clone is not source
    assert isinstance(clone, Widget)
    assert clone.uuid > source.uuid
    assert clone.name == f"Widget_Copy_{clone.uuid}"
    assert clone.payload == ["part"]
    assert clone.uclass is Widget.static_class()
    assert clone in OBJECT_ARRAY
    assert source in OBJECT_ARRAY


def test_class_creator_uses_factory():
    obj = Widget.static_class().create_object()
    assert cast(obj, Widget) is obj
    assert obj.name == f"Widget_{obj.uuid}"
    assert obj in OBJECT_ARRAY
    assert obj in get_objects_of_class(Widget.static_class(), False)