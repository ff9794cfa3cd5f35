"""Engine objects with runtime class information, casts and a class registry."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional, TypeVar, Union

from junglecore.factory import construct_object
from junglecore.names import Name
from junglecore.vector import Vector4

NO_INDEX = 0xFFFFFFFF
"""Internal index of an object that has not been placed in an object array."""

T = TypeVar("T", bound="UObject")


class UClass:
    """Runtime description of an object class and its place in the hierarchy."""

    __slots__ = ("_name", "_super_class", "creator")

    def __init__(
        self,
        class_name: str,
        super_class: Optional[UClass] = None,
        creator: Optional[Callable[[], Any]] = None,
    ) -> None:
        self._name = Name(class_name)
        self._super_class = super_class
        self.creator = creator

    @property
    def name(self) -> Name:
        """The class name."""
        return self._name

    @property
    def super_class(self) -> Optional[UClass]:
        """The parent class, or ``None`` at the root of the hierarchy."""
        return self._super_class

    def is_child_of(self, some_base: Optional[UClass]) -> bool:
        """Whether this class is ``some_base`` or derives from it."""
        if some_base is None:
            return False
        current: Optional[UClass] = self
        while current is not None:
            if current is some_base:
                return True
            current = current._super_class
        return False

    def create_object(self) -> Any:
        """A new object made by the class's creator, or ``None`` without one."""
        if self.creator is None:
            return None
        return self.creator()

    def __repr__(self) -> str:
        return f"UClass({self._name.to_string()!r})"


class ClassRegistry:
    """Looks classes up by name; names compare ignoring case."""

    def __init__(self) -> None:
        self._registry: dict[Name, UClass] = {}

    def __len__(self) -> int:
        return len(self._registry)

    def register(self, uclass: UClass) -> None:
        """Register ``uclass`` under its name, replacing any earlier entry."""
        self._registry[uclass.name] = uclass

    def find_class_by_name(self, class_name: Union[str, Name]) -> Optional[UClass]:
        """The class registered under ``class_name``, or ``None``."""
        key = class_name if isinstance(class_name, Name) else Name(class_name)
        return self._registry.get(key)


CLASS_REGISTRY = ClassRegistry()


def _as_uclass(target: Union[UClass, type, None]) -> Optional[UClass]:
    if target is None or isinstance(target, UClass):
        return target
    if isinstance(target, type) and issubclass(target, UObject):
        return target.static_class()
    raise TypeError(f"expected a UClass or a UObject subclass, got {target!r}")


class UObject:
    """Base of every engine object.

    Each subclass gets its own :class:`UClass`, linked to its parent's and
    entered in the global class registry; that class creates new instances
    through the object factory.
    """

    _uclass: ClassVar[UClass]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        parent = next(base for base in cls.__bases__ if issubclass(base, UObject))
        uclass = UClass(cls.__name__, parent.static_class(), lambda: construct_object(cls))
        cls._uclass = uclass
        CLASS_REGISTRY.register(uclass)

    def __init__(self) -> None:
        self.uuid = 0
        self.internal_index = NO_INDEX
        self.fname = Name("None")
        self.uclass: Optional[UClass] = type(self).static_class()

    @classmethod
    def static_class(cls) -> UClass:
        """The runtime class of this Python class."""
        return cls._uclass

    @property
    def name(self) -> str:
        """The object's name as text."""
        return self.fname.to_string()

    def is_a(self, some_base: Union[UClass, type]) -> bool:
        """Whether this object's class is ``some_base`` or derives from it."""
        if self.uclass is None:
            return False
        return self.uclass.is_child_of(_as_uclass(some_base))

    def encode_uuid(self) -> Vector4:
        """The UUID spread over four components, one byte each."""
        uuid = self.uuid
        return Vector4(
            float(uuid % 0xFF),
            float((uuid >> 8) & 0xFF),
            float((uuid >> 16) & 0xFF),
            float((uuid >> 24) & 0xFF),
        )

    def duplicate(self: T) -> T:
        """A fresh object of the same type, filled in by :meth:`duplicate_sub_objects`."""
        new_object = type(self)()
        new_object.duplicate_sub_objects(self)
        return new_object

    def duplicate_sub_objects(self, source: UObject) -> None:
        """Take over the runtime class of ``source``; subclasses extend this."""
        self.uclass = source.uclass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, uuid={self.uuid})"


UObject._uclass = UClass("UObject")


def cast(obj: Optional[UObject], target: Union[UClass, type]) -> Optional[UObject]:
    """``obj`` if it is of class ``target`` or derived from it, else ``None``."""
    if obj is None:
        return None
    uclass = _as_uclass(target)
    if isinstance(target, type) and isinstance(obj, target):
        return obj
    if isinstance(obj, UObject) and obj.is_a(uclass):
        return obj
    return None


def cast_checked(obj: Optional[UObject], target: Union[UClass, type]) -> UObject:
    """Like :func:`cast`, but raises TypeError instead of returning ``None``."""
    if obj is None:
        raise TypeError("cannot cast None")
    result = cast(obj, target)
    if result is None:
        raise TypeError(f"{obj!r} is not a {target!r}")
    return result