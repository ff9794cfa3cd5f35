"""Tables of live objects by class, and the array that owns them."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Optional


class ObjectHashTables:
    """Records which objects belong to each class and each class's children."""

    def __init__(self) -> None:
        self._class_children: dict[Any, dict[Any, None]] = {}
        self._class_objects: dict[Any, dict[Any, None]] = {}

    @staticmethod
    def _class_of(obj: Any) -> Any:
        uclass = getattr(obj, "uclass", None)
        if uclass is None:
            raise ValueError(f"{obj!r} has no class")
        return uclass

    def add(self, obj: Any) -> None:
        """Record ``obj`` under its class and link the class to its ancestors."""
        uclass = self._class_of(obj)
        self._class_objects.setdefault(uclass, {})[obj] = None
        child, parent = uclass, uclass.super_class
        while parent is not None:
            self._class_children.setdefault(parent, {})[child] = None
            child, parent = parent, parent.super_class

    def remove(self, obj: Any) -> None:
        """Forget ``obj``.

        If ``obj`` was not recorded under its class, the class's whole
        object list is dropped.
        """
        uclass = self._class_of(obj)
        objects = self._class_objects.setdefault(uclass, {})
        if obj in objects:
            del objects[obj]
        else:
            del self._class_objects[uclass]

    def objects_of_class(self, uclass: Any, include_derived: bool = True) -> list[Any]:
        """Objects of ``uclass``, followed breadth first by those of its subclasses."""
        classes = [uclass]
        if include_derived:
            queue = deque([uclass])
            while queue:
                for child in self._class_children.get(queue.popleft(), ()):
                    classes.append(child)
                    queue.append(child)
        return [obj for search_class in classes for obj in self._class_objects.get(search_class, ())]


HASH_TABLES = ObjectHashTables()


class ObjectArray:
    """Owns live objects and those waiting to be destroyed."""

    def __init__(self, hash_tables: Optional[ObjectHashTables] = None) -> None:
        self._hash_tables = HASH_TABLES if hash_tables is None else hash_tables
        self._objects: dict[Any, None] = {}
        self._pending: list[Any] = []

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        return obj in self._objects

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._objects))

    @property
    def pending_destroy(self) -> tuple[Any, ...]:
        """Objects marked for removal and not yet destroyed."""
        return tuple(self._pending)

    def add_object(self, obj: Any) -> None:
        """Take ``obj`` into the array and the class tables."""
        self._objects[obj] = None
        self._hash_tables.add(obj)

    def mark_remove_object(self, obj: Any) -> None:
        """Take ``obj`` out of the array and queue it for destruction."""
        self._objects.pop(obj, None)
        self._hash_tables.remove(obj)
        if obj not in self._pending:
            self._pending.append(obj)

    def process_pending_destroy_objects(self) -> list[Any]:
        """Destroy the queued objects and return them."""
        destroyed, self._pending = self._pending, []
        return destroyed


OBJECT_ARRAY = ObjectArray(HASH_TABLES)


def add_to_class_map(obj: Any) -> None:
    """Record ``obj`` in the global class tables."""
    HASH_TABLES.add(obj)


def remove_from_class_map(obj: Any) -> None:
    """Forget ``obj`` in the global class tables."""
    HASH_TABLES.remove(obj)


def get_objects_of_class(uclass: Any, include_derived: bool = True) -> list[Any]:
    """Objects of ``uclass`` in the global tables, optionally with subclasses."""
    return HASH_TABLES.objects_of_class(uclass, include_derived)


def object_range(cls: Any, include_derived: bool = True) -> Iterator[Any]:
    """Iterate over the objects of Python class ``cls`` as they are now."""
    return iter([obj for obj in get_objects_of_class(cls.static_class(), include_derived) if obj is not None])