"""Creation of registered engine objects with unique ids."""

from __future__ import annotations

import copy
import itertools
import logging
import threading
from typing import Any, TypeVar

from junglecore.names import Name
from junglecore.object_hash import OBJECT_ARRAY

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UUID_LIMIT = 1 << 32
_uuid_lock = threading.Lock()
_uuids = itertools.count()


def gen_uuid() -> int:
    """The next object id: 0, 1, 2, ... wrapping at 32 bits."""
    with _uuid_lock:
        value = next(_uuids) % _UUID_LIMIT
    logger.debug("Generate UUID : %d", value)
    return value


def _register(obj: Any, uclass: Any, name: str, uuid: int) -> None:
    obj.uclass = uclass
    obj.fname = Name(name)
    obj.uuid = uuid
    OBJECT_ARRAY.add_object(obj)


def construct_object(cls: type[T]) -> T:
    """Create an instance of ``cls`` named ``<Class>_<uuid>`` and register it."""
    uuid = gen_uuid()
    uclass = cls.static_class()  # type: ignore[attr-defined]
    name = f"{uclass.name}_{uuid}"
    obj = cls()
    _register(obj, uclass, name, uuid)
    logger.debug("Created New Object : %s", name)
    return obj


def construct_object_from(source: T) -> T:
    """Copy ``source`` into a new object named ``<Class>_Copy_<uuid>`` and register it."""
    uuid = gen_uuid()
    uclass = type(source).static_class()  # type: ignore[attr-defined]
    name = f"{uclass.name}_Copy_{uuid}"
    obj = copy.copy(source)
    _register(obj, uclass, name, uuid)
    logger.debug("Cloned Object : %s", name)
    return obj