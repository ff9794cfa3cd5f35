# junglecore

Runtime building blocks for a small game engine, in pure Python with no
dependencies: float vector and matrix math, quaternions, C-style string
helpers, interned names, delegates and a small object system with runtime
class information.

## Modules

- `junglecore.mathutil`: scalar helpers: `clamp`, `lerp`,
  `radians_to_degrees`, `degrees_to_radians`, `inv_sqrt`, `square`,
  `ceil_to_int`, `unwind_degrees`, `trunc`, `trunc_float`, `floor`, `max3`
  and `min3`, plus the constants `PI`, `SMALL_NUMBER` and
  `KINDA_SMALL_NUMBER`.
- `junglecore.vector`: immutable `Vector2D`, `Vector` and `Vector4`.
  `Vector` has `dot`, `cross`, `magnitude`, `magnitude_squared`, `normalize`,
  `distance` and `clamp_max_size`, and the constants `Vector.ZERO`, `ONE`,
  `FORWARD`, `RIGHT` and `UP`. `Vector4.xyz()` drops the last component.
- `junglecore.color`: `LinearColor` with arithmetic, `clamp`, `lerp` and
  the constants `WHITE`, `BLACK`, `RED`, `GREEN` and `BLUE`. A colour built
  with no arguments is all zeros; otherwise alpha defaults to one.
- `junglecore.matrix`: an immutable 4×4 `Matrix` using row vectors, with
  `+`, `-`, `*`, `@`, `/`, `transpose`, `determinant`, `inverse` (a nearly
  singular matrix gives the identity), the builders `identity`,
  `create_rotation`, `create_scale` and `create_translation`, and
  `transform_vector`, `transform_vector4` and `transform_position`.
- `junglecore.quat`: `Quat` with the Hamilton product, `from_axis_angle`,
  `create_rotation`, `rotate_vector`, `normalize`, `is_normalized` and
  `to_matrix`. Note that `Quat.identity()` returns a quaternion whose four
  components are all one; the default `Quat()` is the no-rotation quaternion.
- `junglecore.junglemath`: `create_model_matrix`, `create_view_matrix`,
  `create_projection_matrix`, `create_ortho_projection_matrix`,
  `create_rotation_matrix`, `rotate_vector`, `euler_to_quaternion`,
  `quaternion_to_euler`, `convert_v3_to_v4`, `rad_to_deg` and `deg_to_rad`.
- `junglecore.cstring`: `strcmp`, `strncmp`, `stricmp`, `strnicmp`,
  `strupr` and `strlwr`, with strings ending at the first NUL and ASCII-only
  case folding.
- `junglecore.fstring`: `equals`, `find` and `contains` with `SearchCase`
  and `SearchDir` options (`find` returns `INDEX_NONE`, -1, when there is no
  match), and `from_int`, `sanitize_float` and `to_float` for numbers
  written and read as single-precision floats.
- `junglecore.memory`: `AllocationTracker` hands out zeroed `bytearray`
  blocks and counts live bytes and blocks per `AllocationType`.
- `junglecore.names`: `Name` values interned in a `NamePool` by djb2 hash
  (`hash_string`, `hash_string_lower`). Names compare equal ignoring ASCII
  case and keep their original spelling; a name of `NAME_SIZE` (256)
  characters or more becomes the none name, shown as `"None"`.
- `junglecore.delegates`: `Delegate` holds one callable, `MulticastDelegate`
  any number, each under a `DelegateHandle`. Executing an unbound `Delegate`
  raises `UnboundDelegateError`.
- `junglecore.enums`: `ObjectType`, `ArrowDir`, `ControlMode`, `CoordiMode`,
  `PrimitiveColor` and `Icon` (icon font code points; `Icon.MOVE.char` gives
  the glyph).
- `junglecore.uobject`: `UObject`, whose every subclass automatically gets a
  `UClass` registered in `CLASS_REGISTRY`; `is_a`, `encode_uuid`,
  `duplicate`, and the functions `cast` and `cast_checked` (the latter
  raises `TypeError`).
- `junglecore.object_hash`: `ObjectHashTables` and `ObjectArray`, with the
  global helpers `add_to_class_map`, `remove_from_class_map`,
  `get_objects_of_class` and `object_range`.
- `junglecore.factory`: `gen_uuid`, `construct_object` (named
  `<Class>_<uuid>`) and `construct_object_from` (a shallow copy named
  `<Class>_Copy_<uuid>`); both register the new object in the global object
  array.

## Installation

```
pip install .
```

## Examples

```python
from junglecore.vector import Vector
from junglecore.junglemath import euler_to_quaternion, create_model_matrix

q = euler_to_quaternion(Vector(0.0, 0.0, 90.0))
print(q.rotate_vector(Vector(1.0, 0.0, 0.0)))  # close to (0, 1, 0)

model = create_model_matrix(Vector(1, 2, 3), Vector(0, 0, 0), Vector(1, 1, 1))
print(model.transform_position(Vector(0, 0, 0)))  # (1, 2, 3)
```

```python
from junglecore.delegates import MulticastDelegate

on_hit = MulticastDelegate()
handle = on_hit.add(lambda damage: print("hit for", damage))
on_hit.broadcast(10)
on_hit.remove(handle)
```

```python
from junglecore.names import Name

assert Name("Actor") == Name("actor")   # names compare without regard to case
print(Name("Actor").to_string())        # "Actor"
```

```python
from junglecore.uobject import UObject, cast
from junglecore.factory import construct_object
from junglecore.object_hash import object_range

class Actor(UObject):
    pass

class Light(Actor):
    pass

light = construct_object(Light)
print(light.name)                       # e.g. "Light_0"
assert cast(light, Actor) is light
assert light in list(object_range(Actor))
```

## What it does not do

This package is the core library only. It has no renderer, window, input
handling, editor, scene or actor types, and no saving or loading of objects;
there is no command to run.

## Running the tests

```
pip install .[test]
pytest
```