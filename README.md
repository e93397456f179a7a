# robloxtypes

Plain Python value types for the data found on Roblox instances: vectors,
colors, CFrames, UDims, sequences, BrickColors, referents, tags, physical
properties, shared strings, a tagged `Variant` that holds any of them, and
the packed binary attribute format.

The package has no dependencies outside the standard library.

## Installing

```
pip install robloxtypes
```

For running the test suite:

```
pip install "robloxtypes[test]"
pytest
```

## What is in it

- `robloxtypes.basic_types`: `Vector2`, `Vector3`, `Vector2int16`,
  `Vector3int16`, `Matrix3`, `CFrame`, `Color3`, `Color3uint8`, `Ray`,
  `Region3`, `Region3int16`, `Rect`, `UDim`, `UDim2`, `NumberRange`,
  `ColorSequence`, `ColorSequenceKeypoint`, `NumberSequence`,
  `NumberSequenceKeypoint` and `EnumValue`. All are frozen dataclasses that
  check their field types; integer fields are range-checked (16-bit, 8-bit,
  32-bit as the type requires). `Vector3.to_normal_id()` maps the six unit
  basis vectors to 0–5 and anything else to `None`. `Matrix3.identity()` and
  `Matrix3.transpose()` are provided, as are `Color3.from_uint8()` and
  `Color3uint8.from_color3()` (which clamps to 0..1 and rounds).
- `robloxtypes.flags`: `Axes` (`X`, `Y`, `Z`) and `Faces` (`RIGHT`, `TOP`,
  `BACK`, `LEFT`, `BOTTOM`, `FRONT`), immutable bit sets with `empty()`,
  `all()`, `contains()`, `bits()`, `from_bits()`, `|` and `&`.
- `robloxtypes.binary_data`: `BinaryString` (bytes, JSON form is base64) and
  `Content` (an asset URL string).
- `robloxtypes.brick_color`: `BrickColor`, an `Enum` of the legacy palette.
  Each member has `number`, `display_name`, `rgb` and `color`.
  `from_name()` and `from_number()` return `None` for unknown input; where
  two colors share a name (Lilac, Rust, Gold, Deep orange) `from_name()`
  returns the one with the lower number.
- `robloxtypes.referent`: `Ref`, a 128-bit referent. `Ref.new()` is random
  and non-null, `Ref.none()` is zero; `str()` gives 32 hex digits and
  `Ref.from_str()` parses them back.
- `robloxtypes.tags`: `Tags`, an ordered list of tag names with `push()`,
  and `decode()`/`encode()` for the NUL-separated byte form.
- `robloxtypes.physical_properties`: `PhysicalProperties` (either
  `PhysicalProperties.default()` or a `CustomPhysicalProperties`).
- `robloxtypes.shared_string`: `SharedString`, binary data deduplicated
  against every other live `SharedString` with the same contents, and its
  digest type `SharedStringHash`.
- `robloxtypes.variant`: `Variant` and `VariantType`. `Variant.from_value()`
  picks the type from the Python value (`int` becomes `Int64`, `float`
  `Float64`, `str` `String`, `None` an empty `OptionalCFrame`).
- `robloxtypes.attributes`: `Attributes`, a key-ordered map of names to
  `Variant`s that reads and writes the binary attribute format
  (`from_bytes`, `from_reader`, `to_bytes`, `to_writer`), plus
  `type_id_for()` and `variant_type_for()` for the format's type bytes.
- `robloxtypes.errors`: `RbxTypesError` and its subclass
  `AttributeFormatError`, raised for malformed or unsupported attribute data.

## JSON forms

Every value type above, and `Variant` and `Attributes`, has `to_json()` and
a `from_json()` class method that produce and accept plain JSON-compatible
Python values. Vectors, colors, UDims and ranges are lists; `CFrame`, `Ray`
and the sequences are objects; `Axes`/`Faces` are lists of names;
`BrickColor` is its number; `Ref` is its hex string; a `Variant` is
`{type_name: payload}`. `SharedString` has no JSON form, and a `Variant`
holding one raises `ValueError` from `to_json()`.

## Examples

```python
from robloxtypes.basic_types import Vector3, UDim, UDim2
from robloxtypes.flags import Axes
from robloxtypes.brick_color import BrickColor
from robloxtypes.referent import Ref

Vector3(1.0, 0.0, 0.0).to_normal_id()          # 0
UDim2(UDim(0.0, 30), UDim(1.0, 60)).to_json()  # [[0.0, 30], [1.0, 60]]
Axes.from_json(["X", "Z"]).bits()              # 5
BrickColor.from_name("Pastel brown")           # BrickColor.PASTEL_BROWN
str(Ref.none())                                # '00000000000000000000000000000000'
```

Reading and writing attributes:

```python
from robloxtypes.attributes import Attributes
from robloxtypes.variant import Variant

attrs = Attributes()
attrs.insert("Enabled", Variant.from_value(True))
blob = attrs.to_bytes()
assert Attributes.from_bytes(blob) == attrs
```

The attribute format stores only these value types: `BinaryString`, `Bool`,
`Float32`, `Float64`, `UDim`, `UDim2`, `BrickColor`, `Color3`, `Vector2`,
`Vector3`, `NumberSequence`, `ColorSequence`, `NumberRange` and `Rect`.
Writing any other type raises `AttributeFormatError`.

## What it does not do

This is a library of value types only. It does not read or write model or
place files, holds no instance tree, and provides no command-line tool.