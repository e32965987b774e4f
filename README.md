# dcspec

Building blocks for displays that are described in XML: typed variables,
string substitution in specification files, formatted text, and the
geometry behind the drawable primitives.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `dcspec.values`: the `Value` interface, `Constant` values parsed from
  text, the `ValueKind` and `Comparison` enums, and the
  `string_to_decimal`, `string_to_integer` and `string_to_boolean`
  conversions.
- `dcspec.variables`: typed `Variable` objects (decimal, integer or string)
  held in a `VariableRegistry`. Labels that start with `@` name variables;
  anything else is read as a constant through `get_value`. Module-level
  `register_variable`, `get_variable`, `create_virtual_variable` and
  `get_value` work on a shared default registry.
- `dcspec.kolor`: `Kolor`, an RGBA colour whose channels may be constants
  or variables, set from numbers or from a string such as `"1 0.5 @level"`.
- `dcspec.xmlutils`: reading specification files (`open_xml_file`, which
  also expands XIncludes and raises `XmlFileError` on failure) and
  inspecting their elements (`get_attribute`, `get_content`, `node_type`,
  `node_valid`, `node_check`).
- `dcspec.xmlsub`: `Substitutions`, which expands `#name` / `#{name}`
  arguments and constants and `$NAME` / `${NAME}` environment variables,
  and resolves attributes through an element, its Style, then Defaults.
- `dcspec.report`: `ReportLog`, which writes an XML summary of the
  communication, window, panel, variable, function and string elements it
  is shown, and `escape_xml`.
- `dcspec.setvalue`: `SetValue`, assignment with `=`, `+=` or `-=` and an
  optional minimum and maximum.
- `dcspec.textformat`: `FormattedString`, text with embedded `@name`,
  `@{name}` and `@name(format)` references rendered with printf-style
  formats, plus `c_format` and `split_lines`.
- `dcspec.vertex`: `Vertex`, a point measured from a chosen container edge.
- `dcspec.shapes`: `point_in_polygon`, `point_in_rectangle` (with
  rotation), `rectangle_outline`, and `ShapeStyle` for fill and line
  settings.
- `dcspec.maptexture`: `UpsProjection` and `UtmProjection`, which turn
  latitude and longitude into positions on a map texture, plus
  `ups_unit_xy` and `trajectory_angle`.

## Example

```python
from dcspec.variables import VariableRegistry
from dcspec.setvalue import SetValue
from dcspec.textformat import FormattedString

registry = VariableRegistry()
registry.register("@speed", "Decimal", "12.5")

step = SetValue(registry, "@speed", "2.5")
step.set_operator("+=")
step.set_range("0", "14")
step.update_data()

text = FormattedString(registry)
text.set_string("Speed: @speed(%.1f) m/s")
print(text.render())   # Speed: 14.0 m/s
```

## What this package does not do

It is a library of parts, not a display application. It has no command,
opens no window and draws nothing: shapes, text and map textures are
reduced to their values, hit tests and coordinates. It does not walk a
whole specification file to build a display tree, load display logic
plug-ins, or talk to simulation, network or hardware devices.