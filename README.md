# scenegraph3d

Small, dependency-free helpers for 3D rendering code: frame timing,
component type names, and the values an OpenGL renderer needs for
vertex attributes, uniform blocks, textures and debug output.

## Modules

- `scenegraph3d.timing` — `FrameClock`, which tracks the time between
  frames (`update()`, `delta_time_ms`, `delta_time_seconds`,
  `time_since_begin`) and the time spent inside a frame
  (`frame_timer_elapsed()`). It reads a clock returning integer
  nanoseconds, `time.perf_counter_ns` by default, and works at
  microsecond resolution; times are reported in milliseconds.
- `scenegraph3d.componenttype` — the `ComponentType` enum (`CAMERA`,
  `LIGHT`, `RENDERER`) with `component_type_to_string`, which returns
  `"Unknown"` for values outside the enum, and
  `component_type_from_string`, which returns `None` for unknown names.
- `scenegraph3d.gltypes` — the `ShaderDataType` enum and
  `shader_data_type_gl_enum`, giving `GL_FLOAT`, `GL_INT` or `GL_BOOL`
  for each type (float for anything unknown).
- `scenegraph3d.vertex_attributes` — `LayoutElement` (type, component
  count, byte offset, normalized flag) and `vertex_attributes(elements,
  stride)`, which returns one `VertexAttribute` per element at indices
  0, 1, 2, ...
- `scenegraph3d.uniform_layout` — `std140_layout(members)`, which takes
  member names with byte sizes, in order (a mapping or a sequence of
  pairs), packs them into 16-byte rows and returns a `UniformLayout`
  with `offsets`, `sizes` and `total_size`. A negative size raises
  `ValueError`.
- `scenegraph3d.texture_format` — `texture_format_for_channels(channels)`,
  returning a `TextureFormat`: RGBA8/RGBA for four channels, RGB8/RGB
  otherwise, with linear minification and nearest magnification filters.
- `scenegraph3d.gldebug` — `describe_debug_message` turns the raw
  source, type and severity values of a GL debug callback into a
  `DebugMessage` with readable names (unknown values read `"Other"`);
  `log_debug_message` also logs it, as an error for error messages and
  as a warning otherwise, to the given `logging.Logger` or to the
  module's own logger.

## Installation

```
pip install .
```

## Examples

Uniform block layout:

```python
from scenegraph3d.uniform_layout import std140_layout

layout = std140_layout([("color", 16), ("scale", 4)])
print(layout.offsets)     # {'color': 0, 'scale': 16}
print(layout.total_size)  # 32
```

Vertex attributes for an interleaved position + texture coordinate layout:

```python
from scenegraph3d.gltypes import ShaderDataType
from scenegraph3d.vertex_attributes import LayoutElement, vertex_attributes

elements = [
    LayoutElement(ShaderDataType.FLOAT3, 3, 0),
    LayoutElement(ShaderDataType.FLOAT2, 2, 12),
]
for attribute in vertex_attributes(elements, stride=20):
    print(attribute.index, attribute.size, hex(attribute.gl_type), attribute.offset)
```

Frame timing:

```python
from scenegraph3d.timing import FrameClock

clock = FrameClock()
clock.init()
# once per frame:
clock.update()
print(clock.delta_time_ms, clock.time_since_begin)
```

## What this package does not do

It does not open a window, create a GL context or make any GL calls;
it only computes the values a renderer passes to them. It has no scene
objects, cameras, lights, transform or matrix math, asset loading or
main loop.

## Running the tests

```
pip install .[test]
pytest
```