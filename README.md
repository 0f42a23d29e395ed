# gpualign

Rules for working out how GPU texture and buffer resources can be placed in
memory: texel sizes of formats, "small" (4 KB) tile shapes, whether a resource
may use the small placement alignment, and which memory segment group a heap
type prefers.

The package has no dependencies beyond the standard library.

## Install

```
pip install gpualign
```

## Formats

`gpualign.formats` holds the `DxgiFormat` enumeration (an `IntEnum`) and
questions about it:

```python
from gpualign.formats import (
    DxgiFormat,
    is_block_compression_format,
    is_depth_format,
    is_multi_planar_format,
    texture_bits_per_unit,
)

texture_bits_per_unit(DxgiFormat.R8G8B8A8_UNORM)     # 32
texture_bits_per_unit(DxgiFormat.NV12)               # 12
texture_bits_per_unit(DxgiFormat.BC1_UNORM)          # 4 (per texel block)
is_depth_format(DxgiFormat.D32_FLOAT)                # True
is_multi_planar_format(DxgiFormat.D24_UNORM_S8_UINT) # True
is_block_compression_format(DxgiFormat.BC7_UNORM)    # True
```

Formats with no known size (for example `DxgiFormat.UNKNOWN`) report `0` bits
per unit. The functions accept plain integers as well as `DxgiFormat` members.

## Tiles and small alignment

`gpualign.tiles` describes resources with `ResourceDesc`, `SampleDesc` and
`ResourceDimension`, and tile shapes with `TileShape`. All of these are
immutable; `SMALL_RESOURCE_PLACEMENT_ALIGNMENT` is 4096.

```python
from gpualign.formats import DxgiFormat
from gpualign.tiles import (
    ResourceDesc,
    ResourceDimension,
    SampleDesc,
    is_allowed_to_use_small_alignment,
    small_texture_tile,
    tile_count,
)

tile = small_texture_tile(DxgiFormat.R8G8B8A8_UNORM, ResourceDimension.TEXTURE2D, 1)
# TileShape(width=32, height=32, depth=1)

desc = ResourceDesc(
    dimension=ResourceDimension.TEXTURE2D,
    width=128,
    height=128,
    format=DxgiFormat.R8G8B8A8_UNORM,
)
tile_count(desc, tile)                  # 16
is_allowed_to_use_small_alignment(desc) # True

msaa = ResourceDesc(
    dimension=ResourceDimension.TEXTURE2D,
    width=1,
    height=1,
    format=DxgiFormat.R8G8B8A8_UNORM,
    sample_desc=SampleDesc(count=4),
)
small_texture_tile(msaa.format, msaa.dimension, msaa.sample_desc.count)
# TileShape(width=16, height=16, depth=1)
```

Small tiles are given for 1D, 2D and 3D textures. 2D textures with
block-compressed formats, unsupported bit depths or sample counts other than
1, 2, 4, 8 or 16 get none, and neither do buffers. When no tile applies,
`small_texture_tile` returns a zero-sized `TileShape` (`tile.is_zero_sized()`
is true).

A resource may use the small alignment when its format is not multi-planar,
a small tile exists for its format, dimension and sample count, and it covers
at most 16 such tiles. `tile_count` raises `ValueError` if the tile has a zero
or negative extent.

## Memory segment groups

`gpualign.memory` chooses between local and non-local memory for a heap type.
Any object with a `custom_heap_properties(node_mask, heap_type)` method that
returns `HeapProperties` can stand in for the device (see the
`HeapPropertiesSource` protocol):

```python
from gpualign.memory import (
    HeapProperties,
    HeapType,
    MemoryPool,
    MemorySegmentGroup,
    preferred_memory_segment_group,
)

class Device:
    def custom_heap_properties(self, node_mask, heap_type):
        pool = MemoryPool.L1 if heap_type is HeapType.DEFAULT else MemoryPool.L0
        return HeapProperties(memory_pool_preference=pool)

preferred_memory_segment_group(Device(), False, HeapType.DEFAULT)
# MemorySegmentGroup.LOCAL
preferred_memory_segment_group(Device(), False, HeapType.UPLOAD)
# MemorySegmentGroup.NON_LOCAL
```

On a unified-memory adapter (`is_uma=True`) the answer is always
`MemorySegmentGroup.LOCAL` and the device is not asked.

## What this package does not do

It only answers questions about formats, tiles and memory segments. It does
not allocate memory, create heaps or resources, talk to a graphics device, or
track budgets or residency; those are left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```