"""Small-tile shapes and the test for small (4 KB) resource placement alignment."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .formats import (
    DxgiFormat,
    is_block_compression_format,
    is_multi_planar_format,
    texture_bits_per_unit,
)

__all__ = [
    "SMALL_RESOURCE_PLACEMENT_ALIGNMENT",
    "ResourceDimension",
    "TileShape",
    "SampleDesc",
    "ResourceDesc",
    "tile_count",
    "small_texture_tile",
    "is_allowed_to_use_small_alignment",
]

SMALL_RESOURCE_PLACEMENT_ALIGNMENT = 4096

# Most small tiles a resource may be split into and still use small alignment.
_MAX_SMALL_TILES = 16


class ResourceDimension(IntEnum):
    UNKNOWN = 0
    BUFFER = 1
    TEXTURE1D = 2
    TEXTURE2D = 3
    TEXTURE3D = 4


@dataclass(frozen=True)
class TileShape:
    """Tile extent in texels; all zeros means no tile."""

    width: int = 0
    height: int = 0
    depth: int = 0

    def is_zero_sized(self) -> bool:
        return self.width == 0 and self.height == 0 and self.depth == 0


@dataclass(frozen=True)
class SampleDesc:
    count: int = 1
    quality: int = 0


@dataclass(frozen=True)
class ResourceDesc:
    """The parts of a resource description that placement depends on."""

    dimension: ResourceDimension
    width: int
    height: int = 1
    depth_or_array_size: int = 1
    format: DxgiFormat = DxgiFormat.UNKNOWN
    sample_desc: SampleDesc = field(default_factory=SampleDesc)


_NO_TILE = TileShape()

_TILES_2D = {
    8: (64, 64),
    16: (64, 32),
    32: (32, 32),
    64: (32, 16),
    128: (16, 16),
}

# Divisors of width and height for each multisample count.
_SAMPLE_DIVISORS = {
    1: (1, 1),
    2: (2, 1),
    4: (2, 2),
    8: (4, 2),
    16: (4, 4),
}

_TILES_3D = {
    8: TileShape(16, 16, 16),
    16: TileShape(16, 16, 8),
    32: TileShape(16, 8, 8),
    64: TileShape(8, 8, 8),
    128: TileShape(8, 8, 4),
}


def _tiles_along(extent: int, tile_extent: int) -> int:
    return -(-extent // tile_extent)


def tile_count(desc: ResourceDesc, tile: TileShape) -> int:
    """Number of tiles of the given shape needed to cover the resource."""
    if tile.width <= 0 or tile.height <= 0 or tile.depth <= 0:
        raise ValueError(f"tile has a zero or negative extent: {tile}")
    return (
        _tiles_along(desc.width, tile.width)
        * _tiles_along(desc.height, tile.height)
        * _tiles_along(desc.depth_or_array_size, tile.depth)
    )


def _small_tile_2d(format: int, bits: int, sample_count: int) -> TileShape:
    # Compressed 4x4 blocks are not given small tiles.
    if is_block_compression_format(format):
        return _NO_TILE
    extent = _TILES_2D.get(bits)
    divisors = _SAMPLE_DIVISORS.get(sample_count)
    if extent is None or divisors is None:
        return _NO_TILE
    return TileShape(extent[0] // divisors[0], extent[1] // divisors[1], 1)


def small_texture_tile(format: int, dimension: ResourceDimension, sample_count: int) -> TileShape:
    """Return the 4 KB tile for a texture, or a zero-sized tile if none applies."""
    bits = texture_bits_per_unit(format)
    if bits == 0:
        return _NO_TILE
    if dimension == ResourceDimension.TEXTURE1D:
        return TileShape((SMALL_RESOURCE_PLACEMENT_ALIGNMENT * 8) // bits, 1, 1)
    if dimension == ResourceDimension.TEXTURE2D:
        return _small_tile_2d(format, bits, sample_count)
    if dimension == ResourceDimension.TEXTURE3D:
        return _TILES_3D.get(bits, _NO_TILE)
    return _NO_TILE


def is_allowed_to_use_small_alignment(desc: ResourceDesc) -> bool:
    """Return True if the resource fits in few enough small tiles for 4 KB alignment."""
    # No hardware supports multi-planar depth or video with small alignment.
    if is_multi_planar_format(desc.format):
        return False
    tile = small_texture_tile(desc.format, desc.dimension, desc.sample_desc.count)
    if tile.is_zero_sized():
        return False
    return tile_count(desc, tile) <= _MAX_SMALL_TILES