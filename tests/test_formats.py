import pytest

from gpualign.formats import (
    DxgiFormat,
    is_block_compression_format,
    is_depth_format,
    is_multi_planar_format,
    texture_bits_per_unit,
)

DEPTH = {
    DxgiFormat.D32_FLOAT_S8X24_UINT,
    DxgiFormat.D32_FLOAT,
    DxgiFormat.D24_UNORM_S8_UINT,
    DxgiFormat.D16_UNORM,
}


@pytest.mark.parametrize("fmt", list(DxgiFormat))
def test_depth_formats_are_exactly_the_d_formats(fmt):
    assert is_depth_format(fmt) == (fmt in DEPTH)


def test_multi_planar_formats():
    planar = {f for f in DxgiFormat if is_multi_planar_format(f)}
    assert planar == {
        DxgiFormat.D32_FLOAT_S8X24_UINT,
        DxgiFormat.D24_UNORM_S8_UINT,
        DxgiFormat.NV12,
    }


@pytest.mark.parametrize("fmt", list(DxgiFormat))
def test_block_compression_matches_bc_names(fmt):
    assert is_block_compression_format(fmt) == fmt.name.startswith("BC")


def test_block_compression_accepts_plain_ints():
    assert is_block_compression_format(int(DxgiFormat.BC7_UNORM))
    assert not is_block_compression_format(int(DxgiFormat.B5G6R5_UNORM))


def test_known_bits_per_unit():
    assert texture_bits_per_unit(DxgiFormat.R32G32B32A32_FLOAT) == 128
    assert texture_bits_per_unit(DxgiFormat.R32G32B32_FLOAT) == 96
    assert texture_bits_per_unit(DxgiFormat.R8G8B8A8_UNORM) == 32
    assert texture_bits_per_unit(DxgiFormat.NV12) == 12
    assert texture_bits_per_unit(DxgiFormat.R1_UNORM) == 1
    assert texture_bits_per_unit(DxgiFormat.BC1_UNORM) == 4


def test_unknown_formats_have_no_bits():
    assert texture_bits_per_unit(DxgiFormat.UNKNOWN) == 0
    assert texture_bits_per_unit(DxgiFormat.YUY2) == 0
    assert texture_bits_per_unit(12345) == 0


def test_plain_int_lookup_matches_enum():
    fmt = DxgiFormat.R16G16_FLOAT
    assert texture_bits_per_unit(int(fmt)) == texture_bits_per_unit(fmt)


@pytest.mark.parametrize("fmt", sorted(DEPTH))
def test_depth_formats_have_bits(fmt):
    assert texture_bits_per_unit(fmt) > 0


def test_typeless_variants_share_bits():
    pairs = [
        (DxgiFormat.R8G8B8A8_TYPELESS, DxgiFormat.R8G8B8A8_UNORM_SRGB),
        (DxgiFormat.R16_TYPELESS, DxgiFormat.D16_UNORM),
        (DxgiFormat.R32G8X24_TYPELESS, DxgiFormat.D32_FLOAT_S8X24_UINT),
        (DxgiFormat.BC7_TYPELESS, DxgiFormat.BC7_UNORM),
    ]
    for a, b in pairs:
        assert texture_bits_per_unit(a) == texture_bits_per_unit(b)


def test_all_block_compressed_formats_have_bits():
    for fmt in DxgiFormat:
        if is_block_compression_format(fmt):
            assert texture_bits_per_unit(fmt) in (4, 8)