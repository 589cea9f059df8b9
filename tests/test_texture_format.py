import pytest

from scenegraph3d.texture_format import (
    GL_LINEAR,
    GL_NEAREST,
    GL_RGB,
    GL_RGB8,
    GL_RGBA,
    GL_RGBA8,
    TextureFormat,
    texture_format_for_channels,
)


def test_internal_format_values_match_opengl():
    assert texture_format_for_channels(4).internal_format == 0x8058
    assert texture_format_for_channels(3).internal_format == 0x8051


def test_three_channels():
    fmt = texture_format_for_channels(3)
    assert fmt == TextureFormat(GL_RGB8, GL_RGB)


def test_four_channels():
    fmt = texture_format_for_channels(4)
    assert fmt.internal_format == GL_RGBA8
    assert fmt.pixel_format == GL_RGBA


@pytest.mark.parametrize("channels", [0, 1, 2, 5])
def test_other_channel_counts_default_to_rgb(channels):
    assert texture_format_for_channels(channels) == texture_format_for_channels(3)


def test_filters():
    fmt = texture_format_for_channels(4)
    assert fmt.min_filter == GL_LINEAR
    assert fmt.mag_filter == GL_NEAREST