"""Storage and upload formats for 2D textures."""

from __future__ import annotations

from dataclasses import dataclass

GL_NEAREST = 0x2600
GL_LINEAR = 0x2601
GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_RGB8 = 0x8051
GL_RGBA8 = 0x8058


@dataclass(frozen=True)
class TextureFormat:
    """How image data is stored on the GPU and how it is submitted."""

    internal_format: int
    pixel_format: int
    min_filter: int = GL_LINEAR
    mag_filter: int = GL_NEAREST


def texture_format_for_channels(channels: int) -> TextureFormat:
    """Format for an 8-bit image with ``channels`` channels.

    Four channels give RGBA; anything else is treated as RGB.
    """
    if channels == 4:
        return TextureFormat(GL_RGBA8, GL_RGBA)
    return TextureFormat(GL_RGB8, GL_RGB)