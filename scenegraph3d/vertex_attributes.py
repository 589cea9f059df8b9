"""Vertex attribute pointers derived from an input layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from scenegraph3d.gltypes import ShaderDataType, shader_data_type_gl_enum


@dataclass(frozen=True)
class LayoutElement:
    """One attribute of an interleaved vertex: its type, component count and byte offset."""

    data_type: ShaderDataType
    count: int
    offset: int
    normalized: bool = False


@dataclass(frozen=True)
class VertexAttribute:
    """Arguments for enabling and pointing one vertex attribute."""

    index: int
    size: int
    gl_type: int
    normalized: bool
    stride: int
    offset: int


def vertex_attributes(
    elements: Iterable[LayoutElement], stride: int
) -> list[VertexAttribute]:
    """Attribute pointers for ``elements`` at consecutive indices from 0."""
    if stride < 0:
        raise ValueError("stride must not be negative")
    return [
        VertexAttribute(
            index=index,
            size=element.count,
            gl_type=shader_data_type_gl_enum(element.data_type),
            normalized=bool(element.normalized),
            stride=stride,
            offset=element.offset,
        )
        for index, element in enumerate(elements)
    ]