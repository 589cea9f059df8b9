import pytest

from scenegraph3d.gltypes import GL_FLOAT, GL_INT, ShaderDataType
from scenegraph3d.vertex_attributes import (
    LayoutElement,
    VertexAttribute,
    vertex_attributes,
)


def _layout():
    return [
        LayoutElement(ShaderDataType.FLOAT3, 3, 0),
        LayoutElement(ShaderDataType.FLOAT2, 2, 12, normalized=True),
        LayoutElement(ShaderDataType.INT, 1, 20),
    ]


def test_indices_are_consecutive():
    attrs = vertex_attributes(_layout(), 24)
    assert [a.index for a in attrs] == [0, 1, 2]


def test_fields_follow_elements():
    elements = _layout()
    attrs = vertex_attributes(elements, 24)
    for element, attr in zip(elements, attrs):
        assert attr.size == element.count
        assert attr.offset == element.offset
        assert attr.normalized == element.normalized
        assert attr.stride == 24


def test_gl_types():
    attrs = vertex_attributes(_layout(), 24)
    assert [a.gl_type for a in attrs] == [GL_FLOAT, GL_FLOAT, GL_INT]


def test_first_attribute():
    attrs = vertex_attributes(_layout(), 24)
    assert attrs[0] == VertexAttribute(0, 3, GL_FLOAT, False, 24, 0)


def test_empty_layout():
    assert vertex_attributes([], 0) == []


def test_negative_stride_rejected():
    with pytest.raises(ValueError):
        vertex_attributes(_layout(), -1)