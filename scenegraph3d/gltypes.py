"""Shader data types and the OpenGL component types they are sent as."""

from __future__ import annotations

from enum import Enum

GL_INT = 0x1404
GL_FLOAT = 0x1406
GL_BOOL = 0x8B56


class ShaderDataType(Enum):
    NONE = "None"
    BOOL = "Bool"
    FLOAT = "Float"
    FLOAT2 = "Float2"
    FLOAT3 = "Float3"
    FLOAT4 = "Float4"
    MATRIX3X3 = "Matrix3x3"
    MATRIX4X4 = "Matrix4x4"
    INT = "Int"
    INT2 = "Int2"
    INT3 = "Int3"
    INT4 = "Int4"


_GL_ENUMS = {
    ShaderDataType.NONE: GL_FLOAT,
    ShaderDataType.BOOL: GL_BOOL,
    ShaderDataType.FLOAT: GL_FLOAT,
    ShaderDataType.FLOAT2: GL_FLOAT,
    ShaderDataType.FLOAT3: GL_FLOAT,
    ShaderDataType.FLOAT4: GL_FLOAT,
    ShaderDataType.MATRIX3X3: GL_FLOAT,
    ShaderDataType.MATRIX4X4: GL_FLOAT,
    ShaderDataType.INT: GL_INT,
    ShaderDataType.INT2: GL_INT,
    ShaderDataType.INT3: GL_INT,
    ShaderDataType.INT4: GL_INT,
}


def shader_data_type_gl_enum(data_type: ShaderDataType) -> int:
    """OpenGL component type for ``data_type``; unknown values fall back to float."""
    return _GL_ENUMS.get(data_type, GL_FLOAT)