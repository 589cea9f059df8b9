"""Kinds of component that can be attached to a scene object."""

from __future__ import annotations

from enum import IntEnum


class ComponentType(IntEnum):
    CAMERA = 0
    LIGHT = 1
    RENDERER = 2


_NAMES = {
    ComponentType.CAMERA: "Camera",
    ComponentType.LIGHT: "Light",
    ComponentType.RENDERER: "Renderer",
}

_BY_NAME = {name: kind for kind, name in _NAMES.items()}


def component_type_to_string(data: ComponentType | int) -> str:
    """Display name of a component type, or ``"Unknown"`` for other values."""
    try:
        return _NAMES[ComponentType(data)]
    except (ValueError, KeyError):
        return "Unknown"


def component_type_from_string(data: str) -> ComponentType | None:
    """Component type with the given display name, or None if there is none."""
    return _BY_NAME.get(data)