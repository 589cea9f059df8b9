"""Decoding and logging of OpenGL debug-output messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

_log = logging.getLogger(__name__)


class DebugSource(IntEnum):
    API = 0x8246
    WINDOW_SYSTEM = 0x8247
    SHADER_COMPILER = 0x8248
    THIRD_PARTY = 0x8249
    APPLICATION = 0x824A
    OTHER = 0x824B


class DebugType(IntEnum):
    ERROR = 0x824C
    DEPRECATED_BEHAVIOR = 0x824D
    UNDEFINED_BEHAVIOR = 0x824E
    PORTABILITY = 0x824F
    PERFORMANCE = 0x8250
    OTHER = 0x8251


class DebugSeverity(IntEnum):
    HIGH = 0x9146
    MEDIUM = 0x9147
    LOW = 0x9148
    NOTIFICATION = 0x826B


_SOURCE_NAMES = {
    DebugSource.API: "OpenGL",
    DebugSource.WINDOW_SYSTEM: "Windows",
    DebugSource.SHADER_COMPILER: "Shader Compiler",
    DebugSource.THIRD_PARTY: "Third Party",
    DebugSource.APPLICATION: "Application",
}

_TYPE_NAMES = {
    DebugType.ERROR: "Error",
    DebugType.DEPRECATED_BEHAVIOR: "Deprecated Behavior",
    DebugType.UNDEFINED_BEHAVIOR: "Undefined Behavior",
    DebugType.PORTABILITY: "Portability",
    DebugType.PERFORMANCE: "Performance",
}

_SEVERITY_NAMES = {
    DebugSeverity.HIGH: "High",
    DebugSeverity.MEDIUM: "Medium",
    DebugSeverity.LOW: "Low",
}


@dataclass(frozen=True)
class DebugMessage:
    """A debug message with its source, type and severity spelled out."""

    source: str
    message_type: str
    severity: str
    message: str
    is_error: bool = False

    def format(self) -> str:
        return (
            f"[GLErrorCallback][{self.source}][{self.message_type}]"
            f"[{self.severity}] {self.message}"
        )

    def __str__(self) -> str:
        return self.format()


def describe_debug_message(
    source: int, message_type: int, severity: int, message: str
) -> DebugMessage:
    """Turn raw debug-callback values into readable names; unknown values read "Other"."""
    return DebugMessage(
        source=_SOURCE_NAMES.get(source, "Other"),
        message_type=_TYPE_NAMES.get(message_type, "Other"),
        severity=_SEVERITY_NAMES.get(severity, "Other"),
        message=message,
        is_error=message_type == DebugType.ERROR,
    )


def log_debug_message(
    source: int,
    message_type: int,
    severity: int,
    message: str,
    logger: Optional[logging.Logger] = None,
) -> DebugMessage:
    """Log a debug message as an error if it reports one, otherwise as a warning."""
    described = describe_debug_message(source, message_type, severity, message)
    target = logger if logger is not None else _log
    if described.is_error:
        target.error(described.format())
    else:
        target.warning(described.format())
    return described