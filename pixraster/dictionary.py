"""The table of script commands, looked up by keyword."""

from __future__ import annotations

from typing import Iterator, Optional

from .commands import (
    AddVertex,
    BeginDraw,
    Command,
    DrawPixel,
    EndDraw,
    PopMatrix,
    PushRotationX,
    PushRotationY,
    PushRotationZ,
    PushScaling,
    PushTranslation,
    SetCameraDirection,
    SetCameraFar,
    SetCameraFov,
    SetCameraNear,
    SetCameraPosition,
    SetClipping,
    SetColor,
    SetFillMode,
    SetResolution,
    VarFloat,
)

_DEFAULT_COMMANDS: tuple[type[Command], ...] = (
    # Settings
    SetResolution,
    # Variables
    VarFloat,
    # Rasterisation
    DrawPixel,
    SetColor,
    SetFillMode,
    # Primitives
    BeginDraw,
    EndDraw,
    AddVertex,
    # Clipping
    SetClipping,
    # Matrices
    PushTranslation,
    PushRotationX,
    PushRotationY,
    PushRotationZ,
    PushScaling,
    PopMatrix,
    # Camera
    SetCameraPosition,
    SetCameraDirection,
    SetCameraNear,
    SetCameraFar,
    SetCameraFov,
)


class CommandDictionary:
    """Maps case-sensitive keywords to command objects."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Add a command under its name; a name already taken raises ValueError."""
        if command.name in self._commands:
            raise ValueError(f"command already registered: {command.name!r}")
        self._commands[command.name] = command

    def lookup(self, keyword: str) -> Optional[Command]:
        """Return the command for ``keyword``, or None when there is none."""
        return self._commands.get(keyword)

    def names(self) -> list[str]:
        """All registered keywords in sorted order."""
        return sorted(self._commands)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return (self._commands[name] for name in self.names())


def default_dictionary() -> CommandDictionary:
    """Return a dictionary holding every built-in command."""
    dictionary = CommandDictionary()
    for command_type in _DEFAULT_COMMANDS:
        dictionary.register(command_type())
    return dictionary