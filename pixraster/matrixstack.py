"""A stack of transforms combined into one world matrix."""

from __future__ import annotations

from typing import Optional

from .mathhelper import inverse
from .matrix import Matrix4
from .vectors import Vector3


class MatrixStack:
    """Pushed matrices are pre-multiplied onto the combined transform; popping undoes the last one."""

    def __init__(self) -> None:
        self._matrices: list[Matrix4] = []
        self._transform = Matrix4.identity()

    @property
    def transform(self) -> Matrix4:
        """The combined transform of everything on the stack."""
        return self._transform

    def __len__(self) -> int:
        return len(self._matrices)

    def reset(self) -> None:
        """Empty the stack and reset the combined transform to identity."""
        self._matrices.clear()
        self._transform = Matrix4.identity()

    def _push(self, matrix: Matrix4) -> None:
        self._matrices.append(matrix)
        self._transform = matrix @ self._transform

    def push_translation(self, d: Vector3) -> None:
        """Push a translation by ``d``."""
        self._push(Matrix4.translation(d))

    def push_rotation_x(self, rad: float) -> None:
        """Push a rotation about the X axis."""
        self._push(Matrix4.rotation_x(rad))

    def push_rotation_y(self, rad: float) -> None:
        """Push a rotation about the Y axis."""
        self._push(Matrix4.rotation_y(rad))

    def push_rotation_z(self, rad: float) -> None:
        """Push a rotation about the Z axis."""
        self._push(Matrix4.rotation_z(rad))

    def push_scaling(self, s: Vector3) -> None:
        """Push a per-axis scaling."""
        self._push(Matrix4.scale(s))

    def pop(self) -> Optional[Matrix4]:
        """Remove the last pushed matrix and undo it; does nothing on an empty stack.

        Returns the removed matrix, or None when the stack was empty.
        """
        if not self._matrices:
            return None
        matrix = self._matrices.pop()
        self._transform = inverse(matrix) @ self._transform
        return matrix