"""Multi-dimensional arrays in flat row-major storage with indexable views."""

from __future__ import annotations

from math import prod
from typing import Any, Sequence


class TensorView:
    """A window onto flat storage; indexing peels off the first dimension."""

    def __init__(
        self, data: list, shape: Sequence[int], strides: Sequence[int], offset: int = 0
    ) -> None:
        if len(shape) != len(strides) or not shape:
            raise ValueError("shape and strides must be non-empty and equally long")
        self.data = data
        self.shape = tuple(shape)
        self.strides = tuple(strides)
        self.offset = offset

    def _position(self, index: int) -> int:
        if not 0 <= index < self.shape[0]:
            raise IndexError(f"index {index} outside 0..{self.shape[0] - 1}")
        return self.offset + self.strides[0] * index

    def __getitem__(self, index: int):
        pos = self._position(index)
        if len(self.shape) == 1:
            return self.data[pos]
        return TensorView(self.data, self.shape[1:], self.strides[1:], pos)

    def __setitem__(self, index: int, value) -> None:
        if len(self.shape) != 1:
            raise TypeError("only one-dimensional views accept assignment")
        self.data[self._position(index)] = value


class Tensor:
    """A dense array of the given shape, filled with ``fill``."""

    def __init__(self, shape: Sequence[int], fill: Any = 0) -> None:
        if not shape or any(d < 0 for d in shape):
            raise ValueError("shape must be non-empty with non-negative sizes")
        self.shape = tuple(shape)
        strides = []
        length = 1
        for d in reversed(self.shape):
            strides.append(length)
            length *= d
        self.strides = tuple(reversed(strides))
        self.data = [fill] * prod(self.shape)

    def __len__(self) -> int:
        return self.shape[0]

    def view(self) -> TensorView:
        return TensorView(self.data, self.shape, self.strides)

    def copy(self) -> Tensor:
        result = Tensor(self.shape)
        result.data = list(self.data)
        return result

    def __getitem__(self, index: int):
        return self.view()[index]

    def __setitem__(self, index: int, value) -> None:
        self.view()[index] = value