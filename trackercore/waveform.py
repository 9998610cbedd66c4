"""Rendering of 16-bit sample data into an RGBA waveform canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

BACKGROUND = (0, 0, 0, 255)
WAVE_COLOUR = (255, 0, 0, 255)
DIAGONAL_COLOUR = (255, 255, 255, 255)

_SAMPLE_MIN = -32768
_SAMPLE_MAX = 32767
_FULL_SCALE = 32768.0


@dataclass
class Canvas:
    """A width x height grid of RGBA pixels stored row by row."""

    width: int
    height: int
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"canvas size {self.width}x{self.height} is empty")
        self.data = bytearray(self.width * self.height * 4)
        self.clear()

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return (y * self.width + x) * 4

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """The RGBA value at (x, y)."""
        offset = self._offset(x, y)
        return tuple(self.data[offset:offset + 4])  # type: ignore[return-value]

    def _set(self, x: int, y: int, colour: tuple[int, int, int, int]) -> None:
        offset = self._offset(x, y)
        self.data[offset:offset + 4] = bytes(colour)

    def clear(self) -> None:
        """Fill the whole canvas with opaque black."""
        self.data[:] = bytes(BACKGROUND) * (self.width * self.height)


def render_waveform(canvas: Canvas, samples: Sequence[int]) -> Canvas:
    """Draw ``samples`` across ``canvas`` and return it.

    The canvas is cleared first. Each column shows a red bar spanning the
    current sample and the previous one; a white diagonal runs from the top
    left to the bottom right. Samples must be signed 16-bit values.
    """
    for sample in samples:
        if not _SAMPLE_MIN <= sample <= _SAMPLE_MAX:
            raise ValueError(f"sample {sample} is outside the 16-bit range")

    canvas.clear()
    length = len(samples)
    if length == 0:
        return canvas

    width, height = canvas.width, canvas.height
    half = height // 2
    last_value = 0

    for x in range(width):
        index = int((length - 1) * x / width)
        value = samples[index]
        smaller, bigger = sorted((value, last_value))

        top = min(half - int(bigger * half / _FULL_SCALE), height - 1)
        bottom = min(half - int(smaller * half / _FULL_SCALE), height - 1)
        for y in range(top, bottom + 1):
            canvas._set(x, y, WAVE_COLOUR)

        diagonal = int(x / (width - 1) * (height - 1)) if width > 1 else 0
        canvas._set(x, diagonal, DIAGONAL_COLOUR)

        last_value = value

    return canvas