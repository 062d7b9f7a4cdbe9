"""Pixel buffer with an optional depth buffer."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_DEPTH = 1e9


class RasterBuffer:
    """Row-major 8-bit pixels with 1 (gray), 3 (RGB) or 4 (RGBA) channels."""

    def __init__(
        self,
        width: int,
        height: int,
        channels: int = 1,
        clear: int = 0,
        enable_depth: bool = False,
    ) -> None:
        if width <= 0 or height <= 0 or channels not in (1, 3, 4):
            raise ValueError("RasterBuffer: invalid dimensions or channels")
        self.width = width
        self.height = height
        self.channels = channels
        self.data = bytearray([clear]) * (width * height * channels)
        self.depth: list[float] = [DEFAULT_DEPTH] * (width * height) if enable_depth else []

    def has_depth(self) -> bool:
        return bool(self.depth)

    def clear_depth(self, value: float = DEFAULT_DEPTH) -> None:
        if self.has_depth():
            self.depth = [value] * len(self.depth)

    def clear(self, value: int = 0) -> None:
        """Set every channel of every pixel to ``value``."""
        self.data = bytearray([value]) * len(self.data)

    def test_and_set_depth(self, x: int, y: int, z: float) -> bool:
        """Record ``z`` if it is nearer than the stored depth; True when visible."""
        if not self.has_depth() or not self.in_bounds(x, y):
            return True
        idx = y * self.width + x
        if z < self.depth[idx]:
            self.depth[idx] = z
            return True
        return False

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, r: int, g: int = 0, b: int = 0, a: int = 255) -> None:
        """Write a pixel; out-of-bounds writes are ignored."""
        if not self.in_bounds(x, y):
            return
        idx = (y * self.width + x) * self.channels
        if self.channels == 1:
            self.data[idx] = r
        elif self.channels == 3:
            self.data[idx:idx + 3] = bytes((r, g, b))
        else:
            self.data[idx:idx + 4] = bytes((r, g, b, a))

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return ``(r, g, b, a)``; gray expands to all three colours."""
        if not self.in_bounds(x, y):
            return (0, 0, 0, 255)
        idx = (y * self.width + x) * self.channels
        if self.channels == 1:
            v = self.data[idx]
            return (v, v, v, 255)
        if self.channels == 3:
            r, g, b = self.data[idx:idx + 3]
            return (r, g, b, 255)
        r, g, b, a = self.data[idx:idx + 4]
        return (r, g, b, a)

    def to_ppm(self) -> bytes:
        """Encode as binary PPM (P6); alpha is dropped."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        if self.channels == 3:
            return header + bytes(self.data)
        rgb = bytearray(3 * self.width * self.height)
        step = self.channels
        if step == 1:
            rgb[0::3] = self.data
            rgb[1::3] = self.data
            rgb[2::3] = self.data
        else:
            rgb[0::3] = self.data[0::step]
            rgb[1::3] = self.data[1::step]
            rgb[2::3] = self.data[2::step]
        return header + bytes(rgb)

    def save_ppm(self, path: str | os.PathLike[str]) -> None:
        Path(path).write_bytes(self.to_ppm())