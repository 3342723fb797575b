"""RenderBuffer - Fixed-size monochrome pixel buffer."""

import numpy as np


class RenderBuffer:
    """Fixed-size 1-bit pixel buffer using numpy."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # Shape: (height, width), 0=background, 1=foreground
        self.data = np.zeros((height, width), dtype=np.uint8)

    def set_pixel(self, x: int, y: int, on: bool = True):
        """Set pixel at (x, y). Out-of-bounds writes are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.data[y, x] = 1 if on else 0

    def get_pixel(self, x: int, y: int) -> bool:
        """Get pixel at (x, y). Out of bounds reads as background."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return bool(self.data[y, x])
        return False

    def to_text(self, on: str = "█", off: str = " ") -> str:
        """Render the buffer as lines of characters, one per pixel."""
        return "\n".join(
            "".join(on if pixel else off for pixel in row)
            for row in self.data
        )
