from typing import Iterable, Tuple

import numpy as np

from models.point import Point


class Viewport:
    """
    Maps y-up world coordinates onto an image of a given size.

    The world bounding box is padded and stretched to fill the image; the
    y-axis is flipped so that larger y is drawn higher up.
    """

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.min_x: float = 0.0
        self.min_y: float = 0.0
        self.max_x: float = 1.0
        self.max_y: float = 1.0

    def fit_points(self, pts: Iterable[Point], padding: float = 20.0) -> "Viewport":
        xy = np.array([(p.x, p.y) for p in pts], dtype=float)
        if xy.size == 0:
            self.min_x, self.min_y, self.max_x, self.max_y = 0.0, 0.0, 1.0, 1.0
            return self

        min_x, min_y = xy.min(axis=0)
        max_x, max_y = xy.max(axis=0)

        # Ensure non-zero dimensions
        if max_x - min_x < 1e-9:
            min_x -= 0.5
            max_x += 0.5
        if max_y - min_y < 1e-9:
            min_y -= 0.5
            max_y += 0.5

        self.min_x = float(min_x) - padding
        self.min_y = float(min_y) - padding
        self.max_x = float(max_x) + padding
        self.max_y = float(max_y) + padding
        return self

    def to_pixel(self, p: Point) -> Tuple[int, int]:
        wx = (p.x - self.min_x) / (self.max_x - self.min_x)
        wy = (p.y - self.min_y) / (self.max_y - self.min_y)
        return (int(round(wx * (self.width - 1))), int(round((1 - wy) * (self.height - 1))))

    def blank(self, color) -> np.ndarray:
        """New BGR image of the viewport size filled with color."""
        image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        image[:, :] = color
        return image
