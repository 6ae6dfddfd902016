# circle.py

import logging
import numpy as np

logger = logging.getLogger("circle_sim")

class Circle:
    """
    Represents a single moving circle.

    Data Contract:
    - Inputs:
        - color (tuple): RGBA fill color. Fixed for the circle's lifetime.
        - radius (float): Positive radius in pixels. Fixed for the circle's lifetime.
        - position (np.ndarray): Center (x, y), shape (2,).
        - velocity (np.ndarray): Pixels per frame (vx, vy), shape (2,).
    - Invariants:
        - color and radius are read-only.
        - |velocity| never changes; a bounce only flips the sign of a component.
    """
    def __init__(self, color: tuple, radius: float, position: np.ndarray, velocity: np.ndarray):
        self._color = tuple(color)
        self._radius = float(radius)
        self.position = np.array(position, dtype=float)
        self.velocity = np.array(velocity, dtype=float)

        logger.debug(f"Circle created: radius={self._radius:.1f}, pos={self.position}, vel={self.velocity}")

    @property
    def color(self):
        return self._color

    @property
    def radius(self):
        return self._radius

    @property
    def speed(self):
        """Magnitude of the velocity vector."""
        return float(np.hypot(self.velocity[0], self.velocity[1]))

    def check_bounce(self, width: float, height: float):
        """
        Reflects velocity components for walls the circle has reached while
        still moving outward. Each axis is tested on its own.

        Must run on the position from before this frame's update(), so a circle
        may overshoot a wall by up to one step before it turns around. The
        position is never corrected.

        - Inputs:
            - width (float): The width of the viewport.
            - height (float): The height of the viewport.
        """
        x, y = self.position
        vx, vy = self.velocity

        if (x + self._radius > width and vx > 0) or (x - self._radius < 0 and vx < 0):
            self.velocity[0] = -vx
        if (y + self._radius > height and vy > 0) or (y - self._radius < 0 and vy < 0):
            self.velocity[1] = -vy

    def update(self):
        """
        Advances the circle by one frame.
        p_new = p_old + v
        """
        self.position += self.velocity

    def __repr__(self):
        return (
            f"Circle(radius={self._radius:.2f}, "
            f"position=({self.position[0]:.2f}, {self.position[1]:.2f}), "
            f"velocity=({self.velocity[0]:.2f}, {self.velocity[1]:.2f}))"
        )
